"""Roost CLI — serve a single-page app build, or check paths against its routes.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import logging
import sys

from roost.app import App
from roost.config import AppConfig
from roost.errors import ConfigurationError


def _add_route_source(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--routes",
        default=None,
        help="Routes file: JSON array or one pattern per line (default: $ROOST_ROUTES_FILE)",
    )


def _load_config(args: argparse.Namespace) -> AppConfig:
    overrides = {
        "host": getattr(args, "host", None),
        "port": getattr(args, "port", None),
        "build_dir": getattr(args, "build_dir", None),
        "log_level": getattr(args, "log_level", None),
        "debug": True if getattr(args, "debug", False) else None,
    }
    if args.routes:
        from roost.routing.loader import load_route_patterns

        overrides["routes"] = load_route_patterns(args.routes)
    return AppConfig.from_env(**overrides)


def serve(args: argparse.Namespace) -> None:
    """Start the server for the configured build directory."""
    config = _load_config(args)
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    App(config).run()


def check_routes(args: argparse.Namespace) -> None:
    """Print the pattern each path resolves to, or ``404``."""
    routes = App(_load_config(args)).routes
    missing = 0
    for raw in args.paths:
        path = raw if raw.startswith("/") else "/" + raw
        if path == "/":
            print(f"{path}\t/")
            continue
        match = None if path.startswith("//") else routes.match(path[1:])
        if match is None:
            missing += 1
            print(f"{path}\t404")
        else:
            print(f"{path}\t{match.pattern}")
    if missing:
        raise SystemExit(1)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — serve a single-page app with server-checked client routes.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- roost serve ------------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve the build directory")
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument(
        "--build-dir",
        default=None,
        help="Build output containing index.html and assets/ (default: dist)",
    )
    serve_parser.add_argument("--debug", action="store_true", help="Show error detail in 500s")
    serve_parser.add_argument(
        "--log-level",
        default=None,
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level (default: info)",
    )
    _add_route_source(serve_parser)

    # -- roost routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="Check paths against the route table")
    routes_parser.add_argument("paths", nargs="+", help="Request paths, e.g. /users/42")
    _add_route_source(routes_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "serve":
            serve(args)
        elif args.command == "routes":
            check_routes(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
