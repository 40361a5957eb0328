"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups. ``AppConfig.from_env()`` builds one from the
process environment for the CLI and container deployments.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from roost.errors import ConfigurationError

DEFAULT_PORT = 3001


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=8080, build_dir="frontend/dist", routes=("about",))
    """

    # Server
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    debug: bool = False
    log_level: str = "info"

    # Build output
    build_dir: str | Path = "dist"
    shell_file: str = "index.html"
    asset_prefix: str = "/assets"
    asset_cache_control: str = "public, max-age=3600"
    chunk_size: int = 64 * 1024

    # Client routes, in declaration order
    routes: tuple[str, ...] = ()

    # Global assigned in the injected bootstrap script
    route_global: str = "__INITIAL_ROUTE__"

    @property
    def shell_path(self) -> Path:
        """Location of the shell document inside the build directory."""
        return Path(self.build_dir) / self.shell_file

    @property
    def asset_dir(self) -> Path:
        """Directory served under ``asset_prefix``."""
        return Path(self.build_dir) / self.asset_prefix.strip("/")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> AppConfig:
        """Build a config from environment variables.

        Recognised variables: ``HOST``, ``PORT``, ``ROOST_BUILD_DIR``,
        ``ROOST_ROUTES_FILE``, ``ROOST_DEBUG`` and ``LOG_LEVEL``.
        Keyword *overrides* win over the environment.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        if "HOST" in env:
            values["host"] = env["HOST"]
        if "PORT" in env:
            values["port"] = parse_port(env["PORT"])
        if "ROOST_BUILD_DIR" in env:
            values["build_dir"] = env["ROOST_BUILD_DIR"]
        if "ROOST_DEBUG" in env:
            values["debug"] = env["ROOST_DEBUG"].lower() in ("1", "true", "yes", "on")
        if "LOG_LEVEL" in env:
            values["log_level"] = env["LOG_LEVEL"].lower()
        if env.get("ROOST_ROUTES_FILE"):
            from roost.routing.loader import load_route_patterns

            values["routes"] = load_route_patterns(env["ROOST_ROUTES_FILE"])

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def parse_port(value: str) -> int:
    """Parse a TCP port number, raising ``ConfigurationError`` when invalid."""
    try:
        port = int(value)
    except ValueError:
        msg = f"PORT must be an integer, got {value!r}"
        raise ConfigurationError(msg) from None
    if not 0 < port < 65536:
        msg = f"PORT must be between 1 and 65535, got {port}"
        raise ConfigurationError(msg)
    return port
