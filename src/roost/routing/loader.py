"""Route definitions loaded from a file written by the frontend build.

Two formats are accepted:

- ``.json``: a JSON array of pattern strings.
- anything else: plain text, one pattern per line; blank lines and
  lines starting with ``#`` are skipped.
"""

import json
from pathlib import Path

from roost.errors import ConfigurationError


def load_route_patterns(path: str | Path) -> tuple[str, ...]:
    """Read an ordered tuple of route patterns from *path*."""
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read routes file {str(source)!r}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc

    if source.suffix == ".json":
        return _parse_json(text, source)

    return tuple(
        line.strip()
        for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    )


def _parse_json(text: str, source: Path) -> tuple[str, ...]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in routes file {str(source)!r}: {exc.msg}"
        raise ConfigurationError(msg) from exc

    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        msg = f"Routes file {str(source)!r} must contain a JSON array of strings"
        raise ConfigurationError(msg)
    return tuple(data)
