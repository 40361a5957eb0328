"""Compiled client-route table.

Each configured pattern is compiled once into either a ``Literal`` entry
(exact string comparison, no regex involved) or a ``Templated`` entry
(one anchored regex with a single-segment wildcard per ``{name}``).
The resulting ``RouteTable`` is immutable and safe to share between
concurrent requests.

Examples::

    table = RouteTable.from_patterns(["about", "/users/{id}"])
    table.matches("about")          # True
    table.matches("users/42")       # True
    table.matches("users/42/extra") # False
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TypeAlias

from roost.errors import ConfigurationError

# A placeholder is "{" + name + "}"; the name may not contain braces.
_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")

# One or more characters, never the path separator.
SEGMENT_WILDCARD = r"([^/]+)"


def normalize(path: str) -> str:
    """Drop a single leading separator so ``/about`` and ``about`` compare equal."""
    return path[1:] if path.startswith("/") else path


@dataclass(frozen=True, slots=True)
class Literal:
    """A pattern without placeholders, matched by string equality."""

    pattern: str
    value: str

    def match(self, candidate: str) -> dict[str, str] | None:
        return {} if candidate == self.value else None


@dataclass(frozen=True, slots=True)
class Templated:
    """A pattern with ``{name}`` placeholders, matched by a full-string regex."""

    pattern: str
    regex: re.Pattern[str] = field(compare=False)
    params: tuple[str, ...] = ()

    def match(self, candidate: str) -> dict[str, str] | None:
        m = self.regex.fullmatch(candidate)
        if m is None:
            return None
        return dict(zip(self.params, m.groups(), strict=True))


RouteEntry: TypeAlias = Literal | Templated


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful lookup."""

    entry: RouteEntry
    path_params: dict[str, str]

    @property
    def pattern(self) -> str:
        return self.entry.pattern


def compile_pattern(pattern: str) -> RouteEntry:
    """Compile one route pattern into its table entry.

    Raises ``ConfigurationError`` for non-string patterns and unbalanced
    braces. A name may repeat; its last capture wins in ``path_params``.
    """
    if not isinstance(pattern, str):
        msg = f"Route pattern must be a string, got {type(pattern).__name__}"
        raise ConfigurationError(msg)

    body = normalize(pattern)
    pieces = _PLACEHOLDER.split(body)
    # split() alternates literal text and captured names: [lit, name, lit, ...]
    literals = pieces[0::2]
    names = tuple(pieces[1::2])

    for text in literals:
        if "{" in text or "}" in text:
            msg = f"Unbalanced placeholder braces in route pattern {pattern!r}"
            raise ConfigurationError(msg)

    if not names:
        return Literal(pattern=pattern, value=body)

    source = SEGMENT_WILDCARD.join(re.escape(text) for text in literals)
    return Templated(pattern=pattern, regex=re.compile(source), params=names)


class RouteTable:
    """Immutable, ordered set of compiled client routes.

    Built once at startup and passed by reference into the request
    pipeline. Lookups are pure: the same candidate always yields the
    same result.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[RouteEntry] = ()) -> None:
        self._entries: tuple[RouteEntry, ...] = tuple(entries)

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> RouteTable:
        """Compile *patterns* in declaration order."""
        return cls(compile_pattern(p) for p in patterns)

    @property
    def entries(self) -> tuple[RouteEntry, ...]:
        return self._entries

    @property
    def patterns(self) -> tuple[str, ...]:
        return tuple(entry.pattern for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RouteTable({list(self.patterns)!r})"

    def match(self, segment: str) -> RouteMatch | None:
        """Return the first entry matching *segment*, or ``None``.

        *segment* is the request path without its leading separator;
        a leading ``/`` is tolerated and ignored.
        """
        candidate = normalize(segment)
        for entry in self._entries:
            params = entry.match(candidate)
            if params is not None:
                return RouteMatch(entry=entry, path_params=params)
        return None

    def matches(self, segment: str) -> bool:
        """Whether *segment* matches any known route."""
        return self.match(segment) is not None
