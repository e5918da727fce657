"""Absolute slash-delimited paths used to address nodes in a tree."""

from __future__ import annotations

from functools import total_ordering
from typing import Any

from sysprogkit.errors import BadPathError, NoSuchPathError

DELIMITER = "/"


def _sign(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _split(pathname: str) -> tuple[str, ...]:
    """Split pathname into components, rejecting malformed paths."""
    if pathname == "":
        raise BadPathError("path cannot be the empty string")
    components = tuple(pathname.split(DELIMITER))
    if any(component == "" for component in components):
        raise BadPathError(
            f"path {pathname!r} begins or ends with {DELIMITER!r} "
            f"or contains consecutive delimiters"
        )
    return components


@total_ordering
class Path:
    """An immutable absolute path made of one or more components."""

    __slots__ = ("_pathname", "_components")

    def __init__(self, pathname: str) -> None:
        if not isinstance(pathname, str):
            raise TypeError("pathname must be a string")
        self._components = _split(pathname)
        self._pathname = pathname

    @classmethod
    def _from_components(cls, components: tuple[str, ...]) -> Path:
        new = cls.__new__(cls)
        new._components = components
        new._pathname = DELIMITER.join(components)
        return new

    def __str__(self) -> str:
        return self._pathname

    def __repr__(self) -> str:
        return f"Path({self._pathname!r})"

    def __len__(self) -> int:
        """Length of the string form of the path."""
        return len(self._pathname)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._pathname == other._pathname

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._pathname < other._pathname

    def __hash__(self) -> int:
        return hash(self._pathname)

    @property
    def pathname(self) -> str:
        """The string form of the path."""
        return self._pathname

    @property
    def depth(self) -> int:
        """The number of components in the path."""
        return len(self._components)

    @property
    def components(self) -> tuple[str, ...]:
        """The components of the path, from the root down."""
        return self._components

    def prefix(self, depth: int) -> Path:
        """Return the ancestor of this path that has the given depth."""
        if depth <= 0:
            raise NoSuchPathError("cannot build an empty path")
        if depth > self.depth:
            raise NoSuchPathError(
                f"prefix depth {depth} exceeds path depth {self.depth}"
            )
        return Path._from_components(self._components[:depth])

    def dup(self) -> Path:
        """Return a new path equal to this one."""
        return self.prefix(self.depth)

    def compare_path(self, other: Path) -> int:
        """Compare pathnames: negative, zero or positive."""
        return _sign(self._pathname, other._pathname)

    def compare_string(self, text: str) -> int:
        """Compare the pathname with text: negative, zero or positive."""
        if not isinstance(text, str):
            raise TypeError("text must be a string")
        return _sign(self._pathname, text)

    def shared_prefix_depth(self, other: Path) -> int:
        """Return the number of leading components the two paths share."""
        shared = 0
        for mine, theirs in zip(self._components, other._components):
            if mine != theirs:
                break
            shared += 1
        return shared

    def component(self, level: int) -> str | None:
        """Return the component at level (0 is the root), or None."""
        if level < 0 or level >= self.depth:
            return None
        return self._components[level]