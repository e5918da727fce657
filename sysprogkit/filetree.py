"""A hierarchy of directories and files addressed by absolute paths.

The tree is rooted at a single directory. Directories may be internal
nodes or leaves; files are always leaves and carry contents together
with a length in bytes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from sysprogkit.errors import (
    AlreadyInTreeError,
    ConflictingPathError,
    FileTreeError,
    InitializationError,
    NoSuchPathError,
    TreeNotADirectoryError,
    TreeNotAFileError,
)
from sysprogkit.path import Path


@dataclass(frozen=True)
class FileStat:
    """What stat reports about a node: its kind and, for files, its size."""

    is_file: bool
    size: int | None = None


@dataclass
class _Node:
    path: Path
    is_file: bool
    contents: Any = None
    length: int = 0
    children: dict[str, _Node] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.path.components[-1]

    def walk(self) -> Iterator[_Node]:
        """Yield this node and its descendants depth first.

        Files come before directories at each level, and nodes of the
        same kind are ordered lexicographically by name.
        """
        yield self
        for child in sorted(
            self.children.values(), key=lambda node: (not node.is_file, node.name)
        ):
            yield from child.walk()


def _resolve_length(contents: Any, length: int | None) -> int:
    if length is None:
        return 0 if contents is None else len(contents)
    if length < 0:
        raise ValueError("length cannot be negative")
    return length


class FileTree:
    """A file tree that must be initialized before use."""

    def __init__(self) -> None:
        self._initialized = False
        self._root: _Node | None = None

    # -- lifecycle ---------------------------------------------------

    def init(self) -> None:
        """Put the tree into an initialized, empty state."""
        if self._initialized:
            raise InitializationError("file tree is already initialized")
        self._initialized = True
        self._root = None

    def destroy(self) -> None:
        """Remove everything and return the tree to the uninitialized state."""
        self._require_init()
        self._root = None
        self._initialized = False

    def _require_init(self) -> None:
        if not self._initialized:
            raise InitializationError("file tree is not initialized")

    # -- lookup ------------------------------------------------------

    def _lookup(self, pathname: str) -> _Node:
        self._require_init()
        path = Path(pathname)
        if self._root is None:
            raise NoSuchPathError(f"{pathname!r} is not in the tree")
        if self._root.name != path.component(0):
            raise ConflictingPathError(
                f"root {self._root.path.pathname!r} is not a prefix of {pathname!r}"
            )
        node = self._root
        for name in path.components[1:]:
            child = None if node.is_file else node.children.get(name)
            if child is None:
                raise NoSuchPathError(f"{pathname!r} is not in the tree")
            node = child
        return node

    def _parent_of(self, node: _Node) -> _Node | None:
        if node.path.depth == 1:
            return None
        parent = self._lookup(node.path.prefix(node.path.depth - 1).pathname)
        return parent

    # -- insertion ---------------------------------------------------

    def _insert(self, pathname: str, is_file: bool, contents: Any, length: int) -> None:
        self._require_init()
        path = Path(pathname)
        if is_file and path.depth == 1:
            raise ConflictingPathError("a file cannot be the root of the tree")

        parent: _Node | None = None
        existing = 0
        if self._root is not None:
            if self._root.name != path.component(0):
                raise ConflictingPathError(
                    f"root {self._root.path.pathname!r} is not a prefix of {pathname!r}"
                )
            node = self._root
            existing = 1
            for name in path.components[1:]:
                if node.is_file:
                    raise TreeNotADirectoryError(
                        f"{node.path.pathname!r} is a file, not a directory"
                    )
                child = node.children.get(name)
                if child is None:
                    break
                node = child
                existing += 1
            else:
                raise AlreadyInTreeError(f"{pathname!r} is already in the tree")
            parent = node

        for depth in range(existing + 1, path.depth + 1):
            last = depth == path.depth
            new = _Node(
                path=path.prefix(depth),
                is_file=is_file and last,
                contents=contents if is_file and last else None,
                length=length if is_file and last else 0,
            )
            if parent is None:
                self._root = new
            else:
                parent.children[new.name] = new
            parent = new

    def insert_dir(self, path: str) -> None:
        """Insert a directory, creating any missing ancestor directories."""
        self._insert(path, False, None, 0)

    def insert_file(self, path: str, contents: Any = None, length: int | None = None) -> None:
        """Insert a file holding contents of the given length in bytes.

        When length is omitted it is taken from len(contents), or 0 for
        no contents.
        """
        self._insert(path, True, contents, _resolve_length(contents, length))

    # -- queries -----------------------------------------------------

    def contains_dir(self, path: str) -> bool:
        """Return True iff the tree holds a directory at path."""
        try:
            return not self._lookup(path).is_file
        except FileTreeError:
            return False

    def contains_file(self, path: str) -> bool:
        """Return True iff the tree holds a file at path."""
        try:
            return self._lookup(path).is_file
        except FileTreeError:
            return False

    def get_file_contents(self, path: str) -> Any:
        """Return the contents of the file at path, or None on any failure.

        None is also a legitimate file content, so this is no test of
        whether the file exists.
        """
        try:
            node = self._lookup(path)
        except FileTreeError:
            return None
        return node.contents if node.is_file else None

    def replace_file_contents(
        self, path: str, contents: Any, length: int | None = None
    ) -> Any:
        """Replace a file's contents and return the old ones, or None on failure."""
        try:
            node = self._lookup(path)
        except FileTreeError:
            return None
        if not node.is_file:
            return None
        new_length = _resolve_length(contents, length)
        old = node.contents
        node.contents = contents
        node.length = new_length
        return old

    def stat(self, path: str) -> FileStat:
        """Report whether path is a file and, if so, its length."""
        node = self._lookup(path)
        if node.is_file:
            return FileStat(is_file=True, size=node.length)
        return FileStat(is_file=False)

    # -- removal -----------------------------------------------------

    def _remove(self, node: _Node) -> None:
        parent = self._parent_of(node)
        if parent is None:
            self._root = None
        else:
            del parent.children[node.name]

    def rm_dir(self, path: str) -> None:
        """Remove the directory at path together with everything below it."""
        node = self._lookup(path)
        if node.is_file:
            raise TreeNotADirectoryError(f"{path!r} is a file, not a directory")
        self._remove(node)

    def rm_file(self, path: str) -> None:
        """Remove the file at path."""
        node = self._lookup(path)
        if not node.is_file:
            raise TreeNotAFileError(f"{path!r} is a directory, not a file")
        self._remove(node)

    # -- rendering ---------------------------------------------------

    def to_string(self) -> str:
        """Return every path in the tree, one per line, depth first.

        Files precede directories at each level and nodes of the same
        kind are in lexicographic order. An empty tree gives "".
        """
        self._require_init()
        if self._root is None:
            return ""
        return "".join(f"{node.path.pathname}\n" for node in self._root.walk())

    def __str__(self) -> str:
        return self.to_string()