"""Status codes and exceptions shared by the file tree modules."""

from __future__ import annotations

from enum import IntEnum


class Status(IntEnum):
    """Result statuses of file tree operations, in their fixed order."""

    SUCCESS = 0
    INITIALIZATION_ERROR = 1
    ALREADY_IN_TREE = 2
    NO_SUCH_PATH = 3
    CONFLICTING_PATH = 4
    BAD_PATH = 5
    NOT_A_DIRECTORY = 6
    NOT_A_FILE = 7
    MEMORY_ERROR = 8

    @property
    def description(self) -> str:
        """A short human-readable form of the status name."""
        return self.name.lower().replace("_", " ")


class FileTreeError(Exception):
    """Base class for every failure a file tree operation reports."""

    status: Status = Status.MEMORY_ERROR

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = self.status.description
        super().__init__(message)
        self.message = message


class InitializationError(FileTreeError):
    """The tree is not in the state the operation requires."""

    status = Status.INITIALIZATION_ERROR


class AlreadyInTreeError(FileTreeError):
    """The path is already present in the tree."""

    status = Status.ALREADY_IN_TREE


class NoSuchPathError(FileTreeError):
    """The path does not exist in the tree."""

    status = Status.NO_SUCH_PATH


class ConflictingPathError(FileTreeError):
    """The path does not lie under the tree's root."""

    status = Status.CONFLICTING_PATH


class BadPathError(FileTreeError):
    """The path is not well formed."""

    status = Status.BAD_PATH


class TreeNotADirectoryError(FileTreeError):
    """A path that must be a directory is a file."""

    status = Status.NOT_A_DIRECTORY


class TreeNotAFileError(FileTreeError):
    """A path that must be a file is a directory."""

    status = Status.NOT_A_FILE