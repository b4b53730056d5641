# headertool/errors.py

from __future__ import annotations
from pathlib import Path
from typing import List


class HeaderToolError(Exception):
    """Base class for every failure raised by the header tool."""


class ConfigurationError(HeaderToolError):
    """Bad startup input: header file, root directory or config file."""


class FileSystemError(HeaderToolError):
    """An I/O failure tied to a specific path.

    `completed` lists the files already rewritten when the failure happened
    during an insertion batch; it is empty otherwise.
    """

    verb = "cannot access"

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        self.completed: List[Path] = []
        super().__init__(f"{self.verb} {self.path}: {self._describe(cause)}")

    @staticmethod
    def _describe(cause: BaseException) -> str:
        if isinstance(cause, OSError) and cause.strerror:
            return cause.strerror
        return f"{type(cause).__name__}: {cause}"


class FileReadError(FileSystemError):
    verb = "cannot read"


class FileWriteError(FileSystemError):
    verb = "cannot write"
