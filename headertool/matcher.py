# headertool/matcher.py

"""
Header matching: decide which files under a tree do not start with the header.
"""
from __future__ import annotations
import errno
import os
from pathlib import Path
from typing import Iterable, Optional, Set

from .content import read_contents
from .errors import ConfigurationError, FileReadError, FileSystemError
from .model import MatchMode
from .walk import iter_files, normalize_extensions


def load_header(header_file: Path, newline: str = os.linesep, encoding: str = "utf-8") -> str:
    """Load the reference header text.

    Raises:
        ConfigurationError: If the header file is missing, unreadable or empty.
    """
    try:
        header = read_contents(header_file, newline=newline, encoding=encoding)
    except FileReadError as exc:
        raise ConfigurationError(f"Header file unusable: {exc}") from exc
    if not header:
        raise ConfigurationError(f"Header file is empty: {header_file}")
    return header


class HeaderMatcher:
    """Holds the header text and the match mode used to classify files.

    Both are fixed at construction; every scan reads the candidate files
    fresh from disk.
    """

    def __init__(
        self,
        header_file: Path,
        mode: MatchMode = MatchMode.FULL_MATCH,
        newline: str = os.linesep,
        encoding: str = "utf-8",
    ) -> None:
        self.header_file = Path(header_file)
        self.mode = mode
        self.newline = newline
        self.encoding = encoding
        self.header = load_header(self.header_file, newline=newline, encoding=encoding)

    def match_prefix(self) -> str:
        """Return the text a compliant file must start with."""
        if self.mode is MatchMode.FIRST_LINE_ONLY:
            return self.header.split(self.newline)[0]
        return self.header

    def has_header(self, path: Path, prefix: Optional[str] = None) -> bool:
        """Check whether a file starts with the header (or its first line)."""
        if prefix is None:
            prefix = self.match_prefix()
        content = read_contents(path, newline=self.newline, encoding=self.encoding)
        return content.startswith(prefix)

    def list_files_without_header(
        self,
        root_dir: Path,
        extensions: Optional[Iterable[str]] = None,
    ) -> Set[Path]:
        """Recursively collect the files under `root_dir` lacking the header.

        Args:
            root_dir (Path): Directory to search; must exist.
            extensions (Iterable[str] | None): Extensions to consider, e.g.
                ["java", "xml"]. None, or a list holding "*", means every file.

        Returns:
            Set[Path]: Files whose content does not start with the match prefix.

        Raises:
            FileSystemError: If `root_dir` is not a directory or cannot be listed.
            FileReadError: If any candidate file cannot be read.
        """
        root = Path(root_dir)
        if not root.is_dir():
            if root.exists():
                cause: OSError = NotADirectoryError(errno.ENOTDIR, "Not a directory", str(root))
            else:
                cause = FileNotFoundError(errno.ENOENT, "No such file or directory", str(root))
            raise FileSystemError(root, cause)

        prefix = self.match_prefix()
        exts = normalize_extensions(extensions)
        return {fp for fp in iter_files(root, exts) if not self.has_header(fp, prefix)}
