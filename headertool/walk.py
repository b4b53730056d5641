# headertool/walk.py

from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from .errors import FileSystemError

WILDCARD_EXTENSION = "*"


def normalize_extensions(values: Optional[Iterable[str]]) -> Optional[Tuple[str, ...]]:
    """Turn user-supplied extension filters into the form `iter_files` expects.

    Returns None ("every file") when nothing is given or the wildcard is
    among the values; otherwise the extensions without a leading dot, case
    preserved.
    """
    if values is None:
        return None
    exts = [v.strip() for v in values if v and v.strip()]
    if not exts or WILDCARD_EXTENSION in exts:
        return None
    return tuple(e[1:] if e.startswith(".") else e for e in exts)


def _raise(err: OSError) -> None:
    raise FileSystemError(Path(err.filename or ""), err) from err


def iter_files(root: Path, extensions: Optional[Iterable[str]] = None) -> Iterator[Path]:
    """Iterate over all files under a directory, recursively.

    Args:
        root (Path): Directory to scan.
        extensions (Iterable[str] | None): Extensions without the dot, matched
            as an exact case-sensitive suffix. None matches every file.

    Yields:
        Path: Paths to each file found, sorted within each directory.

    Raises:
        FileSystemError: If a directory cannot be listed.
    """
    suffixes = None if extensions is None else tuple("." + e for e in extensions)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            if suffixes is not None and not name.endswith(suffixes):
                continue
            p = Path(dirpath) / name
            if p.is_file():
                yield p
