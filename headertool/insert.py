# headertool/insert.py

from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List

from .content import read_contents
from .errors import FileSystemError, FileWriteError


def insert_header(
    files: Iterable[Path],
    header: str,
    newline: str = os.linesep,
    encoding: str = "utf-8",
) -> List[Path]:
    """Prepend the header to each file, in the order given.

    Each file is read in full and rewritten as `header + content`, with no
    separator added. The header is not looked for first: calling this on a
    file that already has it duplicates the header.

    Stops at the first failure. Files rewritten before it stay modified and
    are listed on the raised error's `completed` attribute.

    Args:
        files (Iterable[Path]): Files lacking the header.
        header (str): Exact header text to prepend.
        newline (str): Terminator used when re-reading the existing content.
        encoding (str): Text encoding for reading and writing.

    Returns:
        List[Path]: Files rewritten, in order.

    Raises:
        FileReadError: If a file cannot be read.
        FileWriteError: If a file cannot be rewritten.
    """
    done: List[Path] = []
    for fp in files:
        fp = Path(fp)
        try:
            original = read_contents(fp, newline=newline, encoding=encoding)
            try:
                # encode before truncating so a bad character leaves the file intact
                data = (header + original).encode(encoding)
                with fp.open("wb") as f:
                    f.write(data)
            except (OSError, UnicodeEncodeError) as exc:
                raise FileWriteError(fp, exc) from exc
        except FileSystemError as err:
            err.completed = list(done)
            raise
        done.append(fp)
    return done
