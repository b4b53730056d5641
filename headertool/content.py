# headertool/content.py

from __future__ import annotations
import os
from pathlib import Path

from .errors import FileReadError


def read_contents(path: Path, newline: str = os.linesep, encoding: str = "utf-8") -> str:
    """Read a text file, rebuilding it line by line with a single terminator.

    `\\n`, `\\r\\n` and `\\r` are all recognised as line breaks, and `newline`
    is appended after every line, the last one included. An empty file reads
    as an empty string.

    Args:
        path (Path): File to read.
        newline (str): Terminator used to join the lines.
        encoding (str): Text encoding of the file.

    Returns:
        str: The normalized file content.

    Raises:
        FileReadError: If the file cannot be opened, read or decoded.
    """
    parts = []
    try:
        with Path(path).open("r", encoding=encoding) as f:
            for line in f:
                if line.endswith("\n"):
                    line = line[:-1]
                parts.append(line)
                parts.append(newline)
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, exc) from exc
    return "".join(parts)
