# headertool/model.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


class MatchMode(Enum):
    """How a file's leading text is compared against the header."""
    FULL_MATCH = "full"
    FIRST_LINE_ONLY = "first-line"


@dataclass(frozen=True)
class RunOptions:
    """Effective settings for one run, after merging config file and CLI flags."""
    root: Path
    header: Path
    extensions: Optional[Tuple[str, ...]]  # None means every file
    insert: bool
    mode: MatchMode
    report: Optional[Path]
    encoding: str
    fail_on_missing: bool


@dataclass
class ScanRow:
    """Represents a row in the headerless-files CSV report."""
    path: str
    size_bytes: int
    action: str       # one of: none | insert | error
    error: str
