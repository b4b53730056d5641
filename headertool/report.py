# headertool/report.py

from __future__ import annotations
import csv
from pathlib import Path
from typing import Iterable

from .model import ScanRow


def write_csv(out_path: Path, rows: Iterable[ScanRow]) -> None:
    """Write the headerless-file rows to a CSV file.

    Args:
        out_path (Path): Destination CSV file path.
        rows (Iterable[ScanRow]): One row per file lacking the header.

    Returns:
        None
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["path", "size_bytes", "action", "error"])
        for r in rows:
            writer.writerow([r.path, r.size_bytes, r.action, r.error])
