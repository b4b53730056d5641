# main.py

"""
Orchestrator: read params (JSON + CLI), find files lacking the header, report, optionally insert it.
"""
from __future__ import annotations
import argparse
import codecs
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from headertool.errors import ConfigurationError, FileSystemError
from headertool.insert import insert_header
from headertool.matcher import HeaderMatcher
from headertool.model import MatchMode, RunOptions, ScanRow
from headertool.report import write_csv
from headertool.walk import normalize_extensions


def load_config(path: Path | None) -> Dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path (Path | None): Path to the JSON configuration file.

    Returns:
        Dict[str, Any]: Configuration dictionary. Empty if no file is provided.

    Raises:
        ConfigurationError: If the file cannot be read or is not a JSON object.
    """
    if not path:
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            cfg = json.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Failed to read config {path}: {exc}") from exc
    if not isinstance(cfg, dict):
        raise ConfigurationError(f"Config {path} must contain a JSON object")
    return cfg


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    p = argparse.ArgumentParser(
        description="Report (and optionally fix) files that do not start with a required header."
    )
    p.add_argument("--root", type=str, help="Directory to scan (recursive).")
    p.add_argument("--header", type=str, help="File holding the exact header text.")
    p.add_argument("--ext", nargs="+", metavar="EXT",
                   help="File extensions to check, e.g. java xml. '*' checks every file (default).")
    p.add_argument("--insert", action="store_true", help="Insert the header into every file lacking it.")
    p.add_argument("--first-line-only", action="store_true",
                   help="Match only the first line of the header.")
    p.add_argument("--report", type=str, help="Optional CSV report of files lacking the header.")
    p.add_argument("--encoding", type=str, help="Text encoding of scanned files (default: utf-8).")
    p.add_argument("--fail-on-missing", action="store_true",
                   help="Exit with status 2 when files lack the header and --insert is off.")
    p.add_argument("--config", type=str, help="Optional JSON config (flags override).")
    return p.parse_args(argv)


def _get_effective_config(args: argparse.Namespace) -> Tuple[Dict[str, Any], Path]:
    """Load CLI + JSON configuration, giving precedence to CLI flags."""
    script_dir = Path(__file__).parent
    default_config_path = script_dir / "params.json"
    if args.config:
        config_path = Path(args.config)
        return load_config(config_path), config_path
    cfg = load_config(default_config_path if default_config_path.exists() else None)
    return cfg, default_config_path


def _config_extensions(value: Any) -> Optional[List[str]]:
    """Accept a single extension string or a list of them from the JSON config."""
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def _resolve_options(args: argparse.Namespace, cfg: Dict[str, Any], config_path: Path) -> RunOptions:
    """Resolve and validate the run options."""
    root_str = args.root or cfg.get("root", "")
    if not root_str:
        raise ConfigurationError(f"--root is required (or set 'root' in {config_path.name}).")
    root = Path(root_str)
    if not root.is_dir():
        raise ConfigurationError(f"Root directory not found: {root}")

    header_str = args.header or cfg.get("header", "")
    if not header_str:
        raise ConfigurationError(f"--header is required (or set 'header' in {config_path.name}).")

    raw_exts = args.ext if args.ext is not None else _config_extensions(cfg.get("extensions"))
    first_line = bool(args.first_line_only or cfg.get("first_line_only", False))
    report = args.report or cfg.get("report")

    encoding = args.encoding or cfg.get("encoding", "utf-8")
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigurationError(f"Unknown encoding: {encoding}") from exc

    return RunOptions(
        root=root,
        header=Path(header_str),
        extensions=normalize_extensions(raw_exts),
        insert=bool(args.insert or cfg.get("insert", False)),
        mode=MatchMode.FIRST_LINE_ONLY if first_line else MatchMode.FULL_MATCH,
        report=Path(report) if report else None,
        encoding=encoding,
        fail_on_missing=bool(args.fail_on_missing or cfg.get("fail_on_missing", False)),
    )


def scan(matcher: HeaderMatcher, opts: RunOptions) -> Set[Path]:
    """Collect the files under the root that lack the header."""
    return matcher.list_files_without_header(opts.root, opts.extensions)


def apply(matcher: HeaderMatcher, opts: RunOptions, paths: Sequence[Path]) -> List[Path]:
    """Insert the header into exactly the given files."""
    return insert_header(paths, matcher.header, newline=matcher.newline, encoding=opts.encoding)


def _build_rows(
    missing: Sequence[Path],
    inserted: Sequence[Path],
    failure: FileSystemError | None,
) -> List[ScanRow]:
    """Build one report row per headerless file."""
    done = set(inserted)
    rows: List[ScanRow] = []
    for fp in missing:
        action = "none"
        err_str = ""
        if fp in done:
            action = "insert"
        elif failure is not None and fp == failure.path:
            action = "error"
            err_str = str(failure)
        rows.append(ScanRow(
            path=str(fp),
            size_bytes=fp.stat().st_size if fp.exists() else 0,
            action=action,
            error=err_str,
        ))
    return rows


def _print_summary(opts: RunOptions, missing: int, inserted: int, errors: int) -> None:
    """Print summary information to stdout."""
    print(f"[INFO] Done. Lacking header: {missing} | Inserted: {inserted} | Errors: {errors}")
    if opts.report:
        print(f"[INFO] Report: {opts.report.resolve()}")
    if opts.insert:
        print("[INFO] Insert mode was enabled. Files listed above were rewritten.")
    else:
        print("[INFO] Insert mode was NOT enabled (report-only).")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main orchestration function.

    Returns:
        int: Exit code.
    """
    args = parse_args(argv)
    try:
        cfg, config_path = _get_effective_config(args)
        opts = _resolve_options(args, cfg, config_path)
        matcher = HeaderMatcher(opts.header, opts.mode, encoding=opts.encoding)
    except ConfigurationError as exc:
        print(f"[ERR] {exc}", file=sys.stderr)
        return 2

    print(f"[INFO] Scanning: {opts.root} (header: {opts.header}, mode: {opts.mode.value})")
    try:
        missing = sorted(scan(matcher, opts))
    except FileSystemError as exc:
        print(f"[ERR] Scan aborted: {exc}", file=sys.stderr)
        return 3

    for fp in missing:
        print(f"[MISSING] {fp}")
    print(f"[INFO] Found {len(missing)} files that lack the header")

    inserted: List[Path] = []
    failure: FileSystemError | None = None
    if opts.insert and missing:
        print(f"[INFO] Inserting header from {opts.header} into {len(missing)} files")
        try:
            inserted = apply(matcher, opts, missing)
        except FileSystemError as exc:
            failure = exc
            inserted = exc.completed
        for fp in inserted:
            print(f"[INFO] Added header: {fp}")
        if failure is not None:
            print(f"[ERR] Insertion aborted: {failure}", file=sys.stderr)

    if opts.report:
        try:
            write_csv(opts.report, _build_rows(missing, inserted, failure))
        except OSError as exc:
            print(f"[ERR] Failed to write report {opts.report}: {exc}", file=sys.stderr)
            return 3

    _print_summary(opts, len(missing), len(inserted), 1 if failure else 0)

    if failure is not None:
        return 3
    if missing and not opts.insert and opts.fail_on_missing:
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
