#!/usr/bin/env python3
"""
Report (and optionally fix) ungrouped Tailwind class lists in JSX/TSX files.

  python tools/lint_jsx_classes.py --root src
  python tools/lint_jsx_classes.py --root src --fix --backup

Only className="..." attributes and className={clsx("...")} calls with a
single string argument are touched. Running --fix twice changes nothing.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from dotenv import load_dotenv

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tw_group.errors import ConfigError  # noqa: E402
from tw_group.jsx import DEFAULT_ATTRIBUTES, fix_source, lint_source  # noqa: E402
from tw_group.options import OutputFormat, options_from_env  # noqa: E402


DEFAULT_EXTS = ".jsx,.tsx,.js"


def parse_args():
    p = argparse.ArgumentParser(description="Report or fix Tailwind class lists that should be grouped by category")
    p.add_argument("--root", required=True, help="Directory (or single file) to scan")
    p.add_argument("--ext", default=DEFAULT_EXTS, help=f"Comma-separated extensions (default: {DEFAULT_EXTS})")
    p.add_argument("--attr", action="append", help="Attribute name to check (can be repeated; default: className, class)")
    p.add_argument("--format", choices=[OutputFormat.CLSX.value, OutputFormat.ARRAY.value], help="Replacement shape (fallback: env TW_GROUP_FORMAT)")
    p.add_argument("--min-tokens", type=int, help="Minimum classes before grouping (fallback: env TW_GROUP_MIN_TOKENS)")
    p.add_argument("--no-comments", action="store_true", help="Omit // Category comments in fixes")
    p.add_argument("--callee", help="Class helper to emit and recognise (fallback: env TW_GROUP_CALLEE, default clsx)")
    p.add_argument("--fix", action="store_true", help="Rewrite files in place")
    p.add_argument("--backup", action="store_true", help="Write .bak before modifying a file")
    p.add_argument("--dry-run", action="store_true", help="With --fix: report how many attributes would change, write nothing")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


def find_source_files(root: Path, exts: List[str]) -> List[Path]:
    if root.is_file():
        return [root]
    return sorted(p for p in root.rglob("*") if p.suffix in exts and "node_modules" not in p.parts)


def main():
    load_dotenv()
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="[%(levelname)s] %(message)s")

    root = Path(args.root)
    if not root.exists():
        raise SystemExit(f"[ERROR] not found: {root}")
    try:
        opts = options_from_env(
            format=args.format,
            min_tokens=args.min_tokens,
            include_comments=False if args.no_comments else None,
            callee=args.callee,
        )
        if opts.format not in (OutputFormat.CLSX, OutputFormat.ARRAY):
            raise ConfigError(f"format {opts.format.value!r} cannot be spliced into JSX (use clsx or array)")
    except ConfigError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(2)

    attributes = tuple(args.attr) if args.attr else DEFAULT_ATTRIBUTES
    exts = [e.strip() if e.strip().startswith(".") else "." + e.strip() for e in args.ext.split(",") if e.strip()]

    total = 0
    for path in find_source_files(root, exts):
        src = path.read_text(encoding="utf-8", errors="ignore")
        if not args.fix:
            for f in lint_source(src, opts, attributes):
                print(f"{path}:{f.line}:{f.column}: warning: {f.message}")
                total += 1
            continue
        out, changed = fix_source(src, opts, attributes)
        total += changed
        if not changed or args.dry_run:
            continue
        if args.backup:
            bak = path.with_suffix(path.suffix + ".bak")
            if not bak.exists():
                bak.write_text(src, encoding="utf-8")
        path.write_text(out, encoding="utf-8")

    if args.fix:
        verb = "would fix" if args.dry_run else "fixed"
        print(f"[TW-LINT] {verb}={total}")
        return
    print(f"[TW-LINT] warnings={total}")
    if total:
        sys.exit(1)


if __name__ == "__main__":
    main()
