#!/usr/bin/env python3
"""
Write class-groups.json: every HTML element under --root whose class list
would be grouped, with its category mapping. HTML files are not modified.
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tw_group.errors import ConfigError  # noqa: E402
from tw_group.html_audit import write_audit_report  # noqa: E402
from tw_group.options import options_from_env  # noqa: E402


def main():
    load_dotenv()
    ap = argparse.ArgumentParser(description="Audit HTML class attributes and report their Tailwind category groups")
    ap.add_argument("--root", required=True, help="Directory containing *.html")
    ap.add_argument("--min-tokens", type=int, help="Minimum classes before grouping (fallback: env TW_GROUP_MIN_TOKENS)")
    args = ap.parse_args()

    root = Path(args.root)
    if not root.is_dir():
        raise SystemExit(f"[ERROR] directory not found: {root}")
    try:
        opts = options_from_env(min_tokens=args.min_tokens)
    except ConfigError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(2)

    out = write_audit_report(root, opts)
    report = json.loads(out.read_text(encoding="utf-8"))
    count = sum(len(f["elements"]) for f in report["files"])
    print(f"[TW-AUDIT] elements={count} files={len(report['files'])} -> {out}")


if __name__ == "__main__":
    main()
