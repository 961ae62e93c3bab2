"""
Command line front end.

  tw-group format "mt-4 flex items-center px-6 py-3 bg-white"
  echo "mt-4 flex ..." | tw-group format --format array
  tw-group classify hover:bg-blue-600 text-sm
  tw-group group "mt-4 flex text-sm"
  tw-group interactive

Options fall back to TW_GROUP_* variables (.env is loaded first).
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO, List, Optional

from dotenv import load_dotenv

from .classifier import classify
from .errors import ConfigError
from .formatter import format_classes
from .grouping import group, grouping_to_dict
from .options import OutputFormat, RenderOptions, options_from_env


def add_render_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--format", choices=[f.value for f in OutputFormat], help="Output shape (fallback: env TW_GROUP_FORMAT, default clsx)")
    p.add_argument("--min-tokens", type=int, help="Leave strings with fewer classes alone (fallback: env TW_GROUP_MIN_TOKENS, default 4)")
    p.add_argument("--no-comments", action="store_true", help="Omit the // Category comment lines")
    p.add_argument("--indent", help="Indentation of nested lines (fallback: env TW_GROUP_INDENT, default two spaces)")
    p.add_argument("--verbose", action="store_true", help="Debug logging")


def options_from_args(args: argparse.Namespace) -> RenderOptions:
    return options_from_env(
        format=args.format,
        min_tokens=args.min_tokens,
        include_comments=False if args.no_comments else None,
        indent=args.indent,
    )


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="[%(levelname)s] %(name)s: %(message)s")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="tw-group", description="Group Tailwind CSS classes by category")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("format", help="Format a class string (arguments or stdin)")
    p.add_argument("classes", nargs="*", help="Class tokens; stdin is read when omitted")
    p.add_argument("--check", action="store_true", help="Print nothing; exit 1 when the input would be regrouped")
    add_render_args(p)

    p = sub.add_parser("interactive", help="Paste classes, press Enter twice, repeat")
    add_render_args(p)

    p = sub.add_parser("classify", help="Print the category of each token")
    p.add_argument("tokens", nargs="+")

    p = sub.add_parser("group", help="Print the category mapping as JSON (no threshold)")
    p.add_argument("classes", nargs="+")
    return ap.parse_args(argv)


def run_interactive(opts: RenderOptions, stream: IO[str], out: IO[str]) -> None:
    print("Tailwind Class Formatter", file=out)
    print("========================", file=out)
    print("Paste your Tailwind classes and press Enter twice:\n", file=out)
    buf: List[str] = []
    blanks = 0
    for raw in stream:
        line = raw.rstrip("\n")
        if line.strip():
            blanks = 0
            buf.append(line)
            continue
        blanks += 1
        if blanks < 2:
            continue
        blanks = 0
        if not buf:
            continue
        print("\nFormatted Output:", file=out)
        print("----------------", file=out)
        print(format_classes(" ".join(buf).strip(), opts).text, file=out)
        buf = []
        print("\n\nPaste more classes or press Ctrl+D to exit:\n", file=out)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(getattr(args, "verbose", False))

    if args.command == "classify":
        for token in args.tokens:
            print(f"{token}\t{classify(token).value}")
        return 0
    if args.command == "group":
        print(json.dumps(grouping_to_dict(group(" ".join(args.classes))), ensure_ascii=False, indent=2))
        return 0

    try:
        opts = options_from_args(args)
    except ConfigError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    if args.command == "interactive":
        try:
            run_interactive(opts, sys.stdin, sys.stdout)
        except KeyboardInterrupt:
            return 130
        return 0

    source = " ".join(args.classes) if args.classes else sys.stdin.read().strip()
    result = format_classes(source, opts)
    if args.check:
        return 1 if result.changed else 0
    print(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
