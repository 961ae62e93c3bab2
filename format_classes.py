#!/usr/bin/env python3
"""
Format Tailwind class strings into category groups.

This is a thin wrapper around tw_group/cli.py so you can run:

  python format_classes.py format "mt-4 flex items-center px-6 py-3 bg-white"
  python format_classes.py interactive

Subcommands and flags pass through to the underlying CLI:
  format [CLASSES ...]      Format classes (stdin when omitted); --check for CI
  interactive               Paste mode, Enter twice to format
  classify TOKEN ...        Print the category of each token
  group CLASSES ...         Category mapping as JSON
  --format clsx|array|template|mapping
  --min-tokens N            Minimum classes before grouping (default 4)
  --no-comments             Omit // Category lines
  --indent STR              Indentation of nested lines
"""

import os
import sys


def main():
    # Ensure repo root is on sys.path so tw_group imports without installing
    repo_root = os.path.dirname(os.path.abspath(__file__))
    sys.path.insert(0, repo_root)
    from tw_group.cli import main as cli_main
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
