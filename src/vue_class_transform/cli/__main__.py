"""
Main Entry Point for the vue-class-transform CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `vue_class_transform.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from vue_class_transform.cli import commands
from vue_class_transform import __version__


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="vue-class-transform: Toggle Vue class binding syntax")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: TRANSFORM ---
  cmd_tr = subparsers.add_parser("transform", help="Toggle the class binding at a line of a file")
  cmd_tr.add_argument("path", type=Path, help="Input template file (.vue, .html)")
  cmd_tr.add_argument("--line", type=int, required=True, help="Cursor line (1-based unless configured)")
  dest = cmd_tr.add_mutually_exclusive_group()
  dest.add_argument("--out", type=Path, default=None, help="Write the result to this file")
  dest.add_argument("--in-place", action="store_true", help="Rewrite the input file")
  cmd_tr.add_argument(
    "--dry-run",
    action="store_true",
    default=None,
    help="Print the replacement without applying it (Overrides config)",
  )
  cmd_tr.add_argument(
    "--line-base",
    type=int,
    choices=[0, 1],
    default=None,
    help="Numbering of --line (Overrides config)",
  )
  cmd_tr.add_argument(
    "--json-trace", type=Path, default=None, help="Dump the execution trace to a JSON file."
  )

  # --- Command: CONVERT ---
  cmd_conv = subparsers.add_parser("convert", help="Convert a single class attribute snippet")
  cmd_conv.add_argument("text", help="Attribute text, e.g. 'class=\"foo bar\"'")

  args = parser.parse_args(argv)

  if args.command == "transform":
    return commands.handle_transform(
      args.path, args.line, args.out, args.in_place, args.dry_run, args.line_base, args.json_trace
    )

  elif args.command == "convert":
    return commands.handle_convert(args.text)

  return 0


if __name__ == "__main__":
  sys.exit(main())
