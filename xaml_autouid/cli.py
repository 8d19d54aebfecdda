# xaml_autouid/cli.py
"""
@file cli.py
@brief Command-line interface: xaml-autouid <directory>.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from .exceptions import AutoUidError, ConfigError, UsageError
from .kinds import DEFAULT_KINDS_PATH, EligibleKinds
from .logging_setup import get_logger, resolve_level, setup_logging
from .pipeline import discover_files, process_file

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="xaml-autouid",
        description="Add x:Uid and AutomationProperties.AutomationId to XAML elements and reformat the files in place",
    )
    p.add_argument("directory", nargs="?", default=None, help="Directory searched recursively for *.xaml files")
    p.add_argument("--kinds", "-k", default=None, help=f"YAML file listing eligible element kinds (default: {DEFAULT_KINDS_PATH})")
    p.add_argument("--kind", action="append", default=[], help="Extra eligible element kind (can be used multiple times)")
    p.add_argument("--verbose", "-v", action="store_true", help="Log per-file details to stderr")
    return p


def _check_directory(directory: Optional[str]) -> str:
    if not directory:
        raise UsageError("First argument must be a path.")
    if not os.path.isdir(directory):
        raise UsageError(f"No directory found at '{directory}'")
    return directory


def _load_kinds(path: Optional[str], extra: List[str]) -> EligibleKinds:
    kinds = EligibleKinds(path)
    if extra:
        kinds = kinds.extend(extra)
    logger.debug(f"Eligible kinds: {len(kinds)} from {kinds.path}")
    return kinds


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    argv = sys.argv[1:] if argv is None else argv
    args = _build_parser().parse_args(argv)
    setup_logging(resolve_level(args.verbose))

    try:
        directory = _check_directory(args.directory)
    except UsageError as e:
        print(f"Error: {e}")
        return 1

    try:
        kinds = _load_kinds(args.kinds, args.kind)
    except ConfigError as e:
        print(f"Error loading eligible kinds: {e}", file=sys.stderr)
        return 1

    files = discover_files(directory)
    print(f"Found {len(files)} file(s)")

    for path in files:
        print(f"Processing: {path}")
        try:
            process_file(path, kinds)
        except AutoUidError as e:
            logger.debug(f"Aborting after failure in {path}", exc_info=True)
            print(f"Error processing '{path}': {e}", file=sys.stderr)
            return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
