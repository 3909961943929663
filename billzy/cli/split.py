"""Split command handler used by the unified CLI."""

import argparse
import sys
from pathlib import Path

from billzy.runtime import SplitFileError, get_logger, load_split_file
from billzy.split.allocator import allocate, format_amount
from billzy.split.formatter import format_breakdown, format_summary_text

logger = get_logger(__name__)


def cmd_split(args: argparse.Namespace) -> None:
    """Load a split file and print what each person owes."""
    try:
        split = load_split_file(Path(args.split_file))
    except SplitFileError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}")
        sys.exit(1)

    if not split.people:
        print("No people in split file; nothing to split.")
        sys.exit(1)

    allocation = allocate(split.items, split.people)
    print(format_summary_text(allocation, split.people))
    if allocation.unassigned_total:
        print(f"\nUnassigned: ${format_amount(allocation.unassigned_total)}")
    if args.breakdown:
        print()
        print(format_breakdown(allocation, split.people))
