"""Receipt command handlers used by the unified CLI."""

import argparse
import sys
from pathlib import Path

from billzy.receipt.ocr_parser.common import ParserSettings
from billzy.runtime import get_logger, load_parser_settings

logger = get_logger(__name__)


def _load_settings(args: argparse.Namespace) -> ParserSettings:
    try:
        return load_parser_settings(args.settings)
    except ValueError as exc:
        # tomllib.TOMLDecodeError is a ValueError too.
        print(f"Error: invalid parser settings: {exc}")
        sys.exit(1)


def _read_text(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8", errors="replace")


def cmd_parse(args: argparse.Namespace) -> None:
    """Parse already-recognized receipt text files and print the results."""
    from billzy.application.receipts.scan import analyze_receipt_text
    from billzy.receipt.formatter import format_parse_result

    settings = _load_settings(args)
    failed = False
    for name in args.text_files:
        try:
            text = _read_text(name)
        except OSError as exc:
            logger.error("Cannot read %s: %s", name, exc)
            print(f"Error: cannot read {name}: {exc}")
            failed = True
            continue

        label = "stdin" if name == "-" else Path(name).name
        receipt = analyze_receipt_text(label, text, settings)
        print(format_parse_result(receipt.result, merchant=receipt.merchant, source=label))
        print()

    if failed:
        sys.exit(1)


def cmd_scan(args: argparse.Namespace) -> None:
    """OCR receipt images, parse them, and print the results."""
    from billzy.application.receipts.scan import BatchScanRequest, run_batch_scan
    from billzy.receipt.formatter import format_parse_result

    settings = _load_settings(args)
    batch = run_batch_scan(
        BatchScanRequest(
            image_paths=tuple(Path(image) for image in args.images),
            ocr_url=args.ocr_url,
            settings=settings,
        )
    )

    for result in batch.results:
        if result.receipt is None:
            print(f"Error: {result.error}")
            if result.status == "ocr_unavailable":
                print("Make sure the OCR service is running before scanning receipts.")
            continue
        receipt = result.receipt
        print(format_parse_result(receipt.result, merchant=receipt.merchant, source=receipt.label))
        print()

    if not batch.receipts:
        sys.exit(1)
