"""Parse OCR receipt text into items, totals and warnings."""

from decimal import Decimal

from billzy.domain.receipt import ParsedItem, ParseResult, ReceiptTotals
from billzy.runtime.logging import get_logger

from .ocr_parser.common import (
    DEFAULT_PARSER_SETTINGS,
    NO_ITEMS_WARNING,
    TOTAL_MISMATCH_WARNING,
    UNCERTAIN_ITEMS_WARNING,
    ParserSettings,
    _split_lines,
)
from .ocr_parser.items_text_parser import _extract_item
from .ocr_parser.line_classifier import classify_line

logger = get_logger(__name__)


def parse_receipt_text(text: str, settings: ParserSettings = DEFAULT_PARSER_SETTINGS) -> ParseResult:
    """
    Parse OCR text into a ParseResult.

    This is a best-effort heuristic: it never raises for malformed text. The
    worst case is an empty item list plus a warning, and every result should
    be reviewed by a person.

    Args:
        text: Recognized receipt text (``\\n`` or ``\\r\\n`` line endings)
        settings: Parser limits; see ``billzy.runtime.load_parser_settings``

    Returns:
        ParseResult with items in receipt order
    """
    if not isinstance(text, str):
        raise TypeError(f"receipt text must be str, not {type(text).__name__}")

    items: list[ParsedItem] = []
    total: Decimal | None = None
    tax: Decimal | None = None

    for line in _split_lines(text):
        classification = classify_line(line)

        if classification.kind == "total":
            if classification.amount is not None:
                total = classification.amount
            continue
        if classification.kind == "tax":
            if classification.amount is not None:
                tax = classification.amount
            continue
        if classification.kind != "candidate":
            logger.debug("Skipping %s line (%s)", classification.kind, classification.rule)
            continue

        item = _extract_item(line, settings)
        if item is None:
            logger.debug("No item on candidate line of length %d", len(line))
            continue
        items.append(item)

    warnings = _collect_warnings(items, total, settings)
    logger.info("Parsed %d item(s) with %d warning(s)", len(items), len(warnings))
    return ParseResult(
        items=tuple(items),
        totals=ReceiptTotals(total=total, tax=tax),
        warnings=tuple(warnings),
    )


def _collect_warnings(items: list[ParsedItem], total: Decimal | None, settings: ParserSettings) -> list[str]:
    warnings: list[str] = []
    if not items:
        warnings.append(NO_ITEMS_WARNING)

    item_sum = sum((item.price for item in items), Decimal("0"))
    if total is not None and abs(item_sum - total) > settings.reconcile_tolerance:
        warnings.append(TOTAL_MISMATCH_WARNING)

    if any(item.uncertain for item in items):
        warnings.append(UNCERTAIN_ITEMS_WARNING)
    return warnings
