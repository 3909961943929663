"""Merchant name extraction helpers."""

import re

from .common import MERCHANT_SCAN_LINES, _normalize_whitespace, _split_lines

MIN_MERCHANT_LENGTH = 4
MAX_MERCHANT_LENGTH = 60
MIN_MERCHANT_LETTERS = 4
# Lines starting with digits and shorter than this are street numbers, not names.
SHORT_NUMBERED_LINE_LENGTH = 25

MERCHANT_EXCLUDE_PATTERN = re.compile(
    r"\b(?:street|ave|blvd|road|dr|server|table|tab)\b|\bcheck\s*#",
    re.IGNORECASE,
)


def _looks_like_merchant_name(line: str) -> bool:
    if not MIN_MERCHANT_LENGTH <= len(line) <= MAX_MERCHANT_LENGTH:
        return False
    if re.match(r"^[\d\s/\-:.,#]+$", line):
        return False
    if MERCHANT_EXCLUDE_PATTERN.search(line):
        return False
    if len(line) < SHORT_NUMBERED_LINE_LENGTH and re.match(r"^\d", line):
        return False
    return sum(1 for c in line if c.isalpha()) >= MIN_MERCHANT_LETTERS


def suggest_merchant_name(text: str, max_lines: int = MERCHANT_SCAN_LINES) -> str | None:
    """
    Suggest a merchant name from the top of the receipt text.

    The first of the leading ``max_lines`` lines that looks like a business
    name wins. Independent of item parsing; returns None when nothing fits so
    the caller can keep its placeholder label.
    """
    for line in _split_lines(text)[:max_lines]:
        if _looks_like_merchant_name(line):
            return _normalize_whitespace(line)
    return None
