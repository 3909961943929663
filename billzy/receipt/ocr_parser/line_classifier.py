"""Prioritized line classification for receipt text.

Every trimmed line is labelled before any price extraction happens, because
metadata lines (dates, phone numbers, ZIP codes, card numbers) carry digits
that would otherwise be read as prices. Rules are checked in order and the
first match wins:

1. total keyword      -> "total"     (amount stored as the receipt total)
2. tax keyword        -> "tax"       (amount stored as the receipt tax)
3. subtotal keyword   -> "ignored"
4. metadata patterns  -> "metadata"
5. anything else      -> "candidate" (handed to the price extractor)
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from .common import MAX_LINE_LENGTH, TRAILING_AMOUNT_PATTERN, _ends_with_amount, _parse_money

LineKind = Literal["total", "tax", "ignored", "metadata", "candidate"]

SUBTOTAL_PATTERN = re.compile(r"\bsub\s*-?\s*total\b", re.IGNORECASE)
TOTAL_PATTERN = re.compile(r"\b(?:total(?:\s+due)?|amount|balance)\b", re.IGNORECASE)
TAX_PATTERN = re.compile(r"\b(?:tax(?:es)?|vat|gst|hst|pst)\b", re.IGNORECASE)

# "12/25/2023", "12/25/23 2:30 PM"
DATE_PATTERN = re.compile(r"\b\d{1,2}/\d{1,2}/\d{2,4}\b(?:\s+\d{1,2}:\d{2}(?::\d{2})?\s*(?:[ap]\.?m\.?)?)?", re.IGNORECASE)
# Standalone "2:30 PM" / "14:30"
TIME_PATTERN = re.compile(r"^\d{1,2}:\d{2}(?::\d{2})?\s*(?:[ap]\.?m\.?)?$", re.IGNORECASE)

HEADER_FIELD_PATTERN = re.compile(r"\b(?:server|table|tab|guests?|cashier)\b|\bcheck\s*(?:#|no\b)", re.IGNORECASE)
CHECK_NUMBER_PATTERN = re.compile(r"^#?\d{2,5}$")

STREET_WORD_PATTERN = re.compile(
    r"\b(?:st|street|ave|avenue|blvd|boulevard|rd|road|dr|drive|ln|lane|hwy|highway|"
    r"ct|court|pkwy|parkway|suite|ste)\b\.?",
    re.IGNORECASE,
)
ZIP_PATTERN = re.compile(r"\b\d{5}(?:-\d{4})?$")
PHONE_PATTERN = re.compile(r"(?:\(\d{3}\)\s*|\b\d{3}[\s.-])\d{3}[.-]\d{4}\b|^\d{3}[.-]\d{4}$")

PAYMENT_PATTERN = re.compile(
    r"\b(?:visa|master\s?card|amex|american\s+express|discover|chip|read|approved|declined|sale|"
    r"authori[sz]ation|auth\s*(?:code|#)|cash|change|tender(?:ed)?|debit)\b",
    re.IGNORECASE,
)
# "xxxx xxxx xxxx 1234", "************4242". Mask and separator classes must stay
# disjoint, or long "xxxx" separator lines backtrack for seconds.
MASKED_CARD_PATTERN = re.compile(r"(?<![x*])[x*]{2,}(?:[\s-]+[x*]+)*[\s-]*\d{4}\b", re.IGNORECASE)
APPROVAL_CODE_PATTERN = re.compile(r"^\d{6}$")


@dataclass(frozen=True)
class LineClassification:
    """Label for one receipt line and the rule that produced it."""

    kind: LineKind
    rule: str
    # Set only for total/tax lines that carry a number.
    amount: Decimal | None = None


def _is_total_line(line: str) -> bool:
    # "Sub Total" must not count as a total keyword.
    return TOTAL_PATTERN.search(SUBTOTAL_PATTERN.sub(" ", line)) is not None


def _is_tax_line(line: str) -> bool:
    return TAX_PATTERN.search(line) is not None


def _is_subtotal_line(line: str) -> bool:
    return SUBTOTAL_PATTERN.search(line) is not None


def _is_too_short(line: str) -> bool:
    return len(line) < 3


def _is_date_or_time(line: str) -> bool:
    return DATE_PATTERN.search(line) is not None or TIME_PATTERN.match(line) is not None


def _is_header_field(line: str) -> bool:
    return HEADER_FIELD_PATTERN.search(line) is not None or CHECK_NUMBER_PATTERN.match(line) is not None


def _is_address(line: str) -> bool:
    if ZIP_PATTERN.search(line):
        return True
    if not STREET_WORD_PATTERN.search(line):
        return False
    # The street word must co-occur with a digit other than an item price ("Dr Pepper 2.50").
    without_price = TRAILING_AMOUNT_PATTERN.sub("", line)
    return any(ch.isdigit() for ch in without_price)


def _is_phone_number(line: str) -> bool:
    return PHONE_PATTERN.search(line) is not None


def _is_payment_artifact(line: str) -> bool:
    return (
        PAYMENT_PATTERN.search(line) is not None
        or MASKED_CARD_PATTERN.search(line) is not None
        or APPROVAL_CODE_PATTERN.match(line) is not None
    )


def _is_promotional_text(line: str) -> bool:
    return len(line) > MAX_LINE_LENGTH and not _ends_with_amount(line)


# Order is precedence. Keyword rules come first so "Total Tax Included" is a total.
CLASSIFICATION_RULES: tuple[tuple[str, LineKind, Callable[[str], bool]], ...] = (
    ("total_keyword", "total", _is_total_line),
    ("tax_keyword", "tax", _is_tax_line),
    ("subtotal_keyword", "ignored", _is_subtotal_line),
    ("too_short", "metadata", _is_too_short),
    ("date_time", "metadata", _is_date_or_time),
    ("header_field", "metadata", _is_header_field),
    ("address", "metadata", _is_address),
    ("phone_number", "metadata", _is_phone_number),
    ("payment_artifact", "metadata", _is_payment_artifact),
    ("promotional_text", "metadata", _is_promotional_text),
)


def classify_line(line: str) -> LineClassification:
    """Classify one trimmed, non-empty receipt line."""
    for rule, kind, predicate in CLASSIFICATION_RULES:
        if predicate(line):
            amount = _parse_money(line) if kind in ("total", "tax") else None
            return LineClassification(kind=kind, rule=rule, amount=amount)
    return LineClassification(kind="candidate", rule="default")
