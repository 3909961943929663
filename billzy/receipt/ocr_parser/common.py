"""Shared constants and helpers for OCR receipt text parsing."""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

# Item prices outside [MIN_ITEM_PRICE, MAX_ITEM_PRICE] are rejected, never clamped.
MIN_ITEM_PRICE = Decimal("0.01")
MAX_ITEM_PRICE = Decimal("9999.99")

MIN_QUANTITY = 1
MAX_QUANTITY = 99

# Item sum may differ from the printed total by this much before we warn.
RECONCILE_TOLERANCE = Decimal("0.02")

# Lines longer than this without a trailing price are promotional/footer text.
MAX_LINE_LENGTH = 120
MAX_NAME_LENGTH = 120

# Merchant names are looked for only near the top of the receipt.
MERCHANT_SCAN_LINES = 8

CURRENCY_SYMBOLS = "$£€"

# Two-decimal amount at the very end of a line, e.g. "Burger $12.99" or "12,99".
TRAILING_AMOUNT_PATTERN = re.compile(r"[$£€]?\s?\d+[.,]\d{2}\s*$")

# Money-looking numbers on a summary line ("TOTAL $1,234.56", "Tax 0,80").
# Two-decimal amounts win over bare numbers so "GST 5% 0.50" reads 0.50.
# A comma is a decimal separator only when exactly two digits follow it.
SUMMARY_AMOUNT_PATTERNS = (
    re.compile(r"(?<![\d.,])(?:\d{1,3}(?:,\d{3})+\.\d{2}|\d+[.,]\d{2})(?![\d])"),
    re.compile(r"(?<![\d.,])(?:\d{1,3}(?:,\d{3})+(?![\d])|\d+)(?:\.\d+|,\d{2}(?![\d]))?"),
)
THOUSANDS_GROUPED_PATTERN = re.compile(r"\d{1,3}(?:,\d{3})+(?:\.\d+)?")

NO_ITEMS_WARNING = "No line items could be read. Try a clearer image or add items manually."
TOTAL_MISMATCH_WARNING = "Total may be inaccurate: item sum does not match receipt total."
UNCERTAIN_ITEMS_WARNING = "Some items are marked uncertain. Please verify prices."


@dataclass(frozen=True)
class ParserSettings:
    """Tunable limits for the text parser. Defaults match a plain receipt."""

    min_price: Decimal = MIN_ITEM_PRICE
    max_price: Decimal = MAX_ITEM_PRICE
    reconcile_tolerance: Decimal = RECONCILE_TOLERANCE
    merchant_scan_lines: int = MERCHANT_SCAN_LINES
    flag_uncertain: bool = True


DEFAULT_PARSER_SETTINGS = ParserSettings()


def _decimal_setting(raw: Any, default: Decimal) -> Decimal:
    if raw is None:
        return default
    try:
        return Decimal(str(raw))
    except InvalidOperation as exc:
        raise ValueError(f"invalid decimal setting: {raw!r}") from exc


def build_parser_settings(config: Mapping[str, Any] | None = None) -> ParserSettings:
    """Build parser settings from an in-memory config (the ``[parser]`` TOML table)."""
    if not config:
        return DEFAULT_PARSER_SETTINGS

    min_price = _decimal_setting(config.get("min_price"), MIN_ITEM_PRICE)
    max_price = _decimal_setting(config.get("max_price"), MAX_ITEM_PRICE)
    if min_price <= 0 or max_price < min_price:
        raise ValueError(f"invalid price range: [{min_price}, {max_price}]")

    tolerance = _decimal_setting(config.get("reconcile_tolerance"), RECONCILE_TOLERANCE)
    if tolerance < 0:
        raise ValueError(f"reconcile_tolerance must not be negative: {tolerance}")

    scan_lines = int(config.get("merchant_scan_lines", MERCHANT_SCAN_LINES))
    if scan_lines < 1:
        raise ValueError(f"merchant_scan_lines must be positive: {scan_lines}")

    return ParserSettings(
        min_price=min_price,
        max_price=max_price,
        reconcile_tolerance=tolerance,
        merchant_scan_lines=scan_lines,
        flag_uncertain=bool(config.get("flag_uncertain", True)),
    )


def _split_lines(text: str) -> list[str]:
    """Split OCR text into trimmed, non-empty lines (``\\n`` or ``\\r\\n``)."""
    return [line.strip() for line in re.split(r"\r?\n|\r", text) if line.strip()]


def _normalize_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def _to_decimal(token: str) -> Decimal | None:
    """Convert a money token to Decimal, accepting a comma decimal separator."""
    cleaned = token.strip().lstrip(CURRENCY_SYMBOLS).strip().replace(",", ".")
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return None


def _parse_money(line: str) -> Decimal | None:
    """Return the first money-looking number on a line, or None."""
    stripped = re.sub(f"[{CURRENCY_SYMBOLS}]", "", line)
    for pattern in SUMMARY_AMOUNT_PATTERNS:
        match = pattern.search(stripped)
        if match:
            token = match.group(0)
            if THOUSANDS_GROUPED_PATTERN.fullmatch(token):
                token = token.replace(",", "")
            return _to_decimal(token)
    return None


def _ends_with_amount(line: str) -> bool:
    return TRAILING_AMOUNT_PATTERN.search(line) is not None


def _price_in_range(price: Decimal, settings: ParserSettings = DEFAULT_PARSER_SETTINGS) -> bool:
    return settings.min_price <= price <= settings.max_price
