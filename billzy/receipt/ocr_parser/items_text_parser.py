"""Text-line based receipt item extraction."""

import re
from dataclasses import dataclass
from decimal import Decimal

from billzy.domain.receipt import ParsedItem

from .common import (
    CURRENCY_SYMBOLS,
    DEFAULT_PARSER_SETTINGS,
    MAX_NAME_LENGTH,
    MAX_QUANTITY,
    MIN_QUANTITY,
    ParserSettings,
    _normalize_whitespace,
    _price_in_range,
    _to_decimal,
)

# Price at end of line, separated from the label by whitespace: "Burger $12.99", "Fries 3,50"
TRAILING_PRICE_PATTERN = re.compile(r"\s(?P<amount>[$£€]?\d+[.,]\d{2})\s*$")

# Money token anywhere, not part of a longer number: "Burger$12.00", "2x6.00 Wings 12.00 ea"
ANYWHERE_PRICE_PATTERN = re.compile(r"(?<![\d.,])\$?(?P<amount>\d{1,4}[.,]\d{2})(?![\d])")

# Leading quantity: "2 Mocktail", "2x Mocktail", "3 × Taco". "12oz Steak" is not a quantity.
QUANTITY_PATTERN = re.compile(r"^(?P<qty>\d+)(?:\s*[x×](?![a-z])|\s)\s*(?P<name>\S.*)$", re.IGNORECASE)

# Only digits, whitespace, currency and number punctuation.
NUMERIC_NOISE_PATTERN = re.compile(r"^[\d\s$£€.,:;%#*/+\-()]+$")


@dataclass(frozen=True)
class PriceMatch:
    """Amount found on a candidate line plus the text before it."""

    price: Decimal
    rest: str
    # True when found by the anywhere-in-line fallback.
    uncertain: bool = False


def _extract_trailing_price(line: str) -> PriceMatch | None:
    match = TRAILING_PRICE_PATTERN.search(line)
    if not match:
        return None
    price = _to_decimal(match.group("amount"))
    if price is None:
        return None
    rest = line[: match.start()].strip().rstrip(CURRENCY_SYMBOLS).strip()
    return PriceMatch(price=price, rest=rest)


def _extract_anywhere_price(line: str) -> PriceMatch | None:
    matches = list(ANYWHERE_PRICE_PATTERN.finditer(line))
    if not matches:
        return None
    # Receipts print the price after the name; the rightmost token wins.
    match = matches[-1]
    price = _to_decimal(match.group("amount"))
    if price is None:
        return None
    rest = re.sub(r"[\s$]+$", "", line[: match.start()])
    return PriceMatch(price=price, rest=rest.strip(), uncertain=True)


def extract_price(line: str, settings: ParserSettings = DEFAULT_PARSER_SETTINGS) -> PriceMatch | None:
    """
    Find the item price on a candidate line.

    Strategy order:
    1. Two-decimal amount at the end of the line, preceded by whitespace
    2. Rightmost money token anywhere in the line (OCR dropped the space)

    A trailing match with an empty label rejects the whole line. Prices
    outside the configured range reject the line as well; nothing is clamped.

    Returns:
        PriceMatch, or None if the line carries no usable price
    """
    found = _extract_trailing_price(line)
    if found is not None:
        if not found.rest:
            return None
    else:
        found = _extract_anywhere_price(line)
        if found is None:
            return None

    if not _price_in_range(found.price, settings):
        return None
    return found


def split_quantity(rest: str) -> tuple[int, str]:
    """Split a leading quantity off an item label; default to quantity 1."""
    match = QUANTITY_PATTERN.match(rest)
    if match:
        quantity = int(match.group("qty"))
        name = match.group("name").strip()
        if MIN_QUANTITY <= quantity <= MAX_QUANTITY and name:
            return quantity, name
    return 1, rest


def is_plausible_item_name(name: str) -> bool:
    """Return True if text could be an item name rather than OCR noise."""
    if len(name) < 2 or len(name) > MAX_NAME_LENGTH:
        return False
    letters = sum(1 for c in name if c.isalpha())
    if letters < 2:
        return False
    if NUMERIC_NOISE_PATTERN.match(name):
        return False
    noise = sum(1 for c in name if not c.isalpha() and not c.isspace())
    if noise > len(name) / 2:
        return False
    return True


def _extract_item(line: str, settings: ParserSettings = DEFAULT_PARSER_SETTINGS) -> ParsedItem | None:
    """Turn a candidate line into an item, or None if it is not a usable item line."""
    found = extract_price(line, settings)
    if found is None:
        return None

    quantity, name = split_quantity(found.rest)
    name = _normalize_whitespace(name)
    if not is_plausible_item_name(name):
        return None

    return ParsedItem(
        name=name,
        price=found.price,
        quantity=quantity,
        uncertain=found.uncertain and settings.flag_uncertain,
    )
