"""Data models for receipt text parsing."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class ParsedItem:
    """A single line item read from receipt text."""

    name: str
    price: Decimal
    quantity: int = 1
    # True when the price came from the anywhere-in-line fallback.
    uncertain: bool = False


@dataclass(frozen=True)
class ReceiptTotals:
    """Summary amounts detected on a receipt (last match wins)."""

    total: Decimal | None = None
    tax: Decimal | None = None


@dataclass(frozen=True)
class ParseResult:
    """Output of one receipt text parse."""

    items: tuple[ParsedItem, ...] = ()
    totals: ReceiptTotals = field(default_factory=ReceiptTotals)
    warnings: tuple[str, ...] = ()

    @property
    def item_sum(self) -> Decimal:
        return sum((item.price for item in self.items), Decimal("0"))
