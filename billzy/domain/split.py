"""Data models for splitting receipt charges between people."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

# Breakdown bucket for items that did not come from a named receipt.
UNSORTED_MERCHANT = "Other"


@dataclass
class Person:
    """Someone sharing the bill. An empty name gets a positional placeholder."""

    id: str
    name: str = ""

    def display_name(self, position: int) -> str:
        """Return the name, or ``Person N`` for the 0-based ``position``."""
        return self.name or f"Person {position + 1}"


@dataclass
class SplitItem:
    """An assignable item. The application owns and mutates ``assignee_ids``."""

    id: str
    name: str
    price: Decimal
    quantity: int = 1
    uncertain: bool = False
    assignee_ids: set[str] = field(default_factory=set)
    receipt_id: str | None = None
    merchant: str | None = None


@dataclass(frozen=True)
class BreakdownLine:
    """One person's share of one item."""

    merchant: str
    label: str
    amount: Decimal


@dataclass(frozen=True)
class Allocation:
    """Per-person amounts derived from the current items and people."""

    owed: dict[str, Decimal]
    breakdown: dict[str, list[BreakdownLine]]
    total: Decimal
    assigned_total: Decimal

    @property
    def unassigned_total(self) -> Decimal:
        return self.total - self.assigned_total

    def owed_by(self, person_id: str) -> Decimal:
        return self.owed.get(person_id, Decimal("0"))
