"""In-memory bill splitting session.

Holds the mutable state around the pure parser and allocator: the people
roster, the assignable items and the receipts they came from. Identifiers
are generated here (``p1``, ``i1``, ``r1``...), never inside the parser or
allocator. Nothing is persisted.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from decimal import Decimal

from billzy.application.receipts.scan import ScannedReceipt
from billzy.domain.receipt import ParseResult
from billzy.domain.split import Allocation, Person, SplitItem
from billzy.runtime import get_logger
from billzy.split.allocator import allocate
from billzy.split.formatter import format_summary_text

logger = get_logger(__name__)

MAX_PEOPLE = 20
NEW_ITEM_NAME = "New item"


class SplitSessionError(ValueError):
    """Raised for invalid session operations (unknown ids, full roster, bad edits)."""


@dataclass(frozen=True)
class ReceiptEntry:
    """A receipt whose items were added to the session."""

    id: str
    label: str
    merchant: str | None = None


class SplitSession:
    """People, items and receipts for one bill split."""

    def __init__(self) -> None:
        self.people: list[Person] = []
        self.items: list[SplitItem] = []
        self.receipts: list[ReceiptEntry] = []
        self.warnings: list[str] = []
        self._person_ids = itertools.count(1)
        self._item_ids = itertools.count(1)
        self._receipt_ids = itertools.count(1)

    # --- People ---
    def add_person(self, name: str = "") -> Person:
        if len(self.people) >= MAX_PEOPLE:
            raise SplitSessionError(f"At most {MAX_PEOPLE} people can share a bill")
        person = Person(id=f"p{next(self._person_ids)}", name=name.strip())
        self.people.append(person)
        return person

    def remove_person(self, person_id: str) -> None:
        """Remove a person and drop them from every item they were assigned to."""
        person = self._find_person(person_id)
        self.people.remove(person)
        for item in self.items:
            item.assignee_ids.discard(person_id)

    def set_person_name(self, person_id: str, name: str) -> None:
        self._find_person(person_id).name = name.strip()

    # --- Receipts ---
    def add_parsed_receipt(self, label: str, result: ParseResult, merchant: str | None = None) -> ReceiptEntry:
        """Turn parsed items into assignable items and keep the parse warnings."""
        receipt = ReceiptEntry(id=f"r{next(self._receipt_ids)}", label=label, merchant=merchant)
        self.receipts.append(receipt)
        for parsed in result.items:
            self.items.append(
                SplitItem(
                    id=f"i{next(self._item_ids)}",
                    name=parsed.name,
                    price=parsed.price,
                    quantity=parsed.quantity,
                    uncertain=parsed.uncertain,
                    receipt_id=receipt.id,
                    merchant=merchant,
                )
            )
        self.warnings.extend(result.warnings)
        logger.debug("Added receipt %s with %d item(s)", receipt.id, len(result.items))
        return receipt

    def add_scanned_receipt(self, scanned: ScannedReceipt) -> ReceiptEntry:
        return self.add_parsed_receipt(scanned.label, scanned.result, scanned.merchant)

    def remove_receipt(self, receipt_id: str) -> None:
        """Remove a receipt together with all items parsed from it."""
        for receipt in self.receipts:
            if receipt.id == receipt_id:
                break
        else:
            raise SplitSessionError(f"Unknown receipt: {receipt_id}")
        self.receipts.remove(receipt)
        self.items = [item for item in self.items if item.receipt_id != receipt_id]

    # --- Items ---
    def add_item(self, name: str = NEW_ITEM_NAME, price: Decimal = Decimal("0")) -> SplitItem:
        """Add a manual item row (not tied to any receipt)."""
        if price < 0:
            raise SplitSessionError(f"Item price must not be negative: {price}")
        item = SplitItem(id=f"i{next(self._item_ids)}", name=name.strip() or NEW_ITEM_NAME, price=price)
        self.items.append(item)
        return item

    def edit_item(self, item_id: str, name: str | None = None, price: Decimal | None = None) -> SplitItem:
        """
        Correct an item by hand.

        A blank name keeps the old one. A new price clears the uncertain flag,
        since a person has now checked it.
        """
        item = self._find_item(item_id)
        if name is not None and name.strip():
            item.name = name.strip()
        if price is not None:
            if price < 0:
                raise SplitSessionError(f"Item price must not be negative: {price}")
            item.price = price
            item.uncertain = False
        return item

    def remove_item(self, item_id: str) -> None:
        self.items.remove(self._find_item(item_id))

    def set_assigned(self, item_id: str, person_id: str, assigned: bool = True) -> None:
        """Add or remove a person from an item's assignee set."""
        item = self._find_item(item_id)
        self._find_person(person_id)
        if assigned:
            item.assignee_ids.add(person_id)
        else:
            item.assignee_ids.discard(person_id)

    # --- Results ---
    def allocate(self) -> Allocation:
        return allocate(self.items, self.people)

    def summary_text(self) -> str:
        return format_summary_text(self.allocate(), self.people)

    def _find_person(self, person_id: str) -> Person:
        for person in self.people:
            if person.id == person_id:
                return person
        raise SplitSessionError(f"Unknown person: {person_id}")

    def _find_item(self, item_id: str) -> SplitItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise SplitSessionError(f"Unknown item: {item_id}")
