"""Allocate item charges across the people who shared them."""

from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from billzy.domain.split import UNSORTED_MERCHANT, Allocation, BreakdownLine, Person, SplitItem

CENT = Decimal("0.01")


def item_label(item: SplitItem, split_count: int) -> str:
    """Label an item for a breakdown: ``"2x Wings (3-way split)"``."""
    label = f"{item.quantity}x {item.name}" if item.quantity > 1 else item.name
    if split_count > 1:
        label = f"{label} ({split_count}-way split)"
    return label


def allocate(items: Sequence[SplitItem], people: Sequence[Person]) -> Allocation:
    """
    Split each item's price evenly between its assignees.

    Pure and idempotent: recomputed from scratch on every call, inputs are
    never mutated. Items without assignees count towards ``total`` only.
    Assignee ids missing from ``people`` still count towards the divisor but
    never receive a payout. Shares are kept unrounded; round only for display
    with ``format_amount``.
    """
    owed: dict[str, Decimal] = {person.id: Decimal("0") for person in people}
    breakdown: dict[str, list[BreakdownLine]] = {person.id: [] for person in people}
    total = Decimal("0")
    assigned_total = Decimal("0")

    for item in items:
        total += item.price
        if not item.assignee_ids:
            continue

        assigned_total += item.price
        split_count = len(item.assignee_ids)
        share = item.price / split_count
        line = BreakdownLine(
            merchant=item.merchant or UNSORTED_MERCHANT,
            label=item_label(item, split_count),
            amount=share,
        )
        for person_id in item.assignee_ids:
            if person_id not in owed:
                continue
            owed[person_id] += share
            breakdown[person_id].append(line)

    return Allocation(owed=owed, breakdown=breakdown, total=total, assigned_total=assigned_total)


def group_breakdown(lines: Iterable[BreakdownLine]) -> list[tuple[str, list[BreakdownLine]]]:
    """Group breakdown lines by merchant in first-seen order, unsorted bucket last."""
    groups: dict[str, list[BreakdownLine]] = {}
    for line in lines:
        groups.setdefault(line.merchant, []).append(line)

    ordered = [(merchant, group) for merchant, group in groups.items() if merchant != UNSORTED_MERCHANT]
    if UNSORTED_MERCHANT in groups:
        ordered.append((UNSORTED_MERCHANT, groups[UNSORTED_MERCHANT]))
    return ordered


def format_amount(amount: Decimal) -> str:
    """Round half-up to cents for display."""
    return f"{amount.quantize(CENT, rounding=ROUND_HALF_UP):.2f}"
