"""Plain-text rendering of a split allocation."""

from collections.abc import Sequence

from billzy.domain.split import Allocation, Person

from .allocator import format_amount, group_breakdown


def format_summary_text(allocation: Allocation, people: Sequence[Person]) -> str:
    """One ``Name: $amount`` line per person, in roster order."""
    lines = []
    for position, person in enumerate(people):
        amount = format_amount(allocation.owed_by(person.id))
        lines.append(f"{person.display_name(position)}: ${amount}")
    return "\n".join(lines)


def _format_rows_aligned(rows: list[tuple[str, str]], indent: str = "    ") -> list[str]:
    """Format (label, amount) rows with right-aligned amounts."""
    if not rows:
        return []
    max_label_len = max(len(label) for label, _ in rows)
    max_amount_len = max(len(amount) for _, amount in rows)
    return [f"{indent}{label.ljust(max_label_len)}  {amount.rjust(max_amount_len)}" for label, amount in rows]


def format_breakdown(allocation: Allocation, people: Sequence[Person]) -> str:
    """
    Render each person's items grouped by merchant, with a subtotal.

    Example::

        Alice  $9.00
          Luigi's
            Pizza (2-way split)  $9.00
    """
    blocks: list[str] = []
    for position, person in enumerate(people):
        lines = [f"{person.display_name(position)}  ${format_amount(allocation.owed_by(person.id))}"]
        person_lines = allocation.breakdown.get(person.id, [])
        if not person_lines:
            lines.append("  (nothing assigned)")
        for merchant, group in group_breakdown(person_lines):
            lines.append(f"  {merchant}")
            lines.extend(_format_rows_aligned([(line.label, f"${format_amount(line.amount)}") for line in group]))
        blocks.append("\n".join(lines))

    footer = f"Total: ${format_amount(allocation.total)} · Assigned: ${format_amount(allocation.assigned_total)}"
    blocks.append(footer)
    return "\n\n".join(blocks)
