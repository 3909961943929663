"""Format parsed receipt data for review."""

from billzy.domain.receipt import ParseResult

from .ocr_parser.common import TOTAL_MISMATCH_WARNING

UNKNOWN_MERCHANT_LABEL = "Receipt"


def _format_item_line(index: int, name: str, quantity: int, price_str: str, uncertain: bool) -> str:
    qty_str = f" x{quantity}" if quantity > 1 else ""
    flag = "  [?]" if uncertain else ""
    return f"  {index}. {name}{qty_str} - ${price_str}{flag}"


def format_parse_result(result: ParseResult, merchant: str | None = None, source: str | None = None) -> str:
    """
    Render a ParseResult as a plain-text review block.

    Uncertain items are marked ``[?]`` and warnings are listed after the
    items, in emission order.
    """
    lines = ["=" * 60]
    header = merchant or UNKNOWN_MERCHANT_LABEL
    if source:
        header = f"{header} ({source})"
    lines.append(header)
    lines.append("=" * 60)

    lines.append(f"Items ({len(result.items)}):")
    for i, item in enumerate(result.items, 1):
        lines.append(_format_item_line(i, item.name, item.quantity, f"{item.price:.2f}", item.uncertain))

    lines.append(f"Item sum: ${result.item_sum:.2f}")
    if result.totals.total is not None:
        marker = ""
        if TOTAL_MISMATCH_WARNING in result.warnings:
            marker = "  (does not match items)"
        lines.append(f"Total: ${result.totals.total:.2f}{marker}")
    if result.totals.tax is not None:
        lines.append(f"Tax: ${result.totals.tax:.2f}")

    if result.warnings:
        lines.append("")
        lines.append("Warnings:")
        for warning in result.warnings:
            lines.append(f"  ! {warning}")
    return "\n".join(lines)
