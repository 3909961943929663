from decimal import Decimal

from billzy.domain.receipt import ParsedItem, ParseResult, ReceiptTotals
from billzy.receipt.formatter import format_parse_result
from billzy.receipt.ocr_result_parser import parse_receipt_text


def test_format_parse_result_lists_items_and_totals() -> None:
    result = ParseResult(
        items=(
            ParsedItem(name="Mocktail", price=Decimal("12.00"), quantity=2),
            ParsedItem(name="Fries", price=Decimal("3.50")),
        ),
        totals=ReceiptTotals(total=Decimal("15.50"), tax=Decimal("1.20")),
    )

    output = format_parse_result(result, merchant="Joe's Diner", source="diner.txt")

    assert "Joe's Diner (diner.txt)" in output
    assert "Items (2):" in output
    assert "  1. Mocktail x2 - $12.00" in output
    assert "  2. Fries - $3.50" in output
    assert "Item sum: $15.50" in output
    assert "Total: $15.50" in output
    assert "Tax: $1.20" in output
    assert "Warnings:" not in output


def test_format_parse_result_flags_uncertain_items_and_mismatch() -> None:
    result = parse_receipt_text("Burger$12.00\nTOTAL 20.00")

    output = format_parse_result(result)

    assert output.splitlines()[1] == "Receipt"
    assert "Burger - $12.00  [?]" in output
    assert "Total: $20.00  (does not match items)" in output
    assert "Warnings:" in output
    assert sum(1 for line in output.splitlines() if line.startswith("  ! ")) == 2
