import time
from decimal import Decimal

import pytest
from billzy.receipt.ocr_parser.line_classifier import CLASSIFICATION_RULES, classify_line

PROMO_LINE = ("Thank you for dining with us, please come again soon " * 3).strip()


@pytest.mark.parametrize(
    ("line", "kind", "rule"),
    [
        ("TOTAL 5.75", "total", "total_keyword"),
        ("Total Due $12.00", "total", "total_keyword"),
        ("Amount 7.00", "total", "total_keyword"),
        ("Balance 3.00", "total", "total_keyword"),
        ("Tax 0.80", "tax", "tax_keyword"),
        ("VAT 1.20", "tax", "tax_keyword"),
        ("GST 5% 0.50", "tax", "tax_keyword"),
        ("Subtotal 9.50", "ignored", "subtotal_keyword"),
        ("Sub Total 9.50", "ignored", "subtotal_keyword"),
        ("SUB-TOTAL 9.50", "ignored", "subtotal_keyword"),
        ("ab", "metadata", "too_short"),
        ("12/25/2023 14:30", "metadata", "date_time"),
        ("12/25/23 2:30 PM", "metadata", "date_time"),
        ("2:30 pm", "metadata", "date_time"),
        ("Server: John", "metadata", "header_field"),
        ("Table 12", "metadata", "header_field"),
        ("Guests: 4", "metadata", "header_field"),
        ("Check #4821", "metadata", "header_field"),
        ("#4821", "metadata", "header_field"),
        ("123 Main St", "metadata", "address"),
        ("Springfield, IL 62704", "metadata", "address"),
        ("Portland OR 97201-1234", "metadata", "address"),
        ("555-0100", "metadata", "phone_number"),
        ("(217) 555-0100", "metadata", "phone_number"),
        ("VISA ************4242", "metadata", "payment_artifact"),
        ("Chip Read", "metadata", "payment_artifact"),
        ("xxxx xxxx xxxx 1234", "metadata", "payment_artifact"),
        ("123456", "metadata", "payment_artifact"),
        (PROMO_LINE, "metadata", "promotional_text"),
        ("Coffee 3.50", "candidate", "default"),
        ("Dr Pepper 2.50", "candidate", "default"),
    ],
)
def test_classify_line(line: str, kind: str, rule: str) -> None:
    classification = classify_line(line)

    assert classification.kind == kind
    assert classification.rule == rule


def test_total_keyword_wins_over_tax_keyword() -> None:
    classification = classify_line("Total Tax Included 10.00")

    assert classification.kind == "total"
    assert classification.amount == Decimal("10.00")


def test_total_and_tax_lines_carry_amount() -> None:
    assert classify_line("TOTAL $1,234.56").amount == Decimal("1234.56")
    assert classify_line("Tax 0,80").amount == Decimal("0.80")
    # Two-decimal amount beats the rate percentage.
    assert classify_line("GST 5% 0.50").amount == Decimal("0.50")


def test_total_line_without_number_has_no_amount() -> None:
    classification = classify_line("TOTAL")

    assert classification.kind == "total"
    assert classification.amount is None


def test_metadata_and_candidate_lines_have_no_amount() -> None:
    assert classify_line("Server: John").amount is None
    assert classify_line("Coffee 3.50").amount is None


def test_long_line_ending_in_price_is_not_promotional() -> None:
    line = "Chef special " + "x" * 120 + " 12.00"

    assert classify_line(line).rule != "promotional_text"


def test_rule_order_starts_with_keywords() -> None:
    assert [rule for rule, _, _ in CLASSIFICATION_RULES[:3]] == [
        "total_keyword",
        "tax_keyword",
        "subtotal_keyword",
    ]


@pytest.mark.parametrize(
    "line",
    [
        "x" * 2000,
        "*" * 2000,
        "xx - " * 400,
        "X" * 2000 + " 12",
    ],
)
def test_long_mask_like_lines_classify_quickly(line: str) -> None:
    start = time.perf_counter()
    classification = classify_line(line)
    elapsed = time.perf_counter() - start

    assert classification.rule == "promotional_text"
    assert elapsed < 1.0


def test_masked_card_variants_are_payment_artifacts() -> None:
    for line in ("xxxx-xxxx-xxxx-1234", "Card ****4242", "XXXX XXXX 9876"):
        assert classify_line(line).rule == "payment_artifact"


@pytest.mark.parametrize(
    ("line", "amount"),
    [
        ("TOTAL 1,234", Decimal("1234")),
        ("TOTAL 12,345,678", Decimal("12345678")),
        ("TOTAL 1,234.5", Decimal("1234.5")),
        ("TOTAL 12.5", Decimal("12.5")),
        ("Tax 5", Decimal("5")),
        ("Tax 0,80", Decimal("0.80")),
    ],
)
def test_comma_is_decimal_only_before_two_digits(line: str, amount: Decimal) -> None:
    assert classify_line(line).amount == amount
