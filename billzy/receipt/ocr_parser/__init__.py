"""Composable OCR receipt text parser components."""

from .common import DEFAULT_PARSER_SETTINGS, ParserSettings, build_parser_settings
from .fields_parser import suggest_merchant_name
from .items_text_parser import PriceMatch, extract_price, is_plausible_item_name, split_quantity
from .line_classifier import LineClassification, classify_line

__all__ = [
    "DEFAULT_PARSER_SETTINGS",
    "LineClassification",
    "ParserSettings",
    "PriceMatch",
    "build_parser_settings",
    "classify_line",
    "extract_price",
    "is_plausible_item_name",
    "split_quantity",
    "suggest_merchant_name",
]
