"""Core domain models for billzy.

This module provides the data models shared across the project:
- ParsedItem, ReceiptTotals, ParseResult: receipt text parsing models
- Person, SplitItem, Allocation, BreakdownLine: bill splitting models

Usage:
    from billzy.domain import ParseResult, Person, SplitItem
"""

from billzy.domain.receipt import ParsedItem, ParseResult, ReceiptTotals
from billzy.domain.split import UNSORTED_MERCHANT, Allocation, BreakdownLine, Person, SplitItem

__all__ = [
    "ParsedItem",
    "ParseResult",
    "ReceiptTotals",
    "Person",
    "SplitItem",
    "Allocation",
    "BreakdownLine",
    "UNSORTED_MERCHANT",
]
