"""Bill splitting workflows."""

from billzy.application.split.session import MAX_PEOPLE, ReceiptEntry, SplitSession, SplitSessionError

__all__ = [
    "MAX_PEOPLE",
    "ReceiptEntry",
    "SplitSession",
    "SplitSessionError",
]
