"""Receipt workflows."""

from billzy.application.receipts.scan import (
    BatchScanRequest,
    BatchScanResult,
    ReceiptScanRequest,
    ReceiptScanResult,
    ScannedReceipt,
    analyze_receipt_text,
    run_batch_scan,
    run_receipt_scan,
)

__all__ = [
    "BatchScanRequest",
    "BatchScanResult",
    "ReceiptScanRequest",
    "ReceiptScanResult",
    "ScannedReceipt",
    "analyze_receipt_text",
    "run_batch_scan",
    "run_receipt_scan",
]
