"""Receipt scan workflow orchestration."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from billzy.domain.receipt import ParseResult
from billzy.receipt.ocr_parser.common import DEFAULT_PARSER_SETTINGS, ParserSettings
from billzy.receipt.ocr_parser.fields_parser import suggest_merchant_name
from billzy.receipt.ocr_result_parser import parse_receipt_text
from billzy.runtime import get_logger
from billzy.runtime.ocr_client import DEFAULT_OCR_URL, OCRServiceUnavailable, call_ocr_service

logger = get_logger(__name__)

ScanStatus = Literal[
    "file_not_found",
    "ocr_unavailable",
    "parsed",
]


@dataclass(frozen=True)
class ScannedReceipt:
    """Parsed receipt text plus its suggested merchant label."""

    label: str
    result: ParseResult
    merchant: str | None = None


@dataclass(frozen=True)
class ReceiptScanRequest:
    """Inputs for scanning one receipt image."""

    image_path: Path
    ocr_url: str = DEFAULT_OCR_URL
    settings: ParserSettings = DEFAULT_PARSER_SETTINGS
    recognize_text: Callable[[Path, str], str] = call_ocr_service


@dataclass(frozen=True)
class ReceiptScanResult:
    """Outcome from scanning one receipt image."""

    status: ScanStatus
    image_path: Path
    receipt: ScannedReceipt | None = None
    error: str | None = None


@dataclass(frozen=True)
class BatchScanRequest:
    """Inputs for scanning several receipt images in submission order."""

    image_paths: tuple[Path, ...]
    ocr_url: str = DEFAULT_OCR_URL
    settings: ParserSettings = DEFAULT_PARSER_SETTINGS
    recognize_text: Callable[[Path, str], str] = call_ocr_service


@dataclass(frozen=True)
class BatchScanResult:
    """Per-image outcomes plus all warnings in submission order."""

    results: tuple[ReceiptScanResult, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def receipts(self) -> list[ScannedReceipt]:
        return [r.receipt for r in self.results if r.receipt is not None]


def analyze_receipt_text(
    label: str,
    text: str,
    settings: ParserSettings = DEFAULT_PARSER_SETTINGS,
) -> ScannedReceipt:
    """Parse items and suggest a merchant for already-recognized text."""
    result = parse_receipt_text(text, settings)
    merchant = suggest_merchant_name(text, max_lines=settings.merchant_scan_lines)
    return ScannedReceipt(label=label, result=result, merchant=merchant)


def run_receipt_scan(request: ReceiptScanRequest) -> ReceiptScanResult:
    """Run scan flow for one image: OCR -> parse -> merchant suggestion."""
    if not request.image_path.exists():
        return ReceiptScanResult(
            status="file_not_found",
            image_path=request.image_path,
            error=f"Receipt file not found: {request.image_path}",
        )

    try:
        text = request.recognize_text(request.image_path, request.ocr_url)
    except OCRServiceUnavailable as exc:
        return ReceiptScanResult(
            status="ocr_unavailable",
            image_path=request.image_path,
            error=str(exc),
        )

    receipt = analyze_receipt_text(request.image_path.name, text, request.settings)
    return ReceiptScanResult(status="parsed", image_path=request.image_path, receipt=receipt)


def run_batch_scan(request: BatchScanRequest) -> BatchScanResult:
    """
    Scan each image independently, in submission order.

    A receipt that cannot be read does not stop the batch; it becomes a
    warning and the remaining images are still scanned.
    """
    results: list[ReceiptScanResult] = []
    warnings: list[str] = []
    for image_path in request.image_paths:
        result = run_receipt_scan(
            ReceiptScanRequest(
                image_path=image_path,
                ocr_url=request.ocr_url,
                settings=request.settings,
                recognize_text=request.recognize_text,
            )
        )
        results.append(result)
        if result.receipt is not None:
            warnings.extend(result.receipt.result.warnings)
        else:
            logger.warning("Skipping %s: %s", image_path.name, result.error)
            warnings.append(f'Receipt "{image_path.name}" could not be read: {result.error}')

    return BatchScanResult(results=tuple(results), warnings=tuple(warnings))
