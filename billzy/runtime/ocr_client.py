"""Client for the external OCR service (image in, recognized text out)."""

import mimetypes
import time
from pathlib import Path

import httpx

from billzy.runtime.logging import get_logger

logger = get_logger(__name__)

DEFAULT_OCR_URL = "http://localhost:8001"
OCR_TIMEOUT_SECONDS = 60.0


class OCRServiceUnavailable(RuntimeError):
    """Raised when the OCR service cannot be reached or returns an error."""


def _extract_text(payload: object) -> str:
    """Pull the recognized text out of an OCR JSON response."""
    if isinstance(payload, dict):
        for key in ("full_text", "text"):
            value = payload.get(key)
            if isinstance(value, str):
                return value
    raise OCRServiceUnavailable("OCR service response has no recognized text")


def call_ocr_service(receipt_path: Path, ocr_url: str = DEFAULT_OCR_URL) -> str:
    """
    Send one receipt image to the OCR service and return its recognized text.

    Raises:
        OCRServiceUnavailable: on connection errors, non-200 responses or
            responses without text.
    """
    ocr_url = ocr_url.rstrip("/")
    content_type = mimetypes.guess_type(receipt_path.name)[0] or "application/octet-stream"
    logger.info("Sending %s to OCR service at %s...", receipt_path.name, ocr_url)

    try:
        image_bytes = receipt_path.read_bytes()

        start_time = time.time()
        response = httpx.post(
            f"{ocr_url}/ocr",
            files={"file": (receipt_path.name, image_bytes, content_type)},
            timeout=OCR_TIMEOUT_SECONDS,
        )
        elapsed_time = time.time() - start_time
        logger.info("OCR service returned in %.2f seconds", elapsed_time)

        if response.status_code != 200:
            # Response body may contain receipt text; keep it out of the log.
            logger.error("OCR service error: %s", response.status_code)
            raise OCRServiceUnavailable(f"OCR service error: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise OCRServiceUnavailable("OCR service returned invalid JSON") from e
        return _extract_text(payload)

    except httpx.RequestError as e:
        logger.error("Failed to connect to OCR service: %s", e)
        raise OCRServiceUnavailable(f"Failed to connect to OCR service: {e}") from e
