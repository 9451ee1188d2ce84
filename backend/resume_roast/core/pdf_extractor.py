from __future__ import annotations

import io
import re
from typing import Optional

from pypdf import PdfReader

from resume_roast.config import get_settings


class ExtractionError(ValueError):
    """Raised when an upload cannot be turned into résumé text."""
    status_code = 400


class UnsupportedFileTypeError(ExtractionError):
    status_code = 415


class FileTooLargeError(ExtractionError):
    status_code = 413


class PDFParseError(ExtractionError):
    status_code = 400


class InsufficientTextError(ExtractionError):
    status_code = 422


def _normalize(text: str) -> str:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    # collapse excessive spaces
    text = re.sub(r"[ \t]+", " ", text)
    # collapse 3+ newlines into 2
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def is_pdf_upload(filename: str, content_type: Optional[str] = None) -> bool:
    if content_type and "pdf" in content_type.lower():
        return True
    return (filename or "").lower().endswith(".pdf")


def _extract_pdf_text(file_bytes: bytes) -> str:
    try:
        reader = PdfReader(io.BytesIO(file_bytes))
        pages = [p.extract_text() or "" for p in reader.pages]
    except Exception as e:
        raise PDFParseError(
            f"Failed to parse PDF: {e}. Please ensure it's a valid PDF file "
            "with extractable text."
        ) from e
    return _normalize("\n\n".join(pages))


def extract_resume_text(
    file_bytes: bytes,
    filename: str,
    content_type: Optional[str] = None,
    max_bytes: Optional[int] = None,
    min_chars: Optional[int] = None,
) -> str:
    """
    Pull plain text out of an uploaded résumé PDF.

    Checks run in the order a user would hit them: file type, size,
    readability, then whether enough text came out.
    """
    settings = get_settings()
    max_bytes = settings.max_upload_bytes if max_bytes is None else max_bytes
    min_chars = settings.min_resume_chars if min_chars is None else min_chars

    if not is_pdf_upload(filename, content_type):
        raise UnsupportedFileTypeError("Please upload a PDF file! 📄")

    if len(file_bytes) > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise FileTooLargeError(
            f"File too large! Please upload a PDF smaller than {limit_mb}MB. 📏"
        )

    text = _extract_pdf_text(file_bytes)
    if not text:
        raise PDFParseError(
            "No text found in PDF. The PDF might be image-based or encrypted."
        )

    if len(text) < min_chars:
        raise InsufficientTextError(
            "This PDF seems to have very little text. Please ensure it's a "
            "text-based resume and not just images."
        )

    return text
