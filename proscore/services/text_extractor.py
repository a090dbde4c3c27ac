"""
PDF text extraction for uploaded resumes.

Produces the plain text the scoring engine reads plus the file facts
(``FileSignal``) that feed the ATS file-format sub-score.
"""
import io
import logging
from dataclasses import dataclass

import pdfplumber

from proscore.scoring.types import FileSignal

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF"


class TextExtractionError(ValueError):
    """The upload could not be read as a PDF."""


@dataclass(frozen=True)
class ExtractedDocument:
    text: str
    page_count: int
    file_size: int
    garbled: bool

    def file_signal(self) -> FileSignal:
        return FileSignal(
            is_pdf=True,
            text_extractable=not self.garbled,
            page_count=self.page_count,
            file_size=self.file_size,
        )


def is_pdf(data: bytes) -> bool:
    return data[:1024].lstrip().startswith(PDF_MAGIC)


def is_text_garbled(text: str) -> bool:
    """Check if extracted text appears garbled/corrupted."""
    if not text or len(text.strip()) < 50:
        return True

    # Count alphanumeric vs special characters
    alnum_count = sum(1 for c in text if c.isalnum())
    total_count = len(text.replace(" ", "").replace("\n", ""))

    if total_count == 0:
        return True

    # Below 70% alphanumeric usually means a broken font encoding
    return alnum_count / total_count < 0.7


def extract_with_pdfplumber(pdf_bytes: bytes) -> tuple[str, int]:
    """Extract text and page count using pdfplumber."""
    pages = []
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        page_count = len(pdf.pages)
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                pages.append(page_text)
    return "\n".join(pages).strip(), page_count


def extract_pdf_document(pdf_bytes: bytes) -> ExtractedDocument:
    """
    Read an uploaded PDF.

    Raises:
        TextExtractionError: The bytes are not a PDF or pdfplumber cannot open them.
    """
    if not is_pdf(pdf_bytes):
        raise TextExtractionError("Uploaded file is not a PDF")

    try:
        text, page_count = extract_with_pdfplumber(pdf_bytes)
    except Exception as exc:
        logger.error(f"pdfplumber extraction failed: {exc}")
        raise TextExtractionError(f"Could not read PDF: {exc}") from exc

    garbled = is_text_garbled(text)
    if garbled:
        logger.warning(f"Extracted text looks garbled ({len(text)} chars, {page_count} pages)")
    else:
        logger.info(f"Extracted {len(text)} chars from {page_count} PDF pages")

    return ExtractedDocument(text=text, page_count=page_count, file_size=len(pdf_bytes), garbled=garbled)
