"""
Decoding of report PDFs into ordered text lines.
"""

import io
import logging
from typing import List

import pdfplumber
import PyPDF2
from PyPDF2.errors import PdfReadError

from ..config import Config
from ..exceptions import MalformedTableError

logger = logging.getLogger(__name__)


def _page_texts_pypdf2(document_bytes: bytes) -> List[str]:
    try:
        reader = PyPDF2.PdfReader(io.BytesIO(document_bytes))
    except PdfReadError as e:
        raise MalformedTableError(f"Unreadable PDF document: {e}") from e
    logger.info(f"PDF has {len(reader.pages)} pages")
    return [page.extract_text() or "" for page in reader.pages]


def _page_texts_pdfplumber(document_bytes: bytes) -> List[str]:
    try:
        pdf = pdfplumber.open(io.BytesIO(document_bytes))
    except Exception as e:
        # pdfminer parse failures surface under several exception types
        raise MalformedTableError(f"Unreadable PDF document: {e}") from e
    with pdf:
        logger.info(f"PDF has {len(pdf.pages)} pages")
        return [page.extract_text() or "" for page in pdf.pages]


EXTRACTORS = {
    "pypdf2": _page_texts_pypdf2,
    "pdfplumber": _page_texts_pdfplumber,
}


def split_lines(text: str) -> List[str]:
    """Split text into trimmed, non-blank lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def extract_lines(document_bytes: bytes, engine: str = Config.TEXT_EXTRACTOR) -> List[str]:
    """
    Extract the text lines of every page, in document order.

    Args:
        document_bytes: Raw PDF bytes
        engine: "pypdf2" or "pdfplumber"

    Returns:
        Trimmed, non-blank lines

    Raises:
        MalformedTableError: If the document cannot be read
    """
    if engine not in EXTRACTORS:
        raise ValueError(f"Unknown text extractor: {engine}")

    pages = EXTRACTORS[engine](document_bytes)

    lines = []
    for page_text in pages:
        lines.extend(split_lines(page_text))

    logger.info(f"Extracted {len(lines)} text lines using {engine}")
    return lines
