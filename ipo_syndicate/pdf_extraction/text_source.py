"""
PDF Text Source
---------------
Turns PDF bytes into per-page text with PyMuPDF.
"""

import logging

import fitz  # PyMuPDF

from .exceptions import MalformedDocumentError
from .models import DocumentText

logger = logging.getLogger(__name__)


class PDFTextExtractor:
    """Extracts page text from in-memory PDF documents."""

    def extract_text(self, data: bytes) -> DocumentText:
        """
        Extract the text of every page.

        Args:
            data: Raw PDF bytes

        Returns:
            Page texts in reading order

        Raises:
            MalformedDocumentError: If the bytes are empty, not a PDF,
                encrypted or contain no pages
        """
        if not data:
            raise MalformedDocumentError("Empty document")

        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise MalformedDocumentError(f"Unable to open PDF: {e}") from e

        with doc:
            if doc.needs_pass:
                raise MalformedDocumentError("PDF is encrypted")
            if doc.page_count == 0:
                raise MalformedDocumentError("PDF has no pages")

            pages = tuple(page.get_text() for page in doc)

        logger.debug(f"Extracted text from {len(pages)} pages")
        return pages
