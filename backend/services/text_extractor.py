"""Text extraction from uploaded resume files (PDF, DOCX, TXT)."""

import io
import logging
from abc import ABC, abstractmethod
from pathlib import PurePath

import pdfplumber
from docx import Document

from services.errors import TextExtractionError

logger = logging.getLogger(__name__)

UNSUPPORTED_FILE = "Unsupported file type. Please upload a PDF, DOCX or TXT file."


class TextExtractor(ABC):
    """Turns raw file bytes into plain text."""

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Return the text of the document. Raises TextExtractionError."""


class PdfTextExtractor(TextExtractor):
    def extract(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as e:
            logger.warning("PDF parsing failed: %s", e)
            raise TextExtractionError("Failed to parse PDF file.") from e
        return "\n".join(pages).strip()


class DocxTextExtractor(TextExtractor):
    def extract(self, content: bytes) -> str:
        try:
            doc = Document(io.BytesIO(content))
        except Exception as e:
            logger.warning("DOCX parsing failed: %s", e)
            raise TextExtractionError("Failed to parse Word document.") from e
        return "\n".join(p.text for p in doc.paragraphs).strip()


class PlainTextExtractor(TextExtractor):
    def extract(self, content: bytes) -> str:
        try:
            return content.decode("utf-8-sig").strip()
        except UnicodeDecodeError as e:
            raise TextExtractionError("Failed to read resume file.") from e


_EXTRACTORS: dict[str, type[TextExtractor]] = {
    ".pdf": PdfTextExtractor,
    ".docx": DocxTextExtractor,
    ".txt": PlainTextExtractor,
}


def get_extractor(filename: str) -> TextExtractor:
    """Pick an extractor by file extension."""
    suffix = PurePath(filename or "").suffix.lower()
    extractor_cls = _EXTRACTORS.get(suffix)
    if extractor_cls is None:
        raise TextExtractionError(UNSUPPORTED_FILE)
    return extractor_cls()


def extract_text(filename: str, content: bytes) -> str:
    return get_extractor(filename).extract(content)
