"""Render generated text documents as TXT, DOCX or PDF bytes."""

import html
import io
import logging
from abc import ABC, abstractmethod

from docx import Document

from services.errors import DocumentWriteError

logger = logging.getLogger(__name__)

PDF_CSS = """
@page {
    size: A4;
    margin: 2cm 2.5cm;
}

body {
    font-family: 'Helvetica Neue', Helvetica, Arial, sans-serif;
    font-size: 11pt;
    line-height: 1.5;
    color: #333;
}

p {
    margin: 0 0 0.4em 0;
    white-space: pre-wrap;
}
"""


class DocumentWriter(ABC):
    """Turns plain text into a downloadable document."""

    extension: str = ""
    media_type: str = ""

    @abstractmethod
    def write(self, text: str) -> bytes:
        """Render text. Raises DocumentWriteError."""


class PlainTextWriter(DocumentWriter):
    extension = "txt"
    media_type = "text/plain; charset=utf-8"

    def write(self, text: str) -> bytes:
        return text.encode("utf-8")


class DocxWriter(DocumentWriter):
    """One paragraph per line."""

    extension = "docx"
    media_type = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    def write(self, text: str) -> bytes:
        try:
            doc = Document()
            for line in text.split("\n"):
                doc.add_paragraph(line)
            buffer = io.BytesIO()
            doc.save(buffer)
        except Exception as e:
            logger.error("DOCX rendering failed: %s", e)
            raise DocumentWriteError("Could not create the Word document.") from e
        return buffer.getvalue()


def _text_to_html(text: str) -> str:
    paragraphs = "\n".join(
        f"<p>{html.escape(line) or '&nbsp;'}</p>" for line in text.split("\n")
    )
    return f"<!DOCTYPE html><html><head><meta charset=\"utf-8\"></head><body>{paragraphs}</body></html>"


class PdfWriter(DocumentWriter):
    """HTML-to-PDF through WeasyPrint, paginated by the page CSS."""

    extension = "pdf"
    media_type = "application/pdf"

    def write(self, text: str) -> bytes:
        try:
            # WeasyPrint needs system Pango libraries; import on first use
            from weasyprint import CSS, HTML

            return HTML(string=_text_to_html(text)).write_pdf(
                stylesheets=[CSS(string=PDF_CSS)]
            )
        except Exception as e:
            logger.error("PDF rendering failed: %s", e)
            raise DocumentWriteError("Could not create the PDF document.") from e


_WRITERS: dict[str, type[DocumentWriter]] = {
    "txt": PlainTextWriter,
    "docx": DocxWriter,
    "pdf": PdfWriter,
}


def get_writer(fmt: str) -> DocumentWriter:
    writer_cls = _WRITERS.get((fmt or "").lower())
    if writer_cls is None:
        raise DocumentWriteError(f"Unsupported document format: {fmt}")
    return writer_cls()
