"""Uploaded document handling and PDF text extraction."""

from .extractor import (
    PDF_ERROR_PREFIX,
    EngineLoader,
    extract_pdf_text,
    extract_uploads,
    join_page_fragments,
)
from .uploads import PDF_MIME_TYPE, UploadedFile

__all__ = [
    "PDF_ERROR_PREFIX",
    "PDF_MIME_TYPE",
    "EngineLoader",
    "UploadedFile",
    "extract_pdf_text",
    "extract_uploads",
    "join_page_fragments",
]
