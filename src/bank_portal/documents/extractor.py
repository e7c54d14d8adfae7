"""PDF text extraction for uploaded documents."""

import importlib
import io
import logging
import threading
from types import ModuleType
from typing import Callable, Iterable, Optional

from .uploads import PDF_MIME_TYPE, UploadedFile

logger = logging.getLogger(__name__)

PDF_ERROR_PREFIX = "Error reading PDF content: "


class EngineLoader:
    """
    Single-flight lazy loader for the shared parsing engine.
    The first caller loads and publishes the handle; callers arriving while the
    load is in flight wait for it and receive the same handle. Failed loads are
    not cached, so the next caller retries.
    """

    def __init__(self, load: Callable[[], ModuleType]):
        self._load = load
        self._lock = threading.Lock()
        self._handle: Optional[ModuleType] = None

    @property
    def loaded(self) -> bool:
        return self._handle is not None

    def get(self) -> ModuleType:
        handle = self._handle
        if handle is not None:
            return handle
        with self._lock:
            if self._handle is None:
                self._handle = self._load()
            return self._handle


_engine = EngineLoader(lambda: importlib.import_module("pypdf"))


def join_page_fragments(pages: Iterable[Iterable[str]]) -> str:
    """
    Fragments within a page are joined with a single space; each page is
    followed by a newline. Pages and fragments keep their given order.
    """
    text = ""
    for fragments in pages:
        text += " ".join(fragments) + "\n"
    return text


def _page_fragments(page) -> list[str]:
    """
    Text fragments of one page in the order the content stream reports them.
    Fragments that are empty or whitespace-only are dropped, so they add no
    extra separators to the joined page text.
    """
    fragments: list[str] = []

    def _collect(text, cm, tm, font_dict, font_size) -> None:
        fragment = text.strip("\r\n")
        if fragment.strip():
            fragments.append(fragment)

    page.extract_text(visitor_text=_collect)
    return fragments


def extract_pdf_text(upload: UploadedFile, *, engine: EngineLoader = _engine) -> str:
    """
    Extract the concatenated page text of a PDF upload.
    Never raises: on any failure returns PDF_ERROR_PREFIX + the error message,
    so callers must treat that sentinel as data.
    """
    try:
        pypdf = engine.get()
        reader = pypdf.PdfReader(io.BytesIO(upload.data))
        # Pages are parsed one at a time, in ascending order
        return join_page_fragments(_page_fragments(page) for page in reader.pages)
    except Exception as e:
        logger.warning("Could not extract text from %s: %s", upload.name, e)
        return f"{PDF_ERROR_PREFIX}{str(e) or 'Unknown error'}"


def extract_uploads(
    files: Iterable[UploadedFile], *, engine: EngineLoader = _engine
) -> dict[str, str]:
    """
    Extract text for every PDF in one upload action, one file at a time in
    list order. Returns {file name: text}; non-PDF files get no entry.
    """
    contents: dict[str, str] = {}
    for upload in files:
        if upload.mime_type == PDF_MIME_TYPE:
            contents[upload.name] = extract_pdf_text(upload, engine=engine)
    return contents
