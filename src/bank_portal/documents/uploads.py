"""In-memory representation of a file selected in an upload action."""

import mimetypes
from dataclasses import dataclass
from pathlib import Path

PDF_MIME_TYPE = "application/pdf"


@dataclass(frozen=True)
class UploadedFile:
    """A user-selected file: name, declared MIME type, and raw bytes."""

    name: str
    mime_type: str
    data: bytes

    @property
    def is_pdf(self) -> bool:
        return self.mime_type == PDF_MIME_TYPE

    @classmethod
    def from_path(cls, path: str | Path) -> "UploadedFile":
        """
        Read a local file. MIME type is guessed from the extension; files with
        PDF magic bytes (%PDF-) are typed as PDF regardless of extension.
        """
        path = Path(path)
        data = path.read_bytes()
        mime_type, _ = mimetypes.guess_type(path.name)
        if data[:5] == b"%PDF-":
            mime_type = PDF_MIME_TYPE
        return cls(name=path.name, mime_type=mime_type or "application/octet-stream", data=data)
