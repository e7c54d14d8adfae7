"""Application errors. Each carries the HTTP status the API renders it with."""


class PortalError(Exception):
    """Base error for portal domain/application exceptions."""

    status_code: int = 500


class MissingDocumentContent(PortalError):
    """Raised when an analysis request has no document content."""

    status_code = 400

    def __init__(self, message: str = "Document content is required"):
        super().__init__(message)


class ConfigurationError(PortalError):
    """Raised when a required setting (e.g. the model API key) is missing."""


class InvalidModelOutput(PortalError):
    """Raised when the model returns empty or non-JSON output."""


class MissingAnalysisFields(PortalError):
    """Raised when the model's JSON lacks required top-level fields."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(
            f"Missing required fields in AI response: {', '.join(self.missing)}"
        )


class StorageCorruptionError(PortalError):
    """Raised when a persisted blob cannot be decoded into valid records."""

    def __init__(self, key: str, detail: str, index: int | None = None):
        self.key = key
        self.index = index
        where = f"{key}[{index}]" if index is not None else key
        super().__init__(f"Corrupt stored data at {where}: {detail}")


class DuplicateSubmissionError(PortalError):
    """Raised when appending a record whose id already exists in the store."""

    status_code = 409


class AnalysisRequestError(PortalError):
    """Client-side failure calling the analysis endpoint (message is shown to the user)."""
