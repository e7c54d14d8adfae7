"""Document risk analysis: model gateway service, HTTP client, and view state."""

from .client import AnalysisClient
from .prompts import RISK_ANALYST_PROMPT
from .service import (
    MAX_CONTENT_CHARS,
    TRUNCATION_MARKER,
    AnalysisRequest,
    AnalysisResult,
    analyze_document,
)
from .view_state import AnalysisSession

__all__ = [
    "MAX_CONTENT_CHARS",
    "RISK_ANALYST_PROMPT",
    "TRUNCATION_MARKER",
    "AnalysisClient",
    "AnalysisRequest",
    "AnalysisResult",
    "AnalysisSession",
    "analyze_document",
]
