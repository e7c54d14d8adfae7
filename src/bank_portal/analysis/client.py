"""HTTP client for the analysis endpoint, used by the employee triage flow."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from bank_portal.exceptions import AnalysisRequestError
from bank_portal.models.analysis import RiskAnalysis

from .prompts import RISK_ANALYST_PROMPT

logger = logging.getLogger(__name__)

ANALYZE_PATH = "/api/analyze-pdf"


class AnalysisClient:
    """
    Posts document text to POST /api/analyze-pdf and decodes the RiskAnalysis.
    Any failure raises AnalysisRequestError whose message is meant to be shown
    to the user as is; calling analyze() again is the retry.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        client: Optional[httpx.Client] = None,
        timeout: float = 120.0,
    ):
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def analyze(
        self,
        document_name: str,
        document_content: str,
        *,
        system_prompt: str = RISK_ANALYST_PROMPT,
    ) -> RiskAnalysis:
        try:
            resp = self._client.post(
                ANALYZE_PATH,
                json={
                    "documentName": document_name,
                    "documentContent": document_content,
                    "systemPrompt": system_prompt,
                },
            )
        except httpx.RequestError as e:
            raise AnalysisRequestError(str(e) or "Could not reach the analysis service") from e

        try:
            body = resp.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if resp.is_error or body.get("error"):
            message = body.get("error") or f"HTTP error! status: {resp.status_code}"
            logger.warning("Analysis of %s failed: %s", document_name, message)
            raise AnalysisRequestError(message)

        try:
            return RiskAnalysis.model_validate(body.get("analysis"))
        except ValidationError as e:
            raise AnalysisRequestError(f"Malformed analysis for {document_name}: {e}") from e

    def close(self) -> None:
        self._client.close()
