"""Forward document text to the hosted model and validate its risk analysis JSON."""

import json
import logging
from typing import Any, Optional

from openai import OpenAI

from bank_portal.config import Settings
from bank_portal.exceptions import (
    ConfigurationError,
    InvalidModelOutput,
    MissingAnalysisFields,
    MissingDocumentContent,
)
from bank_portal.models.analysis import REQUIRED_ANALYSIS_FIELDS
from bank_portal.models.base import CamelModel

from .prompts import RISK_ANALYST_PROMPT

logger = logging.getLogger(__name__)

# Leaves room for the system prompt and the response
MAX_CONTENT_CHARS = 100_000
TRUNCATION_MARKER = "\n\n[Content truncated due to length]"

TEMPERATURE = 0.1
MAX_OUTPUT_TOKENS = 4000


class AnalysisRequest(CamelModel):
    """Body of POST /api/analyze-pdf. Fields are optional so absence is reported as a 400."""

    document_name: Optional[str] = None
    document_content: Optional[str] = None
    system_prompt: Optional[str] = None


class AnalysisResult(CamelModel):
    success: bool = True
    analysis: dict[str, Any]
    document_name: Optional[str] = None
    tokens_used: int = 0


def truncate_content(content: str, limit: int = MAX_CONTENT_CHARS) -> str:
    """Cap content at limit characters, marking the cut."""
    if len(content) <= limit:
        return content
    return content[:limit] + TRUNCATION_MARKER


def build_messages(document_name: str, content: str, system_prompt: str) -> list[dict]:
    return [
        {"role": "system", "content": system_prompt},
        {
            "role": "user",
            "content": (
                f'Please analyze the following document: "{document_name}"\n\n'
                f"Document content:\n{content}"
            ),
        },
    ]


def parse_analysis(text: Optional[str]) -> dict[str, Any]:
    """Parse model output as a single JSON object."""
    if not text:
        raise InvalidModelOutput("No response content received from OpenAI")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Model response is not valid JSON: %.200s", text)
        raise InvalidModelOutput("Invalid JSON response from AI analysis") from e
    if not isinstance(data, dict):
        logger.error("Model response is JSON but not an object: %.200s", text)
        raise InvalidModelOutput("Invalid JSON response from AI analysis")
    return data


def find_missing_fields(analysis: dict[str, Any]) -> list[str]:
    """Required top-level fields that are absent or null, in canonical order."""
    return [f for f in REQUIRED_ANALYSIS_FIELDS if analysis.get(f) is None]


def make_openai_client(api_key: str) -> OpenAI:
    return OpenAI(api_key=api_key)


def analyze_document(
    request: AnalysisRequest,
    *,
    settings: Optional[Settings] = None,
    client: Optional[OpenAI] = None,
) -> AnalysisResult:
    """
    Run one risk analysis. Validation happens before any upstream call:
    missing content, then missing API key. client overrides the OpenAI client
    built from settings.
    """
    if not request.document_content:
        raise MissingDocumentContent()

    settings = settings or Settings.from_env()
    if not settings.openai_api_key:
        raise ConfigurationError("OpenAI API key not configured")
    client = client or make_openai_client(settings.openai_api_key)

    content = truncate_content(request.document_content)
    if len(content) != len(request.document_content):
        logger.info(
            "Truncated %s from %d to %d characters",
            request.document_name,
            len(request.document_content),
            MAX_CONTENT_CHARS,
        )

    completion = client.chat.completions.create(
        model=settings.llm_model,
        messages=build_messages(
            request.document_name or "",
            content,
            request.system_prompt or RISK_ANALYST_PROMPT,
        ),
        temperature=TEMPERATURE,
        max_tokens=MAX_OUTPUT_TOKENS,
        response_format={"type": "json_object"},
    )
    text = completion.choices[0].message.content if completion.choices else None
    analysis = parse_analysis(text)

    missing = find_missing_fields(analysis)
    if missing:
        raise MissingAnalysisFields(missing)

    usage = getattr(completion, "usage", None)
    tokens_used = getattr(usage, "total_tokens", None) or 0
    return AnalysisResult(
        analysis=analysis,
        document_name=request.document_name,
        tokens_used=tokens_used,
    )
