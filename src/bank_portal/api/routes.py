"""Document risk analysis route."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from bank_portal.analysis.service import AnalysisRequest, analyze_document
from bank_portal.config import Settings
from bank_portal.exceptions import PortalError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analysis"])

UNEXPECTED_ERROR = "An unexpected error occurred"


def get_settings() -> Settings:
    return Settings.from_env()


@router.post("/analyze-pdf")
def analyze_pdf(
    payload: Optional[AnalysisRequest] = None,
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """
    Analyze document text for regulatory, investment and downside risks.
    200 with the analysis; 400 when content is missing; 500 otherwise.
    """
    request = payload or AnalysisRequest()
    try:
        result = analyze_document(request, settings=settings)
    except PortalError:
        raise
    except Exception:
        logger.exception("Error in PDF analysis for %s", request.document_name)
        return JSONResponse(status_code=500, content={"error": UNEXPECTED_ERROR})
    logger.info("Analyzed %s (%d tokens)", request.document_name, result.tokens_used)
    return JSONResponse(status_code=200, content=result.to_json_dict())
