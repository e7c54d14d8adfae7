"""Application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bank_portal import __version__
from bank_portal.config import Settings
from bank_portal.exceptions import PortalError
from bank_portal.logging_config import configure_logging

from .routes import router as analysis_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging(Settings.from_env().log_level)

    app = FastAPI(title="Bank Intake Portal", version=__version__)

    @app.exception_handler(PortalError)
    async def _portal_error(_request: Request, exc: PortalError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s: %s", type(exc).__name__, exc)
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(_request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request body: %s", exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.get("/health", tags=["admin"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(analysis_router)
    return app
