"""HTTP API (FastAPI)."""

from bank_portal.api.app import create_app

__all__ = ["create_app"]
