"""Runtime settings, read from environment variables at call time."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_DB_PATH = "bank_portal.db"
DEFAULT_API_URL = "http://127.0.0.1:8000"


@dataclass(frozen=True)
class Settings:
    """Snapshot of portal configuration."""

    openai_api_key: Optional[str]
    llm_model: str
    db_path: Path
    api_url: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the environment:
        OPENAI_API_KEY, BANK_PORTAL_LLM_MODEL, BANK_PORTAL_DB,
        BANK_PORTAL_API_URL, BANK_PORTAL_LOG_LEVEL.
        """
        return cls(
            openai_api_key=os.environ.get("OPENAI_API_KEY") or None,
            llm_model=os.environ.get("BANK_PORTAL_LLM_MODEL", DEFAULT_MODEL),
            db_path=Path(os.environ.get("BANK_PORTAL_DB", DEFAULT_DB_PATH)),
            api_url=os.environ.get("BANK_PORTAL_API_URL", DEFAULT_API_URL).rstrip("/"),
            log_level=os.environ.get("BANK_PORTAL_LOG_LEVEL", "INFO"),
        )
