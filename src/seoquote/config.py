"""seoquote configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta"


class SeoquoteConfig(BaseModel):
    """Global configuration for the estimator and the proposal requester."""

    gemini_api_key: str | None = None
    gemini_model: str = "gemini-3-flash-preview"
    gemini_base_url: str = GEMINI_URL
    request_timeout: float = Field(default=30.0, gt=0)
    proposal_language: Literal["en", "es"] = "en"
    proposal_max_words: int = Field(default=300, ge=50)
    min_languages: int = Field(default=1, ge=1)
    max_languages: int = Field(default=10, ge=1)
    currency_symbol: str = "€"
    catalog_path: Path | None = None

    @classmethod
    def from_env(cls) -> SeoquoteConfig:
        """Build a config from ``SEOQUOTE_*`` / ``GEMINI_API_KEY`` variables."""
        values: dict[str, object] = {}
        api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
        if api_key:
            values["gemini_api_key"] = api_key
        env_map = {
            "SEOQUOTE_GEMINI_MODEL": "gemini_model",
            "SEOQUOTE_GEMINI_URL": "gemini_base_url",
            "SEOQUOTE_TIMEOUT": "request_timeout",
            "SEOQUOTE_LANGUAGE": "proposal_language",
            "SEOQUOTE_CATALOG": "catalog_path",
        }
        for var, field_name in env_map.items():
            raw = os.environ.get(var, "").strip()
            if raw:
                values[field_name] = raw
        return cls(**values)
