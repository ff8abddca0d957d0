"""Google Gemini text generator over the public REST API."""

from __future__ import annotations

import logging

import httpx

from seoquote.config import SeoquoteConfig
from seoquote.exceptions import ConfigError, ProposalGenerationError

log = logging.getLogger(__name__)


class GeminiGenerator:
    """Calls ``models/{model}:generateContent`` and joins the returned parts."""

    def __init__(
        self,
        config: SeoquoteConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config or SeoquoteConfig()
        self._transport = transport

    @property
    def model(self) -> str:
        return self._config.gemini_model

    def _url(self) -> str:
        base = self._config.gemini_base_url.rstrip("/")
        return f"{base}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        api_key = self._config.gemini_api_key
        if not api_key:
            raise ConfigError("GEMINI_API_KEY is not set")

        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        try:
            async with httpx.AsyncClient(
                timeout=self._config.request_timeout, transport=self._transport
            ) as client:
                resp = await client.post(
                    self._url(),
                    json=payload,
                    headers={"x-goog-api-key": api_key},
                )
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            raise ProposalGenerationError(
                f"Gemini returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ProposalGenerationError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            raise ProposalGenerationError("Gemini returned invalid JSON") from e

        text = extract_text(data)
        log.debug("Gemini returned %d chars (model=%s)", len(text), self.model)
        return text


def extract_text(data: object) -> str:
    """Concatenate the text parts of the first candidate. Empty if none."""
    if not isinstance(data, dict):
        raise ProposalGenerationError("Gemini response is not a JSON object")
    candidates = data.get("candidates") or []
    if not isinstance(candidates, list):
        raise ProposalGenerationError("Gemini response is malformed")
    if not candidates:
        return ""
    first = candidates[0]
    if not isinstance(first, dict):
        raise ProposalGenerationError("Gemini response is malformed")
    content = first.get("content") or {}
    if not isinstance(content, dict):
        raise ProposalGenerationError("Gemini response is malformed")
    parts = content.get("parts") or []
    if not isinstance(parts, list):
        raise ProposalGenerationError("Gemini response is malformed")
    return "".join(
        p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)
    ).strip()
