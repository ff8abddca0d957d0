"""Proposal text requester with a request-sequence guard.

Each call to :meth:`ProposalRequester.request` takes a new, strictly
increasing request id. Only the newest request may publish its result; a
slower, older one that finishes later is reported back to its own caller as
``superseded`` and never overwrites the current state.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from seoquote.config import SeoquoteConfig
from seoquote.core.types import Quote
from seoquote.proposal.base import TextGenerator
from seoquote.proposal.prompt import EMPTY_TEXT, FAILURE_TEXT, build_prompt

log = logging.getLogger(__name__)


class ProposalStatus(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"
    SUPERSEDED = "superseded"


@dataclass(frozen=True)
class ProposalState:
    """Snapshot of the requester, or the outcome of one request."""

    status: ProposalStatus = ProposalStatus.IDLE
    text: str = ""
    request_id: int = 0
    language: str = "en"
    quote: Quote | None = None
    error: str | None = None

    @property
    def is_generating(self) -> bool:
        return self.status is ProposalStatus.GENERATING

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "text": self.text,
            "request_id": self.request_id,
            "language": self.language,
            "error": self.error,
        }


class ProposalRequester:
    """Turns a quote into prose through a :class:`TextGenerator`.

    Failures never escape: the caller gets a ``failed`` state carrying a fixed
    user-facing message, and the price figures in the quote are untouched.
    """

    def __init__(self, generator: TextGenerator, config: SeoquoteConfig | None = None):
        self._generator = generator
        self._config = config or SeoquoteConfig()
        self._seq = 0
        self._state = ProposalState(language=self._config.proposal_language)

    @property
    def state(self) -> ProposalState:
        return self._state

    @property
    def latest_request_id(self) -> int:
        return self._seq

    def invalidate(self) -> None:
        """Drop any in-flight request and return to idle."""
        self._seq += 1
        self._state = ProposalState(
            request_id=self._seq, language=self._config.proposal_language
        )

    async def request(self, quote: Quote, *, language: str | None = None) -> ProposalState:
        self._seq += 1
        request_id = self._seq
        lang = language if language in FAILURE_TEXT else self._config.proposal_language
        self._state = ProposalState(
            status=ProposalStatus.GENERATING,
            request_id=request_id,
            language=lang,
            quote=quote,
        )

        prompt = build_prompt(
            quote,
            language=lang,
            max_words=self._config.proposal_max_words,
            currency=self._config.currency_symbol,
        )
        try:
            text = await self._generator.generate(prompt)
        except asyncio.CancelledError:
            if request_id == self._seq:
                self._state = replace(self._state, status=ProposalStatus.IDLE)
            raise
        except Exception as exc:
            log.warning("Proposal request #%d failed: %s", request_id, exc)
            result = ProposalState(
                status=ProposalStatus.FAILED,
                text=FAILURE_TEXT[lang],
                request_id=request_id,
                language=lang,
                quote=quote,
                error=str(exc),
            )
        else:
            result = ProposalState(
                status=ProposalStatus.READY,
                text=(text or "").strip() or EMPTY_TEXT[lang],
                request_id=request_id,
                language=lang,
                quote=quote,
            )

        if request_id != self._seq:
            log.debug("Discarding stale proposal #%d (latest is #%d)", request_id, self._seq)
            return replace(result, status=ProposalStatus.SUPERSEDED)
        self._state = result
        return result
