"""Proposal text generation."""

from seoquote.proposal.base import TextGenerator
from seoquote.proposal.gemini import GeminiGenerator
from seoquote.proposal.none import StaticGenerator
from seoquote.proposal.prompt import build_prompt
from seoquote.proposal.requester import ProposalRequester, ProposalState, ProposalStatus

__all__ = [
    "GeminiGenerator",
    "ProposalRequester",
    "ProposalState",
    "ProposalStatus",
    "StaticGenerator",
    "TextGenerator",
    "build_prompt",
]
