"""Request/response models for the REST API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from seoquote.core.types import (
    AddonKind,
    AddonQuantities,
    BreakdownItem,
    Configuration,
    EstimatedPrice,
    Tier,
)


class QuoteRequest(BaseModel):
    config: Configuration = Field(default_factory=Configuration)
    addons: AddonQuantities = Field(default_factory=AddonQuantities)


class QuoteResponse(BaseModel):
    tier: Tier
    price: EstimatedPrice
    breakdown: list[BreakdownItem]
    selected_addons: dict[str, int]
    extra_language_notice: str | None = None


class AdjustAddonRequest(BaseModel):
    addons: AddonQuantities = Field(default_factory=AddonQuantities)
    kind: AddonKind
    delta: Literal[-1, 1] = 1


class ProposalRequest(QuoteRequest):
    language: Literal["en", "es"] | None = None


class ProposalResponse(BaseModel):
    status: str
    text: str
    request_id: int
    language: str
    error: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    tiers: int
