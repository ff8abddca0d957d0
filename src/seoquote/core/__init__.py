"""seoquote core types and the pricing engine."""

from seoquote.core.catalog import DEFAULT_CATALOG, TierCatalog
from seoquote.core.estimator import build_quote, estimate
from seoquote.core.policy import DEFAULT_POLICY, PricingPolicy
from seoquote.core.selector import select_tier
from seoquote.core.types import (
    AddonKind,
    AddonQuantities,
    Complexity,
    Configuration,
    EstimatedPrice,
    Quote,
    SiteType,
    Tier,
    TierKey,
)

__all__ = [
    "DEFAULT_CATALOG",
    "DEFAULT_POLICY",
    "AddonKind",
    "AddonQuantities",
    "Complexity",
    "Configuration",
    "EstimatedPrice",
    "PricingPolicy",
    "Quote",
    "SiteType",
    "Tier",
    "TierCatalog",
    "TierKey",
    "build_quote",
    "estimate",
    "select_tier",
]
