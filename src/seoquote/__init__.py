"""seoquote — tier recommendation and pricing for international SEO projects."""

from seoquote.config import SeoquoteConfig
from seoquote.core.types import (
    AddonKind,
    AddonQuantities,
    Complexity,
    Configuration,
    EstimatedPrice,
    Quote,
    SiteType,
    Tier,
)
from seoquote.session import QuoteSession

__version__ = "0.1.0"
__all__ = [
    "AddonKind",
    "AddonQuantities",
    "Complexity",
    "Configuration",
    "EstimatedPrice",
    "Quote",
    "QuoteSession",
    "SeoquoteConfig",
    "SiteType",
    "Tier",
]
