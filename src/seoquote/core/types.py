"""Core Pydantic models for seoquote."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Complexity(str, Enum):
    """Three-step scale used for complexity, technical debt and content volume."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _COMPLEXITY_ORDER.index(self)

    @property
    def label(self) -> str:
        return self.value.capitalize()


_COMPLEXITY_ORDER = [Complexity.LOW, Complexity.MEDIUM, Complexity.HIGH]


class SiteType(str, Enum):
    """Kind of site being optimised. Not ordered."""

    BLOG_OR_SAAS = "blog_saas"
    ECOMMERCE = "ecommerce"
    ENTERPRISE = "enterprise"

    @property
    def label(self) -> str:
        return _SITE_TYPE_LABELS[self]


_SITE_TYPE_LABELS = {
    SiteType.BLOG_OR_SAAS: "Blog / SaaS / Lead Gen",
    SiteType.ECOMMERCE: "Ecommerce (Medium)",
    SiteType.ENTERPRISE: "Enterprise / Marketplace",
}


class TierKey(str, Enum):
    """Identity of a catalog tier, in ascending scope/price order."""

    STARTER = "starter"
    GROWTH = "growth"
    ENTERPRISE = "enterprise"

    @property
    def rank(self) -> int:
        return _TIER_ORDER.index(self)


_TIER_ORDER = [TierKey.STARTER, TierKey.GROWTH, TierKey.ENTERPRISE]


class AddonKind(str, Enum):
    """Monthly add-ons that can be stacked on top of any tier."""

    EXTRA_ARTICLES = "extra_articles"
    EXTRA_LANDINGS = "extra_landings"
    EXTRA_TECH_SPRINTS = "extra_tech_sprints"

    @property
    def label(self) -> str:
        return _ADDON_LABELS[self]


_ADDON_LABELS = {
    AddonKind.EXTRA_ARTICLES: "Extra Articles",
    AddonKind.EXTRA_LANDINGS: "Extra Landings",
    AddonKind.EXTRA_TECH_SPRINTS: "Tech Sprints",
}


# ------------------------------------------------------------------
# Inputs
# ------------------------------------------------------------------


class Configuration(BaseModel):
    """A complete snapshot of the project parameters."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    language_count: int = Field(default=2, ge=1)
    complexity: Complexity = Complexity.MEDIUM
    site_type: SiteType = SiteType.BLOG_OR_SAAS
    technical_debt: Complexity = Complexity.MEDIUM
    content_volume: Complexity = Complexity.MEDIUM


class AddonQuantities(BaseModel):
    """Counts of extra monthly deliverables. Never negative."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    extra_articles: int = Field(default=0, ge=0)
    extra_landings: int = Field(default=0, ge=0)
    extra_tech_sprints: int = Field(default=0, ge=0)

    def get(self, kind: AddonKind) -> int:
        return getattr(self, kind.value)

    def adjust(self, kind: AddonKind, delta: int) -> AddonQuantities:
        """Return a copy with *kind* moved by *delta*, clamped at zero."""
        current = self.get(kind)
        return self.model_copy(update={kind.value: max(0, current + delta)})

    def add(self, kind: AddonKind) -> AddonQuantities:
        return self.adjust(kind, 1)

    def subtract(self, kind: AddonKind) -> AddonQuantities:
        return self.adjust(kind, -1)

    def selected(self) -> dict[AddonKind, int]:
        """Non-zero add-ons only, in display order."""
        return {kind: self.get(kind) for kind in AddonKind if self.get(kind) > 0}

    @property
    def is_empty(self) -> bool:
        return not self.selected()


# ------------------------------------------------------------------
# Catalog entries
# ------------------------------------------------------------------


class PriceRange(BaseModel):
    """Closed range of whole currency units."""

    model_config = ConfigDict(frozen=True)

    low: int = Field(ge=0)
    high: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> PriceRange:
        if self.low > self.high:
            raise ValueError(f"range low ({self.low}) exceeds high ({self.high})")
        return self


class Tier(BaseModel):
    """One service tier of the catalog."""

    model_config = ConfigDict(frozen=True)

    key: TierKey
    name: str
    target_description: str
    setup_range: PriceRange
    monthly_range: PriceRange
    features: tuple[str, ...] = ()
    linkbuilding_range: PriceRange

    @property
    def short_label(self) -> str:
        """Second word of the name ("International Growth" -> "Growth")."""
        parts = self.name.split(" ")
        return parts[1] if len(parts) > 1 else self.name

    def highlights(self, count: int = 3) -> list[str]:
        return list(self.features[:count])


# ------------------------------------------------------------------
# Derived
# ------------------------------------------------------------------


class EstimatedPrice(BaseModel):
    """Projected costs for one (configuration, tier, add-ons) snapshot."""

    model_config = ConfigDict(frozen=True)

    setup_cost: int
    monthly_cost: int
    recommended_linkbuilding_low: int
    recommended_linkbuilding_high: int
    extra_language_count: int = Field(ge=0)
    language_monthly_cost: int = 0
    addon_monthly_cost: int = 0


class BreakdownItem(BaseModel):
    name: str
    value: int


class Quote(BaseModel):
    """Everything the presentation layer shows for the current inputs."""

    config: Configuration
    addons: AddonQuantities
    tier: Tier
    price: EstimatedPrice
    breakdown: list[BreakdownItem] = Field(default_factory=list)

    @property
    def extra_language_notice(self) -> str | None:
        n = self.price.extra_language_count
        if n <= 0:
            return None
        return f"{n} extra language(s) detected"
