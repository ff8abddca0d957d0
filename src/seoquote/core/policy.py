"""Pricing policy — every tunable number the engine uses, in one place."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from seoquote.core.types import AddonKind, Complexity, SiteType, TierKey

_TABLES = (
    "complexity_setup_multipliers",
    "debt_setup_multipliers",
    "baseline_languages",
    "addon_monthly_prices",
)


@dataclass(frozen=True)
class PricingPolicy:
    # Tier selection triggers
    enterprise_language_threshold: int = 4
    growth_language_threshold: int = 2
    enterprise_site_types: frozenset[SiteType] = frozenset({SiteType.ENTERPRISE})
    growth_site_types: frozenset[SiteType] = frozenset({SiteType.ECOMMERCE})
    enterprise_complexities: frozenset[Complexity] = frozenset({Complexity.HIGH})
    growth_complexities: frozenset[Complexity] = frozenset({Complexity.MEDIUM})

    # Setup risk loading, applied multiplicatively
    complexity_setup_multipliers: Mapping[Complexity, float] = field(
        default_factory=lambda: {Complexity.HIGH: 1.2}, hash=False
    )
    debt_setup_multipliers: Mapping[Complexity, float] = field(
        default_factory=lambda: {Complexity.HIGH: 1.1}, hash=False
    )

    # Languages covered by the base fee of each tier
    baseline_languages: Mapping[TierKey, int] = field(
        default_factory=lambda: {
            TierKey.STARTER: 1,
            TierKey.GROWTH: 2,
            TierKey.ENTERPRISE: 3,
        },
        hash=False,
    )
    extra_language_setup_rate: int = 400  # one-off localisation setup
    extra_language_monthly_rate: int = 400  # ongoing per-market fee

    addon_monthly_prices: Mapping[AddonKind, int] = field(
        default_factory=lambda: {
            AddonKind.EXTRA_ARTICLES: 400,
            AddonKind.EXTRA_LANDINGS: 625,
            AddonKind.EXTRA_TECH_SPRINTS: 325,
        },
        hash=False,
    )

    def __post_init__(self):
        # Tables are copied and exposed read-only.
        for name in _TABLES:
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def baseline_for(self, key: TierKey) -> int:
        return self.baseline_languages.get(key, 1)

    def addon_price(self, kind: AddonKind) -> int:
        return self.addon_monthly_prices.get(kind, 0)


DEFAULT_POLICY = PricingPolicy()
