"""Tier selection — ordered threshold rules, first match wins."""

from __future__ import annotations

from seoquote.core.catalog import DEFAULT_CATALOG, TierCatalog
from seoquote.core.policy import DEFAULT_POLICY, PricingPolicy
from seoquote.core.types import Configuration, Tier


def _needs_enterprise(config: Configuration, policy: PricingPolicy) -> bool:
    return (
        config.language_count >= policy.enterprise_language_threshold
        or config.site_type in policy.enterprise_site_types
        or config.complexity in policy.enterprise_complexities
    )


def _needs_growth(config: Configuration, policy: PricingPolicy) -> bool:
    return (
        config.language_count >= policy.growth_language_threshold
        or config.site_type in policy.growth_site_types
        or config.complexity in policy.growth_complexities
    )


def select_tier(
    config: Configuration,
    catalog: TierCatalog = DEFAULT_CATALOG,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> Tier:
    """Return the recommended tier for *config*.

    Enterprise triggers are checked before Growth triggers, so a configuration
    matching both always lands on Enterprise. Add-ons play no part here.
    """
    if _needs_enterprise(config, policy):
        return catalog.enterprise
    if _needs_growth(config, policy):
        return catalog.growth
    return catalog.starter
