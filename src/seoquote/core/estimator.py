"""Price estimation for a selected tier.

All arithmetic runs on :class:`~decimal.Decimal` so that the multipliers
(1.2, 1.1, ...) compose exactly, and the final figures are rounded half-up
(half away from zero) to whole currency units. ``2.5`` becomes ``3``, never
``2`` as banker's rounding would give.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from seoquote.core.catalog import DEFAULT_CATALOG, TierCatalog
from seoquote.core.policy import DEFAULT_POLICY, PricingPolicy
from seoquote.core.selector import select_tier
from seoquote.core.types import (
    AddonKind,
    AddonQuantities,
    BreakdownItem,
    Configuration,
    EstimatedPrice,
    Quote,
    Tier,
)


def round_half_up(value: Decimal | float | int) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _setup_multiplier(config: Configuration, policy: PricingPolicy) -> Decimal:
    factor = Decimal(1)
    complexity_factor = policy.complexity_setup_multipliers.get(config.complexity)
    if complexity_factor is not None:
        factor *= Decimal(str(complexity_factor))
    debt_factor = policy.debt_setup_multipliers.get(config.technical_debt)
    if debt_factor is not None:
        factor *= Decimal(str(debt_factor))
    return factor


def extra_languages(config: Configuration, tier: Tier, policy: PricingPolicy = DEFAULT_POLICY) -> int:
    """Languages beyond what *tier* includes. Fewer than included earns no credit."""
    return max(0, config.language_count - policy.baseline_for(tier.key))


def addon_monthly_cost(addons: AddonQuantities, policy: PricingPolicy = DEFAULT_POLICY) -> int:
    # Negative counts can only arrive via model_construct(); treat them as zero.
    return sum(max(0, addons.get(kind)) * policy.addon_price(kind) for kind in AddonKind)


def estimate(
    config: Configuration,
    tier: Tier,
    addons: AddonQuantities | None = None,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> EstimatedPrice:
    """Project setup and monthly cost for *tier* under *config* and *addons*.

    Starts from the low end of each range; only setup carries the
    complexity/debt loading; extra languages add to both; add-ons add to
    monthly only.
    """
    addons = addons or AddonQuantities()

    setup = Decimal(tier.setup_range.low) * _setup_multiplier(config, policy)
    monthly = Decimal(tier.monthly_range.low)

    extra = extra_languages(config, tier, policy)
    language_monthly = extra * policy.extra_language_monthly_rate
    setup += extra * policy.extra_language_setup_rate
    monthly += language_monthly

    addon_monthly = addon_monthly_cost(addons, policy)
    monthly += addon_monthly

    return EstimatedPrice(
        setup_cost=round_half_up(setup),
        monthly_cost=round_half_up(monthly),
        recommended_linkbuilding_low=tier.linkbuilding_range.low,
        recommended_linkbuilding_high=tier.linkbuilding_range.high,
        extra_language_count=extra,
        language_monthly_cost=language_monthly,
        addon_monthly_cost=addon_monthly,
    )


def breakdown(tier: Tier, price: EstimatedPrice) -> list[BreakdownItem]:
    """Bars for the investment chart: base monthly, extras, setup."""
    base = tier.monthly_range.low
    return [
        BreakdownItem(name="Base Monthly", value=base),
        BreakdownItem(name="Extras/Langs", value=price.monthly_cost - base),
        BreakdownItem(name="Setup", value=price.setup_cost),
    ]


def build_quote(
    config: Configuration,
    addons: AddonQuantities | None = None,
    *,
    catalog: TierCatalog = DEFAULT_CATALOG,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> Quote:
    """Select the tier and price it in one go."""
    addons = addons or AddonQuantities()
    tier = select_tier(config, catalog, policy)
    price = estimate(config, tier, addons, policy)
    return Quote(
        config=config,
        addons=addons,
        tier=tier,
        price=price,
        breakdown=breakdown(tier, price),
    )
