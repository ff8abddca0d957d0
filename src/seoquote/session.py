"""User-facing quote session — the mutable state a pricing form edits."""

from __future__ import annotations

from typing import Any

from seoquote.config import SeoquoteConfig
from seoquote.core.catalog import TierCatalog, load_catalog
from seoquote.core.estimator import build_quote, estimate
from seoquote.core.policy import DEFAULT_POLICY, PricingPolicy
from seoquote.core.selector import select_tier
from seoquote.core.types import (
    AddonKind,
    AddonQuantities,
    Configuration,
    EstimatedPrice,
    Quote,
    Tier,
)


class QuoteSession:
    """Holds the current configuration and add-ons; derives everything else.

    >>> s = QuoteSession()
    >>> s.update(language_count=5, complexity="high")
    >>> s.add_addon("extra_articles")
    >>> s.tier.name
    'International Enterprise'
    >>> s.price.monthly_cost
    3400
    """

    def __init__(
        self,
        config: SeoquoteConfig | None = None,
        *,
        catalog: TierCatalog | None = None,
        policy: PricingPolicy | None = None,
        configuration: Configuration | None = None,
        addons: AddonQuantities | None = None,
    ):
        self._config = config or SeoquoteConfig()
        self._catalog = catalog or load_catalog(self._config)
        self._policy = policy or DEFAULT_POLICY
        self._configuration = configuration or Configuration()
        self._addons = addons or AddonQuantities()

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def addons(self) -> AddonQuantities:
        return self._addons

    @property
    def catalog(self) -> TierCatalog:
        return self._catalog

    def update(self, **fields: Any) -> Configuration:
        """Replace the configuration with a copy carrying *fields*."""
        if "language_count" in fields:
            fields["language_count"] = self.clamp_languages(fields["language_count"])
        data = self._configuration.model_dump()
        data.update(fields)
        self._configuration = Configuration.model_validate(data)
        return self._configuration

    def set_languages(self, count: int) -> Configuration:
        return self.update(language_count=count)

    def clamp_languages(self, count: int) -> int:
        return max(self._config.min_languages, min(self._config.max_languages, int(count)))

    def add_addon(self, kind: AddonKind | str) -> AddonQuantities:
        self._addons = self._addons.add(AddonKind(kind))
        return self._addons

    def remove_addon(self, kind: AddonKind | str) -> AddonQuantities:
        """Subtract one unit; already-zero quantities stay at zero."""
        self._addons = self._addons.subtract(AddonKind(kind))
        return self._addons

    def reset_addons(self) -> AddonQuantities:
        self._addons = AddonQuantities()
        return self._addons

    # ------------------------------------------------------------------
    # Derived (recomputed on every access)
    # ------------------------------------------------------------------

    @property
    def tier(self) -> Tier:
        return select_tier(self._configuration, self._catalog, self._policy)

    @property
    def price(self) -> EstimatedPrice:
        return estimate(self._configuration, self.tier, self._addons, self._policy)

    def quote(self) -> Quote:
        return build_quote(
            self._configuration,
            self._addons,
            catalog=self._catalog,
            policy=self._policy,
        )

    def summary(self) -> dict[str, Any]:
        """Flat view of the current quote with money pre-formatted."""
        q = self.quote()
        sym = self._config.currency_symbol
        return {
            "plan": q.tier.name,
            "plan_label": q.tier.short_label,
            "target": q.tier.target_description,
            "highlights": q.tier.highlights(),
            "from_monthly": f"{q.tier.monthly_range.low}{sym}",
            "setup": f"{q.price.setup_cost}{sym}",
            "monthly": f"{q.price.monthly_cost}{sym}",
            "extra_languages": q.extra_language_notice,
            "addons": {k.label: v for k, v in q.addons.selected().items()},
        }
