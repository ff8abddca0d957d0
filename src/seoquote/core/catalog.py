"""Service tier catalog."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from seoquote.config import SeoquoteConfig
from seoquote.core.types import PriceRange, Tier, TierKey
from seoquote.exceptions import CatalogError

log = logging.getLogger(__name__)


class TierCatalog(BaseModel):
    """Exactly three tiers, ordered Starter < Growth < Enterprise."""

    model_config = ConfigDict(frozen=True)

    tiers: tuple[Tier, ...]

    @model_validator(mode="after")
    def _check_shape(self) -> TierCatalog:
        keys = [t.key for t in self.tiers]
        if keys != [TierKey.STARTER, TierKey.GROWTH, TierKey.ENTERPRISE]:
            raise ValueError(
                "catalog must hold exactly the starter, growth and enterprise tiers, in that order"
            )
        return self

    @property
    def starter(self) -> Tier:
        return self.tiers[0]

    @property
    def growth(self) -> Tier:
        return self.tiers[1]

    @property
    def enterprise(self) -> Tier:
        return self.tiers[2]

    def get(self, key: TierKey | str) -> Tier:
        return self.tiers[TierKey(key).rank]

    def rank(self, tier: Tier) -> int:
        return tier.key.rank

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, source: str | None = None) -> TierCatalog:
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise CatalogError(str(exc), source=source) from exc

    @classmethod
    def from_file(cls, path: str | Path) -> TierCatalog:
        """Load a ``{"tiers": [...]}`` JSON document."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogError(str(exc), source=str(path)) from exc
        if not isinstance(data, dict):
            raise CatalogError("top-level JSON value must be an object", source=str(path))
        catalog = cls.from_dict(data, source=str(path))
        log.info("Loaded tier catalog from %s", path)
        return catalog


STARTER = Tier(
    key=TierKey.STARTER,
    name="International Starter",
    target_description="1–2 languages, low complexity",
    setup_range=PriceRange(low=1300, high=1700),
    monthly_range=PriceRange(low=850, high=1150),
    features=(
        "1 monthly call",
        "On-page/interlinking up to 10 URLs/mo",
        "No copywriting included",
        "Basic tech + hreflang",
        "Standard monthly reporting",
    ),
    linkbuilding_range=PriceRange(low=200, high=400),
)

GROWTH = Tier(
    key=TierKey.GROWTH,
    name="International Growth",
    target_description="2–3 languages, the standard choice",
    setup_range=PriceRange(low=1800, high=2400),
    monthly_range=PriceRange(low=1350, high=1750),
    features=(
        "1–2 monthly calls",
        "On-page up to 20 URLs/mo",
        "2 articles/mo or 1 landing/mo",
        "Continuous technical SEO + hreflang",
        "AI SEO (AIO, entities, Q&A)",
        "Quick wins UX/CRO",
    ),
    linkbuilding_range=PriceRange(low=300, high=500),
)

ENTERPRISE = Tier(
    key=TierKey.ENTERPRISE,
    name="International Enterprise",
    target_description="3+ languages / high complexity",
    setup_range=PriceRange(low=2900, high=4500),
    monthly_range=PriceRange(low=2200, high=3800),
    features=(
        "2–4 monthly calls",
        "On-page up to 35 URLs/mo",
        "4 articles/mo or 2 landings/mo",
        "Advanced technical + Int. Governance",
        "Intensive Digital PR",
        "Advanced AI Overviews tracking",
    ),
    linkbuilding_range=PriceRange(low=800, high=2000),
)

DEFAULT_CATALOG = TierCatalog(tiers=(STARTER, GROWTH, ENTERPRISE))


def load_catalog(config: SeoquoteConfig | None = None) -> TierCatalog:
    """Return the catalog named by ``config.catalog_path``, else the built-in one."""
    if config is None or config.catalog_path is None:
        return DEFAULT_CATALOG
    return TierCatalog.from_file(config.catalog_path)
