"""FastAPI REST server for seoquote."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import seoquote
from seoquote.config import SeoquoteConfig
from seoquote.core.catalog import TierCatalog, load_catalog
from seoquote.core.estimator import build_quote
from seoquote.core.policy import DEFAULT_POLICY
from seoquote.core.types import AddonQuantities, Quote, Tier
from seoquote.exceptions import CatalogError
from seoquote.proposal.gemini import GeminiGenerator
from seoquote.proposal.requester import ProposalRequester
from server.models import (
    AdjustAddonRequest,
    HealthResponse,
    ProposalRequest,
    ProposalResponse,
    QuoteRequest,
    QuoteResponse,
)

load_dotenv()

log = logging.getLogger(__name__)

app = FastAPI(
    title="seoquote",
    description="Tier recommendation and pricing for international SEO projects.",
    version=seoquote.__version__,
)

# CORS — allow the pricing front-end to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# ------------------------------------------------------------------
# Process-wide collaborators
# ------------------------------------------------------------------

_config = SeoquoteConfig.from_env()
_catalog: TierCatalog | None = None
_requester = ProposalRequester(GeminiGenerator(_config), _config)


def _cat() -> TierCatalog:
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(_config)
    return _catalog


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    log.error("Tier catalog unavailable: %s", exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def _quote(body: QuoteRequest) -> Quote:
    return build_quote(body.config, body.addons, catalog=_cat(), policy=DEFAULT_POLICY)


def _quote_response(q: Quote) -> QuoteResponse:
    return QuoteResponse(
        tier=q.tier,
        price=q.price,
        breakdown=q.breakdown,
        selected_addons={k.value: v for k, v in q.addons.selected().items()},
        extra_language_notice=q.extra_language_notice,
    )


# ------------------------------------------------------------------
# Health / catalog
# ------------------------------------------------------------------


@app.get("/v1/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", version=seoquote.__version__, tiers=len(_cat().tiers))


@app.get("/v1/tiers", response_model=list[Tier])
def list_tiers():
    return list(_cat().tiers)


# ------------------------------------------------------------------
# Pricing
# ------------------------------------------------------------------


@app.post("/v1/quote", response_model=QuoteResponse)
def quote(body: QuoteRequest):
    return _quote_response(_quote(body))


@app.post("/v1/addons/adjust", response_model=AddonQuantities)
def adjust_addon(body: AdjustAddonRequest):
    """Add or remove one unit of an add-on. Never goes below zero."""
    return body.addons.adjust(body.kind, body.delta)


# ------------------------------------------------------------------
# Proposal text
# ------------------------------------------------------------------


@app.post("/v1/proposal", response_model=ProposalResponse)
async def request_proposal(body: ProposalRequest):
    q = _quote(body)
    state = await _requester.request(q, language=body.language)
    return ProposalResponse(**state.to_dict())


@app.get("/v1/proposal", response_model=ProposalResponse)
def proposal_state():
    return ProposalResponse(**_requester.state.to_dict())


# ------------------------------------------------------------------
# Entrypoint
# ------------------------------------------------------------------


def run():
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=8100, reload=True)


if __name__ == "__main__":
    run()
