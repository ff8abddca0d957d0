"""seoquote MCP Server — exposes pricing tools to MCP clients."""

from __future__ import annotations

import json

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Resource, TextContent, Tool

from mcp_server.tools import TOOL_DEFINITIONS
from seoquote.config import SeoquoteConfig
from seoquote.core.catalog import TierCatalog, load_catalog
from seoquote.core.estimator import build_quote
from seoquote.core.types import AddonKind, AddonQuantities, Configuration, Quote
from seoquote.proposal.prompt import TEMPLATES, build_prompt

app = Server("seoquote")
_config = SeoquoteConfig.from_env()
_catalog: TierCatalog | None = None


def _cat() -> TierCatalog:
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(_config)
    return _catalog


def _quote(args: dict) -> Quote:
    config = Configuration.model_validate(args.get("config") or {})
    addons = AddonQuantities.model_validate(args.get("addons") or {})
    return build_quote(config, addons, catalog=_cat())


# ------------------------------------------------------------------
# Tools
# ------------------------------------------------------------------

@app.list_tools()
async def list_tools() -> list[Tool]:
    return [Tool(**td) for td in TOOL_DEFINITIONS]


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    try:
        result = _dispatch(name, arguments)
        return [TextContent(type="text", text=json.dumps(result, default=str))]
    except Exception as exc:
        return [TextContent(type="text", text=f"Error: {exc}")]


def _dispatch(name: str, args: dict) -> dict:
    if name == "quote_tiers":
        tiers = [t.model_dump(mode="json") for t in _cat().tiers]
        return {"tiers": tiers, "count": len(tiers)}

    if name == "quote_estimate":
        q = _quote(args)
        return {
            "tier": q.tier.name,
            "tier_key": q.tier.key.value,
            "price": q.price.model_dump(mode="json"),
            "breakdown": [b.model_dump() for b in q.breakdown],
            "selected_addons": {k.value: v for k, v in q.addons.selected().items()},
            "extra_language_notice": q.extra_language_notice,
        }

    if name == "quote_adjust_addon":
        addons = AddonQuantities.model_validate(args.get("addons") or {})
        delta = args.get("delta", 1)
        if delta not in (-1, 1):
            return {"error": f"delta must be -1 or 1, got {delta}"}
        return addons.adjust(AddonKind(args["kind"]), delta).model_dump()

    if name == "quote_prompt":
        q = _quote(args)
        language = args.get("language")
        if language not in TEMPLATES:
            language = _config.proposal_language
        prompt = build_prompt(
            q,
            language=language,
            max_words=_config.proposal_max_words,
            currency=_config.currency_symbol,
        )
        return {"prompt": prompt, "tier": q.tier.name, "language": language}

    return {"error": f"Unknown tool: {name}"}


# ------------------------------------------------------------------
# Resources
# ------------------------------------------------------------------

@app.list_resources()
async def list_resources() -> list[Resource]:
    return [
        Resource(
            uri="seoquote://catalog",
            name="Service tier catalog",
            mimeType="application/json",
        )
    ]


@app.read_resource()
async def read_resource(uri: str) -> str:
    return json.dumps(_dispatch("quote_tiers", {}), default=str)


# ------------------------------------------------------------------
# Main
# ------------------------------------------------------------------

async def main():
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
