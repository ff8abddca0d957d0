"""MCP tool definitions for seoquote."""

_COMPLEXITY = {"type": "string", "enum": ["low", "medium", "high"]}

_CONFIG_PROPERTIES = {
    "language_count": {
        "type": "integer",
        "description": "Number of target languages/markets",
        "minimum": 1,
        "default": 2,
    },
    "complexity": {**_COMPLEXITY, "description": "Technical complexity", "default": "medium"},
    "site_type": {
        "type": "string",
        "enum": ["blog_saas", "ecommerce", "enterprise"],
        "description": "Site type",
        "default": "blog_saas",
    },
    "technical_debt": {**_COMPLEXITY, "description": "Technical debt", "default": "medium"},
    "content_volume": {**_COMPLEXITY, "description": "Desired content volume", "default": "medium"},
}

_ADDON_PROPERTIES = {
    "extra_articles": {"type": "integer", "minimum": 0, "default": 0},
    "extra_landings": {"type": "integer", "minimum": 0, "default": 0},
    "extra_tech_sprints": {"type": "integer", "minimum": 0, "default": 0},
}

TOOL_DEFINITIONS = [
    {
        "name": "quote_tiers",
        "description": "List the three service tiers with their price ranges and features.",
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": "quote_estimate",
        "description": (
            "Recommend a tier and estimate setup and monthly cost for a project"
            " configuration plus optional add-ons."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "config": {"type": "object", "properties": _CONFIG_PROPERTIES},
                "addons": {"type": "object", "properties": _ADDON_PROPERTIES},
            },
        },
    },
    {
        "name": "quote_adjust_addon",
        "description": "Add or remove one unit of an add-on (never below zero).",
        "inputSchema": {
            "type": "object",
            "properties": {
                "addons": {"type": "object", "properties": _ADDON_PROPERTIES},
                "kind": {
                    "type": "string",
                    "enum": ["extra_articles", "extra_landings", "extra_tech_sprints"],
                },
                "delta": {"type": "integer", "enum": [-1, 1], "default": 1},
            },
            "required": ["kind"],
        },
    },
    {
        "name": "quote_prompt",
        "description": "Render the executive-summary prompt for a configuration (en or es).",
        "inputSchema": {
            "type": "object",
            "properties": {
                "config": {"type": "object", "properties": _CONFIG_PROPERTIES},
                "addons": {"type": "object", "properties": _ADDON_PROPERTIES},
                "language": {"type": "string", "enum": ["en", "es"], "default": "en"},
            },
        },
    },
]
