"""Tests for MCP server tool dispatch logic (no actual MCP transport)."""

import pytest


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    import mcp_server.server as srv

    monkeypatch.setattr(srv, "_catalog", None)
    monkeypatch.setattr(srv._config, "catalog_path", None)
    monkeypatch.setattr(srv._config, "proposal_language", "en")


class TestMCPDispatch:
    def test_tiers(self):
        from mcp_server.server import _dispatch

        result = _dispatch("quote_tiers", {})
        assert result["count"] == 3
        assert result["tiers"][0]["key"] == "starter"

    def test_estimate_defaults(self):
        from mcp_server.server import _dispatch

        result = _dispatch("quote_estimate", {})
        assert result["tier_key"] == "growth"
        assert result["price"]["setup_cost"] == 1800

    def test_estimate_with_addons(self):
        from mcp_server.server import _dispatch

        result = _dispatch(
            "quote_estimate",
            {
                "config": {"language_count": 1, "complexity": "low"},
                "addons": {"extra_landings": 2},
            },
        )
        assert result["tier"] == "International Starter"
        assert result["price"]["monthly_cost"] == 850 + 1250
        assert result["selected_addons"] == {"extra_landings": 2}

    def test_adjust_addon(self):
        from mcp_server.server import _dispatch

        up = _dispatch("quote_adjust_addon", {"kind": "extra_articles"})
        assert up["extra_articles"] == 1
        down = _dispatch("quote_adjust_addon", {"kind": "extra_articles", "delta": -1})
        assert down["extra_articles"] == 0

    def test_adjust_addon_bad_delta(self):
        from mcp_server.server import _dispatch

        result = _dispatch("quote_adjust_addon", {"kind": "extra_articles", "delta": 3})
        assert "error" in result

    def test_prompt(self):
        from mcp_server.server import _dispatch

        result = _dispatch("quote_prompt", {"config": {"language_count": 4}, "language": "es"})
        assert result["tier"] == "International Enterprise"
        assert "Idiomas totales: 4" in result["prompt"]

    def test_unknown_tool(self):
        from mcp_server.server import _dispatch

        result = _dispatch("nonexistent_tool", {})
        assert "error" in result

    def test_prompt_unsupported_language_falls_back(self):
        from mcp_server.server import _dispatch

        result = _dispatch("quote_prompt", {"language": "de"})
        assert result["language"] == "en"
        assert "Write in English" in result["prompt"]

    def test_prompt_default_language(self):
        from mcp_server.server import _dispatch

        assert _dispatch("quote_prompt", {})["language"] == "en"

    def test_misspelled_config_field_rejected(self):
        from pydantic import ValidationError

        from mcp_server.server import _dispatch

        with pytest.raises(ValidationError):
            _dispatch("quote_estimate", {"config": {"languages": 6}})
