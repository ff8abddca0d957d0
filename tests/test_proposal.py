"""Tests for proposal prompts, the request-sequence guard and the Gemini client."""

import asyncio

import httpx
import pytest

from seoquote.config import SeoquoteConfig
from seoquote.core.estimator import build_quote
from seoquote.core.types import AddonQuantities, Complexity, Configuration, SiteType
from seoquote.exceptions import ConfigError, ProposalGenerationError
from seoquote.proposal import (
    GeminiGenerator,
    ProposalRequester,
    ProposalStatus,
    StaticGenerator,
    TextGenerator,
    build_prompt,
)
from seoquote.proposal.gemini import extract_text
from seoquote.proposal.prompt import EMPTY_TEXT, FAILURE_TEXT


@pytest.fixture()
def quote():
    config = Configuration(
        language_count=5,
        complexity=Complexity.MEDIUM,
        site_type=SiteType.ECOMMERCE,
    )
    addons = AddonQuantities(extra_articles=2, extra_landings=1)
    return build_quote(config, addons)


class FailingGenerator:
    async def generate(self, prompt: str) -> str:
        raise ProposalGenerationError("service down", status_code=503)


class GatedGenerator:
    """Each call blocks until the test resolves its future."""

    def __init__(self):
        self.gates: list[asyncio.Future] = []

    async def generate(self, prompt: str) -> str:
        fut = asyncio.get_running_loop().create_future()
        self.gates.append(fut)
        return await fut


# ------------------------------------------------------------------
# Prompt
# ------------------------------------------------------------------


class TestPrompt:
    def test_english_prompt_details(self, quote):
        prompt = build_prompt(quote)
        assert "Total languages: 5 (includes 2 additional languages)" in prompt
        assert "Site type: Ecommerce (Medium)" in prompt
        assert "Complexity: Medium" in prompt
        assert "Recommended plan: International Enterprise" in prompt
        assert "2 extra articles, 1 extra landings, 0 technical sprints" in prompt
        assert f"Setup Cost: {quote.price.setup_cost}€" in prompt
        assert f"Monthly Fee: {quote.price.monthly_cost}€" in prompt
        assert "Maximum 300 words" in prompt

    def test_spanish_prompt(self, quote):
        prompt = build_prompt(quote, language="es", max_words=200, currency="EUR")
        assert "Escribe en español" in prompt
        assert "Máximo 200 palabras" in prompt
        assert f"Fee mensual: {quote.price.monthly_cost}EUR" in prompt

    def test_unknown_language_falls_back_to_english(self, quote):
        assert "Write in English" in build_prompt(quote, language="de")


# ------------------------------------------------------------------
# Requester
# ------------------------------------------------------------------


class TestRequester:
    def test_generators_satisfy_protocol(self):
        assert isinstance(StaticGenerator(), TextGenerator)
        assert isinstance(GeminiGenerator(), TextGenerator)

    def test_initial_state(self):
        req = ProposalRequester(StaticGenerator("x"))
        assert req.state.status is ProposalStatus.IDLE
        assert req.latest_request_id == 0

    def test_success(self, quote):
        gen = StaticGenerator("  ## Strategic Challenge\nGo global.  ")
        req = ProposalRequester(gen)
        state = asyncio.run(req.request(quote))
        assert state.status is ProposalStatus.READY
        assert state.text == "## Strategic Challenge\nGo global."
        assert state.request_id == 1
        assert req.state == state
        assert "International Enterprise" in gen.prompts[0]

    def test_empty_text_uses_placeholder(self, quote):
        req = ProposalRequester(StaticGenerator(""))
        state = asyncio.run(req.request(quote))
        assert state.status is ProposalStatus.READY
        assert state.text == EMPTY_TEXT["en"]

    def test_failure_gives_fallback(self, quote, caplog):
        req = ProposalRequester(FailingGenerator())
        state = asyncio.run(req.request(quote))
        assert state.status is ProposalStatus.FAILED
        assert state.text == FAILURE_TEXT["en"]
        assert state.error == "service down"
        assert not req.state.is_generating
        assert "failed" in caplog.text

    def test_failure_leaves_prices_alone(self, quote):
        before = quote.price
        state = asyncio.run(ProposalRequester(FailingGenerator()).request(quote))
        assert state.quote.price == before

    def test_language_from_config_and_override(self, quote):
        cfg = SeoquoteConfig(proposal_language="es")
        gen = StaticGenerator("")
        req = ProposalRequester(gen, cfg)
        assert asyncio.run(req.request(quote)).text == EMPTY_TEXT["es"]
        assert "Escribe en español" in gen.prompts[0]
        assert asyncio.run(req.request(quote, language="en")).text == EMPTY_TEXT["en"]

    def test_stale_result_discarded(self, quote):
        async def scenario():
            gen = GatedGenerator()
            req = ProposalRequester(gen)
            first = asyncio.create_task(req.request(quote))
            await asyncio.sleep(0)
            assert req.state.is_generating
            second = asyncio.create_task(req.request(quote))
            await asyncio.sleep(0)
            assert req.state.request_id == 2

            gen.gates[1].set_result("newer text")
            newer = await second
            gen.gates[0].set_result("older text")
            older = await first
            return req, older, newer

        req, older, newer = asyncio.run(scenario())
        assert newer.status is ProposalStatus.READY
        assert older.status is ProposalStatus.SUPERSEDED
        assert older.request_id == 1
        assert req.state.text == "newer text"
        assert req.state.request_id == 2

    def test_stale_failure_does_not_clobber(self, quote):
        async def scenario():
            gen = GatedGenerator()
            req = ProposalRequester(gen)
            first = asyncio.create_task(req.request(quote))
            await asyncio.sleep(0)
            second = asyncio.create_task(req.request(quote))
            await asyncio.sleep(0)
            gen.gates[1].set_result("fresh")
            await second
            gen.gates[0].set_exception(ProposalGenerationError("late boom"))
            older = await first
            return req, older

        req, older = asyncio.run(scenario())
        assert older.status is ProposalStatus.SUPERSEDED
        assert req.state.status is ProposalStatus.READY
        assert req.state.text == "fresh"

    def test_cancel_returns_to_idle(self, quote):
        async def scenario():
            req = ProposalRequester(GatedGenerator())
            task = asyncio.create_task(req.request(quote))
            await asyncio.sleep(0)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task
            return req

        req = asyncio.run(scenario())
        assert req.state.status is ProposalStatus.IDLE

    def test_invalidate(self, quote):
        async def scenario():
            gen = GatedGenerator()
            req = ProposalRequester(gen)
            task = asyncio.create_task(req.request(quote))
            await asyncio.sleep(0)
            req.invalidate()
            gen.gates[0].set_result("too late")
            return req, await task

        req, result = asyncio.run(scenario())
        assert result.status is ProposalStatus.SUPERSEDED
        assert req.state.status is ProposalStatus.IDLE
        assert req.state.text == ""

    def test_state_to_dict(self, quote):
        state = asyncio.run(ProposalRequester(StaticGenerator("ok")).request(quote))
        assert state.to_dict() == {
            "status": "ready",
            "text": "ok",
            "request_id": 1,
            "language": "en",
            "error": None,
        }


# ------------------------------------------------------------------
# Gemini client
# ------------------------------------------------------------------


def _gemini(handler, **cfg) -> GeminiGenerator:
    config = SeoquoteConfig(gemini_api_key="test-key", **cfg)
    return GeminiGenerator(config, transport=httpx.MockTransport(handler))


class TestGemini:
    def test_generate(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["key"] = request.headers.get("x-goog-api-key")
            seen["body"] = request.content
            return httpx.Response(
                200,
                json={"candidates": [{"content": {"parts": [{"text": "Hello "}, {"text": "world"}]}}]},
            )

        text = asyncio.run(_gemini(handler).generate("write something"))
        assert text == "Hello world"
        assert seen["url"].endswith("/models/gemini-3-flash-preview:generateContent")
        assert seen["key"] == "test-key"
        assert b"write something" in seen["body"]

    def test_custom_model_and_url(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            return httpx.Response(200, json={"candidates": []})

        gen = _gemini(handler, gemini_model="gemini-pro", gemini_base_url="http://llm.local/v1/")
        assert asyncio.run(gen.generate("x")) == ""
        assert seen["url"] == "http://llm.local/v1/models/gemini-pro:generateContent"

    def test_http_error(self):
        gen = _gemini(lambda request: httpx.Response(503, text="overloaded"))
        with pytest.raises(ProposalGenerationError) as exc:
            asyncio.run(gen.generate("x"))
        assert exc.value.status_code == 503

    def test_connect_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(ProposalGenerationError):
            asyncio.run(_gemini(handler).generate("x"))

    def test_invalid_json(self):
        gen = _gemini(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(ProposalGenerationError):
            asyncio.run(gen.generate("x"))

    def test_missing_key(self):
        with pytest.raises(ConfigError):
            asyncio.run(GeminiGenerator(SeoquoteConfig()).generate("x"))

    def test_missing_key_becomes_fallback(self, quote):
        req = ProposalRequester(GeminiGenerator(SeoquoteConfig()))
        state = asyncio.run(req.request(quote))
        assert state.status is ProposalStatus.FAILED
        assert state.text == FAILURE_TEXT["en"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"candidates": ["oops"]},
            {"candidates": {"0": {}}},
            {"candidates": [{"content": "text"}]},
            {"candidates": [{"content": {"parts": "text"}}]},
        ],
    )
    def test_malformed_payload(self, payload):
        gen = _gemini(lambda request: httpx.Response(200, json=payload))
        with pytest.raises(ProposalGenerationError):
            asyncio.run(gen.generate("x"))

    def test_extract_text(self):
        assert extract_text({}) == ""
        assert extract_text({"candidates": [{"content": {}}]}) == ""
        with pytest.raises(ProposalGenerationError):
            extract_text(["not", "a", "dict"])
