from __future__ import annotations

import asyncio
import json

import httpx

from pms.models.enums import TicketPriority
from pms.services.assessment import (
    FALLBACK_ASSESSMENT,
    FALLBACK_SUMMARY,
    DisabledAssessmentClient,
    GeminiAssessmentClient,
    KeywordAssessmentClient,
)


def _gemini(handler) -> GeminiAssessmentClient:
    return GeminiAssessmentClient(
        api_key="test-key",
        model="gemini-1.5-flash",
        base_url="https://gemini.test/v1beta",
        timeout_seconds=2.0,
        transport=httpx.MockTransport(handler),
    )


def _reply(text: str) -> httpx.Response:
    return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": text}]}}]})


def test_disabled_client_returns_fallback():
    client = DisabledAssessmentClient()
    result = asyncio.run(client.classify_maintenance("Water everywhere"))
    assert result.priority == TicketPriority.MEDIUM
    assert result.assessment == FALLBACK_ASSESSMENT
    assert asyncio.run(client.summarize_lease("Lease.")) == FALLBACK_SUMMARY


def test_keyword_triage():
    client = KeywordAssessmentClient()
    assert asyncio.run(client.classify_maintenance("Gas smell in hallway")).priority == TicketPriority.EMERGENCY
    leak = asyncio.run(client.classify_maintenance("Leaking pipe under the sink"))
    assert leak.priority == TicketPriority.HIGH
    assert "plumbing" in leak.assessment
    assert asyncio.run(client.classify_maintenance("Door is sticky")).priority == TicketPriority.MEDIUM


def test_gemini_classify_parses_json():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return _reply(json.dumps({"priority": "high", "assessment": "Burst pipe. Shut the valve."}))

    result = asyncio.run(_gemini(handler).classify_maintenance("Pipe burst"))

    assert result.priority == TicketPriority.HIGH
    assert result.assessment == "Burst pipe. Shut the valve."
    assert "models/gemini-1.5-flash:generateContent" in seen["url"]
    assert "key=test-key" in seen["url"]
    assert seen["body"]["generationConfig"]["responseMimeType"] == "application/json"


def test_gemini_failures_fall_back():
    def server_error(request):
        return httpx.Response(500, json={"error": "unavailable"})

    def malformed(request):
        return _reply("not json at all")

    def unknown_priority(request):
        return _reply(json.dumps({"priority": "CRITICAL", "assessment": "x"}))

    def timeout(request):
        raise httpx.ReadTimeout("timed out", request=request)

    for handler in (server_error, malformed, unknown_priority, timeout):
        result = asyncio.run(_gemini(handler).classify_maintenance("Leak"))
        assert result.priority == TicketPriority.MEDIUM
        assert result.assessment == FALLBACK_ASSESSMENT


def test_gemini_summary():
    ok = _gemini(lambda request: _reply("- One year\n- 2500 per year"))
    assert asyncio.run(ok.summarize_lease("Lease text.")) == "- One year\n- 2500 per year"

    empty = _gemini(lambda request: _reply("   "))
    assert asyncio.run(empty.summarize_lease("Lease text.")) == FALLBACK_SUMMARY

    broken = _gemini(lambda request: httpx.Response(403))
    assert asyncio.run(broken.summarize_lease("Lease text.")) == FALLBACK_SUMMARY


def test_gemini_total_deadline_falls_back():
    async def slow(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(1)
        return _reply(json.dumps({"priority": "LOW", "assessment": "late"}))

    client = GeminiAssessmentClient(
        api_key="test-key",
        model="gemini-1.5-flash",
        base_url="https://gemini.test/v1beta",
        timeout_seconds=0.05,
        transport=httpx.MockTransport(slow),
    )
    result = asyncio.run(client.classify_maintenance("Leak"))
    assert result.priority == TicketPriority.MEDIUM
    assert result.assessment == FALLBACK_ASSESSMENT
