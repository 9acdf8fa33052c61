"""External assessment client - maintenance triage and lease summaries.

Best effort by contract: any failure (network, timeout, malformed response)
degrades to a fixed fallback and is never raised to the caller.

GUARDRAILS:
- Advisory only; a missing assessment never blocks ticket creation
- No retries
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from pms.core.config import AssessmentProvider, Settings, get_settings
from pms.models.enums import TicketPriority

logger = logging.getLogger(__name__)

FALLBACK_ASSESSMENT = "Manual assessment required. Automated triage is unavailable."
FALLBACK_SUMMARY = "Summary unavailable. Please review the full agreement."

# Priority keywords, checked from most to least urgent
PRIORITY_KEYWORDS = {
    TicketPriority.EMERGENCY: ["emergency", "fire", "flood", "gas", "smoke", "sparking", "no heat", "no water"],
    TicketPriority.HIGH: ["leak", "broken", "not working", "burst", "damage", "electric", "sewage"],
    TicketPriority.LOW: ["cosmetic", "paint", "squeak", "scratch", "bulb", "minor"],
}

# Trade categories for the assessment text
CATEGORY_KEYWORDS = {
    "plumbing": ["leak", "water", "drain", "pipe", "faucet", "toilet", "shower", "sink"],
    "hvac": ["heat", "cool", "ac", "air", "furnace", "thermostat", "vent"],
    "electrical": ["electric", "outlet", "switch", "light", "power", "wire", "breaker"],
    "roofing": ["roof", "shingle", "gutter", "ceiling"],
}

CLASSIFY_PROMPT = (
    "You are a property maintenance triage assistant. Classify the tenant's issue.\n"
    "Reply with JSON only: {{\"priority\": one of LOW, MEDIUM, HIGH, EMERGENCY, "
    "\"assessment\": a two-sentence technical assessment}}.\n\nIssue: {issue}"
)

SUMMARY_PROMPT = (
    "Summarize this lease agreement for a tenant in three short bullet points, "
    "covering term, rent and key obligations.\n\n{lease}"
)


@dataclass(frozen=True)
class Assessment:
    priority: TicketPriority
    assessment: str


FALLBACK = Assessment(priority=TicketPriority.MEDIUM, assessment=FALLBACK_ASSESSMENT)


class AssessmentClient(ABC):
    """Text service with one structured and one free-text endpoint."""

    async def classify_maintenance(self, issue_text: str) -> Assessment:
        try:
            return await self._classify(issue_text)
        except Exception as e:
            logger.warning(f"[ASSESSMENT] Maintenance triage failed, using fallback: {e}")
            return FALLBACK

    async def summarize_lease(self, lease_text: str) -> str:
        try:
            summary = await self._summarize(lease_text)
        except Exception as e:
            logger.warning(f"[ASSESSMENT] Lease summary failed, using fallback: {e}")
            return FALLBACK_SUMMARY
        return summary or FALLBACK_SUMMARY

    @abstractmethod
    async def _classify(self, issue_text: str) -> Assessment:
        pass

    @abstractmethod
    async def _summarize(self, lease_text: str) -> str:
        pass


class DisabledAssessmentClient(AssessmentClient):
    """Assessment switched off: every call returns the fallback."""

    async def _classify(self, issue_text: str) -> Assessment:
        return FALLBACK

    async def _summarize(self, lease_text: str) -> str:
        return FALLBACK_SUMMARY


class KeywordAssessmentClient(AssessmentClient):
    """Deterministic offline triage by keyword matching."""

    async def _classify(self, issue_text: str) -> Assessment:
        text = issue_text.lower()

        priority = TicketPriority.MEDIUM
        for candidate, keywords in PRIORITY_KEYWORDS.items():
            if any(kw in text for kw in keywords):
                priority = candidate
                break

        category = "general"
        max_matches = 0
        for name, keywords in CATEGORY_KEYWORDS.items():
            matches = sum(1 for kw in keywords if kw in text)
            if matches > max_matches:
                max_matches = matches
                category = name

        return Assessment(
            priority=priority,
            assessment=(
                f"Based on keywords, categorized as {category} with {priority.value} priority. "
                "This is a non-binding advisory assessment."
            ),
        )

    async def _summarize(self, lease_text: str) -> str:
        sentences = [s.strip() for s in lease_text.split(".") if s.strip()]
        return "\n".join(f"- {s}." for s in sentences[:3])


class GeminiAssessmentClient(AssessmentClient):
    """Generative-text assessment over the Gemini ``generateContent`` REST API."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout_seconds: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def _generate(self, prompt: str, json_output: bool = False) -> str:
        body: dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        if json_output:
            body["generationConfig"] = {"responseMimeType": "application/json"}

        async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
            # httpx bounds each phase; wait_for bounds the whole call
            response = await asyncio.wait_for(
                client.post(
                    f"{self.base_url}/models/{self.model}:generateContent",
                    params={"key": self.api_key},
                    json=body,
                ),
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            data = response.json()

        return data["candidates"][0]["content"]["parts"][0]["text"]

    async def _classify(self, issue_text: str) -> Assessment:
        raw = await self._generate(CLASSIFY_PROMPT.format(issue=issue_text), json_output=True)
        parsed = json.loads(raw)
        return Assessment(
            priority=TicketPriority(str(parsed["priority"]).upper()),
            assessment=str(parsed.get("assessment") or FALLBACK_ASSESSMENT),
        )

    async def _summarize(self, lease_text: str) -> str:
        return (await self._generate(SUMMARY_PROMPT.format(lease=lease_text))).strip()


def build_assessment_client(settings: Settings) -> AssessmentClient:
    if settings.assessment_provider == AssessmentProvider.GEMINI and settings.gemini_api_key:
        return GeminiAssessmentClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout_seconds=settings.assessment_timeout_seconds,
        )
    if settings.assessment_provider == AssessmentProvider.KEYWORDS:
        return KeywordAssessmentClient()
    return DisabledAssessmentClient()


def get_assessment_client() -> AssessmentClient:
    """FastAPI dependency."""
    return build_assessment_client(get_settings())
