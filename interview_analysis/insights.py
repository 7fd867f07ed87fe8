from __future__ import annotations

import logging

from interview_analysis.dispatch import FallbackStep
from interview_analysis.errors import MalformedResponse
from interview_analysis.llm import GenerativeTextService
from interview_analysis.models import KeyInsight
from interview_analysis.parsing import extract_json_list, strip_code_fences
from interview_analysis.prompts import build_insights_prompt, build_summary_prompt

logger = logging.getLogger("interview_analysis.insights")

INSIGHTS_TEMPERATURE = 0.4
SUMMARY_TEMPERATURE = 0.3
MAX_INSIGHTS = 4

FALLBACK_SUMMARY = "The candidate demonstrated good communication skills with room for technical growth."


def fallback_insights(*_args, **_kwargs) -> list[KeyInsight]:
    return [
        KeyInsight(
            type="strength",
            title="Strong Technical Foundation",
            description="Demonstrates solid understanding of core concepts and best practices.",
            confidence=85,
        ),
        KeyInsight(
            type="improvement",
            title="Communication Clarity",
            description="Consider structuring answers with clear beginning, middle, and end.",
            confidence=75,
        ),
        KeyInsight(
            type="strength",
            title="Problem-Solving Approach",
            description="Shows systematic thinking and considers multiple solutions.",
            confidence=80,
        ),
    ]


def fallback_summary(*_args, **_kwargs) -> str:
    return FALLBACK_SUMMARY


def normalize_insights(items: list) -> list[KeyInsight]:
    insights: list[KeyInsight] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        title = str(item.get("title") or "").strip()
        if not title:
            continue
        insights.append(
            KeyInsight(
                type=str(item.get("type") or "neutral").strip().lower(),
                title=title,
                description=str(item.get("description") or "").strip(),
                confidence=item.get("confidence", 0),
            )
        )
    if not insights:
        raise MalformedResponse("no usable insights in response")
    return insights[:MAX_INSIGHTS]


class InsightGenerator:
    def __init__(self, service: GenerativeTextService):
        self.service = service
        self._insights_step = FallbackStep(
            name="key_insights",
            primary_fn=self.insights_with_model,
            fallback_fn=fallback_insights,
        )
        self._summary_step = FallbackStep(
            name="summary",
            primary_fn=self.summary_with_model,
            fallback_fn=fallback_summary,
        )

    async def insights_with_model(self, candidate_text: str, position_role: str) -> list[KeyInsight]:
        raw = await self.service.request(build_insights_prompt(candidate_text, position_role), INSIGHTS_TEMPERATURE)
        return normalize_insights(extract_json_list(raw))

    async def summary_with_model(self, candidate_text: str, position_role: str) -> str:
        raw = await self.service.request(build_summary_prompt(candidate_text, position_role), SUMMARY_TEMPERATURE)
        summary = strip_code_fences(raw).strip().strip('"').strip()
        if not summary:
            raise MalformedResponse("blank summary", raw=raw)
        return summary

    async def generate(self, candidate_text: str, position_role: str) -> list[KeyInsight]:
        return await self._insights_step.run(candidate_text, position_role)

    async def summarize(self, candidate_text: str, position_role: str) -> str:
        return await self._summary_step.run(candidate_text, position_role)
