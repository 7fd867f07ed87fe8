from __future__ import annotations

import asyncio
import logging

from core.config import QUESTION_SCORING_CONCURRENCY
from interview_analysis.dispatch import FallbackStep
from interview_analysis.llm import GenerativeTextService
from interview_analysis.models import QAPair, QuestionAnalysis, clamp_score
from interview_analysis.parsing import extract_json_dict
from interview_analysis.prompts import build_question_scoring_prompt
from interview_analysis.sentiment import sentiment_score

logger = logging.getLogger("interview_analysis.scoring.question_scorer")

SCORING_TEMPERATURE = 0.3
DEFAULT_SUB_SCORE = 70
SPEAKING_PACE_WPM = 140
MAX_LIST_ITEMS = 3

FALLBACK_STRENGTHS = ["Clear communication", "Relevant examples"]
FALLBACK_IMPROVEMENTS = ["More specific details", "Stronger conclusion"]


def estimate_duration(answer: str) -> str:
    words = len(str(answer or "").split())
    total_seconds = int(round(words / SPEAKING_PACE_WPM * 60))
    return f"{total_seconds // 60}m {total_seconds % 60}s"


def _clean_list(value, default: list[str]) -> list[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return list(default)
    items = [str(item).strip() for item in value if str(item or "").strip()]
    return items[:MAX_LIST_ITEMS] or list(default)


def _sub_score(data: dict, key: str) -> float:
    value = data.get(key)
    if value is None or value == "":
        return DEFAULT_SUB_SCORE
    return clamp_score(value, default=DEFAULT_SUB_SCORE)


def fallback_question_analysis(pair: QAPair, question_id: int) -> QuestionAnalysis:
    base = clamp_score(75 + sentiment_score(pair.answer) * 3, 60, 85)
    return QuestionAnalysis(
        id=question_id,
        question=pair.question,
        response=pair.answer,
        score=base,
        confidence=base - 5,
        clarity=base,
        relevance=base - 3,
        depth=base - 8,
        strengths=list(FALLBACK_STRENGTHS),
        improvements=list(FALLBACK_IMPROVEMENTS),
        duration=estimate_duration(pair.answer),
    )


class QuestionScorer:
    def __init__(self, service: GenerativeTextService, concurrency: int | None = None):
        self.service = service
        self.concurrency = max(1, int(concurrency or QUESTION_SCORING_CONCURRENCY))
        self._step = FallbackStep(
            name="question_scoring",
            primary_fn=self.score_with_model,
            fallback_fn=fallback_question_analysis,
        )

    async def score_with_model(self, pair: QAPair, question_id: int) -> QuestionAnalysis:
        raw = await self.service.request(build_question_scoring_prompt(pair.question, pair.answer), SCORING_TEMPERATURE)
        data = extract_json_dict(raw)
        duration = str(data.get("duration") or "").strip() or estimate_duration(pair.answer)
        return QuestionAnalysis(
            id=question_id,
            question=pair.question,
            response=pair.answer,
            score=_sub_score(data, "score"),
            confidence=_sub_score(data, "confidence"),
            clarity=_sub_score(data, "clarity"),
            relevance=_sub_score(data, "relevance"),
            depth=_sub_score(data, "depth"),
            strengths=_clean_list(data.get("strengths"), FALLBACK_STRENGTHS),
            improvements=_clean_list(data.get("improvements"), FALLBACK_IMPROVEMENTS),
            duration=duration,
        )

    async def score(self, pair: QAPair, question_id: int) -> QuestionAnalysis:
        return await self._step.run(pair, question_id)

    async def score_all(self, pairs: list[QAPair]) -> list[QuestionAnalysis]:
        """
        Score pairs in extraction order. Ids are 1-based positions in `pairs`,
        independent of the order in which calls complete.
        """
        if not pairs:
            return []

        if self.concurrency == 1:
            results = []
            for index, pair in enumerate(pairs, start=1):
                results.append(await self.score(pair, index))
            return results

        semaphore = asyncio.Semaphore(self.concurrency)

        async def _bounded(pair: QAPair, question_id: int) -> QuestionAnalysis:
            async with semaphore:
                return await self.score(pair, question_id)

        return list(await asyncio.gather(*[_bounded(pair, index) for index, pair in enumerate(pairs, start=1)]))
