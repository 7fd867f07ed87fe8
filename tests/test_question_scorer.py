import asyncio

import pytest

from interview_analysis.models import QAPair
from interview_analysis.scoring import QuestionScorer, fallback_question_analysis
from interview_analysis.scoring.question_scorer import (
    FALLBACK_IMPROVEMENTS,
    FALLBACK_STRENGTHS,
    estimate_duration,
)


PAIR = QAPair(question="Describe a hard bug", answer="I traced a memory leak in our cache layer", timestamp=0)


def test_estimate_duration_uses_speaking_pace():
    assert estimate_duration(" ".join(["w"] * 140)) == "1m 0s"
    assert estimate_duration("") == "0m 0s"


def test_fallback_analysis_offsets_and_bounds():
    analysis = fallback_question_analysis(PAIR, 3)

    assert analysis.id == 3
    assert 60 <= analysis.score <= 85
    assert analysis.clarity == analysis.score
    assert analysis.strengths == FALLBACK_STRENGTHS
    assert analysis.improvements == FALLBACK_IMPROVEMENTS
    for value in (analysis.confidence, analysis.relevance, analysis.depth):
        assert 0 <= value <= 100


def test_fallback_analysis_neutral_text_scores_baseline():
    neutral = QAPair(question="Q", answer="The table has four legs")

    analysis = fallback_question_analysis(neutral, 1)

    assert analysis.score == 75
    assert analysis.confidence == 70
    assert analysis.relevance == 72
    assert analysis.depth == 67


@pytest.mark.asyncio
async def test_model_scoring_clamps_and_defaults(scripted_service):
    service = scripted_service(
        {
            "scoring": {
                "score": 140,
                "confidence": -5,
                "clarity": "88",
                "relevance": None,
                "strengths": ["Specific", "Structured", "Calm", "Extra"],
                "improvements": [],
            }
        }
    )

    analysis = await QuestionScorer(service).score(PAIR, 1)

    assert analysis.score == 100
    assert analysis.confidence == 0
    assert analysis.clarity == 88
    assert analysis.relevance == 70
    assert analysis.depth == 70
    assert analysis.strengths == ["Specific", "Structured", "Calm"]
    assert analysis.improvements == FALLBACK_IMPROVEMENTS
    assert analysis.duration == estimate_duration(PAIR.answer)


@pytest.mark.asyncio
async def test_scoring_falls_back_on_garbled_output(garbled_service):
    analysis = await QuestionScorer(garbled_service).score(PAIR, 2)

    assert analysis.id == 2
    assert analysis.strengths == FALLBACK_STRENGTHS


@pytest.mark.asyncio
async def test_score_all_sequential_assigns_ids_in_order(scripted_service):
    service = scripted_service({"scoring": {"score": 80}})
    pairs = [QAPair(question=f"Q{i}", answer=f"A{i}") for i in range(3)]

    analyses = await QuestionScorer(service, concurrency=1).score_all(pairs)

    assert [item.id for item in analyses] == [1, 2, 3]
    assert [item.question for item in analyses] == ["Q0", "Q1", "Q2"]
    assert len(service.calls) == 3


@pytest.mark.asyncio
async def test_score_all_concurrent_keeps_order_and_bound():
    in_flight = 0
    peak = 0

    class _SlowService:
        async def request(self, prompt: str, temperature: float) -> str:
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            # later questions finish first
            delay = 0.03 if "Q0" in prompt else 0.0
            await asyncio.sleep(delay)
            in_flight -= 1
            return '{"score": 90}'

    pairs = [QAPair(question=f"Q{i}", answer="answer") for i in range(4)]

    analyses = await QuestionScorer(_SlowService(), concurrency=2).score_all(pairs)

    assert [item.id for item in analyses] == [1, 2, 3, 4]
    assert [item.question for item in analyses] == ["Q0", "Q1", "Q2", "Q3"]
    assert peak <= 2


@pytest.mark.asyncio
async def test_score_all_empty_makes_no_calls(failing_service):
    assert await QuestionScorer(failing_service).score_all([]) == []
    assert failing_service.calls == 0
