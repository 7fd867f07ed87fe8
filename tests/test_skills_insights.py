import pytest

from interview_analysis.errors import MalformedResponse
from interview_analysis.insights import (
    FALLBACK_SUMMARY,
    InsightGenerator,
    fallback_insights,
    normalize_insights,
)
from interview_analysis.scoring import SKILL_NAMES, SkillsAssessor, baseline_skills
from interview_analysis.scoring.skills import normalize_skills


def test_baseline_skills_fixed_order_and_values():
    skills = baseline_skills()

    assert [item.skill for item in skills] == SKILL_NAMES
    assert [item.score for item in skills] == [75, 70, 78, 65, 80, 72]
    assert all(item.max == 100 for item in skills)


def test_normalize_skills_fills_missing_dimensions_from_baseline():
    skills = normalize_skills(
        [
            {"skill": "communication", "score": 91, "reasoning": "Very clear"},
            {"skill": "Juggling", "score": 99},
            {"skill": "Technical Skills", "score": 250},
        ]
    )

    assert [item.skill for item in skills] == SKILL_NAMES
    assert skills[0].score == 100
    assert skills[1].score == 91
    assert skills[1].reasoning == "Very clear"
    assert skills[2].score == 78


def test_normalize_skills_rejects_unknown_only():
    with pytest.raises(MalformedResponse):
        normalize_skills([{"skill": "Juggling", "score": 50}])


@pytest.mark.asyncio
async def test_skills_model_path(scripted_service):
    service = scripted_service(
        {"skills": [{"skill": name, "score": 60, "reasoning": "ok"} for name in SKILL_NAMES]}
    )

    skills = await SkillsAssessor(service).assess("I like building systems", "Backend Engineer")

    assert [item.score for item in skills] == [60] * 6
    assert "Backend Engineer" in service.calls[0][1]


@pytest.mark.asyncio
async def test_skills_fallback_on_failure(failing_service):
    skills = await SkillsAssessor(failing_service).assess("text", "role")

    assert [item.score for item in skills] == [75, 70, 78, 65, 80, 72]


def test_normalize_insights_coerces_unknown_type_and_caps_count():
    insights = normalize_insights(
        [{"type": "weird", "title": f"Insight {i}", "description": "d", "confidence": 120} for i in range(6)]
    )

    assert len(insights) == 4
    assert insights[0].type == "neutral"
    assert insights[0].confidence == 100


def test_normalize_insights_rejects_untitled():
    with pytest.raises(MalformedResponse):
        normalize_insights([{"type": "strength", "title": ""}])


@pytest.mark.asyncio
async def test_insights_model_path(scripted_service):
    service = scripted_service(
        {
            "insights": 'Here you go: [{"type": "strength", "title": "Owns outcomes", "description": "x", "confidence": 82}]',
            "summary": '"Strong ownership with room to grow in system design."',
        }
    )
    generator = InsightGenerator(service)

    insights = await generator.generate("text", "role")
    summary = await generator.summarize("text", "role")

    assert [item.title for item in insights] == ["Owns outcomes"]
    assert insights[0].confidence == 82
    assert summary == "Strong ownership with room to grow in system design."


@pytest.mark.asyncio
async def test_insights_and_summary_fallbacks(failing_service):
    generator = InsightGenerator(failing_service)

    insights = await generator.generate("text", "role")
    summary = await generator.summarize("text", "role")

    assert [item.to_dict() for item in insights] == [item.to_dict() for item in fallback_insights()]
    assert summary == FALLBACK_SUMMARY


@pytest.mark.asyncio
async def test_blank_summary_uses_fallback(scripted_service):
    generator = InsightGenerator(scripted_service({"summary": "```\n```"}))

    assert await generator.summarize("text", "role") == FALLBACK_SUMMARY
