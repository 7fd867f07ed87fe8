from __future__ import annotations

import logging

from interview_analysis.dispatch import FallbackStep
from interview_analysis.errors import MalformedResponse
from interview_analysis.llm import GenerativeTextService
from interview_analysis.models import SkillAssessment
from interview_analysis.parsing import extract_json_list
from interview_analysis.prompts import build_skills_prompt

logger = logging.getLogger("interview_analysis.scoring.skills")

SKILLS_TEMPERATURE = 0.3

SKILL_NAMES = [
    "Technical Skills",
    "Communication",
    "Problem Solving",
    "Leadership",
    "Cultural Fit",
    "Experience",
]

BASELINE_SKILLS = {
    "Technical Skills": (75, "Demonstrates solid foundation"),
    "Communication": (70, "Clear and articulate responses"),
    "Problem Solving": (78, "Good analytical approach"),
    "Leadership": (65, "Some leadership examples provided"),
    "Cultural Fit": (80, "Aligns well with team values"),
    "Experience": (72, "Relevant background demonstrated"),
}


def baseline_skills(*_args, **_kwargs) -> list[SkillAssessment]:
    return [
        SkillAssessment(skill=name, score=BASELINE_SKILLS[name][0], reasoning=BASELINE_SKILLS[name][1])
        for name in SKILL_NAMES
    ]


def _canonical_skill(name) -> str | None:
    key = str(name or "").strip().lower()
    for skill in SKILL_NAMES:
        if skill.lower() == key:
            return skill
    return None


def normalize_skills(items: list) -> list[SkillAssessment]:
    """
    Map model output onto the fixed six dimensions, in fixed order.
    Dimensions the model skipped keep their baseline value.
    """
    found: dict[str, SkillAssessment] = {}
    for item in items:
        if not isinstance(item, dict):
            continue
        skill = _canonical_skill(item.get("skill"))
        if skill is None or skill in found:
            continue
        score = item.get("score")
        if score is None:
            score = BASELINE_SKILLS[skill][0]
        found[skill] = SkillAssessment(
            skill=skill,
            score=score,
            reasoning=str(item.get("reasoning") or "").strip() or "Analysis in progress",
        )

    if not found:
        raise MalformedResponse("no known skill dimensions in response")

    missing = [name for name in SKILL_NAMES if name not in found]
    if missing:
        logger.info("skills response missing %s, using baseline for them", missing)
    baseline = {item.skill: item for item in baseline_skills()}
    return [found.get(name, baseline[name]) for name in SKILL_NAMES]


class SkillsAssessor:
    def __init__(self, service: GenerativeTextService):
        self.service = service
        self._step = FallbackStep(
            name="skills_assessment",
            primary_fn=self.assess_with_model,
            fallback_fn=baseline_skills,
        )

    async def assess_with_model(self, candidate_text: str, position_role: str) -> list[SkillAssessment]:
        raw = await self.service.request(
            build_skills_prompt(candidate_text, position_role, SKILL_NAMES),
            SKILLS_TEMPERATURE,
        )
        return normalize_skills(extract_json_list(raw))

    async def assess(self, candidate_text: str, position_role: str) -> list[SkillAssessment]:
        return await self._step.run(candidate_text, position_role)
