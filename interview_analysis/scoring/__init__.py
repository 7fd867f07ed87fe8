from interview_analysis.scoring.aggregate import calculate_overall_score, speaking_quality
from interview_analysis.scoring.question_scorer import QuestionScorer, fallback_question_analysis
from interview_analysis.scoring.skills import SKILL_NAMES, SkillsAssessor, baseline_skills

__all__ = [
    "calculate_overall_score",
    "speaking_quality",
    "QuestionScorer",
    "fallback_question_analysis",
    "SKILL_NAMES",
    "SkillsAssessor",
    "baseline_skills",
]
