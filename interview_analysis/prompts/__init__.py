from interview_analysis.prompts.insights import build_insights_prompt, build_summary_prompt
from interview_analysis.prompts.qa_extraction import build_qa_extraction_prompt
from interview_analysis.prompts.question_scoring import build_question_scoring_prompt
from interview_analysis.prompts.skills import build_skills_prompt

__all__ = [
    "build_insights_prompt",
    "build_summary_prompt",
    "build_qa_extraction_prompt",
    "build_question_scoring_prompt",
    "build_skills_prompt",
]
