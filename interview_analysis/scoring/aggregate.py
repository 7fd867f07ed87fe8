from interview_analysis.models import QuestionAnalysis, SkillAssessment, SpeakingPatterns, clamp_score

SKILLS_WEIGHT = 0.4
QUESTIONS_WEIGHT = 0.4
SPEAKING_WEIGHT = 0.2

IDEAL_WPM = 140
# contributed by an empty list instead of NaN
EMPTY_MEAN_BASELINE = 0.0


def _avg(values: list[float]) -> float:
    return sum(values) / len(values) if values else EMPTY_MEAN_BASELINE


def speaking_quality(patterns: SpeakingPatterns) -> float:
    raw = 85 - abs(patterns.words_per_minute - IDEAL_WPM) * 0.5 - patterns.filler_words * 2
    return clamp_score(raw)


def calculate_overall_score(
    skills: list[SkillAssessment],
    analyses: list[QuestionAnalysis],
    patterns: SpeakingPatterns,
) -> int:
    skills_avg = _avg([float(item.score) for item in skills])
    questions_avg = _avg([float(item.score) for item in analyses])
    weighted = (
        SKILLS_WEIGHT * skills_avg
        + QUESTIONS_WEIGHT * questions_avg
        + SPEAKING_WEIGHT * speaking_quality(patterns)
    )
    return int(round(clamp_score(weighted)))
