from interview_analysis.models import QuestionAnalysis, SkillAssessment, SpeakingPatterns, TranscriptEntry
from interview_analysis.scoring import baseline_skills, calculate_overall_score, speaking_quality
from interview_analysis.timeline import (
    BUCKET_COUNT,
    build_confidence_timeline,
    bucket_time_labels,
    empty_confidence_timeline,
    truncate_label,
)
from interview_analysis.transcript import build_segments


def _analysis(question_id: int, question: str, confidence: int, score: int = 80) -> QuestionAnalysis:
    return QuestionAnalysis(id=question_id, question=question, response="", score=score, confidence=confidence)


def test_speaking_quality_peaks_at_ideal_pace():
    assert speaking_quality(SpeakingPatterns(words_per_minute=140)) == 85
    assert speaking_quality(SpeakingPatterns(words_per_minute=100, filler_words=5)) == 55
    assert speaking_quality(SpeakingPatterns(words_per_minute=1000, filler_words=50)) == 0


def test_overall_score_weighting():
    skills = [SkillAssessment(skill="Communication", score=80)]
    analyses = [_analysis(1, "Q", 50, score=60), _analysis(2, "Q", 50, score=80)]
    patterns = SpeakingPatterns(words_per_minute=140)

    # 0.4 * 80 + 0.4 * 70 + 0.2 * 85
    assert calculate_overall_score(skills, analyses, patterns) == 77


def test_overall_score_empty_question_list_contributes_zero():
    score = calculate_overall_score(baseline_skills(), [], SpeakingPatterns())

    # skills mean 73.33, speaking quality 15
    assert score == 32


def test_overall_score_stays_in_range():
    skills = [SkillAssessment(skill="Communication", score=100)]
    analyses = [_analysis(1, "Q", 100, score=100)]

    assert calculate_overall_score(skills, analyses, SpeakingPatterns(words_per_minute=140)) == 97
    assert 0 <= calculate_overall_score([], [], SpeakingPatterns(words_per_minute=5000, filler_words=999)) <= 100


def test_truncate_label():
    assert truncate_label("short") == "short"
    assert truncate_label("x" * 40) == "x" * 27 + "..."
    assert len(truncate_label("y" * 31)) == 30
    assert truncate_label("z" * 30) == "z" * 30


def test_bucket_labels_use_reference_grid_for_zero_span():
    labels = bucket_time_labels([])

    assert len(labels) == BUCKET_COUNT
    assert labels[0] == "0-5m"
    assert labels[-1] == "40-45m"


def test_bucket_labels_follow_session_span():
    segments = build_segments(
        [TranscriptEntry("candidate", "a", 0), TranscriptEntry("candidate", "b", 9 * 60000)],
        [],
        "candidate",
    )

    labels = bucket_time_labels(segments)

    assert labels[0] == "0-1m"
    assert labels[-1] == "8-9m"


def test_timeline_always_has_nine_bounded_points():
    segments = build_segments(
        [TranscriptEntry("candidate", f"I really love this great work {i}", i * 1000) for i in range(20)],
        [],
        "candidate",
    )
    analyses = [_analysis(1, "Tell me about your favourite project in detail", 99)]

    points = build_confidence_timeline(segments, analyses)

    assert len(points) == BUCKET_COUNT
    assert all(50 <= point.confidence <= 95 for point in points)
    assert points[0].question == truncate_label(analyses[0].question)


def test_timeline_without_analyses_uses_topics_and_baseline():
    points = build_confidence_timeline([], [])

    assert [point.question for point in points] == [f"Topic {i}" for i in range(1, 10)]
    assert all(point.confidence == 70 for point in points)


def test_timeline_maps_analyses_proportionally():
    analyses = [_analysis(i, f"Q{i}", 60) for i in range(1, 4)]

    points = build_confidence_timeline([], analyses)

    assert [point.question for point in points] == ["Q1"] * 3 + ["Q2"] * 3 + ["Q3"] * 3


def test_empty_timeline():
    points = empty_confidence_timeline()

    assert len(points) == BUCKET_COUNT
    assert all(point.confidence == 0 for point in points)
