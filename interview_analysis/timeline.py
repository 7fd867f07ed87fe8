from __future__ import annotations

from interview_analysis.models import ConfidencePoint, QuestionAnalysis, TranscriptSegment, clamp_score
from interview_analysis.sentiment import sentiment_score

BUCKET_COUNT = 9
BASELINE_CONFIDENCE = 70
CONFIDENCE_FLOOR = 50
CONFIDENCE_CEILING = 95
SENTIMENT_WEIGHT = 5
QUESTION_LABEL_CHARS = 30
REFERENCE_BUCKET_MINUTES = 5


def truncate_label(text: str, limit: int = QUESTION_LABEL_CHARS) -> str:
    content = str(text or "").strip()
    if len(content) <= limit:
        return content
    return content[:limit - 3] + "..."


def _format_minutes(value: float) -> str:
    return f"{round(value, 1):g}"


def bucket_time_labels(segments: list[TranscriptSegment], bucket_count: int = BUCKET_COUNT) -> list[str]:
    span_ms = (segments[-1].timestamp - segments[0].timestamp) if segments else 0.0
    if span_ms <= 0:
        return [
            f"{i * REFERENCE_BUCKET_MINUTES}-{(i + 1) * REFERENCE_BUCKET_MINUTES}m"
            for i in range(bucket_count)
        ]

    width = span_ms / 60000.0 / bucket_count
    return [f"{_format_minutes(i * width)}-{_format_minutes((i + 1) * width)}m" for i in range(bucket_count)]


def build_confidence_timeline(
    segments: list[TranscriptSegment],
    analyses: list[QuestionAnalysis],
    bucket_count: int = BUCKET_COUNT,
) -> list[ConfidencePoint]:
    labels = bucket_time_labels(segments, bucket_count)
    total = len(segments)
    points: list[ConfidencePoint] = []

    for i in range(bucket_count):
        analysis = analyses[(i * len(analyses)) // bucket_count] if analyses else None
        confidence = float(analysis.confidence) if analysis else float(BASELINE_CONFIDENCE)

        window = segments[(i * total) // bucket_count:((i + 1) * total) // bucket_count]
        window_text = " ".join(seg.text for seg in window if seg.is_candidate)
        if window_text:
            confidence += sentiment_score(window_text) * SENTIMENT_WEIGHT

        points.append(
            ConfidencePoint(
                time=labels[i],
                confidence=clamp_score(confidence, CONFIDENCE_FLOOR, CONFIDENCE_CEILING),
                question=truncate_label(analysis.question) if analysis else f"Topic {i + 1}",
            )
        )
    return points


def empty_confidence_timeline(bucket_count: int = BUCKET_COUNT) -> list[ConfidencePoint]:
    labels = bucket_time_labels([], bucket_count)
    return [ConfidencePoint(time=labels[i], confidence=0, question=f"Topic {i + 1}") for i in range(bucket_count)]
