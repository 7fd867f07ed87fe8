from __future__ import annotations

import logging
import re

from interview_analysis.models import SpeakingPatterns, TranscriptSegment
from interview_analysis.speaking.rules import (
    DEFAULT_PAUSE_SEC,
    FILLER_WORDS,
    MIN_SPEAKING_MINUTES,
    PAUSE_MAX_SEC,
    PAUSE_MIN_SEC,
)
from interview_analysis.transcript import candidate_segments, group_turns

logger = logging.getLogger("interview_analysis.speaking.patterns")

_FILLER_PATTERNS = [re.compile(r"\b" + re.escape(filler) + r"\b") for filler in FILLER_WORDS]
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_EDGE_PUNCT_RE = re.compile(r"^[^\w']+|[^\w']+$")


def count_filler_words(text: str) -> int:
    lowered = str(text or "").lower()
    return sum(len(pattern.findall(lowered)) for pattern in _FILLER_PATTERNS)


def count_sentences(text: str) -> int:
    return len([part for part in _SENTENCE_SPLIT_RE.split(str(text or "")) if part.strip()])


def vocabulary_richness(words: list[str]) -> int:
    if not words:
        return 0
    unique = {_EDGE_PUNCT_RE.sub("", word.lower()) for word in words}
    unique.discard("")
    return min(100, int(round(len(unique) / len(words) * 100)))


def count_interruptions(segments: list[TranscriptSegment]) -> int:
    """
    Proxy: a single-segment turn with a different speaker on each side.
    Short acknowledgements ("right", "ok") are counted too.
    """
    turns = group_turns(segments)
    return sum(1 for turn in turns[1:-1] if turn.segment_count == 1)


def average_pause_length(candidate: list[TranscriptSegment]) -> float:
    if len(candidate) < 2:
        return 0.0

    pauses = []
    for previous, current in zip(candidate, candidate[1:]):
        gap = (current.timestamp - previous.timestamp) / 1000.0
        if PAUSE_MIN_SEC <= gap <= PAUSE_MAX_SEC:
            pauses.append(gap)

    if not pauses:
        return DEFAULT_PAUSE_SEC
    return round(sum(pauses) / len(pauses), 1)


def analyze_speaking_patterns(segments: list[TranscriptSegment]) -> SpeakingPatterns:
    candidate = candidate_segments(segments)
    full_text = " ".join(seg.text for seg in candidate).strip()
    if not full_text:
        logger.info("no candidate speech, speaking patterns are zero")
        return SpeakingPatterns()

    words = full_text.split()
    span_minutes = (candidate[-1].timestamp - candidate[0].timestamp) / 60000.0
    words_per_minute = int(round(len(words) / max(span_minutes, MIN_SPEAKING_MINUTES)))

    patterns = SpeakingPatterns(
        words_per_minute=words_per_minute,
        filler_words=count_filler_words(full_text),
        average_pause_length=average_pause_length(candidate),
        interruptions=count_interruptions(segments),
        sentence_complexity=int(round(len(words) / max(count_sentences(full_text), 1))),
        vocabulary_richness=vocabulary_richness(words),
    )
    logger.debug("speaking patterns: %s", patterns.to_dict())
    return patterns
