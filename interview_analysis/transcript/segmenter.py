from __future__ import annotations

import logging
from typing import Iterable

from interview_analysis.models import ChatEntry, TranscriptEntry, TranscriptSegment

logger = logging.getLogger("interview_analysis.transcript.segmenter")


def build_segments(
    transcripts: Iterable[TranscriptEntry] | None,
    chats: Iterable[ChatEntry] | None,
    candidate_identity: str,
) -> list[TranscriptSegment]:
    """
    Merge spoken transcript and chat entries into one timeline.

    Chat is included because interviewers often type questions; both
    sources are tagged against the configured candidate identity.
    """
    segments: list[TranscriptSegment] = []

    for entry in list(transcripts or []):
        text = str(entry.text or "").strip()
        if not text:
            continue
        segments.append(
            TranscriptSegment(
                participant_identity=entry.participant_identity,
                text=text,
                timestamp=float(entry.timestamp),
                is_candidate=entry.participant_identity == candidate_identity,
            )
        )

    for chat in list(chats or []):
        text = str(chat.message or "").strip()
        if not text:
            continue
        segments.append(
            TranscriptSegment(
                participant_identity=chat.from_identity,
                text=text,
                timestamp=float(chat.timestamp),
                is_candidate=chat.from_identity == candidate_identity,
            )
        )

    # sorted() is stable: equal timestamps keep transcript-before-chat order
    segments = sorted(segments, key=lambda seg: seg.timestamp)
    logger.debug("built %s segments (candidate=%s)", len(segments), sum(1 for s in segments if s.is_candidate))
    return segments


def candidate_segments(segments: list[TranscriptSegment]) -> list[TranscriptSegment]:
    return [seg for seg in segments if seg.is_candidate]


def candidate_text(segments: list[TranscriptSegment]) -> str:
    return " ".join(seg.text for seg in segments if seg.is_candidate).strip()
