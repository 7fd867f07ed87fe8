from __future__ import annotations

from interview_analysis.models import ConversationTurn, TranscriptSegment


def group_turns(segments: list[TranscriptSegment]) -> list[ConversationTurn]:
    """Collapse consecutive same-speaker segments into turns."""
    turns: list[ConversationTurn] = []
    current: ConversationTurn | None = None

    for segment in segments:
        if current is None or current.is_candidate != segment.is_candidate:
            if current is not None:
                turns.append(current)
            current = ConversationTurn(
                is_candidate=segment.is_candidate,
                text=segment.text,
                timestamp=segment.timestamp,
                segment_count=1,
            )
            continue

        current.text = f"{current.text} {segment.text}"
        current.segment_count += 1

    if current is not None:
        turns.append(current)
    return turns


def format_dialogue(turns: list[ConversationTurn]) -> str:
    return "\n".join(
        f"{'CANDIDATE' if turn.is_candidate else 'INTERVIEWER'}: {turn.text}"
        for turn in turns
    )
