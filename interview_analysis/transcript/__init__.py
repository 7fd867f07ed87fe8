from interview_analysis.transcript.segmenter import build_segments, candidate_segments, candidate_text
from interview_analysis.transcript.turns import format_dialogue, group_turns

__all__ = ["build_segments", "candidate_segments", "candidate_text", "format_dialogue", "group_turns"]
