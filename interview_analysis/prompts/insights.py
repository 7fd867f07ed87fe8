def build_insights_prompt(transcript: str, position_role: str) -> str:
    return f"""
Based on this interview transcript for a {position_role} position, identify 3-4 key insights
about the candidate's abilities, communication style, and fit for the role.

Transcript:
{transcript}

Return STRICT JSON only, as an array:
[
  {{
    "type": "strength | improvement | neutral",
    "title": "Brief insight title",
    "description": "Detailed description",
    "confidence": 0-100
  }}
]
"""


def build_summary_prompt(transcript: str, position_role: str) -> str:
    """
    Plain-text prompt; the answer is used verbatim as the report summary.
    """

    return f"""
Provide a 2-3 sentence summary of this candidate's interview performance for a {position_role} role.
Focus on their strongest qualities and main areas for development.
Do NOT mention AI, models, or internal metrics. Respond with the summary text only.

Transcript:
{transcript}
"""
