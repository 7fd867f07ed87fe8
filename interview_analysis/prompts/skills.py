def build_skills_prompt(transcript: str, position_role: str, skill_names: list[str]) -> str:
    skills_block = "\n".join(f"{index}. {name}" for index, name in enumerate(skill_names, start=1))

    return f"""
Analyze this interview transcript for a {position_role} position and assess the candidate's skills.

Transcript:
{transcript}

Score the candidate from 0 to 100 on each of these skills and give a one sentence reasoning:
{skills_block}

Return STRICT JSON only, as an array:
[
  {{
    "skill": "Technical Skills",
    "score": 0-100,
    "reasoning": "brief explanation"
  }}
]
"""
