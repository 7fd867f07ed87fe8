def build_qa_extraction_prompt(dialogue: str) -> str:
    """
    Ask the model to pull question/answer pairs out of a labelled dialogue.
    The dialogue uses INTERVIEWER: / CANDIDATE: prefixes, one turn per line.
    """

    return f"""
Extract interview questions and candidate answers from this conversation transcript.

Conversation:
{dialogue}

Identify clear question-answer pairs where:
1. The INTERVIEWER asks a question
2. The CANDIDATE provides a substantial response (more than just "yes/no")

Only include meaningful interview questions, not small talk or confirmations.

Respond with ONLY a valid JSON array, no markdown formatting:
[
  {{
    "question": "exact question asked by interviewer",
    "answer": "candidate's complete response",
    "timestamp": estimated_timestamp_number
  }}
]
Do not wrap the response in ```json blocks - return raw JSON only.
"""
