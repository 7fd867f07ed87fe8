def build_question_scoring_prompt(question: str, answer: str) -> str:
    return f"""
You are a senior interviewer reviewing one answer from a candidate.

Question:
{question}

Candidate Answer:
{answer}

Score the answer from 0 to 100 on:
- score: overall quality
- confidence: how confident the candidate sounded
- clarity: clarity of communication
- relevance: relevance to the question
- depth: depth of knowledge demonstrated

Also provide 2-3 key strengths, 2-3 areas for improvement and the
estimated response duration in "Xm Ys" format.

Return STRICT JSON only in this format:
{{
  "score": 0-100,
  "confidence": 0-100,
  "clarity": 0-100,
  "relevance": 0-100,
  "depth": 0-100,
  "strengths": ["string"],
  "improvements": ["string"],
  "duration": "Xm Ys"
}}
"""
