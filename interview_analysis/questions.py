from __future__ import annotations

import logging

from interview_analysis.models import ChatEntry, QAPair, TranscriptSegment

logger = logging.getLogger("interview_analysis.questions")

DEFAULT_QUESTIONS = [
    "Tell me about yourself and your background",
    "What interests you about this role and our company?",
    "Describe your most challenging technical project",
    "How do you approach debugging a complex issue?",
    "Tell me about a time you had to learn a new technology quickly",
    "How do you handle disagreements with team members?",
    "What's your experience with our tech stack?",
    "How do you ensure code quality in your projects?",
    "Describe a time you had to make a difficult technical decision",
    "What questions do you have for us?",
]

CHAT_QUESTION_MARKERS = ["?", "tell me", "describe", "explain", "what", "how", "why", "when", "where", "can you"]
CANDIDATE_IDENTITY_MARKERS = ["candidate", "user"]
MIN_CHAT_QUESTION_CHARS = 10


def questions_from_chat(chats: list[ChatEntry]) -> list[str]:
    questions: list[str] = []
    for chat in chats:
        identity = str(chat.from_identity or "").lower()
        if any(marker in identity for marker in CANDIDATE_IDENTITY_MARKERS):
            continue
        message = str(chat.message or "").strip()
        lowered = message.lower()
        if not any(marker in lowered for marker in CHAT_QUESTION_MARKERS):
            continue
        if len(message) <= MIN_CHAT_QUESTION_CHARS:
            continue
        questions.append(message)
    return questions


def resolve_questions(chats: list[ChatEntry] | None, expected_questions: list[str] | tuple[str, ...] | None) -> list[str]:
    """Chat questions first, then configured questions, then the default list."""
    from_chat = questions_from_chat(list(chats or []))
    if from_chat:
        logger.info("using %s questions found in chat", len(from_chat))
        return from_chat

    expected = [str(q).strip() for q in list(expected_questions or []) if str(q or "").strip()]
    if expected:
        logger.info("using %s configured questions", len(expected))
        return expected

    logger.info("no questions in chat or config, using default question list")
    return list(DEFAULT_QUESTIONS)


def split_transcript_by_questions(segments: list[TranscriptSegment], questions: list[str]) -> list[QAPair]:
    """
    Assign each question an equal, proportional slice of the session.
    Questions whose slice holds no candidate speech are dropped.
    """
    pairs: list[QAPair] = []
    total = len(segments)
    count = len(questions)
    for index, question in enumerate(questions):
        start = (index * total) // count
        end = ((index + 1) * total) // count
        window = segments[start:end]
        response = " ".join(seg.text for seg in window if seg.is_candidate).strip()
        if not response:
            continue
        timestamp = window[0].timestamp if window else 0.0
        pairs.append(QAPair(question=question, answer=response, timestamp=timestamp))
    return pairs
