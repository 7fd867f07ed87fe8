from __future__ import annotations

import logging
import re

from interview_analysis.dispatch import FallbackStep
from interview_analysis.errors import MalformedResponse
from interview_analysis.llm import GenerativeTextService
from interview_analysis.models import ConversationTurn, QAPair
from interview_analysis.parsing import extract_json_list, safe_float
from interview_analysis.prompts import build_qa_extraction_prompt
from interview_analysis.transcript import format_dialogue

logger = logging.getLogger("interview_analysis.extraction")

QUESTION_STEM_RE = re.compile(r"\b(tell|describe|explain|what|how|why|when|where)\b", re.IGNORECASE)
MIN_ANSWER_WORDS = 20
EXTRACTION_TEMPERATURE = 0.2


def looks_like_question(text: str) -> bool:
    content = str(text or "")
    return "?" in content or QUESTION_STEM_RE.search(content) is not None


def extract_with_patterns(turns: list[ConversationTurn]) -> list[QAPair]:
    """
    Deterministic pairing: an interviewer turn that reads like a question,
    immediately answered by a candidate turn of more than MIN_ANSWER_WORDS words.
    """
    pairs: list[QAPair] = []
    for current, following in zip(turns, turns[1:]):
        if current.is_candidate or not following.is_candidate:
            continue
        if not looks_like_question(current.text):
            continue
        if len(following.text.split()) <= MIN_ANSWER_WORDS:
            continue
        pairs.append(QAPair(question=current.text, answer=following.text, timestamp=current.timestamp))

    logger.info("pattern matching found %s Q&A pairs", len(pairs))
    return pairs


def _normalize_pairs(items: list) -> list[QAPair]:
    pairs: list[QAPair] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        question = str(item.get("question") or "").strip()
        answer = str(item.get("answer") or "").strip()
        if not question or not answer:
            continue
        pairs.append(QAPair(question=question, answer=answer, timestamp=safe_float(item.get("timestamp"), 0.0)))
    return pairs


class QAExtractor:
    def __init__(self, service: GenerativeTextService):
        self.service = service
        self._step = FallbackStep(
            name="qa_extraction",
            primary_fn=self.extract_with_model,
            fallback_fn=extract_with_patterns,
        )

    async def extract_with_model(self, turns: list[ConversationTurn]) -> list[QAPair]:
        prompt = build_qa_extraction_prompt(format_dialogue(turns))
        raw = await self.service.request(prompt, EXTRACTION_TEMPERATURE)
        pairs = _normalize_pairs(extract_json_list(raw))
        if not pairs:
            raise MalformedResponse("model returned no usable Q&A pairs", raw=raw)
        logger.info("model extracted %s Q&A pairs", len(pairs))
        return pairs

    async def extract(self, turns: list[ConversationTurn]) -> list[QAPair]:
        if not turns:
            return []
        return await self._step.run(turns)
