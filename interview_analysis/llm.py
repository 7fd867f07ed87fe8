from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from openai import AsyncOpenAI

from core.config import ANALYSIS_MODEL, LLM_MAX_TOKENS, LLM_RETRIES, LLM_TIMEOUT_SEC, OPENAI_API_KEY
from interview_analysis.errors import ExternalCallFailure

logger = logging.getLogger("interview_analysis.llm")


class GenerativeTextService(Protocol):
    async def request(self, prompt: str, temperature: float) -> str:
        ...


class OpenAITextService:
    """
    Chat-completions backed text service.
    Returns raw model text; callers are responsible for parsing.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout_sec: float | None = None,
        retries: int | None = None,
        max_tokens: int | None = None,
    ):
        self.api_key = OPENAI_API_KEY if api_key is None else str(api_key).strip()
        self.model = model or ANALYSIS_MODEL
        self.timeout_sec = float(timeout_sec or LLM_TIMEOUT_SEC)
        self.retries = LLM_RETRIES if retries is None else max(0, int(retries))
        self.max_tokens = int(max_tokens or LLM_MAX_TOKENS)
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            # SDK retries are disabled; the loop below owns retry policy
            self._client = AsyncOpenAI(api_key=self.api_key, max_retries=0)
        return self._client

    async def request(self, prompt: str, temperature: float = 0.3) -> str:
        if not self.api_key:
            raise ExternalCallFailure("OPENAI_API_KEY is not configured")
        if not str(prompt or "").strip():
            raise ExternalCallFailure("refusing to send a blank prompt")

        client = self._get_client()
        last_error: Exception | None = None
        for attempt in range(self.retries + 1):
            try:
                response = await asyncio.wait_for(
                    client.chat.completions.create(
                        model=self.model,
                        messages=[{"role": "user", "content": prompt}],
                        temperature=float(temperature),
                        max_tokens=self.max_tokens,
                    ),
                    timeout=self.timeout_sec,
                )
                content = response.choices[0].message.content
                text = str(content or "").strip()
                if not text:
                    raise ExternalCallFailure("empty completion")
                return text
            except asyncio.TimeoutError as exc:
                last_error = exc
                logger.warning("generative request timeout | attempt=%s", attempt + 1)
            except Exception as exc:
                last_error = exc
                logger.warning("generative request failure | attempt=%s err=%s", attempt + 1, exc)

            if attempt < self.retries:
                await asyncio.sleep(0.35 * (attempt + 1))

        raise ExternalCallFailure(f"generative request failed after {self.retries + 1} attempt(s): {last_error}")
