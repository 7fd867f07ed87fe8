import json
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _test_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")


PROMPT_KINDS = {
    "Extract interview questions": "extraction",
    "reviewing one answer": "scoring",
    "assess the candidate's skills": "skills",
    "key insights": "insights",
    "sentence summary": "summary",
}


def prompt_kind(prompt: str) -> str:
    for marker, kind in PROMPT_KINDS.items():
        if marker in prompt:
            return kind
    return "unknown"


class ScriptedService:
    """Answers each prompt kind with a canned response and records every call."""

    def __init__(self, responses: dict | None = None):
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, str, float]] = []

    async def request(self, prompt: str, temperature: float) -> str:
        kind = prompt_kind(prompt)
        self.calls.append((kind, prompt, temperature))
        response = self.responses.get(kind)
        if response is None:
            from interview_analysis.errors import ExternalCallFailure

            raise ExternalCallFailure(f"no scripted response for {kind}")
        if isinstance(response, (list, dict)):
            return json.dumps(response)
        return str(response)

    def kinds(self) -> list[str]:
        return [kind for kind, _, _ in self.calls]


class FailingService:
    def __init__(self):
        self.calls = 0

    async def request(self, prompt: str, temperature: float) -> str:
        from interview_analysis.errors import ExternalCallFailure

        self.calls += 1
        raise ExternalCallFailure("service unavailable")


class GarbledService:
    def __init__(self, text: str = "Sure! Here is what I think: not json at all"):
        self.text = text
        self.calls = 0

    async def request(self, prompt: str, temperature: float) -> str:
        self.calls += 1
        return self.text


@pytest.fixture
def failing_service() -> FailingService:
    return FailingService()


@pytest.fixture
def garbled_service() -> GarbledService:
    return GarbledService()


@pytest.fixture
def scripted_service():
    def _make(responses: dict | None = None) -> ScriptedService:
        return ScriptedService(responses)

    return _make


LONG_ANSWER = (
    "In my last role I led the migration of our billing platform from a monolith to services, "
    "which meant planning the cutover, writing the data backfill jobs and coaching two junior engineers "
    "through their first on-call rotations while we kept the old system running."
)


@pytest.fixture
def sample_transcripts():
    from interview_analysis.models import TranscriptEntry

    return [
        TranscriptEntry("interviewer", "Hi, thanks for joining. Tell me about a recent project you led?", 0),
        TranscriptEntry("candidate", LONG_ANSWER, 5000),
        TranscriptEntry("interviewer", "How do you approach debugging a production incident?", 60000),
        TranscriptEntry(
            "candidate",
            "I start by reading the alerts and the recent deploy log, then I reproduce the failure in staging, "
            "narrow it down with bisecting and add a regression test once it is fixed so it does not come back.",
            65000,
        ),
    ]
