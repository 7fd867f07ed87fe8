import pytest

from interview_analysis.extraction import QAExtractor, extract_with_patterns, looks_like_question
from interview_analysis.models import ChatEntry, TranscriptEntry
from interview_analysis.questions import (
    DEFAULT_QUESTIONS,
    questions_from_chat,
    resolve_questions,
    split_transcript_by_questions,
)
from interview_analysis.transcript import build_segments, group_turns


def _turns(entries):
    return group_turns(build_segments(entries, [], "candidate"))


def test_looks_like_question():
    assert looks_like_question("Is that right?")
    assert looks_like_question("Describe your last project")
    assert not looks_like_question("Thanks, that is all from me")


def test_patterns_pair_question_with_long_answer(sample_transcripts):
    pairs = extract_with_patterns(_turns(sample_transcripts))

    assert len(pairs) == 2
    assert pairs[0].question.endswith("recent project you led?")
    assert pairs[0].answer.startswith("In my last role")
    assert pairs[0].timestamp == 0


def test_patterns_skip_short_answers():
    turns = _turns(
        [
            TranscriptEntry("interviewer", "What is your name?", 0),
            TranscriptEntry("candidate", "Alex, nice to meet you.", 1000),
        ]
    )

    assert extract_with_patterns(turns) == []


def test_patterns_require_exactly_more_than_twenty_words():
    twenty = " ".join(["word"] * 20)
    twenty_one = " ".join(["word"] * 21)

    assert extract_with_patterns(
        _turns([TranscriptEntry("interviewer", "Why?", 0), TranscriptEntry("candidate", twenty, 1)])
    ) == []
    assert len(
        extract_with_patterns(
            _turns([TranscriptEntry("interviewer", "Why?", 0), TranscriptEntry("candidate", twenty_one, 1)])
        )
    ) == 1


@pytest.mark.asyncio
async def test_model_extraction_parses_fenced_json(scripted_service, sample_transcripts):
    service = scripted_service(
        {
            "extraction": '```json\n[{"question": "Tell me about a project", "answer": "I led billing", "timestamp": 5000}]\n```',
        }
    )

    pairs = await QAExtractor(service).extract(_turns(sample_transcripts))

    assert len(pairs) == 1
    assert pairs[0].question == "Tell me about a project"
    assert pairs[0].timestamp == 5000.0
    assert service.kinds() == ["extraction"]


@pytest.mark.asyncio
async def test_model_extraction_falls_back_on_failure(failing_service, sample_transcripts):
    pairs = await QAExtractor(failing_service).extract(_turns(sample_transcripts))

    assert failing_service.calls == 1
    assert len(pairs) == 2


@pytest.mark.asyncio
async def test_model_extraction_falls_back_on_garbled_output(garbled_service, sample_transcripts):
    pairs = await QAExtractor(garbled_service).extract(_turns(sample_transcripts))

    assert len(pairs) == 2


@pytest.mark.asyncio
async def test_model_extraction_empty_list_uses_patterns(scripted_service, sample_transcripts):
    service = scripted_service({"extraction": []})

    pairs = await QAExtractor(service).extract(_turns(sample_transcripts))

    assert len(pairs) == 2


@pytest.mark.asyncio
async def test_extract_without_turns_makes_no_call(failing_service):
    assert await QAExtractor(failing_service).extract([]) == []
    assert failing_service.calls == 0


def test_questions_from_chat_skips_candidate_and_short_messages():
    chats = [
        ChatEntry("Can you walk me through your design?", "interviewer", 0),
        ChatEntry("How?", "interviewer", 1),
        ChatEntry("What do you mean by that exactly?", "candidate", 2),
        ChatEntry("Let me share my screen now", "interviewer", 3),
    ]

    assert questions_from_chat(chats) == ["Can you walk me through your design?"]


def test_resolve_questions_priority():
    chat = [ChatEntry("Explain your testing strategy please", "host", 0)]

    assert resolve_questions(chat, ["Configured?"]) == ["Explain your testing strategy please"]
    assert resolve_questions([], ["Configured question"]) == ["Configured question"]
    assert resolve_questions([], []) == DEFAULT_QUESTIONS


def test_split_transcript_assigns_proportional_windows():
    segments = build_segments(
        [
            TranscriptEntry("candidate", "alpha", 0),
            TranscriptEntry("interviewer", "hmm", 1),
            TranscriptEntry("candidate", "beta", 2),
            TranscriptEntry("candidate", "gamma", 3),
        ],
        [],
        "candidate",
    )

    pairs = split_transcript_by_questions(segments, ["Q1", "Q2"])

    assert [(pair.question, pair.answer) for pair in pairs] == [("Q1", "alpha"), ("Q2", "beta gamma")]


def test_split_transcript_drops_questions_without_candidate_speech():
    segments = build_segments([TranscriptEntry("candidate", "only answer", 0)], [], "candidate")

    pairs = split_transcript_by_questions(segments, ["Q1", "Q2", "Q3"])

    assert len(pairs) == 1
    assert pairs[0].answer == "only answer"
