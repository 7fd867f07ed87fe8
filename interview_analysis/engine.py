from __future__ import annotations

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field

from core.logger import log_event
from core.state import AnalysisStage
from interview_analysis.extraction import QAExtractor
from interview_analysis.insights import InsightGenerator, fallback_insights, fallback_summary
from interview_analysis.llm import GenerativeTextService, OpenAITextService
from interview_analysis.models import (
    AcousticSample,
    AnalysisConfig,
    AnalysisDuration,
    AnalysisResult,
    ChatEntry,
    KeyInsight,
    SpeakingPatterns,
    TranscriptEntry,
    TranscriptSegment,
)
from interview_analysis.questions import resolve_questions, split_transcript_by_questions
from interview_analysis.scoring import (
    QuestionScorer,
    SkillsAssessor,
    baseline_skills,
    calculate_overall_score,
    fallback_question_analysis,
)
from interview_analysis.speaking import analyze_speaking_patterns, enhance_with_acoustics
from interview_analysis.timeline import build_confidence_timeline, empty_confidence_timeline
from interview_analysis.transcript import build_segments, candidate_text, group_turns

logger = logging.getLogger("interview_analysis.engine")

EMPTY_SUMMARY = (
    "No interview data available for analysis. "
    "Please ensure the interview was properly recorded and try again."
)
INTERNAL_ERROR_MESSAGE = "Analysis failed unexpectedly; returning an empty report"


def empty_result(error: str | None = None, is_mock_data: bool = False) -> AnalysisResult:
    """Canonical report for a session with nothing to analyze."""
    return AnalysisResult(
        overall_score=0,
        skills_assessment=[],
        question_analysis=[],
        speaking_patterns=SpeakingPatterns(),
        key_insights=[
            KeyInsight(
                type="neutral",
                title="No Analysis Data Available",
                description="No interview transcript or conversation data was found to analyze.",
                confidence=0,
            )
        ],
        confidence_over_time=empty_confidence_timeline(),
        summary=EMPTY_SUMMARY,
        duration=AnalysisDuration(),
        has_speech_data=False,
        is_mock_data=is_mock_data,
        error=error,
    )


def has_any_data(transcripts: list, chats: list, acoustic_samples: list) -> bool:
    return bool(transcripts) or bool(chats) or bool(acoustic_samples)


def session_duration(segments: list[TranscriptSegment]) -> AnalysisDuration:
    if not segments:
        return AnalysisDuration()
    total_seconds = max(0, int((segments[-1].timestamp - segments[0].timestamp) // 1000))
    return AnalysisDuration(minutes=total_seconds // 60, seconds=total_seconds % 60)


@dataclass
class AnalysisRun:
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    stage: AnalysisStage = AnalysisStage.IDLE
    stages: list[AnalysisStage] = field(default_factory=lambda: [AnalysisStage.IDLE])
    started_at: float = field(default_factory=time.time)

    def advance(self, stage: AnalysisStage, **fields) -> None:
        self.stage = stage
        self.stages.append(stage)
        log_event("engine", f"stage_{stage.value}", self.run_id, **fields)


class InterviewAnalysisEngine:
    def __init__(self, service: GenerativeTextService | None = None, question_concurrency: int | None = None):
        self.service = service if service is not None else OpenAITextService()
        self.extractor = QAExtractor(self.service)
        self.question_scorer = QuestionScorer(self.service, concurrency=question_concurrency)
        self.skills_assessor = SkillsAssessor(self.service)
        self.insight_generator = InsightGenerator(self.service)

    async def analyze(
        self,
        transcripts: list[TranscriptEntry] | None,
        chats: list[ChatEntry] | None,
        acoustic_samples: list[AcousticSample] | None,
        config: AnalysisConfig | None = None,
        run: AnalysisRun | None = None,
    ) -> AnalysisResult:
        run = run or AnalysisRun()
        try:
            return await self._analyze(
                list(transcripts or []),
                list(chats or []),
                list(acoustic_samples or []),
                config or AnalysisConfig(),
                run,
            )
        except Exception as exc:
            logger.exception("analysis run %s failed: %s", run.run_id, exc)
            log_event("engine", "run_failed", run.run_id, error=str(exc))
            return empty_result(error=INTERNAL_ERROR_MESSAGE)

    async def _analyze(
        self,
        transcripts: list[TranscriptEntry],
        chats: list[ChatEntry],
        acoustic_samples: list[AcousticSample],
        config: AnalysisConfig,
        run: AnalysisRun,
    ) -> AnalysisResult:
        if not has_any_data(transcripts, chats, acoustic_samples):
            run.advance(AnalysisStage.EMPTY_SHORT_CIRCUIT)
            return empty_result()

        run.advance(
            AnalysisStage.SEGMENTING,
            transcripts=len(transcripts),
            chats=len(chats),
            acoustic_samples=len(acoustic_samples),
        )
        segments = build_segments(transcripts, chats, config.candidate_identity)
        turns = group_turns(segments)

        run.advance(AnalysisStage.EXTRACTING, segments=len(segments), turns=len(turns))
        pairs = await self.extractor.extract(turns)
        if not pairs and segments:
            questions = resolve_questions(chats, config.expected_questions)
            pairs = split_transcript_by_questions(segments, questions)
            logger.info("run %s: no extracted Q&A, split transcript across %s questions", run.run_id, len(questions))

        text = candidate_text(segments)
        run.advance(AnalysisStage.FAN_OUT_ANALYZING, qa_pairs=len(pairs), candidate_words=len(text.split()))
        outcomes = await asyncio.gather(
            self.question_scorer.score_all(pairs),
            self.skills_assessor.assess(text, config.position_role),
            self._speaking_patterns(segments),
            self.insight_generator.generate(text, config.position_role),
            self.insight_generator.summarize(text, config.position_role),
            return_exceptions=True,
        )
        fallbacks = (
            lambda: [fallback_question_analysis(pair, index) for index, pair in enumerate(pairs, start=1)],
            baseline_skills,
            SpeakingPatterns,
            fallback_insights,
            fallback_summary,
        )
        names = ("question_scoring", "skills_assessment", "speaking_patterns", "key_insights", "summary")
        merged = []
        for name, outcome, fallback in zip(names, outcomes, fallbacks):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.error("run %s: %s task failed, using fallback | err=%s", run.run_id, name, outcome)
                log_event("engine", "task_failed", run.run_id, task=name, error=str(outcome))
                outcome = fallback()
            merged.append(outcome)
        analyses, skills, patterns, insights, summary = merged

        run.advance(AnalysisStage.MERGING)
        has_speech_data = bool(text)
        if acoustic_samples and has_speech_data:
            patterns = enhance_with_acoustics(patterns, acoustic_samples, config.candidate_identity)

        result = AnalysisResult(
            overall_score=calculate_overall_score(skills, analyses, patterns),
            skills_assessment=skills,
            question_analysis=analyses,
            speaking_patterns=patterns,
            key_insights=insights,
            confidence_over_time=build_confidence_timeline(segments, analyses),
            summary=summary,
            duration=session_duration(segments),
            has_speech_data=has_speech_data,
        )
        run.advance(
            AnalysisStage.DONE,
            overall_score=result.overall_score,
            questions=len(analyses),
            elapsed_ms=round((time.time() - run.started_at) * 1000, 1),
        )
        return result

    async def _speaking_patterns(self, segments: list[TranscriptSegment]) -> SpeakingPatterns:
        return analyze_speaking_patterns(segments)


async def analyze(
    transcripts: list[TranscriptEntry] | None,
    chats: list[ChatEntry] | None,
    acoustic_samples: list[AcousticSample] | None,
    config: AnalysisConfig | None = None,
    service: GenerativeTextService | None = None,
) -> AnalysisResult:
    engine = InterviewAnalysisEngine(service=service)
    return await engine.analyze(transcripts, chats, acoustic_samples, config)
