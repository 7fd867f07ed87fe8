from __future__ import annotations

from dataclasses import dataclass, field

from core.config import DEFAULT_CANDIDATE_IDENTITY, DEFAULT_POSITION_ROLE


def clamp_score(value, low: float = 0.0, high: float = 100.0, default: float = 0.0) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return float(default)
    if number != number:  # NaN
        return float(default)
    return max(float(low), min(float(high), number))


def _round_score(value, default: float = 0.0) -> int:
    return int(round(clamp_score(value, default=default)))


# ---------------------------------------------------------------------------
# Captured inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TranscriptEntry:
    participant_identity: str
    text: str
    timestamp: float


@dataclass(frozen=True)
class ChatEntry:
    message: str
    from_identity: str
    timestamp: float


@dataclass(frozen=True)
class AcousticSample:
    timestamp: str = ""
    volume: float = 0.0
    is_silence: bool = False
    pitch: float = 0.0
    speaking_rate: float = 0.0
    confidence: float = 0.0
    emotion: str = ""
    participant_identity: str | None = None


@dataclass(frozen=True)
class AnalysisConfig:
    position_role: str = DEFAULT_POSITION_ROLE
    candidate_identity: str = DEFAULT_CANDIDATE_IDENTITY
    expected_questions: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Intermediate records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TranscriptSegment:
    participant_identity: str
    text: str
    timestamp: float
    is_candidate: bool


@dataclass
class ConversationTurn:
    is_candidate: bool
    text: str
    timestamp: float
    segment_count: int = 1


@dataclass(frozen=True)
class QAPair:
    question: str
    answer: str
    timestamp: float = 0.0


# ---------------------------------------------------------------------------
# Result records
# ---------------------------------------------------------------------------


@dataclass
class QuestionAnalysis:
    id: int
    question: str
    response: str
    score: int = 0
    confidence: int = 0
    clarity: int = 0
    relevance: int = 0
    depth: int = 0
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    duration: str = "0m 0s"

    def __post_init__(self):
        self.score = _round_score(self.score)
        self.confidence = _round_score(self.confidence)
        self.clarity = _round_score(self.clarity)
        self.relevance = _round_score(self.relevance)
        self.depth = _round_score(self.depth)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "question": self.question,
            "candidateResponse": self.response,
            "score": self.score,
            "confidence": self.confidence,
            "clarity": self.clarity,
            "relevance": self.relevance,
            "depth": self.depth,
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "duration": self.duration,
        }


@dataclass
class SkillAssessment:
    skill: str
    score: int
    reasoning: str = ""
    max: int = 100

    def __post_init__(self):
        self.max = 100
        self.score = int(round(clamp_score(self.score, 0, self.max)))

    def to_dict(self) -> dict:
        return {
            "skill": self.skill,
            "score": self.score,
            "max": self.max,
            "reasoning": self.reasoning,
        }


@dataclass
class SpeakingPatterns:
    words_per_minute: int = 0
    filler_words: int = 0
    average_pause_length: float = 0.0
    interruptions: int = 0
    sentence_complexity: int = 0
    vocabulary_richness: int = 0

    # set only when acoustic samples enhanced the text-derived values
    average_volume: int | None = None
    average_pitch: int | None = None
    confidence_from_audio: int | None = None

    def __post_init__(self):
        self.vocabulary_richness = int(round(clamp_score(self.vocabulary_richness)))

    def to_dict(self) -> dict:
        payload = {
            "wordsPerMinute": self.words_per_minute,
            "fillerWords": self.filler_words,
            "averagePauseLength": self.average_pause_length,
            "interruptions": self.interruptions,
            "sentenceComplexity": self.sentence_complexity,
            "vocabularyRichness": self.vocabulary_richness,
        }
        if self.average_volume is not None:
            payload["averageVolume"] = self.average_volume
        if self.average_pitch is not None:
            payload["averagePitch"] = self.average_pitch
        if self.confidence_from_audio is not None:
            payload["confidenceFromAudio"] = self.confidence_from_audio
        return payload


INSIGHT_TYPES = ("strength", "improvement", "neutral")


@dataclass
class KeyInsight:
    type: str
    title: str
    description: str = ""
    confidence: int = 0

    def __post_init__(self):
        if self.type not in INSIGHT_TYPES:
            self.type = "neutral"
        self.confidence = _round_score(self.confidence)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "confidence": self.confidence,
        }


@dataclass
class ConfidencePoint:
    time: str
    confidence: int
    question: str

    def __post_init__(self):
        self.confidence = _round_score(self.confidence)

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "confidence": self.confidence,
            "question": self.question,
        }


@dataclass
class AnalysisDuration:
    minutes: int = 0
    seconds: int = 0

    def to_dict(self) -> dict:
        return {"minutes": self.minutes, "seconds": self.seconds}


@dataclass
class AnalysisResult:
    overall_score: int = 0
    skills_assessment: list[SkillAssessment] = field(default_factory=list)
    question_analysis: list[QuestionAnalysis] = field(default_factory=list)
    speaking_patterns: SpeakingPatterns = field(default_factory=SpeakingPatterns)
    key_insights: list[KeyInsight] = field(default_factory=list)
    confidence_over_time: list[ConfidencePoint] = field(default_factory=list)
    summary: str = ""
    duration: AnalysisDuration = field(default_factory=AnalysisDuration)
    has_speech_data: bool = False
    is_mock_data: bool = False
    error: str | None = None

    def __post_init__(self):
        self.overall_score = _round_score(self.overall_score)

    def to_dict(self) -> dict:
        payload = {
            "overallScore": self.overall_score,
            "skillsAssessment": [item.to_dict() for item in self.skills_assessment],
            "questionAnalysis": [item.to_dict() for item in self.question_analysis],
            "speakingPatterns": self.speaking_patterns.to_dict(),
            "keyInsights": [item.to_dict() for item in self.key_insights],
            "confidenceOverTime": [item.to_dict() for item in self.confidence_over_time],
            "summary": self.summary,
            "duration": self.duration.to_dict(),
            "hasSpeechData": self.has_speech_data,
        }
        if self.is_mock_data:
            payload["isMockData"] = True
        if self.error:
            payload["error"] = self.error
        return payload
