from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from core.config import DEFAULT_CANDIDATE_IDENTITY, DEFAULT_POSITION_ROLE
from interview_analysis.models import AcousticSample, AnalysisConfig, ChatEntry, TranscriptEntry


class _Lenient(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TranscriptEntryIn(_Lenient):
    participant_identity: str = Field(
        default="",
        validation_alias=AliasChoices("participantIdentity", "participant_identity", "identity"),
    )
    text: str = ""
    timestamp: float = Field(default=0.0, validation_alias=AliasChoices("timestamp", "timestampMs"))

    def to_entry(self) -> TranscriptEntry:
        return TranscriptEntry(participant_identity=self.participant_identity, text=self.text, timestamp=self.timestamp)


class ChatSender(_Lenient):
    identity: str = ""


class ChatEntryIn(_Lenient):
    message: str = ""
    sender: ChatSender | None = Field(default=None, validation_alias=AliasChoices("from", "sender"))
    from_identity: str | None = Field(default=None, validation_alias=AliasChoices("fromIdentity", "from_identity"))
    timestamp: float = Field(default=0.0, validation_alias=AliasChoices("timestamp", "timestampMs"))

    def to_entry(self) -> ChatEntry:
        identity = self.from_identity or (self.sender.identity if self.sender else "")
        return ChatEntry(message=self.message, from_identity=identity, timestamp=self.timestamp)


class AcousticSampleIn(_Lenient):
    timestamp: str = ""
    volume: float = 0.0
    is_silence: bool = Field(default=False, validation_alias=AliasChoices("is_silence", "isSilence"))
    pitch: float = 0.0
    speaking_rate: float = Field(default=0.0, validation_alias=AliasChoices("speaking_rate", "speakingRate"))
    confidence: float = 0.0
    emotion: str = ""
    participant_identity: str | None = Field(
        default=None,
        validation_alias=AliasChoices("participant_identity", "participantIdentity"),
    )

    @field_validator("timestamp", mode="before")
    @classmethod
    def _stringify_timestamp(cls, value):
        return "" if value is None else str(value)

    def to_sample(self) -> AcousticSample:
        return AcousticSample(
            timestamp=self.timestamp,
            volume=self.volume,
            is_silence=self.is_silence,
            pitch=self.pitch,
            speaking_rate=self.speaking_rate,
            confidence=self.confidence,
            emotion=self.emotion,
            participant_identity=self.participant_identity,
        )


class InterviewDataIn(_Lenient):
    transcripts: list[TranscriptEntryIn] = Field(default_factory=list)
    chat_messages: list[ChatEntryIn] = Field(
        default_factory=list,
        validation_alias=AliasChoices("chatMessages", "chat_messages", "chats"),
    )
    audio_analysis_data: list[AcousticSampleIn] = Field(
        default_factory=list,
        validation_alias=AliasChoices("audioAnalysisData", "audio_analysis_data", "acousticSamples"),
    )


class AnalysisConfigIn(_Lenient):
    position_role: str = Field(
        default=DEFAULT_POSITION_ROLE,
        validation_alias=AliasChoices("positionRole", "position_role"),
    )
    candidate_identity: str = Field(
        default=DEFAULT_CANDIDATE_IDENTITY,
        validation_alias=AliasChoices("candidateIdentity", "candidate_identity"),
    )
    expected_questions: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("expectedQuestions", "expected_questions"),
    )

    def to_config(self) -> AnalysisConfig:
        return AnalysisConfig(
            position_role=self.position_role or DEFAULT_POSITION_ROLE,
            candidate_identity=self.candidate_identity or DEFAULT_CANDIDATE_IDENTITY,
            expected_questions=tuple(self.expected_questions),
        )


class AnalyzeRequest(_Lenient):
    interview_data: InterviewDataIn = Field(validation_alias=AliasChoices("interviewData", "interview_data"))
    config: AnalysisConfigIn = Field(default_factory=AnalysisConfigIn)
