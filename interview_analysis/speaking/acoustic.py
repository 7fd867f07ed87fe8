from __future__ import annotations

import logging
from dataclasses import replace

from interview_analysis.models import AcousticSample, SpeakingPatterns
from interview_analysis.parsing import safe_float
from interview_analysis.speaking.rules import SILENCE_RATIO_PAUSE_SEC

logger = logging.getLogger("interview_analysis.speaking.acoustic")


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def candidate_samples(samples: list[AcousticSample], candidate_identity: str) -> list[AcousticSample]:
    # samples without an identity are assumed to come from the candidate's mic
    return [
        sample for sample in samples
        if not sample.participant_identity or sample.participant_identity == candidate_identity
    ]


def enhance_with_acoustics(
    patterns: SpeakingPatterns,
    samples: list[AcousticSample],
    candidate_identity: str,
) -> SpeakingPatterns:
    relevant = candidate_samples(list(samples or []), candidate_identity)
    voiced = [sample for sample in relevant if not sample.is_silence]
    if not voiced:
        logger.info("no voiced acoustic samples, keeping text-derived speaking patterns")
        return patterns

    silent_count = len(relevant) - len(voiced)
    avg_rate = _mean([safe_float(sample.speaking_rate) for sample in voiced])

    pause = patterns.average_pause_length
    if silent_count > 0:
        pause = round(silent_count / len(voiced) * SILENCE_RATIO_PAUSE_SEC, 1)

    return replace(
        patterns,
        words_per_minute=int(round(avg_rate)) if avg_rate > 0 else patterns.words_per_minute,
        average_pause_length=pause,
        average_volume=int(round(_mean([safe_float(sample.volume) for sample in voiced]))),
        average_pitch=int(round(_mean([safe_float(sample.pitch) for sample in voiced]))),
        confidence_from_audio=int(round(_mean([safe_float(sample.confidence) for sample in voiced]))),
    )
