import os
from pathlib import Path
from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_PROJECT_ENV_PATH = _PROJECT_ROOT / ".env"
load_dotenv(dotenv_path=_PROJECT_ENV_PATH, override=False)


def _int_env(name: str, default: int, minimum: int = 0) -> int:
    try:
        return max(minimum, int(os.getenv(name, str(default))))
    except ValueError:
        return default


def _float_env(name: str, default: float, minimum: float = 0.0) -> float:
    try:
        return max(minimum, float(os.getenv(name, str(default))))
    except ValueError:
        return default


OPENAI_API_KEY = str(os.getenv("OPENAI_API_KEY") or "").strip()
ANALYSIS_MODEL = str(os.getenv("ANALYSIS_MODEL") or "gpt-4o-mini").strip()
LLM_TIMEOUT_SEC = _float_env("LLM_TIMEOUT_SEC", 20.0, minimum=1.0)
LLM_RETRIES = _int_env("LLM_RETRIES", 1)
LLM_MAX_TOKENS = _int_env("LLM_MAX_TOKENS", 2000, minimum=64)

# 1 keeps per-question scoring calls sequential
QUESTION_SCORING_CONCURRENCY = _int_env("QUESTION_SCORING_CONCURRENCY", 1, minimum=1)

DEFAULT_POSITION_ROLE = str(os.getenv("DEFAULT_POSITION_ROLE") or "Software Engineer").strip()
DEFAULT_CANDIDATE_IDENTITY = str(os.getenv("DEFAULT_CANDIDATE_IDENTITY") or "candidate").strip()

LOG_LEVEL = str(os.getenv("LOG_LEVEL") or "INFO").strip().upper()
