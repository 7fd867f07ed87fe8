import json
import logging
from typing import Any

from core.config import LOG_LEVEL

logger = logging.getLogger("interview_analysis.events")

_REDACTED_KEYS = {"text", "transcript", "prompt", "question", "answer", "response", "summary"}


def configure_logging(level: str | None = None) -> None:
	logging.basicConfig(
		level=getattr(logging, str(level or LOG_LEVEL).upper(), logging.INFO),
		format="%(asctime)s %(levelname)s %(name)s %(message)s",
	)


def _sanitize_value(key: str, value: Any) -> Any:
	normalized_key = str(key or "").lower()
	if normalized_key in _REDACTED_KEYS:
		text = str(value or "")
		return {
			"redacted": True,
			"length": len(text),
		}
	if isinstance(value, (str, int, float, bool)) or value is None:
		return value
	if isinstance(value, dict):
		return {str(k): _sanitize_value(str(k), v) for k, v in value.items()}
	if isinstance(value, (list, tuple, set)):
		return [_sanitize_value(normalized_key, item) for item in value]
	return str(value)


def log_event(component: str, event: str, run_id: str, **kwargs) -> None:
	payload = {
		"component": str(component or "engine"),
		"event": str(event or "unknown"),
		"run_id": str(run_id or ""),
	}
	payload.update({str(k): _sanitize_value(str(k), v) for k, v in kwargs.items()})
	logger.info(json.dumps(payload, ensure_ascii=False, default=str))
