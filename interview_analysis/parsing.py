import json
import re

from interview_analysis.errors import MalformedResponse

_FENCE_RE = re.compile(r"```(?:json|JSON)?\s*")


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", str(text or "")).strip()


def _outer_slice(text: str, opener: str, closer: str) -> str | None:
    start = text.find(opener)
    end = text.rfind(closer)
    if start == -1 or end == -1 or end <= start:
        return None
    return text[start:end + 1]


def _loads(text: str):
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return None


def extract_json_list(text: str) -> list:
    """
    Parse a JSON array out of a model response.
    Tolerates markdown fences and prose before/after the payload.
    """
    cleaned = strip_code_fences(text)
    if not cleaned:
        raise MalformedResponse("empty response", raw=str(text or ""))

    parsed = _loads(cleaned)
    if isinstance(parsed, list):
        return parsed

    candidate = _outer_slice(cleaned, "[", "]")
    if candidate is not None:
        parsed = _loads(candidate)
        if isinstance(parsed, list):
            return parsed

    raise MalformedResponse("no JSON array found in response", raw=str(text or ""))


def extract_json_dict(text: str) -> dict:
    cleaned = strip_code_fences(text)
    if not cleaned:
        raise MalformedResponse("empty response", raw=str(text or ""))

    parsed = _loads(cleaned)
    if isinstance(parsed, dict):
        return parsed

    candidate = _outer_slice(cleaned, "{", "}")
    if candidate is not None:
        parsed = _loads(candidate)
        if isinstance(parsed, dict):
            return parsed

    raise MalformedResponse("no JSON object found in response", raw=str(text or ""))


def safe_float(value, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default
