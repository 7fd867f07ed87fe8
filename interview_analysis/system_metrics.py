import threading
import time
from typing import Any


_lock = threading.Lock()
_metrics: dict[str, float] = {
    "analysis_requests_total": 0.0,
    "analysis_mock_responses_total": 0.0,
    "analysis_rejected_total": 0.0,
    "analysis_latency_total_ms": 0.0,
    "analysis_latency_samples": 0.0,
}


def increment_metric(name: str, amount: float = 1.0) -> None:
    key = str(name or "").strip()
    if not key:
        return
    with _lock:
        _metrics[key] = float(_metrics.get(key, 0.0)) + float(amount)


def observe_analysis_latency_ms(value_ms: float) -> None:
    latency = max(0.0, float(value_ms or 0.0))
    with _lock:
        _metrics["analysis_latency_total_ms"] = float(_metrics.get("analysis_latency_total_ms", 0.0)) + latency
        _metrics["analysis_latency_samples"] = float(_metrics.get("analysis_latency_samples", 0.0)) + 1.0


def reset_metrics() -> None:
    with _lock:
        for key in list(_metrics.keys()):
            _metrics[key] = 0.0


def get_metrics_snapshot(extra: dict[str, Any] | None = None) -> dict[str, Any]:
    with _lock:
        data = dict(_metrics)

    latency_samples = max(1.0, float(data.get("analysis_latency_samples") or 0.0))

    payload: dict[str, Any] = {
        "generated_at": time.time(),
        "analysis_requests_total": int(data.get("analysis_requests_total") or 0.0),
        "analysis_mock_responses_total": int(data.get("analysis_mock_responses_total") or 0.0),
        "analysis_rejected_total": int(data.get("analysis_rejected_total") or 0.0),
        "analysis_latency_total_ms": float(data.get("analysis_latency_total_ms") or 0.0),
        "analysis_latency_samples": int(data.get("analysis_latency_samples") or 0.0),
        "avg_analysis_latency_ms": round(float(data.get("analysis_latency_total_ms") or 0.0) / latency_samples, 2),
    }

    if extra:
        payload.update(extra)
    return payload
