import json
import os
import sys
import time
from dataclasses import dataclass, asdict
from typing import Any
from urllib import error, request


DEFAULT_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:9010").rstrip("/")
TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "120"))


SAMPLE_SESSION = {
    "interviewData": {
        "transcripts": [
            {"participantIdentity": "interviewer", "text": "Tell me about your background?", "timestamp": 0},
            {
                "participantIdentity": "candidate",
                "text": (
                    "I started as a support engineer, moved into backend work on our payments team and "
                    "for the last three years I have owned the reconciliation service, which processes "
                    "millions of ledger entries a day and which I rebuilt around an event log."
                ),
                "timestamp": 5000,
            },
            {"participantIdentity": "interviewer", "text": "How do you handle disagreements on design?", "timestamp": 70000},
            {
                "participantIdentity": "candidate",
                "text": (
                    "I try to write the options down with their trade-offs, agree on what we are optimizing "
                    "for, and if we still disagree we prototype the riskiest part and let the numbers decide."
                ),
                "timestamp": 76000,
            },
        ],
        "chatMessages": [],
        "audioAnalysisData": [
            {"timestamp": "00:06", "volume": 55, "is_silence": False, "pitch": 170, "speaking_rate": 145, "confidence": 78, "emotion": "calm"},
            {"timestamp": "00:07", "volume": 0, "is_silence": True, "pitch": 0, "speaking_rate": 0, "confidence": 0, "emotion": "neutral"},
        ],
    },
    "config": {"positionRole": "Backend Engineer", "candidateIdentity": "candidate"},
}


@dataclass
class StepResult:
    name: str
    ok: bool
    detail: str


class HttpClient:
    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def call(self, method: str, path: str, payload: dict[str, Any] | None = None) -> tuple[int, Any]:
        url = f"{self.base_url}{path}"
        body = json.dumps(payload).encode("utf-8") if payload is not None else None

        headers = {}
        if body is not None:
            headers["Content-Type"] = "application/json"

        req = request.Request(url=url, method=method.upper(), data=body, headers=headers)

        try:
            with request.urlopen(req, timeout=TIMEOUT_SECONDS) as resp:
                raw = resp.read().decode("utf-8")
                status = int(resp.status)
        except error.HTTPError as exc:
            status = int(exc.code)
            raw = exc.read().decode("utf-8") if exc.fp else ""
        except Exception as exc:
            raise RuntimeError(f"Request failed for {method} {path}: {exc}") from exc

        data: Any
        try:
            data = json.loads(raw) if raw else {}
        except ValueError:
            data = raw

        return status, data


def run_smoke(base_url: str) -> dict[str, Any]:
    started = time.time()
    client = HttpClient(base_url=base_url)
    results: list[StepResult] = []

    status, data = client.call("GET", "/healthz")
    results.append(
        StepResult(
            name="healthz",
            ok=(status == 200 and isinstance(data, dict) and data.get("status") == "ok"),
            detail=f"status={status}",
        )
    )

    status, data = client.call("POST", "/api/analyze-interview", {"config": {}})
    results.append(
        StepResult(
            name="missing_interview_data",
            ok=(status == 400),
            detail=f"status={status}, body={data}",
        )
    )

    status, data = client.call("POST", "/api/analyze-interview", {"interviewData": {}})
    empty_score = data.get("overallScore") if isinstance(data, dict) else None
    results.append(
        StepResult(
            name="empty_session",
            ok=(status == 200 and empty_score == 0),
            detail=f"status={status}, overallScore={empty_score}",
        )
    )

    status, data = client.call("POST", "/api/analyze-interview", SAMPLE_SESSION)
    report = data if isinstance(data, dict) else {}
    questions = report.get("questionAnalysis") or []
    skills = report.get("skillsAssessment") or []
    timeline = report.get("confidenceOverTime") or []
    score = report.get("overallScore")
    results.append(
        StepResult(
            name="sample_session",
            ok=(
                status == 200
                and isinstance(score, int)
                and 0 <= score <= 100
                and len(skills) == 6
                and len(timeline) == 9
                and len(questions) >= 1
                and not report.get("isMockData", False)
            ),
            detail=(
                f"status={status}, overallScore={score}, questions={len(questions)}, "
                f"skills={len(skills)}, timeline={len(timeline)}, mock={report.get('isMockData', False)}"
            ),
        )
    )

    status, data = client.call("GET", "/api/system/metrics")
    requests_total = data.get("analysis_requests_total") if isinstance(data, dict) else None
    results.append(
        StepResult(
            name="system_metrics",
            ok=(status == 200 and isinstance(requests_total, int) and requests_total >= 3),
            detail=f"status={status}, analysis_requests_total={requests_total}",
        )
    )

    all_pass = all(item.ok for item in results)
    return {
        "generated_at": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "base_url": base_url,
        "duration_sec": round(time.time() - started, 2),
        "all_pass": all_pass,
        "steps": [asdict(item) for item in results],
    }


def main() -> None:
    report = run_smoke(base_url=DEFAULT_BASE_URL)
    print(json.dumps(report, indent=2))

    if not report.get("all_pass", False):
        sys.exit(1)


if __name__ == "__main__":
    main()
