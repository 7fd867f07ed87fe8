from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import logging
import os
import time

from core.config import ANALYSIS_MODEL, OPENAI_API_KEY
from core.logger import configure_logging
from interview_analysis.engine import InterviewAnalysisEngine, empty_result
from interview_analysis.schemas import AnalyzeRequest
from interview_analysis.system_metrics import get_metrics_snapshot, increment_metric, observe_analysis_latency_ms

app = FastAPI(title="Interview Analysis Engine")
logger = logging.getLogger("interview_analysis.main")

MISSING_DATA_ERROR = "Interview data is required"
MOCK_DATA_ERROR = "Analysis service unavailable, showing sample data"


def _get_allowed_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "").strip()
    if not raw:
        return [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]
    return [item.strip() for item in raw.split(",") if item.strip()]


_allowed_origins = _get_allowed_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

analysis_engine = InterviewAnalysisEngine()


def _mock_response() -> JSONResponse:
    increment_metric("analysis_mock_responses_total")
    result = empty_result(error=MOCK_DATA_ERROR, is_mock_data=True)
    return JSONResponse(status_code=200, content=result.to_dict())


@app.on_event("startup")
async def startup_banner():
    configure_logging()
    logger.info("[SYSTEM] CORS allow_origins=%s", _allowed_origins)
    logger.info("[SYSTEM] analysis model=%s api_key_configured=%s", ANALYSIS_MODEL, bool(OPENAI_API_KEY))


@app.get("/healthz")
async def healthz():
    return {"status": "ok", "service": "interview-analysis"}


@app.get("/api/system/metrics")
async def system_metrics():
    return get_metrics_snapshot(extra={"analysis_model": ANALYSIS_MODEL})


@app.get("/api/analyze-interview")
async def analyze_interview_info():
    return {
        "service": "interview-analysis",
        "status": "ready",
        "model": ANALYSIS_MODEL,
        "endpoints": {
            "POST /api/analyze-interview": "Analyze a recorded interview session",
        },
        "accepts": ["transcripts", "chatMessages", "audioAnalysisData"],
    }


@app.post("/api/analyze-interview")
async def analyze_interview(request: Request):
    increment_metric("analysis_requests_total")
    started = time.perf_counter()

    try:
        body = await request.json()

        if not isinstance(body, dict) or body.get("interviewData") is None:
            increment_metric("analysis_rejected_total")
            return JSONResponse(status_code=400, content={"error": MISSING_DATA_ERROR})

        payload = AnalyzeRequest.model_validate(body)
        data = payload.interview_data
        result = await analysis_engine.analyze(
            [item.to_entry() for item in data.transcripts],
            [item.to_entry() for item in data.chat_messages],
            [item.to_sample() for item in data.audio_analysis_data],
            payload.config.to_config(),
        )
        if result.error:
            logger.warning("analyze-interview engine reported an error: %s", result.error)
            return _mock_response()
        return JSONResponse(status_code=200, content=result.to_dict())
    except ValidationError as exc:
        logger.warning("analyze-interview payload rejected: %s", exc.error_count())
        return _mock_response()
    except ValueError as exc:
        logger.warning("analyze-interview body is not valid JSON: %s", exc)
        return _mock_response()
    except Exception as exc:
        logger.exception("analyze-interview failed: %s", exc)
        return _mock_response()
    finally:
        observe_analysis_latency_ms((time.perf_counter() - started) * 1000.0)
