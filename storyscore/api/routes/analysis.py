"""
API routes for story analysis.
"""

import json
from functools import lru_cache

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger

from storyscore.analysis.story_analyzer import StoryAnalyzer
from storyscore.config.settings import settings
from storyscore.models.scoring_config import ScoringConfig
from storyscore.monitoring.metrics import get_metrics
from storyscore.reporting.markdown import render_markdown

router = APIRouter()

RESPONSE_FORMATS = ("json", "markdown")
REJECTED_METHODS = ["GET", "HEAD", "OPTIONS", "PUT", "PATCH", "DELETE"]


@lru_cache(maxsize=1)
def get_analyzer() -> StoryAnalyzer:
    """Analyzer shared by all requests, built from the configured scoring file if any."""
    config = None
    if settings.scoring_config_path:
        config = ScoringConfig.from_file(settings.scoring_config_path)
    return StoryAnalyzer(config)


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


@router.post("/analyze-story")
async def analyze_story(
    request: Request,
    response_format: str = Query(default="json", alias="format"),
    analyzer: StoryAnalyzer = Depends(get_analyzer),
):
    """
    Analyze a user story.

    Body:
        {"story": "...", "acceptanceCriteria": "..."}

    Returns:
        Story report as JSON, or as Markdown with ?format=markdown
    """
    if response_format not in RESPONSE_FORMATS:
        return _error(400, f"Unsupported format '{response_format}'. Use one of: {', '.join(RESPONSE_FORMATS)}.")

    raw_body = await request.body()
    try:
        payload = json.loads(raw_body) if raw_body.strip() else {}
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("[API] Rejected request with invalid JSON body")
        return _error(400, "Invalid JSON in request body.")

    if not isinstance(payload, dict):
        return _error(400, "Request body must be a JSON object.")

    story = payload.get("story")
    if story is None:
        return _error(400, "Missing 'story' in request body.")

    acceptance_criteria = payload.get("acceptanceCriteria") or ""

    try:
        with get_metrics().track("analyze_story"):
            report = analyzer.analyze(story, acceptance_criteria)
    except Exception as e:
        logger.exception(f"[API] Story analysis failed: {e}")
        return _error(500, "Internal Server Error", details=str(e))

    logger.info(f"[API] Story analyzed: rating={report.overall_readiness_score.readiness_rating}%")

    if response_format == "markdown":
        return PlainTextResponse(render_markdown(report), media_type="text/markdown")
    return JSONResponse(content=report.to_dict())


@router.api_route("/analyze-story", methods=REJECTED_METHODS, include_in_schema=False)
async def analyze_story_wrong_method(request: Request):
    """Only POST is accepted."""
    logger.warning(f"[API] Rejected {request.method} on /analyze-story")
    response = _error(405, "Method Not Allowed. Only POST requests are accepted.")
    response.headers["Allow"] = "POST"
    return response


@router.get("/metrics")
async def metrics_summary():
    """Timing and error counters for analysis requests."""
    return get_metrics().get_summary()
