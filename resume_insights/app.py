from __future__ import annotations

import asyncio
import logging
import os
import time
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request, Depends, Query
from fastapi.middleware.cors import CORSMiddleware

from . import catalog_client
from .llm_extractor import extract_resume_record
from .matching import categorize_course, run_course_matching
from .models import (
    CatalogResponse,
    CategorizeRequest,
    CategorizeResponse,
    InsightsResponse,
    MatchCourseworkRequest,
    MatchCourseworkResponse,
    ParseResumeRequest,
    ParseResumeResponse,
    ResumeRecord,
    ResumeScoreResponse,
    Settings,
)
from .scoring import (
    calculate_completeness_score,
    calculate_resume_score_detailed,
    generate_all_insights,
    get_improvement_message,
    get_score_status,
)

# Load environment from working directory .env and package .env if present
load_dotenv()
load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env", override=False)

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Resume Insights API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# In-memory stores
CATALOG_CACHE: Dict[str, Tuple[float, List[Dict[str, str]]]] = {}
LAST_REQUESTS_BY_IP: Dict[str, List[float]] = {}


def get_settings() -> Settings:
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        model_name=os.getenv("OPENAI_MODEL", "gpt-4o"),
        catalog_term=os.getenv("CATALOG_TERM", "2251"),
        match_threshold=float(os.getenv("MATCH_THRESHOLD", "60")),
        catalog_cache_ttl_seconds=int(os.getenv("CATALOG_CACHE_TTL_SECONDS", "3600")),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT_SECONDS", "20")),
        rate_limit_requests_per_minute=int(os.getenv("RATE_LIMIT_RPM", "60")),
    )


RATE_LIMIT_WINDOW_SECONDS = 60.0


def prune_request_log(now: float, window: float = RATE_LIMIT_WINDOW_SECONDS) -> None:
    """Drop timestamps older than the window and forget IPs left with none."""
    for ip in list(LAST_REQUESTS_BY_IP):
        bucket = LAST_REQUESTS_BY_IP[ip]
        while bucket and now - bucket[0] > window:
            bucket.pop(0)
        if not bucket:
            del LAST_REQUESTS_BY_IP[ip]


async def rate_limit(request: Request, settings: Settings = Depends(get_settings)):
    ip = request.client.host if request.client else "unknown"
    max_req = settings.rate_limit_requests_per_minute
    now = time.time()
    prune_request_log(now)
    bucket = LAST_REQUESTS_BY_IP.setdefault(ip, [])
    if len(bucket) >= max_req:
        raise HTTPException(status_code=429, detail="Rate limit exceeded")
    bucket.append(now)


def get_cached_catalog(term: str, settings: Settings) -> Optional[List[Dict[str, str]]]:
    """
    Return the catalog for a term, fetching at most once per cache TTL.

    Failed fetches are not cached so the next request retries.
    """
    cached = CATALOG_CACHE.get(term)
    if cached and time.time() - cached[0] < settings.catalog_cache_ttl_seconds:
        logger.info(f"Using cached catalog for term {term} ({len(cached[1])} courses)")
        return cached[1]

    catalog = catalog_client.fetch_catalog(term=term, timeout=settings.request_timeout_seconds)
    if catalog is not None:
        CATALOG_CACHE[term] = (time.time(), catalog)
    return catalog


@app.get("/")
async def root() -> Dict[str, Any]:
    return {"status": "ok", "service": "resume-insights"}


@app.post("/api/score", response_model=ResumeScoreResponse, dependencies=[Depends(rate_limit)])
async def score_resume(resume: ResumeRecord):
    """
    Score a structured resume.

    Returns the quality-based total with its breakdown, ranked insights and
    per-dimension analysis, plus the separate completeness score.
    """
    record = resume.model_dump()
    result = calculate_resume_score_detailed(record)
    return ResumeScoreResponse(
        **result,
        status=get_score_status(result["total_score"]),
        improvement_message=get_improvement_message(result["total_score"], result["breakdown"]),
        completeness_score=calculate_completeness_score(record),
    )


@app.post("/api/insights", response_model=InsightsResponse, dependencies=[Depends(rate_limit)])
async def resume_insights(resume: ResumeRecord):
    insights = generate_all_insights(resume.model_dump())
    return InsightsResponse(insights=insights, count=len(insights))


@app.post("/api/match-coursework", response_model=MatchCourseworkResponse, dependencies=[Depends(rate_limit)])
async def match_coursework_endpoint(
    request: MatchCourseworkRequest,
    settings: Settings = Depends(get_settings),
):
    """
    Match the resume's coursework line against the course catalog.

    Uses the posted catalog when given, otherwise the (cached) catalog for
    the requested term. An unavailable catalog yields zero matches rather
    than an error.
    """
    education = request.resume.education
    achievements = education[0].achievements if education else []
    term = request.term or settings.catalog_term

    if request.catalog is not None:
        catalog = [course.model_dump() for course in request.catalog]
    elif achievements:
        catalog = await asyncio.to_thread(get_cached_catalog, term, settings)
    else:
        catalog = []

    threshold = request.threshold if request.threshold is not None else settings.match_threshold
    result = run_course_matching(achievements, catalog, threshold=threshold)
    return MatchCourseworkResponse(**result)


@app.get("/api/uf-courses", response_model=CatalogResponse)
async def uf_courses(
    codes: str = Query(..., description="Comma-separated course codes or prefixes"),
    term: Optional[str] = None,
    settings: Settings = Depends(get_settings),
):
    code_list = [c for c in codes.split(",") if c.strip()]
    if not code_list:
        raise HTTPException(status_code=400, detail="No course codes provided")

    courses = await asyncio.to_thread(
        catalog_client.fetch_courses_by_codes,
        code_list,
        term=term or settings.catalog_term,
        timeout=settings.request_timeout_seconds,
    )
    return CatalogResponse(courses=courses, count=len(courses))


@app.post("/api/categorize", response_model=CategorizeResponse)
async def categorize(request: CategorizeRequest):
    return CategorizeResponse(
        code=request.code,
        name=request.name,
        category=categorize_course(request.code, request.name),
    )


@app.post("/api/parse", response_model=ParseResumeResponse, dependencies=[Depends(rate_limit)])
async def parse_resume(
    request: ParseResumeRequest,
    settings: Settings = Depends(get_settings),
):
    """Extract a structured resume record from plain text with the LLM."""
    if not settings.openai_api_key:
        raise HTTPException(status_code=503, detail="OPENAI_API_KEY is not configured")

    try:
        result = await asyncio.to_thread(
            extract_resume_record, request.text, model_name=settings.model_name
        )
    except ValueError as e:
        logger.error(f"Resume extraction failed: {e}")
        raise HTTPException(status_code=502, detail=f"Resume extraction failed: {e}")

    return ParseResumeResponse(**result)
