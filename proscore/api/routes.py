"""
API Routes for the ProScore resume scoring service.

Provides endpoints for:
- Scoring resume text or an uploaded PDF
- Job-specific match recommendations
- AI verdicts on a scoring result
- Listing supported job roles
- Health checks
"""
from datetime import datetime, timezone
from typing import Optional
import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from proscore.config import get_settings
from proscore.models.scoring import (
    HealthResponse,
    JobMatchRequest,
    JobMatchResponse,
    RolesResponse,
    ScoreRequest,
    ScoreResponse,
    VerdictResponse,
)
from proscore.scoring import ValidationError, get_available_roles
from proscore.scoring.keywords import DEFAULT_ROLE, TAXONOMY_VERSION
from proscore.services.cache import cache_get_json, cache_set_json, get_redis_client, score_cache_key
from proscore.services.scoring_service import ScoredResume, ScoringService, get_scoring_service
from proscore.services.text_extractor import TextExtractionError, extract_pdf_document
from proscore.services.verdict import TextGenerator, VerdictError, generate_verdict

logger = logging.getLogger(__name__)
router = APIRouter()

UPLOAD_CHUNK_BYTES = 1024 * 64


def get_text_generator(request: Request) -> Optional[TextGenerator]:
    """Text generator built at startup, or None when no API key is configured."""
    return getattr(request.app.state, "text_generator", None)


def _resume_text(request: ScoreRequest) -> str:
    if request.resume_text is not None:
        return request.resume_text
    return ScoringService.extract_text_from_content(request.content.model_dump())


def _validation_failed(exc: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"message": "Resume text failed validation", "errors": exc.errors},
    )


def _score_response(scored: ScoredResume, service: ScoringService) -> dict:
    result = scored.result
    return {
        "success": True,
        "overallScore": result.overall_score,
        "grade": result.grade.value,
        "atsPassProbability": result.ats_pass_probability,
        "scoring": result.to_dict(),
        "summary": service.summarize(result),
        "truncated": scored.truncated,
        "cached": False,
    }


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(generator: Optional[TextGenerator] = Depends(get_text_generator)):
    """
    Health check endpoint.

    Returns the service status, version, and which optional integrations are enabled.
    """
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc),
        cacheEnabled=get_redis_client() is not None,
        verdictEnabled=generator is not None,
    )


@router.get("/roles", response_model=RolesResponse, tags=["Roles"])
async def list_roles():
    """List job roles that have a dedicated keyword set."""
    return RolesResponse(
        roles=get_available_roles(),
        defaultRole=DEFAULT_ROLE,
        taxonomyVersion=TAXONOMY_VERSION,
    )


@router.post("/score", response_model=ScoreResponse, tags=["Scoring"])
async def score_resume(request: ScoreRequest):
    """
    Score a resume against a job role.

    Accepts plain text (`resumeText`) or structured `content`. Unknown roles
    fall back to the General keyword set. Results are cached when Redis is configured.
    """
    settings = get_settings()
    service = get_scoring_service()
    resume_text = _resume_text(request)
    role = request.job_role or settings.default_role

    cache_key = score_cache_key(role, resume_text)
    cached = await cache_get_json(cache_key)
    if cached:
        cached["cached"] = True
        return cached

    try:
        scored = service.score(resume_text, role)
    except ValidationError as e:
        raise _validation_failed(e)

    payload = _score_response(scored, service)
    await cache_set_json(cache_key, payload, ttl=settings.cache_ttl)
    return payload


@router.post("/score/file", response_model=ScoreResponse, tags=["Scoring"])
async def score_resume_file(
    file: UploadFile = File(...),
    job_role: Optional[str] = Form(None, alias="jobRole"),
):
    """
    Score an uploaded PDF resume.

    Text is extracted with pdfplumber; page count and extractability feed the
    ATS file-format score.
    """
    settings = get_settings()
    max_bytes = settings.max_file_size_mb * 1024 * 1024

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(UPLOAD_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_file_size_mb} MB.",
            )
        chunks.append(chunk)

    try:
        document = await run_in_threadpool(extract_pdf_document, b"".join(chunks))
    except TextExtractionError as e:
        raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(e))

    service = get_scoring_service()
    try:
        scored = service.score(document.text, job_role, file_signal=document.file_signal())
    except ValidationError as e:
        raise _validation_failed(e)

    return _score_response(scored, service)


@router.post("/job-match", response_model=JobMatchResponse, tags=["Scoring"])
async def job_match(request: JobMatchRequest):
    """
    Recommend whether to apply for a role.

    Blends keyword coverage (60%) with overall resume quality (40%):
    APPLY at 75+, CONSIDER at 60+, otherwise SKIP.
    """
    service = get_scoring_service()
    try:
        match = service.score_for_job(request.resume_text, request.job_title)
    except ValidationError as e:
        raise _validation_failed(e)

    return JobMatchResponse(
        score=match.score,
        recommendation=match.recommendation,
        strengths=list(match.strengths),
        gaps=list(match.gaps),
        reasoning=match.reasoning,
        matchPercentage=match.match_percentage,
        overallScore=match.overall_score,
        matchedRole=match.matched_role,
    )


@router.post("/score/verdict", response_model=VerdictResponse, tags=["Scoring"])
async def score_verdict(
    request: ScoreRequest,
    generator: Optional[TextGenerator] = Depends(get_text_generator),
):
    """
    Score a resume and ask the AI model for a short recruiter-style verdict.

    Returns 503 when no Gemini API key is configured.
    """
    if generator is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="AI verdict is not configured",
        )

    service = get_scoring_service()
    try:
        scored = service.score(_resume_text(request), request.job_role)
    except ValidationError as e:
        raise _validation_failed(e)

    try:
        verdict = await run_in_threadpool(generate_verdict, generator, scored.result)
    except VerdictError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    except Exception as e:
        logger.error(f"AI verdict failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="AI verdict failed")

    return VerdictResponse(
        success=True,
        verdict=verdict,
        overallScore=scored.result.overall_score,
        grade=scored.result.grade.value,
    )
