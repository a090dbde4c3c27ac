"""
PRO resume scoring entry points.

``calculate_score`` validates the text, analyzes it once, runs the four
component scorers, aggregates them and derives the ATS report and the
improvement roadmap. It holds no state between calls.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from proscore.scoring.algorithms import (
    calculate_ats_score,
    calculate_content_quality_score,
    calculate_format_score,
    calculate_grade,
    calculate_impact_score,
    calculate_overall_score,
)
from proscore.scoring.analyzers import analyze_resume_text, validate_resume_text
from proscore.scoring.ats_report import build_ats_report
from proscore.scoring.errors import ValidationError
from proscore.scoring.keywords import DEFAULT_ROLE, resolve_role
from proscore.scoring.roadmap import generate_improvement_roadmap
from proscore.scoring.types import (
    ComponentScores,
    FileSignal,
    ResumeStats,
    ScoringMetadata,
    ScoringResult,
)

logger = logging.getLogger(__name__)


def calculate_score(
    resume_text: str,
    job_role: str = DEFAULT_ROLE,
    file_signal: Optional[FileSignal] = None,
    reference_year: Optional[int] = None,
) -> ScoringResult:
    """
    Score a resume against a job role.

    Args:
        resume_text: Full plain-text resume.
        job_role: Target role; unknown roles fall back to ``General``.
        file_signal: File facts from upstream extraction, if a file was uploaded.
        reference_year: Year that "Present" resolves to (defaults to this year).

    Raises:
        ValidationError: The text is not a string, is empty or is too short.
    """
    started = time.perf_counter()

    errors = validate_resume_text(resume_text)
    if errors:
        raise ValidationError(errors)

    if not isinstance(job_role, str) or not job_role.strip():
        job_role = DEFAULT_ROLE

    analysis = analyze_resume_text(resume_text, reference_year=reference_year)

    components = ComponentScores(
        content_quality=calculate_content_quality_score(resume_text, job_role, analysis),
        ats_compatibility=calculate_ats_score(resume_text, job_role, analysis, file_signal),
        format_structure=calculate_format_score(resume_text, analysis),
        impact_metrics=calculate_impact_score(resume_text, analysis),
    )

    overall = calculate_overall_score(components)
    report = build_ats_report(resume_text, job_role, components.ats_compatibility)
    roadmap = generate_improvement_roadmap(overall, components, report.keyword_gap_analysis)

    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.debug(f"Scored resume for '{job_role}': {overall} in {elapsed_ms}ms")

    return ScoringResult(
        overall_score=overall,
        grade=calculate_grade(overall),
        ats_pass_probability=report.pass_prediction.probability,
        component_scores=components,
        ats_detailed_report=report,
        improvement_roadmap=roadmap,
        metadata=ScoringMetadata(
            job_role=job_role,
            matched_role=resolve_role(job_role),
            processing_time_ms=elapsed_ms,
            timestamp=datetime.now(timezone.utc).isoformat(),
            resume_stats=ResumeStats(
                total_words=analysis.total_words,
                total_bullets=analysis.total_bullets,
                page_count=analysis.page_count,
            ),
        ),
    )


async def calculate_pro_score(
    resume_text: str,
    job_role: str = DEFAULT_ROLE,
    file_signal: Optional[FileSignal] = None,
) -> ScoringResult:
    """Async wrapper for callers already on an event loop. Performs no I/O."""
    return calculate_score(resume_text, job_role, file_signal=file_signal)
