"""
Scoring service.

Sits between the HTTP layer and the scoring engine:
- caps resume text length before scoring
- builds resume text from structured editor content
- blends keyword match and quality into a job-match recommendation
- produces the compact summary stored against a resume version
"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional, Union

from proscore.config import get_settings
from proscore.scoring import FileSignal, ScoringResult, calculate_score
from proscore.scoring.analyzers import round_half_up

logger = logging.getLogger(__name__)

MAX_IMPROVEMENT_AREAS = 5


@dataclass(frozen=True)
class ScoredResume:
    """A scoring result plus how the input was prepared."""
    result: ScoringResult
    job_role: str
    truncated: bool


@dataclass(frozen=True)
class JobMatch:
    score: int
    recommendation: str
    strengths: tuple[str, ...]
    gaps: tuple[str, ...]
    reasoning: str
    match_percentage: int
    overall_score: int
    matched_role: str


class ScoringService:
    """Prepares input for the scoring engine and shapes its output."""

    MATCH_WEIGHT = 0.6
    QUALITY_WEIGHT = 0.4
    APPLY_THRESHOLD = 75
    CONSIDER_THRESHOLD = 60

    def __init__(self, max_resume_chars: int = 20000, default_role: str = "General"):
        self.max_resume_chars = max_resume_chars
        self.default_role = default_role

    def truncate(self, resume_text: str) -> tuple[str, bool]:
        """Cap text at ``max_resume_chars``; returns the text and whether it was cut."""
        if len(resume_text) <= self.max_resume_chars:
            return resume_text, False
        logger.info(f"Truncating resume from {len(resume_text)} to {self.max_resume_chars} chars")
        return resume_text[:self.max_resume_chars], True

    @staticmethod
    def extract_text_from_content(content: Union[str, dict[str, Any]]) -> str:
        """
        Flatten resume content into plain text.

        Accepts a string, a ``{"text": ...}`` mapping, or structured
        ``sections`` with summary, experience (role/company/bullets) and skills.
        """
        if isinstance(content, str):
            return content
        if content.get("text"):
            return content["text"]

        sections = content.get("sections") or {}
        parts = []

        if sections.get("summary"):
            parts.append("Summary")
            parts.append(sections["summary"])
            parts.append("")

        experience = sections.get("experience") or []
        if experience:
            parts.append("Experience")
        for entry in experience:
            parts.append(f"{entry.get('role') or ''} at {entry.get('company') or ''}")
            for bullet in entry.get("bullets") or []:
                parts.append(f"• {bullet}")
            parts.append("")

        if sections.get("skills"):
            parts.append("Skills")
            parts.append(", ".join(sections["skills"]))

        return "\n".join(parts)

    def score(
        self,
        resume_text: str,
        job_role: Optional[str] = None,
        file_signal: Optional[FileSignal] = None,
    ) -> ScoredResume:
        """Score resume text. Raises ``ValidationError`` for unusable text."""
        role = job_role.strip() if job_role and job_role.strip() else self.default_role
        text, truncated = self.truncate(resume_text) if isinstance(resume_text, str) else (resume_text, False)
        result = calculate_score(text, role, file_signal=file_signal)
        logger.info(f"Scored resume for role '{role}': {result.overall_score} ({result.grade.value})")
        return ScoredResume(result=result, job_role=role, truncated=truncated)

    @staticmethod
    def summarize(result: ScoringResult) -> dict[str, Any]:
        """Compact summary for persistence: overall, per-component scores, top actions."""
        components = result.component_scores
        return {
            "overallScore": result.overall_score,
            "contentQuality": components.content_quality.score,
            "atsCompatibility": components.ats_compatibility.score,
            "formatStructure": components.format_structure.score,
            "impactMetrics": components.impact_metrics.score,
            "improvementAreas": [
                {
                    "action": action.action,
                    "impact": action.points_gain,
                    "timeEstimate": action.time,
                    "priority": action.priority.value,
                }
                for action in result.improvement_roadmap.to_reach_80[:MAX_IMPROVEMENT_AREAS]
            ],
        }

    def recommend(self, score: int) -> str:
        if score >= self.APPLY_THRESHOLD:
            return "APPLY"
        if score >= self.CONSIDER_THRESHOLD:
            return "CONSIDER"
        return "SKIP"

    def match_job(self, result: ScoringResult) -> JobMatch:
        """Blend must-have/important keyword coverage with overall quality."""
        gap = result.ats_detailed_report.keyword_gap_analysis
        total_required = gap.must_have.total + gap.important.total
        total_found = gap.must_have.found + gap.important.found
        match_percentage = total_found / total_required * 100 if total_required else 50.0

        score = round_half_up(
            match_percentage * self.MATCH_WEIGHT + result.overall_score * self.QUALITY_WEIGHT
        )
        return JobMatch(
            score=score,
            recommendation=self.recommend(score),
            strengths=gap.must_have.found_keywords[:5],
            gaps=gap.must_have.missing[:5],
            reasoning=(
                f"Match score based on {total_found}/{total_required} key requirements met "
                f"(60% match, 40% quality)"
            ),
            match_percentage=round_half_up(match_percentage),
            overall_score=result.overall_score,
            matched_role=gap.matched_role,
        )

    def score_for_job(self, resume_text: str, job_title: str) -> JobMatch:
        scored = self.score(resume_text, job_title)
        return self.match_job(scored.result)


@lru_cache(maxsize=1)
def get_scoring_service() -> ScoringService:
    """Get (or create) the configured scoring service."""
    settings = get_settings()
    return ScoringService(
        max_resume_chars=settings.max_resume_chars,
        default_role=settings.default_role,
    )
