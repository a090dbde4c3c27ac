"""Data models for the ProScore API."""
from proscore.models.scoring import (
    ExperienceEntry,
    ResumeSections,
    ResumeContent,
    ScoreRequest,
    ImprovementArea,
    ScoreSummary,
    ScoreResponse,
    JobMatchRequest,
    JobMatchResponse,
    RolesResponse,
    VerdictResponse,
    HealthResponse,
)

__all__ = [
    "ExperienceEntry",
    "ResumeSections",
    "ResumeContent",
    "ScoreRequest",
    "ImprovementArea",
    "ScoreSummary",
    "ScoreResponse",
    "JobMatchRequest",
    "JobMatchResponse",
    "RolesResponse",
    "VerdictResponse",
    "HealthResponse",
]
