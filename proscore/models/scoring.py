"""Request and response models for the scoring API."""
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field, model_validator


class ExperienceEntry(BaseModel):
    """One job inside structured resume content."""
    role: Optional[str] = None
    company: Optional[str] = None
    bullets: List[str] = Field(default_factory=list)


class ResumeSections(BaseModel):
    """Structured resume sections as stored by the editor."""
    summary: Optional[str] = None
    experience: List[ExperienceEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    education: List[Dict[str, Any]] = Field(default_factory=list)


class ResumeContent(BaseModel):
    """Resume content: either flat text or structured sections."""
    text: Optional[str] = None
    sections: Optional[ResumeSections] = None


class ScoreRequest(BaseModel):
    """Request model for scoring a resume."""
    resume_text: Optional[str] = Field(None, alias="resumeText", description="Plain-text resume")
    content: Optional[ResumeContent] = Field(None, description="Structured resume content")
    job_role: Optional[str] = Field(None, alias="jobRole", description="Target job role, e.g. 'Software Engineer'")

    @model_validator(mode="after")
    def require_resume(self):
        if self.resume_text is None and self.content is None:
            raise ValueError("Either resumeText or content is required")
        return self

    class Config:
        populate_by_name = True


class ImprovementArea(BaseModel):
    """A roadmap action in the compact persistence summary."""
    action: str
    impact: int
    time_estimate: str = Field(alias="timeEstimate")
    priority: Literal["high", "medium", "low"]

    class Config:
        populate_by_name = True


class ScoreSummary(BaseModel):
    """The subset of a scoring result stored against a resume version."""
    overall_score: int = Field(..., alias="overallScore", ge=0, le=100)
    content_quality: int = Field(alias="contentQuality")
    ats_compatibility: int = Field(alias="atsCompatibility")
    format_structure: int = Field(alias="formatStructure")
    impact_metrics: int = Field(alias="impactMetrics")
    improvement_areas: List[ImprovementArea] = Field(alias="improvementAreas", default_factory=list)

    class Config:
        populate_by_name = True


class ScoreResponse(BaseModel):
    """Complete scoring response."""
    success: bool
    overall_score: int = Field(..., alias="overallScore", ge=0, le=100)
    grade: str
    ats_pass_probability: int = Field(alias="atsPassProbability")
    scoring: Dict[str, Any] = Field(description="Full serialized scoring result")
    summary: ScoreSummary
    truncated: bool = False
    cached: bool = False

    class Config:
        populate_by_name = True


class JobMatchRequest(BaseModel):
    """Request model for job-specific matching."""
    resume_text: str = Field(..., alias="resumeText")
    job_title: str = Field(..., alias="jobTitle", min_length=1)

    class Config:
        populate_by_name = True


class JobMatchResponse(BaseModel):
    """Blend of keyword match (60%) and resume quality (40%)."""
    score: int = Field(..., ge=0, le=100)
    recommendation: Literal["APPLY", "CONSIDER", "SKIP"]
    strengths: List[str] = Field(default_factory=list)
    gaps: List[str] = Field(default_factory=list)
    reasoning: str
    match_percentage: int = Field(alias="matchPercentage")
    overall_score: int = Field(alias="overallScore")
    matched_role: str = Field(alias="matchedRole")

    class Config:
        populate_by_name = True


class RolesResponse(BaseModel):
    """Job roles with a dedicated keyword set."""
    roles: List[str]
    default_role: str = Field(alias="defaultRole")
    taxonomy_version: str = Field(alias="taxonomyVersion")

    class Config:
        populate_by_name = True


class VerdictResponse(BaseModel):
    """AI-written verdict generated from a scoring result."""
    success: bool
    verdict: str
    overall_score: int = Field(alias="overallScore")
    grade: str

    class Config:
        populate_by_name = True


class HealthResponse(BaseModel):
    """Health check response."""
    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime
    cache_enabled: bool = Field(alias="cacheEnabled")
    verdict_enabled: bool = Field(alias="verdictEnabled")

    class Config:
        populate_by_name = True
