"""
Value objects for the PRO resume scoring engine.

Every entity here is a frozen dataclass produced fresh per scoring call.
The four top-level components are:
- Content Quality (40%)
- ATS Compatibility (35%)
- Format & Structure (15%)
- Impact & Metrics (10%)

``to_jsonable`` turns any of these into plain JSON data with camelCase keys,
which is the shape persisted and returned over HTTP.
"""
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Optional, Union


# ==================== Enumerations ====================


class VerbCategory(str, Enum):
    STRONG = "strong"
    MEDIUM = "medium"
    WEAK = "weak"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Confidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank, 0 is most urgent."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class Grade(str, Enum):
    A_PLUS = "A+"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def rank(self) -> int:
        """Higher is better."""
        return _GRADE_RANK[self]


_GRADE_RANK = {Grade.F: 0, Grade.D: 1, Grade.C: 2, Grade.B: 3, Grade.A: 4, Grade.A_PLUS: 5}


class LengthVerdict(str, Enum):
    TOO_SHORT = "Too Short"
    OPTIMAL = "Optimal"
    TOO_LONG = "Too Long"


# ==================== Keyword Database Types ====================


@dataclass(frozen=True)
class RoleKeywords:
    """Keyword tiers for one job role."""
    must_have: tuple[str, ...]
    important: tuple[str, ...]
    nice_to_have: tuple[str, ...]


@dataclass(frozen=True)
class ActionVerbCategories:
    """Role-independent action verbs grouped by strength."""
    strong: tuple[str, ...]
    medium: tuple[str, ...]
    weak: tuple[str, ...]


# ==================== Text Analysis ====================


@dataclass(frozen=True)
class BulletPoint:
    """A single detected bullet."""
    text: str
    is_quantified: bool
    first_word: str
    word_count: int
    verb_category: Optional[VerbCategory] = None
    # Leading verb or weak phrase as written, e.g. "Responsible for"
    verb: str = ""


@dataclass(frozen=True)
class SectionDetection:
    found: tuple[str, ...]
    standard: tuple[str, ...]
    non_standard: tuple[str, ...]


@dataclass(frozen=True)
class ResumeTextAnalysis:
    """Structural facts extracted from raw resume text."""
    total_words: int
    total_bullets: int
    bullet_points: tuple[BulletPoint, ...]
    words: tuple[str, ...]
    sections: tuple[str, ...]
    standard_sections: tuple[str, ...]
    non_standard_sections: tuple[str, ...]
    page_count: int
    years_experience: int

    @property
    def quantified_bullets(self) -> int:
        return sum(1 for b in self.bullet_points if b.is_quantified)


@dataclass(frozen=True)
class FormatIssue:
    """An ATS-unfriendly construct found in the text."""
    severity: Severity
    issue: str
    penalty: int
    fix: Optional[str] = None


@dataclass(frozen=True)
class FileSignal:
    """File facts reported by upstream extraction, when a file was uploaded."""
    is_pdf: bool
    text_extractable: bool
    page_count: Optional[int] = None
    file_size: Optional[int] = None


# ==================== Sub-Component Scores ====================


@dataclass(frozen=True, kw_only=True)
class SubComponentScore:
    """Atomic scoring unit, score is always within 0-100."""
    score: int
    calculation: Optional[str] = None
    details: Optional[str] = None
    found: Optional[tuple[str, ...]] = None
    missing: Optional[tuple[str, ...]] = None


@dataclass(frozen=True, kw_only=True)
class AchievementQuantificationScore(SubComponentScore):
    total_bullets: int
    quantified_bullets: int
    percentage: int


@dataclass(frozen=True, kw_only=True)
class ActionVerbScore(SubComponentScore):
    strong_percentage: int
    medium_percentage: int
    weak_percentage: int
    strong_verbs_found: tuple[str, ...]
    weak_verbs_found: tuple[str, ...]
    total_bullets: int


@dataclass(frozen=True, kw_only=True)
class SkillRelevanceScore(SubComponentScore):
    found_count: int
    expected_count: int
    match_percentage: int


@dataclass(frozen=True, kw_only=True)
class ClarityReadabilityScore(SubComponentScore):
    avg_words_per_bullet: int
    grammar_issues: int
    readability_issues: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class KeywordDensityScore(SubComponentScore):
    must_have_match: int
    important_match: int
    nice_to_have_match: int
    missing_critical: tuple[str, ...]
    keyword_frequency: dict[str, int]


@dataclass(frozen=True, kw_only=True)
class FormatCompatibilityScore(SubComponentScore):
    issues: tuple[FormatIssue, ...]
    is_ats_friendly: bool


@dataclass(frozen=True, kw_only=True)
class SectionHeadersScore(SubComponentScore):
    standard_found: tuple[str, ...]
    non_standard: tuple[str, ...]
    missing_recommended: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class FileFormatScore(SubComponentScore):
    is_pdf: bool
    text_extractable: bool
    page_count: int
    file_size: Optional[int] = None


@dataclass(frozen=True, kw_only=True)
class LengthOptimizationScore(SubComponentScore):
    page_count: int
    years_experience: int
    verdict: LengthVerdict
    recommended_pages: int


@dataclass(frozen=True, kw_only=True)
class QuantifiedResultsScore(SubComponentScore):
    percentage: int


@dataclass(frozen=True, kw_only=True)
class ScaleIndicatorsScore(SubComponentScore):
    indicator_count: int


@dataclass(frozen=True, kw_only=True)
class RecognitionGrowthScore(SubComponentScore):
    promotions: int


# ==================== Component Breakdowns ====================


@dataclass(frozen=True)
class ContentQualityBreakdown:
    achievement_quantification: AchievementQuantificationScore
    action_verb_strength: ActionVerbScore
    skill_relevance: SkillRelevanceScore
    clarity_readability: ClarityReadabilityScore


@dataclass(frozen=True)
class ATSCompatibilityBreakdown:
    keyword_density: KeywordDensityScore
    format_compatibility: FormatCompatibilityScore
    section_headers: SectionHeadersScore
    file_format: FileFormatScore


@dataclass(frozen=True)
class FormatStructureBreakdown:
    length_optimization: LengthOptimizationScore
    section_order: SubComponentScore
    visual_hierarchy: SubComponentScore
    contact_info: SubComponentScore


@dataclass(frozen=True)
class ImpactMetricsBreakdown:
    quantified_results: QuantifiedResultsScore
    scale_indicators: ScaleIndicatorsScore
    recognition_growth: RecognitionGrowthScore


Breakdown = Union[
    ContentQualityBreakdown,
    ATSCompatibilityBreakdown,
    FormatStructureBreakdown,
    ImpactMetricsBreakdown,
]


@dataclass(frozen=True)
class ComponentScore:
    """One of the four weighted components.

    ``weighted_contribution`` is ``score * weight / 100`` rounded to two
    decimals. The overall score rounds the sum of contributions half up,
    so ``(sum + 50) // 100`` over ``score * weight`` reproduces it and
    Python's ``round()`` does not (72.5 gives 72, the overall score is 73).
    """
    score: int
    weight: int
    weighted_contribution: float
    breakdown: Breakdown


@dataclass(frozen=True)
class ComponentScores:
    content_quality: ComponentScore
    ats_compatibility: ComponentScore
    format_structure: ComponentScore
    impact_metrics: ComponentScore

    def all(self) -> tuple[ComponentScore, ...]:
        return (
            self.content_quality,
            self.ats_compatibility,
            self.format_structure,
            self.impact_metrics,
        )


# ==================== ATS Report ====================


@dataclass(frozen=True)
class ATSPassPrediction:
    probability: int
    confidence: Confidence
    reasoning: str
    risk_factors: tuple[str, ...] = ()


@dataclass(frozen=True)
class KeywordTierGap:
    found: int
    total: int
    # Display lists are truncated: missing to 10, found_keywords to 15.
    # found + missing_count == total always holds.
    missing: tuple[str, ...]
    found_keywords: tuple[str, ...]
    missing_count: int = 0


@dataclass(frozen=True)
class KeywordGapAnalysis:
    role: str
    matched_role: str
    must_have: KeywordTierGap
    important: KeywordTierGap
    nice_to_have: KeywordTierGap
    keyword_frequency: dict[str, int]

    def tiers(self) -> dict[str, KeywordTierGap]:
        return {
            "must_have": self.must_have,
            "important": self.important,
            "nice_to_have": self.nice_to_have,
        }


@dataclass(frozen=True)
class ATSDetailedReport:
    pass_prediction: ATSPassPrediction
    keyword_gap_analysis: KeywordGapAnalysis
    format_issues: tuple[FormatIssue, ...]


# ==================== Improvement Roadmap ====================


@dataclass(frozen=True)
class ImprovementAction:
    action: str
    points_gain: int
    time: str
    minutes: int
    priority: Priority = Priority.MEDIUM
    category: Optional[str] = None


@dataclass(frozen=True)
class ImprovementRoadmap:
    to_reach_80: tuple[ImprovementAction, ...]
    # Superset of to_reach_80
    to_reach_90: tuple[ImprovementAction, ...]
    quick_wins: tuple[ImprovementAction, ...] = ()


# ==================== Scoring Result ====================


@dataclass(frozen=True)
class ResumeStats:
    total_words: int
    total_bullets: int
    page_count: int


@dataclass(frozen=True)
class ScoringMetadata:
    """Call metadata. The only place wall-clock values may appear."""
    job_role: str
    matched_role: str
    processing_time_ms: Optional[float] = None
    timestamp: Optional[str] = None
    resume_stats: Optional[ResumeStats] = None


@dataclass(frozen=True)
class ScoringResult:
    overall_score: int
    grade: Grade
    ats_pass_probability: int
    component_scores: ComponentScores
    ats_detailed_report: ATSDetailedReport
    improvement_roadmap: ImprovementRoadmap
    metadata: Optional[ScoringMetadata] = field(default=None, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return to_jsonable(self)


# ==================== Serialisation ====================


def camel_case(name: str) -> str:
    """snake_case field name -> camelCase key ('to_reach_80' -> 'toReach80')."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_jsonable(value: Any) -> Any:
    """Recursively convert engine values into JSON-compatible data."""
    if is_dataclass(value) and not isinstance(value, type):
        return {
            camel_case(f.name): to_jsonable(getattr(value, f.name))
            for f in fields(value)
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    return value
