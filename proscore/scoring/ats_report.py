"""
ATS report: pass-probability prediction and keyword gap analysis.
"""

from typing import Optional

from proscore.scoring.analyzers import find_matching_keywords
from proscore.scoring.keywords import DEFAULT_ROLE, KEYWORDS_BY_ROLE, resolve_role
from proscore.scoring.types import (
    ATSCompatibilityBreakdown,
    ATSDetailedReport,
    ATSPassPrediction,
    ComponentScore,
    Confidence,
    KeywordGapAnalysis,
    KeywordTierGap,
    Severity,
)

# (minimum ATS score, probability, confidence, reasoning); first match wins
PASS_BANDS = (
    (85, 95, Confidence.HIGH,
     "Excellent ATS compatibility. Strong keyword presence and clean formatting."),
    (70, 80, Confidence.HIGH,
     "Good ATS compatibility. Minor improvements could increase pass rate."),
    (60, 65, Confidence.MEDIUM,
     "Fair ATS compatibility. Missing some keywords and formatting needs work."),
    (50, 40, Confidence.MEDIUM,
     "Needs work. Missing critical keywords or has formatting issues."),
    (0, 15, Confidence.LOW,
     "Poor ATS compatibility. Major keyword gaps and formatting issues detected."),
)

MAX_MISSING_SHOWN = 10
MAX_FOUND_SHOWN = 15


def _risk_factors(ats: ComponentScore) -> tuple[str, ...]:
    breakdown: ATSCompatibilityBreakdown = ats.breakdown
    risks = []

    missing = breakdown.keyword_density.missing_critical
    if missing:
        risks.append("Missing must-have keywords: " + ", ".join(missing[:3]))
    if breakdown.keyword_density.must_have_match < 50:
        risks.append(f"Only {breakdown.keyword_density.must_have_match}% of must-have keywords present")

    errors = [i for i in breakdown.format_compatibility.issues if i.severity == Severity.ERROR]
    for issue in errors:
        risks.append(issue.issue)

    if breakdown.section_headers.non_standard:
        risks.append("Non-standard section headers: " + ", ".join(breakdown.section_headers.non_standard))
    if not breakdown.file_format.text_extractable:
        risks.append("Text could not be extracted from the file")
    return tuple(risks)


def predict_ats_pass(ats: ComponentScore) -> ATSPassPrediction:
    """Map the ATS Compatibility score onto a fixed probability band."""
    for minimum, probability, confidence, reasoning in PASS_BANDS:
        if ats.score >= minimum:
            return ATSPassPrediction(
                probability=probability,
                confidence=confidence,
                reasoning=reasoning,
                risk_factors=_risk_factors(ats),
            )
    raise ValueError(f"ATS score {ats.score} below every pass band")


def _tier_gap(found: list[str], missing: list[str]) -> KeywordTierGap:
    return KeywordTierGap(
        found=len(found),
        total=len(found) + len(missing),
        missing=tuple(missing[:MAX_MISSING_SHOWN]),
        found_keywords=tuple(found[:MAX_FOUND_SHOWN]),
        missing_count=len(missing),
    )


def build_keyword_gap_analysis(
    resume_text: str,
    job_role: str = DEFAULT_ROLE,
    keyword_frequency: Optional[dict[str, int]] = None,
) -> KeywordGapAnalysis:
    """
    Per-tier found/missing keywords for the role.

    Unknown roles fall back through ``resolve_role`` and never raise.
    ``keyword_frequency`` is taken from the ATS density pass when given.
    """
    matched_role = resolve_role(job_role)
    keywords = KEYWORDS_BY_ROLE[matched_role]

    must_have = find_matching_keywords(resume_text, keywords.must_have)
    important = find_matching_keywords(resume_text, keywords.important)
    nice_to_have = find_matching_keywords(resume_text, keywords.nice_to_have)

    if keyword_frequency is None:
        keyword_frequency = {**must_have.frequency, **important.frequency, **nice_to_have.frequency}

    return KeywordGapAnalysis(
        role=job_role if isinstance(job_role, str) and job_role.strip() else DEFAULT_ROLE,
        matched_role=matched_role,
        must_have=_tier_gap(must_have.found, must_have.missing),
        important=_tier_gap(important.found, important.missing),
        nice_to_have=_tier_gap(nice_to_have.found, nice_to_have.missing),
        keyword_frequency=dict(keyword_frequency),
    )


def build_ats_report(resume_text: str, job_role: str, ats: ComponentScore) -> ATSDetailedReport:
    breakdown: ATSCompatibilityBreakdown = ats.breakdown
    return ATSDetailedReport(
        pass_prediction=predict_ats_pass(ats),
        keyword_gap_analysis=build_keyword_gap_analysis(
            resume_text,
            job_role,
            keyword_frequency=breakdown.keyword_density.keyword_frequency,
        ),
        format_issues=breakdown.format_compatibility.issues,
    )
