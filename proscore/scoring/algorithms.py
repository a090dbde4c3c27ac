"""
Component scorers and score aggregation for the PRO resume scoring engine.

Four weighted components make up the overall score:
- Content Quality (40%): quantification, verb strength, skill relevance, clarity
- ATS Compatibility (35%): keyword density, format, section headers, file format
- Format & Structure (15%): length, section order, visual hierarchy, contact info
- Impact & Metrics (10%): quantified results, scale indicators, recognition

Each scorer is a pure function of the resume text. The orchestrator passes a
pre-computed ``ResumeTextAnalysis`` so the text is only analyzed once; called
on their own the scorers analyze the text themselves.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from proscore.scoring.analyzers import (
    BULLET_PATTERN,
    LONG_LINE_CHARS,
    analyze_resume_text,
    calculate_avg_words_per_bullet,
    categorize_action_verbs,
    detect_format_issues,
    find_matching_keywords,
    round_half_up,
    section_category,
)
from proscore.scoring.errors import InternalInconsistencyError
from proscore.scoring.keywords import DEFAULT_ROLE, get_keywords_for_role
from proscore.scoring.types import (
    AchievementQuantificationScore,
    ActionVerbScore,
    ATSCompatibilityBreakdown,
    BulletPoint,
    ClarityReadabilityScore,
    ComponentScore,
    ComponentScores,
    ContentQualityBreakdown,
    FileFormatScore,
    FileSignal,
    FormatCompatibilityScore,
    FormatStructureBreakdown,
    Grade,
    ImpactMetricsBreakdown,
    KeywordDensityScore,
    LengthOptimizationScore,
    LengthVerdict,
    QuantifiedResultsScore,
    RecognitionGrowthScore,
    ResumeTextAnalysis,
    ScaleIndicatorsScore,
    SectionHeadersScore,
    SkillRelevanceScore,
    SubComponentScore,
    VerbCategory,
)

# Top-level component weights, must sum to 100
COMPONENT_WEIGHTS = {
    "content_quality": 40,
    "ats_compatibility": 35,
    "format_structure": 15,
    "impact_metrics": 10,
}

CONTENT_QUALITY_WEIGHTS = {
    "achievement_quantification": 50,
    "action_verb_strength": 25,
    "skill_relevance": 15,
    "clarity_readability": 10,
}

ATS_WEIGHTS = {
    "keyword_density": 40,
    "format_compatibility": 30,
    "section_headers": 20,
    "file_format": 10,
}

FORMAT_WEIGHTS = {
    "length_optimization": 40,
    "section_order": 30,
    "visual_hierarchy": 20,
    "contact_info": 10,
}

IMPACT_WEIGHTS = {
    "quantified_results": 60,
    "scale_indicators": 30,
    "recognition_growth": 10,
}

# Highest threshold first; exhaustive over [0, 100]
GRADE_LADDER = (
    (90, Grade.A_PLUS),
    (80, Grade.A),
    (70, Grade.B),
    (60, Grade.C),
    (50, Grade.D),
    (0, Grade.F),
)

TARGET_QUANTIFICATION_RATIO = 0.60
TARGET_IMPACT_RATIO = 0.70
VERB_STRENGTH_VALUES = {
    VerbCategory.STRONG: 1.0,
    VerbCategory.MEDIUM: 0.7,
    VerbCategory.WEAK: 0.3,
}
KEYWORD_TIER_WEIGHTS = {"must_have": 0.6, "important": 0.3, "nice_to_have": 0.1}

# (max words in a bullet, score); first matching band wins
CLARITY_BANDS = (
    (9, 60),
    (14, 80),
    (25, 100),
    (30, 85),
)
CLARITY_LONG_SCORE = 70
LONG_BULLET_WORDS = 35
GRAMMAR_PENALTY = 5

ATS_FRIENDLY_THRESHOLD = 70
RECOMMENDED_SECTIONS = ("experience", "education", "skills")
CANONICAL_SECTION_ORDER = ("summary", "experience", "projects", "skills", "education", "certifications")
SECTION_ORDER_PENALTY = 15


@dataclass(frozen=True)
class LengthRule:
    """Page expectations for candidates with fewer than ``max_years`` of experience."""
    max_years: Optional[int]
    recommended_pages: int
    min_pages: float
    max_pages: float


LENGTH_RULES = (
    LengthRule(max_years=3, recommended_pages=1, min_pages=1, max_pages=1.5),
    LengthRule(max_years=10, recommended_pages=1, min_pages=1, max_pages=2),
    LengthRule(max_years=20, recommended_pages=2, min_pages=1.5, max_pages=3),
    LengthRule(max_years=None, recommended_pages=3, min_pages=2, max_pages=4),
)
LENGTH_VERDICT_SCORES = {
    LengthVerdict.TOO_SHORT: 70,
    LengthVerdict.OPTIMAL: 100,
    LengthVerdict.TOO_LONG: 75,
}

FIRST_PERSON_PATTERN = re.compile(r"\b(?:I|me|my|I'm|I've)\b")
REPEATED_WORD_PATTERN = re.compile(r'\b(\w+)\s+\1\b', re.I)
EMAIL_PATTERN = re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}')
PHONE_PATTERN = re.compile(r'(?:\+?\d{1,3}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b')
PROFILE_LINK_PATTERN = re.compile(r'linkedin\.com|github\.com|https?://|www\.', re.I)
SCALE_INDICATOR_PATTERN = re.compile(
    r'\b(?:million|billion|thousand|enterprise|global|nationwide|worldwide|company-wide|organization-wide)\b'
    r'|\b\d[\d,.]*\+?\s*[KMB]?\+?\s*(?:users|customers|clients|subscribers|employees|people|engineers)\b'
    r'|[$€£]\s?\d[\d,.]*\s*(?:[KMB]\b|million|billion)?'
    r'|\bteams?\s+of\s+\d+',
    re.I,
)
RECOGNITION_PATTERN = re.compile(
    r"\b(?:promoted|promotions?|awarded|awards?|recognized|recognition|honou?red|honou?rs?"
    r"|top performer|president's club|nominated)\b",
    re.I,
)
CONTACT_HEAD_CHARS = 500
CONTACT_POINTS = {"Email": 40, "Phone": 35, "LinkedIn/Portfolio": 25}


# ==================== Helpers ====================


def _clamp(value: float) -> int:
    return max(0, min(100, int(value)))


def _weighted(scores: dict[str, SubComponentScore], weights: dict[str, int]) -> int:
    """Integer half-up weighted average of sub-scores."""
    total = sum(scores[name].score * weight for name, weight in weights.items())
    return _clamp((total + 50) // 100)


def _component(score: int, key: str, breakdown) -> ComponentScore:
    weight = COMPONENT_WEIGHTS[key]
    return ComponentScore(
        score=score,
        weight=weight,
        weighted_contribution=round(score * weight / 100, 2),
        breakdown=breakdown,
    )


def _percentage(part: int, whole: int) -> int:
    return round_half_up(part / whole * 100) if whole else 0


def _unique(items: Iterable[str]) -> list[str]:
    seen = {}
    for item in items:
        seen.setdefault(item, None)
    return list(seen)


# ==================== 1. CONTENT QUALITY (40%) ====================


def calculate_achievement_quantification(analysis: ResumeTextAnalysis) -> AchievementQuantificationScore:
    total = analysis.total_bullets
    quantified = analysis.quantified_bullets
    if total == 0:
        return AchievementQuantificationScore(
            score=0,
            calculation="No bullets found",
            total_bullets=0,
            quantified_bullets=0,
            percentage=0,
        )

    ratio = quantified / total
    percentage = round_half_up(ratio * 100)
    score = min(round_half_up(ratio / TARGET_QUANTIFICATION_RATIO * 100), 100)
    if quantified:
        # any quantified bullet earns at least one point
        score = max(score, 1)
    return AchievementQuantificationScore(
        score=score,
        calculation=(
            f"{total} bullets, {quantified} quantified ({percentage}%). "
            f"Score: min({percentage}/60*100, 100) = {score}"
        ),
        details=f"{quantified}/{total} bullets contain metrics",
        total_bullets=total,
        quantified_bullets=quantified,
        percentage=percentage,
    )


def calculate_action_verb_strength(analysis: ResumeTextAnalysis) -> ActionVerbScore:
    total = analysis.total_bullets
    if total == 0:
        return ActionVerbScore(
            score=0,
            calculation="No bullets found",
            strong_percentage=0,
            medium_percentage=0,
            weak_percentage=0,
            strong_verbs_found=(),
            weak_verbs_found=(),
            total_bullets=0,
        )

    categorized = categorize_action_verbs(analysis.bullet_points)
    counts = {category: 0 for category in VerbCategory}
    for bullet in analysis.bullet_points:
        counts[bullet.verb_category or VerbCategory.MEDIUM] += 1

    strength = sum(VERB_STRENGTH_VALUES[c] * n for c, n in counts.items()) / total
    score = _clamp(round_half_up(strength * 100))
    strong_pct = _percentage(counts[VerbCategory.STRONG], total)
    medium_pct = _percentage(counts[VerbCategory.MEDIUM], total)
    weak_pct = _percentage(counts[VerbCategory.WEAK], total)

    return ActionVerbScore(
        score=score,
        calculation=f"{strong_pct}% strong, {medium_pct}% medium, {weak_pct}% weak = {score}",
        strong_percentage=strong_pct,
        medium_percentage=medium_pct,
        weak_percentage=weak_pct,
        strong_verbs_found=tuple(_unique(categorized[VerbCategory.STRONG])[:10]),
        weak_verbs_found=tuple(_unique(categorized[VerbCategory.WEAK])[:5]),
        total_bullets=total,
    )


def calculate_skill_relevance(resume_text: str, job_role: str) -> SkillRelevanceScore:
    keywords = get_keywords_for_role(job_role)
    expected = list(keywords.must_have) + list(keywords.important)
    match = find_matching_keywords(resume_text, expected)
    match_pct = _percentage(len(match.found), len(expected))

    return SkillRelevanceScore(
        score=_clamp(match_pct),
        calculation=f"{len(match.found)} of {len(expected)} expected keywords found = {match_pct}%",
        found=tuple(match.found[:15]),
        missing=tuple(match.missing[:10]),
        found_count=len(match.found),
        expected_count=len(expected),
        match_percentage=match_pct,
    )


def _grammar_findings(bullet: BulletPoint) -> list[str]:
    findings = []
    if bullet.word_count > LONG_BULLET_WORDS:
        findings.append(f"Bullet over {LONG_BULLET_WORDS} words: \"{bullet.text[:40]}...\"")
    if FIRST_PERSON_PATTERN.search(bullet.text):
        findings.append(f"First-person pronoun: \"{bullet.text[:40]}\"")
    if REPEATED_WORD_PATTERN.search(bullet.text):
        findings.append(f"Repeated word: \"{bullet.text[:40]}\"")
    if bullet.text[:1].islower():
        findings.append(f"Starts lowercase: \"{bullet.text[:40]}\"")
    return findings


def _clarity_band(words: int) -> int:
    for max_words, band_score in CLARITY_BANDS:
        if words <= max_words:
            return band_score
    return CLARITY_LONG_SCORE


def calculate_clarity_readability(analysis: ResumeTextAnalysis) -> ClarityReadabilityScore:
    """
    Mean of per-bullet clarity scores.

    Each bullet is scored by its own length band minus a penalty per grammar
    finding, so one added bullet moves the mean by at most 100 / bullet count.
    """
    bullets = analysis.bullet_points
    avg_words = calculate_avg_words_per_bullet(bullets)
    findings = []

    if not bullets:
        score = _clarity_band(0)
    else:
        total = 0
        for bullet in bullets:
            bullet_findings = _grammar_findings(bullet)
            findings.extend(bullet_findings)
            total += max(_clarity_band(bullet.word_count) - len(bullet_findings) * GRAMMAR_PENALTY, 0)
        score = round_half_up(total / len(bullets))

    return ClarityReadabilityScore(
        score=_clamp(score),
        calculation=f"Avg {avg_words} words/bullet, mean bullet clarity {score}. Optimal: 15-25 words",
        details=f"{analysis.total_bullets} bullets analyzed",
        avg_words_per_bullet=avg_words,
        grammar_issues=len(findings),
        readability_issues=tuple(findings[:5]),
    )


def calculate_content_quality_score(
    resume_text: str,
    job_role: str = DEFAULT_ROLE,
    analysis: Optional[ResumeTextAnalysis] = None,
) -> ComponentScore:
    """Content Quality: 50% quantification, 25% verbs, 15% skills, 10% clarity."""
    if analysis is None:
        analysis = analyze_resume_text(resume_text)

    breakdown = ContentQualityBreakdown(
        achievement_quantification=calculate_achievement_quantification(analysis),
        action_verb_strength=calculate_action_verb_strength(analysis),
        skill_relevance=calculate_skill_relevance(resume_text, job_role),
        clarity_readability=calculate_clarity_readability(analysis),
    )
    score = _weighted(vars(breakdown), CONTENT_QUALITY_WEIGHTS)
    return _component(score, "content_quality", breakdown)


# ==================== 2. ATS COMPATIBILITY (35%) ====================


def calculate_keyword_density(resume_text: str, job_role: str) -> KeywordDensityScore:
    keywords = get_keywords_for_role(job_role)
    tiers = {
        "must_have": keywords.must_have,
        "important": keywords.important,
        "nice_to_have": keywords.nice_to_have,
    }

    matches = {tier: find_matching_keywords(resume_text, words) for tier, words in tiers.items()}
    percentages = {tier: _percentage(len(matches[tier].found), len(tiers[tier])) for tier in tiers}
    score = _clamp(round_half_up(sum(
        percentages[tier] * weight for tier, weight in KEYWORD_TIER_WEIGHTS.items()
    )))

    frequency: dict[str, int] = {}
    for match in matches.values():
        frequency.update(match.frequency)

    return KeywordDensityScore(
        score=score,
        calculation=(
            f"Must: {percentages['must_have']}% * 0.6 + Important: {percentages['important']}% * 0.3 "
            f"+ Nice: {percentages['nice_to_have']}% * 0.1 = {score}"
        ),
        found=tuple(_unique(kw for match in matches.values() for kw in match.found)),
        must_have_match=percentages["must_have"],
        important_match=percentages["important"],
        nice_to_have_match=percentages["nice_to_have"],
        missing_critical=tuple(matches["must_have"].missing[:10]),
        keyword_frequency=frequency,
    )


def calculate_format_compatibility(resume_text: str) -> FormatCompatibilityScore:
    issues = detect_format_issues(resume_text)
    penalty = sum(issue.penalty for issue in issues)
    score = _clamp(100 - penalty)
    return FormatCompatibilityScore(
        score=score,
        calculation=f"100 - total penalties ({penalty}) = {score}",
        details=f"{len(issues)} format issues detected",
        issues=tuple(issues),
        is_ats_friendly=score >= ATS_FRIENDLY_THRESHOLD,
    )


def calculate_section_headers(analysis: ResumeTextAnalysis) -> SectionHeadersScore:
    total = len(analysis.sections)
    categories = {section_category(s) for s in analysis.standard_sections}
    missing = tuple(c.title() for c in RECOMMENDED_SECTIONS if c not in categories)

    if total == 0:
        return SectionHeadersScore(
            score=50,
            calculation="No section headers detected",
            standard_found=(),
            non_standard=(),
            missing_recommended=missing,
        )

    standard_count = len(analysis.standard_sections)
    score = _percentage(standard_count, total)
    calculation = f"{standard_count}/{total} standard headers = {score}"
    if not missing:
        score += 10
        calculation += " (+10 for Experience, Education and Skills)"

    return SectionHeadersScore(
        score=_clamp(score),
        calculation=calculation,
        found=analysis.sections,
        standard_found=analysis.standard_sections,
        non_standard=analysis.non_standard_sections,
        missing_recommended=missing,
    )


def calculate_file_format(
    analysis: ResumeTextAnalysis,
    file_signal: Optional[FileSignal] = None,
) -> FileFormatScore:
    """File-level signal; assumes an extractable PDF when upstream reported nothing."""
    if file_signal is None:
        file_signal = FileSignal(is_pdf=True, text_extractable=True)
    page_count = file_signal.page_count or analysis.page_count

    if not file_signal.text_extractable:
        score = 30
    elif page_count > 3:
        score = 85
    else:
        score = 100

    return FileFormatScore(
        score=score,
        calculation=f"PDF: {file_signal.is_pdf}, Extractable: {file_signal.text_extractable}, Pages: {page_count}",
        is_pdf=file_signal.is_pdf,
        text_extractable=file_signal.text_extractable,
        page_count=page_count,
        file_size=file_signal.file_size,
    )


def calculate_ats_score(
    resume_text: str,
    job_role: str = DEFAULT_ROLE,
    analysis: Optional[ResumeTextAnalysis] = None,
    file_signal: Optional[FileSignal] = None,
) -> ComponentScore:
    """ATS Compatibility: 40% keywords, 30% format, 20% headers, 10% file format."""
    if analysis is None:
        analysis = analyze_resume_text(resume_text)

    breakdown = ATSCompatibilityBreakdown(
        keyword_density=calculate_keyword_density(resume_text, job_role),
        format_compatibility=calculate_format_compatibility(resume_text),
        section_headers=calculate_section_headers(analysis),
        file_format=calculate_file_format(analysis, file_signal),
    )
    score = _weighted(vars(breakdown), ATS_WEIGHTS)
    return _component(score, "ats_compatibility", breakdown)


# ==================== 3. FORMAT & STRUCTURE (15%) ====================


def length_rule_for(years_experience: int) -> LengthRule:
    for rule in LENGTH_RULES:
        if rule.max_years is None or years_experience < rule.max_years:
            return rule
    return LENGTH_RULES[-1]


def calculate_length_optimization(analysis: ResumeTextAnalysis) -> LengthOptimizationScore:
    pages = analysis.page_count
    years = analysis.years_experience
    rule = length_rule_for(years)

    if pages < rule.min_pages:
        verdict = LengthVerdict.TOO_SHORT
    elif pages > rule.max_pages:
        verdict = LengthVerdict.TOO_LONG
    else:
        verdict = LengthVerdict.OPTIMAL

    return LengthOptimizationScore(
        score=LENGTH_VERDICT_SCORES[verdict],
        calculation=f"{pages} pages for {years} years exp. Recommended: {rule.recommended_pages}",
        page_count=pages,
        years_experience=years,
        verdict=verdict,
        recommended_pages=rule.recommended_pages,
    )


def calculate_section_order(analysis: ResumeTextAnalysis) -> SubComponentScore:
    order = []
    for section in analysis.sections:
        category = section_category(section)
        if category in CANONICAL_SECTION_ORDER and category not in order:
            order.append(category)

    if len(order) < 2:
        return SubComponentScore(
            score=60,
            calculation="Fewer than two core sections detected",
            found=tuple(order),
        )

    rank = {name: i for i, name in enumerate(CANONICAL_SECTION_ORDER)}
    inversions = []
    for i, earlier in enumerate(order):
        for later in order[i + 1:]:
            if rank[earlier] <= rank[later]:
                continue
            # Recent graduates may lead with education
            if {earlier, later} == {"education", "experience"} and analysis.years_experience < 2:
                continue
            inversions.append(f"{later.title()} before {earlier.title()}")

    score = _clamp(100 - SECTION_ORDER_PENALTY * len(inversions))
    return SubComponentScore(
        score=score,
        calculation=f"{len(inversions)} out-of-order sections, -{SECTION_ORDER_PENALTY} each = {score}",
        details=" → ".join(name.title() for name in order),
        found=tuple(order),
        missing=tuple(inversions) or None,
    )


def calculate_visual_hierarchy(resume_text: str, analysis: ResumeTextAnalysis) -> SubComponentScore:
    score = 100
    notes = []

    if analysis.total_bullets <= 5:
        score -= 20
        notes.append(f"only {analysis.total_bullets} bullet points")

    glyphs = set()
    for line in resume_text.splitlines():
        match = BULLET_PATTERN.match(line.strip())
        if match:
            glyphs.add(match.group(1))
    if len(glyphs) > 2:
        score -= 10
        notes.append(f"{len(glyphs)} different bullet styles")

    if not analysis.sections:
        score -= 20
        notes.append("no section headers")

    if any(len(line) > LONG_LINE_CHARS for line in resume_text.splitlines()):
        score -= 10
        notes.append("dense paragraphs")

    return SubComponentScore(
        score=_clamp(score),
        calculation="Consistent bullets and headers" if not notes else "Penalized: " + ", ".join(notes),
        details=f"{analysis.total_bullets} bullet points found",
    )


def calculate_contact_info(resume_text: str) -> SubComponentScore:
    head = resume_text[:CONTACT_HEAD_CHARS]
    checks = {
        "Email": bool(EMAIL_PATTERN.search(head)),
        "Phone": bool(PHONE_PATTERN.search(head)),
        "LinkedIn/Portfolio": bool(PROFILE_LINK_PATTERN.search(head)),
    }
    found = tuple(name for name, ok in checks.items() if ok)
    missing = tuple(name for name, ok in checks.items() if not ok)
    score = sum(CONTACT_POINTS[name] for name in found)

    return SubComponentScore(
        score=_clamp(score),
        calculation=", ".join(f"{name}: {ok}" for name, ok in checks.items()),
        details="Complete" if not missing else "Partial",
        found=found,
        missing=missing,
    )


def calculate_format_score(
    resume_text: str,
    analysis: Optional[ResumeTextAnalysis] = None,
) -> ComponentScore:
    """Format & Structure: 40% length, 30% section order, 20% hierarchy, 10% contact."""
    if analysis is None:
        analysis = analyze_resume_text(resume_text)

    breakdown = FormatStructureBreakdown(
        length_optimization=calculate_length_optimization(analysis),
        section_order=calculate_section_order(analysis),
        visual_hierarchy=calculate_visual_hierarchy(resume_text, analysis),
        contact_info=calculate_contact_info(resume_text),
    )
    score = _weighted(vars(breakdown), FORMAT_WEIGHTS)
    return _component(score, "format_structure", breakdown)


# ==================== 4. IMPACT & METRICS (10%) ====================


def calculate_impact_score(
    resume_text: str,
    analysis: Optional[ResumeTextAnalysis] = None,
) -> ComponentScore:
    """Impact & Metrics: 60% quantified results, 30% scale, 10% recognition."""
    if analysis is None:
        analysis = analyze_resume_text(resume_text)

    total = analysis.total_bullets
    quantified = analysis.quantified_bullets
    ratio = quantified / total if total else 0.0
    quantified_results = QuantifiedResultsScore(
        score=min(round_half_up(ratio / TARGET_IMPACT_RATIO * 100), 100),
        calculation=f"{quantified}/{total} = {round_half_up(ratio * 100)}%",
        percentage=round_half_up(ratio * 100),
    )

    scale_hits = [m.group(0).strip() for m in SCALE_INDICATOR_PATTERN.finditer(resume_text)]
    scale_indicators = ScaleIndicatorsScore(
        score=min(len(scale_hits) * 15, 100),
        calculation=f"{len(scale_hits)} scale indicators found",
        found=tuple(_unique(scale_hits)[:10]),
        indicator_count=len(scale_hits),
    )

    recognition_hits = [m.group(0) for m in RECOGNITION_PATTERN.finditer(resume_text)]
    recognition_growth = RecognitionGrowthScore(
        score=min(len(recognition_hits) * 20, 100),
        calculation=f"{len(recognition_hits)} recognition mentions",
        found=tuple(_unique(hit.lower() for hit in recognition_hits)),
        promotions=len(recognition_hits),
    )

    breakdown = ImpactMetricsBreakdown(
        quantified_results=quantified_results,
        scale_indicators=scale_indicators,
        recognition_growth=recognition_growth,
    )
    score = _weighted(vars(breakdown), IMPACT_WEIGHTS)
    return _component(score, "impact_metrics", breakdown)


# ==================== Aggregation ====================


def calculate_overall_score(components: ComponentScores) -> int:
    """
    Round-half-up of ``Σ score * weight / 100`` over the four components.

    Raises InternalInconsistencyError if the weights drift from 100 or the
    result leaves [0, 100].
    """
    parts = components.all()
    total_weight = sum(c.weight for c in parts)
    if total_weight != 100:
        raise InternalInconsistencyError(f"Component weights sum to {total_weight}, expected 100")

    for component in parts:
        if not 0 <= component.score <= 100:
            raise InternalInconsistencyError(f"Component score {component.score} outside [0, 100]")

    overall = (sum(c.score * c.weight for c in parts) + 50) // 100
    if not 0 <= overall <= 100:
        raise InternalInconsistencyError(f"Overall score {overall} outside [0, 100]")
    return overall


def calculate_grade(score: int) -> Grade:
    if not 0 <= score <= 100:
        raise ValueError(f"Score {score} outside [0, 100]")
    for threshold, grade in GRADE_LADDER:
        if score >= threshold:
            return grade
    return Grade.F
