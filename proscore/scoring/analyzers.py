"""
Text analysis helpers for the PRO resume scoring engine.

Everything here is a pure function over raw resume text:
- Bullet point detection and analysis
- Quantification and action verb classification
- Keyword matching
- Section header and format issue detection
- Word, page and years-of-experience estimates
"""

import math
import re
from datetime import date
from functools import lru_cache
from typing import Iterable, NamedTuple, Optional, Sequence

from proscore.scoring.keywords import (
    ACTION_VERBS,
    NON_STANDARD_HEADERS,
    QUANTIFICATION_UNITS,
    STANDARD_SECTION_HEADERS,
)
from proscore.scoring.types import (
    BulletPoint,
    FormatIssue,
    ResumeTextAnalysis,
    SectionDetection,
    Severity,
    VerbCategory,
)

WORDS_PER_PAGE = 550
MAX_PAGES = 10
MAX_YEARS_EXPERIENCE = 40
MIN_RESUME_CHARS = 100
MIN_RESUME_WORDS = 50
MIN_BULLET_LINE_CHARS = 10
LONG_LINE_CHARS = 200

STOP_WORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
    "has", "he", "in", "is", "it", "its", "of", "on", "that", "the",
    "to", "was", "will", "with", "have", "this", "but", "they", "his",
})

BULLET_GLYPHS = "-•*○●►▪▸‣⦿⦾⁃–◦"
BULLET_PATTERN = re.compile(r'^([' + re.escape(BULLET_GLYPHS) + r'])\s+(.+)$')
NUMBERED_PATTERN = re.compile(r'^\d{1,3}[.)]\s+(.+)$')

PERCENT_PATTERN = re.compile(r'%|\bpercent(?:age)?\b', re.I)
CURRENCY_PATTERN = re.compile(r'[$€£¥₹]|\b(?:USD|EUR|GBP|INR)\b')
MAGNITUDE_PATTERN = re.compile(r'\b\d+(?:\.\d+)?(?:[KMB]|k)\b')
SCALE_WORD_PATTERN = re.compile(r'\d+(?:\.\d+)?\s*(?:million|billion|thousand|hundred)', re.I)
MULTIPLIER_PATTERN = re.compile(r'\b\d+(?:\.\d+)?x\b', re.I)
NUMBER_UNIT_PATTERN = re.compile(
    r'\b\d[\d,]*(?:\.\d+)?\+?\s*(?:[A-Za-z-]+\s+)?(?:'
    + "|".join(re.escape(unit) for unit in QUANTIFICATION_UNITS)
    + r')\b',
    re.I,
)
GROUP_OF_PATTERN = re.compile(r'\b(?:team|staff|group|department|fleet|portfolio)s?\s+of\s+\d+', re.I)

YEAR_RANGE_PATTERN = re.compile(
    r'\b((?:19|20)\d{2})\s*(?:-|–|—|to)\s*(?:[A-Za-z]{3,9}\.?\s+)?((?:19|20)\d{2}|present|current)\b',
    re.I,
)

TABLE_PATTERN = re.compile(r'\t{2,}|\|.*\|.*\|')
GRAPHICS_PATTERN = re.compile(
    r'\[(?:image|graphic|logo|photo|picture|chart|icon)[^\]]*\]|<img\b|!\[[^\]]*\]\(',
    re.I,
)
SPECIAL_BULLET_PATTERN = re.compile(r'[★☆■□▲△◆◇]')
SPECIAL_CHAR_PATTERN = re.compile(r'[^\w\s\-.,;:!()?\'"]')
CAPS_HEADER_PATTERN = re.compile(r"^[A-Z][A-Z&/' ]*[A-Z]$")

# Canonical section categories, matched by substring on the lowered header
SECTION_CATEGORIES = {
    "summary": ("summary", "profile", "objective", "about me"),
    "experience": ("experience", "employment", "career history", "work history", "my journey"),
    "projects": ("project",),
    "skills": ("skill", "competenc", "expertise"),
    "education": ("education", "academic"),
    "certifications": ("certification", "license"),
}

_STANDARD_LOOKUP = {h.lower(): h for h in STANDARD_SECTION_HEADERS}
_NON_STANDARD_LOOKUP = {h.lower(): h for h in NON_STANDARD_HEADERS}

_VERB_CATEGORIES = (
    (VerbCategory.STRONG, frozenset(v.lower() for v in ACTION_VERBS.strong if " " not in v)),
    (VerbCategory.MEDIUM, frozenset(v.lower() for v in ACTION_VERBS.medium if " " not in v)),
    (VerbCategory.WEAK, frozenset(v.lower() for v in ACTION_VERBS.weak if " " not in v)),
)
# Longest first so "Was part of" wins over "Part of"
_WEAK_PHRASES = tuple(
    re.compile(re.escape(phrase) + r'\b', re.I)
    for phrase in sorted((v for v in ACTION_VERBS.weak if " " in v), key=len, reverse=True)
)


class KeywordMatch(NamedTuple):
    found: list[str]
    missing: list[str]
    frequency: dict[str, int]


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (``round`` uses banker's rounding)."""
    return int(math.floor(value + 0.5))


# ==================== Words ====================


def count_words(text: str) -> int:
    return len(text.split())


def extract_words(text: str) -> list[str]:
    """Lowercased words with stop words and punctuation removed."""
    words = []
    for token in text.lower().split():
        if len(token) <= 2 or token in STOP_WORDS:
            continue
        cleaned = re.sub(r'[^\w\s-]', '', token)
        if cleaned:
            words.append(cleaned)
    return words


# ==================== Bullet Points ====================


def _first_word(text: str) -> str:
    parts = text.split()
    return re.sub(r'[^\w]', '', parts[0]) if parts else ""


def categorize_action_verb(text: str) -> tuple[VerbCategory, str]:
    """
    Classify the leading verb of a bullet.

    Weak multi-word phrases ("Responsible for") are checked first, then the
    first word. Unknown verbs count as medium. Returns the category and the
    verb or phrase as written.
    """
    stripped = text.strip()
    for pattern in _WEAK_PHRASES:
        match = pattern.match(stripped)
        if match:
            return VerbCategory.WEAK, match.group(0)

    first = _first_word(stripped)
    lowered = first.lower()
    for category, verbs in _VERB_CATEGORIES:
        if lowered in verbs:
            return category, first
    return VerbCategory.MEDIUM, first


def is_action_verb_start(text: str) -> bool:
    """True when the text opens with a known action verb or weak phrase."""
    stripped = text.strip()
    if any(pattern.match(stripped) for pattern in _WEAK_PHRASES):
        return True
    lowered = _first_word(stripped).lower()
    return any(lowered in verbs for _, verbs in _VERB_CATEGORIES)


def categorize_action_verbs(bullets: Iterable[BulletPoint]) -> dict[VerbCategory, list[str]]:
    """Group the leading verbs of bullets by strength."""
    result: dict[VerbCategory, list[str]] = {category: [] for category in VerbCategory}
    for bullet in bullets:
        if bullet.verb_category is None or not bullet.verb:
            continue
        result[bullet.verb_category].append(bullet.verb)
    return result


def is_quantified(text: str) -> bool:
    """
    Whether a bullet carries a measurable metric.

    Boolean OR over percentage, currency, magnitude suffix (10K, 2.5M),
    scale words, multipliers (3x) and digit runs next to a unit word.
    """
    return bool(
        PERCENT_PATTERN.search(text)
        or CURRENCY_PATTERN.search(text)
        or MAGNITUDE_PATTERN.search(text)
        or SCALE_WORD_PATTERN.search(text)
        or MULTIPLIER_PATTERN.search(text)
        or NUMBER_UNIT_PATTERN.search(text)
        or GROUP_OF_PATTERN.search(text)
    )


def detect_bullet_points(text: str) -> list[str]:
    """Extract bullet texts, tolerating mixed glyphs, numbering and verb-led lines."""
    bullets = []
    for line in text.splitlines():
        stripped = line.strip()
        if len(stripped) < MIN_BULLET_LINE_CHARS:
            continue

        match = BULLET_PATTERN.match(stripped)
        if match:
            bullets.append(match.group(2).strip())
            continue

        match = NUMBERED_PATTERN.match(stripped)
        if match:
            bullets.append(match.group(1).strip())
            continue

        if is_action_verb_start(stripped):
            bullets.append(stripped)
    return bullets


def analyze_bullet_point(bullet: str) -> BulletPoint:
    category, verb = categorize_action_verb(bullet)
    return BulletPoint(
        text=bullet,
        is_quantified=is_quantified(bullet),
        first_word=_first_word(bullet),
        word_count=len(bullet.split()),
        verb_category=category,
        verb=verb,
    )


def calculate_avg_words_per_bullet(bullets: Sequence[BulletPoint]) -> int:
    if not bullets:
        return 0
    return round_half_up(sum(b.word_count for b in bullets) / len(bullets))


# ==================== Keywords ====================


@lru_cache(maxsize=2048)
def keyword_pattern(keyword: str) -> re.Pattern:
    """Case-insensitive pattern tolerant of whitespace/hyphen variation.

    Uses non-word lookarounds instead of ``\\b`` so C++, CI/CD and Node.js match.
    """
    parts = [re.escape(part) for part in re.split(r'[\s-]+', keyword.strip()) if part]
    body = r'[\s\-]+'.join(parts)
    return re.compile(r'(?<!\w)' + body + r'(?!\w)', re.I)


def find_matching_keywords(text: str, keywords: Iterable[str]) -> KeywordMatch:
    """Partition keywords into found/missing and count occurrences of found ones."""
    found: list[str] = []
    missing: list[str] = []
    frequency: dict[str, int] = {}
    for keyword in keywords:
        if not keyword or not keyword.strip():
            continue
        count = len(keyword_pattern(keyword).findall(text))
        if count:
            found.append(keyword)
            frequency[keyword] = count
        else:
            missing.append(keyword)
    return KeywordMatch(found=found, missing=missing, frequency=frequency)


# ==================== Sections ====================


def section_category(header: str) -> Optional[str]:
    """Canonical category of a section header, e.g. 'Work Experience' -> 'experience'."""
    lowered = header.lower()
    for category, needles in SECTION_CATEGORIES.items():
        if any(needle in lowered for needle in needles):
            return category
    return None


def detect_sections(text: str) -> SectionDetection:
    """
    Find section headers.

    A line is a header when it matches a known standard or non-standard
    header (case-insensitive, trailing colon ignored), or when it is a short
    ALL-CAPS line that is not the first line (usually the candidate's name).
    """
    found: list[str] = []
    standard: list[str] = []
    non_standard: list[str] = []

    first_seen = False
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        is_first = not first_seen
        first_seen = True

        candidate = stripped.rstrip(":").strip()
        if len(candidate) < 3 or len(candidate) > 50:
            continue

        lowered = candidate.lower()
        if lowered in _STANDARD_LOOKUP:
            found.append(candidate)
            standard.append(candidate)
        elif lowered in _NON_STANDARD_LOOKUP:
            found.append(candidate)
            non_standard.append(candidate)
        elif (
            not is_first
            and CAPS_HEADER_PATTERN.match(candidate)
            and len(candidate.split()) <= 4
        ):
            found.append(candidate)
            non_standard.append(candidate)

    return SectionDetection(found=tuple(found), standard=tuple(standard), non_standard=tuple(non_standard))


# ==================== Format Issues ====================


def detect_format_issues(text: str) -> list[FormatIssue]:
    """Detect constructs that commonly break ATS parsing."""
    issues: list[FormatIssue] = []

    if TABLE_PATTERN.search(text):
        issues.append(FormatIssue(
            severity=Severity.ERROR,
            issue="Tables detected",
            penalty=20,
            fix="Convert tables to bullet points or plain text",
        ))

    if text.count("\t") > 20:
        issues.append(FormatIssue(
            severity=Severity.WARNING,
            issue="Multiple columns detected (high tab usage)",
            penalty=15,
            fix="Use single-column layout",
        ))

    if GRAPHICS_PATTERN.search(text):
        issues.append(FormatIssue(
            severity=Severity.ERROR,
            issue="Images or graphics detected",
            penalty=15,
            fix="Remove images, logos and charts; ATS systems cannot read them",
        ))

    if SPECIAL_BULLET_PATTERN.search(text):
        issues.append(FormatIssue(
            severity=Severity.WARNING,
            issue="Special bullet characters detected",
            penalty=10,
            fix="Use standard bullets (-, •, or *)",
        ))

    for line in text.splitlines():
        header = line.strip().rstrip(":").strip()
        if header.lower() in _NON_STANDARD_LOOKUP:
            issues.append(FormatIssue(
                severity=Severity.WARNING,
                issue=f'Non-standard section header "{header}"',
                penalty=10,
                fix=f'Rename "{header}" to a standard header such as Summary or Experience',
            ))

    long_lines = [line for line in text.splitlines() if len(line) > LONG_LINE_CHARS]
    if len(long_lines) > 3:
        issues.append(FormatIssue(
            severity=Severity.INFO,
            issue="Very long text lines detected",
            penalty=5,
            fix="Ensure proper line breaks",
        ))

    special_chars = SPECIAL_CHAR_PATTERN.findall(text)
    if len(special_chars) > len(text) * 0.05:
        issues.append(FormatIssue(
            severity=Severity.WARNING,
            issue="Excessive special characters",
            penalty=10,
            fix="Remove decorative characters",
        ))

    return issues


# ==================== Estimates ====================


def estimate_page_count(text: str) -> int:
    pages = math.ceil(count_words(text) / WORDS_PER_PAGE)
    return max(1, min(pages, MAX_PAGES))


def _year_intervals(text: str, reference_year: int) -> list[tuple[int, int]]:
    intervals = []
    for match in YEAR_RANGE_PATTERN.finditer(text):
        start = int(match.group(1))
        end_raw = match.group(2).lower()
        end = reference_year if end_raw in ("present", "current") else int(end_raw)
        if start > reference_year or end < start:
            continue
        intervals.append((start, min(end, reference_year)))
    return intervals


def estimate_years_of_experience(
    text: str,
    reference_year: Optional[int] = None,
    bullet_count: Optional[int] = None,
) -> int:
    """
    Sum of non-overlapping year ranges found in the text, capped at 40.

    "Present"/"Current" resolve to ``reference_year`` (defaults to this year).
    With no usable range, falls back to 2 years per 5 bullets.
    """
    if reference_year is None:
        reference_year = date.today().year

    intervals = sorted(_year_intervals(text, reference_year))
    if not intervals:
        if bullet_count is None:
            bullet_count = len(detect_bullet_points(text))
        return min((bullet_count // 5) * 2, MAX_YEARS_EXPERIENCE)

    merged: list[list[int]] = []
    for start, end in intervals:
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])

    total = sum(end - start for start, end in merged)
    return max(0, min(total, MAX_YEARS_EXPERIENCE))


# ==================== Whole-text Analysis ====================


def validate_resume_text(text: object) -> list[str]:
    """Return every failed minimum-content check; an empty list means valid."""
    if not isinstance(text, str):
        return ["Resume text must be a string"]

    errors = []
    if not text.strip():
        errors.append("Resume text is empty")
    if len(text.strip()) < MIN_RESUME_CHARS:
        errors.append(f"Resume text is too short (minimum {MIN_RESUME_CHARS} characters)")
    if count_words(text) < MIN_RESUME_WORDS:
        errors.append(f"Resume contains too few words (minimum {MIN_RESUME_WORDS} words)")
    return errors


def analyze_resume_text(text: str, reference_year: Optional[int] = None) -> ResumeTextAnalysis:
    """Extract every structural fact the component scorers need, in one pass."""
    bullets = [analyze_bullet_point(b) for b in detect_bullet_points(text)]
    sections = detect_sections(text)

    return ResumeTextAnalysis(
        total_words=count_words(text),
        total_bullets=len(bullets),
        bullet_points=tuple(bullets),
        words=tuple(extract_words(text)),
        sections=sections.found,
        standard_sections=sections.standard,
        non_standard_sections=sections.non_standard,
        page_count=estimate_page_count(text),
        years_experience=estimate_years_of_experience(
            text, reference_year=reference_year, bullet_count=len(bullets)
        ),
    )