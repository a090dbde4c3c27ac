"""
Improvement roadmap generation.

One candidate action per detected deficiency, sorted by priority then point
gain, then split by a greedy running-score simulation into the actions
needed to reach 80 and 90.
"""

import math
from typing import Iterable

from proscore.scoring.analyzers import section_category
from proscore.scoring.types import (
    ComponentScores,
    ImprovementAction,
    ImprovementRoadmap,
    KeywordGapAnalysis,
    LengthVerdict,
    Priority,
    Severity,
)

SEVERITY_PRIORITY = {
    Severity.ERROR: Priority.HIGH,
    Severity.WARNING: Priority.MEDIUM,
    Severity.INFO: Priority.LOW,
}

QUICK_WIN_MIN_POINTS = 4
QUICK_WIN_MAX_MINUTES = 20
MAX_QUICK_WINS = 3
TARGET_QUANTIFIED_PERCENTAGE = 60

CATEGORY_CONTENT = "Content Quality"
CATEGORY_ATS = "ATS Compatibility"
CATEGORY_FORMAT = "Format & Structure"


def _action(action: str, points: int, minutes: int, priority: Priority, category: str) -> ImprovementAction:
    return ImprovementAction(
        action=action,
        points_gain=points,
        time=f"{minutes}min",
        minutes=minutes,
        priority=priority,
        category=category,
    )


def collect_improvement_actions(
    components: ComponentScores,
    keyword_gap: KeywordGapAnalysis,
) -> list[ImprovementAction]:
    """Unsorted candidate actions, one per deficiency."""
    content = components.content_quality.breakdown
    ats = components.ats_compatibility.breakdown
    structure = components.format_structure.breakdown
    actions = []

    must_have = keyword_gap.must_have
    if must_have.missing_count > 0:
        actions.append(_action(
            f"Add critical keywords: {', '.join(must_have.missing[:3])}",
            min(must_have.missing_count * 2, 10), 30, Priority.HIGH, CATEGORY_ATS,
        ))

    quantification = content.achievement_quantification
    if quantification.total_bullets and quantification.percentage < TARGET_QUANTIFIED_PERCENTAGE:
        needed = math.ceil(quantification.total_bullets * 0.6 - quantification.quantified_bullets)
        if needed > 0:
            actions.append(_action(
                f"Add metrics to {needed} more bullet points",
                min(math.ceil(needed * 1.5), 8), 20, Priority.HIGH, CATEGORY_CONTENT,
            ))

    verbs = content.action_verb_strength
    if verbs.weak_verbs_found:
        actions.append(_action(
            f"Replace weak verbs ({', '.join(verbs.weak_verbs_found[:2])}) with strong action verbs",
            4, 15, Priority.MEDIUM, CATEGORY_CONTENT,
        ))

    for issue in ats.format_compatibility.issues:
        actions.append(_action(
            f"Fix: {issue.issue}",
            math.ceil(issue.penalty / 2), 10, SEVERITY_PRIORITY[issue.severity], CATEGORY_ATS,
        ))

    important = keyword_gap.important
    if important.missing_count > 0:
        actions.append(_action(
            f"Work in important keywords: {', '.join(important.missing[:3])}",
            min(important.missing_count, 6), 25, Priority.MEDIUM, CATEGORY_ATS,
        ))

    length = structure.length_optimization
    if length.verdict != LengthVerdict.OPTIMAL:
        if length.verdict == LengthVerdict.TOO_LONG:
            text = f"Reduce to {length.recommended_pages} pages"
        else:
            text = f"Expand to {length.recommended_pages} pages with more details"
        actions.append(_action(text, 3, 25, Priority.LOW, CATEGORY_FORMAT))

    headers = ats.section_headers.standard_found + ats.section_headers.non_standard
    if not any(section_category(h) == "summary" for h in headers):
        actions.append(_action(
            "Add professional summary at the top",
            4, 15, Priority.MEDIUM, CATEGORY_CONTENT,
        ))

    contact = structure.contact_info
    if contact.missing:
        actions.append(_action(
            f"Add contact details: {', '.join(contact.missing)}",
            2, 5, Priority.LOW, CATEGORY_FORMAT,
        ))

    return actions


def sort_actions(actions: Iterable[ImprovementAction]) -> list[ImprovementAction]:
    """High priority first; ties broken by larger point gain. Stable otherwise."""
    return sorted(actions, key=lambda a: (a.priority.rank, -a.points_gain))


def generate_improvement_roadmap(
    overall_score: int,
    components: ComponentScores,
    keyword_gap: KeywordGapAnalysis,
) -> ImprovementRoadmap:
    actions = sort_actions(collect_improvement_actions(components, keyword_gap))

    running = overall_score
    to_reach_80 = []
    extra_for_90 = []
    for action in actions:
        if running < 80:
            to_reach_80.append(action)
        elif running < 90:
            extra_for_90.append(action)
        running += action.points_gain

    quick_wins = [
        a for a in actions
        if a.points_gain >= QUICK_WIN_MIN_POINTS and a.minutes <= QUICK_WIN_MAX_MINUTES
    ][:MAX_QUICK_WINS]

    return ImprovementRoadmap(
        to_reach_80=tuple(to_reach_80),
        to_reach_90=tuple(to_reach_80 + extra_for_90),
        quick_wins=tuple(quick_wins),
    )
