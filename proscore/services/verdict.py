"""
AI verdict on a scoring result using Google Gemini (google-genai SDK).

The scoring result is read-only context for the prompt. The text generator is
built once at startup and passed in explicitly so tests can substitute a fake.
"""
import logging
from typing import Protocol

from google import genai
from google.genai import types

from proscore.scoring.types import ScoringResult

logger = logging.getLogger(__name__)


class VerdictError(RuntimeError):
    """The text generator returned nothing usable."""


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str:
        ...


VERDICT_PROMPT = """You are an experienced technical recruiter. Write a short, candid verdict on this resume for a {role} position.

Use only the analysis below. Do not invent facts about the candidate.
Respond with 3-5 sentences: overall impression, the biggest risk, and the single most valuable fix.

## Scores
Overall: {overall}/100 (grade {grade})
ATS pass probability: {ats_probability}%
Content Quality: {content}/100
ATS Compatibility: {ats}/100
Format & Structure: {format}/100
Impact & Metrics: {impact}/100

## Missing must-have keywords
{missing}

## Format issues
{issues}

## Top recommended actions
{actions}
"""


def _bullets(items, empty: str = "None") -> str:
    lines = [f"- {item}" for item in items]
    return "\n".join(lines) if lines else empty


def build_verdict_prompt(result: ScoringResult) -> str:
    """Render the verdict prompt from a scoring result without modifying it."""
    components = result.component_scores
    report = result.ats_detailed_report
    return VERDICT_PROMPT.format(
        role=report.keyword_gap_analysis.matched_role,
        overall=result.overall_score,
        grade=result.grade.value,
        ats_probability=result.ats_pass_probability,
        content=components.content_quality.score,
        ats=components.ats_compatibility.score,
        format=components.format_structure.score,
        impact=components.impact_metrics.score,
        missing=_bullets(report.keyword_gap_analysis.must_have.missing),
        issues=_bullets(f"{i.issue} ({i.severity.value})" for i in report.format_issues),
        actions=_bullets(
            f"{a.action} (+{a.points_gain} pts, {a.time})"
            for a in result.improvement_roadmap.to_reach_90[:5]
        ),
    )


class GeminiTextGenerator:
    """TextGenerator backed by a single google-genai client."""

    def __init__(self, api_key: str, model: str = "gemini-2.0-flash", temperature: float = 0.4):
        self.model = model
        self.temperature = temperature
        self.client = genai.Client(api_key=api_key)

    def generate(self, prompt: str) -> str:
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=self.temperature,
                top_p=0.95,
                max_output_tokens=1024,
            ),
        )
        return response.text or ""


def generate_verdict(generator: TextGenerator, result: ScoringResult) -> str:
    """Ask the generator for a verdict on ``result``."""
    prompt = build_verdict_prompt(result)
    try:
        logger.info("Requesting AI verdict...")
        verdict = generator.generate(prompt).strip()
    except Exception as e:
        logger.error(f"Verdict generation failed: {e}")
        raise

    if not verdict:
        raise VerdictError("Text generator returned an empty verdict")
    return verdict
