import asyncio
import json
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proscore.scoring import (  # noqa: E402
    FileSignal,
    Grade,
    ValidationError,
    calculate_pro_score,
    calculate_score,
)
from proscore.scoring.keywords import KEYWORDS_BY_ROLE  # noqa: E402
from tests.sample_resumes import (  # noqa: E402
    REFERENCE_YEAR,
    STRONG_RESUME,
    UNKNOWN_ROLE,
    WEAK_RESUME,
)


class ScenarioTests(unittest.TestCase):
    def test_strong_resume(self):
        result = calculate_score(STRONG_RESUME, "Software Engineer", reference_year=REFERENCE_YEAR)
        self.assertGreaterEqual(result.overall_score, 70)
        self.assertGreaterEqual(result.ats_pass_probability, 60)
        self.assertIn(result.grade, (Grade.A_PLUS, Grade.A, Grade.B))

    def test_weak_resume(self):
        result = calculate_score(WEAK_RESUME, "General", reference_year=REFERENCE_YEAR)
        self.assertLess(result.overall_score, 60)
        self.assertTrue(result.ats_detailed_report.keyword_gap_analysis.must_have.missing)
        self.assertIn(result.grade, (Grade.D, Grade.F))

    def test_unknown_role_falls_back_to_general(self):
        result = calculate_score(WEAK_RESUME, UNKNOWN_ROLE)
        gap = result.ats_detailed_report.keyword_gap_analysis
        self.assertEqual(gap.matched_role, "General")
        self.assertEqual(result.metadata.job_role, UNKNOWN_ROLE)
        self.assertEqual(result.metadata.matched_role, "General")
        skill = result.component_scores.content_quality.breakdown.skill_relevance
        general = KEYWORDS_BY_ROLE["General"]
        self.assertEqual(skill.expected_count, len(general.must_have) + len(general.important))

    def test_blank_role_uses_general(self):
        result = calculate_score(STRONG_RESUME, "  ")
        self.assertEqual(result.metadata.job_role, "General")


class InvariantTests(unittest.TestCase):
    def test_idempotent(self):
        first = calculate_score(STRONG_RESUME, "Software Engineer")
        second = calculate_score(STRONG_RESUME, "Software Engineer")
        self.assertEqual(first, second)

        first_payload = first.to_dict()
        second_payload = second.to_dict()
        first_payload.pop("metadata")
        second_payload.pop("metadata")
        self.assertEqual(json.dumps(first_payload, sort_keys=True), json.dumps(second_payload, sort_keys=True))

    def test_overall_matches_weighted_components(self):
        result = calculate_score(STRONG_RESUME, "Software Engineer", reference_year=REFERENCE_YEAR)
        parts = result.component_scores.all()
        self.assertEqual([c.weight for c in parts], [40, 35, 15, 10])
        self.assertEqual(result.overall_score, (sum(c.score * c.weight for c in parts) + 50) // 100)

    def test_result_serializes_to_plain_json(self):
        result = calculate_score(WEAK_RESUME, "General", reference_year=REFERENCE_YEAR)
        payload = json.loads(json.dumps(result.to_dict()))

        self.assertEqual(payload["overallScore"], result.overall_score)
        self.assertEqual(payload["grade"], result.grade.value)
        self.assertIn("contentQuality", payload["componentScores"])
        self.assertIn("toReach80", payload["improvementRoadmap"])
        self.assertIn("passPrediction", payload["atsDetailedReport"])
        tier = payload["atsDetailedReport"]["keywordGapAnalysis"]["mustHave"]
        self.assertEqual(tier["found"] + tier["missingCount"], tier["total"])
        self.assertIn(payload["improvementRoadmap"]["toReach80"][0]["priority"], ("high", "medium", "low"))
        self.assertIn("processingTimeMs", payload["metadata"])
        self.assertEqual(payload["metadata"]["resumeStats"]["totalBullets"], 5)

    def test_file_signal_reaches_file_format_score(self):
        signal = FileSignal(is_pdf=True, text_extractable=False, page_count=1, file_size=2048)
        result = calculate_score(STRONG_RESUME, "Software Engineer", file_signal=signal)
        file_format = result.component_scores.ats_compatibility.breakdown.file_format
        self.assertEqual(file_format.score, 30)
        self.assertEqual(file_format.file_size, 2048)
        self.assertIn(
            "Text could not be extracted from the file",
            result.ats_detailed_report.pass_prediction.risk_factors,
        )


class ValidationTests(unittest.TestCase):
    def test_empty_text(self):
        with self.assertRaises(ValidationError) as ctx:
            calculate_score("")
        self.assertIn("Resume text is empty", ctx.exception.errors)

    def test_whitespace_only(self):
        with self.assertRaises(ValidationError):
            calculate_score("   \n\n\t  ")

    def test_too_short(self):
        with self.assertRaises(ValidationError) as ctx:
            calculate_score("Led a team of five engineers on a payments platform.")
        self.assertTrue(ctx.exception.errors)

    def test_non_string(self):
        with self.assertRaises(ValidationError) as ctx:
            calculate_score(None)
        self.assertEqual(ctx.exception.errors, ["Resume text must be a string"])

    def test_validation_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            calculate_score("")


class AsyncEntryPointTests(unittest.TestCase):
    def test_async_wrapper_matches_sync_result(self):
        async_result = asyncio.run(calculate_pro_score(STRONG_RESUME, "Software Engineer"))
        self.assertEqual(async_result, calculate_score(STRONG_RESUME, "Software Engineer"))


if __name__ == "__main__":
    unittest.main()
