import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proscore.scoring.analyzers import (  # noqa: E402
    analyze_resume_text,
    calculate_avg_words_per_bullet,
    categorize_action_verb,
    count_words,
    detect_bullet_points,
    detect_format_issues,
    detect_sections,
    estimate_page_count,
    estimate_years_of_experience,
    find_matching_keywords,
    is_quantified,
    analyze_bullet_point,
    round_half_up,
    section_category,
    validate_resume_text,
)
from proscore.scoring.types import Severity, VerbCategory  # noqa: E402
from tests.sample_resumes import REFERENCE_YEAR, STRONG_RESUME, WEAK_RESUME  # noqa: E402


class BulletDetectionTests(unittest.TestCase):
    def test_mixed_glyphs_and_numbering(self):
        text = (
            "• Led the payments migration project\n"
            "- Built internal tooling for support\n"
            "* Designed the onboarding API\n"
            "► Shipped the mobile release\n"
            "1. Reduced hosting cost by 10%\n"
            "2) Maintained the release calendar\n"
        )
        bullets = detect_bullet_points(text)
        self.assertEqual(bullets, [
            "Led the payments migration project",
            "Built internal tooling for support",
            "Designed the onboarding API",
            "Shipped the mobile release",
            "Reduced hosting cost by 10%",
            "Maintained the release calendar",
        ])

    def test_verb_led_lines_without_glyph_count_as_bullets(self):
        text = "Experience\nLed a team of five engineers\nSome plain sentence here"
        self.assertEqual(detect_bullet_points(text), ["Led a team of five engineers"])

    def test_short_lines_are_ignored(self):
        self.assertEqual(detect_bullet_points("- Led it\n-\n"), [])

    def test_average_words_per_bullet(self):
        bullets = [analyze_bullet_point("Led the team"), analyze_bullet_point("Built a new billing system")]
        self.assertEqual(calculate_avg_words_per_bullet(bullets), 4)
        self.assertEqual(calculate_avg_words_per_bullet([]), 0)


class QuantificationTests(unittest.TestCase):
    def test_metric_indicators(self):
        for text in (
            "Increased revenue by 45%",
            "Closed $2M in new business",
            "Grew the newsletter to 10K subscribers",
            "Made deployments 3x faster",
            "Onboarded 500 users in the first month",
            "Managed a team of 8",
            "Raised 2.5 million for the seed round",
        ):
            with self.subTest(text=text):
                self.assertTrue(is_quantified(text))

    def test_plain_statements_are_not_quantified(self):
        for text in ("Managed the support team", "Worked at Acme in 2019", "Wrote documentation"):
            with self.subTest(text=text):
                self.assertFalse(is_quantified(text))


class ActionVerbTests(unittest.TestCase):
    def test_weak_phrases_win_over_single_words(self):
        self.assertEqual(
            categorize_action_verb("Responsible for the weekly report"),
            (VerbCategory.WEAK, "Responsible for"),
        )
        self.assertEqual(
            categorize_action_verb("Was part of the launch team"),
            (VerbCategory.WEAK, "Was part of"),
        )

    def test_single_word_categories(self):
        self.assertEqual(categorize_action_verb("Led the migration"), (VerbCategory.STRONG, "Led"))
        self.assertEqual(categorize_action_verb("Managed budgets"), (VerbCategory.MEDIUM, "Managed"))
        self.assertEqual(categorize_action_verb("Helped customers"), (VerbCategory.WEAK, "Helped"))

    def test_unknown_verbs_default_to_medium(self):
        category, verb = categorize_action_verb("Juggled three projects")
        self.assertEqual(category, VerbCategory.MEDIUM)
        self.assertEqual(verb, "Juggled")


class KeywordMatchingTests(unittest.TestCase):
    def test_symbols_and_boundaries(self):
        match = find_matching_keywords(
            "Built CI/CD with C++ and Node.js; wrote JavaScript daily",
            ["CI/CD", "C++", "Node.js", "Java"],
        )
        self.assertEqual(match.found, ["CI/CD", "C++", "Node.js"])
        self.assertEqual(match.missing, ["Java"])

    def test_case_and_whitespace_tolerance(self):
        match = find_matching_keywords(
            "Strong Problem Solving skills and data-driven decisions",
            ["problem-solving", "data driven"],
        )
        self.assertEqual(match.found, ["problem-solving", "data driven"])

    def test_frequency_counts_every_occurrence(self):
        match = find_matching_keywords("Python, python and PYTHON", ["Python", "Go"])
        self.assertEqual(match.frequency, {"Python": 3})
        self.assertEqual(match.missing, ["Go"])


class SectionTests(unittest.TestCase):
    def test_standard_non_standard_and_caps_headers(self):
        text = (
            "JANE DOE\n"
            "EXPERIENCE\n"
            "Led the data team\n"
            "About Me:\n"
            "Curious person\n"
            "MY SIDE QUESTS\n"
            "Education\n"
        )
        sections = detect_sections(text)
        self.assertEqual(sections.found, ("EXPERIENCE", "About Me", "MY SIDE QUESTS", "Education"))
        self.assertEqual(sections.standard, ("EXPERIENCE", "Education"))
        self.assertEqual(sections.non_standard, ("About Me", "MY SIDE QUESTS"))

    def test_section_category(self):
        self.assertEqual(section_category("Professional Summary"), "summary")
        self.assertEqual(section_category("Work History"), "experience")
        self.assertEqual(section_category("Technical Skills"), "skills")
        self.assertIsNone(section_category("Hobbies"))


class FormatIssueTests(unittest.TestCase):
    def test_clean_text_has_no_issues(self):
        self.assertEqual(detect_format_issues(STRONG_RESUME), [])

    def test_each_construct_is_reported(self):
        text = (
            "| Skill | Level |\n"
            "[image: company logo]\n"
            "★ Led the team\n"
            "About Me\n"
        )
        issues = {issue.issue: issue for issue in detect_format_issues(text)}
        self.assertEqual(issues["Tables detected"].severity, Severity.ERROR)
        self.assertEqual(issues["Tables detected"].penalty, 20)
        self.assertEqual(issues["Images or graphics detected"].penalty, 15)
        self.assertEqual(issues["Special bullet characters detected"].severity, Severity.WARNING)
        self.assertIn('Non-standard section header "About Me"', issues)

    def test_high_tab_usage(self):
        text = "Name\t\tRole\n" + "a\tb\n" * 25
        names = [issue.issue for issue in detect_format_issues(text)]
        self.assertIn("Multiple columns detected (high tab usage)", names)


class EstimateTests(unittest.TestCase):
    def test_page_count(self):
        self.assertEqual(estimate_page_count(""), 1)
        self.assertEqual(estimate_page_count("word " * 550), 1)
        self.assertEqual(estimate_page_count("word " * 551), 2)
        self.assertEqual(estimate_page_count("word " * 10000), 10)

    def test_overlapping_ranges_do_not_double_count(self):
        text = "Acme 2015 - 2018\nBeta 2017 - 2020\nBeta 2017 - 2020"
        self.assertEqual(estimate_years_of_experience(text, reference_year=REFERENCE_YEAR), 5)

    def test_present_resolves_to_reference_year(self):
        self.assertEqual(estimate_years_of_experience("Acme 2020 - Present", reference_year=2025), 5)
        self.assertEqual(estimate_years_of_experience("Acme 2020 to current", reference_year=2023), 3)

    def test_month_names_and_future_ranges(self):
        self.assertEqual(estimate_years_of_experience("Jan 2019 - Dec 2021", reference_year=2025), 2)
        self.assertEqual(estimate_years_of_experience("2030 - 2032", reference_year=2025, bullet_count=0), 0)

    def test_fallback_and_cap(self):
        self.assertEqual(estimate_years_of_experience("No dates here", bullet_count=12), 4)
        self.assertEqual(estimate_years_of_experience("1960 - 2025", reference_year=2025), 40)


class ValidationTests(unittest.TestCase):
    def test_valid_resume_has_no_errors(self):
        self.assertEqual(validate_resume_text(STRONG_RESUME), [])

    def test_empty_and_whitespace(self):
        self.assertIn("Resume text is empty", validate_resume_text(""))
        self.assertIn("Resume text is empty", validate_resume_text("   \n\t "))

    def test_too_short(self):
        errors = validate_resume_text("Led a team of engineers.")
        self.assertEqual(len(errors), 2)
        self.assertTrue(all("too" in error for error in errors))

    def test_not_a_string(self):
        self.assertEqual(validate_resume_text(None), ["Resume text must be a string"])


class AnalysisTests(unittest.TestCase):
    def test_strong_resume_facts(self):
        analysis = analyze_resume_text(STRONG_RESUME, reference_year=REFERENCE_YEAR)
        self.assertEqual(analysis.total_bullets, 11)
        self.assertEqual(analysis.quantified_bullets, 11)
        self.assertEqual(analysis.page_count, 1)
        self.assertEqual(analysis.years_experience, 7)
        self.assertEqual(
            analysis.standard_sections,
            ("Professional Summary", "Work Experience", "Technical Skills", "Education"),
        )
        self.assertEqual(analysis.total_words, count_words(STRONG_RESUME))

    def test_weak_resume_facts(self):
        analysis = analyze_resume_text(WEAK_RESUME, reference_year=REFERENCE_YEAR)
        self.assertEqual(analysis.total_bullets, 5)
        self.assertEqual(analysis.quantified_bullets, 0)
        self.assertEqual(analysis.non_standard_sections, ("About Me", "Work History"))
        self.assertTrue(all(b.verb_category == VerbCategory.WEAK for b in analysis.bullet_points))

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(3.5), 4)
        self.assertEqual(round_half_up(2.49), 2)


if __name__ == "__main__":
    unittest.main()
