import sys
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proscore.scoring import calculate_score  # noqa: E402
from proscore.services.verdict import (  # noqa: E402
    GeminiTextGenerator,
    VerdictError,
    build_verdict_prompt,
    generate_verdict,
)
from tests.sample_resumes import MIXED_RESUME, REFERENCE_YEAR  # noqa: E402


class FailingGenerator:
    def generate(self, prompt: str) -> str:
        raise ConnectionError("model unavailable")


class EchoGenerator:
    def generate(self, prompt: str) -> str:
        return f"  Verdict for prompt of {len(prompt)} chars.  "


class VerdictPromptTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.result = calculate_score(MIXED_RESUME, "Software Engineer", reference_year=REFERENCE_YEAR)

    def test_prompt_contains_scores_and_gaps(self):
        prompt = build_verdict_prompt(self.result)
        self.assertIn(f"Overall: {self.result.overall_score}/100", prompt)
        self.assertIn("Software Engineer position", prompt)
        self.assertIn("- code review", prompt)
        self.assertIn("- design patterns", prompt)
        self.assertIn("Add critical keywords", prompt)

    def test_prompt_does_not_mutate_result(self):
        before = self.result.to_dict()
        build_verdict_prompt(self.result)
        generate_verdict(EchoGenerator(), self.result)
        self.assertEqual(self.result.to_dict(), before)

    def test_generate_verdict_strips_reply(self):
        verdict = generate_verdict(EchoGenerator(), self.result)
        self.assertTrue(verdict.startswith("Verdict for prompt"))
        self.assertEqual(verdict, verdict.strip())

    def test_generator_errors_propagate(self):
        with self.assertRaises(ConnectionError):
            generate_verdict(FailingGenerator(), self.result)


class GeminiTextGeneratorTests(unittest.TestCase):
    def test_generate_calls_models_api(self):
        with patch("proscore.services.verdict.genai.Client") as client_cls:
            client = client_cls.return_value
            client.models.generate_content.return_value = SimpleNamespace(text="Strong candidate.")
            generator = GeminiTextGenerator(api_key="test-key", model="gemini-test")

            self.assertEqual(generator.generate("prompt"), "Strong candidate.")

        client_cls.assert_called_once_with(api_key="test-key")
        kwargs = client.models.generate_content.call_args.kwargs
        self.assertEqual(kwargs["model"], "gemini-test")
        self.assertEqual(kwargs["contents"], "prompt")

    def test_empty_response_raises_verdict_error(self):
        with patch("proscore.services.verdict.genai.Client") as client_cls:
            client_cls.return_value.models.generate_content.return_value = SimpleNamespace(text=None)
            generator = GeminiTextGenerator(api_key="test-key")
            result = calculate_score(MIXED_RESUME, "Software Engineer")

            with self.assertRaises(VerdictError):
                generate_verdict(generator, result)


if __name__ == "__main__":
    unittest.main()
