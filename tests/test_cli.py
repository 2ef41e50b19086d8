"""
Tests for the command-line wizard.
"""

import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import yaml
from click.testing import CliRunner

from tests import make_opportunity

from shared.i18n import Translator
from wizard.main import main, render_card


class TestCli(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        patcher = patch("wizard.main.setup_logging")
        patcher.start()
        self.addCleanup(patcher.stop)

    def _recommend(self, *args):
        return self.runner.invoke(main, ["recommend", "--no-delay", *args])

    def test_options(self):
        result = self.runner.invoke(main, ["options"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Post Graduate", result.output)
        self.assertIn("Remote/Online", result.output)

    def test_recommend_text(self):
        result = self._recommend(
            "-e", "Graduate", "-s", "Writing", "-i", "Government", "-l", "Delhi"
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("We found 2 internships perfect for your profile", result.output)
        self.assertIn("Data Entry and Digital Documentation", result.output)
        self.assertIn("Educational Content Development", result.output)
        self.assertIn("₹5,000/month", result.output)
        self.assertNotIn("Rural Development Communication", result.output)

    def test_recommend_json(self):
        result = self._recommend(
            "-e", "Graduate", "-s", "Research", "-i", "Finance",
            "-l", "Any Location", "--json",
        )
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.output)
        self.assertEqual([r["opportunity"]["id"] for r in payload], [102, 104, 106])
        self.assertIn("reason_text", payload[0])

    def test_recommend_hindi(self):
        result = self._recommend(
            "-e", "Graduate", "-s", "Writing", "-i", "Government",
            "-l", "Delhi", "--lang", "hi",
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("आपके लिए सुझाव", result.output)

    def test_recommend_empty_state(self):
        result = self._recommend(
            "-e", "Diploma", "-s", "Plumbing", "-i", "Space", "-l", "Patna"
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("No Recommendations Found", result.output)

    def test_recommend_incomplete_profile(self):
        result = self._recommend("-e", "Graduate", "-i", "Government", "-l", "Delhi")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("Profile is incomplete", result.output)

    def test_recommend_custom_catalog(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "catalog.yaml"
            path.write_text(yaml.safe_dump({"opportunities": [{
                "id": 1,
                "title": "Graphic Design Intern",
                "organization": "Studio",
                "sector": "Design",
                "location": "Pune",
                "stipend_amount": 3000,
                "required_skills": ["Graphic Design"],
            }]}))
            result = self._recommend(
                "-e", "Diploma", "-s", "Design", "-i", "Media",
                "-l", "Pune", "--catalog", str(path), "--json",
            )
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.output)
        self.assertEqual(payload[0]["opportunity"]["title"], "Graphic Design Intern")
        self.assertEqual(payload[0]["matched_skills"], ["Design"])

    def test_bad_catalog(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "catalog.yaml"
            path.write_text(yaml.safe_dump({"opportunities": [{"id": 1}]}))
            result = self._recommend(
                "-e", "Diploma", "-s", "Design", "-i", "Media",
                "-l", "Pune", "--catalog", str(path),
            )
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid opportunity at index 0", result.output)

    def test_interactive(self):
        answers = "\n".join(["Graduate", "Research", "Finance", "Any Location"]) + "\n"
        result = self.runner.invoke(main, ["interactive", "--no-delay"], input=answers)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Financial Analysis Support", result.output)


class TestRenderCard(unittest.TestCase):

    def test_skill_badges_truncated(self):
        from shared.models import MatchResult

        opp = make_opportunity(
            required_skills=["A", "B", "C", "D", "E"], sector="Finance", stipend_amount=12000
        )
        card = render_card(MatchResult(opportunity=opp, reason_text="because"), Translator("en"))
        self.assertIn("A · B · C · +2 more", card)
        self.assertIn("💰", card)
        self.assertIn("₹12,000/month", card)
        self.assertIn("Why recommended: because", card)


if __name__ == "__main__":
    unittest.main()
