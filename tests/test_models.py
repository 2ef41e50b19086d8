"""
Tests for the profile and opportunity models.
"""

import unittest

from pydantic import ValidationError

from tests import make_opportunity, make_profile

from shared.models import Profile


class TestProfile(unittest.TestCase):

    def test_tags_are_stripped_and_deduplicated(self):
        profile = Profile(
            education_level=" Graduate ",
            skills=["Writing", " Writing ", "", "Design"],
            interests=["Media", "Media"],
            preferred_location="Delhi ",
        )
        self.assertEqual(profile.education_level, "Graduate")
        self.assertEqual(profile.skills, ("Writing", "Design"))
        self.assertEqual(profile.interests, ("Media",))
        self.assertEqual(profile.preferred_location, "Delhi")

    def test_is_complete(self):
        self.assertTrue(make_profile().is_complete)
        self.assertFalse(make_profile(skills=[]).is_complete)
        self.assertFalse(make_profile(interests=[]).is_complete)
        self.assertFalse(make_profile(education_level="").is_complete)
        self.assertFalse(make_profile(preferred_location="").is_complete)

    def test_defaults_are_empty(self):
        profile = Profile()
        self.assertEqual(profile.skills, ())
        self.assertFalse(profile.is_complete)

    def test_concrete_location(self):
        self.assertTrue(make_profile(preferred_location="Patna").has_concrete_location)
        self.assertFalse(make_profile(preferred_location="Any Location").has_concrete_location)
        self.assertFalse(make_profile(preferred_location="Remote/Online").has_concrete_location)

    def test_frozen(self):
        profile = make_profile()
        with self.assertRaises(ValidationError):
            profile.education_level = "Diploma"


class TestOpportunity(unittest.TestCase):

    def test_required_skills_keep_order(self):
        opp = make_opportunity(required_skills=["Writing", "Communication", "Teaching"])
        self.assertEqual(opp.required_skills, ("Writing", "Communication", "Teaching"))

    def test_stipend_must_be_non_negative(self):
        with self.assertRaises(ValidationError):
            make_opportunity(stipend_amount=-1)


if __name__ == "__main__":
    unittest.main()
