"""
Test suite utilities.

Run with:

    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from shared.models import Opportunity, Profile  # noqa: E402


def make_opportunity(id: int = 1, **overrides) -> Opportunity:
    """Build an opportunity that matches nothing unless fields are overridden."""
    fields = {
        "id": id,
        "title": f"Internship {id}",
        "organization": "Acme Corp",
        "sector": "Zzz",
        "location": "Delhi",
        "stipend_amount": 1000,
        "duration_label": "3 months",
        "description": "",
        "required_skills": ["Qqq"],
        "apply_url": f"https://example.com/{id}",
    }
    fields.update(overrides)
    return Opportunity(**fields)


def make_profile(**overrides) -> Profile:
    fields = {
        "education_level": "Graduate",
        "skills": ["Writing"],
        "interests": ["Government"],
        "preferred_location": "Any Location",
    }
    fields.update(overrides)
    return Profile(**fields)
