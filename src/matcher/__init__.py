"""
Matcher - rule-based internship recommendation.

Filters the opportunity catalog by location, then keeps opportunities whose
required skills or sector loosely match the profile's tags, ranked by
stipend.
"""

from .engine import DEFAULT_MAX_RESULTS, OpportunityMatcher, build_reason, match
from .rules import (
    government_ministry_rule,
    interest_matches,
    is_relevant,
    location_allowed,
    skill_matches,
    substring_match,
    tags_overlap,
)

__all__ = [
    "DEFAULT_MAX_RESULTS",
    "OpportunityMatcher",
    "build_reason",
    "match",
    "government_ministry_rule",
    "interest_matches",
    "is_relevant",
    "location_allowed",
    "skill_matches",
    "substring_match",
    "tags_overlap",
]
