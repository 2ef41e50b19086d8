"""
Match rules for profile tags against catalog opportunities.

Tags are compared with loose substring containment: two tags match when
either one, lower-cased, appears inside the other. "Design" matches
"Graphic Design" and "Graphic Design" matches "Design". Short tags such as
"IT" therefore match anything containing "it"; that looseness is the
intended behavior.

Blank strings are the one exception: a blank tag or a blank sector never
matches. Plain containment would let an empty string match every record,
so this departs from the looser rule on purpose.
"""

from typing import Iterable

from shared.models import REMOTE_LOCATION, Opportunity, Profile

GOVERNMENT_INTEREST = "government"
MINISTRY_MARKER = "Ministry"


def _normalize_text(text: str) -> str:
    return text.lower().strip()


def substring_match(a: str, b: str) -> bool:
    """True if either string contains the other, ignoring case. Blank strings never match."""
    a_lower = _normalize_text(a)
    b_lower = _normalize_text(b)
    if not a_lower or not b_lower:
        return False
    return a_lower in b_lower or b_lower in a_lower


def overlapping_tags(tags: Iterable[str], targets: Iterable[str]) -> list[str]:
    """Return the tags that substring-match at least one target, in tag order."""
    targets = list(targets)
    return [tag for tag in tags if any(substring_match(tag, target) for target in targets)]


def tags_overlap(tags: Iterable[str], targets: Iterable[str]) -> bool:
    """True if any tag substring-matches any target."""
    return bool(overlapping_tags(tags, targets))


def location_allowed(profile: Profile, opportunity: Opportunity) -> bool:
    """
    Hard location filter, applied before any tag matching.

    A sentinel preference ("Any Location", "Remote/Online") or a blank one
    admits everything. A concrete city admits opportunities in that city
    and remote ones. Comparison is exact.
    """
    if not profile.has_concrete_location:
        return True
    return opportunity.location in (profile.preferred_location, REMOTE_LOCATION)


def government_ministry_rule(interest: str, opportunity: Opportunity) -> bool:
    """
    Special case: a "Government" interest matches any ministry.

    Ministries are not always filed under the Government sector
    ("Ministry of Education" sits in Education), so the sector check alone
    would miss them. The interest is compared case-insensitively; the
    organization must contain "Ministry" with that capitalization.
    """
    return (
        _normalize_text(interest) == GOVERNMENT_INTEREST
        and MINISTRY_MARKER in opportunity.organization
    )


def matched_skills(profile: Profile, opportunity: Opportunity) -> list[str]:
    return overlapping_tags(profile.skills, opportunity.required_skills)


def matched_interests(profile: Profile, opportunity: Opportunity) -> list[str]:
    return [
        interest
        for interest in profile.interests
        if substring_match(interest, opportunity.sector)
        or government_ministry_rule(interest, opportunity)
    ]


def skill_matches(profile: Profile, opportunity: Opportunity) -> bool:
    return bool(matched_skills(profile, opportunity))


def interest_matches(profile: Profile, opportunity: Opportunity) -> bool:
    return bool(matched_interests(profile, opportunity))


def is_relevant(profile: Profile, opportunity: Opportunity) -> bool:
    """Location passes AND (skill match OR interest match)."""
    if not location_allowed(profile, opportunity):
        return False
    return skill_matches(profile, opportunity) or interest_matches(profile, opportunity)
