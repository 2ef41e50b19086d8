"""
Opportunity matching engine.
Filters the catalog against a profile, ranks by stipend and explains each pick.
"""

import re
from typing import Optional, Sequence

from loguru import logger

from shared.models import MatchResult, Opportunity, Profile

from . import rules

DEFAULT_MAX_RESULTS = 5

DEFAULT_REASON_TEMPLATE = (
    "Matches your {skills} skills and {interests} interests for this {sector} role"
)


# {name} or {name|fallback}
_PLACEHOLDER = re.compile(r"\{(\w+)(?:\|([^{}]*))?\}")


def _join(tags: Sequence[str]) -> str:
    return " and ".join(tags)


def build_reason(
    profile: Profile,
    opportunity: Opportunity,
    skills: Sequence[str],
    interests: Sequence[str],
) -> str:
    """
    Fill the opportunity's reason template with profile fields.

    ``{name|word}`` substitutes ``word`` when ``name`` is empty, so
    ``{matched_skills|background}`` reads "background" when no skill
    matched. Without a fallback, ``{matched_skills}`` and
    ``{matched_interests}`` use the full profile lists instead. Unknown
    placeholders and stray braces are left as written.
    """
    template = opportunity.reason_template or DEFAULT_REASON_TEMPLATE
    matched = {
        "matched_skills": _join(skills),
        "matched_interests": _join(interests),
    }
    context = {
        "skills": _join(profile.skills),
        "interests": _join(profile.interests),
        "education": profile.education_level,
        "location": profile.preferred_location,
        "sector": opportunity.sector,
        "organization": opportunity.organization,
    }

    def _substitute(m: re.Match) -> str:
        name, fallback = m.group(1), m.group(2)
        if name in matched:
            value = matched[name]
            if value:
                return value
            if fallback is not None:
                return fallback
            return context["skills" if name == "matched_skills" else "interests"]
        if name in context:
            return context[name] or (fallback or "")
        return m.group(0)

    return _PLACEHOLDER.sub(_substitute, template)


class OpportunityMatcher:
    """Matches a profile against an opportunity catalog."""

    def __init__(self, max_results: int = DEFAULT_MAX_RESULTS):
        self.max_results = max_results

    def evaluate(self, profile: Profile, opportunity: Opportunity) -> Optional[MatchResult]:
        """Return a MatchResult if the opportunity is relevant, else None."""
        if not rules.location_allowed(profile, opportunity):
            return None

        skills = rules.matched_skills(profile, opportunity)
        interests = rules.matched_interests(profile, opportunity)
        # Either signal is enough
        if not skills and not interests:
            return None

        return MatchResult(
            opportunity=opportunity,
            reason_text=build_reason(profile, opportunity, skills, interests),
            matched_skills=tuple(skills),
            matched_interests=tuple(interests),
        )

    def match(self, profile: Profile, catalog: Sequence[Opportunity]) -> list[MatchResult]:
        """
        Select relevant opportunities for a profile.

        Args:
            profile: Questionnaire answers
            catalog: Opportunities to choose from

        Returns:
            At most ``max_results`` results, highest stipend first
        """
        results = [
            result
            for result in (self.evaluate(profile, opportunity) for opportunity in catalog)
            if result is not None
        ]
        # sorted() is stable, so equal stipends keep catalog order
        results = sorted(results, key=lambda r: r.opportunity.stipend_amount, reverse=True)
        selected = results[: max(self.max_results, 0)]

        logger.debug(
            f"Matched {len(results)}/{len(catalog)} opportunities, "
            f"returning {len(selected)}"
        )
        return selected


def match(
    profile: Profile,
    catalog: Sequence[Opportunity],
    max_results: int = DEFAULT_MAX_RESULTS,
) -> list[MatchResult]:
    """Match a profile against a catalog with a one-off matcher."""
    return OpportunityMatcher(max_results=max_results).match(profile, catalog)
