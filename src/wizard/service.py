"""
Recommendation service.
Simulates fetching internships from the portal, then runs the matcher locally.
"""

import asyncio
from typing import Optional, Sequence

from loguru import logger

from matcher.engine import OpportunityMatcher
from shared.catalog import load_catalog
from shared.config import Settings, get_settings
from shared.models import MatchResult, Opportunity, Profile


class RecommendationService:
    """Produces recommendations for a submitted profile."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        catalog: Optional[Sequence[Opportunity]] = None,
        matcher: Optional[OpportunityMatcher] = None,
    ):
        self.settings = settings or get_settings()
        self._catalog = list(catalog) if catalog is not None else None
        self.matcher = matcher or OpportunityMatcher(max_results=self.settings.max_results)

    def get_catalog(self) -> list[Opportunity]:
        """Return the injected catalog, or load it from the configured path."""
        if self._catalog is not None:
            return self._catalog
        return load_catalog(self.settings.catalog_path)

    async def fetch_recommendations(
        self,
        profile: Profile,
        delay: Optional[float] = None,
    ) -> list[MatchResult]:
        """
        Fetch recommendations after a simulated network delay.

        Args:
            profile: Submitted questionnaire answers
            delay: Seconds to wait (defaults to ``fetch_delay_seconds``)

        Returns:
            Matched opportunities, or an empty list if anything failed
        """
        if delay is None:
            delay = self.settings.fetch_delay_seconds
        if delay > 0:
            await asyncio.sleep(delay)

        try:
            catalog = self.get_catalog()
            results = self.matcher.match(profile, catalog)
        except Exception as e:
            logger.error(f"Error fetching internships: {e}")
            return []

        logger.info(
            f"Found {len(results)} internships for "
            f"{profile.education_level or 'unknown education'} in "
            f"{profile.preferred_location or 'any location'}"
        )
        return results
