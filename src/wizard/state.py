"""
Three-screen wizard state: landing -> profile -> recommendations.
"""

from enum import Enum
from typing import Optional

from loguru import logger

from shared.i18n import TRANSLATIONS
from shared.models import MatchResult, Profile

from .service import RecommendationService


class Screen(str, Enum):
    """Wizard screens."""

    LANDING = "landing"
    PROFILE = "profile"
    RECOMMENDATIONS = "recommendations"


class InvalidTransitionError(RuntimeError):
    """Raised when a transition is requested from the wrong screen."""


class Wizard:
    """
    Holds the current screen, submitted profile and recommendations.

    Transitions mirror the buttons of the UI. Submitting and refreshing are
    async because they wait on the recommendation service.
    """

    def __init__(
        self,
        service: Optional[RecommendationService] = None,
        language: Optional[str] = None,
    ):
        self.service = service or RecommendationService()
        self.screen = Screen.LANDING
        self.profile: Optional[Profile] = None
        self.recommendations: list[MatchResult] = []
        self.loading = False
        self.language = "en"
        self.set_language(language or self.service.settings.default_language)

    def _require(self, *screens: Screen) -> None:
        if self.screen not in screens:
            allowed = ", ".join(s.value for s in screens)
            raise InvalidTransitionError(
                f"Cannot do that from the {self.screen.value} screen (expected {allowed})"
            )

    def _go(self, screen: Screen) -> None:
        logger.debug(f"Screen: {self.screen.value} -> {screen.value}")
        self.screen = screen

    def set_language(self, language: str) -> None:
        if language not in TRANSLATIONS:
            raise ValueError(f"Unsupported language: {language}")
        self.language = language

    def get_started(self) -> None:
        self._require(Screen.LANDING)
        self._go(Screen.PROFILE)

    def back_to_landing(self) -> None:
        """Return to the landing screen, discarding the profile and results."""
        self._require(Screen.PROFILE)
        self.profile = None
        self.recommendations = []
        self._go(Screen.LANDING)

    async def submit_profile(self, profile: Profile) -> bool:
        """
        Submit the questionnaire.

        Returns:
            False (staying on the profile screen) if the profile is incomplete
        """
        self._require(Screen.PROFILE)
        if not profile.is_complete:
            logger.warning("Profile is incomplete, not submitting")
            return False

        self.loading = True
        self.profile = profile
        try:
            results = await self.service.fetch_recommendations(profile)
        finally:
            self.loading = False

        self.recommendations = results
        self._go(Screen.RECOMMENDATIONS)
        logger.info(
            f"Recommendations ready: found {len(results)} official PM Internships "
            f"matching your profile"
        )
        return True

    def back_to_profile(self) -> None:
        """Go back to edit the profile, keeping it filled in."""
        self._require(Screen.RECOMMENDATIONS)
        self._go(Screen.PROFILE)

    async def refresh(self) -> list[MatchResult]:
        """Fetch recommendations again for the current profile."""
        self._require(Screen.RECOMMENDATIONS)
        if self.profile is None:
            return self.recommendations

        self.loading = True
        try:
            self.recommendations = await self.service.fetch_recommendations(
                self.profile,
                delay=self.service.settings.refresh_delay_seconds,
            )
        finally:
            self.loading = False

        logger.info("Recommendations updated")
        return self.recommendations
