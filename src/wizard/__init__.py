"""
Wizard - landing, profile and recommendations screens.
Profile submission fetches recommendations through a simulated portal call.
"""

from .service import RecommendationService
from .state import InvalidTransitionError, Screen, Wizard

__all__ = ["RecommendationService", "InvalidTransitionError", "Screen", "Wizard"]
