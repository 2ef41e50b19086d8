# Shared module for common configuration, models, catalog and UI strings
from .catalog import CatalogError, default_catalog, load_catalog, parse_catalog
from .config import Settings, get_settings
from .i18n import Translator, sector_icon
from .models import (
    ANY_LOCATION,
    REMOTE_LOCATION,
    MatchResult,
    Opportunity,
    Profile,
)

__all__ = [
    "Settings",
    "get_settings",
    "CatalogError",
    "default_catalog",
    "load_catalog",
    "parse_catalog",
    "Translator",
    "sector_icon",
    "ANY_LOCATION",
    "REMOTE_LOCATION",
    "MatchResult",
    "Opportunity",
    "Profile",
]
