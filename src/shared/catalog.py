"""
Opportunity catalog loader.
Loads the static internship catalog from YAML.
"""

from pathlib import Path
from typing import Optional

import yaml
from loguru import logger
from pydantic import ValidationError

from .config import DEFAULT_CATALOG_PATH
from .models import Opportunity


class CatalogError(ValueError):
    """Raised when a catalog file has malformed content."""


def parse_catalog(data: Optional[dict]) -> list[Opportunity]:
    """
    Build opportunities from parsed YAML data.

    Args:
        data: Mapping with an ``opportunities`` list

    Returns:
        Opportunities in file order

    Raises:
        CatalogError: If an entry is invalid or an ID repeats
    """
    if not data:
        return []
    if not isinstance(data, dict):
        raise CatalogError("Catalog root must be a mapping")

    entries = data.get("opportunities") or []
    if not isinstance(entries, list):
        raise CatalogError("'opportunities' must be a list")

    opportunities = []
    seen_ids: set[int] = set()
    for index, entry in enumerate(entries):
        try:
            opportunity = Opportunity.model_validate(entry)
        except ValidationError as e:
            raise CatalogError(f"Invalid opportunity at index {index}: {e}") from e

        if opportunity.id in seen_ids:
            raise CatalogError(f"Duplicate opportunity id {opportunity.id} at index {index}")
        seen_ids.add(opportunity.id)
        opportunities.append(opportunity)

    return opportunities


def load_catalog(path: Path) -> list[Opportunity]:
    """Load opportunities from a YAML file. A missing file yields an empty catalog."""
    path = Path(path)
    if not path.exists():
        logger.warning(f"Catalog file not found: {path}")
        return []

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogError(f"Could not parse catalog {path}: {e}") from e

    opportunities = parse_catalog(data)
    logger.info(f"Loaded {len(opportunities)} opportunities from {path.name}")
    return opportunities


def default_catalog() -> list[Opportunity]:
    """Load the bundled PM Internship seed catalog."""
    return load_catalog(DEFAULT_CATALOG_PATH)
