"""
Internship Finder - Main entry point.

Walks the wizard from the terminal: landing -> profile -> recommendations.

Usage:
    # Show questionnaire choices
    python -m wizard.main options

    # Get recommendations
    python -m wizard.main recommend -e Graduate -s Writing -i Government -l Delhi

    # Answer the questionnaire interactively
    python -m wizard.main interactive
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import click
from loguru import logger

from shared.catalog import CatalogError, load_catalog
from shared.config import get_settings
from shared.i18n import LANGUAGES, Translator, sector_icon
from shared.models import (
    EDUCATION_OPTIONS,
    INTEREST_OPTIONS,
    LOCATION_OPTIONS,
    SKILL_OPTIONS,
    MatchResult,
    Profile,
)
from wizard.service import RecommendationService
from wizard.state import Wizard

MAX_SKILL_BADGES = 3


def setup_logging():
    """Configure loguru logging."""
    settings = get_settings()
    logger.remove()

    if settings.log_format == "json":
        logger.add(
            sys.stderr,
            format="{message}",
            level=settings.log_level,
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                "<level>{message}</level>"
            ),
            level=settings.log_level,
        )


def render_card(result: MatchResult, tr: Translator) -> str:
    """Render one recommendation as a text card."""
    opp = result.opportunity
    skills = list(opp.required_skills[:MAX_SKILL_BADGES])
    if len(opp.required_skills) > MAX_SKILL_BADGES:
        skills.append(f"+{len(opp.required_skills) - MAX_SKILL_BADGES} more")

    lines = [
        f"{sector_icon(opp.sector)} [{opp.sector}] {opp.title}",
        f"   {opp.organization}",
        f"   {opp.location} | {opp.duration_label} | "
        f"{tr.t('recommendations.stipend', amount=f'{opp.stipend_amount:,}')}",
    ]
    if opp.description:
        lines.append(f"   {opp.description}")
    if skills:
        lines.append(f"   {' · '.join(skills)}")
    lines.append(f"   {tr.t('recommendations.reason', reason=result.reason_text)}")
    lines.append(f"   {tr.t('recommendations.apply')}: {opp.apply_url}")
    return "\n".join(lines)


def render_recommendations(profile: Profile, results: list[MatchResult], tr: Translator) -> str:
    """Render the recommendations screen, including the empty state."""
    out = [
        tr.t("recommendations.title"),
        tr.t("recommendations.subtitle", count=len(results)),
        f"{tr.t('profile.education')}: {profile.education_level} | "
        f"{tr.t('profile.location')}: {profile.preferred_location} | "
        f"{tr.t('profile.skills')}: {len(profile.skills)} | "
        f"{tr.t('profile.interests')}: {len(profile.interests)}",
        "",
    ]
    if not results:
        out.append(tr.t("recommendations.empty.title"))
        out.append(tr.t("recommendations.empty.body"))
    else:
        out.append("\n\n".join(render_card(r, tr) for r in results))
    return "\n".join(out)


def build_service(catalog_path: Optional[Path], no_delay: bool) -> RecommendationService:
    settings = get_settings()
    if no_delay:
        settings = settings.model_copy(
            update={"fetch_delay_seconds": 0.0, "refresh_delay_seconds": 0.0}
        )

    catalog = None
    if catalog_path is not None:
        try:
            catalog = load_catalog(catalog_path)
        except CatalogError as e:
            raise click.ClickException(str(e)) from e
    return RecommendationService(settings=settings, catalog=catalog)


async def run_wizard(profile: Profile, service: RecommendationService, language: str) -> Wizard:
    """Drive the wizard from landing to recommendations for one profile."""
    wizard = Wizard(service=service, language=language)
    wizard.get_started()
    if not await wizard.submit_profile(profile):
        raise click.UsageError(
            "Profile is incomplete: education, location and at least one skill "
            "and interest are required"
        )
    return wizard


def _emit(wizard: Wizard, as_json: bool) -> None:
    if as_json:
        payload = [r.model_dump(mode="json") for r in wizard.recommendations]
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        click.echo(render_recommendations(wizard.profile, wizard.recommendations, Translator(wizard.language)))


language_option = click.option(
    "--lang",
    "language",
    type=click.Choice(list(LANGUAGES)),
    default=None,
    help="Display language",
)
catalog_option = click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML catalog to use instead of the configured one",
)
no_delay_option = click.option(
    "--no-delay",
    is_flag=True,
    help="Skip the simulated fetch delay",
)


@click.group()
def main():
    """Internship Finder - PM Internship Scheme recommendations."""
    setup_logging()


@main.command()
def options():
    """List the questionnaire choices."""
    for label, values in (
        ("Education", EDUCATION_OPTIONS),
        ("Skills", SKILL_OPTIONS),
        ("Interests", INTEREST_OPTIONS),
        ("Locations", LOCATION_OPTIONS),
    ):
        click.echo(f"{label}:")
        for value in values:
            click.echo(f"  - {value}")


@main.command()
@click.option("--education", "-e", required=True, help="Education level")
@click.option("--skill", "-s", "skills", multiple=True, help="Skill (repeatable)")
@click.option("--interest", "-i", "interests", multiple=True, help="Interest (repeatable)")
@click.option("--location", "-l", required=True, help="Preferred location")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@language_option
@catalog_option
@no_delay_option
def recommend(
    education: str,
    skills: tuple[str, ...],
    interests: tuple[str, ...],
    location: str,
    as_json: bool,
    language: Optional[str],
    catalog_path: Optional[Path],
    no_delay: bool,
):
    """Recommend internships for a profile given on the command line."""
    profile = Profile(
        education_level=education,
        skills=skills,
        interests=interests,
        preferred_location=location,
    )
    service = build_service(catalog_path, no_delay)
    wizard = asyncio.run(run_wizard(profile, service, language or service.settings.default_language))
    _emit(wizard, as_json)


def _prompt_tags(label: str, choices: list[str]) -> list[str]:
    click.echo(f"{label}: {', '.join(choices)}")
    raw = click.prompt(f"{label} (comma-separated)")
    return [t.strip() for t in raw.split(",") if t.strip()]


@main.command()
@language_option
@catalog_option
@no_delay_option
def interactive(language: Optional[str], catalog_path: Optional[Path], no_delay: bool):
    """Answer the questionnaire step by step."""
    service = build_service(catalog_path, no_delay)
    tr = Translator(language or service.settings.default_language)

    click.echo(tr.t("landing.title"))
    click.echo(tr.t("landing.subtitle"))
    click.echo()
    click.echo(tr.t("profile.title"))

    education = click.prompt(
        tr.t("profile.education"), type=click.Choice(EDUCATION_OPTIONS, case_sensitive=False)
    )
    skills = _prompt_tags(tr.t("profile.skills"), SKILL_OPTIONS)
    interests = _prompt_tags(tr.t("profile.interests"), INTEREST_OPTIONS)
    location = click.prompt(
        tr.t("profile.location"), type=click.Choice(LOCATION_OPTIONS, case_sensitive=False)
    )

    profile = Profile(
        education_level=education,
        skills=skills,
        interests=interests,
        preferred_location=location,
    )
    click.echo(tr.t("common.loading"))
    wizard = asyncio.run(run_wizard(profile, service, tr.language))
    _emit(wizard, as_json=False)


if __name__ == "__main__":
    main()
