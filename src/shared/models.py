"""
Pydantic models for Profiles, Opportunities and Match Results.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Location sentinels: neither restricts the catalog by place
ANY_LOCATION = "Any Location"
REMOTE_LOCATION = "Remote/Online"
SENTINEL_LOCATIONS = (ANY_LOCATION, REMOTE_LOCATION)

# Questionnaire choices
EDUCATION_OPTIONS = [
    "10th Pass", "12th Pass", "Diploma", "Undergraduate", "Graduate", "Post Graduate",
]

SKILL_OPTIONS = [
    "Computer Skills", "Communication", "Accounting", "Marketing", "Design",
    "Writing", "Teaching", "Sales", "Management", "Research", "Programming",
    "Data Entry", "Customer Service", "Social Media",
]

INTEREST_OPTIONS = [
    "Technology", "Business", "Education", "Healthcare", "Government",
    "Non-Profit", "Media", "Finance", "Marketing", "Design", "Research",
    "Social Work", "Environment", "Agriculture",
]

LOCATION_OPTIONS = [
    "Delhi", "Mumbai", "Bangalore", "Chennai", "Kolkata", "Hyderabad",
    "Pune", "Ahmedabad", "Jaipur", "Lucknow", "Bhopal", "Patna",
    REMOTE_LOCATION, ANY_LOCATION,
]


def _unique_tags(values) -> tuple[str, ...]:
    """Strip, drop blanks and de-duplicate while keeping first-seen order."""
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    seen: dict[str, None] = {}
    for value in values:
        tag = str(value).strip()
        if tag:
            seen.setdefault(tag, None)
    return tuple(seen)


class Profile(BaseModel):
    """Questionnaire answers used as query criteria."""

    model_config = ConfigDict(frozen=True)

    education_level: str = Field(default="", description="Highest education level")
    skills: tuple[str, ...] = Field(default=(), description="Selected skills")
    interests: tuple[str, ...] = Field(default=(), description="Selected interest areas")
    preferred_location: str = Field(default="", description="City or a location sentinel")

    @field_validator("skills", "interests", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        return _unique_tags(value)

    @field_validator("education_level", "preferred_location", mode="before")
    @classmethod
    def _strip(cls, value):
        return (value or "").strip()

    @property
    def is_complete(self) -> bool:
        """All four questionnaire fields are answered."""
        return bool(
            self.education_level
            and self.skills
            and self.interests
            and self.preferred_location
        )

    @property
    def has_concrete_location(self) -> bool:
        return bool(self.preferred_location) and self.preferred_location not in SENTINEL_LOCATIONS


class Opportunity(BaseModel):
    """A single internship listed in the catalog."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique opportunity ID")
    title: str = Field(..., description="Internship title")
    organization: str = Field(..., description="Hosting organization")
    sector: str = Field(default="", description="Sector label")
    location: str = Field(default="", description="City or Remote/Online")
    stipend_amount: int = Field(default=0, ge=0, description="Monthly stipend in rupees")
    duration_label: str = Field(default="", description="Human-readable duration")
    description: str = Field(default="")
    required_skills: tuple[str, ...] = Field(default=())
    apply_url: str = Field(default="", description="Application link")
    reason_template: Optional[str] = Field(
        default=None, description="Template for the recommendation reason"
    )


class MatchResult(BaseModel):
    """An opportunity annotated with why it was selected."""

    model_config = ConfigDict(frozen=True)

    opportunity: Opportunity
    reason_text: str
    matched_skills: tuple[str, ...] = ()
    matched_interests: tuple[str, ...] = ()
