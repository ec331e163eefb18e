"""Talent profile: the candidate side of every scoring engine."""

from pydantic import BaseModel, Field

from services.classification import (
    Division,
    ExperienceBlockType,
    Mobility,
    RoleLevel,
    StoreTier,
    Timeline,
)


class AssessmentSummary(BaseModel):
    """Latest completed assessment, denormalised onto the talent row."""
    service_excellence: int | None = Field(default=None, ge=0, le=100)
    clienteling: int | None = Field(default=None, ge=0, le=100)
    operations: int | None = Field(default=None, ge=0, le=100)
    leadership_signals: int | None = Field(default=None, ge=0, le=100)
    version: str | None = None
    completed_at: str | None = None  # ISO timestamp; None means not completed

    def score_values(self) -> list[int]:
        """The four scores in dimension order, missing ones as 0."""
        return [
            self.service_excellence or 0,
            self.clienteling or 0,
            self.operations or 0,
            self.leadership_signals or 0,
        ]


class CareerPreferences(BaseModel):
    timeline: Timeline | None = None
    target_role_levels: list[RoleLevel] = []
    target_store_tiers: list[StoreTier] = []
    target_divisions: list[Division] = []
    target_locations: list[str] = []
    mobility: Mobility = "local"


class CompensationProfile(BaseModel):
    current_base: float | None = None
    current_variable: float | None = None
    currency: str = "EUR"
    expectations: float | None = None  # expected base, same currency as openings


class ExperienceBlock(BaseModel):
    """A typed segment of work history."""
    id: str = ""
    block_type: ExperienceBlockType
    title: str = ""
    company: str = ""
    division: Division | None = None
    store_tier: StoreTier | None = None
    location: str | None = None
    is_current: bool = False


class Talent(BaseModel):
    id: str = ""
    current_role_level: RoleLevel | None = None
    current_store_tier: StoreTier | None = None
    divisions_expertise: list[Division] = []
    years_in_luxury: float | None = Field(default=None, ge=0)
    current_location: str | None = None
    assessment_summary: AssessmentSummary | None = None
    career_preferences: CareerPreferences | None = None
    compensation_profile: CompensationProfile | None = None
    experience_blocks: list[ExperienceBlock] = []
    onboarding_completed: bool = True
