"""Career projection input and output."""

from pydantic import BaseModel, Field

from models.schemas.talent import AssessmentSummary
from services.classification import ReadinessLevel, RoleLevel


class ProjectionTalent(BaseModel):
    """The three talent fields the projection engine reads."""
    current_role_level: RoleLevel | None = None
    years_in_luxury: float | None = Field(default=None, ge=0)
    assessment_summary: AssessmentSummary | None = None


class CurrentRole(BaseModel):
    level: str
    title: str


class NextRole(BaseModel):
    level: str
    typical_titles: list[str] = []
    readiness: ReadinessLevel


class TimelineEstimate(BaseModel):
    min_months: int = 0
    max_months: int = 0


class ProjectionResult(BaseModel):
    current_role: CurrentRole
    next_role: NextRole
    timeline_estimate: TimelineEstimate = TimelineEstimate()
    capability_gaps: list[str] = []
    recommended_experiences: list[str] = []
    engine_version: str = ""
