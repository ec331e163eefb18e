"""Opportunity side of matching: a job posting and its optional store."""

from pydantic import BaseModel, Field

from services.classification import (
    Division,
    OpportunityStatus,
    Region,
    RoleLevel,
    StoreTier,
)


class Store(BaseModel):
    id: str = ""
    name: str = ""
    tier: StoreTier | None = None
    city: str | None = None
    region: Region | None = None


class CompensationRange(BaseModel):
    """Internal pay band. Never shown to candidates."""
    min_base: float | None = None
    max_base: float | None = None
    variable_pct: float | None = None
    currency: str | None = None


class Opportunity(BaseModel):
    """A job posting. Brand-level postings carry no store."""
    id: str = ""
    title: str = ""
    role_level: RoleLevel
    division: Division | None = None
    required_experience_years: float | None = Field(default=None, ge=0)
    compensation_range: CompensationRange | None = None
    store: Store | None = None
    status: OpportunityStatus = "active"
