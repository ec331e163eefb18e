"""Shared test configuration and fixtures."""

import pytest

from models.schemas.opportunity import CompensationRange, Opportunity, Store
from models.schemas.talent import (
    AssessmentSummary,
    CareerPreferences,
    CompensationProfile,
    ExperienceBlock,
    Talent,
)

# Option ids that score 1.0 on every question of the v1 bank
MAX_ANSWERS = {
    "se-1": "a", "se-2": "5", "se-3": "b",
    "cl-1": "c", "cl-2": "b", "cl-3": "b",
    "op-1": "c", "op-2": "b", "op-3": "5",
    "ls-1": "b", "ls-2": "b", "ls-3": "5",
}


def make_summary(service=80, clienteling=80, operations=80, leadership=80, completed=True):
    return AssessmentSummary(
        service_excellence=service,
        clienteling=clienteling,
        operations=operations,
        leadership_signals=leadership,
        version="v1",
        completed_at="2026-01-15T10:00:00Z" if completed else None,
    )


@pytest.fixture
def max_answers() -> dict[str, str]:
    return dict(MAX_ANSWERS)


@pytest.fixture
def strong_talent() -> Talent:
    """A Paris-based L3 whose profile fits fashion_opportunity on every dimension."""
    return Talent(
        id="talent-1",
        current_role_level="L3",
        current_store_tier="T2",
        divisions_expertise=["fashion", "leather_goods"],
        years_in_luxury=6,
        current_location="Paris",
        assessment_summary=make_summary(90, 90, 90, 90),
        career_preferences=CareerPreferences(
            timeline="active",
            target_role_levels=["L3", "L4"],
            target_store_tiers=["T1", "T2"],
            target_divisions=["fashion"],
            target_locations=["Paris", "London"],
            mobility="international",
        ),
        compensation_profile=CompensationProfile(expectations=52000, currency="EUR"),
        experience_blocks=[
            ExperienceBlock(id="b1", block_type="foh", title="Client Advisor"),
            ExperienceBlock(id="b2", block_type="clienteling", title="VIC Lead"),
        ],
    )


@pytest.fixture
def fashion_opportunity() -> Opportunity:
    return Opportunity(
        id="opp-1",
        title="Fashion Team Lead",
        role_level="L3",
        division="fashion",
        compensation_range=CompensationRange(
            min_base=45000, max_base=60000, variable_pct=10, currency="EUR"
        ),
        store=Store(id="store-1", name="Avenue Montaigne", tier="T2", city="Paris", region="EMEA"),
    )
