"""Matching engine v1.0: 7-dimension talent/opportunity compatibility.

    dimension          weight
    role_fit            0.20   ladder distance between levels
    division_fit        0.20   exact / related / transferable division
    store_context       0.15   store tier distance
    capability_fit      0.15   mean assessment score
    geography           0.10   city, target locations, region, mobility
    experience_block    0.10   relevant work-history block types
    preference          0.10   stated timeline and targets

Each dimension is an independent 0-100 rule. Missing data scores a fixed
neutral value instead of raising. Compensation alignment is tagged
separately and never enters the total.
"""

from types import MappingProxyType

from models.responses import MatchResult, ScoreBreakdown
from models.schemas.opportunity import Opportunity
from models.schemas.talent import Talent
from services.classification import level_ordinal, round_half_up, tier_ordinal

ENGINE_VERSION = "v1.0"

# Must sum to 1.0
WEIGHTS = MappingProxyType({
    "role_fit": 0.20,
    "division_fit": 0.20,
    "store_context": 0.15,
    "capability_fit": 0.15,
    "geography": 0.10,
    "experience_block": 0.10,
    "preference": 0.10,
})

MINIMUM_MATCH_SCORE = 40

# Divisions whose client and product skills transfer to the key division
RELATED_DIVISIONS = MappingProxyType({
    "fashion": ("leather_goods", "shoes", "accessories", "eyewear"),
    "leather_goods": ("fashion", "shoes", "accessories"),
    "shoes": ("fashion", "leather_goods", "accessories"),
    "beauty": ("fragrance",),
    "fragrance": ("beauty",),
    "watches": ("high_jewelry", "eyewear"),
    "high_jewelry": ("watches", "eyewear"),
    "eyewear": ("watches", "accessories"),
    "accessories": ("fashion", "leather_goods", "eyewear"),
})

_MOBILITY_SCORES = {
    "international": 60,
    "national": 40,
    "regional": 30,
}

_TIMELINE_POINTS = {
    "active": 40,
    "passive": 28,
    "not_looking": 8,
}

SENIOR_LEVEL = 4


def calculate_match(talent: Talent, opportunity: Opportunity) -> MatchResult:
    """Score one talent against one opportunity."""
    scores = {
        "role_fit": score_role_fit(talent, opportunity),
        "division_fit": score_division_fit(talent, opportunity),
        "store_context": score_store_context(talent, opportunity),
        "capability_fit": score_capability_fit(talent),
        "geography": score_geography(talent, opportunity),
        "experience_block": score_experience_block(talent, opportunity),
        "preference": score_preference(talent, opportunity),
    }

    total = 0.0
    for name, score in scores.items():
        total += score * WEIGHTS[name]

    return MatchResult(
        score_total=round_half_up(total),
        score_breakdown=ScoreBreakdown(**scores),
        compensation_alignment=score_compensation_alignment(talent, opportunity),
        engine_version=ENGINE_VERSION,
    )


def meets_threshold(score: int, threshold: int = MINIMUM_MATCH_SCORE) -> bool:
    """True when a match is worth persisting."""
    return score >= threshold


def score_role_fit(talent: Talent, opportunity: Opportunity) -> int:
    if not talent.current_role_level:
        return 50

    diff = level_ordinal(opportunity.role_level) - level_ordinal(talent.current_role_level)
    if diff == 0:
        return 100
    if diff == 1:  # step up
        return 85
    if diff == -1:  # overqualified
        return 70
    if abs(diff) == 2:
        return 40
    return 0


def score_division_fit(talent: Talent, opportunity: Opportunity) -> int:
    if not opportunity.division:
        return 80

    divisions = talent.divisions_expertise
    if opportunity.division in divisions:
        return 100

    related = RELATED_DIVISIONS.get(opportunity.division, ())
    if any(d in related for d in divisions):
        return 60

    # Luxury retail skills still transfer
    return 20


def score_store_context(talent: Talent, opportunity: Opportunity) -> int:
    store = opportunity.store
    if not talent.current_store_tier or store is None or not store.tier:
        return 50

    diff = abs(tier_ordinal(store.tier) - tier_ordinal(talent.current_store_tier))
    if diff == 0:
        return 100
    if diff == 1:
        return 60
    return 30


def score_capability_fit(talent: Talent) -> int:
    summary = talent.assessment_summary
    if summary is None or not summary.completed_at:
        return 40

    avg = sum(summary.score_values()) / 4
    if avg >= 75:
        return 100
    if avg >= 60:
        return 70
    return 50


def score_geography(talent: Talent, opportunity: Opportunity) -> int:
    store = opportunity.store
    if store is None or not store.city:
        return 50

    current = (talent.current_location or "").lower()
    city = store.city.lower()
    prefs = talent.career_preferences
    targets = [loc.lower() for loc in prefs.target_locations] if prefs else []
    mobility = prefs.mobility if prefs else "local"

    if current and current == city:
        return 100
    if city in targets:
        return 90

    # Region substring check, e.g. "London, EMEA" contains "emea"
    region = (store.region or "").lower()
    if current and region and region in current:
        return 50

    return _MOBILITY_SCORES.get(mobility, 10)


def score_experience_block(talent: Talent, opportunity: Opportunity) -> int:
    block_types = {block.block_type for block in talent.experience_blocks}
    if not block_types:
        return 20

    # Senior openings look for leadership or business ownership first
    if level_ordinal(opportunity.role_level) >= SENIOR_LEVEL:
        if block_types & {"leadership", "business"}:
            return 100
        if "operations" in block_types:
            return 70

    if block_types & {"foh", "clienteling"}:
        return 100
    if "operations" in block_types:
        return 70
    if block_types & {"boh", "operations"}:
        return 40
    return 20


def score_preference(talent: Talent, opportunity: Opportunity) -> int:
    prefs = talent.career_preferences
    if prefs is None:
        return 50

    score = _TIMELINE_POINTS.get(prefs.timeline, 0)

    if opportunity.role_level in prefs.target_role_levels:
        score += 30

    store = opportunity.store
    if store is not None and store.tier and store.tier in prefs.target_store_tiers:
        score += 20

    if opportunity.division and opportunity.division in prefs.target_divisions:
        score += 10

    return min(score, 100)


def score_compensation_alignment(talent: Talent, opportunity: Opportunity) -> str:
    """Tag the talent's expectation against the internal pay band.

    Both sides are assumed to share one currency; no conversion happens.
    """
    expectation = talent.compensation_profile.expectations if talent.compensation_profile else None
    band = opportunity.compensation_range

    if not expectation or band is None or not band.min_base or not band.max_base:
        return "unknown"

    if band.min_base <= expectation <= band.max_base:
        return "within_range"
    if expectation > band.max_base:
        return "above_range"
    return "below_range"
