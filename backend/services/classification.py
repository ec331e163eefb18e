"""Classification vocabulary for luxury retail profiles.

Role ladder, store tiers, divisions, experience blocks and the preference
vocabularies shared by every scoring engine. Tables are read-only mappings
so the engines and their callers see a single source of truth.
"""

import math
from types import MappingProxyType
from typing import Literal

RoleLevel = Literal["L1", "L2", "L3", "L4", "L5", "L6", "L7", "L8"]
StoreTier = Literal["T1", "T2", "T3", "T4", "T5"]
Division = Literal[
    "fashion",
    "leather_goods",
    "shoes",
    "beauty",
    "fragrance",
    "watches",
    "high_jewelry",
    "eyewear",
    "accessories",
]
ExperienceBlockType = Literal[
    "foh", "boh", "leadership", "clienteling", "operations", "business"
]
Region = Literal["EMEA", "Americas", "APAC", "Middle_East"]
Mobility = Literal["local", "regional", "national", "international"]
Timeline = Literal["active", "passive", "not_looking"]
OpportunityStatus = Literal["draft", "active", "paused", "filled", "cancelled"]
AssessmentDimension = Literal[
    "service_excellence", "clienteling", "operations", "leadership_signals"
]
ReadinessLevel = Literal["ready_now", "ready_soon", "developing"]
CompensationAlignment = Literal["within_range", "above_range", "below_range", "unknown"]

# Fixed dimension order used for gaps, insights and tie-breaking
DIMENSIONS: tuple[str, ...] = (
    "service_excellence",
    "clienteling",
    "operations",
    "leadership_signals",
)

ROLE_LEVEL_NAMES = MappingProxyType({
    "L1": "Sales Advisor",
    "L2": "Senior Advisor",
    "L3": "Team Lead",
    "L4": "Department Manager",
    "L5": "Assistant Director",
    "L6": "Boutique Director",
    "L7": "Area Manager",
    "L8": "Regional Director",
})


def level_ordinal(level: str) -> int:
    """'L3' -> 3."""
    return int(level.lstrip("L"))


def tier_ordinal(tier: str) -> int:
    """'T2' -> 2."""
    return int(tier.lstrip("T"))


def round_half_up(value: float) -> int:
    """Round halves upward (82.5 -> 83), unlike round()'s banker's rounding."""
    return math.floor(value + 0.5)
