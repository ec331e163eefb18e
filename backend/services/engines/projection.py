"""Career projection engine.

Projects a talent's next step on the L1-L8 role ladder: readiness for the
next level, a promotion timeline, capability gaps against that level's
competency requirements and a short list of development experiences.
"""

from types import MappingProxyType

from models.schemas.projection import (
    CurrentRole,
    NextRole,
    ProjectionResult,
    ProjectionTalent,
    TimelineEstimate,
)
from models.schemas.talent import Talent
from services.classification import DIMENSIONS, round_half_up

ENGINE_VERSION = "v1.0"

# L8 is terminal and has no entry
ROLE_PROGRESSION = MappingProxyType({
    "L1": ("L2", ("Senior Advisor", "Expert Advisor")),
    "L2": ("L3", ("Team Lead", "Floor Manager")),
    "L3": ("L4", ("Department Manager", "Category Lead")),
    "L4": ("L5", ("Assistant Boutique Director", "Deputy Manager")),
    "L5": ("L6", ("Boutique Director", "Store Manager")),
    "L6": ("L7", ("Area Manager", "District Director")),
    "L7": ("L8", ("Regional Director", "Country Manager")),
})

ROLE_TITLES = MappingProxyType({
    "L1": "Advisor",
    "L2": "Senior Advisor",
    "L3": "Team Lead",
    "L4": "Department Manager",
    "L5": "Assistant Director",
    "L6": "Boutique Director",
    "L7": "Area Manager",
    "L8": "Regional Director",
})

# Typical years in luxury before the transition
TYPICAL_YEARS = MappingProxyType({
    ("L1", "L2"): 2,
    ("L2", "L3"): 3,
    ("L3", "L4"): 3,
    ("L4", "L5"): 4,
    ("L5", "L6"): 5,
    ("L6", "L7"): 6,
    ("L7", "L8"): 8,
})

# (min_months, max_months) per transition
TIMELINE_RANGES = MappingProxyType({
    ("L1", "L2"): (12, 24),
    ("L2", "L3"): (18, 36),
    ("L3", "L4"): (24, 48),
    ("L4", "L5"): (36, 60),
    ("L5", "L6"): (48, 72),
    ("L6", "L7"): (60, 96),
    ("L7", "L8"): (72, 120),
})


def _requirements(service: int, clienteling: int, operations: int, leadership: int):
    return MappingProxyType(dict(zip(DIMENSIONS, (service, clienteling, operations, leadership))))


# Minimum competency scores expected at each target level
LEVEL_REQUIREMENTS = MappingProxyType({
    "L2": _requirements(60, 65, 55, 50),
    "L3": _requirements(65, 70, 60, 65),
    "L4": _requirements(70, 75, 70, 70),
    "L5": _requirements(75, 75, 75, 75),
    "L6": _requirements(80, 80, 80, 80),
    "L7": _requirements(80, 80, 85, 85),
    "L8": _requirements(85, 85, 85, 90),
})

_GAP_TEMPLATES = {
    "service_excellence": "Service Excellence: {score}/100 → Develop to {target}+ for {level}",
    "clienteling": "Clienteling: {score}/100 → Develop VIC management to {target}+",
    "operations": "Operations: {score}/100 → Strengthen operational skills to {target}+",
    "leadership_signals": "Leadership: {score}/100 → Develop leadership skills to {target}+",
}

_EXPERIENCES = {
    "L2": [
        "Build a VIC client portfolio (20+ clients)",
        "Master product knowledge across 2-3 divisions",
        "Achieve consistent sales targets for 6+ months",
    ],
    "L3": [
        "Take on informal leadership responsibilities",
        "Mentor 1-2 junior advisors",
        "Participate in team performance discussions",
    ],
    "L4": [
        "Manage a category or small department",
        "Gain P&L exposure and budget management",
        "Lead cross-functional projects",
    ],
    "L5": [
        "Assistant manager role in flagship or full-format store",
        "Develop strategic planning skills",
        "Build relationships with corporate stakeholders",
        "Lead full store opening or closing routines",
    ],
    "L6": [
        "Full P&L accountability for a store",
        "Team hiring and development leadership",
        "Strategic client event planning",
        "Corporate initiative implementation",
    ],
    "L7": [
        "Multi-site management experience",
        "Regional strategic initiatives",
        "Executive-level stakeholder management",
        "Market development and expansion projects",
    ],
    "L8": [
        "National/regional business strategy ownership",
        "Board-level presentations and reporting",
        "Organizational transformation leadership",
        "Industry-wide networking and influence",
    ],
}

# target level -> (gap dimension, suggestion, insert position or None to append)
_GAP_EXPERIENCES = {
    "L2": ("clienteling", "Focus on repeat client relationships and follow-ups", 2),
    "L3": ("leadership_signals", "Lead floor presence during key retail moments", None),
    "L4": ("operations", "Take ownership of inventory management for a category", None),
}

_TERMINAL_EXPERIENCES = [
    "Explore lateral moves or strategic projects",
    "Mentor emerging leaders across the organization",
    "Lead transformational initiatives",
]

_READINESS_LABELS = {
    "ready_now": "Ready Now",
    "ready_soon": "Ready Soon",
    "developing": "Developing",
}

_READINESS_DESCRIPTIONS = {
    "ready_now": (
        "You have the experience and skills to move to the next level. "
        "Focus on visibility and opportunity."
    ),
    "ready_soon": (
        "You're close to being ready. Continue building experience and "
        "addressing capability gaps."
    ),
    "developing": (
        "You're on the right path. Focus on skill development and gaining "
        "relevant experience."
    ),
}

MAX_EXPERIENCES = 5


def _scores(talent: ProjectionTalent | Talent) -> dict[str, int]:
    summary = talent.assessment_summary
    if summary is None:
        return {dim: 0 for dim in DIMENSIONS}
    return dict(zip(DIMENSIONS, summary.score_values()))


def generate_career_projection(talent: ProjectionTalent | Talent) -> ProjectionResult:
    """Project the next career step for a talent.

    Reads only current_role_level (default L1), years_in_luxury (default 0)
    and assessment_summary (missing scores count as 0).
    """
    current_level = talent.current_role_level or "L1"
    progression = ROLE_PROGRESSION.get(current_level)

    if progression is None:
        return ProjectionResult(
            current_role=CurrentRole(
                level=current_level,
                title=ROLE_TITLES.get(current_level, "Executive"),
            ),
            next_role=NextRole(
                level=current_level,
                typical_titles=["Continue strategic leadership development"],
                readiness="ready_now",
            ),
            timeline_estimate=TimelineEstimate(min_months=0, max_months=0),
            capability_gaps=[],
            recommended_experiences=list(_TERMINAL_EXPERIENCES),
            engine_version=ENGINE_VERSION,
        )

    next_level, titles = progression
    scores = _scores(talent)
    readiness = assess_readiness(talent.years_in_luxury or 0, scores, current_level, next_level)
    gaps = identify_gaps(scores, next_level)

    return ProjectionResult(
        current_role=CurrentRole(level=current_level, title=ROLE_TITLES[current_level]),
        next_role=NextRole(level=next_level, typical_titles=list(titles), readiness=readiness),
        timeline_estimate=estimate_timeline(current_level, next_level, readiness),
        capability_gaps=[line for _, line in gaps],
        recommended_experiences=recommend_experiences(next_level, [dim for dim, _ in gaps]),
        engine_version=ENGINE_VERSION,
    )


def assess_readiness(
    years_in_luxury: float,
    scores: dict[str, int],
    current_level: str,
    next_level: str,
) -> str:
    """Classify as ready_now, ready_soon or developing."""
    typical = TYPICAL_YEARS[(current_level, next_level)]
    avg = sum(scores.values()) / len(DIMENSIONS)

    if years_in_luxury >= typical and avg >= 70:
        return "ready_now"
    if years_in_luxury >= typical * 0.75 and avg >= 60:
        return "ready_soon"
    # Less tenure, compensated by excellent scores
    if years_in_luxury >= typical * 0.5 and avg >= 75:
        return "ready_soon"
    return "developing"


def estimate_timeline(current_level: str, next_level: str, readiness: str) -> TimelineEstimate:
    low, high = TIMELINE_RANGES[(current_level, next_level)]

    if readiness == "ready_now":
        return TimelineEstimate(min_months=round_half_up(low / 2), max_months=low)
    if readiness == "ready_soon":
        return TimelineEstimate(min_months=low, max_months=round_half_up((low + high) / 2))
    return TimelineEstimate(min_months=high, max_months=round_half_up(high * 1.5))


def identify_gaps(scores: dict[str, int], next_level: str) -> list[tuple[str, str]]:
    """(dimension, description) for every score below the next level's bar."""
    requirements = LEVEL_REQUIREMENTS.get(next_level, {})
    gaps: list[tuple[str, str]] = []
    for dim in DIMENSIONS:
        target = requirements.get(dim)
        if target and scores[dim] < target:
            line = _GAP_TEMPLATES[dim].format(score=scores[dim], target=target, level=next_level)
            gaps.append((dim, line))
    return gaps


def recommend_experiences(next_level: str, gap_dimensions: list[str]) -> list[str]:
    experiences = list(_EXPERIENCES.get(next_level, []))
    extra = _GAP_EXPERIENCES.get(next_level)
    if extra is not None:
        dimension, suggestion, position = extra
        if dimension in gap_dimensions:
            if position is None:
                experiences.append(suggestion)
            else:
                experiences.insert(position, suggestion)
    return experiences[:MAX_EXPERIENCES]


def get_role_title(level: str) -> str:
    return ROLE_TITLES.get(level, "Retail Professional")


def get_readiness_label(readiness: str) -> str:
    return _READINESS_LABELS[readiness]


def get_readiness_description(readiness: str) -> str:
    return _READINESS_DESCRIPTIONS[readiness]
