"""Learning recommendation engine.

Recommends catalog modules from a talent's assessment gaps (scores under
60, most severe first) and role level. Completed modules are never
recommended again.
"""

from collections.abc import Iterable, Sequence

from models.schemas.learning import LearningModule, LearningRecommendation, ProgressRecord
from models.schemas.talent import Talent
from services.classification import DIMENSIONS

GAP_THRESHOLD = 60
MAX_RECOMMENDATIONS = 5

_GAP_LABELS = {
    "service_excellence": "Service Excellence",
    "clienteling": "Clienteling",
    "operations": "Operations",
    "leadership_signals": "Leadership",
}


def _find_gaps(talent: Talent) -> list[tuple[str, int]]:
    """(dimension, severity) for scored dimensions under the threshold."""
    summary = talent.assessment_summary
    if summary is None:
        return []

    gaps = []
    for dim in DIMENSIONS:
        score = getattr(summary, dim)
        if score is not None and score < GAP_THRESHOLD:
            gaps.append((dim, GAP_THRESHOLD - score))
    gaps.sort(key=lambda gap: gap[1], reverse=True)
    return gaps


def _for_level(modules: list[LearningModule], level: str | None) -> list[LearningModule]:
    """Prefer modules aimed at the talent's level when any exist."""
    if not level:
        return modules
    filtered = [m for m in modules if level in m.target_role_levels]
    return filtered or modules


def get_recommended_modules(
    talent: Talent,
    all_modules: Sequence[LearningModule],
    progress_records: Iterable[ProgressRecord] = (),
) -> list[LearningRecommendation]:
    level = talent.current_role_level
    completed = {p.module_id for p in progress_records if p.status == "completed"}
    available = [m for m in all_modules if m.id not in completed]

    gaps = _find_gaps(talent)
    recommended: list[LearningRecommendation] = []

    if gaps:
        for dim, severity in gaps:
            matching = [m for m in available if dim in m.target_gaps]
            for module in _for_level(matching, level):
                recommended.append(LearningRecommendation(
                    module=module,
                    reason=f"Strengthen your {format_dimension(dim)} skills",
                    priority=severity,
                ))
    else:
        advanced = [m for m in available if m.difficulty == "advanced"]
        recommended = [
            LearningRecommendation(
                module=module,
                reason="Recommended for your high performance level",
                priority=50,
            )
            for module in _for_level(advanced, level)
        ]

    if not recommended and level:
        recommended = [
            LearningRecommendation(module=m, reason="Relevant for your role level", priority=30)
            for m in available
            if level in m.target_role_levels
        ]

    if not recommended:
        recommended = [
            LearningRecommendation(module=m, reason="Build your foundation", priority=20)
            for m in available
            if m.difficulty == "beginner"
        ]

    # One entry per module; a later gap overrides an earlier one in place
    unique: dict[str, LearningRecommendation] = {}
    for rec in recommended:
        unique[rec.module.id] = rec

    ranked = sorted(unique.values(), key=lambda r: r.priority, reverse=True)
    return ranked[:MAX_RECOMMENDATIONS]


def format_dimension(dimension: str) -> str:
    return _GAP_LABELS.get(dimension, dimension)


def group_modules_by_category(
    modules: Iterable[LearningModule],
) -> dict[str, list[LearningModule]]:
    grouped: dict[str, list[LearningModule]] = {}
    for module in modules:
        grouped.setdefault(module.category, []).append(module)
    return grouped


def format_category(category: str) -> str:
    """'product_knowledge' -> 'Product Knowledge'."""
    return " ".join(word[:1].upper() + word[1:] for word in category.split("_"))
