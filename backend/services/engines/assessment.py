"""Assessment scoring engine.

Turns question -> option selections into four 0-100 competency scores and
derives strengths, development areas and recommended career paths.

Scoring, per dimension, over answered questions only:
    score = round(100 * sum(option.score * weight) / sum(weight))

A dimension with no answered question scores 0 and is reported in
``unanswered_dimensions`` so callers can decide whether to accept it.
"""

from collections.abc import Mapping

import numpy as np

from models.schemas.assessment import (
    AssessmentInsights,
    AssessmentResult,
    AssessmentScores,
    ScoreInterpretation,
)
from services.classification import DIMENSIONS, round_half_up
from services.question_bank import ASSESSMENT_QUESTIONS_V1, ASSESSMENT_VERSION

_INSIGHT_LABELS = {
    "service_excellence": "Service Excellence",
    "clienteling": "Clienteling",
    "operations": "Operations",
    "leadership_signals": "Leadership",
}

_DISPLAY_LABELS = {
    "service_excellence": "Service Excellence",
    "clienteling": "Clienteling",
    "operations": "Operations",
    "leadership_signals": "Leadership Signals",
}

_DESCRIPTIONS = {
    "service_excellence": (
        "Your ability to deliver exceptional client experiences and maintain luxury standards"
    ),
    "clienteling": "Your skills in building and maintaining long-term client relationships",
    "operations": (
        "Your competency in managing processes, inventory, and operational excellence"
    ),
    "leadership_signals": "Your capacity to influence, mentor, and lead teams effectively",
}

DEFAULT_PATHS = ["Sales Advisor", "Client Advisor"]
MAX_PATHS = 5
BALANCED_VARIANCE = 100


def _accumulate(answers: Mapping[str, str]) -> dict[str, list[float]]:
    """Per-dimension [weighted total, answered weight]."""
    totals = {dim: [0.0, 0.0] for dim in DIMENSIONS}
    for question in ASSESSMENT_QUESTIONS_V1:
        option_id = answers.get(question.id)
        if not option_id:
            continue
        option = next((o for o in question.options if o.id == option_id), None)
        if option is None:
            continue
        totals[question.dimension][0] += option.score * question.weight
        totals[question.dimension][1] += question.weight
    return totals


def unanswered_dimensions(answers: Mapping[str, str]) -> list[str]:
    """Dimensions where no question has a valid answer."""
    totals = _accumulate(answers)
    return [dim for dim in DIMENSIONS if totals[dim][1] == 0]


def score_assessment(answers: Mapping[str, str]) -> AssessmentScores:
    """Score answers into the four competency dimensions."""
    totals = _accumulate(answers)
    scores: dict[str, int] = {}
    for dim, (total, weight) in totals.items():
        scores[dim] = round_half_up(total / weight * 100) if weight else 0
    return AssessmentScores(**scores)


def generate_insights(scores: AssessmentScores) -> AssessmentInsights:
    """Derive strengths, development areas and recommended paths."""
    values = {dim: getattr(scores, dim) for dim in DIMENSIONS}

    # sorted() is stable, so ties keep dimension order
    ranked = sorted(DIMENSIONS, key=lambda dim: values[dim], reverse=True)
    strengths = [_INSIGHT_LABELS[dim] for dim in ranked[:2]]
    development_areas = [_INSIGHT_LABELS[dim] for dim in ranked[-2:]]

    overall = round_half_up(sum(values.values()) / len(values))

    service = values["service_excellence"]
    clienteling = values["clienteling"]
    operations = values["operations"]
    leadership = values["leadership_signals"]

    paths: list[str] = []
    if clienteling >= 75 and service >= 70:
        paths += ["Client Relationship Specialist", "VIC Manager", "Personal Stylist"]
    if leadership >= 70:
        paths += ["Team Lead", "Floor Manager"]
        if operations >= 65:
            paths.append("Assistant Store Manager")
    if operations >= 75:
        paths += ["Operations Coordinator", "Stock Manager", "Visual Merchandiser"]
    if service >= 80:
        paths += ["Product Specialist", "Brand Ambassador"]

    # Variance around the rounded overall, not the exact mean
    variance = float(np.mean((np.array(list(values.values())) - overall) ** 2))
    if variance < BALANCED_VARIANCE and overall >= 70:
        paths += ["Store Director Track", "Multi-Brand Specialist"]

    unique_paths = list(dict.fromkeys(paths))[:MAX_PATHS]

    return AssessmentInsights(
        strengths=strengths,
        development_areas=development_areas,
        recommended_paths=unique_paths or list(DEFAULT_PATHS),
        overall_score=overall,
    )


def process_assessment(answers: Mapping[str, str]) -> AssessmentResult:
    """Score a complete submission and attach insights and version."""
    scores = score_assessment(answers)
    return AssessmentResult(
        scores=scores,
        insights=generate_insights(scores),
        version=ASSESSMENT_VERSION,
        unanswered_dimensions=unanswered_dimensions(answers),
    )


def get_dimension_label(dimension: str) -> str:
    return _DISPLAY_LABELS[dimension]


def get_dimension_description(dimension: str) -> str:
    return _DESCRIPTIONS[dimension]


def get_score_interpretation(score: int) -> ScoreInterpretation:
    if score >= 85:
        return ScoreInterpretation(level="excellent", message="Exceptional performance in this area")
    if score >= 70:
        return ScoreInterpretation(level="strong", message="Strong competency demonstrated")
    if score >= 55:
        return ScoreInterpretation(
            level="developing", message="Good foundation with room for growth"
        )
    return ScoreInterpretation(level="emerging", message="Area for focused development")
