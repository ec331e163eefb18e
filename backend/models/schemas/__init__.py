"""Pydantic contracts shared by the scoring engines."""

from models.schemas.assessment import (
    AssessmentInsights,
    AssessmentOption,
    AssessmentQuestion,
    AssessmentResult,
    AssessmentScores,
)
from models.schemas.learning import LearningModule, LearningRecommendation, ProgressRecord
from models.schemas.match import BatchMatchResponse, Match
from models.schemas.opportunity import CompensationRange, Opportunity, Store
from models.schemas.projection import ProjectionResult, ProjectionTalent
from models.schemas.talent import (
    AssessmentSummary,
    CareerPreferences,
    CompensationProfile,
    ExperienceBlock,
    Talent,
)

__all__ = [
    "AssessmentInsights",
    "AssessmentOption",
    "AssessmentQuestion",
    "AssessmentResult",
    "AssessmentScores",
    "AssessmentSummary",
    "BatchMatchResponse",
    "CareerPreferences",
    "CompensationProfile",
    "CompensationRange",
    "ExperienceBlock",
    "LearningModule",
    "LearningRecommendation",
    "Match",
    "Opportunity",
    "ProgressRecord",
    "ProjectionResult",
    "ProjectionTalent",
    "Store",
    "Talent",
]
