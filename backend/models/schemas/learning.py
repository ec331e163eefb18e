"""Learning catalog contracts for gap-driven recommendations."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

LearningCategory = Literal[
    "service_excellence",
    "clienteling",
    "operations",
    "leadership",
    "product_knowledge",
    "soft_skills",
]
Difficulty = Literal["beginner", "intermediate", "advanced"]
ContentType = Literal["article", "video", "quiz", "exercise"]


class LearningModule(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    category: LearningCategory
    duration_minutes: int = 0
    difficulty: Difficulty
    content_type: ContentType = "article"
    content_url: str = ""
    target_role_levels: list[str] = []
    target_gaps: list[str] = []  # assessment dimensions this module develops


class ProgressRecord(BaseModel):
    module_id: str
    status: str  # not_started, in_progress, completed


class LearningRecommendation(BaseModel):
    module: LearningModule
    reason: str
    priority: int  # higher first
