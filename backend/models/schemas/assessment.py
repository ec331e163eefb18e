"""Assessment question bank contracts and scoring output."""

from pydantic import BaseModel, ConfigDict

from services.classification import AssessmentDimension


class AssessmentOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    score: float  # 0.0-1.0


class AssessmentQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    dimension: AssessmentDimension
    type: str  # multiple_choice, likert, situational
    text: str
    options: tuple[AssessmentOption, ...]
    weight: float
    explanation: str = ""


class AssessmentScores(BaseModel):
    service_excellence: int = 0
    clienteling: int = 0
    operations: int = 0
    leadership_signals: int = 0


class AssessmentInsights(BaseModel):
    strengths: list[str] = []
    development_areas: list[str] = []
    recommended_paths: list[str] = []
    overall_score: int = 0


class AssessmentResult(BaseModel):
    """Output of process_assessment().

    ``version`` is persisted next to the scores so rows scored by an older
    question bank can be found and rescored.
    """
    scores: AssessmentScores = AssessmentScores()
    insights: AssessmentInsights = AssessmentInsights()
    version: str = ""
    unanswered_dimensions: list[str] = []  # dimensions that defaulted to 0


class ScoreInterpretation(BaseModel):
    level: str  # excellent, strong, developing, emerging
    message: str
