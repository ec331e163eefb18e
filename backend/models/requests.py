from pydantic import BaseModel, Field

from models.schemas.learning import LearningModule, ProgressRecord
from models.schemas.opportunity import Opportunity
from models.schemas.talent import Talent


class AssessmentSubmission(BaseModel):
    answers: dict[str, str] = Field(..., description="question_id -> option_id")


class MatchRequest(BaseModel):
    talent: Talent
    opportunity: Opportunity


class TalentBatchRequest(BaseModel):
    talent: Talent
    opportunities: list[Opportunity] = Field(default=[], max_length=1000)


class OpportunityBatchRequest(BaseModel):
    opportunity: Opportunity
    talents: list[Talent] = Field(default=[], max_length=1000)


class LearningRequest(BaseModel):
    talent: Talent
    modules: list[LearningModule] | None = Field(
        default=None, max_length=1000, description="Catalog to rank; omitted means the seed catalog"
    )
    progress: list[ProgressRecord] = []
