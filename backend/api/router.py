import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_settings
from config import Settings, settings
from models.requests import (
    AssessmentSubmission,
    LearningRequest,
    MatchRequest,
    OpportunityBatchRequest,
    TalentBatchRequest,
)
from models.responses import HealthResponse, MatchScoreResponse
from models.schemas.assessment import AssessmentQuestion, AssessmentResult
from models.schemas.learning import LearningModule, LearningRecommendation
from models.schemas.match import BatchMatchResponse
from models.schemas.projection import ProjectionResult, ProjectionTalent
from services import learning_catalog, question_bank
from services.engines import assessment, batch, learning, matching, projection

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        assessment_version=question_bank.ASSESSMENT_VERSION,
        match_engine_version=matching.ENGINE_VERSION,
        projection_engine_version=projection.ENGINE_VERSION,
    )


@router.get("/assessments/questions", response_model=list[AssessmentQuestion])
async def assessment_questions():
    return list(question_bank.ASSESSMENT_QUESTIONS_V1)


@router.post("/assessments/score", response_model=AssessmentResult)
@limiter.limit(settings.rate_limit)
async def score_assessment(
    request: Request,
    body: AssessmentSubmission,
    cfg: Settings = Depends(get_settings),
):
    result = assessment.process_assessment(body.answers)
    if result.unanswered_dimensions and not cfg.allow_partial_assessment:
        logger.info("Rejected assessment missing %s", result.unanswered_dimensions)
        raise HTTPException(
            status_code=422,
            detail=f"No answers for: {', '.join(result.unanswered_dimensions)}",
        )
    return result


@router.post("/projections", response_model=ProjectionResult)
@limiter.limit(settings.rate_limit)
async def career_projection(request: Request, body: ProjectionTalent):
    return projection.generate_career_projection(body)


@router.post("/matches/score", response_model=MatchScoreResponse)
@limiter.limit(settings.rate_limit)
async def score_match(
    request: Request,
    body: MatchRequest,
    cfg: Settings = Depends(get_settings),
):
    result = matching.calculate_match(body.talent, body.opportunity)
    return MatchScoreResponse(
        **result.model_dump(),
        meets_threshold=matching.meets_threshold(result.score_total, cfg.minimum_match_score),
    )


@router.post("/matches/talent", response_model=BatchMatchResponse)
@limiter.limit(settings.rate_limit)
async def match_talent(
    request: Request,
    body: TalentBatchRequest,
    cfg: Settings = Depends(get_settings),
):
    return batch.match_talent_to_opportunities(
        body.talent, body.opportunities, cfg.minimum_match_score
    )


@router.post("/matches/opportunity", response_model=BatchMatchResponse)
@limiter.limit(settings.rate_limit)
async def match_opportunity(
    request: Request,
    body: OpportunityBatchRequest,
    cfg: Settings = Depends(get_settings),
):
    return batch.match_opportunity_to_talents(
        body.opportunity, body.talents, cfg.minimum_match_score
    )


@router.post("/learning/recommendations", response_model=list[LearningRecommendation])
@limiter.limit(settings.rate_limit)
async def learning_recommendations(request: Request, body: LearningRequest):
    modules = learning_catalog.LEARNING_MODULES if body.modules is None else body.modules
    return learning.get_recommended_modules(body.talent, modules, body.progress)


@router.get("/learning/modules", response_model=list[LearningModule])
async def learning_modules():
    return list(learning_catalog.LEARNING_MODULES)
