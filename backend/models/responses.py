from pydantic import BaseModel

from services.classification import CompensationAlignment


class ScoreBreakdown(BaseModel):
    role_fit: int = 0
    division_fit: int = 0
    store_context: int = 0
    capability_fit: int = 0
    geography: int = 0
    experience_block: int = 0
    preference: int = 0


class MatchResult(BaseModel):
    score_total: int = 0
    score_breakdown: ScoreBreakdown = ScoreBreakdown()
    compensation_alignment: CompensationAlignment = "unknown"
    engine_version: str = ""


class MatchScoreResponse(MatchResult):
    meets_threshold: bool = False


class HealthResponse(BaseModel):
    status: str = "ok"
    assessment_version: str = ""
    match_engine_version: str = ""
    projection_engine_version: str = ""
