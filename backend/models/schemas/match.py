"""Persistable match record keyed by (talent_id, opportunity_id)."""

from pydantic import BaseModel

from models.responses import ScoreBreakdown
from services.classification import CompensationAlignment


class Match(BaseModel):
    talent_id: str
    opportunity_id: str
    score_total: int = 0
    score_breakdown: ScoreBreakdown = ScoreBreakdown()
    compensation_alignment: CompensationAlignment = "unknown"
    engine_version: str = ""
    status: str = "suggested"

    @property
    def key(self) -> tuple[str, str]:
        return (self.talent_id, self.opportunity_id)


class BatchMatchResponse(BaseModel):
    count: int = 0
    matches: list[Match] = []
    message: str = ""
