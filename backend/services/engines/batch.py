"""Batch matching: score one side against many and keep what passes.

Flow (talent changed, e.g. after an assessment):
    talent + active opportunities
      ├─ calculate_match() per pair
      ├─ meets_threshold() filter
      └─ upsert_matches() on (talent_id, opportunity_id)

The opportunity-side flow is symmetric. Storage stays with the caller;
upsert_matches() only merges in memory with the same key semantics.
"""

import logging
from collections.abc import Iterable, Mapping

from models.schemas.match import BatchMatchResponse, Match
from models.schemas.opportunity import Opportunity
from models.schemas.talent import Talent
from services.engines.matching import MINIMUM_MATCH_SCORE, calculate_match, meets_threshold

logger = logging.getLogger(__name__)


def _to_match(talent: Talent, opportunity: Opportunity) -> Match:
    result = calculate_match(talent, opportunity)
    return Match(
        talent_id=talent.id,
        opportunity_id=opportunity.id,
        score_total=result.score_total,
        score_breakdown=result.score_breakdown,
        compensation_alignment=result.compensation_alignment,
        engine_version=result.engine_version,
    )


def match_talent_to_opportunities(
    talent: Talent,
    opportunities: Iterable[Opportunity],
    threshold: int = MINIMUM_MATCH_SCORE,
) -> BatchMatchResponse:
    """Score a talent against every active opportunity."""
    if not talent.onboarding_completed:
        return BatchMatchResponse(message="Onboarding not completed")

    active = [opp for opp in opportunities if opp.status == "active"]
    if not active:
        return BatchMatchResponse(message="No active opportunities found")

    matches = [_to_match(talent, opp) for opp in active]
    kept = [m for m in matches if meets_threshold(m.score_total, threshold)]
    logger.info(
        "Talent %s: %d/%d opportunities above threshold %d",
        talent.id, len(kept), len(matches), threshold,
    )

    if not kept:
        return BatchMatchResponse(message="No matches above threshold")
    return BatchMatchResponse(count=len(kept), matches=kept)


def match_opportunity_to_talents(
    opportunity: Opportunity,
    talents: Iterable[Talent],
    threshold: int = MINIMUM_MATCH_SCORE,
) -> BatchMatchResponse:
    """Score an opportunity against every onboarded talent."""
    if opportunity.status != "active":
        return BatchMatchResponse(message="Opportunity not active")

    eligible = [t for t in talents if t.onboarding_completed]
    if not eligible:
        return BatchMatchResponse(message="No eligible talents found")

    matches = [_to_match(talent, opportunity) for talent in eligible]
    kept = [m for m in matches if meets_threshold(m.score_total, threshold)]
    logger.info(
        "Opportunity %s: %d/%d talents above threshold %d",
        opportunity.id, len(kept), len(matches), threshold,
    )

    if not kept:
        return BatchMatchResponse(message="No matches above threshold")
    return BatchMatchResponse(count=len(kept), matches=kept)


def upsert_matches(
    existing: Mapping[tuple[str, str], Match],
    new: Iterable[Match],
) -> dict[tuple[str, str], Match]:
    """Merge matches by (talent_id, opportunity_id); new records win.

    Returns a new dict and leaves ``existing`` untouched.
    """
    merged = dict(existing)
    replaced = 0
    for match in new:
        if match.key in merged:
            replaced += 1
        merged[match.key] = match
    logger.debug("Upserted matches: %d total, %d replaced", len(merged), replaced)
    return merged
