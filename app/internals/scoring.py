import logging
from decimal import ROUND_HALF_UP, Decimal

from app import enums, schemas

logger = logging.getLogger(__name__)

NORMALIZED_SCALE = 100


def round_half_up(value: float, digits: int = 2) -> float:
    """Round on the decimal representation of `value`, so 76.665 gives 76.67 and not 76.66."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _handle_out_of_range(
    score: schemas.RawScore, criterion: schemas.ScoringCriterion, policy: enums.OutOfRangePolicy
) -> tuple[schemas.RawScore | None, schemas.ScoringIssue]:
    match policy:
        case enums.OutOfRangePolicy.clamp:
            clamped = min(max(score.points, 0), criterion.max_points)
            action = f"clamped to {clamped}"
            kept: schemas.RawScore | None = score.model_copy(update={"points": clamped})
        case enums.OutOfRangePolicy.exclude:
            action = "excluded"
            kept = None
        case _:
            raise NotImplementedError(policy)
    detail = (
        f"Judge '{score.judge_id}' gave {score.points} points on criterion '{criterion.name}' "
        f"(allowed range 0-{criterion.max_points}), {action}"
    )
    logger.warning(detail)
    issue = schemas.ScoringIssue(
        kind=enums.IssueKind.out_of_range_score,
        detail=detail,
        team_id=score.team_id,
        criteria_id=criterion.id,
    )
    return kept, issue


def aggregate_criterion(
    team_id: str,
    criterion: schemas.ScoringCriterion,
    scores: list[schemas.RawScore],
    policy: enums.OutOfRangePolicy = enums.OutOfRangePolicy.clamp,
) -> tuple[schemas.CriterionResult, list[schemas.ScoringIssue]]:
    """Combine every judge's points for one team on one criterion.

    `scores` may hold the scores of the whole event, only those matching `team_id` and the criterion are used.
    A criterion nobody scored, or whose `max_points` is not positive, yields `judge_count == 0` and must be left
    out of the composite by the caller.
    """
    empty_result = schemas.CriterionResult(
        criteria_id=criterion.id,
        criteria_name=criterion.name,
        max_points=criterion.max_points,
        weight=criterion.weight,
    )
    if criterion.max_points <= 0:
        detail = f"Criterion '{criterion.name}' has max points {criterion.max_points}, ignoring it"
        logger.warning(detail)
        issue = schemas.ScoringIssue(
            kind=enums.IssueKind.invalid_criterion, detail=detail, team_id=team_id, criteria_id=criterion.id
        )
        return empty_result, [issue]

    issues: list[schemas.ScoringIssue] = []
    criterion_scores: list[schemas.RawScore] = []
    for score in scores:
        if score.team_id != team_id or score.criteria_id != criterion.id:
            continue
        if 0 <= score.points <= criterion.max_points:
            criterion_scores.append(score)
            continue
        kept, issue = _handle_out_of_range(score, criterion, policy)
        issues.append(issue)
        if kept is not None:
            criterion_scores.append(kept)

    if not criterion_scores:
        return empty_result, issues

    avg_score = sum(score.points for score in criterion_scores) / len(criterion_scores)
    normalized_score = avg_score / criterion.max_points * NORMALIZED_SCALE
    result = schemas.CriterionResult(
        criteria_id=criterion.id,
        criteria_name=criterion.name,
        scores=criterion_scores,
        avg_score=avg_score,
        max_points=criterion.max_points,
        normalized_score=normalized_score,
        weight=criterion.weight,
        weighted_contribution=normalized_score * criterion.weight,
        judge_count=len(criterion_scores),
    )
    return result, issues
