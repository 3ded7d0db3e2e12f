import asyncio
import logging
import math
from collections import defaultdict
from typing import NamedTuple, Protocol

from app import enums, schemas
from app.config import settings

from .scoring import aggregate_criterion, round_half_up

logger = logging.getLogger(__name__)


class UpstreamFetchError(Exception):
    """One of the catalogs failed, no leaderboard can be computed."""

    pass


class CriteriaCatalog(Protocol):
    async def get_criteria(self, event_id: str) -> list[schemas.ScoringCriterion]: ...


class SubmissionCatalog(Protocol):
    async def get_submitted_teams(self, event_id: str) -> list[schemas.SubmittedTeam]: ...


class ScoreStore(Protocol):
    async def get_scores(self, team_ids: list[str]) -> list[schemas.RawScore]: ...


class TeamCatalog(Protocol):
    async def get_teams(self, team_ids: list[str]) -> dict[str, schemas.TeamInfo]: ...


class _Standing(NamedTuple):
    submitted: schemas.SubmittedTeam
    final_score: float
    criteria_scores: list[schemas.CriterionResult]
    total_judges: int


def _unique_teams(submitted_teams: list[schemas.SubmittedTeam]) -> list[schemas.SubmittedTeam]:
    # A team with several submissions is ranked once, with the first submission returned by the catalog
    seen: set[str] = set()
    unique = []
    for submitted in submitted_teams:
        if submitted.team_id in seen:
            continue
        seen.add(submitted.team_id)
        unique.append(submitted)
    return unique


async def _fetch_all(*fetches):
    """Run the fetches concurrently. If one fails, the others are cancelled before the error propagates."""
    tasks = [asyncio.ensure_future(fetch) for fetch in fetches]
    try:
        return await asyncio.gather(*tasks)
    except Exception:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def _missing_reference(team_id: str, what: str) -> schemas.ScoringIssue:
    detail = f"{what} for team '{team_id}' could not be found"
    logger.warning(detail)
    return schemas.ScoringIssue(kind=enums.IssueKind.missing_reference, detail=detail, team_id=team_id)


class LeaderboardBuilder:
    def __init__(
        self,
        criteria_catalog: CriteriaCatalog,
        submission_catalog: SubmissionCatalog,
        score_store: ScoreStore,
        team_catalog: TeamCatalog,
        *,
        out_of_range_policy: enums.OutOfRangePolicy | None = None,
        tie_break: enums.TieBreak | None = None,
    ):
        self.criteria_catalog = criteria_catalog
        self.submission_catalog = submission_catalog
        self.score_store = score_store
        self.team_catalog = team_catalog
        self.out_of_range_policy = out_of_range_policy or settings.out_of_range_policy
        self.tie_break = tie_break or settings.tie_break

    async def build_leaderboard(self, event_id: str) -> list[schemas.LeaderboardEntry]:
        result = await self.build(event_id)
        return result.leaderboard

    async def build(self, event_id: str) -> schemas.LeaderboardResult:
        """Rank every team that submitted to the event, best first.

        Raises `UpstreamFetchError` if any catalog fails. Bad records (unknown teams, criteria without points,
        out of range scores) never abort the computation, they are returned as issues.
        """
        try:
            criteria, submitted_teams = await _fetch_all(
                self.criteria_catalog.get_criteria(event_id),
                self.submission_catalog.get_submitted_teams(event_id),
            )
        except Exception as e:
            logger.exception(f"Failed to fetch criteria or submissions for event '{event_id}'")
            raise UpstreamFetchError(f"Could not fetch criteria or submissions for event '{event_id}'") from e

        submitted_teams = _unique_teams(submitted_teams)
        team_ids = [submitted.team_id for submitted in submitted_teams]
        if not team_ids:
            return schemas.LeaderboardResult(leaderboard=[])

        try:
            scores, teams = await _fetch_all(
                self.score_store.get_scores(team_ids),
                self.team_catalog.get_teams(team_ids),
            )
        except Exception as e:
            logger.exception(f"Failed to fetch scores or teams for event '{event_id}'")
            raise UpstreamFetchError(f"Could not fetch scores or teams for event '{event_id}'") from e

        scores_by_team: dict[str, list[schemas.RawScore]] = defaultdict(list)
        for score in scores:
            scores_by_team[score.team_id].append(score)

        issues: list[schemas.ScoringIssue] = []
        standings = [
            self._compute_standing(submitted, criteria, scores_by_team.get(submitted.team_id, []), issues)
            for submitted in submitted_teams
        ]
        standings.sort(key=self._sort_key)

        leaderboard = []
        for index, standing in enumerate(standings):
            team_id = standing.submitted.team_id
            team = teams.get(team_id)
            if team is None:
                issues.append(_missing_reference(team_id, "Team"))
            if standing.submitted.submission is None:
                issues.append(_missing_reference(team_id, "Submission"))
            leaderboard.append(
                schemas.LeaderboardEntry(
                    team_id=team_id,
                    team=team,
                    submission=standing.submitted.submission,
                    final_score=standing.final_score,
                    criteria_scores=standing.criteria_scores,
                    total_judges=standing.total_judges,
                    rank=index + 1,
                )
            )
        logger.info(f"Built leaderboard for event '{event_id}' with {len(leaderboard)} teams")
        return schemas.LeaderboardResult(leaderboard=leaderboard, issues=issues)

    def _compute_standing(
        self,
        submitted: schemas.SubmittedTeam,
        criteria: list[schemas.ScoringCriterion],
        team_scores: list[schemas.RawScore],
        issues: list[schemas.ScoringIssue],
    ) -> _Standing:
        total_weighted_score = 0.0
        total_weight = 0.0
        criteria_scores = []
        judge_ids: set[str] = set()
        for criterion in criteria:
            result, criterion_issues = aggregate_criterion(
                submitted.team_id, criterion, team_scores, self.out_of_range_policy
            )
            issues.extend(criterion_issues)
            # Unscored criteria count neither in the numerator nor in the denominator
            if result.judge_count == 0:
                continue
            total_weighted_score += result.weighted_contribution
            total_weight += result.weight
            criteria_scores.append(result)
            judge_ids.update(score.judge_id for score in result.scores)

        final_score = total_weighted_score / total_weight if total_weight > 0 else 0.0
        return _Standing(
            submitted=submitted,
            final_score=round_half_up(final_score),
            criteria_scores=criteria_scores,
            total_judges=len(judge_ids),
        )

    def _sort_key(self, standing: _Standing) -> tuple:
        team_id = standing.submitted.team_id
        match self.tie_break:
            case enums.TieBreak.team_id:
                return (-standing.final_score, team_id)
            case enums.TieBreak.submitted_at:
                submission = standing.submitted.submission
                if submission is None or submission.submitted_at is None:
                    submitted_at = math.inf
                else:
                    submitted_at = submission.submitted_at.timestamp()
                return (-standing.final_score, submitted_at, team_id)
        raise NotImplementedError(self.tie_break)
