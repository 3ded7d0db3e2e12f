import pytest
from fastapi.testclient import TestClient

from app import crud, schemas
from app.api import deps
from app.config import settings
from app.internals.leaderboard import LeaderboardBuilder
from app.main import app

from .fakes import FailingScoreStore, InMemoryCatalog, InMemoryRedis, make_criterion, make_score, make_submitted

SUBMISSION = schemas.SubmissionInfo(id="S1", team_id="T1", event_id="event", title="Project")


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def override_builder(builder: LeaderboardBuilder):
    app.dependency_overrides[deps.get_leaderboard_builder] = lambda: builder


@pytest.fixture
def cached_redis(monkeypatch):
    redis = InMemoryRedis()
    monkeypatch.setattr(settings, "leaderboard_cache_expiration", 60)
    app.dependency_overrides[deps.get_redis_client] = lambda: redis
    return redis


def test_leaderboard_response_format(client):
    criteria = [make_criterion("C1", max_points=10, weight=1), make_criterion("C2", max_points=5, weight=2)]
    scores = [make_score("J1", "T1", "C1", 8), make_score("J1", "T1", "C2", 4), make_score("J2", "T1", "C1", 6)]
    catalog = InMemoryCatalog(criteria=criteria, submitted_teams=[make_submitted("T1")], scores=scores)
    override_builder(LeaderboardBuilder(catalog, catalog, catalog, catalog))

    response = client.get("/api/v1/events/event/leaderboard")

    assert response.status_code == 200
    body = response.json()
    assert body["issues"] == []
    (entry,) = body["leaderboard"]
    assert entry["teamId"] == "T1"
    assert entry["team"]["name"] == "Team T1"
    assert entry["submission"]["teamId"] == "T1"
    assert entry["finalScore"] == 76.67
    assert entry["totalJudges"] == 2
    assert entry["rank"] == 1
    first_criterion = entry["criteriaScores"][0]
    assert {"criteriaId", "criteriaName", "avgScore", "maxPoints", "normalizedScore", "weight", "judgeCount"} <= set(
        first_criterion
    )
    assert first_criterion["avgScore"] == 7
    assert first_criterion["judgeCount"] == 2
    assert "scores" not in first_criterion
    assert "weightedContribution" not in first_criterion


def test_leaderboard_reports_issues(client):
    catalog = InMemoryCatalog(
        criteria=[make_criterion("C1", max_points=10)],
        submitted_teams=[make_submitted("T1")],
        scores=[make_score("J1", "T1", "C1", 15)],
    )
    override_builder(LeaderboardBuilder(catalog, catalog, catalog, catalog))

    body = client.get("/api/v1/events/event/leaderboard").json()

    assert body["leaderboard"][0]["finalScore"] == 100
    assert [issue["kind"] for issue in body["issues"]] == ["out_of_range_score"]


def test_leaderboard_fetch_failure_is_503(client):
    catalog = InMemoryCatalog(criteria=[make_criterion("C1")], submitted_teams=[make_submitted("T1")])
    override_builder(LeaderboardBuilder(catalog, catalog, FailingScoreStore(), catalog))

    response = client.get("/api/v1/events/event/leaderboard")

    assert response.status_code == 503
    assert "event" in response.json()["detail"]


def test_cached_leaderboard_is_served_from_redis(client, cached_redis):
    scores = [make_score("J1", "T1", "C1", 8), make_score("J2", "T1", "C1", 6)]
    catalog = InMemoryCatalog(criteria=[make_criterion("C1")], submitted_teams=[make_submitted("T1")], scores=scores)
    override_builder(LeaderboardBuilder(catalog, catalog, catalog, catalog))

    first = client.get("/api/v1/events/event/leaderboard")
    second = client.get("/api/v1/events/event/leaderboard")

    assert first.status_code == second.status_code == 200
    assert second.json() == first.json()
    assert second.json()["leaderboard"][0]["finalScore"] == 70.0
    assert catalog.scores_requests == [["T1"]]
    assert cached_redis.expirations["leaderboard:event"] == 60


def test_leaderboard_is_not_cached_by_default(client, monkeypatch):
    redis = InMemoryRedis()
    monkeypatch.setattr(settings, "leaderboard_cache_expiration", 0)
    app.dependency_overrides[deps.get_redis_client] = lambda: redis
    catalog = InMemoryCatalog(criteria=[make_criterion("C1")], submitted_teams=[make_submitted("T1")])
    override_builder(LeaderboardBuilder(catalog, catalog, catalog, catalog))

    client.get("/api/v1/events/event/leaderboard")
    client.get("/api/v1/events/event/leaderboard")

    assert catalog.scores_requests == [["T1"], ["T1"]]
    assert redis.values == {}


def test_list_criteria(client, monkeypatch):
    async def get_criteria(event_id):
        assert event_id == "event"
        return [make_criterion("C1", max_points=10, weight=1.5, name="Innovation")]

    monkeypatch.setattr(crud.criteria, "get_criteria", get_criteria)

    response = client.get("/api/v1/events/event/scoring-criteria")

    assert response.status_code == 200
    assert response.json()["criteria"] == [
        {"id": "C1", "eventId": "event", "name": "Innovation", "description": "", "maxPoints": 10, "weight": 1.5}
    ]


def test_create_criterion(client, monkeypatch):
    async def create_for_event(*, event_id, obj_in):
        return schemas.ScoringCriterion(id="C9", event_id=event_id, **obj_in.model_dump())

    monkeypatch.setattr(crud.criteria, "create_for_event", create_for_event)

    response = client.post(
        "/api/v1/events/event/scoring-criteria",
        json={"name": "Design", "description": "Look and feel", "maxPoints": 5, "weight": 2},
    )

    assert response.status_code == 200
    criterion = response.json()["criterion"]
    assert criterion["id"] == "C9"
    assert criterion["maxPoints"] == 5


@pytest.mark.parametrize("field, value", [("maxPoints", 0), ("weight", 0), ("name", "")])
def test_create_criterion_rejects_invalid_values(client, field, value):
    payload = {"name": "Design", "description": "Look and feel", "maxPoints": 5, "weight": 2}
    payload[field] = value

    response = client.post("/api/v1/events/event/scoring-criteria", json=payload)

    assert response.status_code == 422


@pytest.fixture
def scoring_crud(monkeypatch):
    upserts = []

    async def get_info(id):
        return SUBMISSION if id == "S1" else None

    async def get_for_event(*, id, event_id):
        return make_criterion("C1", max_points=10) if (id, event_id) == ("C1", "event") else None

    async def upsert(*, team_id, obj_in):
        upserts.append((team_id, obj_in))
        return schemas.ScoreInfo(id="score", team_id=team_id, **obj_in.model_dump())

    async def get_by_team(*, team_id):
        return [schemas.ScoreInfo(id="score", **make_score("J1", team_id, "C1", 7).model_dump())]

    monkeypatch.setattr(crud.submission, "get_info", get_info)
    monkeypatch.setattr(crud.criteria, "get_for_event", get_for_event)
    monkeypatch.setattr(crud.score, "upsert", upsert)
    monkeypatch.setattr(crud.score, "get_by_team", get_by_team)
    return upserts


def test_submit_score(client, scoring_crud):
    response = client.post(
        "/api/v1/submissions/S1/scores", json={"judgeId": "J1", "criteriaId": "C1", "points": 7, "feedback": "Nice"}
    )

    assert response.status_code == 200
    assert response.json()["score"]["teamId"] == "T1"
    ((team_id, score_request),) = scoring_crud
    assert team_id == "T1"
    assert score_request.points == 7
    assert score_request.feedback == "Nice"


def test_submit_score_unknown_submission(client, scoring_crud):
    response = client.post("/api/v1/submissions/S2/scores", json={"judgeId": "J1", "criteriaId": "C1", "points": 7})
    assert response.status_code == 404
    assert scoring_crud == []


def test_submit_score_unknown_criterion(client, scoring_crud):
    response = client.post("/api/v1/submissions/S1/scores", json={"judgeId": "J1", "criteriaId": "C2", "points": 7})
    assert response.status_code == 404
    assert scoring_crud == []


@pytest.mark.parametrize("points", [11, -1])
def test_submit_score_out_of_range(client, scoring_crud, points):
    response = client.post(
        "/api/v1/submissions/S1/scores", json={"judgeId": "J1", "criteriaId": "C1", "points": points}
    )
    assert response.status_code == 422
    assert scoring_crud == []


def test_list_scores(client, scoring_crud):
    response = client.get("/api/v1/submissions/S1/scores")

    assert response.status_code == 200
    assert response.json()["scores"] == [
        {"judgeId": "J1", "teamId": "T1", "criteriaId": "C1", "points": 7, "feedback": None, "id": "score"}
    ]


def test_submit_score_clears_cached_leaderboard(client, scoring_crud, cached_redis):
    cached_redis.values["leaderboard:event"] = '{"leaderboard": [], "issues": []}'

    response = client.post("/api/v1/submissions/S1/scores", json={"judgeId": "J1", "criteriaId": "C1", "points": 7})

    assert response.status_code == 200
    assert cached_redis.deleted == ["leaderboard:event"]
    assert "leaderboard:event" not in cached_redis.values


def test_create_criterion_clears_cached_leaderboard(client, monkeypatch, cached_redis):
    async def create_for_event(*, event_id, obj_in):
        return schemas.ScoringCriterion(id="C9", event_id=event_id, **obj_in.model_dump())

    monkeypatch.setattr(crud.criteria, "create_for_event", create_for_event)
    cached_redis.values["leaderboard:event"] = '{"leaderboard": [], "issues": []}'

    response = client.post(
        "/api/v1/events/event/scoring-criteria",
        json={"name": "Design", "description": "Look and feel", "maxPoints": 5, "weight": 2},
    )

    assert response.status_code == 200
    assert cached_redis.deleted == ["leaderboard:event"]
