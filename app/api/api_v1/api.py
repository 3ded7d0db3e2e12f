from fastapi import APIRouter

from app.api.api_v1.endpoints import criteria, leaderboard, submission

api_router = APIRouter()
api_router.include_router(leaderboard.router, prefix="/events", tags=["leaderboard"])
api_router.include_router(criteria.router, prefix="/events", tags=["scoring-criteria"])
api_router.include_router(submission.router, prefix="/submissions", tags=["scores"])
