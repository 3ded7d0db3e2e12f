import logging

from beanie import init_beanie
from fastapi import FastAPI
from motor.motor_asyncio import AsyncIOMotorClient
from starlette import status
from starlette.requests import Request
from starlette.responses import JSONResponse

from app import models
from app.api.api_v1.api import api_router
from app.api.documentation_text import api_description, tags_metadata
from app.config import settings
from app.internals.leaderboard import UpstreamFetchError

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.project_name,
    openapi_url=f"{settings.api_v1_str}/openapi.json",
    openapi_tags=tags_metadata,
    description=api_description,
)

DB_MODELS = [
    models.ProjectSubmission,
    models.Score,
    models.ScoringCriterion,
    models.Team,
]


@app.on_event("startup")
async def app_init():
    database_url = f"mongodb://{settings.mongodb_root_username}:{settings.mongodb_root_password.get_secret_value()}@{settings.database_url}"
    mongo_client = AsyncIOMotorClient(database_url)
    await init_beanie(mongo_client.get_default_database(), document_models=DB_MODELS)
    logger.info("Database initialized")


@app.exception_handler(UpstreamFetchError)
async def upstream_fetch_error_handler(request: Request, exc: UpstreamFetchError):
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": f"{exc}. Try again later."},
    )


app.include_router(api_router, prefix=settings.api_v1_str)
