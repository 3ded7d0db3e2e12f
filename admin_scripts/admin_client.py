import urllib.parse

import requests
from pydantic import model_validator
from pydantic_settings import BaseSettings

from app import schemas


class AdminClientSettings(BaseSettings):
    hostname: str = "localhost"
    port: int = 8008
    api_v1_str: str = "/api/v1"
    base_url: str = f"https://{hostname}" if hostname != "localhost" else f"http://{hostname}:{port}"
    api_url: str = f"{base_url}{api_v1_str}"

    @model_validator(mode="after")
    def _set_base_url(self) -> "AdminClientSettings":
        hostname = self.hostname
        port = self.port
        self.base_url = f"https://{hostname}" if hostname != "localhost" else f"http://{hostname}:{port}"
        self.api_url = f"{self.base_url}{self.api_v1_str}"
        return self


class AdminClient:
    def __init__(self, settings: AdminClientSettings = AdminClientSettings()):
        self.api_url = settings.api_url
        self.json_headers = {
            "accept": "application/json",
            "Content-Type": "application/json",
        }

    def _event_url(self, event_id: str) -> str:
        return f"{self.api_url}/events/{urllib.parse.quote(event_id, safe='')}"

    def get_criteria(self, event_id: str) -> list[schemas.ScoringCriterion]:
        response = requests.get(f"{self._event_url(event_id)}/scoring-criteria", headers=self.json_headers)
        response.raise_for_status()
        return schemas.CriteriaResponse(**response.json()).criteria

    def create_criterion(self, event_id: str, criterion: schemas.CriterionCreate) -> schemas.ScoringCriterion:
        url = f"{self._event_url(event_id)}/scoring-criteria"
        response = requests.post(url, json=criterion.model_dump(by_alias=True), headers=self.json_headers)
        response.raise_for_status()
        return schemas.CriterionResponse(**response.json()).criterion

    def get_leaderboard(self, event_id: str) -> schemas.LeaderboardResult:
        response = requests.get(f"{self._event_url(event_id)}/leaderboard", headers=self.json_headers)
        response.raise_for_status()
        return schemas.LeaderboardResult(**response.json())
