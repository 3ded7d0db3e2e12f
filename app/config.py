from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.enums import OutOfRangePolicy, TieBreak


class Settings(BaseSettings):
    model_config = SettingsConfigDict(secrets_dir="/run/secrets")

    project_name: str = "Hackathon Leaderboard"
    api_v1_str: str = "/api/v1"
    hostname: str = "localhost"
    base_url: str = f"https://{hostname}" if hostname != "localhost" else f"http://{hostname}"
    log_level: str = "INFO"

    # Database
    database_url: str | None = None
    mongodb_root_username: str | None = None
    mongodb_root_password: SecretStr = "TODO generate with `openssl rand -hex 32`"  # type: ignore

    # Redis
    redis_host: str | None = None
    redis_port: int | None = None
    redis_password: SecretStr = "TODO generate with `openssl rand -hex 32`"  # type: ignore

    # Leaderboard
    # 0 disables caching, every request recomputes from the latest scores
    leaderboard_cache_expiration: int = 0
    out_of_range_policy: OutOfRangePolicy = OutOfRangePolicy.clamp
    tie_break: TieBreak = TieBreak.team_id

    @model_validator(mode="after")
    def _set_base_url(self) -> "Settings":
        hostname = self.hostname
        self.base_url = f"https://{hostname}" if hostname != "localhost" else f"http://{hostname}"
        return self


settings = Settings()
