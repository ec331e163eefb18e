import json
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Scoring surface settings
    minimum_match_score: int = 40  # batch/HTTP gate; engine constant stays 40
    allow_partial_assessment: bool = False  # if True, accept dimensions with no answers
    rate_limit: str = "60/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, value):
        """Accept CORS_ORIGINS as a comma-separated string or a JSON list."""
        if not isinstance(value, str):
            return value
        if value.startswith("["):
            return json.loads(value)
        return [o.strip() for o in value.split(",") if o.strip()]


settings = Settings()
