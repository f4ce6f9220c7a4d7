from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )
    PROJECT_NAME: str = "Work Order Timeline"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    FRONTEND_HOST: str = "http://localhost:4200"

    BACKEND_CORS_ORIGINS: Annotated[
        list[str] | str, BeforeValidator(parse_cors)
    ] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS] + [
            self.FRONTEND_HOST
        ]

    # Timescale configuration
    DEFAULT_GRANULARITY: Literal["day", "week", "month"] = "month"
    INITIAL_COLUMNS: int = Field(default=12, ge=1)
    EXPANSION_BUFFER: int = Field(default=6, ge=0)
    COLUMN_WIDTH: int = Field(default=100, gt=0)
    # Optional per-granularity widths, e.g. {"day": 120}
    COLUMN_WIDTH_OVERRIDES: dict[Literal["day", "week", "month"], int] = {}
    MIN_BAR_WIDTH: int = Field(default=80, ge=0)

    # Overlap policy, applied to both the pre-submit and the commit check
    OVERLAP_BOUNDARY: Literal["exclusive", "inclusive"] = "exclusive"

    # Storage configuration
    STORAGE_BACKEND: Literal["memory", "json", "sql"] = "json"
    STORAGE_PATH: str = "./workboard-data.json"
    DATABASE_URL: str = "sqlite:///./workboard.db"

    # Observability configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    @field_validator("COLUMN_WIDTH_OVERRIDES")
    @classmethod
    def _positive_overrides(cls, v: dict[str, int]) -> dict[str, int]:
        for granularity, width in v.items():
            if width <= 0:
                raise ValueError(
                    f"Column width override for '{granularity}' must be positive"
                )
        return v


settings = Settings()
