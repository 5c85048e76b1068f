from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central application configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = "local"
    api_prefix: str = ""
    api_version: str = ""
    port: int = 8080
    cors_allow_origins: list[str] = ["*"]

    # Database connection parts (DB_USER, DB_PASSWORD, DB_HOST, DB_PORT, DB_NAME)
    db_driver: str = "mysql+asyncmy"
    db_user: str = "root"
    db_password: str = ""
    db_host: str = "localhost"
    db_port: int = 3306
    db_name: str = "recipes"
    # DATABASE_URL이 주어지면 위 항목보다 우선
    database_url: str | None = None
    sql_echo: bool = False

    # 원재료 무게 합계를 계산하는 레시피 타입
    weight_bearing_recipe_type: str = "salad"

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def split_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, list):
            return value
        if not value:
            return ["*"]
        return [origin.strip() for origin in value.split(",")]

    @model_validator(mode="after")
    def assemble_database_url(self) -> "Settings":
        if not self.database_url:
            self.database_url = (
                f"{self.db_driver}://{self.db_user}:{self.db_password}"
                f"@{self.db_host}:{self.db_port}/{self.db_name}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
