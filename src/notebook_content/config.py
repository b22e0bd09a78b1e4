from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GENERATION_URL_ENV = "NOTEBOOK_GENERATION_URL"
GENERATION_AUTH_ENV = "NOTEBOOK_GENERATION_AUTH"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    generation_url: str = Field(default="", alias=GENERATION_URL_ENV)
    generation_auth: str = Field(default="", alias=GENERATION_AUTH_ENV)
    generation_timeout_seconds: float | None = Field(default=None, alias="NOTEBOOK_GENERATION_TIMEOUT_SECONDS")

    supabase_url: str = Field(default="", alias="SUPABASE_URL")
    supabase_service_role_key: str = Field(default="", alias="SUPABASE_SERVICE_ROLE_KEY")

    source_content_char_limit: int = Field(default=5000, alias="SOURCE_CONTENT_CHAR_LIMIT")
    default_notebook_icon: str = Field(default="📝", alias="DEFAULT_NOTEBOOK_ICON")
    default_notebook_color: str = Field(default="bg-gray-100", alias="DEFAULT_NOTEBOOK_COLOR")
    log_payload_limit: int = Field(default=4000, alias="LOG_PAYLOAD_LIMIT")

    def missing_generation_settings(self) -> list[str]:
        missing: list[str] = []
        if not self.generation_url.strip():
            missing.append(GENERATION_URL_ENV)
        if not self.generation_auth.strip():
            missing.append(GENERATION_AUTH_ENV)
        return missing


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
