import json

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

_DEFAULT_DATABASE_URL = "sqlite:///~/.mensentaal/mensentaal.db"
_PASSWORD_PLACEHOLDER = "<password>"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    llm_provider: str = "openai"  # openai | anthropic | custom

    # OpenAI / custom
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    openai_base_url: str = ""

    # Anthropic
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-3-5-haiku-latest"

    # Completion parameters
    llm_temperature: float = Field(default=0.7, ge=0, le=2)
    llm_max_tokens: int = Field(default=500, ge=1)
    llm_timeout_seconds: float = Field(default=60, gt=0)

    # HTTP
    host: str = "0.0.0.0"
    port: int = 3000
    allow_origins: str = "http://localhost:5173"  # comma separated
    frontend_dist: str = "dist"

    # Storage
    # DATABASE_URL wins. Otherwise a hosting platform may inject PLATFORM_DB_CONFIG
    # (JSON) and hand over the credential separately in DB_PASSWORD.
    database_url: str = ""
    platform_db_config: str = ""
    db_password: str = ""

    log_level: str = "INFO"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allow_origins.split(",") if o.strip()]


def resolve_database_url(s: Settings) -> str:
    """Pick the connection string: explicit URL, then platform config, then default.

    The platform config is a JSON object with either a ``uri`` (may contain a
    ``<password>`` placeholder filled from ``db_password``) or a ``path`` to a
    sqlite file.
    """
    if s.database_url:
        return s.database_url

    if s.platform_db_config:
        try:
            data = json.loads(s.platform_db_config)
        except json.JSONDecodeError as exc:
            raise RuntimeError(f"PLATFORM_DB_CONFIG is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise RuntimeError("PLATFORM_DB_CONFIG must be a JSON object")

        uri = data.get("uri")
        if uri:
            if _PASSWORD_PLACEHOLDER in uri:
                if not s.db_password:
                    raise RuntimeError("PLATFORM_DB_CONFIG needs DB_PASSWORD but it is not set")
                uri = uri.replace(_PASSWORD_PLACEHOLDER, s.db_password)
            return uri
        if data.get("path"):
            return f"sqlite:///{data['path']}"
        raise RuntimeError("PLATFORM_DB_CONFIG has neither 'uri' nor 'path'")

    return _DEFAULT_DATABASE_URL


settings = Settings()
