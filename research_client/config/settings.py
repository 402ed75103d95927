from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "research"
    db_username: str = "research"
    db_password: str = "secret"
    db_pool_max_size: int = 4

    analysis_provider: str = "webhook"
    webhook_url: str = ""
    webhook_timeout_seconds: int = 120

    max_document_chars: int = 50_000
    max_list_entries: int = 10
    allow_fallback_record: bool = True
