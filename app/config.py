from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./leaderboard.db"
    # Upper bound for a single store operation, in seconds.
    storage_timeout_seconds: float = 10.0

    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
