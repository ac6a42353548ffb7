from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Source scanning limits, enforced before the content scanner runs
    max_source_files: int = 500
    max_source_bytes: int = 5 * 1024 * 1024  # 5 MB
    # Disable to skip substring scanning of source and manifest contents
    content_scan_enabled: bool = True


settings = Settings()
