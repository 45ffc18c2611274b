from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    upload_client: str = "http"
    upload_base_url: str = "http://localhost:8080"
    upload_path: str = "/upload"
    upload_field_name: str = "image"
    upload_timeout_seconds: float = 120.0

    accepted_media_types: list[str] = [
        "image/png",
        "image/jpeg",
        "image/gif",
        "image/svg+xml",
        "image/webp",
    ]
    max_upload_bytes: int = 5 * 1024 * 1024

    preview_dir: Path | None = None
