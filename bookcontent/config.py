"""Application configuration loaded from environment variables."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    content_source: str = Field(
        default="content/content.json",
        description="Path or URL of the book content document.",
    )
    content_root: str = Field(
        default="content",
        description="Directory the HTTP service may read content documents from.",
    )
    parsed_book_path: str = "data/parsed/book.json"

    images_path: str = "content/images/"
    audio_path: str = "content/audios/"

    request_timeout: float = 10.0
    user_agent: str = "bookcontent/0.1"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def content_root_path(self) -> Path:
        return Path(self.content_root)

    @property
    def parsed_book_path_obj(self) -> Path:
        return Path(self.parsed_book_path)


settings = Settings()
