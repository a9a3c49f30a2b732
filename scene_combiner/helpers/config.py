from typing import List

from pydantic_settings import BaseSettings

from ..core.layout import Layout


class Settings(BaseSettings):

    APP_NAME: str = "Scene Image URL Combiner API"
    APP_VERSION: str = "1.0.0"

    # Read once at startup by the bootstrap
    PORT: int = 3000
    NODE_ENV: str = "development"

    # Output canvas (9:16 portrait by default)
    CANVAS_WIDTH: int = 1080
    CANVAS_HEIGHT: int = 1920
    CANVAS_PADDING: int = 20
    DEFAULT_LAYOUT: Layout = Layout.VERTICAL

    DOWNLOAD_TIMEOUT: int = 30
    MAX_DOWNLOAD_WORKERS: int = 8

    ALLOWED_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        extra = "ignore"


def get_settings():
    return Settings()
