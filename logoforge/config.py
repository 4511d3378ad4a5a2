"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Editor core settings."""

    # History
    HISTORY_MAX_SIZE: int = 50  # Entries kept before the oldest is evicted

    # Layer defaults
    DUPLICATE_OFFSET: int = 20  # Pixels added to x/y of a duplicated layer
    DUPLICATE_SUFFIX: str = " copy"
    DEFAULT_SHAPE_SIZE: int = 100
    DEFAULT_ICON_SIZE: int = 48

    # Canvas defaults
    DEFAULT_CANVAS_WIDTH: int = 400
    DEFAULT_CANVAS_HEIGHT: int = 400
    DEFAULT_BACKGROUND_COLOR: str = "#ffffff"

    # Markup output
    NUMBER_PRECISION: int = 4  # Decimals kept for non-integral numbers

    model_config = {"env_prefix": "LOGOFORGE_"}


settings = Settings()
