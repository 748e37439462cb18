"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrainerSettings(BaseSettings):
    """Word source and animation settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    word_file: str = Field(
        default="words.txt", validation_alias=AliasChoices("WORD_FILE_PATH")
    )
    words_dir: Path = Field(
        default=Path("resources"), validation_alias=AliasChoices("WORDS_DIR")
    )
    fade_duration: float = Field(
        default=0.5, validation_alias=AliasChoices("FADE_DURATION")
    )
    button_click_scale: float = Field(
        default=0.9, validation_alias=AliasChoices("BUTTON_CLICK_SCALE")
    )
    button_click_duration: float = Field(
        default=0.1, validation_alias=AliasChoices("BUTTON_CLICK_DURATION")
    )
    use_animation: bool = Field(
        default=True, validation_alias=AliasChoices("USE_ANIMATION")
    )
    random_seed: int | None = Field(
        default=None, validation_alias=AliasChoices("RANDOM_SEED")
    )

    @field_validator("word_file")
    @classmethod
    def validate_word_file(cls, v: str) -> str:
        """Validate word file name"""
        if not v or not v.strip():
            raise ValueError("Word file name cannot be empty")
        return v.strip()

    @field_validator("fade_duration", "button_click_duration")
    @classmethod
    def validate_durations(cls, v: float) -> float:
        """Validate animation durations"""
        if v < 0:
            raise ValueError("Animation duration cannot be negative")
        return v

    @field_validator("button_click_scale")
    @classmethod
    def validate_click_scale(cls, v: float) -> float:
        """Validate button press scale factor"""
        if v <= 0:
            raise ValueError("Button click scale must be positive")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    file: Path | None = Field(default=None, validation_alias=AliasChoices("LOG_FILE"))

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    trainer: TrainerSettings = Field(default_factory=TrainerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance
settings = AppSettings()
