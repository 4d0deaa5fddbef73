import logging
from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path(__file__).parent


class MockBehavior(str, Enum):
    STRICT = "Strict"
    LOOSE = "Loose"

    @classmethod
    def _missing_(cls, value):
        # "strict", " LOOSE " ...
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Settings(BaseSettings):
    DEFAULT_BEHAVIOR: MockBehavior = Field(
        default=MockBehavior.LOOSE,
        description="Behavior used by create_mock when the caller does not pick one.",
    )
    DEFAULT_TYPE_NAME: str = Field(
        default="IMock",
        min_length=1,
        description="Type name rendered in diagnostics when a mock is created without one.",
    )
    MESSAGE_LINE_SEPARATOR: str = Field(
        default="\r\n",
        description=(
            "Separator placed between the lines of a verification failure message. "
            "Consumers asserting on message text expect CRLF."
        ),
    )

    LOG_LEVEL: LogLevel = Field(default=LogLevel.WARNING, description="Level for the mock_engine loggers")
    LOG_DIAGNOSTICS: bool = Field(
        default=True,
        description="Log the rendered failure message before a verification failure is raised.",
    )

    @field_validator("DEFAULT_BEHAVIOR", mode="before")
    @classmethod
    def _normalize_behavior(cls, v):
        # Accept any casing from the environment
        if isinstance(v, str):
            return MockBehavior(v)
        return v

    @field_validator("MESSAGE_LINE_SEPARATOR", mode="after")
    @classmethod
    def _non_empty_separator(cls, v: str) -> str:
        if not v:
            raise ValueError("MESSAGE_LINE_SEPARATOR must not be empty")
        return v

    model_config = SettingsConfigDict(
        env_prefix="MOCK_ENGINE_",
        env_file=CONFIG_DIR.parent / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def configure_logging(level: LogLevel | str | None = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    logger = logging.getLogger("mock_engine")
    chosen = level or settings.LOG_LEVEL
    logger.setLevel(chosen.value if isinstance(chosen, LogLevel) else str(chosen).upper())
    return logger


# Global settings instance
settings = Settings()
