"""Configuration module for the word trainer"""

from .settings import AppSettings, LoggingSettings, TrainerSettings, settings

__all__ = [
    "AppSettings",
    "TrainerSettings",
    "LoggingSettings",
    "settings",
]
