"""Headless UI widgets for running the trainer without a GUI toolkit"""

from .widgets import PushButton, TextLabel

__all__ = ["TextLabel", "PushButton"]
