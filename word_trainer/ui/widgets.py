"""Headless widgets implementing the display and control interfaces"""

from collections.abc import Callable

from ..core.interfaces import ClickableControlInterface, TextDisplayInterface


class TextLabel(TextDisplayInterface):
    """In-memory text label"""

    def __init__(self, text: str = "", alpha: float = 1.0) -> None:
        self._text = text
        self._alpha = alpha

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text

    @property
    def alpha(self) -> float:
        return self._alpha

    def set_alpha(self, alpha: float) -> None:
        self._alpha = alpha

    def __repr__(self) -> str:
        return f"TextLabel({self._text!r}, alpha={self._alpha:.2f})"


class PushButton(ClickableControlInterface):
    """In-memory button; ``click()`` fires listeners in registration order"""

    def __init__(self, scale: float = 1.0) -> None:
        self._scale = scale
        self._listeners: list[Callable[[], None]] = []

    @property
    def scale(self) -> float:
        return self._scale

    def set_scale(self, scale: float) -> None:
        self._scale = scale

    def add_click_listener(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def click(self) -> None:
        for listener in list(self._listeners):
            listener()
