"""Interface definitions for the host UI collaborators"""

from abc import ABC, abstractmethod
from collections.abc import Callable


class TextDisplayInterface(ABC):
    """A text label whose content and opacity can be set"""

    @property
    @abstractmethod
    def text(self) -> str:
        """Currently displayed text"""
        pass

    @abstractmethod
    def set_text(self, text: str) -> None:
        """Replace the displayed text"""
        pass

    @property
    @abstractmethod
    def alpha(self) -> float:
        """Current opacity, 0 (invisible) to 1 (opaque)"""
        pass

    @abstractmethod
    def set_alpha(self, alpha: float) -> None:
        """Set the opacity"""
        pass


class ClickableControlInterface(ABC):
    """A button-like control with a uniform scale transform"""

    @property
    @abstractmethod
    def scale(self) -> float:
        """Current uniform scale"""
        pass

    @abstractmethod
    def set_scale(self, scale: float) -> None:
        """Set the uniform scale"""
        pass

    @abstractmethod
    def add_click_listener(self, callback: Callable[[], None]) -> None:
        """Register a callback invoked on every click"""
        pass
