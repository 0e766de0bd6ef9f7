# cardfx/__init__.py

from .terminal import TerminalRenderer, Sprite, Style
from .hand_view import HandView, HandViewConfig

__all__ = [
    "TerminalRenderer",
    "Sprite",
    "Style",
    "HandView",
    "HandViewConfig",
]
