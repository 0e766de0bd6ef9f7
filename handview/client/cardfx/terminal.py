# terminal.py
from __future__ import annotations
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

CSI = "\033["

@dataclass
class Style:
    prefix: str = ""
    suffix: str = CSI + "0m"

# Basic styles
PLAIN = Style(suffix="")

RED_BOLD = Style(prefix=CSI + "31m" + CSI + "1m")  # hearts/diamonds

@dataclass
class Sprite:
    lines: List[str]

    @property
    def w(self) -> int:
        return max((len(s) for s in self.lines), default=0)

    @property
    def h(self) -> int:
        return len(self.lines)

class TerminalRenderer:
    """
    Writes whole frames to a text stream, top to bottom.
    `out` defaults to stdout; tests pass a StringIO.
    """

    def __init__(self, *, clear_each_frame: bool = True, out: Optional[TextIO] = None):
        self.clear_each_frame = clear_each_frame
        self.out = out if out is not None else sys.stdout

    def write(self, text: str) -> None:
        self.out.write(text)

    def clear(self) -> None:
        # home + clear
        self.write(CSI + "H" + CSI + "2J")

    def flush(self) -> None:
        self.out.flush()

    def end(self) -> None:
        self.write(CSI + "0m\n")
        self.flush()

    def write_sprite(self, sprite: Sprite) -> None:
        for line in sprite.lines:
            self.write(line + "\n")
