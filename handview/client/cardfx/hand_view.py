# cardfx/hand_view.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from handview.common.cards import Card
from handview.common.constants import COLOR_SUITS, ROW_SIZE
from .terminal import TerminalRenderer, Sprite, Style, PLAIN, RED_BOLD
from .sprites import card_face, hand_rows, row_sprite, stack


@dataclass
class HandViewConfig:
    # cards per row before wrapping
    row_size: int = ROW_SIZE

    # paint hearts/diamonds red
    color: bool = COLOR_SUITS


class HandView:
    """
    Full-screen view of one hand.

    Each render() clears the terminal and redraws every card, wrapped into
    rows of `row_size`. The hand is only read, never changed.
    """

    def __init__(self, cfg: HandViewConfig = HandViewConfig()):
        self.cfg = cfg

    def _style_for(self, card: Card) -> Style:
        if self.cfg.color and card.is_red:
            return RED_BOLD
        return PLAIN

    def compose(self, cards: Iterable[Card]) -> Sprite:
        cards = list(cards)
        rows = hand_rows(cards, self.cfg.row_size)
        return stack([row_sprite([card_face(c, self._style_for(c)) for c in row]) for row in rows])

    def render(self, r: TerminalRenderer, cards: Iterable[Card]) -> None:
        if r.clear_each_frame:
            r.clear()
        r.write_sprite(self.compose(cards))
        r.flush()
