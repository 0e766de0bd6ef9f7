# sprites.py
from __future__ import annotations
from typing import List, Sequence

from handview.common.cards import Card
from handview.common.constants import ROW_SIZE, TEN_GLYPH
from .terminal import Sprite, Style, PLAIN

CARD_W = 7
CARD_H = 5


def card_face(card: Card, style: Style = PLAIN) -> Sprite:
    """
    5x7 face:

        ┌─────┐
        │10   │
        │  ♤  │
        │   10│
        └─────┘
    """
    inner_w = CARD_W - 2
    rank = card.rank_glyph

    top = "┌" + "─" * inner_w + "┐"
    bot = "└" + "─" * inner_w + "┘"

    if rank == TEN_GLYPH:
        tl = br = TEN_GLYPH + "0"
    else:
        tl = rank + " "
        br = " " + rank

    lines = [
        top,
        "│" + tl.ljust(inner_w) + "│",
        "│" + card.suit_glyph.center(inner_w) + "│",
        "│" + br.rjust(inner_w) + "│",
        bot,
    ]
    return Sprite([style.prefix + line + style.suffix for line in lines])


def hand_rows(cards: Sequence[Card], row_size: int = ROW_SIZE) -> List[List[Card]]:
    """Split into consecutive rows of at most `row_size` cards, keeping order."""
    return [list(cards[i:i + row_size]) for i in range(0, len(cards), row_size)]


def row_sprite(faces: Sequence[Sprite]) -> Sprite:
    """Lay card faces side by side, no gap."""
    if not faces:
        return Sprite([])
    return Sprite(["".join(f.lines[i] for f in faces) for i in range(CARD_H)])


def stack(sprites: Sequence[Sprite]) -> Sprite:
    out: List[str] = []
    for s in sprites:
        out.extend(s.lines)
    return Sprite(out)
