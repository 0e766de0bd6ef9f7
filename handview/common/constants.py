# handview/common/constants.py

import os
from typing import Optional


def parse_seed(raw: str) -> Optional[int]:
    """Integer seed, or None when unset or not a plain integer."""
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


# Environment switches:
#   HANDVIEW_SEED=<int> for a reproducible deal (anything else is ignored)
#   HANDVIEW_COLOR=1 to paint hearts/diamonds red
DECK_SEED = parse_seed(os.getenv("HANDVIEW_SEED", ""))
COLOR_SUITS = os.getenv("HANDVIEW_COLOR", "0") == "1"

# Deck shape
DECK_SIZE = 52
MIN_NUMBER = 1   # Ace
MAX_NUMBER = 10  # Ten

# Dealing
HAND_SIZE = 7    # player and enemy both start with this many
TURN_DRAW = 1    # cards drawn per input line

# Rendering
ROW_SIZE = 7     # cards per rendered row
TEN_GLYPH = "1"  # rank glyph for 10, expanded to "10" by the renderer

# Suit glyphs: Diamonds, Clubs, Hearts, Spades
SUIT_GLYPHS = {"Diamonds": "♢", "Clubs": "♧", "Hearts": "♡", "Spades": "♤"}

FACE_GLYPHS = {"King": "K", "Queen": "Q", "Jack": "J"}

RED_SUITS = {"Diamonds", "Hearts"}
