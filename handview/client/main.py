# handview/client/main.py

import random
import sys
from typing import Optional, TextIO

from handview.common.cards import Hand
from handview.common.constants import DECK_SEED, HAND_SIZE, TURN_DRAW
from handview.common.logging_utils import setup_logging, get_logger
from handview.client.ui import wait_for_turn
from handview.client.cardfx import TerminalRenderer, HandView, HandViewConfig


log = get_logger("client.main")


def main(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    *,
    seed: Optional[int] = DECK_SEED,
    cfg: Optional[HandViewConfig] = None,
) -> int:
    """
    Deal a player and an enemy hand, show the player's, then draw one more
    card into it for every line on stdin. Returns the process exit code.
    """
    stdin = stdin if stdin is not None else sys.stdin
    rend = TerminalRenderer(clear_each_frame=True, out=stdout)
    view = HandView(cfg if cfg is not None else HandViewConfig())

    deck = Hand.full_deck(rng=random.Random(seed))
    player_hand = deck.draw_hand(HAND_SIZE)
    enemy_hand = deck.draw_hand(HAND_SIZE)
    log.info(f"Dealt player={len(player_hand)} enemy={len(enemy_hand)} deck={len(deck)}")
    log.debug(f"Enemy hand: {', '.join(str(c) for c in enemy_hand)}")

    try:
        view.render(rend, player_hand)
        while True:
            try:
                if not wait_for_turn(stdin):
                    log.info("End of input, exiting.")
                    return 0
            except OSError as e:
                log.error(f"Failed to read input: {e}")
                return 1

            if player_hand.draw_from(deck, TURN_DRAW) == 0:
                log.debug("Deck is empty, nothing drawn.")
            else:
                log.debug(f"Drew {player_hand.cards[-1]} ({len(deck)} left)")
            view.render(rend, player_hand)
    except KeyboardInterrupt:
        log.info("Interrupted, exiting.")
        return 0
    finally:
        # only coloured frames leave a style to reset
        if view.cfg.color:
            rend.end()


def run() -> None:
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
