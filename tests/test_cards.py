import random
from collections import Counter

from handview.common.cards import *
from handview.common.constants import DECK_SIZE


def test_display_names():
    assert str(Card(1, Suit.SPADES)) == "Ace of Spades"
    assert str(Card(10, Suit.CLUBS)) == "10 of Clubs"
    assert str(Card(5, Suit.DIAMONDS)) == "5 of Diamonds"
    assert str(Card(Face.KING, Suit.HEARTS)) == "King of Hearts"
    assert Card(Face.JACK, Suit.CLUBS).display_name == "Jack of Clubs"
    assert rank_name(Face.QUEEN) == "Queen"


def test_rank_glyphs():
    assert Card(1, Suit.HEARTS).rank_glyph == "A"
    assert Card(10, Suit.HEARTS).rank_glyph == "1"
    for n in range(2, 10):
        assert Card(n, Suit.HEARTS).rank_glyph == str(n)
    assert Card(Face.KING, Suit.HEARTS).rank_glyph == "K"
    assert Card(Face.QUEEN, Suit.HEARTS).rank_glyph == "Q"
    assert Card(Face.JACK, Suit.HEARTS).rank_glyph == "J"


def test_suit_glyphs():
    assert Card(3, Suit.DIAMONDS).suit_glyph == "♢"
    assert Card(3, Suit.CLUBS).suit_glyph == "♧"
    assert Card(3, Suit.HEARTS).suit_glyph == "♡"
    assert Card(3, Suit.SPADES).suit_glyph == "♤"


def test_card_is_a_value():
    assert Card(7, Suit.CLUBS) == Card(7, Suit.CLUBS)
    assert len({Card(7, Suit.CLUBS), Card(7, Suit.CLUBS)}) == 1
    assert Card(Face.KING, Suit.HEARTS).is_red
    assert not Card(Face.KING, Suit.SPADES).is_red


def test_full_deck_has_52_distinct_cards():
    deck = full_deck()
    assert len(deck) == DECK_SIZE
    assert len(set(deck)) == DECK_SIZE


def test_full_deck_order():
    deck = full_deck()
    assert deck.cards[0] == Card(1, Suit.DIAMONDS)
    assert deck.cards[9] == Card(10, Suit.DIAMONDS)
    assert deck.cards[10:13] == [
        Card(Face.KING, Suit.DIAMONDS),
        Card(Face.QUEEN, Suit.DIAMONDS),
        Card(Face.JACK, Suit.DIAMONDS),
    ]
    assert deck.cards[13] == Card(1, Suit.CLUBS)
    assert deck.cards[-1] == Card(Face.JACK, Suit.SPADES)


def test_full_deck_is_deterministic():
    assert full_deck().cards == full_deck().cards
    assert full_deck(rng=random.Random(1)) == full_deck(rng=random.Random(2))


def test_draw_until_empty_yields_each_card_once():
    deck = full_deck(rng=random.Random(42))
    drawn = []
    while True:
        card = draw_one(deck)
        if card is None:
            break
        drawn.append(card)
    assert Counter(drawn) == Counter(full_deck().cards)
    assert len(deck) == 0
    for _ in range(5):
        assert deck.draw() is None


def test_draw_reaches_every_position():
    # a stale length would never pick the last card
    hits = Counter()
    rng = random.Random(7)
    for _ in range(2000):
        hand = Hand([Card(n, Suit.SPADES) for n in range(1, 5)], rng=rng)
        hits[hand.draw().rank] += 1
    assert set(hits) == {1, 2, 3, 4}
    assert min(hits.values()) > 350


def test_transfer_more_than_available():
    source = Hand([Card(n, Suit.HEARTS) for n in (2, 3, 4)])
    dest = Hand([Card(Face.KING, Suit.CLUBS)])
    before = Counter(source.cards) + Counter(dest.cards)

    moved = transfer(10, source, dest)

    assert moved == 3
    assert len(source) == 0
    assert len(dest) == 4
    assert Counter(dest.cards) == before
    assert dest.cards[0] == Card(Face.KING, Suit.CLUBS)


def test_transfer_appends_in_draw_order():
    rng = random.Random(3)
    source = full_deck(rng=rng)
    shadow = full_deck(rng=random.Random(3))
    expected = [shadow.draw() for _ in range(5)]

    dest = Hand()
    transfer(5, source, dest)
    assert dest.cards == expected


def test_deal_conserves_cards():
    deck = full_deck(rng=random.Random(0))
    player = deal(deck, 7)
    enemy = deal(deck, 7)
    assert len(player) == 7
    assert len(enemy) == 7
    assert len(deck) == DECK_SIZE - 14
    assert Counter(player.cards) + Counter(enemy.cards) + Counter(deck.cards) == Counter(full_deck().cards)


def test_deal_from_short_deck():
    deck = Hand([Card(2, Suit.CLUBS)])
    hand = deck.draw_hand(7)
    assert hand.cards == [Card(2, Suit.CLUBS)]
    assert len(deck) == 0
    assert len(deck.draw_hand(3)) == 0
