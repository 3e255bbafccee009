# decklogic/deck.py

import random
from dataclasses import dataclass

from .card import Card
from .errors import InvalidArgument

DECK_SIZE = len(Card.SUITS) * len(Card.RANKS)

_system_random = random.SystemRandom()


@dataclass(frozen=True)
class DrawResult:
    updated_deck: list
    cards_drawn: list
    amount_drawn: int
    remaining_cards: int


def create_deck() -> list[Card]:
    # suit-major (c, d, h, s), rank-minor (2 .. A)
    return [Card(rank, suit) for suit in Card.SUITS for rank in Card.RANKS]


def shuffle_deck(deck: list, rng: random.Random = None) -> list:
    """Return a uniformly shuffled copy of ``deck``. The input list is left untouched."""
    shuffled = list(deck)
    (rng or _system_random).shuffle(shuffled)
    return shuffled


def _coerce_count(count) -> int:
    if count is None:
        raise InvalidArgument("A draw count is required.")
    if isinstance(count, bool):
        raise InvalidArgument(f"Invalid draw count: {count!r}")
    if isinstance(count, int):
        value = count
    elif isinstance(count, float):
        if not count.is_integer():
            raise InvalidArgument(f"Invalid draw count: {count!r}")
        value = int(count)
    elif isinstance(count, str):
        try:
            value = int(count.strip())
        except ValueError:
            raise InvalidArgument(f"Invalid draw count: {count!r}") from None
    else:
        raise InvalidArgument(f"Invalid draw count: {count!r}")
    if value <= 0:
        raise InvalidArgument("The draw count must be a positive integer.")
    return value


def draw_cards(deck: list, count) -> DrawResult:
    """
    Take ``count`` cards off the front of ``deck``.

    Asking for more cards than remain draws whatever is left; ``amount_drawn``
    reports how many were actually taken.

    Raises:
        InvalidArgument: count is missing, zero, negative or not an integer.
    """
    count = _coerce_count(count)
    drawn = list(deck[:count])
    updated = list(deck[count:])
    return DrawResult(
        updated_deck=updated,
        cards_drawn=drawn,
        amount_drawn=len(drawn),
        remaining_cards=len(updated),
    )
