# decklogic/hand.py

import re
from collections import Counter
from enum import IntEnum
from itertools import combinations

from .card import Card, parse_card
from .errors import InvalidArgument, InvalidHandSize

HAND_SIZES = (3, 5, 6, 7)

RANK_ORDER = [
    "High Card", "One Pair", "Two Pair", "Three of a Kind", "Straight",
    "Flush", "Full House", "Four of a Kind", "Straight Flush"
]

RANK_NAMES = {
    2: "Two", 3: "Three", 4: "Four", 5: "Five", 6: "Six", 7: "Seven", 8: "Eight",
    9: "Nine", 10: "Ten", 11: "Jack", 12: "Queen", 13: "King", 14: "Ace",
}
RANK_PLURALS = {value: name + "s" for value, name in RANK_NAMES.items()}
RANK_PLURALS[6] = "Sixes"


class HandCategory(IntEnum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9

    @property
    def title(self) -> str:
        return RANK_ORDER[self - 1]


def _straight_high(values: list) -> int:
    """High card of a five-card straight, 5 for the wheel, 0 if not a straight."""
    unique = sorted(set(values), reverse=True)
    if len(unique) != 5:
        return 0
    if unique[0] - unique[4] == 4:
        return unique[0]
    if unique == [14, 5, 4, 3, 2]:
        return 5
    return 0


def classify_five(cards) -> tuple:
    """Return (category, kickers) for exactly five cards."""
    values = [c.rank_value() for c in cards]
    counts = Counter(values)
    groups = sorted(counts.items(), key=lambda x: (x[1], x[0]), reverse=True)
    count_values = [count for _, count in groups]
    ordered = [value for value, _ in groups]

    is_flush = len({c.suit for c in cards}) == 1
    straight_high = _straight_high(values)

    if is_flush and straight_high:
        return HandCategory.STRAIGHT_FLUSH, [straight_high]
    if count_values == [4, 1]:
        return HandCategory.FOUR_OF_A_KIND, ordered
    if count_values == [3, 2]:
        return HandCategory.FULL_HOUSE, ordered
    if is_flush:
        return HandCategory.FLUSH, ordered
    if straight_high:
        return HandCategory.STRAIGHT, [straight_high]
    if count_values == [3, 1, 1]:
        return HandCategory.THREE_OF_A_KIND, ordered
    if count_values == [2, 2, 1]:
        return HandCategory.TWO_PAIR, ordered
    if count_values == [2, 1, 1, 1]:
        return HandCategory.ONE_PAIR, ordered
    return HandCategory.HIGH_CARD, ordered


def classify_three(cards) -> tuple:
    # three cards never make a straight or a flush
    counts = Counter(c.rank_value() for c in cards)
    groups = sorted(counts.items(), key=lambda x: (x[1], x[0]), reverse=True)
    ordered = [value for value, _ in groups]
    top_count = groups[0][1]
    if top_count == 3:
        return HandCategory.THREE_OF_A_KIND, ordered
    if top_count == 2:
        return HandCategory.ONE_PAIR, ordered
    return HandCategory.HIGH_CARD, ordered


def encode_value(category: int, kickers: list) -> int:
    """Pack the category and up to five kickers into one int, 4 bits per kicker."""
    value = int(category)
    for i in range(5):
        value = (value << 4) | (kickers[i] if i < len(kickers) else 0)
    return value


class Hand:
    def __init__(self, cards: list):
        if len(cards) not in HAND_SIZES:
            raise InvalidHandSize(
                f"A hand must have 3, 5, 6, or 7 cards, got {len(cards)}."
            )
        if len(set(cards)) != len(cards):
            raise InvalidArgument("A hand cannot contain the same card twice.")
        self.cards = list(cards)
        self.category, self.kickers, self.best_hand = self.evaluate_hand()
        self.value = encode_value(self.category, self.kickers)

    def evaluate_hand(self) -> tuple:
        if len(self.cards) == 3:
            category, kickers = classify_three(self.cards)
            return category, kickers, self._display_order(self.cards, category)

        best = None
        for combo in combinations(self.cards, 5):
            category, kickers = classify_five(combo)
            score = encode_value(category, kickers)
            if best is None or score > best[0]:
                best = (score, category, kickers, combo)
        _, category, kickers, combo = best
        return category, kickers, self._display_order(combo, category)

    @staticmethod
    def _display_order(cards, category) -> list:
        counts = Counter(c.rank_value() for c in cards)
        wheel = category in (HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH) and \
            _straight_high([c.rank_value() for c in cards]) == 5

        def key(card):
            value = card.rank_value()
            if wheel and value == 14:
                value = 1
            return counts[card.rank_value()], value

        return sorted(cards, key=key, reverse=True)

    @property
    def rank(self) -> int:
        return int(self.category)

    @property
    def name(self) -> str:
        return self.category.title

    @property
    def label(self) -> str:
        k = self.kickers
        c = self.category
        if c == HandCategory.STRAIGHT_FLUSH:
            if k[0] == 14:
                return "Royal Flush"
            return f"Straight Flush, {RANK_NAMES[k[0]]} High"
        if c == HandCategory.FOUR_OF_A_KIND:
            return f"Four of a Kind, {RANK_PLURALS[k[0]]}"
        if c == HandCategory.FULL_HOUSE:
            return f"Full House, {RANK_PLURALS[k[0]]} over {RANK_PLURALS[k[1]]}"
        if c == HandCategory.FLUSH:
            return f"Flush, {RANK_NAMES[k[0]]} High"
        if c == HandCategory.STRAIGHT:
            return f"Straight, {RANK_NAMES[k[0]]} High"
        if c == HandCategory.THREE_OF_A_KIND:
            return f"Three of a Kind, {RANK_PLURALS[k[0]]}"
        if c == HandCategory.TWO_PAIR:
            return f"Two Pair, {RANK_PLURALS[k[0]]} and {RANK_PLURALS[k[1]]}"
        if c == HandCategory.ONE_PAIR:
            return f"One Pair, {RANK_PLURALS[k[0]]}"
        return f"High Card, {RANK_NAMES[k[0]]}"

    def __str__(self):
        card_str = [str(c) for c in self.best_hand]
        return f"[{', '.join(card_str)}] → {self.label}"

    def __lt__(self, other):
        return self.value < other.value

    def __eq__(self, other):
        if not isinstance(other, Hand):
            return NotImplemented
        return self.value == other.value

    __hash__ = None

    def __repr__(self):
        return f"{self.label}: {self.best_hand}"


def parse_hand(hand) -> list[Card]:
    """
    Turn "Ah, Kd,2c" or ["Ah", "Kd", "2c"] into Cards. Size is checked by ``Hand``.
    """
    if isinstance(hand, str):
        hand = re.sub(r"\s", "", hand)
        tokens = hand.split(",") if hand else []
    else:
        tokens = list(hand)
    return [t if isinstance(t, Card) else parse_card(t) for t in tokens]


def evaluate_hand(hand) -> Hand:
    """
    Rank a 3, 5, 6 or 7 card poker hand.

    Raises:
        InvalidCardToken: a token does not parse to a rank and a suit.
        InvalidHandSize: the hand is not 3, 5, 6 or 7 cards.
        InvalidArgument: the same card appears twice.
    """
    return Hand(parse_hand(hand))


def compare_hands(a: Hand, b: Hand) -> int:
    """Positive when ``a`` beats ``b``, negative when it loses, zero on a split."""
    return (a.value > b.value) - (a.value < b.value)
