# decklogic/__init__.py

from .card import Card, parse_card, parse_cards, cards_to_tokens
from .deck import DECK_SIZE, DrawResult, create_deck, shuffle_deck, draw_cards
from .hand import Hand, HandCategory, evaluate_hand, compare_hands, parse_hand
from .errors import (
    DeckError,
    MissingParameter,
    InvalidArgument,
    InvalidHandSize,
    InvalidCardToken,
    RecordNotFound,
    PersistenceFailure,
)

__all__ = [
    "Card", "parse_card", "parse_cards", "cards_to_tokens",
    "DECK_SIZE", "DrawResult", "create_deck", "shuffle_deck", "draw_cards",
    "Hand", "HandCategory", "evaluate_hand", "compare_hands", "parse_hand",
    "DeckError", "MissingParameter", "InvalidArgument", "InvalidHandSize",
    "InvalidCardToken", "RecordNotFound", "PersistenceFailure",
]
