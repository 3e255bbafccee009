# app/services/deck_service.py

import uuid
from random import Random
from typing import Callable, Optional

from app.protocol.message_models import DeckData, DeckRecord
from app.services.deck_store import DeckStore
from app.services.logger_utils import make_logger
from decklogic import (
    DrawResult,
    Hand,
    cards_to_tokens,
    create_deck,
    draw_cards,
    evaluate_hand,
    parse_cards,
    shuffle_deck,
)
from decklogic.errors import MissingParameter, PersistenceFailure, RecordNotFound

MAX_ID_ATTEMPTS = 5

logger = make_logger("deck_service")


def generate_deck_id() -> str:
    return str(uuid.uuid4())


def make_record(deck_id: str, cards: list, shuffled: bool) -> DeckRecord:
    return DeckRecord(
        deckId=deck_id,
        deck=cards_to_tokens(cards),
        data=DeckData(shuffled=shuffled, remainingCards=len(cards)),
    )


class DeckService:
    """
    Store-backed deck operations.

    Each mutation builds the complete new record first and writes it with a
    single ``put``, so a failed write leaves the previous record in place.
    Concurrent writers to the same deckId are last-writer-wins.
    """

    def __init__(self,
                 store: DeckStore,
                 id_factory: Callable[[], str] = generate_deck_id,
                 rng: Optional[Random] = None):
        self.store = store
        self.id_factory = id_factory
        self.rng = rng

    def _load(self, deck_id: Optional[str]) -> DeckRecord:
        if deck_id is None or not deck_id.strip():
            raise MissingParameter("The 'id' parameter is required.")
        record = self.store.get(deck_id)
        if record is None:
            raise RecordNotFound("Could not find a deck by that ID.")
        return record

    def _new_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            deck_id = self.id_factory()
            if self.store.get(deck_id) is None:
                return deck_id
            logger(f"⚠️ deck id collision: {deck_id} → retrying")
        raise PersistenceFailure("Could not allocate a unique deck ID.")

    # ✅ create
    def create(self) -> DeckRecord:
        deck_id = self._new_id()
        record = make_record(deck_id, create_deck(), shuffled=False)
        self.store.put(deck_id, record)
        logger(f"deck {deck_id} created")
        return record

    # ✅ find
    def find(self, deck_id: Optional[str]) -> DeckRecord:
        return self._load(deck_id)

    # ✅ shuffle the cards that are still in the deck
    def shuffle(self, deck_id: Optional[str]) -> DeckRecord:
        record = self._load(deck_id)
        shuffled = shuffle_deck(parse_cards(record.deck), rng=self.rng)
        updated = make_record(record.deckId, shuffled, shuffled=True)
        self.store.put(record.deckId, updated)
        logger(f"deck {record.deckId} shuffled ({len(shuffled)} cards)")
        return updated

    # ✅ draw from the front
    def draw(self, deck_id: Optional[str], count) -> tuple[DeckRecord, DrawResult]:
        record = self._load(deck_id)
        result = draw_cards(parse_cards(record.deck), count)
        updated = make_record(record.deckId, result.updated_deck, shuffled=record.data.shuffled)
        self.store.put(record.deckId, updated)
        logger(f"deck {record.deckId}: drew {result.amount_drawn}, {result.remaining_cards} left")
        return updated, result

    # ✅ back to a fresh, ordered 52-card deck
    def reset(self, deck_id: Optional[str]) -> DeckRecord:
        record = self._load(deck_id)
        updated = make_record(record.deckId, create_deck(), shuffled=False)
        self.store.put(record.deckId, updated)
        logger(f"deck {record.deckId} reset")
        return updated

    @staticmethod
    def evaluate(hand) -> Hand:
        if hand is None or (isinstance(hand, str) and not hand.strip()):
            raise MissingParameter("The 'hand' parameter is required.")
        return evaluate_hand(hand)
