# app/services/deck_store.py

from typing import Optional, Protocol

import redis
from pydantic import ValidationError

from app.protocol.message_models import DeckRecord
from app.services.logger_utils import make_logger
from decklogic.errors import PersistenceFailure

log_error = make_logger("deck_store", error=True)


class DeckStore(Protocol):
    """Key-value persistence for deck records, keyed by deckId."""

    def put(self, deck_id: str, record: DeckRecord) -> None:
        ...

    def get(self, deck_id: str) -> Optional[DeckRecord]:
        ...


# ================================================================
# ✅ In-process store (tests, DECK_STORE=memory)
# ================================================================

class InMemoryDeckStore:
    def __init__(self):
        self._records: dict[str, str] = {}

    def put(self, deck_id: str, record: DeckRecord) -> None:
        # keep a serialized copy so callers can't mutate stored state
        self._records[deck_id] = record.model_dump_json()

    def get(self, deck_id: str) -> Optional[DeckRecord]:
        raw = self._records.get(deck_id)
        if raw is None:
            return None
        return DeckRecord.model_validate_json(raw)

    def ping(self) -> bool:
        return True


# ================================================================
# ✅ Redis store
# ================================================================

class RedisDeckStore:
    def __init__(self, client: redis.Redis, prefix: str = "deck:", ttl: Optional[int] = None):
        self.r = client
        self.prefix = prefix
        self.ttl = ttl or None

    def _key(self, deck_id: str) -> str:
        return f"{self.prefix}{deck_id}"

    def put(self, deck_id: str, record: DeckRecord) -> None:
        try:
            self.r.set(self._key(deck_id), record.model_dump_json(), ex=self.ttl)
        except redis.RedisError as e:
            log_error(f"write failed for {deck_id}: {e}")
            raise PersistenceFailure("Could not save the deck.") from e

    def get(self, deck_id: str) -> Optional[DeckRecord]:
        try:
            raw = self.r.get(self._key(deck_id))
        except redis.RedisError as e:
            log_error(f"read failed for {deck_id}: {e}")
            raise PersistenceFailure("Could not load the deck.") from e
        if raw is None:
            return None
        try:
            return DeckRecord.model_validate_json(raw)
        except ValidationError as e:
            log_error(f"corrupt record under {self._key(deck_id)}: {e}")
            raise PersistenceFailure("Stored deck is unreadable.") from e

    def ping(self) -> bool:
        try:
            return bool(self.r.ping())
        except redis.RedisError:
            return False
