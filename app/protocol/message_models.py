# app/protocol/message_models.py

from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional


# ================================================================
# ✅ Stored records
# ================================================================

class DeckData(BaseModel):
    shuffled: bool = False
    remainingCards: int


class DeckRecord(BaseModel):
    deckId: str
    deck: List[str]
    data: DeckData


# ================================================================
# ✅ Response envelopes
# ================================================================

class Timestamps(BaseModel):
    date: str
    unix: int

    @classmethod
    def now(cls) -> "Timestamps":
        now = datetime.now()
        # matches JS Date.toLocaleString() in en-US, e.g. "10/19/2026, 6:49:00 PM"
        date = f"{now.month}/{now.day}/{now.year}, {now.hour % 12 or 12}:{now:%M:%S %p}"
        return cls(date=date, unix=round(now.timestamp()))


class Envelope(BaseModel):
    status: int = 200
    timestamps: Timestamps = Field(default_factory=Timestamps.now)


class ErrorResponse(Envelope):
    error: str
    message: str


class DeckResponse(Envelope):
    deckId: str
    deck: List[str]
    data: DeckData

    @classmethod
    def from_record(cls, record: DeckRecord) -> "DeckResponse":
        return cls(deckId=record.deckId, deck=record.deck, data=record.data)


class DrawData(DeckData):
    drawnCards: List[str]
    amountDrawn: int


class DrawResponse(Envelope):
    deckId: str
    deck: List[str]
    data: DrawData


class HandInfo(BaseModel):
    name: str
    type: str
    rank: int
    value: int
    cards: List[str]


class HandResponse(Envelope):
    hand: HandInfo


class HealthData(BaseModel):
    uptime: float
    store: str
    storeReachable: Optional[bool] = None


class HealthResponse(Envelope):
    data: HealthData


class PrimeData(BaseModel):
    number: int
    isPrime: bool


class PrimeResponse(Envelope):
    data: PrimeData
