# app/routes/deck_routes.py

from functools import lru_cache
from typing import Optional

import redis
from fastapi import APIRouter, Depends, Query

from app import settings
from app.protocol.message_models import (
    DeckResponse,
    DrawData,
    DrawResponse,
    HandInfo,
    HandResponse,
)
from app.services.deck_service import DeckService
from app.services.deck_store import DeckStore, InMemoryDeckStore, RedisDeckStore
from decklogic import cards_to_tokens
from decklogic.errors import MissingParameter

router = APIRouter(prefix="/decks", tags=["decks"])


@lru_cache(maxsize=1)
def get_deck_store() -> DeckStore:
    if settings.DECK_STORE == "memory":
        return InMemoryDeckStore()
    client = redis.Redis.from_url(settings.REDIS_URL, decode_responses=True)
    return RedisDeckStore(client, prefix=settings.DECK_KEY_PREFIX, ttl=settings.DECK_TTL_SECONDS)


def get_deck_service(store: DeckStore = Depends(get_deck_store)) -> DeckService:
    return DeckService(store)


# ✅ /v1/decks/create
@router.post("/create", response_model=DeckResponse)
def create_deck(service: DeckService = Depends(get_deck_service)):
    return DeckResponse.from_record(service.create())


# ✅ /v1/decks/find?id=
@router.get("/find", response_model=DeckResponse)
def find_deck(id: Optional[str] = Query(None), service: DeckService = Depends(get_deck_service)):
    return DeckResponse.from_record(service.find(id))


# ✅ /v1/decks/shuffle?id=
@router.patch("/shuffle", response_model=DeckResponse)
def shuffle_deck(id: Optional[str] = Query(None), service: DeckService = Depends(get_deck_service)):
    return DeckResponse.from_record(service.shuffle(id))


# ✅ /v1/decks/draw?id=&count=
@router.patch("/draw", response_model=DrawResponse)
def draw_cards(id: Optional[str] = Query(None),
               count: Optional[str] = Query(None),
               service: DeckService = Depends(get_deck_service)):
    if count is None or not count.strip():
        raise MissingParameter("The 'count' parameter is required.")
    record, result = service.draw(id, count)
    return DrawResponse(
        deckId=record.deckId,
        deck=record.deck,
        data=DrawData(
            shuffled=record.data.shuffled,
            remainingCards=record.data.remainingCards,
            drawnCards=cards_to_tokens(result.cards_drawn),
            amountDrawn=result.amount_drawn,
        ),
    )


# ✅ /v1/decks/reset?id=
@router.post("/reset", response_model=DeckResponse)
def reset_deck(id: Optional[str] = Query(None), service: DeckService = Depends(get_deck_service)):
    return DeckResponse.from_record(service.reset(id))


# ✅ /v1/decks/evalhand?hand=Ah,As,2c,5d,9h
@router.get("/evalhand", response_model=HandResponse)
def evaluate_hand(hand: Optional[str] = Query(None)):
    result = DeckService.evaluate(hand)
    return HandResponse(hand=HandInfo(
        name=result.label,
        type=result.name,
        rank=result.rank,
        value=result.value,
        cards=cards_to_tokens(result.best_hand),
    ))
