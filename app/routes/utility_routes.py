# app/routes/utility_routes.py

from time import time
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.protocol.message_models import HealthData, HealthResponse, PrimeData, PrimeResponse
from app.routes.deck_routes import get_deck_store
from app.services.deck_store import DeckStore, InMemoryDeckStore
from decklogic.errors import InvalidArgument, MissingParameter

router = APIRouter(tags=["utility"])

START_TIME = time()


# largest integer JS parseInt represents exactly
MAX_PRIME_INPUT = 2 ** 53

# deterministic Miller-Rabin witnesses for every n < 3.3e24
WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    for p in WITNESSES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in WITNESSES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def parse_number(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        raise MissingParameter("The 'number' parameter is required.")
    try:
        n = int(raw.strip())
    except ValueError:
        raise InvalidArgument(f"Not an integer: {raw!r}") from None
    if abs(n) > MAX_PRIME_INPUT:
        raise InvalidArgument(f"Number out of range, limit is ±{MAX_PRIME_INPUT}.")
    return n


# ✅ /v1/health
@router.get("/health", response_model=HealthResponse)
def health(store: DeckStore = Depends(get_deck_store)):
    ping = getattr(store, "ping", None)
    return HealthResponse(data=HealthData(
        uptime=round(time() - START_TIME, 3),
        store="memory" if isinstance(store, InMemoryDeckStore) else "redis",
        storeReachable=ping() if ping else None,
    ))


# ✅ /v1/prime?number=7 and /v1/prime/7
@router.get("/prime", response_model=PrimeResponse)
def prime_query(number: Optional[str] = Query(None)):
    n = parse_number(number)
    return PrimeResponse(data=PrimeData(number=n, isPrime=is_prime(n)))


@router.get("/prime/{number}", response_model=PrimeResponse)
def prime_path(number: str):
    n = parse_number(number)
    return PrimeResponse(data=PrimeData(number=n, isPrime=is_prime(n)))
