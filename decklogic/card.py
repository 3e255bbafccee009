# decklogic/card.py

from .errors import InvalidCardToken


class Card:
    SUITS = ['c', 'd', 'h', 's']  # clubs, diamonds, hearts, spades
    RANKS = ['2', '3', '4', '5', '6', '7', '8', '9', 'T', 'J', 'Q', 'K', 'A']  # T is 10
    SUIT_SYMBOLS = {'♣': 'c', '♦': 'd', '♥': 'h', '♠': 's'}

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank: str, suit: str):
        if suit in Card.SUIT_SYMBOLS:
            suit = Card.SUIT_SYMBOLS[suit]
        suit = suit.lower()
        if rank == '10':
            rank = 'T'
        rank = rank.upper()
        if rank not in Card.RANKS:
            raise InvalidCardToken(f"Invalid rank: {rank}")
        if suit not in Card.SUITS:
            raise InvalidCardToken(f"Invalid suit: {suit}")
        object.__setattr__(self, "_rank", rank)
        object.__setattr__(self, "_suit", suit)

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    @property
    def rank(self) -> str:
        return self._rank

    @property
    def suit(self) -> str:
        return self._suit

    @property
    def token(self) -> str:
        return f"{self._rank}{self._suit}"

    def rank_value(self) -> int:
        # 2..14, ace high
        return Card.RANKS.index(self._rank) + 2

    def __repr__(self):
        return self.token

    def __str__(self):
        return self.token

    def __lt__(self, other):
        return self.rank_value() < other.rank_value()

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank == other._rank and self._suit == other._suit

    def __hash__(self):
        return hash((self._rank, self._suit))


def parse_card(token: str) -> Card:
    """
    Parse a rank+suit shorthand such as "Ah", "2c", "Th" or "10h".

    Raises:
        InvalidCardToken: the token is not a known rank followed by a known suit.
    """
    if not isinstance(token, str):
        raise InvalidCardToken(f"Invalid card token: {token!r}")
    token = token.strip()
    if len(token) not in (2, 3):
        raise InvalidCardToken(f"Invalid card token: {token!r}")
    try:
        return Card(token[:-1], token[-1])
    except InvalidCardToken:
        raise InvalidCardToken(f"Invalid card token: {token!r}") from None


def parse_cards(tokens) -> list[Card]:
    return [parse_card(token) for token in tokens]


def cards_to_tokens(cards) -> list[str]:
    return [card.token for card in cards]
