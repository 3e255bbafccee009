# decklogic/errors.py


class DeckError(Exception):
    """Base class for every error the deck API reports back as a 400."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__


class MissingParameter(DeckError):
    pass


class InvalidArgument(DeckError):
    pass


class InvalidHandSize(DeckError):
    pass


class InvalidCardToken(DeckError):
    pass


class RecordNotFound(DeckError):
    pass


class PersistenceFailure(DeckError):
    pass
