"""Exceptions raised by the engine and the match sequencer."""


class UnoError(Exception):
    """Base class for rejected actions. The state passed in is never modified."""


class InvalidPlayerCount(UnoError, ValueError):
    pass


class InvalidCardsPerPlayer(UnoError, ValueError):
    pass


class GameEnded(UnoError):
    """The hand is over; nobody is in turn."""


NoActivePlayer = GameEnded


class CardNotFound(UnoError, IndexError):
    pass


InvalidIndex = CardNotFound


class IllegalColorAssignment(UnoError, ValueError):
    """A color was given for a colored card, or left out for a wild card."""


class IllegalPlay(UnoError, ValueError):
    pass


class PlayerIndexOutOfBounds(UnoError, IndexError):
    pass


class NotEnoughCards(UnoError):
    pass


class NoActiveHand(UnoError):
    pass


class NotPlayersTurn(UnoError, ValueError):
    pass


class InvalidTargetScore(UnoError, ValueError):
    pass
