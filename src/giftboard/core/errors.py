class GiftBoardError(Exception):
    """Base class for every error raised by the engine."""


class ValidationError(GiftBoardError):
    """A gift event or player name was malformed. Nothing was changed."""


class ConfigurationError(GiftBoardError):
    """The configuration cannot be satisfied by the current board.

    Raised for invalid settings and when bonus relocation or randomization
    cannot find a free tile.
    """
