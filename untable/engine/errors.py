"""Engine exceptions."""


class UntableError(Exception):
    """Base class for engine errors."""


class InvalidPlayerError(UntableError, ValueError):
    """Raised for a player number outside 1-4."""

    def __init__(self, player_number: object):
        super().__init__(f"Player number must be 1-4, got {player_number!r}")
        self.player_number = player_number
