"""Parse errors raised by the bridge text grammars (suits, ranks, cards, seats, bids, contracts)."""


class ParseError(ValueError):
    """Text could not be parsed."""

    def __init__(self, text: str = ""):
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        description = self.__doc__ or "Parse error."
        return f"{description} (got {self.text!r})" if self.text else description


class BidLevelOutOfBounds(ParseError):
    """Bid level must be between 1 and 7, inclusive."""

class TooShort(ParseError):
    """Input is too short."""

class TooLong(ParseError):
    """Input is too long."""

class BidLevelNotAnInteger(ParseError):
    """Bid level is not an integer."""

class SuitNotValid(ParseError):
    """Not a valid suit."""

class RankNotValid(ParseError):
    """Not a valid rank."""

class SeatNotValid(ParseError):
    """Not a valid seat."""
