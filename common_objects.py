from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from line_profiler import LineProfiler
from errors import RankNotValid, SeatNotValid, SuitNotValid, TooLong, TooShort

@total_ordering
class Suit(Enum):
    CLUBS       = (0, "C", "♣")
    DIAMONDS    = (1, "D", "♦")
    HEARTS      = (2, "H", "♥")
    SPADES      = (3, "S", "♠")

    __from_str_map__ = {
        "clubs": CLUBS,
        "club": CLUBS,
        "c": CLUBS,
        "♣": CLUBS,
        "diamonds": DIAMONDS,
        "diamond": DIAMONDS,
        "d": DIAMONDS,
        "♦": DIAMONDS,
        "hearts": HEARTS,
        "heart": HEARTS,
        "h": HEARTS,
        "♥": HEARTS,
        "spades": SPADES,
        "spade": SPADES,
        "s": SPADES,
        "♠": SPADES,
    }

    @classmethod
    def from_str(cls, suit_str: str) -> "Suit":
        try:
            return Suit(cls.__from_str_map__[suit_str.strip().lower()])
        except KeyError:
            raise SuitNotValid(suit_str) from None

    @classmethod
    def from_char(cls, suit_char: str) -> "Suit":
        """Single letter form used in card strings ("S", "H", "D", "C")."""
        for suit in cls:
            if suit.abbreviation() == suit_char.upper():
                return suit
        raise SuitNotValid(suit_char)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Suit):
            return NotImplemented
        return self.value[0] < other.value[0]

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.symbol()

    def abbreviation(self) -> str:
        return self.value[1]

    def symbol(self) -> str:
        return self.value[2]


@total_ordering
class Rank(Enum):
    TWO     = (2, "2")
    THREE   = (3, "3")
    FOUR    = (4, "4")
    FIVE    = (5, "5")
    SIX     = (6, "6")
    SEVEN   = (7, "7")
    EIGHT   = (8, "8")
    NINE    = (9, "9")
    TEN     = (10, "T")
    JACK    = (11, "J")
    QUEEN   = (12, "Q")
    KING    = (13, "K")
    ACE     = 14, "A"

    __from_str_map__ = {
        "2": TWO,
        "3": THREE,
        "4": FOUR,
        "5": FIVE,
        "6": SIX,
        "7": SEVEN,
        "8": EIGHT,
        "9": NINE,
        "10": TEN,
        "T": TEN,
        "J": JACK,
        "Q": QUEEN,
        "K": KING,
        "A": ACE,
    }

    @classmethod
    def from_str(cls, rank_str: str) -> "Rank":
        try:
            return Rank(cls.__from_str_map__[rank_str.strip().upper()])
        except KeyError:
            raise RankNotValid(rank_str) from None

    def __lt__(self, other) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value[0] < other.value[0]

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return "10" if self is Rank.TEN else self.value[1]

    def abbreviation(self) -> str:
        return self.value[1]

    def high_card_points(self) -> int:
        return max(self.value[0] - 10, 0)


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: Rank

    @classmethod
    def from_str(cls, card_str: str) -> "Card":
        """
        Parse a two character card such as "TH" or "2c": rank first, then suit.
        """
        card_str = card_str.strip()
        if len(card_str) < 2:
            raise TooShort(card_str)
        if len(card_str) > 2:
            raise TooLong(card_str)
        return cls(suit=Suit.from_char(card_str[1]), rank=Rank.from_str(card_str[0]))

    def __str__(self) -> str:
        return f"{self.suit.symbol()}{self.rank}"


class Seat(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    __from_str_map__ = {
        "N": NORTH, "NORTH": NORTH,
        "E": EAST, "EAST": EAST,
        "S": SOUTH, "SOUTH": SOUTH,
        "W": WEST, "WEST": WEST,
    }

    @classmethod
    def from_str(cls, seat_str: str) -> "Seat":
        try:
            return Seat(cls.__from_str_map__[seat_str.strip().upper()])
        except KeyError:
            raise SeatNotValid(seat_str) from None

    def __repr__(self) -> str:
        return self.name

    def __add__(self, steps: int) -> "Seat":
        return self.offset(steps)

    def __sub__(self, other):
        # Seat - Seat is the clockwise distance, Seat - int rotates backwards
        if isinstance(other, Seat):
            return (self.value - other.value) % 4
        return self.offset(-other)

    def offset(self, offset: int) -> "Seat":
        return Seat((self.value + offset) % 4)

    def next(self) -> "Seat":
        return self.offset(1)

    def partner(self) -> "Seat":
        return self.offset(2)

    def previous(self) -> "Seat":
        return self.offset(3)

    def abbreviation(self) -> str:
        return self.name[0]

lineProf: LineProfiler = LineProfiler()
