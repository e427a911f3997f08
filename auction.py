from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from typing import Iterable, List, Optional, Tuple
from common_objects import Seat, Suit
from errors import BidLevelNotAnInteger, BidLevelOutOfBounds, TooShort

logger = logging.getLogger(__name__)

MIN_LEVEL: int = 1
MAX_LEVEL: int = 7
ALL_PASS_TOKEN: str = "AP"
TABLE_HEADER: str = "+-- N --+-- E --+-- S --+-- W --+"
TABLE_DIVIDER: str = "+-------+-------+-------+-------+"

@total_ordering
class BiddingSuit(Enum):
    """A denomination: one of the four suits, or no trumps which outranks them all."""
    CLUBS       = (0, Suit.CLUBS)
    DIAMONDS    = (1, Suit.DIAMONDS)
    HEARTS      = (2, Suit.HEARTS)
    SPADES      = (3, Suit.SPADES)
    NO_TRUMPS   = (4, None)

    __no_trumps_names__ = ("nt", "notrumps", "no trumps")

    @classmethod
    def from_suit(cls, suit: Suit) -> "BiddingSuit":
        for bidding_suit in cls:
            if bidding_suit.suit is suit:
                return bidding_suit
        raise ValueError(f"Unknown suit {suit!r}")

    @classmethod
    def from_str(cls, suit_str: str) -> "BiddingSuit":
        if suit_str.strip().lower() in cls.__no_trumps_names__:
            return cls.NO_TRUMPS
        return cls.from_suit(Suit.from_str(suit_str))

    @property
    def suit(self) -> Optional[Suit]:
        return self.value[1]

    def __lt__(self, other) -> bool:
        if not isinstance(other, BiddingSuit):
            return NotImplemented
        return self.value[0] < other.value[0]

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return "NT" if self.suit is None else self.suit.symbol()

    def abbreviation(self) -> str:
        return "NT" if self.suit is None else self.suit.abbreviation()


@total_ordering
@dataclass(frozen=True)
class ContractBid:
    """A level from 1 to 7 and a denomination. Bids are ordered by level, then denomination."""
    level: int
    suit: BiddingSuit

    def __post_init__(self):
        if not isinstance(self.suit, BiddingSuit):
            raise TypeError(f"suit must be BiddingSuit, got {type(self.suit)}")
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise BidLevelOutOfBounds(str(self.level))
        if not MIN_LEVEL <= self.level <= MAX_LEVEL:
            raise BidLevelOutOfBounds(str(self.level))

    @classmethod
    def from_str(cls, bid_str: str) -> "ContractBid":
        """
        Parse a bid such as "1s", "3NT" or "4 hearts".
        The first character is the level, everything after it is the denomination.
        """
        bid_str = bid_str.strip()
        if not bid_str:
            raise TooShort(bid_str)
        level_str, suit_str = bid_str[0], bid_str[1:]
        if level_str not in "0123456789":
            raise BidLevelNotAnInteger(level_str)
        level: int = int(level_str)
        if not MIN_LEVEL <= level <= MAX_LEVEL:
            raise BidLevelOutOfBounds(level_str)
        return cls(level, BiddingSuit.from_str(suit_str))

    def _key(self) -> Tuple[int, int]:
        return (self.level, self.suit.value[0])

    def __lt__(self, other) -> bool:
        if not isinstance(other, ContractBid):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.level}{self.suit}"

    def abbreviation(self) -> str:
        return f"{self.level}{self.suit.abbreviation()}"


class BidKind(Enum):
    BID = "Bid"
    PASS = "Pass"
    DOUBLE = "Dbl"
    REDOUBLE = "Redbl"


class Comparison(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1
    INCOMPARABLE = None


@dataclass(frozen=True)
class AuctionBid:
    """
    A single call in an auction: a bid, or Pass, Double or Redouble.

    Only two bids can be ordered against each other. Every other pairing,
    Pass against Pass included, is incomparable: <, <=, > and >= are all False.
    Equality is plain value equality. Sorting a list that mixes bids and other
    calls is not supported.
    """
    kind: BidKind
    bid: Optional[ContractBid] = None

    __synonyms__ = {
        "pass": BidKind.PASS,
        "p": BidKind.PASS,
        "nobid": BidKind.PASS,
        "double": BidKind.DOUBLE,
        "x": BidKind.DOUBLE,
        "dbl": BidKind.DOUBLE,
        "redouble": BidKind.REDOUBLE,
        "xx": BidKind.REDOUBLE,
        "redbl": BidKind.REDOUBLE,
    }

    def __post_init__(self):
        if not isinstance(self.kind, BidKind):
            raise TypeError(f"kind must be BidKind, got {type(self.kind)}")
        if (self.kind is BidKind.BID) != (self.bid is not None):
            raise ValueError(f"{self.kind.name} call with bid {self.bid!r}")

    @classmethod
    def of(cls, bid: ContractBid) -> "AuctionBid":
        return cls(BidKind.BID, bid)

    @classmethod
    def suit_bid(cls, level: int, suit: BiddingSuit) -> "AuctionBid":
        return cls(BidKind.BID, ContractBid(level, suit))

    @classmethod
    def from_str(cls, call_str: str) -> "AuctionBid":
        """Parse a call. Case and all whitespace are ignored ("no bid" == "NOBID")."""
        massaged: str = "".join(call_str.lower().split())
        kind: Optional[BidKind] = cls.__synonyms__.get(massaged)
        if kind is not None:
            return cls(kind)
        return cls.of(ContractBid.from_str(massaged))

    def is_bid(self) -> bool:
        return self.kind is BidKind.BID

    def compare(self, other: "AuctionBid") -> Comparison:
        if not isinstance(other, AuctionBid):
            raise TypeError(f"Cannot compare AuctionBid with {type(other)}")
        if self.bid is None or other.bid is None:
            return Comparison.INCOMPARABLE
        if self.bid < other.bid:
            return Comparison.LESS
        if self.bid > other.bid:
            return Comparison.GREATER
        return Comparison.EQUAL

    def __lt__(self, other: "AuctionBid") -> bool:
        if not isinstance(other, AuctionBid):
            return NotImplemented
        return self.compare(other) is Comparison.LESS

    def __le__(self, other: "AuctionBid") -> bool:
        if not isinstance(other, AuctionBid):
            return NotImplemented
        return self.compare(other) in (Comparison.LESS, Comparison.EQUAL)

    def __gt__(self, other: "AuctionBid") -> bool:
        if not isinstance(other, AuctionBid):
            return NotImplemented
        return self.compare(other) is Comparison.GREATER

    def __ge__(self, other: "AuctionBid") -> bool:
        if not isinstance(other, AuctionBid):
            return NotImplemented
        return self.compare(other) in (Comparison.GREATER, Comparison.EQUAL)

    def __str__(self) -> str:
        return self.to_str()

    def to_str(self, unicode_suits: bool = True) -> str:
        if self.bid is not None:
            return str(self.bid) if unicode_suits else self.bid.abbreviation()
        return self.kind.value

    def abbreviation(self) -> str:
        if self.kind is BidKind.BID:
            return self.bid.abbreviation()
        elif self.kind is BidKind.PASS:
            return "P"
        elif self.kind is BidKind.DOUBLE:
            return "X"
        elif self.kind is BidKind.REDOUBLE:
            return "XX"
        raise ValueError(f"Unknown call kind {self.kind!r}")


PASS: AuctionBid = AuctionBid(BidKind.PASS)
DOUBLE: AuctionBid = AuctionBid(BidKind.DOUBLE)
REDOUBLE: AuctionBid = AuctionBid(BidKind.REDOUBLE)


class Status(IntEnum):
    UNDOUBLED = 0
    DOUBLED = 1
    REDOUBLED = 2

    def __repr__(self) -> str:
        return self.name

    def suffix(self) -> str:
        return "X" * self.value


@dataclass(frozen=True)
class Contract:
    bid: ContractBid
    status: Status = Status.UNDOUBLED

    @classmethod
    def from_bid(cls, bid: ContractBid) -> "Contract":
        return cls(bid, Status.UNDOUBLED)

    @classmethod
    def from_str(cls, contract_str: str) -> "Contract":
        """
        Parse contract shorthand such as "3Hxx" or "4 diamond x x".
        Up to two trailing "x" set the status, the rest is the bid.
        """
        massaged: str = "".join(contract_str.lower().split())
        status: Status = Status.UNDOUBLED
        if not massaged:
            raise TooShort(contract_str)
        if massaged[-1] == "x":
            status = Status.DOUBLED
            massaged = massaged[:-1]
            if not massaged:
                raise TooShort(contract_str)
            if massaged[-1] == "x":
                status = Status.REDOUBLED
                massaged = massaged[:-1]
        return cls(ContractBid.from_str(massaged), status)

    def __str__(self) -> str:
        return f"{self.bid}{self.status.suffix()}"

    def abbreviation(self) -> str:
        return f"{self.bid.abbreviation()}{self.status.suffix()}"


class Auction:
    """
    The calls made at one table, starting with the dealer and rotating clockwise.

    The auction keeps its own list of calls. It records whatever it is given:
    insufficient bids, doubles of partner and calls after the auction closed
    are all accepted, legality is the caller's business.
    """

    def __init__(self, dealer: Seat = Seat.NORTH, bids: Optional[Iterable[AuctionBid]] = None):
        if not isinstance(dealer, Seat):
            raise TypeError(f"dealer must be Seat, got {type(dealer)}")
        self._dealer: Seat = dealer
        self._sequence: List[AuctionBid] = []
        for bid in bids or ():
            self.append(bid)

    @classmethod
    def from_str(cls, dealer: Seat, auction_str: str) -> "Auction":
        """
        Build an auction from a dash separated string of calls, e.g. "1N-P-3N-AP".
        "AP" passes until the auction is closed.
        """
        auction = cls(dealer)
        if not auction_str.strip():
            return auction
        for token in auction_str.split("-"):
            if token.strip().upper() == ALL_PASS_TOKEN:
                while not auction.closed():
                    auction.append(PASS)
            else:
                auction.append(AuctionBid.from_str(token))
        return auction

    @property
    def dealer(self) -> Seat:
        return self._dealer

    @property
    def sequence(self) -> Tuple[AuctionBid, ...]:
        return tuple(self._sequence)

    def __len__(self) -> int:
        return len(self._sequence)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Auction):
            return NotImplemented
        return self._dealer == other._dealer and self._sequence == other._sequence

    def __repr__(self) -> str:
        return f"Auction(dealer={self._dealer!r}, sequence={self._sequence!r})"

    def append(self, bid: AuctionBid) -> None:
        if not isinstance(bid, AuctionBid):
            raise TypeError(f"bid must be AuctionBid, got {type(bid)}")
        if self.closed():
            logger.debug(f"Call {bid} made after the auction closed")
        self._sequence.append(bid)

    def turn(self) -> Seat:
        return self._dealer + len(self._sequence)

    def bids_for(self, seat: Seat) -> List[AuctionBid]:
        if not isinstance(seat, Seat):
            raise TypeError(f"seat must be Seat, got {type(seat)}")
        return self._sequence[seat - self._dealer::4]

    def closed(self) -> bool:
        return len(self._sequence) >= 4 and all(bid == PASS for bid in self._sequence[-3:])

    def contract(self) -> Optional[Contract]:
        """
        The last bid made, doubled or redoubled by the calls that followed it.
        None if nobody bid.
        """
        status: Status = Status.UNDOUBLED
        for call in reversed(self._sequence):
            if call.kind is BidKind.PASS:
                continue
            elif call.kind is BidKind.DOUBLE:
                status = max(status, Status.DOUBLED)
            elif call.kind is BidKind.REDOUBLE:
                status = max(status, Status.REDOUBLED)
            elif call.kind is BidKind.BID:
                return Contract(call.bid, status)
            else:
                raise ValueError(f"Unknown call kind {call.kind!r}")
        return None

    def to_table(self, unicode_suits: bool = True) -> str:
        cells: List[str] = [""] * self._dealer.value
        cells.extend(bid.to_str(unicode_suits) for bid in self._sequence)

        lines: List[str] = [TABLE_HEADER]
        for row_start in range(0, len(cells), 4):
            row: List[str] = cells[row_start:row_start + 4]
            row.extend([""] * (4 - len(row)))
            lines.append("| " + " | ".join(f"{cell:<5}" for cell in row) + " |")
            lines.append(TABLE_DIVIDER)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_table()

    def abbreviation(self) -> str:
        return "-".join(bid.abbreviation() for bid in self._sequence)
