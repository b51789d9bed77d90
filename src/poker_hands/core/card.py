"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits. Compared for equality only, never ordered."""
    CLUBS = 'C'
    DIAMONDS = 'D'
    HEARTS = 'H'
    SPADES = 'S'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str) -> Optional['Suit']:
        """Map a suit token ('C', 'D', 'H', 'S') to a Suit, or None."""
        return _SUIT_TOKENS.get(token)


class Rank(IntEnum):
    """
    Card ranks, Two lowest and Ace highest.

    The integer value doubles as the rank's position, so consecutive
    ranks differ by exactly one.
    """
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.token

    @property
    def token(self) -> str:
        """Input token for this rank ('2'..'10', 'J', 'Q', 'K', 'A')."""
        return _RANK_NAMES[self][0]

    @property
    def full_name(self) -> str:
        """Singular name, e.g. 'Queen'."""
        return _RANK_NAMES[self][1]

    @property
    def plural_name(self) -> str:
        """Plural name, e.g. 'Sixes'."""
        return _RANK_NAMES[self][2]

    @classmethod
    def from_token(cls, token: str) -> Optional['Rank']:
        """Map a rank token to a Rank, or None if the token is unknown."""
        return _RANK_TOKENS.get(token)


_RANK_NAMES = {
    Rank.TWO: ('2', 'Two', 'Twos'),
    Rank.THREE: ('3', 'Three', 'Threes'),
    Rank.FOUR: ('4', 'Four', 'Fours'),
    Rank.FIVE: ('5', 'Five', 'Fives'),
    Rank.SIX: ('6', 'Six', 'Sixes'),
    Rank.SEVEN: ('7', 'Seven', 'Sevens'),
    Rank.EIGHT: ('8', 'Eight', 'Eights'),
    Rank.NINE: ('9', 'Nine', 'Nines'),
    Rank.TEN: ('10', 'Ten', 'Tens'),
    Rank.JACK: ('J', 'Jack', 'Jacks'),
    Rank.QUEEN: ('Q', 'Queen', 'Queens'),
    Rank.KING: ('K', 'King', 'Kings'),
    Rank.ACE: ('A', 'Ace', 'Aces'),
}

_RANK_TOKENS = {names[0]: rank for rank, names in _RANK_NAMES.items()}
_SUIT_TOKENS = {suit.value: suit for suit in Suit}

# Shortest is '2C', longest is '10C'
MIN_TOKEN_LENGTH = 2
MAX_TOKEN_LENGTH = 3


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format '10H' for Ten of hearts."""
        return f"{self.rank.token}{self.suit.value}"

    @classmethod
    def parse(cls, token: str) -> Optional['Card']:
        """
        Parse a card token such as 'AC' or '10H'.

        Tokens are case-sensitive and ASCII only. Everything but the last
        character is the rank token, the last character is the suit token.

        Args:
            token: Card token

        Returns:
            Card instance, or None if the token is malformed
        """
        if not MIN_TOKEN_LENGTH <= len(token) <= MAX_TOKEN_LENGTH or not token.isascii():
            logger.debug(f"Dropping card token with bad format: {token!r}")
            return None

        rank = Rank.from_token(token[:-1])
        suit = Suit.from_token(token[-1])
        if rank is None or suit is None:
            logger.debug(f"Dropping card token with unknown rank or suit: {token!r}")
            return None

        return cls(rank=rank, suit=suit)

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'AS' for Ace of spades

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        card = cls.parse(card_str)
        if card is None:
            raise ValueError(f"Invalid card string: {card_str}")
        return card
