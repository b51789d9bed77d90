"""Five-card hand built from a line of card tokens."""
from dataclasses import dataclass, field
from typing import Optional, Tuple
import logging

from poker_hands.core.card import Card
from poker_hands.evaluation.classifier import classify
from poker_hands.evaluation.combo import Combo
from poker_hands.evaluation.constants import HAND_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Hand:
    """
    A classified five-card poker hand.

    Hands order by their combo alone. Two hands with equal combos are tied,
    even when they hold different cards.

    Attributes:
        input: The exact string the hand was parsed from
        cards: The five cards, in input order
        combo: Category and tie-break ranks
    """
    input: str
    cards: Tuple[Card, ...]
    combo: Combo = field(compare=False)

    @classmethod
    def parse(cls, input: str) -> Optional['Hand']:
        """
        Parse a whitespace-separated line of card tokens.

        Malformed tokens are dropped; the hand is valid only if exactly
        five cards remain.

        Args:
            input: Line such as '2C 5D 7H 9S 10C'

        Returns:
            Hand, or None if the line does not yield exactly five cards
        """
        cards = tuple(
            card for card in (Card.parse(token) for token in input.split())
            if card is not None
        )
        if len(cards) != HAND_SIZE:
            logger.debug(f"Rejecting hand {input!r}: {len(cards)} valid cards")
            return None

        return cls(input=input, cards=cards, combo=classify(cards))

    def __str__(self) -> str:
        return self.input

    def __lt__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.combo < other.combo

    def __le__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.combo <= other.combo

    def __gt__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.combo > other.combo

    def __ge__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.combo >= other.combo

    def ties(self, other: 'Hand') -> bool:
        """True if both hands hold equal combos."""
        return self.combo == other.combo
