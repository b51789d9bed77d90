"""Main poker hand evaluation interface."""
from typing import List, Sequence
import logging

from poker_hands.core.hand import Hand

logger = logging.getLogger(__name__)


class InvalidHandError(ValueError):
    """Raised when a hand in a batch does not resolve to five valid cards."""

    def __init__(self, hand_str: str, index: int):
        self.hand_str = hand_str
        self.index = index
        super().__init__(f"invalid hand #{index + 1}: {hand_str!r}")


def parse_hands(hand_strs: Sequence[str]) -> List[Hand]:
    """
    Parse every hand in a batch.

    Args:
        hand_strs: Hand lines such as '2C 5D 7H 9S 10C'

    Returns:
        Hands in input order

    Raises:
        InvalidHandError: On the first line that is not exactly five valid cards
    """
    hands = []
    for index, hand_str in enumerate(hand_strs):
        hand = Hand.parse(hand_str)
        if hand is None:
            logger.debug(f"Batch rejected at hand #{index + 1}")
            raise InvalidHandError(hand_str, index)
        hands.append(hand)
    return hands


def sort_hands(hands: Sequence[Hand]) -> List[Hand]:
    """Order hands from strongest to weakest; tied hands keep their order."""
    return sorted(hands, key=lambda hand: hand.combo, reverse=True)


def select_winners(hands: Sequence[Hand]) -> List[Hand]:
    """Hands whose combo equals the best combo, in their original order."""
    if not hands:
        return []

    best = max(hand.combo for hand in hands)
    winners = [hand for hand in hands if hand.combo == best]
    logger.info(f"{len(winners)} of {len(hands)} hands win with {best}")
    return winners


def rank_hands(hand_strs: Sequence[str]) -> List[Hand]:
    """
    Order a batch of hands from strongest to weakest.

    Tied hands keep their input order.

    Raises:
        InvalidHandError: If any hand is invalid
    """
    return sort_hands(parse_hands(hand_strs))


def winning_hands(hand_strs: Sequence[str]) -> List[str]:
    """
    Find the hands tied for best.

    Args:
        hand_strs: Hand lines

    Returns:
        The winning input strings themselves, in input order. Empty input
        gives an empty list.

    Raises:
        InvalidHandError: If any hand is invalid; no partial result is returned
    """
    return [hand.input for hand in select_winners(parse_hands(hand_strs))]
