"""Classification of five cards into a comparable combo."""
from typing import Callable, Optional, Sequence, Tuple
import logging

from poker_hands.core.card import Card, Rank
from poker_hands.evaluation.combo import Combo, ComboCategory
from poker_hands.evaluation.constants import HAND_SIZE, WHEEL_ORDER, WHEEL_RANKS
from poker_hands.evaluation.grouping import GroupKind, RankGroups

logger = logging.getLogger(__name__)


class ClassificationError(RuntimeError):
    """Raised when a five-card hand matches no category."""


def straight_ranks(ranks: Sequence[Rank]) -> Optional[Tuple[Rank, ...]]:
    """
    Order five distinct ranks as a straight, if they form one.

    The wheel (A-2-3-4-5) comes back as Five, Four, Three, Two, Ace.

    Args:
        ranks: Five distinct ranks

    Returns:
        Ranks in straight order, or None if they are not sequential
    """
    ordered = tuple(sorted(ranks, reverse=True))
    if ordered == WHEEL_RANKS:
        return WHEEL_ORDER

    for higher, lower in zip(ordered, ordered[1:]):
        if higher - lower != 1:
            return None
    return ordered


def is_flush(cards: Sequence[Card]) -> bool:
    """True if every card shares the first card's suit."""
    suit = cards[0].suit
    return all(card.suit == suit for card in cards)


def _full_house(groups: RankGroups, cards: Sequence[Card]) -> Optional[Combo]:
    triplet, pair = groups.get(GroupKind.TRIPLET), groups.get(GroupKind.PAIR)
    if triplet and pair:
        return Combo(ComboCategory.FULL_HOUSE, (triplet[0], pair[0]))
    return None


def _four_of_a_kind(groups: RankGroups, cards: Sequence[Card]) -> Optional[Combo]:
    quadruplet = groups.get(GroupKind.QUADRUPLET)
    if quadruplet:
        kicker = groups.get(GroupKind.SINGLE)
        return Combo(ComboCategory.FOUR_OF_A_KIND, (quadruplet[0], kicker[0]))
    return None


def _three_of_a_kind(groups: RankGroups, cards: Sequence[Card]) -> Optional[Combo]:
    # Full house is checked first, so the other two cards are singles
    triplet = groups.get(GroupKind.TRIPLET)
    if triplet:
        kickers = groups.get(GroupKind.SINGLE)
        return Combo(ComboCategory.THREE_OF_A_KIND, (triplet[0], kickers[0], kickers[1]))
    return None


def _pairs(groups: RankGroups, cards: Sequence[Card]) -> Optional[Combo]:
    pairs = groups.get(GroupKind.PAIR)
    if not pairs:
        return None

    kickers = groups.get(GroupKind.SINGLE)
    if len(pairs) == 2:
        return Combo(ComboCategory.TWO_PAIR, (pairs[0], pairs[1], kickers[0]))
    if len(pairs) == 1:
        return Combo(ComboCategory.ONE_PAIR, (pairs[0],) + kickers[:3])
    return None


def _five_singles(groups: RankGroups) -> Optional[Tuple[Rank, ...]]:
    if groups.count(GroupKind.SINGLE) != HAND_SIZE:
        return None
    return groups.get(GroupKind.SINGLE)


def _straight_flush(groups: RankGroups, cards: Sequence[Card]) -> Optional[Combo]:
    singles = _five_singles(groups)
    if singles and is_flush(cards):
        straight = straight_ranks(singles)
        if straight:
            return Combo(ComboCategory.STRAIGHT_FLUSH, straight)
    return None


def _straight(groups: RankGroups, cards: Sequence[Card]) -> Optional[Combo]:
    singles = _five_singles(groups)
    if singles:
        straight = straight_ranks(singles)
        if straight:
            return Combo(ComboCategory.STRAIGHT, straight)
    return None


def _flush(groups: RankGroups, cards: Sequence[Card]) -> Optional[Combo]:
    singles = _five_singles(groups)
    if singles and is_flush(cards):
        return Combo(ComboCategory.FLUSH, singles)
    return None


def _high_card(groups: RankGroups, cards: Sequence[Card]) -> Optional[Combo]:
    singles = _five_singles(groups)
    if singles:
        return Combo(ComboCategory.HIGH_CARD, singles)
    return None


Detector = Callable[[RankGroups, Sequence[Card]], Optional[Combo]]

# Checked in order, first match wins
DETECTORS: Tuple[Detector, ...] = (
    _full_house,
    _four_of_a_kind,
    _three_of_a_kind,
    _pairs,
    _straight_flush,
    _straight,
    _flush,
    _high_card,
)


def classify(cards: Sequence[Card]) -> Combo:
    """
    Determine the combo for a five-card hand.

    Args:
        cards: Exactly five cards

    Returns:
        Combo for the hand

    Raises:
        ValueError: If not given exactly five cards
        ClassificationError: If no category matches, which means a bug
    """
    if len(cards) != HAND_SIZE:
        raise ValueError(f"Classification requires exactly {HAND_SIZE} cards, got {len(cards)}")

    groups = RankGroups.from_cards(cards)
    for detector in DETECTORS:
        combo = detector(groups, cards)
        if combo is not None:
            logger.debug(f"Classified {' '.join(str(c) for c in cards)} as {combo} from {groups!r}")
            return combo

    raise ClassificationError(f"No category matched {' '.join(str(c) for c in cards)}")
