"""Grouping of a hand's ranks by how many cards share them."""
from collections import Counter
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple
import logging

from poker_hands.core.card import Card, Rank

logger = logging.getLogger(__name__)


class GroupKind(Enum):
    """Group a rank falls in; the value is the number of cards sharing it."""
    QUADRUPLET = 4
    TRIPLET = 3
    PAIR = 2
    SINGLE = 1


class RankGroups:
    """
    Ranks of a hand bucketed by group kind.

    Every rank of the hand lands in exactly one group, and each group's
    ranks are kept highest first. Built once per classification and thrown
    away afterwards.
    """

    def __init__(self, groups: Dict[GroupKind, Tuple[Rank, ...]]):
        self._groups = groups

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> 'RankGroups':
        """
        Count each rank among the cards and bucket ranks by their count.

        Args:
            cards: Cards to group

        Returns:
            RankGroups for those cards
        """
        counts = Counter(card.rank for card in cards)

        buckets: Dict[GroupKind, list] = {}
        for rank, count in counts.items():
            buckets.setdefault(GroupKind(count), []).append(rank)

        groups = {
            kind: tuple(sorted(ranks, reverse=True))
            for kind, ranks in buckets.items()
        }
        return cls(groups)

    def get(self, kind: GroupKind) -> Optional[Tuple[Rank, ...]]:
        """Ranks in the given group, highest first, or None if the group is empty."""
        return self._groups.get(kind)

    def count(self, kind: GroupKind) -> int:
        """Number of distinct ranks in the given group."""
        return len(self._groups.get(kind, ()))

    def __contains__(self, kind: object) -> bool:
        return kind in self._groups

    def __repr__(self) -> str:
        parts = ', '.join(
            f"{kind.name.lower()}={[rank.token for rank in ranks]}"
            for kind, ranks in self._groups.items()
        )
        return f"RankGroups({parts})"
