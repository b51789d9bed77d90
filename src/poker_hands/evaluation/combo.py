"""Hand categories and the comparable combo derived from a hand."""
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from poker_hands.core.card import Rank
from poker_hands.evaluation.constants import CATEGORY_NAMES, TIE_BREAK_ARITY


class ComboCategory(IntEnum):
    """Hand categories, weakest first."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def display_name(self) -> str:
        return CATEGORY_NAMES[self.name]

    @property
    def arity(self) -> int:
        """Number of tie-break ranks a combo of this category carries."""
        return TIE_BREAK_ARITY[self.name]


@dataclass(frozen=True, order=True)
class Combo:
    """
    A hand's category plus its tie-break ranks.

    Combos order by category first, then by tie-break ranks compared
    element by element, most significant first.

    Attributes:
        category: Hand category
        ranks: Tie-break ranks, most significant first
    """
    category: ComboCategory
    ranks: Tuple[Rank, ...]

    def __post_init__(self):
        object.__setattr__(self, 'ranks', tuple(self.ranks))
        if len(self.ranks) != self.category.arity:
            raise ValueError(
                f"{self.category.display_name} requires exactly "
                f"{self.category.arity} tie-break ranks, got {len(self.ranks)}"
            )

    def __str__(self) -> str:
        ranks = ' '.join(rank.token for rank in self.ranks)
        return f"{self.category.display_name} [{ranks}]"
