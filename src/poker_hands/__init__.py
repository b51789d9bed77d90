"""Five-card poker hand evaluation package."""

from poker_hands.core.card import Card, Rank, Suit
from poker_hands.core.hand import Hand
from poker_hands.evaluation.classifier import ClassificationError, classify
from poker_hands.evaluation.combo import Combo, ComboCategory
from poker_hands.evaluation.evaluator import InvalidHandError, rank_hands, winning_hands

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Hand",
    "ClassificationError",
    "classify",
    "Combo",
    "ComboCategory",
    "InvalidHandError",
    "rank_hands",
    "winning_hands",
]
