"""Tests for five-card hand classification."""
import itertools
import logging
import sys

import pytest

from poker_hands.core.card import Card, Rank, Suit
from poker_hands.evaluation import classifier
from poker_hands.evaluation.classifier import (
    ClassificationError, classify, is_flush, straight_ranks
)
from poker_hands.evaluation.combo import Combo, ComboCategory

logger = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def setup_logging():
    """Set up logging for all tests."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )


def cards(hand_str):
    return [Card.from_string(token) for token in hand_str.split()]


A, K, Q, J, T = Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN


@pytest.mark.parametrize("hand_str,category,ranks", [
    ("KH QH JH 10H 9H", ComboCategory.STRAIGHT_FLUSH, (K, Q, J, T, Rank.NINE)),
    ("AS 2S 3S 4S 5S", ComboCategory.STRAIGHT_FLUSH,
     (Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, A)),
    ("9S 9H 9C 9D 2H", ComboCategory.FOUR_OF_A_KIND, (Rank.NINE, Rank.TWO)),
    ("3S 3H 3C JD JH", ComboCategory.FULL_HOUSE, (Rank.THREE, J)),
    ("2C 9C 5C KC 7C", ComboCategory.FLUSH, (K, Rank.NINE, Rank.SEVEN, Rank.FIVE, Rank.TWO)),
    ("4D 5S 6H 7C 8D", ComboCategory.STRAIGHT,
     (Rank.EIGHT, Rank.SEVEN, Rank.SIX, Rank.FIVE, Rank.FOUR)),
    ("10D JH QS KD AC", ComboCategory.STRAIGHT, (A, K, Q, J, T)),
    ("AC 2D 3H 4S 5C", ComboCategory.STRAIGHT,
     (Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, A)),
    ("6S 6H 6C 2D 7H", ComboCategory.THREE_OF_A_KIND, (Rank.SIX, Rank.SEVEN, Rank.TWO)),
    ("4S 5H 4C KD KH", ComboCategory.TWO_PAIR, (K, Rank.FOUR, Rank.FIVE)),
    ("QS QH 8C 2D 7H", ComboCategory.ONE_PAIR, (Q, Rank.EIGHT, Rank.SEVEN, Rank.TWO)),
    ("2C 5D 7H 9S 10C", ComboCategory.HIGH_CARD,
     (T, Rank.NINE, Rank.SEVEN, Rank.FIVE, Rank.TWO)),
])
def test_classify(hand_str, category, ranks):
    """Test each category is detected with its tie-break ranks."""
    combo = classify(cards(hand_str))
    assert combo == Combo(category, ranks)


def test_straight_flush_is_not_a_flush_or_straight():
    """Test a monosuit straight is reported only as a straight flush."""
    combo = classify(cards("5D 6D 7D 8D 9D"))
    assert combo.category == ComboCategory.STRAIGHT_FLUSH


def test_pairs_never_make_a_straight():
    """Test a paired hand with a run of ranks is still a pair."""
    combo = classify(cards("5D 6S 7H 8C 8D"))
    assert combo.category == ComboCategory.ONE_PAIR


def test_wrap_around_is_not_a_straight():
    """Test that Q-K-A-2-3 does not wrap into a straight."""
    combo = classify(cards("QD KS AH 2C 3D"))
    assert combo.category == ComboCategory.HIGH_CARD


def test_classify_is_idempotent():
    """Test reclassifying the same cards gives an equal combo."""
    hand = cards("4S 5H 4C KD KH")
    assert classify(hand) == classify(list(reversed(hand)))


@pytest.mark.parametrize("hand_str", ["4S 5H 4C KD", "4S 5H 4C KD KH 2D", ""])
def test_classify_requires_five_cards(hand_str):
    """Test classifying anything but five cards is rejected."""
    with pytest.raises(ValueError):
        classify(cards(hand_str))


def test_classification_exhaustion_is_an_internal_error(monkeypatch):
    """Test that a hand matching no detector raises ClassificationError."""
    monkeypatch.setattr(classifier, 'DETECTORS', ())
    with pytest.raises(ClassificationError):
        classify(cards("2C 5D 7H 9S 10C"))


def test_straight_ranks():
    """Test the sequential rule on sorted and unsorted ranks."""
    assert straight_ranks([Rank.TWO, Rank.SIX, Rank.THREE, Rank.FIVE, Rank.FOUR]) == (
        Rank.SIX, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO
    )
    assert straight_ranks([A, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE]) == (
        Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, A
    )
    assert straight_ranks([A, K, Q, J, Rank.NINE]) is None
    assert straight_ranks([A, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.SIX]) is None


def test_is_flush():
    """Test flush detection compares every suit to the first card's."""
    assert is_flush(cards("2H 5H 9H JH KH"))
    assert not is_flush(cards("2H 5H 9H JH KS"))


def _all_rank_multisets():
    """Every multiset of five ranks with no rank used more than four times."""
    for ranks in itertools.combinations_with_replacement(list(Rank), 5):
        if max(ranks.count(rank) for rank in ranks) <= 4:
            yield ranks


def test_classification_is_total():
    """Test every structurally valid hand classifies with the right arity."""
    suits = list(Suit)
    package_logger = logging.getLogger('poker_hands')
    package_logger.setLevel(logging.WARNING)

    try:
        for ranks in _all_rank_multisets():
            # Repeated ranks take distinct suits; distinct ranks are all clubs
            cards_ = [Card(rank, suits[ranks[:i].count(rank)]) for i, rank in enumerate(ranks)]
            hands = [cards_]
            if len(set(ranks)) == 5:
                hands.append([Card(ranks[0], Suit.HEARTS)] + cards_[1:])

            for hand in hands:
                combo = classify(hand)
                assert len(combo.ranks) == combo.category.arity
                assert set(combo.ranks) <= set(ranks)
    finally:
        package_logger.setLevel(logging.NOTSET)
