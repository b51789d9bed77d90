"""Constants for poker hand evaluation."""
from poker_hands.core.card import Rank

# Only five-card hands are evaluated
HAND_SIZE = 5

# The wheel: Ace plays low beneath the Two
WHEEL_RANKS = (Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO)
WHEEL_ORDER = (Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.ACE)

# Number of tie-break ranks carried by each category, keyed by category name
TIE_BREAK_ARITY = {
    'HIGH_CARD': 5,
    'ONE_PAIR': 4,
    'TWO_PAIR': 3,
    'THREE_OF_A_KIND': 3,
    'STRAIGHT': 5,
    'FLUSH': 5,
    'FULL_HOUSE': 2,
    'FOUR_OF_A_KIND': 2,
    'STRAIGHT_FLUSH': 5,
}

# Display names, keyed by category name
CATEGORY_NAMES = {
    'HIGH_CARD': 'High Card',
    'ONE_PAIR': 'One Pair',
    'TWO_PAIR': 'Two Pair',
    'THREE_OF_A_KIND': 'Three of a Kind',
    'STRAIGHT': 'Straight',
    'FLUSH': 'Flush',
    'FULL_HOUSE': 'Full House',
    'FOUR_OF_A_KIND': 'Four of a Kind',
    'STRAIGHT_FLUSH': 'Straight Flush',
}
