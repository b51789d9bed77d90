"""Human-readable descriptions of classified hands."""
from poker_hands.core.card import Rank
from poker_hands.evaluation.combo import Combo, ComboCategory


class HandDescriber:
    """Generates human-readable descriptions for poker hands."""

    def describe(self, combo: Combo) -> str:
        """Get a basic description of the hand, e.g. 'Full House'."""
        return combo.category.display_name

    def describe_detailed(self, combo: Combo) -> str:
        """Get a detailed description of the hand, e.g. 'Full House, Kings over Queens'."""
        category, ranks = combo.category, combo.ranks

        if category == ComboCategory.STRAIGHT_FLUSH:
            return self._describe_straight_flush(combo)
        elif category == ComboCategory.FOUR_OF_A_KIND:
            return f"Four {ranks[0].plural_name}"
        elif category == ComboCategory.FULL_HOUSE:
            return f"Full House, {ranks[0].plural_name} over {ranks[1].plural_name}"
        elif category == ComboCategory.FLUSH:
            return f"{ranks[0].full_name}-high Flush"
        elif category == ComboCategory.STRAIGHT:
            return f"{ranks[0].full_name}-high Straight"
        elif category == ComboCategory.THREE_OF_A_KIND:
            return f"Three {ranks[0].plural_name}"
        elif category == ComboCategory.TWO_PAIR:
            return f"Two Pair, {ranks[0].plural_name} and {ranks[1].plural_name}"
        elif category == ComboCategory.ONE_PAIR:
            return f"Pair of {ranks[0].plural_name}"
        return f"{ranks[0].full_name} High"

    def _describe_straight_flush(self, combo: Combo) -> str:
        """Generate detailed description for Straight Flush."""
        highest_rank = combo.ranks[0]
        if highest_rank == Rank.ACE:
            return "Royal Flush"
        return f"{highest_rank.full_name}-high Straight Flush"


describer = HandDescriber()
