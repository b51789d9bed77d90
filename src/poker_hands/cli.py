"""Command-line interface for picking winning poker hands."""

import logging
import sys
from typing import List, Optional, TextIO

import click

from poker_hands.core.hand import Hand
from poker_hands.evaluation.evaluator import (
    InvalidHandError, parse_hands, select_winners, sort_hands
)
from poker_hands.evaluation.hand_description import describer

logger = logging.getLogger(__name__)

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def setup_logging(level: int = logging.WARNING):
    """Set up logging for the command line."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )


def read_hands(source: TextIO) -> List[str]:
    """Read one hand per non-blank line."""
    return [line.strip() for line in source if line.strip()]


def format_hand(hand: Hand, describe: bool) -> str:
    if describe:
        return f"{hand.input}  ({describer.describe_detailed(hand.combo)})"
    return hand.input


@click.command()
@click.argument('hand_args', nargs=-1, metavar='HANDS')
@click.option('--input', 'input_file', type=click.File('r'), default=None,
              help='Read hands from FILE, one per line (default: stdin when no HANDS given)')
@click.option('--describe', is_flag=True, help='Show a description of each hand')
@click.option('--rank', 'show_rank', is_flag=True, help='Print every hand, strongest first')
@click.option('-v', '--verbose', count=True, help='Increase log verbosity')
def main(hand_args: tuple, input_file: Optional[TextIO], describe: bool, show_rank: bool, verbose: int):
    """Print the winning poker HANDS, e.g. "2C 5D 7H 9S 10C"."""
    setup_logging(LOG_LEVELS[min(verbose, len(LOG_LEVELS) - 1)])

    hand_strs = list(hand_args)
    if input_file is not None:
        hand_strs.extend(read_hands(input_file))
    elif not hand_strs:
        hand_strs = read_hands(click.get_text_stream('stdin'))

    logger.info(f"Evaluating {len(hand_strs)} hands")
    try:
        hands = parse_hands(hand_strs)
    except InvalidHandError as e:
        raise click.ClickException(str(e))

    if not show_rank:
        for hand in select_winners(hands):
            click.echo(format_hand(hand, describe))
        return

    ranked = sort_hands(hands)
    place = 0
    for index, hand in enumerate(ranked):
        if index == 0 or not hand.ties(ranked[index - 1]):
            place = index + 1
        click.echo(f"{place}. {format_hand(hand, describe)}")


if __name__ == '__main__':
    main()
