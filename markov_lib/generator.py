import logging
import random
from typing import Iterable, Iterator, Union

from .config import MAXGEN, NONWORD
from .state_table import MissingPrefixError, StateTable
from .window import PrefixWindow

logger = logging.getLogger(__name__)

RandomSource = Union[random.Random, int, None]


def _as_rng(rng: RandomSource):
    if rng is None:
        return random
    if isinstance(rng, int):
        return random.Random(rng)
    return rng


def choose_successor(successors: Iterable[str], rng: RandomSource = None) -> str:
    """
    Pick one entry uniformly in a single pass (reservoir sampling).
    The i-th entry replaces the current pick with probability 1/i, so
    repeated words are chosen in proportion to how often they occur.
    """
    rng = _as_rng(rng)
    chosen = None
    nmatch = 0
    for word in successors:
        nmatch += 1
        if rng.randrange(nmatch) == 0:
            chosen = word
    if nmatch == 0:
        raise ValueError("cannot choose from an empty successor list")
    return chosen


def generate(
    table: StateTable,
    max_words: int = MAXGEN,
    rng: RandomSource = None,
) -> Iterator[str]:
    """
    Random walk over `table`, yielding at most `max_words` words.
    Stops early when the end-of-corpus sentinel is drawn.
    """
    if max_words < 0:
        raise ValueError(f"max_words must be >= 0, got {max_words}")
    rng = _as_rng(rng)
    window = PrefixWindow(table.prefix_len, fill=NONWORD)

    emitted = 0
    while emitted < max_words:
        prefix = window.snapshot()
        state = table.lookup(prefix)
        if state is None:
            raise MissingPrefixError(prefix)
        word = choose_successor(state.successors, rng)
        if word == NONWORD:
            logger.debug("walk reached end of corpus after %d words", emitted)
            return
        yield word
        emitted += 1
        window.slide(word)
    logger.debug("walk stopped at the %d word limit", max_words)


def generate_text(
    table: StateTable,
    max_words: int = MAXGEN,
    rng: RandomSource = None,
) -> str:
    return " ".join(generate(table, max_words=max_words, rng=rng))
