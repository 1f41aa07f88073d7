import logging
from typing import Iterable

from .config import NONWORD, NPREF
from .state_table import StateTable
from .window import PrefixWindow

logger = logging.getLogger(__name__)


class Builder:
    """Single-pass construction of a StateTable from a token stream."""

    def __init__(self, prefix_len: int = NPREF):
        self.table = StateTable(prefix_len)
        self.window = PrefixWindow(prefix_len, fill=NONWORD)
        self._finished = False

    def _check_open(self):
        if self._finished:
            raise RuntimeError("builder already finished; start a new Builder")

    def _observe(self, token: str) -> None:
        state = self.table.lookup_or_create(self.window.snapshot())
        self.table.add_successor(state, token)
        self.window.slide(token)

    def add(self, token: str) -> None:
        """Record one corpus word after the current prefix."""
        self._check_open()
        if not token:
            raise ValueError("empty token")
        if token == NONWORD:
            raise ValueError("the sentinel token cannot appear in the corpus")
        self._observe(token)

    def feed(self, tokens: Iterable[str]) -> "Builder":
        for token in tokens:
            self.add(token)
        return self

    def finish(self) -> StateTable:
        """Append the end-of-corpus sentinel and freeze the table."""
        self._check_open()
        self._observe(NONWORD)
        self._finished = True
        self.table.freeze()
        logger.info(
            "build done: %d states, %d words, prefix_len=%d",
            len(self.table),
            self.window.slides - 1,
            self.table.prefix_len,
        )
        return self.table


def build(tokens: Iterable[str], prefix_len: int = NPREF) -> StateTable:
    return Builder(prefix_len).feed(tokens).finish()
