from collections import deque
from typing import Tuple

from .config import NONWORD


class PrefixWindow:
    """The last `size` tokens seen, oldest first."""

    def __init__(self, size: int, fill: str = NONWORD):
        if size < 1:
            raise ValueError(f"prefix window size must be >= 1, got {size}")
        self._tokens = deque([fill] * size, maxlen=size)
        self.slides = 0

    @property
    def size(self) -> int:
        return self._tokens.maxlen

    def slide(self, token: str) -> None:
        # maxlen drops the oldest entry on append
        self._tokens.append(token)
        self.slides += 1

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(self._tokens)

    def __repr__(self):
        return f"PrefixWindow({list(self._tokens)!r})"
