from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from .config import NHASH, NONWORD, NPREF

Prefix = Tuple[str, ...]


class MissingPrefixError(LookupError):
    """Raised when a walk reaches a prefix the table never saw."""

    def __init__(self, prefix: Prefix):
        super().__init__(f"prefix {prefix!r} is not in the state table")
        self.prefix = prefix


class TokenPool:
    """Owns one canonical str object per distinct word."""

    def __init__(self):
        self._pool: Dict[str, str] = {}

    def intern(self, token: str) -> str:
        return self._pool.setdefault(token, token)

    def __contains__(self, token) -> bool:
        return token in self._pool

    def __len__(self) -> int:
        return len(self._pool)


class State:
    """One observed prefix and every word seen right after it."""

    __slots__ = ("prefix", "successors")

    def __init__(self, prefix: Prefix):
        self.prefix = prefix
        self.successors: List[str] = []

    def __repr__(self):
        return f"State({self.prefix!r}, {self.successors!r})"


class StateTable:
    """
    Mapping from prefix tuple to State.
    Written only while building; freeze() makes it read-only.
    """

    def __init__(self, prefix_len: int = NPREF):
        if prefix_len < 1:
            raise ValueError(f"prefix_len must be >= 1, got {prefix_len}")
        self.prefix_len = prefix_len
        self.tokens = TokenPool()
        self._states: Dict[Prefix, State] = {}
        self._frozen = False
        self.observations = 0

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def _key(self, prefix: Sequence[str]) -> Prefix:
        key = tuple(prefix)
        if len(key) != self.prefix_len:
            raise ValueError(
                f"expected a prefix of {self.prefix_len} tokens, got {len(key)}"
            )
        return key

    def lookup(self, prefix: Sequence[str]) -> Optional[State]:
        return self._states.get(self._key(prefix))

    def lookup_or_create(self, prefix: Sequence[str]) -> State:
        key = self._key(prefix)
        state = self._states.get(key)
        if state is None:
            if self._frozen:
                raise RuntimeError("cannot add a state to a frozen table")
            key = tuple(self.tokens.intern(w) for w in key)
            state = State(key)
            self._states[key] = state
        return state

    def add_successor(self, state: State, token: str) -> None:
        if self._frozen:
            raise RuntimeError("cannot add a successor to a frozen table")
        state.successors.append(self.tokens.intern(token))
        self.observations += 1

    @staticmethod
    def hash_prefix(prefix: Sequence[str], nhash: int = NHASH) -> int:
        """djb2 over the concatenated prefix words, folded into `nhash` buckets."""
        h = 5381
        for word in prefix:
            for ch in word:
                h = ((h << 5) + h + ord(ch)) & 0xFFFFFFFF
        return h % nhash

    @property
    def vocabulary(self) -> Set[str]:
        words = set()
        for state in self._states.values():
            words.update(state.successors)
        words.discard(NONWORD)
        return words

    def __contains__(self, prefix) -> bool:
        return tuple(prefix) in self._states

    def __iter__(self) -> Iterator[State]:
        return iter(self._states.values())

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self):
        return (
            f"StateTable(prefix_len={self.prefix_len}, states={len(self)}, "
            f"observations={self.observations}, frozen={self._frozen})"
        )
