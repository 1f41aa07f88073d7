from typing import Iterable, List, Optional

from markov_lib import MAXGEN, NPREF, build, generate_text


class MarkovModel:
    """A word-level Markov text generator built from a tokenized corpus."""

    def __init__(self, corpus: Iterable[str], prefix_len: int = NPREF):
        tokens: List[str] = []
        for sentence in corpus:
            tokens.extend(sentence.split())
        self.num_tokens = len(tokens)
        self.table = build(tokens, prefix_len=prefix_len)

    @property
    def prefix_len(self) -> int:
        return self.table.prefix_len

    def vocab_sample(self, k: int = 10) -> List[str]:
        """Return up to k sample tokens from the vocabulary."""
        return sorted(self.table.vocabulary)[:k]

    def generate_text(self, max_words: int = MAXGEN, seed: Optional[int] = None) -> str:
        """Generate text by walking the chain from the start of the corpus."""
        return generate_text(self.table, max_words=max_words, rng=seed)
