from pathlib import Path
from typing import Iterator, TextIO, Union


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited words from a text stream, line by line."""
    for line in stream:
        yield from line.split()


def read_tokens(path: Union[str, Path], encoding: str = "utf-8") -> Iterator[str]:
    with open(str(path), "r", encoding=encoding) as f:
        yield from iter_tokens(f)
