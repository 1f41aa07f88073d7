from .config import MarkovConfig, NPREF, NHASH, MAXGEN, NONWORD
from .window import PrefixWindow
from .state_table import State, StateTable, TokenPool, MissingPrefixError
from .builder import Builder, build
from .generator import choose_successor, generate, generate_text
from .utils import iter_tokens, read_tokens

__all__ = [
    "MarkovConfig", "NPREF", "NHASH", "MAXGEN", "NONWORD",
    "PrefixWindow",
    "State", "StateTable", "TokenPool", "MissingPrefixError",
    "Builder", "build",
    "choose_successor", "generate", "generate_text",
    "iter_tokens", "read_tokens",
]
