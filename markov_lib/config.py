from typing import Annotated, Optional

from pydantic import BaseModel, Field

NPREF = 2  # number of prefix words
NHASH = 4093  # bucket count used by StateTable.hash_prefix
MAXGEN = 10000  # maximum words generated
NONWORD = "\n"  # cannot appear as a real word

PREFIX_LEN_BOUNDS = {"ge": 1, "le": 16}
MAX_WORDS_BOUNDS = {"ge": 0, "le": MAXGEN}

PrefixLen = Annotated[int, Field(**PREFIX_LEN_BOUNDS)]
MaxWords = Annotated[int, Field(**MAX_WORDS_BOUNDS)]


class MarkovConfig(BaseModel):
    prefix_len: PrefixLen = NPREF
    max_words: MaxWords = MAXGEN
    seed: Optional[int] = None
