import logging
from typing import List, Optional

from fastapi import FastAPI, UploadFile, File, Query, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

try:
    from app.markov_model import MarkovModel
except ModuleNotFoundError:
    from markov_model import MarkovModel

from markov_lib import NPREF
from markov_lib.config import PREFIX_LEN_BOUNDS, MaxWords, PrefixLen

logger = logging.getLogger(__name__)

app = FastAPI(title="sps-markov", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

corpus = [
    "The Count of Monte Cristo is a novel written by Alexandre Dumas.",
    "It tells the story of Edmond Dantes who is falsely imprisoned and later seeks revenge.",
    "this is another example sentence",
    "we are generating text based on markov chain probabilities",
    "markov chain models are simple but effective",
]
markov_model = MarkovModel(corpus, prefix_len=NPREF)


class TrainRequest(BaseModel):
    text: str
    prefix_len: PrefixLen = NPREF


class TrainResponse(BaseModel):
    status: str
    states: int
    tokens: int


class GenerationRequest(BaseModel):
    max_words: MaxWords = 100
    seed: Optional[int] = None


class GenerationResponse(BaseModel):
    generated_text: str


class StatsResponse(BaseModel):
    prefix_len: int
    states: int
    observations: int
    vocab_size: int
    vocab_sample: List[str]


def _retrain(text: str, prefix_len: int) -> TrainResponse:
    global markov_model
    model = MarkovModel([text], prefix_len=prefix_len)
    markov_model = model
    logger.info("retrained on %d tokens (prefix_len=%d)", model.num_tokens, prefix_len)
    return TrainResponse(status="trained", states=len(model.table), tokens=model.num_tokens)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/", include_in_schema=False)
def root_redirect():
    return RedirectResponse("/docs")


@app.get("/stats", response_model=StatsResponse)
def stats():
    table = markov_model.table
    return {
        "prefix_len": table.prefix_len,
        "states": len(table),
        "observations": table.observations,
        "vocab_size": len(table.vocabulary),
        "vocab_sample": markov_model.vocab_sample(),
    }


@app.post("/train", response_model=TrainResponse)
def train(request: TrainRequest):
    return _retrain(request.text, request.prefix_len)


@app.post("/train_file", response_model=TrainResponse)
async def train_file(
    file: UploadFile = File(...),
    prefix_len: int = Query(NPREF, **PREFIX_LEN_BOUNDS),
):
    content = await file.read()
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="corpus file must be UTF-8 text")
    return _retrain(text, prefix_len)


@app.post("/generate", response_model=GenerationResponse)
def generate(request: GenerationRequest):
    model = markov_model
    text = model.generate_text(max_words=request.max_words, seed=request.seed)
    return {"generated_text": text}
