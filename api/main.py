# api/main.py
from __future__ import annotations

import os
from typing import Any, Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Allow starting straight from the repo root
import sys, pathlib
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tarot_journal import __version__, deck
from tarot_journal.config import configure_logging, get_settings
from tarot_journal.errors import SpreadNotAllowedError, TarotCoreError
from tarot_journal.logic import generate_narrative, perform_reading
from tarot_journal.spreads import get_spread_by_id, list_spreads as catalog_spreads

configure_logging()


# ---------- Pydantic Schemas ----------
class ReadingRequest(BaseModel):
    spread: Optional[str] = Field(None, description="spread id; unknown ids fall back to 'single'")
    question: Optional[str] = None
    seed: Optional[str | int] = None
    reversed_probability: Optional[float] = Field(None, ge=0.0, le=1.0)
    tier: Optional[str] = Field(None, description="free|plus|pro")
    reveal: bool = True
    explain_with_llm: bool = False
    model: Optional[str] = None
    temperature: float = Field(0.8, ge=0.0, le=2.0)


class DrawnCardRecord(BaseModel):
    card_id: str
    card_name: str
    reversed: bool
    position_id: int
    position_name: str


class NarrativeRequest(BaseModel):
    spread_id: str
    question: Optional[str] = None
    cards: List[DrawnCardRecord] = Field(..., min_length=1)
    model: Optional[str] = None
    temperature: float = Field(0.8, ge=0.0, le=2.0)


class NarrativeResponse(BaseModel):
    text: str
    source: Literal["llm", "fallback"]
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    has_gemini_token: bool


def _card_dict(card: deck.Card) -> Dict[str, Any]:
    return {
        "id": card.id,
        "name": card.name,
        "arcana": card.arcana,
        "suit": card.suit,
        "number": card.number,
        "keywords": list(card.keywords),
        "upright": card.upright_meaning,
        "reversed": card.reversed_meaning,
        "element": card.element,
        "astrology": card.astrology,
    }


# ---------- FastAPI app ----------
app = FastAPI(title="Tarot Journal API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_methods=["*"], allow_headers=["*"], allow_credentials=False
)


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        status="ok",
        version=app.version,
        has_gemini_token=get_settings().has_gemini_token,
    )


@app.get("/v1/spreads")
def list_spreads():
    return {"spreads": [s.to_dict() for s in catalog_spreads()]}


@app.get("/v1/spreads/{spread_id}")
def get_spread(spread_id: str):
    spread = get_spread_by_id(spread_id)
    if spread is None:
        raise HTTPException(status_code=404, detail=f"Spread '{spread_id}' not found")
    return spread.to_dict()


@app.get("/v1/cards")
def list_cards(
    arcana: Optional[Literal["major", "minor"]] = None,
    suit: Optional[Literal["wands", "cups", "swords", "pentacles"]] = None,
):
    cards = deck.list_by_arcana(arcana) if arcana else list(deck.FULL_DECK)
    if suit is not None:
        cards = [c for c in cards if c.suit == suit]
    return {"cards": [_card_dict(c) for c in cards]}


@app.get("/v1/cards/{card_id}")
def get_card(card_id: str):
    card = deck.get_card_by_id(card_id)
    if card is None:
        raise HTTPException(status_code=404, detail=f"Card '{card_id}' not found")
    return _card_dict(card)


@app.post("/v1/readings")
def create_reading(req: ReadingRequest):
    try:
        return perform_reading(
            spread_id=req.spread,
            question=req.question,
            seed=req.seed,
            reversed_probability=req.reversed_probability,
            tier=req.tier,
            reveal=req.reveal,
            explain_with_llm=req.explain_with_llm,
            model=req.model,
            temperature=req.temperature,
        )
    except SpreadNotAllowedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except TarotCoreError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/v1/narratives", response_model=NarrativeResponse)
def create_narrative(req: NarrativeRequest):
    record = {
        "spread_id": req.spread_id,
        "question": req.question,
        "cards": [c.model_dump() for c in req.cards],
    }
    return generate_narrative(record, model=req.model, temperature=req.temperature)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=os.getenv("API_HOST", "0.0.0.0"), port=int(os.getenv("API_PORT", "8000")))
