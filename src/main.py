"""Doushi FastAPI application - Japanese conjugation API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from models import (
    ConjugateRequest,
    ConjugateResponse,
    PartOfSpeechInfo,
)
from doushi import settings
from doushi.categories import CATEGORY_NAMES, conjugate_categories
from doushi.classification import PartOfSpeech, group, word_type
from doushi.verb import Verb


logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================================
# Application Lifespan
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup; the conjugation tables are static and need no warm-up."""
    logger.info("Doushi %s ready (%d categories)", settings.API_VERSION, len(CATEGORY_NAMES))
    yield


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="Doushi API",
    description="""Japanese verb and adjective conjugation for language learning.

## Features
- **Verbs**: godan, ichidan, する / noun + する, くる
- **Adjectives**: i-adjectives and na-adjectives
- **Forms**: plain/polite, negative, past, te, volitional, tai, potential,
  imperative, conditional, tari, passive, causative, causative-passive

## Endpoints
- `/conjugate` - Generate conjugations from a Jisho-style dictionary entry
- `/categories` - All category names accepted by `/conjugate`
- `/parts-of-speech` - Part of speech tags that can be conjugated
""",
    version=settings.API_VERSION,
    lifespan=lifespan,
)


# ============================================================================
# Middleware
# ============================================================================


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "doushi", "version": settings.API_VERSION}


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str]:
    """Detailed health check."""
    return {"status": "healthy", "version": settings.API_VERSION}


# ============================================================================
# Vocabulary Endpoints
# ============================================================================


@app.get("/parts-of-speech", response_model=list[PartOfSpeechInfo], tags=["Vocabulary"])
async def parts_of_speech() -> list[PartOfSpeechInfo]:
    """List the part of speech tags that can be conjugated."""
    return [
        PartOfSpeechInfo(tag=pos.value, group=group(pos).value, word_type=word_type(pos).value)
        for pos in PartOfSpeech
    ]


@app.get("/categories", tags=["Vocabulary"])
async def categories() -> list[str]:
    """List every category name accepted by /conjugate."""
    return list(CATEGORY_NAMES)


# ============================================================================
# Conjugation Endpoints
# ============================================================================


@app.post("/conjugate", response_model=ConjugateResponse, tags=["Conjugation"])
async def conjugate_endpoint(request: ConjugateRequest) -> ConjugateResponse:
    """
    Generate conjugations from a dictionary entry.

    Specify which categories you want, or get all of them. A category that
    does not apply to the word (e.g. tai-form of an adjective) maps to an
    empty list.
    """
    verb = Verb.from_definition(request.definition.model_dump())
    if verb.not_conjugable:
        raise HTTPException(status_code=422, detail="Entry has no conjugable part of speech")

    try:
        conjugations = conjugate_categories(verb, request.forms)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        logger.exception("Conjugation failed for %s", verb.word)
        raise HTTPException(status_code=500, detail=f"Conjugation failed: {e!s}") from e

    return ConjugateResponse(
        word=verb.word,
        reading=verb.reading,
        part_of_speech=verb.part_of_speech.value,
        word_type=verb.type.value,
        group=verb.group.value,
        english=verb.english_definition,
        conjugations=conjugations,
    )


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )
