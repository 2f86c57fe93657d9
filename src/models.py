"""Pydantic models for Doushi API requests and responses."""

from pydantic import BaseModel, Field


# ============================================================================
# Dictionary Record (Jisho API shape)
# ============================================================================


class JishoJapanese(BaseModel):
    """Written form and reading of a dictionary entry."""
    word: str | None = Field(None, description="Spelling, usually with kanji (optional)")
    reading: str = Field(..., min_length=1, description="Reading in kana")


class JishoSense(BaseModel):
    """One sense of a dictionary entry."""
    parts_of_speech: list[str] = Field(default_factory=list, description="Part of speech tags")
    english_definitions: list[str] = Field(default_factory=list, description="English glosses")


class JishoDefinition(BaseModel):
    """Dictionary entry to conjugate."""
    japanese: list[JishoJapanese] = Field(..., min_length=1, description="Spellings; the first is used")
    senses: list[JishoSense] = Field(..., min_length=1, description="Senses in dictionary order")


# ============================================================================
# Request Models
# ============================================================================


class ConjugateRequest(BaseModel):
    """Request body for conjugation."""
    definition: JishoDefinition
    forms: list[str] | None = Field(None, description="Categories to generate (optional, all if omitted)")


# ============================================================================
# Response Models
# ============================================================================


class PartOfSpeechInfo(BaseModel):
    """A conjugable part of speech."""
    tag: str = Field(..., description="Part of speech tag")
    group: str = Field(..., description="Verb group (1, 2, 3) or adjective type")
    word_type: str = Field(..., description="verb, i-adjective or na-adjective")


class ConjugateResponse(BaseModel):
    """Response for /conjugate."""
    word: str = Field(..., description="Dictionary form")
    reading: str = Field(..., description="Reading in hiragana")
    part_of_speech: str = Field(..., description="Part of speech used for conjugation")
    word_type: str = Field(..., description="verb, i-adjective or na-adjective")
    group: str = Field(..., description="Verb group (1, 2, 3) or adjective type")
    english: str = Field("", description="English meaning")
    conjugations: dict[str, list[str]] = Field(..., description="Category -> conjugated words")
