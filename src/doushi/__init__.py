"""Doushi: Japanese verb and adjective conjugation for language learners."""

from .classification import (
    Group,
    PartOfSpeech,
    WordType,
    group,
    is_suru,
    is_usable,
    word_type,
)
from .verb import Verb, synthesize_ichidan
from .conjugation import (
    causative,
    causative_passive,
    conditional,
    copula_endings,
    imperative,
    normal_form,
    passive,
    plain_negative,
    plain_negative_past,
    plain_past,
    potential,
    tai_form,
    tari_form,
    te_form,
    volitional,
)
from .categories import (
    CATEGORY_NAMES,
    Category,
    conjugate_categories,
    conjugate_category,
    parse_category,
)
from .settings import API_VERSION

__version__ = API_VERSION

__all__ = [
    # Classification
    "Group",
    "PartOfSpeech",
    "WordType",
    "group",
    "is_suru",
    "is_usable",
    "word_type",
    # Verb entity
    "Verb",
    "synthesize_ichidan",
    # Conjugation
    "causative",
    "causative_passive",
    "conditional",
    "copula_endings",
    "imperative",
    "normal_form",
    "passive",
    "plain_negative",
    "plain_negative_past",
    "plain_past",
    "potential",
    "tai_form",
    "tari_form",
    "te_form",
    "volitional",
    # Categories
    "CATEGORY_NAMES",
    "Category",
    "conjugate_categories",
    "conjugate_category",
    "parse_category",
]
