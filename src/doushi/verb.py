"""Conjugable word entity built from a Jisho-style dictionary record.

A record looks like::

    {
        "japanese": [{"word": "飲む", "reading": "のむ"}],
        "senses": [
            {"parts_of_speech": ["Godan verb with mu ending"],
             "english_definitions": ["to drink"]},
        ],
    }

Only the first ``japanese`` entry is used. The first sense carrying a usable
part of speech decides the tag and the English definition.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self

import jaconv

from doushi.classification import (
    Group,
    PartOfSpeech,
    WordType,
    group,
    is_suru,
    is_usable,
    word_type,
)
from doushi.stems import SURU

logger = logging.getLogger(__name__)

SURU_DEFINITION_PREFIX = "[to do] "


@dataclass(frozen=True, slots=True)
class Verb:
    """A verb or adjective ready to be conjugated.

    ``type`` and ``group`` are always derived from ``part_of_speech``.
    A record without any usable part of speech gives a verb with
    ``not_conjugable`` set and no word or reading.
    """

    word: str | None = None
    reading: str | None = None
    part_of_speech: PartOfSpeech | None = None
    english_definition: str = ""
    not_conjugable: bool = False

    @property
    def type(self) -> WordType:
        return word_type(self.part_of_speech)

    @property
    def group(self) -> Group:
        return group(self.part_of_speech)

    @property
    def is_suru(self) -> bool:
        return is_suru(self.part_of_speech)

    @classmethod
    def from_definition(cls, definition: Mapping[str, Any]) -> Self:
        """Create a verb from a Jisho API-like record.

        Args:
            definition: Mapping with ``japanese`` and ``senses`` lists

        Returns:
            The conjugable verb, or a ``not_conjugable`` one when no sense
            has a usable part of speech.
        """
        found = _find_part_of_speech(definition.get("senses") or [])
        if found is None:
            logger.debug("No conjugable part of speech in %r", definition.get("japanese"))
            return cls(not_conjugable=True)

        part_of_speech, english = found
        japanese = definition["japanese"][0]
        word = japanese.get("word") or japanese["reading"]
        reading = jaconv.kata2hira(japanese["reading"])
        logger.debug("Conjugating %s (%s) as %s", word, reading, part_of_speech.value)

        # Suru verbs are listed as nouns: make a verb out of them
        if part_of_speech is PartOfSpeech.SURU:
            word += SURU
            reading += SURU
            english = SURU_DEFINITION_PREFIX + english

        return cls(
            word=word,
            reading=reading,
            part_of_speech=part_of_speech,
            english_definition=english,
        )


def _find_part_of_speech(senses: list[Mapping[str, Any]]) -> tuple[PartOfSpeech, str] | None:
    """Find the first usable part of speech and the first definition of its sense."""
    for sense in senses:
        tags = sense.get("parts_of_speech") or []
        for tag in tags:
            if is_usable(tag, tags):
                definitions = sense.get("english_definitions") or [""]
                return PartOfSpeech(tag), definitions[0]
    return None


def synthesize_ichidan(reading: str) -> Verb:
    """Get a verb to conjugate as Ichidan, e.g. a potential or passive stem + る."""
    return Verb.from_definition({
        "japanese": [{"reading": reading}],
        "senses": [{
            "parts_of_speech": [PartOfSpeech.ICHIDAN.value],
            "english_definitions": [""],
        }],
    })
