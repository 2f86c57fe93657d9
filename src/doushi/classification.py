"""Part-of-speech classification for conjugable words.

The tag vocabulary follows the Jisho API ``parts_of_speech`` strings.
Only these 19 tags can be conjugated; everything else is ``unknown``.
"""

from enum import StrEnum
from collections.abc import Iterable


class PartOfSpeech(StrEnum):
    """Conjugable parts of speech (品詞)."""

    # 五段動詞
    GODAN_U = "Godan verb with u ending"
    GODAN_TSU = "Godan verb with tsu ending"
    GODAN_RU = "Godan verb with ru ending"
    GODAN_RU_IRREGULAR = "Godan verb with ru ending (irregular verb)"  # ある
    GODAN_ARU = "Godan verb - aru special class"                       # くださる, いらっしゃる
    GODAN_IKU = "Godan verb - Iku/Yuku special class"
    GODAN_KU = "Godan verb with ku ending"
    GODAN_GU = "Godan verb with gu ending"
    GODAN_BU = "Godan verb with bu ending"
    GODAN_MU = "Godan verb with mu ending"
    GODAN_NU = "Godan verb with nu ending"
    GODAN_SU = "Godan verb with su ending"

    # 一段動詞
    ICHIDAN = "Ichidan verb"

    # 変格動詞
    SURU = "Suru verb"
    SURU_IRREGULAR = "Suru verb - irregular"
    SURU_SPECIAL = "Suru verb - special class"
    KURU = "Kuru verb - special class"

    # 形容詞 / 形容動詞
    I_ADJECTIVE = "I-adjective"
    NA_ADJECTIVE = "Na-adjective"


class Group(StrEnum):
    """Conjugation group."""

    GODAN = "1"
    ICHIDAN = "2"
    IRREGULAR = "3"
    I_ADJECTIVE = "i-adjective"
    NA_ADJECTIVE = "na-adjective"
    UNKNOWN = "unknown"


class WordType(StrEnum):
    """Inflection type: how the word takes tense and politeness."""

    VERB = "verb"
    I_ADJECTIVE = "i-adjective"
    NA_ADJECTIVE = "na-adjective"


# Sense tags that make a Na-adjective tag ambiguous (名詞 usage dominates)
NA_ADJECTIVE_CONFLICTS = frozenset({"No-adjective", "Suru verb"})


def parse_part_of_speech(tag: str | PartOfSpeech | None) -> PartOfSpeech | None:
    """Return the enum member for a tag, or None if it is not conjugable."""
    if tag is None:
        return None
    try:
        return PartOfSpeech(tag)
    except ValueError:
        return None


def group(tag: str | PartOfSpeech | None) -> Group:
    """Get the verb group (1, 2 or 3) or adjective type for a tag."""
    pos = parse_part_of_speech(tag)
    match pos:
        case (
            PartOfSpeech.GODAN_U
            | PartOfSpeech.GODAN_TSU
            | PartOfSpeech.GODAN_RU
            | PartOfSpeech.GODAN_RU_IRREGULAR
            | PartOfSpeech.GODAN_ARU
            | PartOfSpeech.GODAN_IKU
            | PartOfSpeech.GODAN_KU
            | PartOfSpeech.GODAN_GU
            | PartOfSpeech.GODAN_BU
            | PartOfSpeech.GODAN_MU
            | PartOfSpeech.GODAN_NU
            | PartOfSpeech.GODAN_SU
        ):
            return Group.GODAN
        case PartOfSpeech.ICHIDAN:
            return Group.ICHIDAN
        case (
            PartOfSpeech.SURU
            | PartOfSpeech.SURU_IRREGULAR
            | PartOfSpeech.SURU_SPECIAL
            | PartOfSpeech.KURU
        ):
            return Group.IRREGULAR
        case PartOfSpeech.I_ADJECTIVE:
            return Group.I_ADJECTIVE
        case PartOfSpeech.NA_ADJECTIVE:
            return Group.NA_ADJECTIVE
        case _:
            return Group.UNKNOWN


def word_type(tag: str | PartOfSpeech | None) -> WordType:
    """Get the inflection type for a tag. Anything not an adjective is a verb."""
    match parse_part_of_speech(tag):
        case PartOfSpeech.I_ADJECTIVE:
            return WordType.I_ADJECTIVE
        case PartOfSpeech.NA_ADJECTIVE:
            return WordType.NA_ADJECTIVE
        case _:
            return WordType.VERB


def is_suru(tag: str | PartOfSpeech | None) -> bool:
    """Check if a tag marks a 'suru' verb (noun + する)."""
    return tag is not None and str(tag).startswith("Suru verb")


def is_usable(tag: str, sense_tags: Iterable[str]) -> bool:
    """Check if a tag of a sense can be conjugated correctly.

    Args:
        tag: The candidate part of speech
        sense_tags: All parts of speech of the same sense

    Returns:
        True when the tag is in the conjugable vocabulary and, for
        Na-adjectives, the sense is not also a no-adjective or suru noun.
    """
    pos = parse_part_of_speech(tag)
    if pos is None:
        return False

    if pos is PartOfSpeech.NA_ADJECTIVE:
        return NA_ADJECTIVE_CONFLICTS.isdisjoint(sense_tags)

    return True
