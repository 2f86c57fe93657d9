"""Verb stems shared by the conjugation generators.

- masu stem (連用形): 飲む -> のみ, 食べる -> たべ, する -> し, くる -> き
- nai stem (未然形): 飲む -> のま, 買う -> かわ, 食べる -> たべ, する -> し, くる -> こ

Both are functions of the part of speech and the reading only. They return
None when no stem can be derived (adjectives, or a reading whose last kana is
not in the expected column). An empty string is a valid stem: ある has no
nai stem of its own, its negative is plain ない.
"""

from doushi.classification import Group, PartOfSpeech, group, is_suru
from doushi.kana import change

SURU = "する"
KURU_NAI_STEM = "こ"

# Godan verbs whose masu stem ends in い instead of り (くださる -> ください)
ARU_SPECIAL_CLASS = PartOfSpeech.GODAN_ARU
ARU_SPECIAL_MASU_ENDING = "い"

# ある: no nai stem (ある -> ない), passive あられる
ARU_IRREGULAR = PartOfSpeech.GODAN_RU_IRREGULAR
ARU_A_STEM = "あら"


def remove_last(reading: str) -> str:
    """Return the reading without its last kana."""
    return reading[:-1]


def last_kana(reading: str) -> str:
    return reading[-1:]


def remove_suru(part_of_speech: PartOfSpeech | None, reading: str) -> str:
    """Remove the trailing する from a suru verb reading."""
    if not is_suru(part_of_speech):
        return reading
    return reading[: -len(SURU)]


def remove_kuru(reading: str) -> str:
    """Remove the trailing くる, keeping any prefix (もってくる -> もって)."""
    return reading[:-2]


def change_last_vowel(reading: str, from_column: str, to_column: str) -> str | None:
    """Change the vowel column of the final kana (飲む u->a: のま)."""
    changed = change(last_kana(reading), from_column, to_column)
    if changed is None:
        return None
    return remove_last(reading) + changed


def masu_stem(part_of_speech: PartOfSpeech | None, reading: str) -> str | None:
    """Get the masu stem (ren'youkei).

    Args:
        part_of_speech: The verb's tag
        reading: The verb's dictionary form in hiragana

    Returns:
        The stem, or None for adjectives and underivable readings.
    """
    match group(part_of_speech):
        case Group.GODAN:
            if part_of_speech is ARU_SPECIAL_CLASS:
                return remove_last(reading) + ARU_SPECIAL_MASU_ENDING
            return change_last_vowel(reading, "u", "i")
        case Group.ICHIDAN:
            return remove_last(reading)
        case Group.IRREGULAR:
            # する -> し, くる -> き: the kana before the last one changes
            pre_ending = change(reading[-2:-1], "u", "i")
            if pre_ending is None:
                return None
            if is_suru(part_of_speech):
                return remove_suru(part_of_speech, reading) + pre_ending
            return remove_kuru(reading) + pre_ending
        case _:
            return None


def nai_stem(part_of_speech: PartOfSpeech | None, reading: str) -> str | None:
    """Get the stem for plain negative forms (mizenkei / A-stem).

    Args:
        part_of_speech: The verb's tag
        reading: The verb's dictionary form in hiragana

    Returns:
        The stem, "" for ある, or None for adjectives and underivable readings.
    """
    match group(part_of_speech):
        case Group.GODAN:
            if part_of_speech is ARU_IRREGULAR:
                return ""
            # 買う -> かわ (historical わ行)
            if last_kana(reading) == "う":
                return remove_last(reading) + "わ"
            return change_last_vowel(reading, "u", "a")
        case Group.ICHIDAN:
            return masu_stem(part_of_speech, reading)
        case Group.IRREGULAR:
            if is_suru(part_of_speech):
                return remove_suru(part_of_speech, reading) + "し"
            return remove_kuru(reading) + KURU_NAI_STEM
        case _:
            return None
