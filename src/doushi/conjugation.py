"""Japanese verb and adjective conjugation.

Supports:
- Group 1 (godan/五段) verbs: 書く, 飲む, 行く, ある, くださる, etc.
- Group 2 (ichidan/一段) verbs: 食べる, 見る, etc.
- Group 3 (irregular) verbs: する, noun + する, くる/来る
- i-adjectives (形容詞) and na-adjectives (形容動詞)

Every generator returns a list of acceptable forms, most common first.
An empty list means the form does not exist for the word (たい for an
adjective, potential of 分かる, ...).

Potential, passive, causative and causative-passive forms conjugate like
ichidan verbs: the derived stem + る is turned into a new ichidan verb and
conjugated again (飲む -> のまれる -> のまれませんでした).
"""

from doushi.classification import Group, PartOfSpeech, WordType
from doushi.kana import change
from doushi.stems import (
    ARU_A_STEM,
    ARU_IRREGULAR,
    change_last_vowel,
    last_kana,
    masu_stem,
    nai_stem,
    remove_kuru,
    remove_last,
    remove_suru,
)
from doushi.verb import Verb, synthesize_ichidan

NAI = "ない"
DESU = "です"
KATTA = "かった"
DEWA = "では"
JA = "じゃ"


# ============================================================================
# Lexical Exceptions
# ============================================================================


# Words without a potential form (分かる already means "can understand")
NO_POTENTIAL_WORDS = frozenset({"分かる"})

# Word -> imperative replacing the regular one
IMPERATIVE_OVERRIDES: dict[str, str] = {
    "呉れる": "くれ",
}


# ============================================================================
# Helpers
# ============================================================================


def _conjugable(verb: Verb) -> bool:
    return not verb.not_conjugable and verb.reading is not None


def _is_verb(verb: Verb) -> bool:
    return _conjugable(verb) and verb.type is WordType.VERB


def _as_list(conjugation: str | None) -> list[str]:
    return [conjugation] if conjugation is not None else []


# ============================================================================
# Plain / Polite Forms
# ============================================================================


def copula_endings(polite: bool = False, negative: bool = False, past: bool = False) -> list[str]:
    """Conjugate the copula だ / である.

    Polite negative forms can be made with ありません or with the plain
    negative + です, each with では or じゃ.

    Examples:
        >>> copula_endings(polite=True, negative=True)
        ['ではありません', 'ではないです', 'じゃありません', 'じゃないです']
    """
    match (polite, negative, past):
        case (False, False, False):
            return ["だ"]
        case (False, True, False):
            return [DEWA + NAI, JA + NAI]
        case (False, False, True):
            return ["だった"]
        case (False, True, True):
            return [DEWA + "な" + KATTA, JA + "な" + KATTA]
        case (True, False, False):
            return [DESU]
        case (True, True, False):
            return [
                DEWA + "ありません",
                DEWA + NAI + DESU,
                JA + "ありません",
                JA + NAI + DESU,
            ]
        case (True, False, True):
            return ["でした"]
        case (True, True, True):
            return [
                DEWA + "ありませんでした",
                DEWA + "な" + KATTA + DESU,
                JA + "ありませんでした",
                JA + "な" + KATTA + DESU,
            ]
    return []


def i_adjective_normal_form(
    verb: Verb, polite: bool = False, negative: bool = False, past: bool = False
) -> list[str]:
    """Conjugate an i-adjective: たかい, たかくない, たかかった, たかくなかった (+です)."""
    if not past:
        ending = "くない" if negative else "い"
    else:
        ending = ("くな" if negative else "") + KATTA
    return [remove_last(verb.reading) + ending + (DESU if polite else "")]


def na_adjective_normal_form(
    verb: Verb, polite: bool = False, negative: bool = False, past: bool = False
) -> list[str]:
    """Conjugate a na-adjective with the copula: しずかだ, しずかではない, ..."""
    return [verb.reading + ending for ending in copula_endings(polite, negative, past)]


def verb_normal_form(
    verb: Verb, polite: bool = False, negative: bool = False, past: bool = False
) -> list[str]:
    """Conjugate a verb: のむ, のまない, のんだ, のまなかった, のみます, ..."""
    if polite:
        stem = masu_stem(verb.part_of_speech, verb.reading)
        if stem is None:
            return []
        ending = ("ませんでした" if negative else "ました") if past else ("ません" if negative else "ます")
        return [stem + ending]

    if not past:
        return [verb.reading] if not negative else _as_list(plain_negative(verb))
    return _as_list(plain_negative_past(verb) if negative else plain_past(verb))


def normal_form(
    verb: Verb, polite: bool = False, negative: bool = False, past: bool = False
) -> list[str]:
    """Get the plain or polite form of a verb or adjective.

    Args:
        verb: The word to conjugate
        polite: ます / です register
        negative: Negative polarity
        past: Past tense

    Returns:
        List of acceptable forms
    """
    if not _conjugable(verb):
        return []

    match verb.type:
        case WordType.I_ADJECTIVE:
            return i_adjective_normal_form(verb, polite, negative, past)
        case WordType.NA_ADJECTIVE:
            return na_adjective_normal_form(verb, polite, negative, past)
        case WordType.VERB:
            return verb_normal_form(verb, polite, negative, past)
    return []


def plain_negative(verb: Verb) -> str | None:
    """Get the plain negative form of a verb (nai stem + ない)."""
    if not _is_verb(verb):
        return None
    stem = nai_stem(verb.part_of_speech, verb.reading)
    return stem + NAI if stem is not None else None


def plain_negative_past(verb: Verb) -> str | None:
    """Get the plain negative past: remove the い of ない and add かった."""
    negative = plain_negative(verb)
    return negative[:-1] + KATTA if negative is not None else None


def plain_past(verb: Verb) -> str | None:
    """Plain past of a verb is the te form with its final て/で moved to た/だ."""
    if not _is_verb(verb):
        return None
    te = _te_form(verb)
    if te is None:
        return None
    ending = change(te[-1], "e", "a")
    return te[:-1] + ending if ending is not None else None


# ============================================================================
# Te Form
# ============================================================================


def _te_form(verb: Verb) -> str | None:
    stem = remove_last(verb.reading)

    match verb.part_of_speech:
        case PartOfSpeech.ICHIDAN:
            return stem + "て"
        case (
            PartOfSpeech.GODAN_U
            | PartOfSpeech.GODAN_TSU
            | PartOfSpeech.GODAN_RU
            | PartOfSpeech.GODAN_RU_IRREGULAR
            | PartOfSpeech.GODAN_ARU
            | PartOfSpeech.GODAN_IKU
        ):
            return stem + "って"
        case PartOfSpeech.GODAN_KU:
            return stem + "いて"
        case PartOfSpeech.GODAN_GU:
            return stem + "いで"
        case PartOfSpeech.GODAN_BU | PartOfSpeech.GODAN_MU | PartOfSpeech.GODAN_NU:
            return stem + "んで"
        case (
            PartOfSpeech.GODAN_SU
            | PartOfSpeech.SURU
            | PartOfSpeech.SURU_IRREGULAR
            | PartOfSpeech.SURU_SPECIAL
            | PartOfSpeech.KURU
        ):
            masu = masu_stem(verb.part_of_speech, verb.reading)
            return masu + "て" if masu is not None else None
        case PartOfSpeech.I_ADJECTIVE:
            return stem + "くて"
        case PartOfSpeech.NA_ADJECTIVE:
            return verb.reading + "で"
    return None


def te_form(verb: Verb) -> list[str]:
    """Get the te form: のんで, はなして, たべて, たかくて, しずかで."""
    if not _conjugable(verb):
        return []
    return _as_list(_te_form(verb))


# ============================================================================
# Volitional / Desire
# ============================================================================


def volitional(verb: Verb, polite: bool = False) -> list[str]:
    """Get the volitional form: のもう / のみましょう."""
    if not _is_verb(verb):
        return []

    if polite:
        stem = masu_stem(verb.part_of_speech, verb.reading)
        return _as_list(stem + "ましょう" if stem is not None else None)

    conjugation: str | None = None
    match verb.group:
        case Group.GODAN:
            stem = change_last_vowel(verb.reading, "u", "o")
            conjugation = stem + "う" if stem is not None else None
        case Group.ICHIDAN:
            conjugation = remove_last(verb.reading) + "よう"
        case Group.IRREGULAR if verb.is_suru:
            stem = masu_stem(verb.part_of_speech, verb.reading)
            conjugation = stem + "よう" if stem is not None else None
        case Group.IRREGULAR:
            conjugation = remove_kuru(verb.reading) + "こよう"

    return _as_list(conjugation)


def tai_form(
    verb: Verb, polite: bool = False, negative: bool = False, past: bool = False
) -> list[str]:
    """Get the tai form (desire), which conjugates like an i-adjective."""
    if not _is_verb(verb):
        return []
    stem = masu_stem(verb.part_of_speech, verb.reading)
    if stem is None:
        return []

    conjugation = stem + "たい"
    if negative:
        conjugation = conjugation[:-1] + "く" + NAI
    if past:
        conjugation = conjugation[:-1] + KATTA
    if polite:
        conjugation += DESU

    return [conjugation]


# ============================================================================
# Potential
# ============================================================================


def potential(
    verb: Verb, polite: bool = False, negative: bool = False, past: bool = False
) -> list[str]:
    """Get the potential form: のめる, たべられる, こられる, できる.

    The potential stem + る conjugates as an ichidan verb.
    """
    if not _is_verb(verb) or verb.word in NO_POTENTIAL_WORDS:
        return []

    stem: str | None = None
    match verb.group:
        case Group.GODAN:
            stem = change_last_vowel(verb.reading, "u", "e")
        case Group.ICHIDAN:
            stem = remove_last(verb.reading) + "られ"
        case Group.IRREGULAR if verb.is_suru:
            stem = remove_suru(verb.part_of_speech, verb.reading) + "でき"
        case Group.IRREGULAR:
            stem = remove_kuru(verb.reading) + "こられ"

    if stem is None:
        return []
    return normal_form(synthesize_ichidan(stem + "る"), polite, negative, past)


# ============================================================================
# Imperative / Conditional / Tari
# ============================================================================


def imperative(verb: Verb, negative: bool = False) -> list[str]:
    """Get the imperative (のめ, たべろ, しろ, こい) or prohibitive (のむな)."""
    if not _is_verb(verb):
        return []

    # Prohibitive = dictionary form + な
    if negative:
        return [verb.reading + "な"]

    conjugation: str | None = None
    match verb.group:
        case Group.GODAN:
            conjugation = change_last_vowel(verb.reading, "u", "e")
        case Group.ICHIDAN if verb.word in IMPERATIVE_OVERRIDES:
            conjugation = IMPERATIVE_OVERRIDES[verb.word]
        case Group.ICHIDAN:
            conjugation = masu_stem(verb.part_of_speech, verb.reading) + "ろ"
        case Group.IRREGULAR if verb.is_suru:
            stem = masu_stem(verb.part_of_speech, verb.reading)
            conjugation = stem + "ろ" if stem is not None else None
        case Group.IRREGULAR:
            conjugation = remove_kuru(verb.reading) + "こい"

    return _as_list(conjugation)


def conditional(verb: Verb, negative: bool = False) -> list[str]:
    """Get the ba conditional: のめば, たかければ, しずかなら (and negatives)."""
    if not _conjugable(verb):
        return []

    match verb.type:
        case WordType.VERB if not negative:
            stem = change_last_vowel(verb.reading, "u", "e")
            return _as_list(stem + "ば" if stem is not None else None)
        case WordType.VERB:
            stem = nai_stem(verb.part_of_speech, verb.reading)
            return _as_list(stem + "なければ" if stem is not None else None)
        case WordType.I_ADJECTIVE:
            ending = "くなければ" if negative else "ければ"
            return [remove_last(verb.reading) + ending]
        case WordType.NA_ADJECTIVE if not negative:
            return [verb.reading + "なら"]
        case WordType.NA_ADJECTIVE:
            return [verb.reading + DEWA + "なければ", verb.reading + JA + "なければ"]
    return []


def tari_form(verb: Verb, negative: bool = False) -> list[str]:
    """Get the tari form: plain past + り (のんだり, たかかったり)."""
    return [past + "り" for past in normal_form(verb, False, negative, True)]


# ============================================================================
# Passive / Causative
# ============================================================================


def _a_stem(verb: Verb, ichidan_ending: str, kuru_stem: str) -> str | None:
    """Find the 'A' stem that passive れる and causative せる attach to."""
    match verb.group:
        case Group.GODAN if verb.part_of_speech is ARU_IRREGULAR:
            return ARU_A_STEM
        case Group.GODAN:
            return nai_stem(verb.part_of_speech, verb.reading)
        case Group.ICHIDAN:
            return nai_stem(verb.part_of_speech, verb.reading) + ichidan_ending
        case Group.IRREGULAR if verb.is_suru:
            return remove_suru(verb.part_of_speech, verb.reading) + "さ"
        case Group.IRREGULAR:
            return remove_kuru(verb.reading) + kuru_stem
    return None


def passive(
    verb: Verb, polite: bool = False, negative: bool = False, past: bool = False
) -> list[str]:
    """Get the passive form: のまれる, たべられる, される, こられる."""
    if not _is_verb(verb):
        return []
    stem = _a_stem(verb, "ら", "こら")
    if stem is None:
        return []
    return normal_form(synthesize_ichidan(stem + "れる"), polite, negative, past)


def causative(
    verb: Verb, polite: bool = False, negative: bool = False, past: bool = False
) -> list[str]:
    """Get the causative form: のませる, たべさせる, させる, こさせる."""
    if not _is_verb(verb):
        return []
    stem = _a_stem(verb, "さ", "こさ")
    if stem is None:
        return []
    return normal_form(synthesize_ichidan(stem + "せる"), polite, negative, past)


def causative_passive(
    verb: Verb, polite: bool = False, negative: bool = False, past: bool = False
) -> list[str]:
    """Get the causative-passive form: のませられる / のまされる.

    Godan verbs not ending in す also have the contracted form where
    せら becomes さ.
    """
    causatives = causative(verb)
    if not causatives:
        return []

    passives = passive(synthesize_ichidan(causatives[0]))
    if not passives:
        return []
    if verb.group is Group.GODAN and last_kana(verb.reading) != "す":
        # のませられる -> のま + される
        passives.append(passives[0][:-4] + "される")

    conjugations: list[str] = []
    for reading in passives:
        conjugations.extend(normal_form(synthesize_ichidan(reading), polite, negative, past))
    return conjugations
