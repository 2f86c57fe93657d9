"""Conjugation categories requested by name.

A category name is a form family followed by modifiers, for example::

    plain-negative-past          -> のまなかった
    polite-positive-present      -> のみます
    te-form                      -> のんで
    volitional-polite            -> のみましょう
    tai-form-negative-past       -> のみたくなかった
    potential-polite             -> のめます
    causative-passive-negative   -> のませられない, のまされない
    i-adjective-plain-negative-present -> たかくない

Modifiers are ``plain``/``polite``, ``positive``/``negative`` and
``present``/``past``; missing ones default to plain, positive, present.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from doushi import conjugation
from doushi.classification import WordType
from doushi.verb import Verb

logger = logging.getLogger(__name__)


class Family(StrEnum):
    """Form families. NORMAL covers bare plain-/polite- names."""

    NORMAL = "normal"
    I_ADJECTIVE = "i-adjective"
    NA_ADJECTIVE = "na-adjective"
    TE_FORM = "te-form"
    VOLITIONAL = "volitional"
    TAI_FORM = "tai-form"
    POTENTIAL = "potential"
    IMPERATIVE = "imperative"
    CONDITIONAL = "conditional"
    TARI_FORM = "tari-form"
    PASSIVE = "passive"
    CAUSATIVE = "causative"
    CAUSATIVE_PASSIVE = "causative-passive"


class Axis(StrEnum):
    REGISTER = "register"
    POLARITY = "polarity"
    TENSE = "tense"


# Modifier -> (axis, value of the boolean flag on that axis)
MODIFIERS: dict[str, tuple[Axis, bool]] = {
    "plain": (Axis.REGISTER, False),
    "polite": (Axis.REGISTER, True),
    "positive": (Axis.POLARITY, False),
    "negative": (Axis.POLARITY, True),
    "present": (Axis.TENSE, False),
    "past": (Axis.TENSE, True),
}

_ALL_AXES = frozenset(Axis)

# Family -> axes that may be modified
FAMILY_AXES: dict[Family, frozenset[Axis]] = {
    Family.NORMAL: _ALL_AXES,
    Family.I_ADJECTIVE: _ALL_AXES,
    Family.NA_ADJECTIVE: _ALL_AXES,
    Family.TE_FORM: frozenset(),
    Family.VOLITIONAL: frozenset({Axis.REGISTER}),
    Family.TAI_FORM: _ALL_AXES,
    Family.POTENTIAL: _ALL_AXES,
    Family.IMPERATIVE: frozenset({Axis.POLARITY}),
    Family.CONDITIONAL: frozenset({Axis.POLARITY}),
    Family.TARI_FORM: frozenset({Axis.POLARITY}),
    Family.PASSIVE: _ALL_AXES,
    Family.CAUSATIVE: _ALL_AXES,
    Family.CAUSATIVE_PASSIVE: _ALL_AXES,
}

# Families whose canonical names leave out the plain register
# (tai-form-negative-past, not tai-form-plain-negative-past)
IMPLICIT_PLAIN_FAMILIES = frozenset({Family.TAI_FORM})

# Longest prefix first so causative-passive is not read as causative
_PREFIXED_FAMILIES = sorted(
    (family for family in Family if family is not Family.NORMAL),
    key=lambda family: len(family.value),
    reverse=True,
)


@dataclass(frozen=True, slots=True)
class Category:
    """A parsed category name."""

    family: Family
    polite: bool = False
    negative: bool = False
    past: bool = False


def parse_category(name: str) -> Category:
    """Parse a category name.

    Args:
        name: e.g. "plain-negative-past", "te-form", "potential-polite"

    Returns:
        The parsed category

    Raises:
        ValueError: Unknown family or modifier, an empty modifier, a modifier
            the family does not take, or the same axis given twice.
    """
    family = Family.NORMAL
    modifiers = name.split("-")
    for candidate in _PREFIXED_FAMILIES:
        if name == candidate.value or name.startswith(candidate.value + "-"):
            family = candidate
            rest = name[len(candidate.value) + 1:]
            modifiers = rest.split("-") if name != candidate.value else []
            break

    flags: dict[Axis, bool] = {}
    for modifier in modifiers:
        if modifier not in MODIFIERS:
            raise ValueError(f"Unknown category: {name}")
        axis, value = MODIFIERS[modifier]
        if axis not in FAMILY_AXES[family]:
            raise ValueError(f"Category {family.value} does not take '{modifier}': {name}")
        if axis in flags:
            raise ValueError(f"Category has more than one {axis.value}: {name}")
        flags[axis] = value

    if family is Family.NORMAL and not flags:
        raise ValueError(f"Unknown category: {name}")

    return Category(
        family=family,
        polite=flags.get(Axis.REGISTER, False),
        negative=flags.get(Axis.POLARITY, False),
        past=flags.get(Axis.TENSE, False),
    )


def _dispatch(verb: Verb, category: Category) -> list[str]:
    c = category
    match c.family:
        case Family.NORMAL:
            return conjugation.normal_form(verb, c.polite, c.negative, c.past)
        case Family.I_ADJECTIVE | Family.NA_ADJECTIVE:
            # Only for the adjective type named by the category
            if verb.type != WordType(c.family.value):
                return []
            return conjugation.normal_form(verb, c.polite, c.negative, c.past)
        case Family.TE_FORM:
            return conjugation.te_form(verb)
        case Family.VOLITIONAL:
            return conjugation.volitional(verb, c.polite)
        case Family.TAI_FORM:
            return conjugation.tai_form(verb, c.polite, c.negative, c.past)
        case Family.POTENTIAL:
            return conjugation.potential(verb, c.polite, c.negative, c.past)
        case Family.IMPERATIVE:
            return conjugation.imperative(verb, c.negative)
        case Family.CONDITIONAL:
            return conjugation.conditional(verb, c.negative)
        case Family.TARI_FORM:
            return conjugation.tari_form(verb, c.negative)
        case Family.PASSIVE:
            return conjugation.passive(verb, c.polite, c.negative, c.past)
        case Family.CAUSATIVE:
            return conjugation.causative(verb, c.polite, c.negative, c.past)
        case Family.CAUSATIVE_PASSIVE:
            return conjugation.causative_passive(verb, c.polite, c.negative, c.past)
    return []


def conjugate_category(verb: Verb, name: str) -> list[str]:
    """Conjugate a verb or adjective into a named category.

    Args:
        verb: The word to conjugate
        name: Category name, see the module docstring

    Returns:
        Acceptable forms, most common first. Empty when the category does not
        apply to this word.

    Raises:
        ValueError: If the category name cannot be parsed.
    """
    category = parse_category(name)
    if verb.not_conjugable:
        return []

    forms = _dispatch(verb, category)
    if not forms:
        logger.debug("Category %s does not apply to %s (%s)", name, verb.word, verb.part_of_speech)
    return forms


def _category_names() -> list[str]:
    """Every canonical category name."""
    names: list[str] = []
    for family in Family:
        axes = FAMILY_AXES[family]
        registers = ["plain", "polite"] if Axis.REGISTER in axes else [None]
        if family in IMPLICIT_PLAIN_FAMILIES:
            registers = [None, "polite"]
        polarities = ["positive", "negative"] if Axis.POLARITY in axes else [None]
        tenses = ["present", "past"] if Axis.TENSE in axes else [None]
        prefix = [] if family is Family.NORMAL else [family.value]
        for register in registers:
            for polarity in polarities:
                for tense in tenses:
                    parts = prefix + [m for m in (register, polarity, tense) if m]
                    names.append("-".join(parts))
    return names


CATEGORY_NAMES: tuple[str, ...] = tuple(_category_names())


def conjugate_categories(verb: Verb, names: Iterable[str] | None = None) -> dict[str, list[str]]:
    """Conjugate into several categories at once.

    Args:
        verb: The word to conjugate
        names: Category names; all of CATEGORY_NAMES when None

    Returns:
        Category name -> forms
    """
    if names is None:
        names = CATEGORY_NAMES
    return {name: conjugate_category(verb, name) for name in names}
