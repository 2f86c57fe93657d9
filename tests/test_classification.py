"""Tests for part-of-speech classification."""
import pytest

from doushi.classification import (
    Group,
    PartOfSpeech,
    WordType,
    group,
    is_suru,
    is_usable,
    parse_part_of_speech,
    word_type,
)


class TestVocabulary:

    def test_nineteen_tags(self):
        assert len(PartOfSpeech) == 19

    def test_parse(self):
        assert parse_part_of_speech("Ichidan verb") is PartOfSpeech.ICHIDAN
        assert parse_part_of_speech("Noun") is None
        assert parse_part_of_speech(None) is None


class TestGroup:

    @pytest.mark.parametrize("tag, expected", [
        ("Godan verb with u ending", Group.GODAN),
        ("Godan verb with ru ending (irregular verb)", Group.GODAN),
        ("Godan verb - aru special class", Group.GODAN),
        ("Godan verb - Iku/Yuku special class", Group.GODAN),
        ("Ichidan verb", Group.ICHIDAN),
        ("Suru verb", Group.IRREGULAR),
        ("Suru verb - irregular", Group.IRREGULAR),
        ("Suru verb - special class", Group.IRREGULAR),
        ("Kuru verb - special class", Group.IRREGULAR),
        ("I-adjective", Group.I_ADJECTIVE),
        ("Na-adjective", Group.NA_ADJECTIVE),
        ("Noun", Group.UNKNOWN),
        ("Godan verb", Group.UNKNOWN),
        ("", Group.UNKNOWN),
    ])
    def test_group(self, tag, expected):
        assert group(tag) is expected

    def test_every_tag_has_a_group(self):
        for pos in PartOfSpeech:
            assert group(pos) is not Group.UNKNOWN

    def test_deterministic(self):
        for pos in PartOfSpeech:
            assert {group(pos) for _ in range(3)} == {group(pos)}
            assert {word_type(pos) for _ in range(3)} == {word_type(pos)}


class TestWordType:

    def test_adjectives(self):
        assert word_type("I-adjective") is WordType.I_ADJECTIVE
        assert word_type("Na-adjective") is WordType.NA_ADJECTIVE

    def test_everything_else_is_a_verb(self):
        assert word_type("Ichidan verb") is WordType.VERB
        assert word_type("Kuru verb - special class") is WordType.VERB
        assert word_type("Noun") is WordType.VERB


class TestIsSuru:

    def test_suru_variants(self):
        assert is_suru("Suru verb")
        assert is_suru(PartOfSpeech.SURU_IRREGULAR)
        assert is_suru("Suru verb - special class")

    def test_not_suru(self):
        assert not is_suru("Kuru verb - special class")
        assert not is_suru("Godan verb with su ending")
        assert not is_suru(None)


class TestIsUsable:

    def test_known_tag(self):
        assert is_usable("Godan verb with ku ending", ["Godan verb with ku ending", "Transitive verb"])

    def test_unknown_tag(self):
        assert not is_usable("Transitive verb", ["Transitive verb"])

    def test_na_adjective(self):
        assert is_usable("Na-adjective", ["Na-adjective", "Noun"])

    def test_na_adjective_with_no_adjective(self):
        assert not is_usable("Na-adjective", ["Na-adjective", "No-adjective"])

    def test_na_adjective_with_suru_verb(self):
        assert not is_usable("Na-adjective", ["Noun", "Na-adjective", "Suru verb"])
