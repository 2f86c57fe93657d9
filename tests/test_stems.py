"""Tests for masu and nai stems."""
import pytest

from doushi.classification import PartOfSpeech as P
from doushi.stems import masu_stem, nai_stem


class TestMasuStem:

    @pytest.mark.parametrize("pos, reading, expected", [
        (P.GODAN_MU, "のむ", "のみ"),
        (P.GODAN_U, "かう", "かい"),
        (P.GODAN_TSU, "まつ", "まち"),
        (P.GODAN_ARU, "くださる", "ください"),
        (P.GODAN_ARU, "いらっしゃる", "いらっしゃい"),
        (P.ICHIDAN, "たべる", "たべ"),
        (P.ICHIDAN, "みる", "み"),
        (P.SURU, "べんきょうする", "べんきょうし"),
        (P.SURU_IRREGULAR, "する", "し"),
        (P.KURU, "くる", "き"),
        (P.KURU, "もってくる", "もってき"),
    ])
    def test_masu_stem(self, pos, reading, expected):
        assert masu_stem(pos, reading) == expected

    def test_ichidan_is_reading_without_ru(self):
        for reading in ("たべる", "みる", "おきる", "ねる"):
            assert masu_stem(P.ICHIDAN, reading) == reading[:-1]

    def test_adjectives_have_no_stem(self):
        assert masu_stem(P.I_ADJECTIVE, "たかい") is None
        assert masu_stem(None, "ほん") is None

    def test_underivable_reading(self):
        assert masu_stem(P.GODAN_MU, "ほん") is None


class TestNaiStem:

    @pytest.mark.parametrize("pos, reading, expected", [
        (P.GODAN_MU, "のむ", "のま"),
        (P.GODAN_U, "かう", "かわ"),
        (P.GODAN_RU_IRREGULAR, "ある", ""),
        (P.ICHIDAN, "たべる", "たべ"),
        (P.SURU, "べんきょうする", "べんきょうし"),
        (P.SURU_SPECIAL, "あいする", "あいし"),
        (P.KURU, "くる", "こ"),
    ])
    def test_nai_stem(self, pos, reading, expected):
        assert nai_stem(pos, reading) == expected

    def test_adjectives_have_no_stem(self):
        assert nai_stem(P.NA_ADJECTIVE, "しずか") is None
