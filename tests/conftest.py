"""Test configuration and fixtures."""
import pytest

from doushi.verb import Verb


def make_entry(reading, part_of_speech, word=None, english="meaning", extra_pos=()):
    """Build a Jisho-style dictionary entry with a single sense."""
    japanese = {"reading": reading}
    if word is not None:
        japanese["word"] = word
    return {
        "japanese": [japanese],
        "senses": [{
            "parts_of_speech": [*extra_pos, part_of_speech],
            "english_definitions": [english],
        }],
    }


@pytest.fixture
def make_verb():
    """Factory for verbs built from a single-sense entry."""
    def _make(reading, part_of_speech, word=None, english="meaning", extra_pos=()):
        return Verb.from_definition(make_entry(reading, part_of_speech, word, english, extra_pos))
    return _make


@pytest.fixture
def nomu(make_verb):
    return make_verb("のむ", "Godan verb with mu ending", "飲む", "to drink")


@pytest.fixture
def hanasu(make_verb):
    return make_verb("はなす", "Godan verb with su ending", "話す", "to speak")


@pytest.fixture
def kau(make_verb):
    return make_verb("かう", "Godan verb with u ending", "買う", "to buy")


@pytest.fixture
def aru(make_verb):
    return make_verb("ある", "Godan verb with ru ending (irregular verb)", "有る", "to be")


@pytest.fixture
def taberu(make_verb):
    return make_verb("たべる", "Ichidan verb", "食べる", "to eat")


@pytest.fixture
def benkyou(make_verb):
    return make_verb("べんきょう", "Suru verb", "勉強", "study", extra_pos=("Noun",))


@pytest.fixture
def suru(make_verb):
    return make_verb("する", "Suru verb - irregular", "為る", "to do")


@pytest.fixture
def kuru(make_verb):
    return make_verb("くる", "Kuru verb - special class", "来る", "to come")


@pytest.fixture
def takai(make_verb):
    return make_verb("たかい", "I-adjective", "高い", "high")


@pytest.fixture
def shizuka(make_verb):
    return make_verb("しずか", "Na-adjective", "静か", "quiet")
