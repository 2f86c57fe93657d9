"""Tests for the FastAPI application."""
import pytest
from fastapi.testclient import TestClient

from main import app
from doushi.categories import CATEGORY_NAMES
from conftest import make_entry


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


class TestHealth:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"


class TestVocabulary:

    def test_parts_of_speech(self, client):
        tags = client.get("/parts-of-speech").json()
        assert len(tags) == 19
        assert {"tag": "Ichidan verb", "group": "2", "word_type": "verb"} in tags

    def test_categories(self, client):
        assert client.get("/categories").json() == list(CATEGORY_NAMES)


class TestConjugate:

    def test_selected_forms(self, client):
        response = client.post("/conjugate", json={
            "definition": make_entry("のむ", "Godan verb with mu ending", "飲む", "to drink"),
            "forms": ["te-form", "plain-negative-past"],
        })
        assert response.status_code == 200
        body = response.json()
        assert body["word"] == "飲む"
        assert body["reading"] == "のむ"
        assert body["part_of_speech"] == "Godan verb with mu ending"
        assert body["word_type"] == "verb"
        assert body["group"] == "1"
        assert body["english"] == "to drink"
        assert body["conjugations"] == {
            "te-form": ["のんで"],
            "plain-negative-past": ["のまなかった"],
        }

    def test_all_forms(self, client):
        response = client.post("/conjugate", json={
            "definition": make_entry("しずか", "Na-adjective", "静か", "quiet"),
        })
        assert response.status_code == 200
        conjugations = response.json()["conjugations"]
        assert len(conjugations) == len(CATEGORY_NAMES)
        assert conjugations["tai-form-positive-present"] == []
        assert conjugations["te-form"] == ["しずかで"]

    def test_suru_noun(self, client):
        response = client.post("/conjugate", json={
            "definition": make_entry("べんきょう", "Suru verb", "勉強", "study", extra_pos=("Noun",)),
            "forms": ["polite-negative-present"],
        })
        body = response.json()
        assert body["word"] == "勉強する"
        assert body["english"] == "[to do] study"
        assert body["conjugations"]["polite-negative-present"] == ["べんきょうしません"]

    def test_not_conjugable(self, client):
        response = client.post("/conjugate", json={
            "definition": make_entry("ほん", "Noun", "本", "book"),
        })
        assert response.status_code == 422

    def test_unknown_form(self, client):
        response = client.post("/conjugate", json={
            "definition": make_entry("のむ", "Godan verb with mu ending"),
            "forms": ["future-tense"],
        })
        assert response.status_code == 400
        assert "future-tense" in response.json()["detail"]

    def test_invalid_record(self, client):
        response = client.post("/conjugate", json={"definition": {"japanese": [], "senses": []}})
        assert response.status_code == 422
