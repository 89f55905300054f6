import asyncio

import pytest
from fastapi.testclient import TestClient

import gemini_integration
from config import get_settings
from main import app
from models import GenerationRequest, Recipe
from routes import recipes
from test_gemini_integration import PROVIDER_RECIPE


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def provider_calls(monkeypatch):
    """Replaces the Gemini call; set .result to the recipe (or None) it should produce."""
    class Stub:
        result = Recipe.model_validate(PROVIDER_RECIPE)
        calls = []

    async def fake_generate(request, settings):
        Stub.calls.append((request, settings))
        return Stub.result

    monkeypatch.setattr(gemini_integration, "generate_recipe_with_gemini", fake_generate)
    return Stub


EXAMPLE_BODY = {
    "ingredients": ["chicken", "rice", "garlic"],
    "equipment": [],
    "cuisine": "asian",
    "timeAvailable": 30,
    "dietaryRestrictions": "",
}


def test_root(client):
    assert client.get("/").json() == {"message": "Welcome to Recipe Generator API"}


def test_template_recipe_without_api_key(client, provider_calls):
    response = client.post("/api/generate-recipe", json=EXAMPLE_BODY)

    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "template"
    recipe = data["recipe"]
    assert recipe["name"] == "Asian Fusion Stir-Fry"
    assert recipe["difficulty"] == "Easy"
    assert recipe["totalTime"] == 30
    assert recipe["prepTime"] == 9
    assert recipe["cookTime"] == 21
    assert recipe["equipment"] == ["Stovetop", "Pan", "Knife"]
    assert [s["step"] for s in recipe["instructions"]] == [1, 2, 3, 4, 5]
    assert provider_calls.calls == []


def test_template_recipe_omits_absent_notes(client):
    recipe = client.post("/api/generate-recipe", json=EXAMPLE_BODY).json()["recipe"]

    assert recipe["ingredients"][0] == {"name": "chicken", "amount": "1 lb", "notes": "main ingredient"}
    assert recipe["ingredients"][1] == {"name": "rice", "amount": "2 cups"}
    assert "nutritionHighlights" in recipe


def test_blank_api_key_counts_as_missing(client, provider_calls, monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "   ")

    data = client.post("/api/generate-recipe", json=EXAMPLE_BODY).json()

    assert data["source"] == "template"
    assert provider_calls.calls == []


def test_provider_recipe_returned_verbatim(client, provider_calls, monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")

    data = client.post("/api/generate-recipe", json=EXAMPLE_BODY).json()

    assert data == {"recipe": PROVIDER_RECIPE, "source": "provider"}
    request, settings = provider_calls.calls[0]
    assert request.ingredients == ["chicken", "rice", "garlic"]
    assert settings.google_api_key == "test-key"


def test_provider_failure_falls_back_to_template(client, provider_calls, monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")
    provider_calls.result = None

    response = client.post("/api/generate-recipe", json=EXAMPLE_BODY)

    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "template"
    assert data["recipe"]["name"] == "Asian Fusion Stir-Fry"
    assert len(provider_calls.calls) == 1


def test_fallback_waits_for_simulated_delay(provider_calls, monkeypatch):
    waits = []

    async def fake_sleep(seconds):
        waits.append(seconds)

    monkeypatch.setenv("FALLBACK_DELAY_SECONDS", "1.5")
    monkeypatch.setattr(recipes.asyncio, "sleep", fake_sleep)
    request = GenerationRequest.model_validate(EXAMPLE_BODY)

    recipe, source = asyncio.run(recipes.generate_recipe(request, get_settings()))

    assert source == "template"
    assert recipe.name == "Asian Fusion Stir-Fry"
    assert waits == [1.5]


def test_unknown_cuisine_is_not_an_error(client):
    body = dict(EXAMPLE_BODY, cuisine="martian")

    response = client.post("/api/generate-recipe", json=body)

    assert response.status_code == 200
    assert response.json()["recipe"]["name"] == "Classic American Comfort Food"


@pytest.mark.parametrize("body", [
    {"equipment": [], "cuisine": "asian", "timeAvailable": 30},
    {"ingredients": ["chicken"], "cuisine": "asian", "timeAvailable": "soon"},
    ["chicken"],
])
def test_malformed_body_returns_generic_error(client, body):
    response = client.post("/api/generate-recipe", json=body)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate recipe. Please try again."}


def test_non_json_body_returns_generic_error(client):
    response = client.post(
        "/api/generate-recipe", content=b"ingredients=chicken", headers={"Content-Type": "text/plain"},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate recipe. Please try again."}


def test_options_lists_form_choices(client):
    data = client.get("/api/options").json()

    assert [c["value"] for c in data["cuisines"]][:3] == ["italian", "mexican", "asian"]
    assert [t["value"] for t in data["times"]] == [15, 30, 45, 60, 90, 120]
    assert "Air Fryer" in data["equipment"]
