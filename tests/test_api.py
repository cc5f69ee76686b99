"""API tests: POST /api/generate-brand and friends, through FastAPI's TestClient."""

from brandforge import generator, main
from brandforge.errors import GenerationError
from brandforge.palette import PALETTES, is_hex_color

SCENARIO_IDEA = "eco-friendly sneaker brand for Gen Z"

BRAND_KEYS = {
    "idea", "industry", "audience", "tone", "name", "tagline",
    "colors", "website", "socialPosts", "adStoryboard",
}


class TestGenerateBrand:
    def test_scenario_shape(self, client):
        r = client.post("/api/generate-brand", json={"idea": SCENARIO_IDEA})
        assert r.status_code == 200
        data = r.json()
        assert set(data) == BRAND_KEYS
        assert data["idea"] == SCENARIO_IDEA
        assert data["name"] and data["tagline"]
        assert len(data["colors"]) >= 1
        assert all(is_hex_color(c["hex"]) and c["name"] for c in data["colors"])
        assert set(data["website"]) == {"heroTitle", "heroSubtitle", "sections", "primaryCta", "secondaryCta"}
        assert len(data["website"]["sections"]) >= 1
        assert data["website"]["primaryCta"] != data["website"]["secondaryCta"]
        assert len(data["socialPosts"]) >= 1
        assert len(data["adStoryboard"]) == 6

    def test_idea_echo_is_trimmed(self, client):
        r = client.post("/api/generate-brand", json={"idea": "  eco sneakers  "})
        assert r.status_code == 200
        assert r.json()["idea"] == "eco sneakers"

    def test_same_idea_same_response(self, client):
        first = client.post("/api/generate-brand", json={"idea": SCENARIO_IDEA}).json()
        second = client.post("/api/generate-brand", json={"idea": SCENARIO_IDEA}).json()
        assert first == second


class TestRejections:
    def test_empty_idea(self, client, monkeypatch):
        calls = []
        monkeypatch.setattr(main, "generate_brand", lambda idea: calls.append(idea))
        r = client.post("/api/generate-brand", json={"idea": ""})
        assert r.status_code == 400
        assert r.json() == {"error": "Please describe your idea first."}
        assert calls == []

    def test_whitespace_idea(self, client):
        r = client.post("/api/generate-brand", json={"idea": "   \n"})
        assert r.status_code == 400
        assert r.json() == {"error": "Please describe your idea first."}

    def test_missing_idea_field(self, client):
        r = client.post("/api/generate-brand", json={"concept": SCENARIO_IDEA})
        assert r.status_code == 400
        assert r.json() == {"error": main.MALFORMED_BODY_MESSAGE}

    def test_non_string_idea(self, client):
        r = client.post("/api/generate-brand", json={"idea": 42})
        assert r.status_code == 400
        assert "error" in r.json()

    def test_body_not_json(self, client):
        r = client.post(
            "/api/generate-brand",
            content="idea=sneakers",
            headers={"Content-Type": "application/json"},
        )
        assert r.status_code == 400
        assert set(r.json()) == {"error"}


class TestGenerationFailure:
    def test_generation_error_is_500_with_message(self, client, monkeypatch):
        def fail(idea):
            raise GenerationError()

        monkeypatch.setattr(main, "generate_brand", fail)
        r = client.post("/api/generate-brand", json={"idea": SCENARIO_IDEA})
        assert r.status_code == 500
        assert r.json() == {"error": "Failed to generate brand."}

    def test_derivation_crash_never_leaks_partial_result(self, client, monkeypatch):
        def crash(idea):
            raise KeyError("colors")

        monkeypatch.setattr(generator, "derive_brand", crash)
        r = client.post("/api/generate-brand", json={"idea": SCENARIO_IDEA})
        assert r.status_code == 500
        assert set(r.json()) == {"error"}


class TestPalettePreview:
    def test_png_with_headers(self, client):
        r = client.post("/api/palette-preview", json={"idea": SCENARIO_IDEA})
        assert r.status_code == 200
        assert r.headers["content-type"] == "image/png"
        assert r.content[:4] == b"\x89PNG"
        assert r.headers["x-palette-mood"] in {"neon", "muted", "warm", "cool", "pastel", "neutral"}
        brand = client.post("/api/generate-brand", json={"idea": SCENARIO_IDEA}).json()
        assert r.headers["x-brand-name"] == brand["name"]

    def test_empty_idea_rejected(self, client):
        r = client.post("/api/palette-preview", json={"idea": " "})
        assert r.status_code == 400
        assert r.json() == {"error": "Please describe your idea first."}


def test_tokens_cover_every_tone(client):
    r = client.get("/api/tokens")
    assert r.status_code == 200
    assert set(r.json()["tokens"]) == set(PALETTES)


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}
