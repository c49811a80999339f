"""HTTP service tests (Flask test client)."""

import api.app as app_module

WEATHER = {"submission": "Il est beau aujourd'hui!", "reference": "Il fait beau aujourd'hui!"}


# ============================================================================
# TestAnalyzeRoute
# ============================================================================

class TestAnalyzeRoute:

    def test_analysis(self, client):
        resp = client.post("/api/analyze", json=WEATHER)
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["total_votes"] == 2
        assert data["errors"][0]["kind"] == "multi_char"
        assert data["correct_words"] == ["Il", "beau", "aujourd'hui"]
        assert [s["type"] for s in data["display_segments"]][:3] == ["correct", "multi_char", "missing"]

    def test_missing_fields_are_empty(self, client):
        resp = client.post("/api/analyze", json={})
        assert resp.status_code == 200
        assert resp.get_json()["total_votes"] == 0

    def test_null_submission(self, client):
        resp = client.post("/api/analyze", json={"submission": None, "reference": "Bonjour"})
        assert resp.get_json()["missing_words"] == ["Bonjour"]

    def test_non_json_body(self, client):
        resp = client.post("/api/analyze", data="not json", content_type="text/plain")
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_non_string_field(self, client):
        resp = client.post("/api/analyze", json={"submission": 12, "reference": "douze"})
        assert resp.status_code == 400
        assert "submission" in resp.get_json()["error"]


# ============================================================================
# TestRenderRoute
# ============================================================================

class TestRenderRoute:

    def test_markup_by_default(self, client):
        resp = client.post("/api/render", json={"submission": "Je suis", "reference": "Je suis là"})
        assert resp.status_code == 200
        markup = resp.get_json()["markup"]
        assert markup.startswith("Je suis <span")

    def test_segments(self, client):
        resp = client.post("/api/render", json=dict(WEATHER, format="segments"))
        segments = resp.get_json()["segments"]
        assert segments[1] == {
            "type": "multi_char",
            "text": "est",
            "correction_text": "fait",
            "char_positions": [0, 1, 2, 3],
        }

    def test_unknown_format(self, client):
        resp = client.post("/api/render", json=dict(WEATHER, format="pdf"))
        assert resp.status_code == 400


class TestAccuracyRoute:

    def test_accuracy(self, client):
        resp = client.post("/api/accuracy", json={"submission": "hello", "reference": "hallo"})
        assert resp.get_json() == {"accuracy": 4}


# ============================================================================
# TestPhraseRoutes
# ============================================================================

class TestPhraseRoutes:

    def test_random_phrase_hides_reference(self, client):
        resp = client.get("/api/phrases/random")
        assert resp.status_code == 200
        data = resp.get_json()
        assert set(data) == {"pair_id", "topic", "flawed_variant"}

    def test_check_correct_answer(self, client):
        resp = client.post("/api/phrases/weather/check", json={"submission": "Il fait beau aujourd'hui!"})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["pair_id"] == "weather"
        assert data["analysis"]["total_votes"] == 0
        assert data["markup"] == "Il fait beau aujourd'hui!"

    def test_check_uncorrected_answer(self, client):
        resp = client.post("/api/phrases/weather/check", json={"submission": "Il est beau aujourd'hui!"})
        assert resp.get_json()["analysis"]["total_votes"] == 2

    def test_unknown_pair(self, client):
        resp = client.post("/api/phrases/nope/check", json={"submission": "x"})
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Phrase not found"}

    def test_no_phrases_available(self, client, monkeypatch, tmp_path):
        monkeypatch.setattr(app_module, "PHRASE_DATA_FILE", str(tmp_path / "absent.json"))
        resp = client.get("/api/phrases/random")
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "No phrases available"}
