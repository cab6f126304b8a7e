from __future__ import annotations

from fastapi.testclient import TestClient

from research_report.server import app

client = TestClient(app)


def test_synthesize_endpoint(fake_provider) -> None:
    fake_provider.result = "# Report\n"
    response = client.post(
        "/api/report/synthesize",
        json={
            "query": "Summarize market growth",
            "history": [
                {"type": "read", "content": "Market grew 12%"},
                {"type": "search", "content": ["a", "b"], "persona": "Scout"},
            ],
            "citations": [{"url": "https://example.com", "title": "Example"}],
            "mode": "deep_dive",
            "file": {"name": "q3.pdf", "mimeType": "application/pdf", "data": "JVBERi0="},
        },
    )
    assert response.status_code == 200
    assert response.json() == {"report": "# Report"}
    model, request = fake_provider.calls[0]
    assert model == "gemini-2.5-pro"
    assert len(request.parts) == 2


def test_synthesize_endpoint_maps_missing_response_to_502(fake_provider) -> None:
    fake_provider.result = None
    response = client.post("/api/report/synthesize", json={"query": "q"})
    assert response.status_code == 502
    detail = response.json()["detail"]
    assert "content filters" in detail["error"]
    assert detail["hint"]


def test_rewrite_endpoint(fake_provider) -> None:
    fake_provider.result = " # Rewritten "
    response = client.post(
        "/api/report/rewrite", json={"report": "# Report", "instruction": "no changes"}
    )
    assert response.status_code == 200
    assert response.json() == {"report": "# Rewritten"}


def test_rewrite_endpoint_empty_text_is_502(fake_provider) -> None:
    fake_provider.result = ""
    response = client.post(
        "/api/report/rewrite", json={"report": "# Report", "instruction": "shorter"}
    )
    assert response.status_code == 502


def test_provider_configuration_error_is_400(fake_provider) -> None:
    fake_provider.result = ValueError("GEMINI_API_KEY is required.")
    response = client.post("/api/report/synthesize", json={"query": "q"})
    assert response.status_code == 400
    assert response.json()["detail"]["hint"]


def test_config_endpoint_hides_secrets(clean_env) -> None:
    clean_env.setenv("GEMINI_API_KEY", "secret-value")
    body = client.get("/api/config").json()
    assert body["default_provider"] == "gemini"
    assert body["mode_models"]["gemini"]["deep_dive"] == "gemini-2.5-pro"
    assert "secret-value" not in str(body)


def test_health(clean_env) -> None:
    assert client.get("/api/health").json()["status"] == "healthy"
