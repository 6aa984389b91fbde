def _assert_envelope(payload: dict) -> None:
    assert isinstance(payload.get("ok"), bool)
    assert "timestamp" in payload
    if payload["ok"]:
        assert payload.get("data") is not None


def _custom_model_body(name: str, provider_id: str = "deepseek") -> dict:
    return {
        "name": name,
        "displayName": "Llama 3 70B",
        "maxTokens": 8192,
        "supportVision": False,
        "selected": True,
        "type": "custom",
        "providerId": provider_id,
        "providerName": "Deepseek",
    }


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_provider_summaries_contract(client) -> None:
    response = client.get("/api/providers")
    assert response.status_code == 200
    body = response.json()
    _assert_envelope(body)
    p = body["data"][0]
    assert set(p) == {"provider", "providerName", "isActive", "apiStyle", "logo"}


def test_provider_settings_requires_admin(client, admin_headers) -> None:
    denied = client.get("/api/providers/settings")
    assert denied.status_code == 403
    body = denied.json()
    _assert_envelope(body)
    assert body["ok"] is False
    assert body["error"] == "not allowed"

    wrong_token = client.get(
        "/api/providers/settings", headers={"Authorization": "Bearer nope"}
    )
    assert wrong_token.status_code == 403

    allowed = client.get("/api/providers/settings", headers=admin_headers)
    assert allowed.status_code == 200
    data = allowed.json()["data"]
    assert [p["provider"] for p in data] == ["openai", "claude", "gemini", "deepseek"]
    for field in ["endpoint", "apikey", "order", "type"]:
        assert field in data[0]


def test_upsert_settings_and_active_listing(client, admin_headers) -> None:
    response = client.put(
        "/api/providers/openai/settings",
        json={"isActive": True, "apikey": "sk-live"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    _assert_envelope(response.json())

    active = client.get("/api/providers/active").json()["data"]
    assert [p["provider"] for p in active] == ["openai"]

    available = client.get("/api/models/available").json()["data"]
    assert {m["providerId"] for m in available} == {"openai"}
    assert available[0]["providerName"] == "Open AI"
    assert "providerLogo" in available[0]


def test_upsert_settings_rejected_for_anonymous(client) -> None:
    response = client.put("/api/providers/openai/settings", json={"isActive": True})
    assert response.status_code == 403
    assert client.get("/api/providers/active").json()["data"] == []


def test_list_models_filtered_by_provider(client) -> None:
    response = client.get("/api/models", params={"providerId": "claude"})
    assert response.status_code == 200
    names = [m["name"] for m in response.json()["data"]]
    assert names == ["claude-3-5-sonnet-latest", "claude-3-5-haiku-latest"]


def test_custom_model_lifecycle_with_slash_in_name(client, admin_headers) -> None:
    name = "meta-llama/llama-3-70b"
    created = client.post("/api/models", json=_custom_model_body(name))
    assert created.status_code == 200
    assert created.json()["data"]["status"] == "success"

    duplicate = client.post("/api/models", json=_custom_model_body(name))
    assert duplicate.status_code == 200
    assert duplicate.json()["data"]["status"] == "fail"
    assert duplicate.json()["data"]["message"]

    toggled = client.patch(f"/api/models/{name}/selected", json={"selected": False})
    assert toggled.status_code == 200
    assert toggled.json()["data"] == {"name": name, "selected": False}

    renamed_body = _custom_model_body("meta-llama/llama-3.1-70b")
    updated = client.put(f"/api/models/{name}", json=renamed_body)
    assert updated.status_code == 200
    assert updated.json()["data"]["status"] == "success"

    names = [m["name"] for m in client.get("/api/models", params={"providerId": "deepseek"}).json()["data"]]
    assert "meta-llama/llama-3.1-70b" in names
    assert name not in names

    denied = client.delete("/api/models/meta-llama/llama-3.1-70b")
    assert denied.status_code == 403

    deleted = client.delete("/api/models/meta-llama/llama-3.1-70b", headers=admin_headers)
    assert deleted.status_code == 200
    names = [m["name"] for m in client.get("/api/models", params={"providerId": "deepseek"}).json()["data"]]
    assert "meta-llama/llama-3.1-70b" not in names


def test_update_missing_model_returns_fail(client) -> None:
    response = client.put("/api/models/ghost", json=_custom_model_body("ghost"))
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "fail"


def test_custom_provider_add_and_delete(client, admin_headers) -> None:
    body = {
        "provider": "local",
        "providerName": "Local",
        "endpoint": "http://localhost:11434/v1",
        "apiStyle": "openai",
        "apikey": "",
    }
    assert client.post("/api/providers", json=body).status_code == 403

    created = client.post("/api/providers", json=body, headers=admin_headers)
    assert created.json()["data"]["status"] == "success"
    again = client.post("/api/providers", json=body, headers=admin_headers)
    assert again.json()["data"]["status"] == "fail"

    summaries = {p["provider"]: p for p in client.get("/api/providers").json()["data"]}
    assert summaries["local"]["isActive"] is True

    deleted = client.delete("/api/providers/local", headers=admin_headers)
    assert deleted.status_code == 200
    assert deleted.json()["data"] == {"status": "success", "message": None}
    assert "local" not in {p["provider"] for p in client.get("/api/providers").json()["data"]}


def test_reorder_providers_and_models(client, admin_headers) -> None:
    denied = client.put(
        "/api/providers/order",
        json={"providers": [{"providerId": "openai", "order": 9}]},
    )
    assert denied.status_code == 403

    response = client.put(
        "/api/providers/order",
        json={
            "providers": [
                {"providerId": "gemini", "order": 1},
                {"providerId": "openai", "order": 2},
                {"providerId": "claude", "order": 3},
                {"providerId": "deepseek", "order": 4},
            ]
        },
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["data"] == {"updated": 4}
    settings = client.get("/api/providers/settings", headers=admin_headers).json()["data"]
    assert [p["provider"] for p in settings] == ["gemini", "openai", "claude", "deepseek"]

    response = client.put(
        "/api/providers/gemini/models/order",
        json={"models": [{"modelId": "gemini-1.5-flash", "order": 1}, {"modelId": "gemini-1.5-pro", "order": 2}]},
        headers=admin_headers,
    )
    assert response.status_code == 200
    names = [m["name"] for m in client.get("/api/models", params={"providerId": "gemini"}).json()["data"]]
    assert names == ["gemini-1.5-flash", "gemini-1.5-pro"]


def test_validation_error_uses_envelope(client) -> None:
    response = client.post("/api/models", json={"name": "x"})
    assert response.status_code == 422
    body = response.json()
    _assert_envelope(body)
    assert body["ok"] is False
    assert "displayName" in body["error"]


def test_out_of_range_integers_are_rejected(client, admin_headers) -> None:
    body = _custom_model_body("huge")
    body["maxTokens"] = 2**70
    response = client.post("/api/models", json=body)
    assert response.status_code == 422
    assert response.json()["ok"] is False
    assert "maxTokens" in response.json()["error"]

    response = client.put(
        "/api/providers/order",
        json={"providers": [{"providerId": "gemini", "order": 7}, {"providerId": "openai", "order": 2**70}]},
        headers=admin_headers,
    )
    assert response.status_code == 422
    settings = client.get("/api/providers/settings", headers=admin_headers).json()["data"]
    assert {p["provider"]: p["order"] for p in settings}["gemini"] == 3

    response = client.put(
        "/api/providers/openai/settings", json={"order": -(2**70)}, headers=admin_headers
    )
    assert response.status_code == 422


def test_value_errors_map_to_400(client, monkeypatch) -> None:
    from llm_registry.services.registry_service import ProviderRegistryService

    def broken(self, identity, provider_id=None):
        raise ValueError("Failed to decrypt data - encryption key may have changed")

    monkeypatch.setattr(ProviderRegistryService, "list_models", broken)
    response = client.get("/api/models")
    assert response.status_code == 400
    body = response.json()
    _assert_envelope(body)
    assert body["error"] == "Failed to decrypt data - encryption key may have changed"


def test_unhandled_errors_hide_traceback() -> None:
    import asyncio
    import json

    from starlette.requests import Request

    from llm_registry.middleware.error_handler import catch_all_handler

    request = Request({"type": "http", "method": "GET", "path": "/api/models", "headers": []})
    response = asyncio.run(catch_all_handler(request, RuntimeError("sqlite3 /srv/secret.db")))
    assert response.status_code == 500
    body = json.loads(response.body)
    assert body["ok"] is False
    assert body["error"] == "Internal server error"
    assert "secret" not in response.body.decode()
