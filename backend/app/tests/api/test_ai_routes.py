import uuid

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.ai.orchestrator import GenerationOrchestrator
from app.ai.providers.base import ProviderAdapter
from app.api.deps import get_db, get_local_cache, get_session_factory
from app.main import app

API = "/api/v1"


class EchoAdapter(ProviderAdapter):
    provider_id = "openai"
    display_name = "OpenAI"

    def __init__(self):
        super().__init__(httpx.AsyncClient(), max_retries=0, retry_backoff=0)
        self.requests = []

    async def _generate(self, prompt, request):
        self.requests.append(request)
        api_key = self.require_api_key(request)
        return self._success(f"echo ({api_key[-4:]})", request, tokens_used=7)


def _ollama_backend(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/api/tags":
        return httpx.Response(200, json={"models": [{"name": "qwen2:7b"}]})
    return httpx.Response(404)


@pytest.fixture
def adapter():
    return EchoAdapter()


@pytest.fixture
def client(engine, local_cache, adapter):
    def _get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_session_factory] = lambda: (lambda: Session(engine))
    app.dependency_overrides[get_local_cache] = lambda: local_cache
    app.state.orchestrator = GenerationOrchestrator(
        httpx.AsyncClient(transport=httpx.MockTransport(_ollama_backend)),
        adapters={"openai": adapter},
    )
    # No context manager: the lifespan would open the real database.
    yield TestClient(app)
    app.dependency_overrides.clear()


def _headers(user_id):
    return {"X-User-Id": str(user_id)}


def test_health_check(client):
    response = client.get(f"{API}/utils/health-check/")

    assert response.status_code == 200
    assert response.json() is True


def test_db_check(client):
    response = client.get(f"{API}/utils/db-check/")

    assert response.status_code == 200
    assert response.json() == {"message": "Database is reachable"}


def test_list_providers(client):
    response = client.get(f"{API}/ai/providers")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == ["ollama", "openai", "claude", "gemini"]


def test_read_ollama_provider_uses_live_models(client):
    response = client.get(f"{API}/ai/providers/ollama", params={"endpoint": "http://ollama.test:11434"})

    assert response.status_code == 200
    assert response.json()["models"] == ["qwen2:7b"]
    assert response.json()["default_model"] == "qwen2:7b"


def test_read_unknown_provider_is_404(client):
    response = client.get(f"{API}/ai/providers/unknown")

    assert response.status_code == 404
    assert response.json()["detail"] == "Provider not found"


def test_ollama_status(client):
    response = client.get(f"{API}/ai/ollama/status")

    assert response.status_code == 200
    assert response.json()["is_running"] is True


def test_configurations_without_user_return_local_default(client):
    response = client.get(f"{API}/ai/configurations")

    assert response.status_code == 200
    configs = response.json()
    assert len(configs) == 1
    assert configs[0]["id"] == "local-ollama"
    assert configs[0]["is_fallback"] is True


def test_saving_configuration_requires_user(client):
    response = client.post(f"{API}/ai/configurations", json={"provider": "openai", "model_name": "gpt-4o"})

    assert response.status_code == 401
    assert response.json()["detail"] == "User not authenticated"


def test_invalid_user_header_is_rejected(client):
    response = client.get(f"{API}/ai/configurations", headers={"X-User-Id": "not-a-uuid"})

    assert response.status_code == 400


def test_configuration_upsert_and_owner_scoping(client):
    owner, other = uuid.uuid4(), uuid.uuid4()
    first = client.post(
        f"{API}/ai/configurations",
        headers=_headers(owner),
        json={"provider": "openai", "model_name": "gpt-4o-mini", "api_key": "sk-first"},
    )
    second = client.post(
        f"{API}/ai/configurations",
        headers=_headers(owner),
        json={"provider": "openai", "model_name": "gpt-4o", "api_key": "sk-second"},
    )
    assert first.status_code == 200
    assert first.json()["id"] == second.json()["id"]

    listed = client.get(f"{API}/ai/configurations", headers=_headers(owner)).json()
    assert [c["model_name"] for c in listed] == ["gpt-4o"]

    client.delete(f"{API}/ai/configurations/{first.json()['id']}", headers=_headers(other))
    assert len(client.get(f"{API}/ai/configurations", headers=_headers(owner)).json()) == 1

    deleted = client.delete(f"{API}/ai/configurations/{first.json()['id']}", headers=_headers(owner))
    assert deleted.json() == {"message": "Configuration deleted successfully"}
    assert client.get(f"{API}/ai/configurations", headers=_headers(owner)).json() == []


def test_configuration_temperature_out_of_range_is_422(client):
    response = client.post(
        f"{API}/ai/configurations",
        headers=_headers(uuid.uuid4()),
        json={"provider": "openai", "model_name": "gpt-4o", "temperature": 2},
    )

    assert response.status_code == 422


def test_generate_fills_credentials_from_saved_configuration(client, adapter):
    user_id = uuid.uuid4()
    client.post(
        f"{API}/ai/configurations",
        headers=_headers(user_id),
        json={"provider": "openai", "model_name": "gpt-4o", "api_key": "sk-saved-1234", "temperature": 0.2},
    )

    response = client.post(
        f"{API}/ai/generate",
        headers=_headers(user_id),
        json={"provider": "openai", "field_type": "scope", "audit_data": {"title": "Treasury"}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["content"] == "echo (1234)"
    sent = adapter.requests[0]
    assert sent.model == "gpt-4o"
    assert sent.temperature == 0.2


def test_generate_without_configuration_reports_missing_key(client):
    response = client.post(
        f"{API}/ai/generate",
        json={"provider": "openai", "model": "gpt-4o-mini", "field_type": "description"},
    )

    assert response.status_code == 200
    assert response.json()["success"] is False
    assert "API key" in response.json()["error"]


def test_generate_without_provider_is_a_failure_result(client):
    response = client.post(f"{API}/ai/generate", json={"field_type": "description"})

    assert response.status_code == 200
    assert response.json()["error"].startswith("AI provider is not configured")


def test_chat_route(client, adapter):
    response = client.post(
        f"{API}/ai/chat",
        json={
            "provider": "openai",
            "model": "gpt-4o",
            "api_key": "sk-chat-9999",
            "messages": [{"role": "user", "content": "Hello"}],
        },
    )

    assert response.json()["content"] == "echo (9999)"
    assert "USER: Hello" in adapter.requests[0].prompt


def test_test_connection_route(client):
    ok = client.post(
        f"{API}/ai/test-connection",
        json={"provider": "openai", "model": "gpt-4o", "api_key": "sk-test"},
    )
    missing = client.post(f"{API}/ai/test-connection", json={"provider": "openai", "model": "gpt-4o"})

    assert ok.json() == {"success": True}
    assert missing.json() == {"success": False}


def test_template_crud_and_resolution(client):
    user_id = uuid.uuid4()
    default = client.post(
        f"{API}/ai/templates",
        headers=_headers(user_id),
        json={
            "name": "Default policy",
            "field_type": "policy_content",
            "template_content": "Write a policy for {{title}}",
            "is_default": True,
        },
    )
    healthcare = client.post(
        f"{API}/ai/templates",
        headers=_headers(user_id),
        json={
            "name": "Healthcare policy",
            "field_type": "policy_content",
            "template_content": "Write a HIPAA-aware policy for {{title}}",
            "industry": "Healthcare",
        },
    )
    assert default.status_code == 200
    assert default.json()["version"] == 1
    assert default.json()["created_by"] == str(user_id)

    resolved = client.get(
        f"{API}/ai/templates/resolve",
        params={"field_type": "policy_content", "industry": "Healthcare"},
    )
    assert resolved.json()["id"] == healthcare.json()["id"]
    resolved = client.get(f"{API}/ai/templates/resolve", params={"field_type": "policy_content"})
    assert resolved.json()["id"] == default.json()["id"]

    filtered = client.get(f"{API}/ai/templates", params={"industry": "Healthcare"})
    assert [t["name"] for t in filtered.json()] == ["Healthcare policy"]

    updated = client.patch(
        f"{API}/ai/templates/{default.json()['id']}",
        headers=_headers(user_id),
        json={"description": "House style"},
    )
    assert updated.json()["version"] == 2
    assert updated.json()["description"] == "House style"

    deleted = client.delete(f"{API}/ai/templates/{healthcare.json()['id']}", headers=_headers(user_id))
    assert deleted.status_code == 200
    missing = client.delete(f"{API}/ai/templates/{healthcare.json()['id']}", headers=_headers(user_id))
    assert missing.status_code == 404


def test_template_writes_require_user(client):
    response = client.post(
        f"{API}/ai/templates",
        json={"name": "x", "field_type": "scope", "template_content": "y"},
    )

    assert response.status_code == 401


def test_resolve_without_candidates_returns_null(client):
    response = client.get(f"{API}/ai/templates/resolve", params={"field_type": "scope"})

    assert response.status_code == 200
    assert response.json() is None


def test_logs_require_user(client):
    assert client.get(f"{API}/ai/logs").status_code == 401
    assert client.get(f"{API}/ai/logs/stats").status_code == 401


def test_logs_and_stats_for_user_without_history(client):
    user_id = uuid.uuid4()

    assert client.get(f"{API}/ai/logs", headers=_headers(user_id)).json() == []
    assert client.get(f"{API}/ai/logs/stats", headers=_headers(user_id)).json()["total_generations"] == 0


def test_usage_estimate(client):
    response = client.get(
        f"{API}/ai/usage/estimate",
        params={"provider": "openai", "model": "gpt-4o", "tokens": 1500},
    )

    assert response.status_code == 200
    assert response.json()["formatted_tokens"] == "1.5K"
    assert response.json()["estimated_cost"] == pytest.approx(0.000045)
