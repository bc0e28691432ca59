import httpx
import pytest

from app.ai.registry import DEFAULT_PROVIDERS, ProviderRegistry
from app.ai.schemas import ProtocolFamily


def _registry(handler):
    return ProviderRegistry(httpx.AsyncClient(transport=httpx.MockTransport(handler)))


def _unexpected(request):
    raise AssertionError(f"unexpected request to {request.url}")


def test_lists_four_providers_in_catalog_order():
    providers = _registry(_unexpected).list_providers()

    assert [p.id for p in providers] == ["ollama", "openai", "claude", "gemini"]
    assert [p.requires_api_key for p in providers] == [False, True, True, True]
    for provider in providers:
        assert provider.default_model in provider.models


def test_get_provider_unknown_is_none():
    registry = _registry(_unexpected)

    assert registry.get_provider("claude").type == ProtocolFamily.CLAUDE
    assert registry.get_provider("mistral-cloud") is None


@pytest.mark.asyncio
async def test_hosted_provider_models_are_static():
    descriptor = await _registry(_unexpected).with_live_models("openai")

    assert descriptor.models == ("gpt-4o", "gpt-4o-mini", "gpt-4-turbo", "gpt-3.5-turbo")


@pytest.mark.asyncio
async def test_ollama_models_come_from_running_server():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json={"models": [{"name": "mistral:latest"}, {"name": "phi3:mini"}]})

    descriptor = await _registry(handler).with_live_models("ollama", "http://gpu-box:11434")

    assert seen == ["http://gpu-box:11434/api/tags"]
    assert descriptor.models == ("mistral:latest", "phi3:mini")
    assert descriptor.default_model == "mistral:latest"
    # The shared catalog entry is untouched.
    assert DEFAULT_PROVIDERS[0].models[0] == "llama3.2"


@pytest.mark.asyncio
async def test_ollama_models_fall_back_to_static_list_when_unreachable():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    descriptor = await _registry(handler).with_live_models("ollama")

    assert descriptor == DEFAULT_PROVIDERS[0]


@pytest.mark.asyncio
async def test_ollama_with_no_pulled_models_keeps_static_list():
    descriptor = await _registry(lambda r: httpx.Response(200, json={"models": []})).with_live_models("ollama")

    assert descriptor.default_model == "llama3.2"
