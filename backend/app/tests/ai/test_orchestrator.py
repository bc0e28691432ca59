import uuid
from unittest.mock import MagicMock, patch

import httpx
import pytest

from app.ai.generation_log import GenerationLogSink
from app.ai.normalizer import normalize_content
from app.ai.orchestrator import (
    MODEL_NOT_CONFIGURED,
    PROVIDER_NOT_CONFIGURED,
    GenerationOrchestrator,
    build_adapters,
    unified_chat_prompt,
)
from app.ai.prompt_builder import PromptBuilder
from app.ai.providers.base import ProviderAdapter
from app.ai.schemas import (
    AuditData,
    ChatMessage,
    ChatRequest,
    FieldType,
    GenerationRequest,
    GenerationResponse,
)


class RecordingAdapter(ProviderAdapter):
    provider_id = "fake"
    display_name = "Fake"

    def __init__(self, content="generated", success=True, error=None):
        super().__init__(httpx.AsyncClient(), max_retries=0, retry_backoff=0)
        self.content = content
        self.ok = success
        self.error = error
        self.calls = []

    async def _generate(self, prompt, request):
        self.calls.append((prompt, request))
        if not self.ok:
            return self._failure(self.error)
        return self._success(self.content, request, tokens_used=10)


class ExplodingAdapter(ProviderAdapter):
    provider_id = "boom"

    async def _generate(self, prompt, request):
        raise RuntimeError("adapter blew up")


def _unreachable(request):
    raise httpx.ConnectError("connection refused", request=request)


def _orchestrator(adapters=None, **kwargs):
    client = httpx.AsyncClient(transport=httpx.MockTransport(_unreachable))
    if adapters is None:
        adapters = build_adapters(client, max_retries=0, retry_backoff=0)
    return GenerationOrchestrator(client, adapters=adapters, **kwargs)


@pytest.mark.asyncio
async def test_hosted_provider_without_key_fails_with_api_key_message():
    orchestrator = _orchestrator()

    result = await orchestrator.generate_content(
        GenerationRequest(provider="openai", model="gpt-4o-mini", field_type=FieldType.DESCRIPTION)
    )

    assert result.success is False
    assert "API key" in result.error


@pytest.mark.asyncio
async def test_unreachable_ollama_fails_with_installation_guidance():
    orchestrator = _orchestrator()

    result = await orchestrator.generate_content(
        GenerationRequest(provider="ollama", model="llama3.2", field_type=FieldType.OBJECTIVES)
    )

    assert result.success is False
    assert "https://ollama.ai" in result.error


@pytest.mark.asyncio
@pytest.mark.parametrize("provider", ["", "undefined"])
async def test_missing_provider_is_rejected(provider):
    adapter = RecordingAdapter()
    orchestrator = _orchestrator({"fake": adapter})

    result = await orchestrator.generate_content(GenerationRequest(provider=provider, model="m"))

    assert result.success is False
    assert result.error == PROVIDER_NOT_CONFIGURED
    assert adapter.calls == []


@pytest.mark.asyncio
async def test_missing_model_is_rejected():
    result = await _orchestrator({"fake": RecordingAdapter()}).generate_content(
        GenerationRequest(provider="fake", model="")
    )

    assert result.error == MODEL_NOT_CONFIGURED


@pytest.mark.asyncio
async def test_unsupported_provider_is_a_failure_result():
    result = await _orchestrator({"fake": RecordingAdapter()}).generate_content(
        GenerationRequest(provider="watsonx", model="granite")
    )

    assert result.success is False
    assert result.error == "Unsupported provider: watsonx"


@pytest.mark.asyncio
async def test_adapter_exceptions_are_contained():
    result = await _orchestrator({"boom": ExplodingAdapter(httpx.AsyncClient())}).generate_content(
        GenerationRequest(provider="boom", model="m")
    )

    assert result.success is False
    assert result.error == "adapter blew up"


@pytest.mark.asyncio
async def test_risk_control_matrix_gets_a_token_floor():
    adapter = RecordingAdapter(content="[]")
    orchestrator = _orchestrator({"fake": adapter})

    await orchestrator.generate_content(
        GenerationRequest(provider="fake", model="m", field_type=FieldType.RISK_CONTROL_MATRIX, max_tokens=500)
    )
    await orchestrator.generate_content(
        GenerationRequest(provider="fake", model="m", field_type=FieldType.RISK_CONTROL_MATRIX, max_tokens=6000)
    )
    await orchestrator.generate_content(
        GenerationRequest(provider="fake", model="m", field_type=FieldType.SCOPE, max_tokens=500)
    )

    assert [request.max_tokens for _, request in adapter.calls] == [4000, 6000, 500]


@pytest.mark.asyncio
async def test_explicit_prompt_is_sent_verbatim():
    adapter = RecordingAdapter()
    builder = MagicMock(spec=PromptBuilder)
    orchestrator = _orchestrator({"fake": adapter}, prompt_builder=builder)

    await orchestrator.generate_content(GenerationRequest(provider="fake", model="m", prompt="Exactly this"))

    assert adapter.calls[0][0] == "Exactly this"
    builder.build.assert_not_called()


@pytest.mark.asyncio
async def test_library_prompt_is_built_when_request_has_none():
    adapter = RecordingAdapter()
    orchestrator = _orchestrator({"fake": adapter})

    await orchestrator.generate_content(
        GenerationRequest(
            provider="fake",
            model="m",
            field_type=FieldType.SCOPE,
            audit_data=AuditData(title="Treasury"),
        )
    )

    prompt = adapter.calls[0][0]
    assert 'for "Treasury"' in prompt
    assert prompt.endswith("Generate only the scope text, no additional formatting or explanations.")


@pytest.mark.asyncio
async def test_list_shaped_content_is_normalized():
    adapter = RecordingAdapter(content='["One", "Two"]')

    result = await _orchestrator({"fake": adapter}).generate_content(
        GenerationRequest(provider="fake", model="m", field_type=FieldType.OBJECTIVES)
    )

    assert result.content == ["One", "Two"]


@pytest.mark.asyncio
async def test_content_is_normalized_once_per_generation():
    adapter = RecordingAdapter(content='["One", "Two"]')

    with patch("app.ai.providers.base.normalize_content", wraps=normalize_content) as normalize:
        result = await _orchestrator({"fake": adapter}).generate_content(
            GenerationRequest(provider="fake", model="m", field_type=FieldType.OBJECTIVES)
        )

    assert result.content == ["One", "Two"]
    normalize.assert_called_once_with(FieldType.OBJECTIVES, '["One", "Two"]')


@pytest.mark.asyncio
async def test_successful_and_failed_generations_are_logged(session_factory, user_id):
    sink = GenerationLogSink(session_factory)
    orchestrator = _orchestrator(
        {"fake": RecordingAdapter(), "broken": RecordingAdapter(success=False, error="nope")},
        log_sink=sink,
    )

    # The in-memory database shares one connection, so drain writes one at a time.
    for provider, owner in (("fake", user_id), ("broken", user_id), ("fake", None)):
        await orchestrator.generate_content(GenerationRequest(provider=provider, model="m"), user_id=owner)
        await orchestrator.wait_for_pending_logs()

    logs = sink.list_logs(user_id)
    assert len(logs) == 2
    assert sorted(log.success for log in logs) == [False, True]
    assert {log.error_message for log in logs} == {None, "nope"}


@pytest.mark.asyncio
async def test_failing_log_sink_does_not_affect_result(user_id):
    sink = MagicMock(spec=GenerationLogSink)
    sink.record.side_effect = RuntimeError("log store down")
    orchestrator = _orchestrator({"fake": RecordingAdapter()}, log_sink=sink)

    result = await orchestrator.generate_content(GenerationRequest(provider="fake", model="m"), user_id=user_id)
    await orchestrator.wait_for_pending_logs()

    assert result.success is True
    assert result.content == "generated"
    sink.record.assert_called_once()


@pytest.mark.asyncio
async def test_test_connection_reports_success_and_failure():
    ok = RecordingAdapter()
    orchestrator = _orchestrator({"fake": ok, "broken": RecordingAdapter(success=False, error="bad key")})

    assert await orchestrator.test_connection("fake", "m") is True
    assert await orchestrator.test_connection("broken", "m") is False
    assert await orchestrator.test_connection("openai", "gpt-4o") is False

    prompt, request = ok.calls[0]
    assert prompt == "Test connection"
    assert request.temperature == 0.1
    assert request.max_tokens == 50


@pytest.mark.asyncio
async def test_generate_chat_flattens_conversation():
    adapter = RecordingAdapter(content="Sure")
    orchestrator = _orchestrator({"fake": adapter})

    result = await orchestrator.generate_chat(
        ChatRequest(
            provider="fake",
            model="m",
            messages=[
                ChatMessage(role="system", content="You are terse."),
                ChatMessage(role="user", content="What is <b>SOX</b>?"),
                ChatMessage(role="assistant", content="A US law."),
                ChatMessage(role="user", content="Summarize   section 404"),
            ],
        )
    )

    assert result.success is True
    prompt = adapter.calls[0][0]
    assert prompt.startswith("You are terse.\n\nConversation so far:\n")
    assert "USER: What is bSOX/b?" in prompt
    assert "ASSISTANT: A US law." in prompt
    assert "USER: Summarize section 404" in prompt
    assert prompt.endswith("Please reply to the last USER message.")


def test_chat_prompt_uses_default_system_prompt():
    prompt = unified_chat_prompt(
        ChatRequest(provider="p", model="m", messages=[ChatMessage(role="user", content="Hi")])
    )

    assert prompt.startswith("You are a helpful AI assistant")
    assert "USER: Hi" in prompt


@pytest.mark.asyncio
async def test_orchestrator_without_session_factory_uses_library_only():
    orchestrator = GenerationOrchestrator(httpx.AsyncClient(), adapters={"fake": RecordingAdapter()})

    assert orchestrator.log_sink is None
    assert orchestrator.prompt_builder.resolver is None
    result = await orchestrator.generate_content(GenerationRequest(provider="fake", model="m"), user_id=uuid.uuid4())
    assert isinstance(result, GenerationResponse)
