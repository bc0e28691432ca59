import asyncio
import logging
import uuid
from collections.abc import Callable

import httpx
from sqlmodel import Session

from app.ai.generation_log import GenerationLogSink
from app.ai.prompt_builder import PromptBuilder
from app.ai.providers.base import ProviderAdapter
from app.ai.providers.claude_adapter import ClaudeAdapter
from app.ai.providers.gemini_adapter import GeminiAdapter
from app.ai.providers.ollama_adapter import OllamaAdapter
from app.ai.providers.openai_adapter import OpenAIAdapter
from app.ai.registry import ProviderRegistry
from app.ai.schemas import (
    AuditData,
    ChatRequest,
    FieldType,
    GenerationRequest,
    GenerationResponse,
)
from app.ai.templates import TemplateResolver
from app.ai.utils import sanitize_input

logger = logging.getLogger(__name__)

ADAPTER_CLASSES: dict[str, type[ProviderAdapter]] = {
    OllamaAdapter.provider_id: OllamaAdapter,
    OpenAIAdapter.provider_id: OpenAIAdapter,
    ClaudeAdapter.provider_id: ClaudeAdapter,
    GeminiAdapter.provider_id: GeminiAdapter,
}

RISK_CONTROL_MATRIX_MIN_TOKENS = 4000

DEFAULT_CHAT_SYSTEM_PROMPT = (
    "You are a helpful AI assistant for governance, risk, audit, and any general topic. "
    "Respond clearly and provide actionable steps when relevant."
)

PROVIDER_NOT_CONFIGURED = "AI provider is not configured. Please set up your AI configuration."
MODEL_NOT_CONFIGURED = "AI model is not configured. Please set up your AI configuration."


class UnsupportedProviderError(Exception):
    pass


def build_adapters(http_client: httpx.AsyncClient, **kwargs) -> dict[str, ProviderAdapter]:
    """One adapter per provider id, all sharing `http_client`."""
    return {provider_id: cls(http_client, **kwargs) for provider_id, cls in ADAPTER_CLASSES.items()}


def unified_chat_prompt(request: ChatRequest) -> str:
    system_prefix = next(
        (m.content for m in request.messages if m.role == "system"),
        DEFAULT_CHAT_SYSTEM_PROMPT,
    )
    transcript = "\n".join(
        f"{m.role.upper()}: {sanitize_input(m.content)}"
        for m in request.messages
        if m.role != "system"
    )
    return f"{system_prefix}\n\nConversation so far:\n{transcript}\n\nPlease reply to the last USER message."


class GenerationOrchestrator:
    """
    Entry point for content generation.

    Builds the prompt, dispatches to the adapter registered for the request's
    provider (which normalizes the answer) and schedules a best-effort log write.
    Public coroutines always return a `GenerationResponse` and never raise.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        registry: ProviderRegistry | None = None,
        session_factory: Callable[[], Session] | None = None,
        adapters: dict[str, ProviderAdapter] | None = None,
        log_sink: GenerationLogSink | None = None,
        prompt_builder: PromptBuilder | None = None,
    ):
        self.http_client = http_client
        self.registry = registry or ProviderRegistry(http_client)
        self.adapters = adapters if adapters is not None else build_adapters(http_client)
        if prompt_builder is None:
            resolver = TemplateResolver(session_factory) if session_factory else None
            prompt_builder = PromptBuilder(resolver)
        self.prompt_builder = prompt_builder
        if log_sink is None and session_factory is not None:
            log_sink = GenerationLogSink(session_factory)
        self.log_sink = log_sink
        self._pending_logs: set[asyncio.Task] = set()

    def get_adapter(self, provider: str) -> ProviderAdapter:
        adapter = self.adapters.get(provider)
        if adapter is None:
            raise UnsupportedProviderError(f"Unsupported provider: {provider}")
        return adapter

    async def _dispatch(self, prompt: str, request: GenerationRequest) -> GenerationResponse:
        adapter = self.get_adapter(request.provider)
        logger.info(
            "Dispatching %s generation to %s/%s (%s chars)",
            request.field_type,
            request.provider,
            request.model,
            len(prompt),
        )
        return await adapter.generate(prompt, request)

    async def generate_content(
        self, request: GenerationRequest, user_id: uuid.UUID | None = None
    ) -> GenerationResponse:
        if not request.provider or request.provider == "undefined":
            logger.error("Invalid AI request: provider is missing")
            return GenerationResponse(success=False, error=PROVIDER_NOT_CONFIGURED)
        if not request.model:
            logger.error("Invalid AI request: model is missing")
            return GenerationResponse(success=False, error=MODEL_NOT_CONFIGURED)

        try:
            if request.field_type == FieldType.RISK_CONTROL_MATRIX and (
                not request.max_tokens or request.max_tokens < RISK_CONTROL_MATRIX_MIN_TOKENS
            ):
                request = request.model_copy(update={"max_tokens": RISK_CONTROL_MATRIX_MIN_TOKENS})

            if request.prompt.strip():
                prompt = request.prompt
            else:
                prompt = await asyncio.to_thread(self.prompt_builder.build, request)

            response = await self._dispatch(prompt, request)
        except Exception as exc:
            logger.error("Error generating content: %s", exc)
            return GenerationResponse(
                success=False,
                error=str(exc) or "Unknown error occurred",
                provider=request.provider,
            )

        if not response.success:
            logger.error("%s generation failed: %s", request.provider, response.error)
        self._schedule_log(request, response, prompt, user_id)
        return response

    async def test_connection(
        self,
        provider: str,
        model: str,
        api_key: str | None = None,
        base_url: str | None = None,
    ) -> bool:
        """Round-trip a tiny generation through the normal dispatch path."""
        request = GenerationRequest(
            provider=provider,
            model=model,
            prompt="Test connection",
            context="This is a test to verify the AI connection is working.",
            field_type=FieldType.DESCRIPTION,
            audit_data=AuditData(title="Test Audit"),
            temperature=0.1,
            max_tokens=50,
            api_key=api_key,
            base_url=base_url,
        )
        response = await self.generate_content(request)
        if not response.success:
            logger.info("Connection test for %s/%s failed: %s", provider, model, response.error)
        return response.success

    async def generate_chat(
        self, request: ChatRequest, user_id: uuid.UUID | None = None
    ) -> GenerationResponse:
        prompt = unified_chat_prompt(request)
        generation = GenerationRequest(
            provider=request.provider,
            model=request.model,
            prompt=prompt,
            field_type=FieldType.DESCRIPTION,
            audit_data=AuditData(title="AI Chat"),
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            api_key=request.api_key,
            base_url=request.base_url,
        )
        return await self.generate_content(generation, user_id=user_id)

    def _schedule_log(
        self,
        request: GenerationRequest,
        response: GenerationResponse,
        prompt: str,
        user_id: uuid.UUID | None,
    ) -> None:
        if self.log_sink is None or user_id is None:
            return
        task = asyncio.create_task(
            asyncio.to_thread(self.log_sink.record, request, response, prompt, user_id)
        )
        self._pending_logs.add(task)
        task.add_done_callback(self._pending_logs.discard)

    async def wait_for_pending_logs(self) -> None:
        if self._pending_logs:
            await asyncio.gather(*list(self._pending_logs), return_exceptions=True)
