import logging

import httpx

from app.ai.providers.ollama_adapter import check_ollama_status
from app.ai.schemas import OllamaStatus, ProtocolFamily, ProviderDescriptor

logger = logging.getLogger(__name__)

DEFAULT_PROVIDERS: tuple[ProviderDescriptor, ...] = (
    ProviderDescriptor(
        id="ollama",
        name="Ollama (Local)",
        type=ProtocolFamily.OLLAMA,
        description="Run AI models locally on your machine. Free and private.",
        requires_api_key=False,
        models=("llama3.2", "llama3.1", "mistral", "codellama", "phi3", "gemma2"),
        default_model="llama3.2",
    ),
    ProviderDescriptor(
        id="openai",
        name="OpenAI",
        type=ProtocolFamily.OPENAI,
        description="GPT models from OpenAI. Requires API key.",
        requires_api_key=True,
        models=("gpt-4o", "gpt-4o-mini", "gpt-4-turbo", "gpt-3.5-turbo"),
        default_model="gpt-4o-mini",
    ),
    ProviderDescriptor(
        id="claude",
        name="Anthropic Claude",
        type=ProtocolFamily.CLAUDE,
        description="Claude models from Anthropic. Requires API key.",
        requires_api_key=True,
        models=("claude-3-5-sonnet-20241022", "claude-3-haiku-20240307", "claude-3-opus-20240229"),
        default_model="claude-3-5-sonnet-20241022",
    ),
    ProviderDescriptor(
        id="gemini",
        name="Google Gemini",
        type=ProtocolFamily.GEMINI,
        description="Gemini models from Google. Requires API key.",
        requires_api_key=True,
        models=("gemini-1.5-pro", "gemini-1.5-flash", "gemini-pro"),
        default_model="gemini-1.5-flash",
    ),
)


class ProviderRegistry:
    """Immutable catalog of supported providers, plus live model discovery for Ollama."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        providers: tuple[ProviderDescriptor, ...] = DEFAULT_PROVIDERS,
    ):
        self.http_client = http_client
        self._providers = {p.id: p for p in providers}

    def list_providers(self) -> list[ProviderDescriptor]:
        return list(self._providers.values())

    def get_provider(self, provider_id: str) -> ProviderDescriptor | None:
        return self._providers.get(provider_id)

    async def check_ollama_status(self, endpoint: str | None = None) -> OllamaStatus:
        return await check_ollama_status(self.http_client, endpoint)

    async def with_live_models(
        self, provider_id: str, endpoint: str | None = None
    ) -> ProviderDescriptor | None:
        descriptor = self.get_provider(provider_id)
        if descriptor is None or descriptor.type != ProtocolFamily.OLLAMA:
            return descriptor

        status = await self.check_ollama_status(endpoint)
        if not status.is_running or not status.available_models:
            logger.info("Live model discovery unavailable for %s: %s", provider_id, status.error)
            return descriptor

        models = tuple(status.available_models)
        return descriptor.model_copy(update={"models": models, "default_model": models[0]})
