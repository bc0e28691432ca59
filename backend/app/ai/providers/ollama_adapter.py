import logging

import httpx

from app.ai.providers.base import ProviderAdapter, ProviderError
from app.ai.schemas import GenerationRequest, GenerationResponse, OllamaStatus
from app.core.config import settings

logger = logging.getLogger(__name__)

OLLAMA_INSTALL_URL = "https://ollama.ai"


def _model_names(payload: object) -> list[str]:
    if not isinstance(payload, dict):
        return []
    models = payload.get("models") or []
    return [str(m["name"]) for m in models if isinstance(m, dict) and m.get("name")]


async def check_ollama_status(
    http_client: httpx.AsyncClient,
    base_url: str | None = None,
    *,
    timeout: float | None = None,
) -> OllamaStatus:
    """Probe the model-listing endpoint of a local Ollama server."""
    url = f"{(base_url or settings.OLLAMA_BASE_URL).rstrip('/')}/api/tags"
    try:
        response = await http_client.get(url, timeout=timeout or settings.OLLAMA_PROBE_TIMEOUT)
    except httpx.HTTPError as exc:
        return OllamaStatus(is_running=False, error=str(exc) or exc.__class__.__name__)

    if not response.is_success:
        return OllamaStatus(
            is_running=False,
            error=f"Ollama API returned {response.status_code}: {response.reason_phrase}",
        )
    try:
        models = _model_names(response.json())
    except ValueError:
        models = []
    return OllamaStatus(is_running=True, available_models=models)


class OllamaAdapter(ProviderAdapter):
    provider_id = "ollama"
    display_name = "Ollama"
    default_base_url = settings.OLLAMA_BASE_URL

    def __init__(self, http_client: httpx.AsyncClient, *, probe_timeout: float | None = None, **kwargs):
        super().__init__(http_client, **kwargs)
        self.probe_timeout = probe_timeout or settings.OLLAMA_PROBE_TIMEOUT

    async def _generate(self, prompt: str, request: GenerationRequest) -> GenerationResponse:
        base_url = self.base_url(request)

        status = await check_ollama_status(self.http_client, base_url, timeout=self.probe_timeout)
        if not status.is_running:
            logger.info("Ollama probe at %s failed: %s", base_url, status.error)
            raise ProviderError(
                f"Ollama is not running or not accessible at {base_url}. "
                "Please ensure Ollama is installed and running. "
                f"Visit {OLLAMA_INSTALL_URL} for installation instructions."
            )

        # Tags like "llama3.2:latest" satisfy a request for "llama3.2".
        if not any(name.startswith(request.model) for name in status.available_models):
            available = ", ".join(status.available_models)
            raise ProviderError(
                f'Model "{request.model}" not found. Available models: {available}. '
                f'Run "ollama pull {request.model}" to download it.'
            )

        body = {
            "model": request.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": self.temperature(request),
                "num_predict": self.max_tokens(request),
            },
        }
        logger.info("Issuing Ollama generate request for model %s at %s", request.model, base_url)
        response = await self.send("POST", f"{base_url}/api/generate", json=body)

        if response.status_code == 404:
            raise ProviderError(
                f'Model "{request.model}" not found in Ollama. '
                f'Run "ollama pull {request.model}" to download it.'
            )
        if not response.is_success:
            raise ProviderError(f"Ollama API error: {response.status_code} {response.reason_phrase}")

        try:
            data = response.json()
        except ValueError:
            return self._success(response.text, request)
        if not isinstance(data, dict) or not isinstance(data.get("response"), str):
            logger.warning("Unexpected Ollama response shape; returning raw body")
            return self._success(response.text, request)

        tokens = None
        if "prompt_eval_count" in data or "eval_count" in data:
            tokens = int(data.get("prompt_eval_count") or 0) + int(data.get("eval_count") or 0)
        return self._success(data["response"], request, tokens)
