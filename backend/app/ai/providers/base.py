import asyncio
import logging
from abc import ABC, abstractmethod

import httpx

from app.ai.normalizer import normalize_content
from app.ai.schemas import GenerationRequest, GenerationResponse
from app.core.config import settings

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """A generation failure whose message is shown to the user verbatim."""


def upstream_error_message(response: httpx.Response) -> str:
    """Pull the provider-supplied error message out of a non-2xx response."""
    try:
        data = response.json()
    except ValueError:
        data = None

    message = None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict):
            message = error.get("message")
        elif isinstance(error, str):
            message = error
        else:
            message = data.get("message")
    if message:
        return str(message)
    return response.reason_phrase or response.text[:300]


class ProviderAdapter(ABC):
    """
    Translates a generation request into one backend's wire protocol.

    `generate` never raises: every failure, including unexpected ones, comes
    back as `GenerationResponse(success=False, error=...)`.
    """

    provider_id: str = "base"
    display_name: str = "Provider"
    default_base_url: str = ""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        max_retries: int | None = None,
        retry_backoff: float | None = None,
        timeout: float | None = None,
    ):
        self.http_client = http_client
        self.max_retries = settings.LLM_MAX_RETRIES if max_retries is None else max_retries
        self.retry_backoff = settings.LLM_RETRY_BACKOFF if retry_backoff is None else retry_backoff
        self.timeout = settings.LLM_REQUEST_TIMEOUT if timeout is None else timeout

    async def generate(self, prompt: str, request: GenerationRequest) -> GenerationResponse:
        try:
            response = await self._generate(prompt, request)
        except ProviderError as exc:
            logger.warning("%s generation failed: %s", self.display_name, exc)
            return self._failure(str(exc))
        except Exception as exc:
            logger.exception("Unexpected %s generation error", self.display_name)
            return self._failure(str(exc) or f"{self.display_name} generation failed")

        if response.success and isinstance(response.content, str):
            response.content = normalize_content(request.field_type, response.content)
        return response

    @abstractmethod
    async def _generate(self, prompt: str, request: GenerationRequest) -> GenerationResponse:
        """Perform the backend call. May raise; `generate` contains it."""

    def _failure(self, error: str) -> GenerationResponse:
        return GenerationResponse(success=False, content="", error=error, provider=self.provider_id)

    def _success(self, content: str, request: GenerationRequest, tokens_used: int | None = None) -> GenerationResponse:
        return GenerationResponse(
            success=True,
            content=content,
            tokens_used=tokens_used,
            model=request.model,
            provider=self.provider_id,
        )

    def base_url(self, request: GenerationRequest) -> str:
        return (request.base_url or self.default_base_url).rstrip("/")

    @staticmethod
    def temperature(request: GenerationRequest) -> float:
        # An explicit 0 is a valid setting.
        if request.temperature is None:
            return settings.DEFAULT_TEMPERATURE
        return request.temperature

    @staticmethod
    def max_tokens(request: GenerationRequest) -> int:
        return request.max_tokens or settings.DEFAULT_MAX_TOKENS

    def require_api_key(self, request: GenerationRequest) -> str:
        api_key = (request.api_key or "").strip()
        if not api_key:
            raise ProviderError(f"{self.display_name} API key is required")
        return api_key

    async def send(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Issue an HTTP call, retrying transport errors a bounded number of times."""
        attempts = self.max_retries + 1
        for attempt in range(1, attempts + 1):
            try:
                return await self.http_client.request(method, url, timeout=self.timeout, **kwargs)
            except httpx.TransportError as exc:
                if attempt >= attempts:
                    detail = str(exc) or exc.__class__.__name__
                    raise ProviderError(f"{self.display_name} request failed: {detail}") from exc
                logger.warning(
                    "%s request failed (attempt %s/%s): %s. Retrying...",
                    self.display_name,
                    attempt,
                    attempts,
                    exc,
                )
                await asyncio.sleep(self.retry_backoff)
        raise RuntimeError("unreachable")
