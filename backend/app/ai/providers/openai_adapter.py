import logging

from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from app.ai.providers.base import ProviderAdapter, ProviderError
from app.ai.schemas import GenerationRequest, GenerationResponse
from app.core.config import settings

logger = logging.getLogger(__name__)


def _status_error_message(exc: APIStatusError) -> str:
    body = exc.body
    if isinstance(body, dict):
        # The SDK unwraps {"error": {...}} into body already.
        message = body.get("message")
        if not message and isinstance(body.get("error"), dict):
            message = body["error"].get("message")
        if message:
            return str(message)
    return exc.response.reason_phrase or exc.message


class OpenAIAdapter(ProviderAdapter):
    """Chat-completions backend driven through the official SDK."""

    provider_id = "openai"
    display_name = "OpenAI"
    default_base_url = settings.OPENAI_BASE_URL

    def _client(self, request: GenerationRequest, api_key: str) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key=api_key,
            base_url=self.base_url(request),
            max_retries=self.max_retries,
            timeout=self.timeout,
            http_client=self.http_client,
        )

    def _chat_completion_kwargs(self, request: GenerationRequest) -> dict:
        """Build model-compatible sampling kwargs for chat completions."""
        model_name = (request.model or "").lower()
        kwargs: dict = {"max_tokens": self.max_tokens(request)}
        # GPT-5 family rejects non-default temperature values.
        if not model_name.startswith("gpt-5"):
            kwargs["temperature"] = self.temperature(request)
        return kwargs

    async def _generate(self, prompt: str, request: GenerationRequest) -> GenerationResponse:
        api_key = self.require_api_key(request)
        client = self._client(request, api_key)

        logger.info("Issuing chat completion to OpenAI model %s", request.model)
        try:
            completion = await client.chat.completions.create(
                model=request.model,
                messages=[{"role": "user", "content": prompt}],
                **self._chat_completion_kwargs(request),
            )
        except APIStatusError as exc:
            raise ProviderError(
                f"OpenAI API error: {exc.status_code} {_status_error_message(exc)}"
            ) from exc
        except APIConnectionError as exc:
            raise ProviderError(f"OpenAI request failed: {exc.message}") from exc

        if not getattr(completion, "choices", None):
            raise ProviderError(f"OpenAI model {request.model} returned no output")

        content = completion.choices[0].message.content or ""
        usage = getattr(completion, "usage", None)
        tokens = getattr(usage, "total_tokens", None) if usage else None
        return self._success(content, request, tokens)
