import logging

from app.ai.providers.base import ProviderAdapter, ProviderError, upstream_error_message
from app.ai.schemas import GenerationRequest, GenerationResponse
from app.core.config import settings

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = "2023-06-01"


def _extract_text(data: object) -> str | None:
    if not isinstance(data, dict):
        return None
    parts = data.get("content")
    if not isinstance(parts, list) or not parts:
        return None
    first = parts[0]
    if isinstance(first, dict) and isinstance(first.get("text"), str):
        return first["text"]
    return None


class ClaudeAdapter(ProviderAdapter):
    provider_id = "claude"
    display_name = "Claude"
    default_base_url = settings.CLAUDE_BASE_URL

    async def _generate(self, prompt: str, request: GenerationRequest) -> GenerationResponse:
        api_key = self.require_api_key(request)
        body = {
            "model": request.model,
            "max_tokens": self.max_tokens(request),
            "temperature": self.temperature(request),
            "messages": [{"role": "user", "content": prompt}],
        }
        logger.info("Issuing messages request to Claude model %s", request.model)
        response = await self.send(
            "POST",
            f"{self.base_url(request)}/messages",
            headers={
                "x-api-key": api_key,
                "anthropic-version": ANTHROPIC_VERSION,
                "content-type": "application/json",
            },
            json=body,
        )
        if not response.is_success:
            raise ProviderError(
                f"Claude API error: {response.status_code} {upstream_error_message(response)}"
            )

        try:
            data = response.json()
        except ValueError:
            data = None
        text = _extract_text(data)
        if text is None:
            logger.warning("Unexpected Claude response shape; returning raw body")
            return self._success(response.text, request)

        tokens = None
        usage = data.get("usage") if isinstance(data, dict) else None
        if isinstance(usage, dict):
            tokens = int(usage.get("input_tokens") or 0) + int(usage.get("output_tokens") or 0)
        return self._success(text, request, tokens)
