import logging

from app.ai.providers.base import ProviderAdapter, ProviderError, upstream_error_message
from app.ai.schemas import GenerationRequest, GenerationResponse
from app.core.config import settings

logger = logging.getLogger(__name__)


def _extract_text(data: object) -> str | None:
    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return None
    content = candidates[0].get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) else None


class GeminiAdapter(ProviderAdapter):
    provider_id = "gemini"
    display_name = "Gemini"
    default_base_url = settings.GEMINI_BASE_URL

    async def _generate(self, prompt: str, request: GenerationRequest) -> GenerationResponse:
        api_key = self.require_api_key(request)
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature(request),
                "maxOutputTokens": self.max_tokens(request),
            },
        }
        logger.info("Issuing generateContent request to Gemini model %s", request.model)
        response = await self.send(
            "POST",
            f"{self.base_url(request)}/models/{request.model}:generateContent",
            params={"key": api_key},
            headers={"Content-Type": "application/json"},
            json=body,
        )
        if not response.is_success:
            raise ProviderError(
                f"Gemini API error: {response.status_code} {upstream_error_message(response)}"
            )

        try:
            data = response.json()
        except ValueError:
            data = None
        text = _extract_text(data)
        if text is None:
            logger.warning("Unexpected Gemini response shape; returning raw body")
            return self._success(response.text, request)

        tokens = None
        usage = data.get("usageMetadata") if isinstance(data, dict) else None
        if isinstance(usage, dict) and usage.get("totalTokenCount") is not None:
            tokens = int(usage["totalTokenCount"])
        return self._success(text, request, tokens)
