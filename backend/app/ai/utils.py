import re

MAX_INPUT_LENGTH = 10_000

# USD rate applied per 1K tokens
TOKEN_RATES: dict[str, dict[str, float]] = {
    "openai": {
        "gpt-4o": 0.00003,
        "gpt-4o-mini": 0.0000015,
        "gpt-4-turbo": 0.00003,
        "gpt-3.5-turbo": 0.000002,
    },
    "claude": {
        "claude-3-5-sonnet-20241022": 0.000015,
        "claude-3-haiku-20240307": 0.0000025,
        "claude-3-opus-20240229": 0.000075,
    },
    "gemini": {
        "gemini-1.5-pro": 0.0000125,
        "gemini-1.5-flash": 0.0000005,
        "gemini-pro": 0.000005,
    },
}

GEMINI_KEY_LENGTH = 39


def validate_api_key(provider: str, api_key: str | None) -> bool:
    """Cheap shape check of a credential before it is saved or used."""
    if not api_key or not api_key.strip():
        return False
    if provider == "openai":
        return api_key.startswith("sk-")
    if provider == "claude":
        return api_key.startswith("sk-ant-")
    if provider == "gemini":
        return len(api_key) == GEMINI_KEY_LENGTH
    return True


def estimate_cost(provider: str, model: str, tokens: int) -> float:
    """Rough cost of a call; self-hosted and unknown models are free."""
    rate = TOKEN_RATES.get(provider, {}).get(model, 0.0)
    return (tokens / 1000) * rate


def format_tokens(tokens: int) -> str:
    if tokens >= 1_000_000:
        return f"{tokens / 1_000_000:.1f}M"
    if tokens >= 1_000:
        return f"{tokens / 1_000:.1f}K"
    return str(tokens)


def sanitize_input(text: str | None) -> str:
    if not text:
        return ""
    cleaned = re.sub(r"[<>]", "", text)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    return cleaned[:MAX_INPUT_LENGTH]
