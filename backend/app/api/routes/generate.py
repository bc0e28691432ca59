import logging
from typing import Any

from fastapi import APIRouter

from app.ai.config_store import ConfigurationStore
from app.ai.schemas import (
    ChatRequest,
    CostEstimate,
    GenerationRequest,
    GenerationResponse,
    GenerationStats,
)
from app.ai.utils import estimate_cost, format_tokens
from app.api.deps import ConfigStoreDep, CurrentUserId, LogSinkDep, OrchestratorDep, RequiredUserId
from app.models import AIGenerationLogPublic

router = APIRouter()
logger = logging.getLogger(__name__)


def _saved_settings(store: ConfigurationStore, provider: str, request: Any) -> dict[str, Any]:
    """Fill credentials and sampling settings the caller left out from the saved configuration."""
    saved = next((c for c in store.list() if c.provider == provider), None)
    if saved is None:
        return {}
    updates: dict[str, Any] = {}
    if not request.model:
        updates["model"] = saved.model_name
    if not request.api_key and saved.api_key:
        updates["api_key"] = saved.api_key
    if not request.base_url and saved.api_endpoint:
        updates["base_url"] = saved.api_endpoint
    if request.temperature is None:
        updates["temperature"] = saved.temperature
    if request.max_tokens is None:
        updates["max_tokens"] = saved.max_tokens
    return updates


@router.post("/generate", response_model=GenerationResponse)
async def generate_content(
    body: GenerationRequest,
    orchestrator: OrchestratorDep,
    store: ConfigStoreDep,
    user_id: CurrentUserId,
) -> GenerationResponse:
    if body.provider:
        body = body.model_copy(update=_saved_settings(store, body.provider, body))
    response = await orchestrator.generate_content(body, user_id=user_id)
    if not response.success:
        logger.info("Generation for %s returned an error: %s", body.field_type, response.error)
    return response


@router.post("/chat", response_model=GenerationResponse)
async def generate_chat(
    body: ChatRequest,
    orchestrator: OrchestratorDep,
    store: ConfigStoreDep,
    user_id: CurrentUserId,
) -> GenerationResponse:
    body = body.model_copy(update=_saved_settings(store, body.provider, body))
    return await orchestrator.generate_chat(body, user_id=user_id)


@router.get("/logs", response_model=list[AIGenerationLogPublic])
def read_generation_logs(sink: LogSinkDep, user_id: RequiredUserId, limit: int = 50) -> Any:
    return sink.list_logs(user_id, limit=limit)


@router.get("/logs/stats", response_model=GenerationStats)
def read_generation_stats(sink: LogSinkDep, user_id: RequiredUserId) -> GenerationStats:
    return sink.stats(user_id)


@router.get("/usage/estimate", response_model=CostEstimate)
def read_cost_estimate(provider: str, model: str, tokens: int) -> CostEstimate:
    return CostEstimate(
        provider=provider,
        model=model,
        tokens=tokens,
        formatted_tokens=format_tokens(tokens),
        estimated_cost=estimate_cost(provider, model, tokens),
    )
