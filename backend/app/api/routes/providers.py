from fastapi import APIRouter, HTTPException

from app.ai.schemas import ConnectionTestRequest, ConnectionTestResult, OllamaStatus, ProviderDescriptor
from app.api.deps import OrchestratorDep

router = APIRouter()


@router.get("/providers", response_model=list[ProviderDescriptor])
def read_providers(orchestrator: OrchestratorDep) -> list[ProviderDescriptor]:
    return orchestrator.registry.list_providers()


@router.get("/providers/{provider_id}", response_model=ProviderDescriptor)
async def read_provider(
    provider_id: str,
    orchestrator: OrchestratorDep,
    endpoint: str | None = None,
) -> ProviderDescriptor:
    descriptor = await orchestrator.registry.with_live_models(provider_id, endpoint)
    if descriptor is None:
        raise HTTPException(status_code=404, detail="Provider not found")
    return descriptor


@router.get("/ollama/status", response_model=OllamaStatus)
async def read_ollama_status(orchestrator: OrchestratorDep, endpoint: str | None = None) -> OllamaStatus:
    return await orchestrator.registry.check_ollama_status(endpoint)


@router.post("/test-connection", response_model=ConnectionTestResult)
async def test_connection(
    body: ConnectionTestRequest, orchestrator: OrchestratorDep
) -> ConnectionTestResult:
    success = await orchestrator.test_connection(
        body.provider, body.model, api_key=body.api_key, base_url=body.base_url
    )
    return ConnectionTestResult(success=success)
