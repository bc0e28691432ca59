import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from sqlmodel import Session

from app.ai.orchestrator import GenerationOrchestrator
from app.api.main import api_router
from app.core.config import settings
from app.core.db import engine, init_db

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    async with httpx.AsyncClient(timeout=settings.LLM_REQUEST_TIMEOUT) as http_client:
        orchestrator = GenerationOrchestrator(http_client, session_factory=lambda: Session(engine))
        app.state.orchestrator = orchestrator
        logger.info("AI dispatcher ready (%s providers)", len(orchestrator.adapters))
        yield
        await orchestrator.wait_for_pending_logs()


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

app.include_router(api_router, prefix=settings.API_V1_STR)
