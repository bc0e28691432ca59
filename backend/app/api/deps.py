import uuid
from collections.abc import Callable, Generator
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request
from sqlmodel import Session

from app.ai.config_store import ConfigurationStore
from app.ai.generation_log import GenerationLogSink
from app.ai.local_cache import LocalCache
from app.ai.orchestrator import GenerationOrchestrator
from app.ai.templates import TemplateResolver
from app.core.config import settings
from app.core.db import engine


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


def get_session_factory() -> Callable[[], Session]:
    return lambda: Session(engine)


def get_local_cache() -> LocalCache:
    return LocalCache(settings.LOCAL_CACHE_PATH)


def get_current_user_id(x_user_id: Annotated[str | None, Header()] = None) -> uuid.UUID | None:
    # Authentication happens upstream; the gateway forwards the user id.
    if not x_user_id:
        return None
    try:
        return uuid.UUID(x_user_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid X-User-Id header")


def get_orchestrator(request: Request) -> GenerationOrchestrator:
    return request.app.state.orchestrator


SessionDep = Annotated[Session, Depends(get_db)]
SessionFactoryDep = Annotated[Callable[[], Session], Depends(get_session_factory)]
CurrentUserId = Annotated[uuid.UUID | None, Depends(get_current_user_id)]
OrchestratorDep = Annotated[GenerationOrchestrator, Depends(get_orchestrator)]


def require_user_id(user_id: CurrentUserId) -> uuid.UUID:
    if user_id is None:
        raise HTTPException(status_code=401, detail="User not authenticated")
    return user_id


RequiredUserId = Annotated[uuid.UUID, Depends(require_user_id)]


def get_config_store(
    user_id: CurrentUserId,
    session_factory: SessionFactoryDep,
    cache: Annotated[LocalCache, Depends(get_local_cache)],
) -> ConfigurationStore:
    return ConfigurationStore(session_factory, user_id, cache)


def get_template_resolver(session_factory: SessionFactoryDep) -> TemplateResolver:
    return TemplateResolver(session_factory)


def get_log_sink(session_factory: SessionFactoryDep) -> GenerationLogSink:
    return GenerationLogSink(session_factory)


ConfigStoreDep = Annotated[ConfigurationStore, Depends(get_config_store)]
TemplateResolverDep = Annotated[TemplateResolver, Depends(get_template_resolver)]
LogSinkDep = Annotated[GenerationLogSink, Depends(get_log_sink)]
