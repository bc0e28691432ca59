import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from sqlalchemy.exc import OperationalError

from app.ai.config_store import NotAuthenticatedError
from app.api.deps import ConfigStoreDep
from app.models import AIConfigurationCreate, AIConfigurationPublic, Message

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/configurations", response_model=list[AIConfigurationPublic])
def read_configurations(store: ConfigStoreDep) -> Any:
    return store.list()


@router.post("/configurations", response_model=AIConfigurationPublic)
def save_configuration(*, store: ConfigStoreDep, config_in: AIConfigurationCreate) -> Any:
    try:
        return store.save(config_in)
    except NotAuthenticatedError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except OperationalError as exc:
        logger.exception("Configuration store unavailable while saving")
        raise HTTPException(
            status_code=503,
            detail="Configuration store is temporarily unavailable. Please try again.",
        ) from exc


@router.delete("/configurations/{config_id}", response_model=Message)
def delete_configuration(config_id: str, store: ConfigStoreDep) -> Message:
    try:
        store.delete(config_id)
    except NotAuthenticatedError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except OperationalError as exc:
        logger.exception("Configuration store unavailable while deleting")
        raise HTTPException(
            status_code=503,
            detail="Configuration store is temporarily unavailable. Please try again.",
        ) from exc
    return Message(message="Configuration deleted successfully")
