import logging
import uuid
from collections.abc import Callable

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.ai.local_cache import CONFIGURATIONS_KEY, LocalCache
from app.ai.utils import validate_api_key
from app.core.config import settings
from app.crud import delete_configuration, list_active_configurations, upsert_configuration
from app.models import AIConfiguration, AIConfigurationCreate, AIConfigurationPublic

logger = logging.getLogger(__name__)

LOCAL_OWNER = "local"
LOCAL_OLLAMA_ID = "local-ollama"


class NotAuthenticatedError(Exception):
    """Raised when a write is attempted without a current user."""


def default_local_configuration() -> AIConfigurationPublic:
    return AIConfigurationPublic(
        id=LOCAL_OLLAMA_ID,
        created_by=LOCAL_OWNER,
        provider="ollama",
        model_name="llama3.2",
        api_endpoint=settings.OLLAMA_BASE_URL,
        temperature=settings.DEFAULT_TEMPERATURE,
        max_tokens=settings.DEFAULT_MAX_TOKENS,
        is_active=True,
        is_fallback=True,
    )


def _to_public(config: AIConfiguration) -> AIConfigurationPublic:
    return AIConfigurationPublic.model_validate(config, from_attributes=True)


class ConfigurationStore:
    """
    Per-user AI provider configurations.

    Reads go to the database first, then to the local cache, then to a
    synthesized local Ollama configuration, so `list()` always returns at
    least one usable entry. Writes always require a current user.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        user_id: uuid.UUID | None,
        cache: LocalCache | None = None,
    ):
        self._session_factory = session_factory
        self.user_id = user_id
        self.cache = cache or LocalCache(settings.LOCAL_CACHE_PATH)

    def _require_user(self) -> uuid.UUID:
        if self.user_id is None:
            raise NotAuthenticatedError("User not authenticated")
        return self.user_id

    def save(self, config_in: AIConfigurationCreate) -> AIConfigurationPublic:
        owner_id = self._require_user()
        if config_in.api_key and not validate_api_key(config_in.provider, config_in.api_key):
            logger.warning("Saving %s configuration with an unexpected API key format", config_in.provider)
        with self._session_factory() as session:
            db_config = upsert_configuration(session=session, config_in=config_in, owner_id=owner_id)
            logger.info("Saved %s configuration for user %s", db_config.provider, owner_id)
            return _to_public(db_config)

    def delete(self, config_id: uuid.UUID | str) -> None:
        owner_id = self._require_user()
        try:
            config_uuid = uuid.UUID(str(config_id))
        except ValueError:
            # Synthesized fallbacks ("local-ollama") have no database row.
            return
        with self._session_factory() as session:
            removed = delete_configuration(session=session, config_id=config_uuid, owner_id=owner_id)
        if not removed:
            logger.info("Delete of configuration %s by %s matched no rows", config_uuid, owner_id)

    def _cache_key(self) -> str | None:
        # One cache entry per user; anonymous callers never read cached rows.
        if self.user_id is None:
            return None
        return f"{CONFIGURATIONS_KEY}:{self.user_id}"

    def _fallback(self) -> list[AIConfigurationPublic]:
        cache_key = self._cache_key()
        if cache_key is None:
            return [default_local_configuration()]

        owner = str(self.user_id)
        cached: list[AIConfigurationPublic] = []
        for raw in self.cache.get_list(cache_key):
            if str(raw.get("created_by")) != owner:
                continue
            raw = {**raw, "is_fallback": True}
            raw.setdefault("id", LOCAL_OLLAMA_ID)
            if raw.get("is_active") is None:
                raw["is_active"] = True
            try:
                cached.append(AIConfigurationPublic.model_validate(raw))
            except ValidationError as exc:
                logger.warning("Skipping malformed cached configuration: %s", exc)
        if cached:
            return cached
        return [default_local_configuration()]

    def _refresh_cache(self, configs: list[AIConfigurationPublic]) -> None:
        cache_key = self._cache_key()
        if cache_key is None:
            return
        payload = [
            c.model_dump(mode="json", exclude={"api_key", "is_fallback"})
            for c in configs
        ]
        self.cache.set(cache_key, payload)

    def list(self) -> list[AIConfigurationPublic]:
        if self.user_id is None:
            return self._fallback()
        try:
            with self._session_factory() as session:
                configs = [
                    _to_public(c)
                    for c in list_active_configurations(session=session, owner_id=self.user_id)
                ]
        except SQLAlchemyError as exc:
            logger.warning("Configuration store unavailable, using local fallback: %s", exc)
            return self._fallback()
        self._refresh_cache(configs)
        return configs
