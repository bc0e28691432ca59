import json
import logging
import uuid
from collections import Counter
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.ai.schemas import GenerationRequest, GenerationResponse, GenerationStats
from app.crud import create_generation_log, list_generation_logs
from app.models import AIGenerationLog

logger = logging.getLogger(__name__)


def _response_text(content: str | list[str]) -> str:
    if isinstance(content, list):
        return json.dumps(content)
    return content or ""


class GenerationLogSink:
    """Append-only audit trail of generation attempts. Writes never raise."""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def record(
        self,
        request: GenerationRequest,
        response: GenerationResponse,
        prompt: str,
        user_id: uuid.UUID | None,
    ) -> None:
        if user_id is None:
            return
        entry = AIGenerationLog(
            user_id=user_id,
            provider=request.provider,
            model_name=request.model,
            prompt=prompt,
            response=_response_text(response.content),
            tokens_used=response.tokens_used or 0,
            request_type=str(getattr(request.field_type, "value", request.field_type)),
            success=response.success,
            error_message=response.error,
        )
        try:
            with self._session_factory() as session:
                create_generation_log(session=session, log_in=entry)
        except Exception as exc:
            logger.error("Error logging AI generation: %s", exc)

    def list_logs(self, user_id: uuid.UUID, limit: int = 50) -> list[AIGenerationLog]:
        try:
            with self._session_factory() as session:
                return list_generation_logs(session=session, user_id=user_id, limit=limit)
        except SQLAlchemyError as exc:
            logger.error("Error fetching AI generation logs: %s", exc)
            return []

    def stats(self, user_id: uuid.UUID) -> GenerationStats:
        try:
            with self._session_factory() as session:
                logs = list_generation_logs(session=session, user_id=user_id, limit=None)
        except SQLAlchemyError as exc:
            logger.error("Error fetching AI generation stats: %s", exc)
            return GenerationStats()
        if not logs:
            return GenerationStats()

        total = len(logs)
        successful = sum(1 for log in logs if log.success)
        providers = Counter(log.provider for log in logs)
        field_types = Counter(log.request_type for log in logs)
        return GenerationStats(
            total_generations=total,
            successful_generations=successful,
            failed_generations=total - successful,
            average_tokens_used=sum(log.tokens_used or 0 for log in logs) / total,
            most_used_provider=providers.most_common(1)[0][0],
            most_used_field_type=field_types.most_common(1)[0][0],
        )
