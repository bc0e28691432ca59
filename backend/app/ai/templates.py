import logging
import re
import uuid
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.ai.prompts.common import NOT_SPECIFIED, audit_info_block
from app.ai.schemas import FieldType, GenerationRequest
from app.crud import get_template_candidates
from app.models import AITemplate

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def select_best_template(
    candidates: list[AITemplate],
    industry: str | None = None,
    framework: str | None = None,
) -> AITemplate | None:
    """
    Pick the most specific template from `candidates`.

    `candidates` must already be ordered by (is_default desc, version desc).
    Tiers are checked in order and the first hit wins:

    1. industry and framework both match
    2. industry matches, template has no framework
    3. framework matches, template has no industry
    4. generic default template (no industry, no framework)

    When candidates exist but none hits a tier, the first candidate is used.
    """
    if not candidates:
        return None

    tiers: list[Callable[[AITemplate], bool]] = [
        lambda t: bool(industry and framework) and t.industry == industry and t.framework == framework,
        lambda t: bool(industry) and t.industry == industry and not t.framework,
        lambda t: bool(framework) and t.framework == framework and not t.industry,
        lambda t: not t.industry and not t.framework and t.is_default,
    ]
    for matches in tiers:
        for template in candidates:
            if matches(template):
                return template
    return candidates[0]


def _placeholder_values(template: AITemplate, request: GenerationRequest) -> dict[str, str]:
    audit = request.audit_data
    values: dict[str, str] = {
        str(k): str(v) for k, v in (template.context_variables or {}).items() if v is not None
    }
    values.update(
        {
            "title": audit.title or NOT_SPECIFIED,
            "audit_type": audit.audit_type or NOT_SPECIFIED,
            "business_unit": audit.business_unit or NOT_SPECIFIED,
            "scope": audit.scope or NOT_SPECIFIED,
            "context": request.context or "",
            "auditInfo": audit_info_block(audit),
        }
    )
    # Request entity data wins over template defaults.
    values.update({str(k): str(v) for k, v in request.entity_data.items() if v not in (None, "")})
    return values


def render_template(template: AITemplate, request: GenerationRequest) -> str:
    values = _placeholder_values(template, request)

    def _substitute(match: re.Match) -> str:
        return values.get(match.group(1), match.group(0))

    prompt = PLACEHOLDER_RE.sub(_substitute, template.template_content)

    industry = request.industry or template.industry
    if template.industry and industry:
        prompt += f"\n\nIndustry Context: This template is specifically designed for the {industry} industry."
    framework = request.framework or template.framework
    if template.framework and framework:
        prompt += f"\n\nFramework Context: This template follows {framework} standards and best practices."
    return prompt


class TemplateResolver:
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def resolve(
        self,
        field_type: FieldType | str,
        industry: str | None = None,
        framework: str | None = None,
    ) -> AITemplate | None:
        field_value = field_type.value if isinstance(field_type, FieldType) else str(field_type)
        try:
            with self._session_factory() as session:
                candidates = get_template_candidates(session=session, field_type=field_value)
        except SQLAlchemyError as exc:
            logger.warning("Template lookup for %s failed, using prompt library: %s", field_value, exc)
            return None
        return select_best_template(candidates, industry, framework)

    def get(self, template_id: uuid.UUID | str) -> AITemplate | None:
        try:
            template_uuid = uuid.UUID(str(template_id))
        except ValueError:
            return None
        try:
            with self._session_factory() as session:
                template = session.get(AITemplate, template_uuid)
        except SQLAlchemyError as exc:
            logger.warning("Template %s could not be loaded: %s", template_uuid, exc)
            return None
        if template is None or not template.is_active:
            return None
        return template

    def for_request(self, request: GenerationRequest) -> AITemplate | None:
        if request.template_id:
            template = self.get(request.template_id)
            if template is not None:
                return template
            logger.info("Requested template %s unavailable, resolving by field type", request.template_id)
        return self.resolve(request.field_type, request.industry, request.framework)
