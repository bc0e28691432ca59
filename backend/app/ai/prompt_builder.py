import logging

from app.ai.prompts.library import build_library_prompt
from app.ai.schemas import GenerationRequest
from app.ai.templates import TemplateResolver, render_template

logger = logging.getLogger(__name__)


class PromptBuilder:
    """
    Produces the final prompt for a request.

    A stored template (explicit `template_id`, else the most specific match
    for field type, industry and framework) takes priority; otherwise the
    built-in library entry for the field type is used.
    """

    def __init__(self, resolver: TemplateResolver | None = None):
        self.resolver = resolver

    def build(self, request: GenerationRequest) -> str:
        if self.resolver is not None:
            try:
                template = self.resolver.for_request(request)
                if template is not None:
                    logger.info("Using template %s for %s", template.id, request.field_type)
                    return render_template(template, request)
            except Exception as exc:
                logger.warning("Template-based prompt building failed, falling back to library: %s", exc)
        return build_library_prompt(request)
