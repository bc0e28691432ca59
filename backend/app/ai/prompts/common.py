from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from app.ai.schemas import AuditData, GenerationRequest

NOT_SPECIFIED = "Not specified"

AUDIT_LABELS = ("Title", "Type", "Business Unit", "Existing Scope")


def display(value: Any) -> str:
    """Render an attribute for an information block; missing values become the sentinel."""
    if value is None:
        return NOT_SPECIFIED
    if isinstance(value, (list, tuple, set)):
        items = [str(v) for v in value if v not in (None, "")]
        return ", ".join(items) if items else NOT_SPECIFIED
    text = str(value).strip()
    return text or NOT_SPECIFIED


def info_block(heading: str, rows: Sequence[tuple[str, Any]]) -> str:
    lines = [f"{heading}:"]
    lines.extend(f"- {label}: {display(value)}" for label, value in rows)
    return "\n".join(lines)


def audit_info_block(audit: AuditData) -> str:
    values = (audit.title, audit.audit_type, audit.business_unit, audit.scope)
    return info_block("Audit Information", list(zip(AUDIT_LABELS, values)))


def entity_block(
    request: GenerationRequest,
    heading: str = "Audit Information",
    labels: Sequence[str] = AUDIT_LABELS,
    attributes: Sequence[tuple[str, str]] = (),
) -> str:
    """
    The entity information block every library prompt carries.

    The four core attributes come from `audit_data` (domain screens reuse it
    for plan, vendor, policy, ... records) and `attributes` pulls extra
    `(key, label)` pairs from `entity_data`. Every line is always rendered.
    """
    audit = request.audit_data
    rows: list[tuple[str, Any]] = list(
        zip(labels, (audit.title, audit.audit_type, audit.business_unit, audit.scope))
    )
    rows.extend((label, request.entity_data.get(key)) for key, label in attributes)
    return info_block(heading, rows)


def subject_of(request: GenerationRequest, default: str = "the organization") -> str:
    if request.audit_data.title:
        return request.audit_data.title
    if request.control_set_data and request.control_set_data.name:
        return request.control_set_data.name
    if request.privacy_data and request.privacy_data.title:
        return request.privacy_data.title
    return default


def content_only(output: str) -> str:
    return f"Generate only the {output}, no additional formatting or explanations."


@dataclass(frozen=True)
class PromptSpec:
    """
    Declarative library entry. Calling it with a request renders the prompt:
    persona and task, entity block, context, requirements, optional output
    format, then the content-only instruction as the final line.
    """

    persona: str
    task: str
    output: str
    requirements: tuple[str, ...]
    words: tuple[int, int] | None = None
    heading: str = "Audit Information"
    labels: tuple[str, ...] = AUDIT_LABELS
    attributes: tuple[tuple[str, str], ...] = ()
    guidance: str = ""
    output_format: str = ""
    entity: Callable[[GenerationRequest], str] | None = field(default=None, compare=False)

    def __call__(self, request: GenerationRequest) -> str:
        block = self.entity(request) if self.entity else entity_block(
            request, self.heading, self.labels, self.attributes
        )
        subject = subject_of(request)

        lines = [
            f'{self.persona} {self.task} for "{subject}" based on the following information:',
            "",
            block,
            "",
            f"Context: {display(request.context)}",
        ]
        if self.guidance:
            lines += ["", self.guidance]

        requirements = [r.replace("{subject}", subject) for r in self.requirements]
        if request.industry:
            requirements.append(f"Tailor the content to the {request.industry} industry")
        if request.framework:
            requirements.append(f"Align the content with {request.framework} requirements")
        if self.words:
            requirements.append(f"Keep it between {self.words[0]}-{self.words[1]} words")
        lines += ["", "Requirements:"]
        lines.extend(f"- {r}" for r in requirements)

        if self.output_format:
            lines += ["", self.output_format]
        lines += ["", content_only(self.output)]
        return "\n".join(lines)
