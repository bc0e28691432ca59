import uuid
from typing import Any

from fastapi import APIRouter, HTTPException

from app.ai.schemas import FieldType
from app.api.deps import RequiredUserId, SessionDep, TemplateResolverDep
from app.crud import create_template, delete_template, list_templates, update_template
from app.models import AITemplate, AITemplateCreate, AITemplatePublic, AITemplateUpdate, Message

router = APIRouter()


@router.get("/templates", response_model=list[AITemplatePublic])
def read_templates(
    session: SessionDep,
    field_type: FieldType | None = None,
    industry: str | None = None,
    framework: str | None = None,
) -> Any:
    return list_templates(
        session=session,
        field_type=field_type.value if field_type else None,
        industry=industry,
        framework=framework,
    )


@router.get("/templates/resolve", response_model=AITemplatePublic | None)
def resolve_template(
    resolver: TemplateResolverDep,
    field_type: FieldType,
    industry: str | None = None,
    framework: str | None = None,
) -> Any:
    return resolver.resolve(field_type, industry, framework)


@router.post("/templates", response_model=AITemplatePublic)
def create_new_template(
    *, session: SessionDep, user_id: RequiredUserId, template_in: AITemplateCreate
) -> Any:
    return create_template(session=session, template_in=template_in, created_by=user_id)


@router.patch("/templates/{template_id}", response_model=AITemplatePublic)
def update_existing_template(
    *,
    session: SessionDep,
    user_id: RequiredUserId,
    template_id: uuid.UUID,
    template_in: AITemplateUpdate,
) -> Any:
    db_template = session.get(AITemplate, template_id)
    if not db_template:
        raise HTTPException(status_code=404, detail="Template not found")
    return update_template(session=session, db_template=db_template, template_in=template_in)


@router.delete("/templates/{template_id}", response_model=Message)
def delete_existing_template(
    session: SessionDep, user_id: RequiredUserId, template_id: uuid.UUID
) -> Message:
    if not delete_template(session=session, template_id=template_id):
        raise HTTPException(status_code=404, detail="Template not found")
    return Message(message="Template deleted successfully")
