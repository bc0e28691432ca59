import uuid
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from app.models import (
    AIConfiguration,
    AIConfigurationCreate,
    AIGenerationLog,
    AITemplate,
    AITemplateCreate,
    AITemplateUpdate,
    get_datetime_utc,
)


def get_configuration_for_provider(
    *, session: Session, owner_id: uuid.UUID, provider: str
) -> AIConfiguration | None:
    statement = select(AIConfiguration).where(
        AIConfiguration.created_by == owner_id,
        AIConfiguration.provider == provider,
    )
    return session.exec(statement).first()


def _apply_configuration(db_config: AIConfiguration, config_in: AIConfigurationCreate) -> None:
    db_config.sqlmodel_update(
        {
            "model_name": config_in.model_name,
            "api_key": config_in.api_key,
            "api_endpoint": config_in.api_endpoint,
            "temperature": config_in.temperature,
            "max_tokens": config_in.max_tokens,
            "is_active": config_in.is_active,
            "updated_at": get_datetime_utc(),
        }
    )


def upsert_configuration(
    *, session: Session, config_in: AIConfigurationCreate, owner_id: uuid.UUID
) -> AIConfiguration:
    db_config = get_configuration_for_provider(
        session=session, owner_id=owner_id, provider=config_in.provider
    )
    if db_config:
        _apply_configuration(db_config, config_in)
        session.add(db_config)
        session.commit()
        session.refresh(db_config)
        return db_config

    db_config = AIConfiguration.model_validate(config_in, update={"created_by": owner_id})
    session.add(db_config)
    try:
        session.commit()
    except IntegrityError:
        # A concurrent save inserted the (owner, provider) row first; update it instead.
        session.rollback()
        db_config = get_configuration_for_provider(
            session=session, owner_id=owner_id, provider=config_in.provider
        )
        if db_config is None:
            raise
        _apply_configuration(db_config, config_in)
        session.add(db_config)
        session.commit()
    session.refresh(db_config)
    return db_config


def list_active_configurations(*, session: Session, owner_id: uuid.UUID) -> list[AIConfiguration]:
    statement = (
        select(AIConfiguration)
        .where(AIConfiguration.created_by == owner_id, AIConfiguration.is_active == True)  # noqa: E712
        .order_by(col(AIConfiguration.created_at).desc())
    )
    return list(session.exec(statement).all())


def delete_configuration(*, session: Session, config_id: uuid.UUID, owner_id: uuid.UUID) -> int:
    # The owner predicate makes a foreign id a silent no-op.
    statement = select(AIConfiguration).where(
        AIConfiguration.id == config_id,
        AIConfiguration.created_by == owner_id,
    )
    db_config = session.exec(statement).first()
    if not db_config:
        return 0
    session.delete(db_config)
    session.commit()
    return 1


def list_templates(
    *,
    session: Session,
    field_type: str | None = None,
    industry: str | None = None,
    framework: str | None = None,
) -> list[AITemplate]:
    statement = select(AITemplate).where(AITemplate.is_active == True)  # noqa: E712
    if field_type:
        statement = statement.where(AITemplate.field_type == field_type)
    if industry:
        statement = statement.where(AITemplate.industry == industry)
    if framework:
        statement = statement.where(AITemplate.framework == framework)
    statement = statement.order_by(col(AITemplate.field_type), col(AITemplate.name))
    return list(session.exec(statement).all())


def get_template_candidates(*, session: Session, field_type: str) -> list[AITemplate]:
    statement = (
        select(AITemplate)
        .where(AITemplate.field_type == field_type, AITemplate.is_active == True)  # noqa: E712
        .order_by(col(AITemplate.is_default).desc(), col(AITemplate.version).desc())
    )
    return list(session.exec(statement).all())


def create_template(
    *, session: Session, template_in: AITemplateCreate, created_by: uuid.UUID | None = None
) -> AITemplate:
    db_template = AITemplate.model_validate(template_in, update={"created_by": created_by})
    session.add(db_template)
    session.commit()
    session.refresh(db_template)
    return db_template


def update_template(*, session: Session, db_template: AITemplate, template_in: AITemplateUpdate) -> Any:
    template_data = template_in.model_dump(exclude_unset=True)
    extra_data = {
        "version": db_template.version + 1,
        "updated_at": get_datetime_utc(),
    }
    db_template.sqlmodel_update(template_data, update=extra_data)
    session.add(db_template)
    session.commit()
    session.refresh(db_template)
    return db_template


def delete_template(*, session: Session, template_id: uuid.UUID) -> bool:
    db_template = session.get(AITemplate, template_id)
    if not db_template:
        return False
    session.delete(db_template)
    session.commit()
    return True


def create_generation_log(*, session: Session, log_in: AIGenerationLog) -> AIGenerationLog:
    session.add(log_in)
    session.commit()
    session.refresh(log_in)
    return log_in


def list_generation_logs(
    *, session: Session, user_id: uuid.UUID, limit: int | None = 50
) -> list[AIGenerationLog]:
    statement = (
        select(AIGenerationLog)
        .where(AIGenerationLog.user_id == user_id)
        .order_by(col(AIGenerationLog.created_at).desc())
    )
    if limit is not None:
        statement = statement.limit(limit)
    return list(session.exec(statement).all())
