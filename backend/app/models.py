import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


def get_datetime_utc() -> datetime:
    return datetime.now(timezone.utc)


# Shared properties
class AIConfigurationBase(SQLModel):
    provider: str = Field(max_length=50, index=True)
    model_name: str = Field(min_length=1, max_length=255)
    api_endpoint: str | None = Field(default=None, max_length=1024)
    api_key: str | None = Field(default=None, max_length=1024)
    temperature: float = Field(default=0.7, ge=0, le=1)
    max_tokens: int = Field(default=500, gt=0)
    is_active: bool = True


# Properties to receive via API on save (upsert keyed by owner + provider)
class AIConfigurationCreate(AIConfigurationBase):
    pass


# Database model, one row per (owner, provider)
class AIConfiguration(AIConfigurationBase, table=True):
    __table_args__ = (UniqueConstraint("created_by", "provider"),)

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_by: uuid.UUID = Field(index=True, nullable=False)
    created_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )
    updated_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )


# Properties to return; also used for synthesized read-only fallbacks,
# whose id and owner are plain strings such as "local-ollama" / "local".
class AIConfigurationPublic(AIConfigurationBase):
    id: uuid.UUID | str
    created_by: uuid.UUID | str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_fallback: bool = False


class AITemplateBase(SQLModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = Field(default="")
    field_type: str = Field(max_length=100, index=True)
    template_content: str
    industry: str | None = Field(default=None, max_length=255, index=True)
    framework: str | None = Field(default=None, max_length=255, index=True)
    context_variables: dict = Field(default_factory=dict, sa_type=JSON)
    is_active: bool = True
    is_default: bool = False


class AITemplateCreate(AITemplateBase):
    pass


# All fields optional on update
class AITemplateUpdate(SQLModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    field_type: str | None = Field(default=None, max_length=100)
    template_content: str | None = None
    industry: str | None = Field(default=None, max_length=255)
    framework: str | None = Field(default=None, max_length=255)
    context_variables: dict | None = None
    is_active: bool | None = None
    is_default: bool | None = None


class AITemplate(AITemplateBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    version: int = Field(default=1, ge=1)
    created_by: uuid.UUID | None = Field(default=None)
    created_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )
    updated_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )


class AITemplatePublic(AITemplateBase):
    id: uuid.UUID
    version: int
    created_by: uuid.UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# Best-effort audit trail of generation attempts
class AIGenerationLog(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(index=True, nullable=False)
    provider: str = Field(max_length=50)
    model_name: str = Field(default="", max_length=255)
    prompt: str = Field(default="")
    response: str = Field(default="")
    tokens_used: int = 0
    request_type: str = Field(default="", max_length=100)
    success: bool = False
    error_message: str | None = None
    created_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )


class AIGenerationLogPublic(SQLModel):
    id: uuid.UUID
    provider: str
    model_name: str
    tokens_used: int
    request_type: str
    success: bool
    error_message: str | None = None
    created_at: datetime | None = None


# Generic message
class Message(SQLModel):
    message: str
