from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from src.guests.dtos import UNSET

# Filled in by the mail provider at send time, so a template may not declare them.
RESERVED_VARIABLES = frozenset({"FIRST_NAME", "LAST_NAME", "EMAIL", "RESEND_UNSUBSCRIBE_URL", "contact", "this"})


class TemplateNotFoundError(Exception):
    def __init__(self, template_id: UUID) -> None:
        self.template_id = template_id
        super().__init__("Template not found")


class InvalidTemplateDataError(Exception):
    pass


class TemplateStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class VariableType(str, Enum):
    STRING = "string"
    NUMBER = "number"


@dataclass(frozen=True)
class TemplateVariableDTO:
    key: str
    type: VariableType = VariableType.STRING
    fallback_value: str | float | None = None

    def to_json(self) -> dict[str, Any]:
        return {"key": self.key, "type": self.type.value, "fallback_value": self.fallback_value}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "TemplateVariableDTO":
        return cls(
            key=data["key"],
            type=VariableType(data.get("type", VariableType.STRING.value)),
            fallback_value=data.get("fallback_value"),
        )


@dataclass(frozen=True)
class EmailTemplateDTO:
    id: UUID
    name: str
    html: str
    subject: str | None = None
    variables: tuple[TemplateVariableDTO, ...] = ()
    status: TemplateStatus = TemplateStatus.DRAFT
    published_at: datetime | None = None


@dataclass(frozen=True)
class EmailTemplateCreateDTO:
    name: str
    html: str
    subject: str | None = None
    variables: tuple[TemplateVariableDTO, ...] = field(default_factory=tuple)
    publish: bool = False


@dataclass(frozen=True)
class EmailTemplateUpdateDTO:
    """Partial template update; UNSET or blank fields are left alone."""

    name: str = UNSET
    subject: str = UNSET
    html: str = UNSET

    def provided(self) -> dict[str, str]:
        changes = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is UNSET or value is None:
                continue
            value = value.strip()
            if value:
                changes[f.name] = value
        return changes
