from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp
from src.templates.dtos import EmailTemplateDTO, TemplateStatus, TemplateVariableDTO


class EmailTemplate(Base, TimeStamp):
    __tablename__ = TableNames.EMAIL_TEMPLATES.value

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[str | None] = mapped_column(String(255), nullable=True)
    html: Mapped[str] = mapped_column(Text, nullable=False)
    variables: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list, nullable=False)
    status: Mapped[TemplateStatus] = mapped_column(
        Enum(
            TemplateStatus,
            name="template_status_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=TemplateStatus.DRAFT,
        nullable=False,
    )
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def to_dto(self) -> EmailTemplateDTO:
        return EmailTemplateDTO(
            id=self.id,
            name=self.name,
            html=self.html,
            subject=self.subject,
            variables=tuple(TemplateVariableDTO.from_json(v) for v in self.variables or []),
            status=self.status,
            published_at=self.published_at,
        )

    def __repr__(self) -> str:
        return f"<EmailTemplate {self.name} ({self.status})>"
