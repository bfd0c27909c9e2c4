"""Write model for the admin-managed email templates.

A template starts as a draft. Publishing stamps ``published_at``; editing a
published template turns it back into a draft until it is published again.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import UTC, datetime
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.templates.dtos import (
    RESERVED_VARIABLES,
    EmailTemplateCreateDTO,
    EmailTemplateDTO,
    EmailTemplateUpdateDTO,
    InvalidTemplateDataError,
    TemplateNotFoundError,
    TemplateStatus,
    TemplateVariableDTO,
    VariableType,
)
from src.templates.repository.orm_models import EmailTemplate

logger = logging.getLogger(__name__)


def clean_variables(variables: Iterable[TemplateVariableDTO]) -> list[TemplateVariableDTO]:
    """Drop reserved or blank keys and coerce fallbacks to the declared type."""
    cleaned = []
    for variable in variables:
        key = (variable.key or "").strip()
        if not key or key in RESERVED_VARIABLES:
            continue
        if variable.type == VariableType.NUMBER:
            fallback = variable.fallback_value
            if not isinstance(fallback, (int, float)) or isinstance(fallback, bool):
                try:
                    fallback = float(fallback)
                except (TypeError, ValueError):
                    fallback = None
            cleaned.append(TemplateVariableDTO(key=key, type=VariableType.NUMBER, fallback_value=fallback or None))
        else:
            fallback = variable.fallback_value
            cleaned.append(
                TemplateVariableDTO(key=key, type=VariableType.STRING, fallback_value=str(fallback or ""))
            )
    return cleaned


class TemplateWriteModel(ABC):
    @abstractmethod
    async def create_template(self, data: EmailTemplateCreateDTO) -> EmailTemplateDTO:
        """Raises InvalidTemplateDataError when name or html is missing."""
        raise NotImplementedError

    @abstractmethod
    async def update_template(self, template_id: UUID, update: EmailTemplateUpdateDTO) -> EmailTemplateDTO:
        """Raises TemplateNotFoundError or InvalidTemplateDataError."""
        raise NotImplementedError

    @abstractmethod
    async def delete_template(self, template_id: UUID) -> None:
        raise NotImplementedError

    @abstractmethod
    async def duplicate_template(self, template_id: UUID) -> EmailTemplateDTO:
        """Copy a template into a new draft named "<name> (Copy)"."""
        raise NotImplementedError

    @abstractmethod
    async def publish_template(self, template_id: UUID) -> EmailTemplateDTO:
        raise NotImplementedError


class SqlTemplateWriteModel(TemplateWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def create_template(self, data: EmailTemplateCreateDTO) -> EmailTemplateDTO:
        name = (data.name or "").strip()
        html = (data.html or "").strip()
        if not name or not html:
            raise InvalidTemplateDataError("Name and HTML are required")

        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            template = EmailTemplate(
                name=name,
                subject=(data.subject or "").strip() or None,
                html=html,
                variables=[v.to_json() for v in clean_variables(data.variables)],
                status=TemplateStatus.PUBLISHED if data.publish else TemplateStatus.DRAFT,
                published_at=datetime.now(UTC) if data.publish else None,
            )
            session.add(template)
            await session.flush()
            logger.info("Created email template %s (%s)", template.id, template.status.value)
            return template.to_dto()

    async def update_template(self, template_id: UUID, update: EmailTemplateUpdateDTO) -> EmailTemplateDTO:
        changes = update.provided()
        if not changes:
            raise InvalidTemplateDataError("No fields to update")

        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            template = await self._get(session, template_id)
            for name, value in changes.items():
                setattr(template, name, value)
            template.status = TemplateStatus.DRAFT
            await session.flush()
            return template.to_dto()

    async def delete_template(self, template_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            template = await self._get(session, template_id)
            await session.delete(template)
            await session.flush()
            logger.info("Deleted email template %s", template_id)

    async def duplicate_template(self, template_id: UUID) -> EmailTemplateDTO:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            source = await self._get(session, template_id)
            copy = EmailTemplate(
                name=f"{source.name} (Copy)",
                subject=source.subject,
                html=source.html,
                variables=list(source.variables or []),
                status=TemplateStatus.DRAFT,
                published_at=None,
            )
            session.add(copy)
            await session.flush()
            return copy.to_dto()

    async def publish_template(self, template_id: UUID) -> EmailTemplateDTO:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            template = await self._get(session, template_id)
            template.status = TemplateStatus.PUBLISHED
            template.published_at = datetime.now(UTC)
            await session.flush()
            logger.info("Published email template %s", template_id)
            return template.to_dto()

    @staticmethod
    async def _get(session: AsyncSession, template_id: UUID) -> EmailTemplate:
        result = await session.execute(select(EmailTemplate).where(EmailTemplate.id == template_id))
        template = result.scalar_one_or_none()
        if template is None:
            raise TemplateNotFoundError(template_id)
        return template
