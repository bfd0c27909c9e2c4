import abc
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.templates.dtos import EmailTemplateDTO
from src.templates.repository.orm_models import EmailTemplate


class TemplateReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_templates(self) -> list[EmailTemplateDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_template(self, template_id: UUID) -> EmailTemplateDTO | None:
        raise NotImplementedError


class SqlTemplateReadModel(TemplateReadModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def list_templates(self) -> list[EmailTemplateDTO]:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(EmailTemplate).order_by(EmailTemplate.name))
            return [template.to_dto() for template in result.scalars().all()]

    async def get_template(self, template_id: UUID) -> EmailTemplateDTO | None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(EmailTemplate).where(EmailTemplate.id == template_id))
            template = result.scalar_one_or_none()
            return template.to_dto() if template else None
