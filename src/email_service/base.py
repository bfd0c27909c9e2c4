from abc import ABC, abstractmethod
from typing import Protocol

from src.email_service.templates import EmailTemplates


class EmailConfig(Protocol):
    emails_from: str
    couple_names: str


class EmailServiceBase(ABC):
    """Sends transactional email. Subclasses only implement the transport."""

    couple_names: str = ""

    @abstractmethod
    async def send_email(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> str | None:
        """Deliver one message. Returns the provider's message id when there is one."""
        pass

    async def _send_template(self, to_address: str, templates: tuple[str, str, str], **context) -> None:
        subject, html_template, text_template = templates
        context.setdefault("couple_names", self.couple_names)
        await self.send_email(
            to_address=to_address,
            subject=subject.format(**context),
            html_body=html_template.format(**context),
            text_body=text_template.format(**context),
        )

    async def send_invitation(
        self,
        to_address: str,
        guest_name: str,
        invite_code: str,
        rsvp_url: str,
    ) -> None:
        await self._send_template(
            to_address,
            EmailTemplates.get_invitation_templates(),
            guest_name=guest_name,
            invite_code=invite_code,
            rsvp_url=rsvp_url,
        )

    async def send_event_invitation(
        self,
        to_address: str,
        guest_name: str,
        event_name: str,
        event_date: str,
        event_time: str,
        event_location: str,
        event_description: str,
        rsvp_url: str,
    ) -> None:
        await self._send_template(
            to_address,
            EmailTemplates.get_event_invitation_templates(),
            guest_name=guest_name,
            event_name=event_name,
            event_date=event_date,
            event_time=event_time,
            event_location=event_location,
            event_description=event_description,
            rsvp_url=rsvp_url,
        )

    async def send_rsvp_notification(
        self,
        to_address: str,
        guest_name: str,
        attending: str,
        dietary: str,
        plus_one: str,
    ) -> None:
        await self._send_template(
            to_address,
            EmailTemplates.get_rsvp_notification_templates(),
            guest_name=guest_name,
            attending=attending,
            dietary=dietary,
            plus_one=plus_one,
        )

    async def send_event_rsvp_notification(
        self,
        to_address: str,
        guest_name: str,
        event_name: str,
        attending: str,
    ) -> None:
        await self._send_template(
            to_address,
            EmailTemplates.get_event_rsvp_notification_templates(),
            guest_name=guest_name,
            event_name=event_name,
            attending=attending,
        )

    async def send_activities_email(
        self,
        to_address: str,
        guest_name: str,
        activities_url: str,
    ) -> None:
        await self._send_template(
            to_address,
            EmailTemplates.get_activities_templates(),
            guest_name=guest_name,
            activities_url=activities_url,
        )
