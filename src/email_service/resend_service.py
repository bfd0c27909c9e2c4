import logging
from typing import Protocol

import httpx

from src.email_service.base import EmailServiceBase

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class ResendEmailConfig(Protocol):
    resend_api_key: str
    emails_from: str
    couple_names: str


class ResendEmailService(EmailServiceBase):
    def __init__(
        self,
        config: ResendEmailConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._transport = transport
        self.couple_names = config.couple_names

    async def send_email(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> str | None:
        """Send email via the Resend API and return its message id."""
        payload = {
            "from": self._config.emails_from,
            "to": [to_address],
            "subject": subject,
            "html": html_body,
        }
        if text_body:
            payload["text"] = text_body

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(
                RESEND_API_URL,
                headers={
                    "Authorization": f"Bearer {self._config.resend_api_key}",
                    "Content-Type": "application/json",
                },
                json=payload,
            )
            response.raise_for_status()

        resend_email_id = response.json().get("id")
        logger.info("Sent '%s' to %s (resend id %s)", subject, to_address, resend_email_id)
        return resend_email_id
