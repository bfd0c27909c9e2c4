from src.email_service.base import EmailServiceBase


class InMemoryEmailService(EmailServiceBase):
    """Email service for testing that records messages instead of sending them."""

    def __init__(self, fail_for: set[str] | None = None):
        self.sent: list[dict] = []
        self._fail_for = fail_for or set()
        self.couple_names = "Alex & Sam"

    async def send_email(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> str | None:
        if to_address in self._fail_for:
            raise RuntimeError(f"Delivery to {to_address} failed")
        self.sent.append(
            {
                "to": to_address,
                "subject": subject,
                "html": html_body,
                "text": text_body,
            }
        )
        return f"msg-{len(self.sent)}"

    def sent_to(self, address: str) -> list[dict]:
        return [message for message in self.sent if message["to"] == address]
