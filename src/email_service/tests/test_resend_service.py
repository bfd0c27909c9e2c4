import json
from dataclasses import dataclass

import httpx
import pytest

from src.email_service.resend_service import RESEND_API_URL, ResendEmailService
from src.email_service.tests.inmemory_email_service import InMemoryEmailService


@dataclass
class FakeConfig:
    resend_api_key: str = "re_test_key"
    emails_from: str = "hello@wedding.test"
    couple_names: str = "Alex & Sam"


async def test_send_email_posts_to_resend():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["auth"] = request.headers["Authorization"]
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "resend-123"})

    service = ResendEmailService(config=FakeConfig(), transport=httpx.MockTransport(handler))

    message_id = await service.send_email(
        to_address="guest@example.com",
        subject="Hello",
        html_body="<p>Hi</p>",
        text_body="Hi",
    )

    assert message_id == "resend-123"
    assert captured["url"] == RESEND_API_URL
    assert captured["auth"] == "Bearer re_test_key"
    assert captured["body"]["from"] == "hello@wedding.test"
    assert captured["body"]["to"] == ["guest@example.com"]
    assert captured["body"]["text"] == "Hi"


async def test_send_email_raises_on_provider_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"message": "invalid to"})

    service = ResendEmailService(config=FakeConfig(), transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.HTTPStatusError):
        await service.send_email(
            to_address="not-an-email",
            subject="Hello",
            html_body="<p>Hi</p>",
        )


async def test_send_invitation_renders_code_and_link():
    service = InMemoryEmailService()

    await service.send_invitation(
        to_address="john@example.com",
        guest_name="John Smith",
        invite_code="ABCD-EFGH",
        rsvp_url="http://localhost:3000/rsvp?code=ABCD-EFGH",
    )

    [message] = service.sent
    assert message["to"] == "john@example.com"
    assert message["subject"] == "You're Invited to Our Wedding!"
    assert "ABCD-EFGH" in message["html"]
    assert "http://localhost:3000/rsvp?code=ABCD-EFGH" in message["text"]
    assert "Alex & Sam" in message["text"]


async def test_event_invitation_subject_includes_event_name():
    service = InMemoryEmailService()

    await service.send_event_invitation(
        to_address="john@example.com",
        guest_name="John",
        event_name="Welcome Drinks",
        event_date="Friday, June 12, 2026",
        event_time="7:30 PM",
        event_location="The Garden Bar",
        event_description="Casual drinks",
        rsvp_url="http://localhost:3000/events/rsvp?code=ABCD-EFGH&event=1",
    )

    assert service.sent[0]["subject"] == "You're Invited: Welcome Drinks"
    assert "7:30 PM" in service.sent[0]["html"]
