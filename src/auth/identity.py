from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """An authenticated visitor as reported by the identity provider."""

    user_id: str
    email: str | None = None


class AdminPolicy:
    """Decides whether an identity may use the admin back-office."""

    def __init__(self, admin_emails: Iterable[str]) -> None:
        self._admin_emails = frozenset(
            email.strip().lower() for email in admin_emails if email and email.strip()
        )

    def is_admin(self, email: str | None) -> bool:
        if not email:
            return False
        return email.strip().lower() in self._admin_emails
