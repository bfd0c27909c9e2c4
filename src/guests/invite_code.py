"""Invite codes: the 9-character token that identifies a party without a login.

Codes look like ``ABCD-EF23``. The alphabet leaves out 0, O, I and 1 so a code
read off a printed card cannot be mistyped.
"""

import re
import secrets

from src.guests.dtos import InvalidInviteCodeError

INVITE_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
INVITE_CODE_PATTERN = re.compile(r"^[A-Z0-9]{4}-[A-Z0-9]{4}$")


def generate_invite_code() -> str:
    """Return a fresh random code. Uniqueness is checked by the caller."""
    chars = [secrets.choice(INVITE_CODE_ALPHABET) for _ in range(8)]
    return f"{''.join(chars[:4])}-{''.join(chars[4:])}"


def is_valid_invite_code(code: str) -> bool:
    """Case-sensitive format check; expects an already normalized code."""
    return bool(INVITE_CODE_PATTERN.match(code))


def normalize_invite_code(code: str) -> str:
    return code.strip().upper()


def parse_invite_code(code: str) -> str:
    """Normalize user input and reject anything that is not shaped like a code."""
    normalized = normalize_invite_code(code)
    if not is_valid_invite_code(normalized):
        raise InvalidInviteCodeError(code)
    return normalized
