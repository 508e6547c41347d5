"""Basic input shape checks shared by the trip form, confirmation and links."""

import re

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_URL_RE = re.compile(r"^https?://[^\s/$.?#][^\s]*\.[^\s]+$", re.IGNORECASE)


def is_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value))


def is_url(value: str) -> bool:
    return bool(_URL_RE.match(value))
