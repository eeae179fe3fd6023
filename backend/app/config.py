"""
Runtime configuration for the contact relay.

Values are read once from the environment (and a .env file, if present)
when the application starts. The resulting Settings object is stored on
``app.state`` and handed to the router through the ``get_settings``
dependency, so tests can substitute their own instance.

Environment variables
---------------------
RESEND_API_KEY           Resend API key (required).
CONTACT_FROM             Sender address, e.g. 'Contact Form <hello@yourdomain.com>' (required).
CONTACT_TO               Recipient address(es), comma-separated (required).
ALLOWED_ORIGIN           Value for Access-Control-Allow-Origin (optional, '*' when unset).
RESEND_API_URL           Resend send-email endpoint (optional).
RESEND_TIMEOUT_SECONDS   Timeout for the Resend call in seconds (optional, default 10).
"""

import os
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import Request
from pydantic import BaseModel

DEFAULT_RESEND_API_URL = "https://api.resend.com/emails"
DEFAULT_RESEND_TIMEOUT_SECONDS = 10.0

_REQUIRED_VARS = ("RESEND_API_KEY", "CONTACT_FROM", "CONTACT_TO")


def parse_recipients(raw: str) -> List[str]:
    """Split a comma-separated recipient list, trimming whitespace and dropping blanks."""
    return [addr.strip() for addr in raw.split(",") if addr.strip()]


class Settings(BaseModel):
    """Contact relay configuration."""

    resend_api_key: str
    contact_from: str
    contact_to: List[str]
    allowed_origin: Optional[str] = None
    resend_api_url: str = DEFAULT_RESEND_API_URL
    resend_timeout_seconds: float = DEFAULT_RESEND_TIMEOUT_SECONDS

    @property
    def cors_origin(self) -> str:
        return self.allowed_origin or "*"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build Settings from process environment variables.

        Raises:
            ValueError: if a required variable is missing or CONTACT_TO holds
                no addresses.
        """
        load_dotenv()

        missing = [name for name in _REQUIRED_VARS if not os.getenv(name, "").strip()]
        if missing:
            raise ValueError(
                f"{', '.join(missing)} must be set in environment variables"
            )

        recipients = parse_recipients(os.getenv("CONTACT_TO", ""))
        if not recipients:
            raise ValueError("CONTACT_TO must contain at least one address")

        timeout_raw = os.getenv("RESEND_TIMEOUT_SECONDS", "").strip()
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_RESEND_TIMEOUT_SECONDS
        except ValueError:
            raise ValueError(
                f"RESEND_TIMEOUT_SECONDS must be a number, got {timeout_raw!r}"
            )

        return cls(
            resend_api_key=os.getenv("RESEND_API_KEY", "").strip(),
            contact_from=os.getenv("CONTACT_FROM", "").strip(),
            contact_to=recipients,
            allowed_origin=os.getenv("ALLOWED_ORIGIN", "").strip() or None,
            resend_api_url=os.getenv("RESEND_API_URL", "").strip() or DEFAULT_RESEND_API_URL,
            resend_timeout_seconds=timeout,
        )


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the Settings loaded at startup."""
    return request.app.state.settings
