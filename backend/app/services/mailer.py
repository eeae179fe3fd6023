"""
Outbound email transport.

The router only depends on the Mailer protocol: a single async ``send``
that either returns the provider's message id or raises MailerError.
ResendMailer is the production implementation and talks to the Resend
REST API directly over httpx.

Resend send-email request
-------------------------
POST https://api.resend.com/emails
Authorization: Bearer <RESEND_API_KEY>

  from       str        — sender, e.g. "Contact Form <hello@yourdomain.com>"
  to         list[str]  — recipients
  reply_to   str        — address replies should go to
  subject    str
  html       str

A 2xx response carries {"id": "<message id>"}. Errors carry
{"statusCode": int, "name": str, "message": str}.
"""

import logging
from typing import Optional, Protocol

import httpx
from fastapi import Depends

from app.config import Settings, get_settings
from app.models.inquiry import OutboundEmail

logger = logging.getLogger(__name__)


class MailerError(Exception):
    """Raised when the email provider rejects or fails to accept a message."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class Mailer(Protocol):
    async def send(self, email: OutboundEmail) -> str:
        ...


def _provider_error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase


class ResendMailer:
    """Mailer backed by the Resend HTTP API."""

    def __init__(
        self,
        api_key: str,
        api_url: str,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self._api_url = api_url
        self._timeout = timeout
        self._transport = transport

    @staticmethod
    def build_payload(email: OutboundEmail) -> dict:
        return {
            "from": email.sender,
            "to": email.to,
            "reply_to": email.reply_to,
            "subject": email.subject,
            "html": email.html,
        }

    async def send(self, email: OutboundEmail) -> str:
        """
        Send one email through Resend.

        Returns:
            The Resend message id (empty string if the provider omitted it).

        Raises:
            MailerError: on a non-2xx response or any transport failure.
        """
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._api_url,
                    json=self.build_payload(email),
                    headers=headers,
                )
        except httpx.HTTPError as exc:
            raise MailerError(f"Resend request failed: {exc}") from exc

        if response.is_error:
            raise MailerError(
                f"Resend rejected email ({response.status_code}): "
                f"{_provider_error_message(response)}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError:
            body = {}
        message_id = str(body.get("id", "")) if isinstance(body, dict) else ""
        logger.debug(f"Resend accepted email {message_id or '(no id)'}")
        return message_id


def get_mailer(settings: Settings = Depends(get_settings)) -> Mailer:
    """FastAPI dependency returning the production mailer."""
    return ResendMailer(
        api_key=settings.resend_api_key,
        api_url=settings.resend_api_url,
        timeout=settings.resend_timeout_seconds,
    )
