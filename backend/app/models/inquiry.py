"""
Pydantic models for the contact endpoint.

Models:
  Inquiry                  — validated contact-form submission (never stored)
  OutboundEmail            — provider-agnostic email handed to the mailer
  OkResponse               — success body
  ErrorResponse            — generic error body
  ValidationErrorResponse  — 400 body with per-field details
"""

from typing import Annotated, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, Field, field_validator


def check_email_address(value: str) -> str:
    """
    Validate an email address and return it exactly as submitted.

    Display-name forms ("Name <addr>") and surrounding whitespace are
    rejected. Unlike pydantic's EmailStr, the value is never normalized.
    """
    if value != value.strip():
        raise ValueError("value is not a valid email address: surrounding whitespace")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


EmailAddress = Annotated[str, AfterValidator(check_email_address)]


class Inquiry(BaseModel):
    """A contact-form submission that passed validation."""

    model_config = {"extra": "ignore"}

    name: str = Field(min_length=2, max_length=100)
    email: EmailAddress
    phone: Optional[str] = None
    company: Optional[str] = None
    # Honeypot: hidden on the form, only bots fill it in
    website: Optional[str] = None

    @field_validator("phone", "company", "website", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Optional fields may be omitted, but not sent as null
        if value is None:
            raise ValueError("Expected string, received null")
        return value

    @property
    def is_spam(self) -> bool:
        return bool(self.website)


class OutboundEmail(BaseModel):
    """An HTML email ready for the transactional-email provider."""

    sender: str
    to: List[str]
    reply_to: str
    subject: str
    html: str


class OkResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    error: str


class ValidationErrorResponse(ErrorResponse):
    details: Dict[str, List[str]]
