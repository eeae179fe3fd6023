"""
Inquiry email composition.

Turns a validated Inquiry into the OutboundEmail sent to the site owner.
Everything here is pure; the transport lives in app.services.mailer.

Public API:
  escape_html(value: str) -> str
  build_subject(name: str) -> str
  build_html_body(inquiry: Inquiry) -> str
  build_inquiry_email(inquiry: Inquiry, settings: Settings) -> OutboundEmail
"""

import re

from app.config import Settings
from app.models.inquiry import Inquiry, OutboundEmail

SUBJECT_PREFIX = "New website inquiry from"

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})

# C0 control characters and DEL; CR/LF in a subject would start a new header
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]+")


def escape_html(value: str) -> str:
    """Replace the five HTML-significant characters with their entities."""
    return value.translate(_HTML_ESCAPES)


def build_subject(name: str) -> str:
    """
    Build the subject line from the submitter's name.

    The subject is plain text, so the name is not HTML-escaped. Control
    characters are collapsed to a single space instead.
    """
    clean = _CONTROL_CHARS.sub(" ", name).strip()
    return f"{SUBJECT_PREFIX} {clean}"


def _paragraph(label: str, value: str) -> str:
    return f"<p><strong>{label}:</strong> {escape_html(value)}</p>"


def build_html_body(inquiry: Inquiry) -> str:
    """Render the inquiry as HTML. Phone and company lines appear only when supplied."""
    lines = [
        "<h2>New Inquiry</h2>",
        _paragraph("Name", inquiry.name),
        _paragraph("Email", inquiry.email),
    ]
    if inquiry.phone:
        lines.append(_paragraph("Phone", inquiry.phone))
    if inquiry.company:
        lines.append(_paragraph("Company", inquiry.company))
    return "\n".join(lines)


def build_inquiry_email(inquiry: Inquiry, settings: Settings) -> OutboundEmail:
    return OutboundEmail(
        sender=settings.contact_from,
        to=list(settings.contact_to),
        reply_to=inquiry.email,
        subject=build_subject(inquiry.name),
        html=build_html_body(inquiry),
    )
