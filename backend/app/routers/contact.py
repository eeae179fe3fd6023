"""
Contact form router.

Validates a contact-form submission, drops honeypot spam, and forwards the
inquiry to the site owner by email.

The route accepts every common HTTP verb so that it can answer the CORS
preflight itself and reply 405 in the same JSON/CORS shape as every other
response. CORS headers are set on each response here rather than by
CORSMiddleware, which would answer preflights before this handler runs.

Endpoints:
  OPTIONS /   — CORS preflight, empty 200
  POST    /   — submit an inquiry
  *       /   — 405 Method not allowed (unlisted verbs via app.main)
"""

import json
import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from app.config import Settings, get_settings
from app.models.inquiry import (
    ErrorResponse,
    Inquiry,
    OkResponse,
    ValidationErrorResponse,
)
from app.services.inquiry_email import build_inquiry_email
from app.services.mailer import Mailer, get_mailer

logger = logging.getLogger(__name__)

router = APIRouter()

_ACCEPTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# Key used in validation details for problems with the body as a whole
_BODY_KEY = "body"


def apply_cors_headers(response: Response, settings: Settings) -> None:
    """Set the CORS header triplet on a response."""
    response.headers["Access-Control-Allow-Origin"] = settings.cors_origin
    response.headers["Access-Control-Allow-Methods"] = "POST, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"


def _json_response(status_code: int, body: BaseModel, settings: Settings) -> JSONResponse:
    response = JSONResponse(status_code=status_code, content=body.model_dump())
    apply_cors_headers(response, settings)
    return response


def method_not_allowed(settings: Settings) -> JSONResponse:
    """
    405 response for any verb other than POST/OPTIONS.

    Also used by the app-level handler in app.main for verbs the route does
    not list, which Starlette rejects before this router runs.
    """
    return _json_response(405, ErrorResponse(error="Method not allowed"), settings)


def validation_details(exc: ValidationError) -> Dict[str, List[str]]:
    """
    Group pydantic validation errors by field.

    Errors without a field location (e.g. the body is not an object) are
    reported under "body".
    """
    details: Dict[str, List[str]] = {}
    for error in exc.errors():
        key = ".".join(str(part) for part in error["loc"]) or _BODY_KEY
        details.setdefault(key, []).append(error["msg"])
    return details


def _invalid_input(details: Dict[str, List[str]], settings: Settings) -> JSONResponse:
    return _json_response(
        400,
        ValidationErrorResponse(error="Invalid input", details=details),
        settings,
    )


async def _submit_inquiry(
    request: Request,
    settings: Settings,
    mailer: Mailer,
) -> JSONResponse:
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _invalid_input({_BODY_KEY: ["Request body must be valid JSON"]}, settings)

    if not isinstance(payload, dict):
        return _invalid_input({_BODY_KEY: ["Request body must be a JSON object"]}, settings)

    try:
        inquiry = Inquiry.model_validate(payload)
    except ValidationError as exc:
        return _invalid_input(validation_details(exc), settings)

    # Honeypot: pretend success so bots cannot tell they were caught
    if inquiry.is_spam:
        logger.info("Honeypot field filled; dropping inquiry without sending")
        return _json_response(200, OkResponse(), settings)

    email = build_inquiry_email(inquiry, settings)
    message_id = await mailer.send(email)
    logger.info(
        f"Inquiry email sent to {len(email.to)} recipient(s) "
        f"(message id: {message_id or 'n/a'})"
    )
    return _json_response(200, OkResponse(), settings)


@router.api_route("", methods=_ACCEPTED_METHODS)
async def contact(
    request: Request,
    settings: Settings = Depends(get_settings),
    mailer: Mailer = Depends(get_mailer),
):
    """Handle a contact-form request."""
    if request.method == "OPTIONS":
        response = Response(status_code=200)
        apply_cors_headers(response, settings)
        return response

    if request.method != "POST":
        return method_not_allowed(settings)

    try:
        return await _submit_inquiry(request, settings, mailer)
    except Exception:
        logger.exception("Failed to send contact inquiry email")
        return _json_response(500, ErrorResponse(error="Failed to send email"), settings)
