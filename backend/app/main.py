"""
Contact Relay API
FastAPI application that forwards website contact-form submissions by email.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, get_settings
from app.routers import contact

# Configure logging to output to console
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

CONTACT_PATH = "/api/contact"

app = FastAPI(
    title="Contact Relay API",
    description="Validates contact-form submissions and forwards them by email",
    version="0.1.0",
)

# Loaded once at startup; handlers read it through app.config.get_settings
app.state.settings = Settings.from_env()

app.include_router(contact.router, prefix=CONTACT_PATH, tags=["contact"])


@app.exception_handler(StarletteHTTPException)
async def contact_method_not_allowed(request: Request, exc: StarletteHTTPException):
    """
    Answer verbs the contact route does not list (TRACE, PROPFIND, ...) with
    the contact endpoint's own 405 body and CORS headers.

    Every other HTTP error keeps FastAPI's default handling.
    """
    if exc.status_code == 405 and request.url.path == CONTACT_PATH:
        response = contact.method_not_allowed(get_settings(request))
        if exc.headers and "Allow" in exc.headers:
            response.headers["Allow"] = exc.headers["Allow"]
        return response
    return await http_exception_handler(request, exc)


@app.on_event("startup")
async def log_startup_config() -> None:
    """
    Log where inquiries will be delivered so misconfiguration is visible early.

    Example output:

        Contact relay ready:
          Recipients: 2
          CORS origin: https://yourdomain.com
    """
    settings: Settings = app.state.settings
    logger.info(
        "Contact relay ready:\n"
        "  Recipients: %d\n"
        "  CORS origin: %s",
        len(settings.contact_to),
        settings.cors_origin,
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
