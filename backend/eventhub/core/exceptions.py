"""
Error taxonomy for the event hub.

Services raise these; `register_exception_handlers` maps them onto HTTP
responses. Database/driver errors are not wrapped and propagate as-is.
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class EventHubError(Exception):
    """Base class for all domain errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"detail": self.message}


class ConfigurationError(EventHubError):
    """Required configuration (e.g. DATABASE_URL) is missing."""


class ValidationError(EventHubError):
    """A field failed a presence/format rule."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        return {"detail": self.message, "field": self.field}


class ReferentialIntegrityError(EventHubError):
    """A record references another record that does not exist."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class DuplicateSlugError(EventHubError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, slug: str):
        super().__init__(f'An event with slug "{slug}" already exists')
        self.slug = slug


class NotFoundError(EventHubError):
    status_code = status.HTTP_404_NOT_FOUND


def register_exception_handlers(app: FastAPI) -> None:
    """Translate domain errors into JSON error responses."""

    @app.exception_handler(EventHubError)
    async def event_hub_error_handler(request: Request, exc: EventHubError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
