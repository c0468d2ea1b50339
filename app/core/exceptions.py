"""API error taxonomy and the handlers that turn it into responses."""

import keyword
from typing import Dict, List, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = structlog.get_logger(__name__)

# pydantic prefixes messages raised from validators with this
_VALUE_ERROR_PREFIX = "Value error, "


class APIError(Exception):
    """Base class for errors that map to a JSON error body."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_content(self) -> Dict:
        return {"msg": self.message}


class ValidationError(APIError):
    """Field-level input errors, reported as a list."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[Dict]):
        super().__init__(errors[0]["msg"] if errors else "Invalid request")
        self.errors = errors

    @classmethod
    def single(cls, message: str) -> "ValidationError":
        return cls([{"msg": message}])

    def to_content(self) -> Dict:
        return {"errors": self.errors}


class AuthenticationError(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED


class AuthorizationError(APIError):
    """Requester is authenticated but does not own the resource."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(APIError):
    """Missing resource. Some routes report this as 400, others as 404."""

    status_code = status.HTTP_404_NOT_FOUND


class BadRequestError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamError(APIError):
    """A third-party API call failed."""

    status_code = status.HTTP_400_BAD_REQUEST


def _param_name(loc) -> str:
    """Wire name of the failing field; `from_` style attributes map back to `from`."""
    if not loc:
        return ""
    name = str(loc[-1])
    if name.endswith("_") and keyword.iskeyword(name[:-1]):
        return name[:-1]
    return name


def format_validation_errors(exc: RequestValidationError) -> List[Dict]:
    """Flatten pydantic errors into ``{msg, param, location}`` entries."""
    errors = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        message = error.get("msg", "Invalid value")
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        errors.append(
            {
                "msg": message,
                "param": _param_name(loc),
                "location": str(loc[0]) if loc else "body",
            }
        )
    return errors


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": format_validation_errors(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Log the failure and answer with a generic 500."""
    logger.error(
        "unhandled_exception",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return PlainTextResponse("Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
