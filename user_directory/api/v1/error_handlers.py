"""
Exception handlers mapping application errors onto HTTP responses.

400 and 404 carry an empty body; 422 carries the field -> message map.
"""

# Standard library imports
import logging
from typing import Dict

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response

# Local application imports
from ...application.exceptions import ClientInputError, UserNotFoundError, UserValidationError
from ...domain.constants import UserErrorKeys
from .negotiation import render

logger = logging.getLogger(__name__)

# camelCase body field -> error key
_BODY_FIELD_KEYS: Dict[str, str] = {
    "login": UserErrorKeys.LOGIN,
    "firstName": UserErrorKeys.FIRST_NAME,
    "lastName": UserErrorKeys.LAST_NAME,
}


async def client_input_error_handler(request: Request, exc: ClientInputError) -> Response:
    logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


async def user_not_found_handler(request: Request, exc: UserNotFoundError) -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def user_validation_error_handler(request: Request, exc: UserValidationError) -> Response:
    return render(request, exc.errors, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    """
    Body fields of the wrong JSON type are field errors (422).
    Anything else - a malformed ID or query value, unparseable JSON, a body
    of the wrong shape - is a bad request (400).
    """
    errors: Dict[str, str] = {}
    for error in exc.errors():
        location = tuple(error.get("loc") or ())
        field_key = None
        if len(location) >= 2 and location[0] == "body":
            field_key = _BODY_FIELD_KEYS.get(str(location[1]))
        if field_key is None:
            logger.info(f"{request.method} {request.url.path} rejected: {error.get('msg')}")
            return Response(status_code=status.HTTP_400_BAD_REQUEST)
        errors.setdefault(field_key, error.get("msg", "Invalid value"))
    
    return render(request, errors, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)


def register_exception_handlers(application: FastAPI) -> None:
    """Attach all handlers to the application"""
    application.add_exception_handler(ClientInputError, client_input_error_handler)
    application.add_exception_handler(UserNotFoundError, user_not_found_handler)
    application.add_exception_handler(UserValidationError, user_validation_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)
