"""This module renders every failure as a JSON `{message, error}` body.

Each class of the error taxonomy carries its own status code. Request
validation failures are reported as 400, like the validation failures
raised by the services, and anything unexpected becomes a logged 500.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from licitax_advisor.exceptions.resources import LicitaxError
from licitax_advisor.providers.logging import LoggingProvider

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor."
INVALID_REQUEST_MESSAGE = "Requisição inválida."


def error_body(message: str, error: str | None = None) -> dict[str, str | None]:
    """Builds the JSON body shared by every error response.

    Args:
        message: The user-facing summary.
        error: Optional diagnostic text.

    Returns:
        The response body.
    """
    return {"message": message, "error": error}


async def handle_licitax_error(request: Request, exc: LicitaxError) -> JSONResponse:
    """Renders an error of the taxonomy with its status code.

    Args:
        request: The failed request.
        exc: The raised `LicitaxError`.

    Returns:
        The JSON error response.
    """
    logger = LoggingProvider().get_logger()
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.error})", exc_info=exc)
    else:
        logger.info(f"{request.method} {request.url.path} rejected with {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.error))


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Renders a malformed request (e.g. a body that is not JSON) as 400.

    Args:
        request: The failed request.
        exc: The raised `RequestValidationError`.

    Returns:
        The JSON error response.
    """
    return JSONResponse(status_code=400, content=error_body(INVALID_REQUEST_MESSAGE, str(exc.errors())))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Renders any other failure as 500, logging its traceback.

    Args:
        request: The failed request.
        exc: The raised exception.

    Returns:
        The JSON error response.
    """
    LoggingProvider().get_logger().error(f"Unexpected error on {request.method} {request.url.path}.", exc_info=exc)
    return JSONResponse(status_code=500, content=error_body(INTERNAL_ERROR_MESSAGE, str(exc)))


def register_error_handlers(app: FastAPI) -> None:
    """Installs the error handlers on an application.

    Args:
        app: The FastAPI application.
    """
    app.add_exception_handler(LicitaxError, handle_licitax_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
