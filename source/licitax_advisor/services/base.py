"""This module holds the helpers shared by the resource services.

Request bodies arrive as plain mappings and are validated here, so that
every validation failure surfaces as `InvalidArgumentError` (HTTP 400).
Store failures that are not part of the error taxonomy are wrapped in
`InternalError`, keeping the store's diagnostic text.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from google.api_core.exceptions import GoogleAPIError
from licitax_advisor.exceptions.resources import InternalError, InvalidArgumentError, MappingError
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)
P = ParamSpec("P")
R = TypeVar("R")

MISSING_FIELDS_MESSAGE = "Campos obrigatórios estão faltando"
INVALID_FIELDS_MESSAGE = "Dados inválidos"


def _field_name(location: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in location) or "body"


def parse_payload(model: type[ModelT], payload: Any) -> ModelT:
    """Validates a request body against a payload model.

    Missing required fields are reported separately from malformed ones, so
    the message tells the user exactly what to fix.

    Args:
        model: The payload model.
        payload: The decoded request body.

    Returns:
        The validated payload.

    Raises:
        InvalidArgumentError: If the body is not an object or fails validation.
    """
    if not isinstance(payload, dict):
        raise InvalidArgumentError(INVALID_FIELDS_MESSAGE, "O corpo da requisição deve ser um objeto JSON.")
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        missing = [_field_name(error["loc"]) for error in e.errors() if error["type"] == "missing"]
        if missing:
            raise InvalidArgumentError(f"{MISSING_FIELDS_MESSAGE}: {', '.join(missing)}.", str(e)) from e
        invalid = sorted({_field_name(error["loc"]) for error in e.errors()})
        raise InvalidArgumentError(f"{INVALID_FIELDS_MESSAGE}: {', '.join(invalid)}.", str(e)) from e


def store_operation(message: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Wraps unexpected store failures of a service method in `InternalError`.

    A stored document that cannot be mapped counts as such a failure; the
    mapping diagnostic becomes the `error` detail.

    Args:
        message: The user-facing summary of the operation that failed.

    Returns:
        The decorator.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return func(*args, **kwargs)
            except GoogleAPIError as e:
                raise InternalError(message, str(e)) from e
            except MappingError as e:
                raise InternalError(message, e.reason) from e

        return wrapper

    return decorator
