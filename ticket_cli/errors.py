import logging
from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import ParamSpec, TypeVar

from requests import HTTPError, JSONDecodeError, RequestException, Response

FuncParams = ParamSpec("FuncParams")
RetType = TypeVar("RetType")

logger = logging.getLogger(__name__)


class TicketServiceError(Exception):
    """Base exception for ticket service client errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.status_code:
            return f"TicketServiceError ({self.status_code}): {self.message}"
        return f"TicketServiceError: {self.message}"


class TicketServiceHttpError(TicketServiceError):
    """Non-2xx response from the ticket service."""

    def __init__(self, status_code: int, response_content: str):
        self.response_content = response_content
        super().__init__(response_content, status_code)


class TicketServiceNotFoundError(TicketServiceHttpError):
    """Resource not found in the ticket service (404)."""

    def __init__(self, response_content: str):
        super().__init__(HTTPStatus.NOT_FOUND, response_content)


class TicketServiceNetworkError(TicketServiceError):
    """The HTTP exchange could not be completed."""


class TicketServiceDecodeError(TicketServiceError):
    """A successful response carried an unexpected body."""


def response_text(response: Response | None) -> str:
    """Body of the response as text, empty when it cannot be read."""
    if response is None:
        return ""
    try:
        return response.text
    except RequestException:
        return ""


def wrap_http_error(func: Callable[FuncParams, RetType]) -> Callable[FuncParams, RetType]:  # noqa: UP047
    """Wraps requests errors into ticket service errors."""

    @wraps(func)
    def _wrapper(*args: FuncParams.args, **kwargs: FuncParams.kwargs) -> RetType:
        try:
            return func(*args, **kwargs)
        except HTTPError as err:
            status_code = err.response.status_code
            logger.info("HTTP error %s in %s.", status_code, func.__name__)
            content = response_text(err.response)
            if status_code == HTTPStatus.NOT_FOUND:
                raise TicketServiceNotFoundError(content) from err
            raise TicketServiceHttpError(status_code, content) from err
        except JSONDecodeError as err:
            logger.info("Malformed JSON body in %s: %s", func.__name__, err)
            raise TicketServiceDecodeError(f"response body is not valid JSON ({err})") from err
        except RequestException as err:
            logger.info("Network error in %s.", func.__name__, exc_info=True)
            raise TicketServiceNetworkError(str(err)) from err

    return _wrapper
