import json
from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import (
    DecodeError,
    RequestBuildError,
    StatusError,
    TransportError,
)


def _status_error(e: httpx.HTTPStatusError) -> StatusError:
    try:
        error_body = e.response.json()
    except ValueError:
        error_body = e.response.text

    message = None
    if isinstance(error_body, dict):
        message = (
            error_body.get("message")
            or error_body.get("error")
            or error_body.get("detail")
        )
    if not isinstance(error_body, str):
        error_body = json.dumps(error_body)

    return StatusError(
        str(message or e.response.reason_phrase or e),
        e.response.status_code,
        error_body,
    )


@contextmanager
def handle_errors() -> Generator[None, None, None]:
    """Context manager translating httpx and decoding failures.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        RequestBuildError: The URL could not be built.
        TransportError: The request did not complete.
        StatusError: The server answered with a non-2xx status code.
        DecodeError: The response body did not decode into the target.
    """
    try:
        yield
    except httpx.InvalidURL as e:
        raise RequestBuildError(f"Invalid URL: {e}") from e
    except httpx.HTTPStatusError as e:
        raise _status_error(e) from e
    except httpx.RequestError as e:
        raise TransportError(f"{type(e).__name__}: {e}") from e
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        raise DecodeError(str(e)) from e
