from typing import Optional


class HostClientError(Exception):
    """Base class for every error raised while sending a request."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class EncodingError(HostClientError):
    """Raised when the multipart form carrying a file could not be built."""


class RequestBuildError(HostClientError):
    """Raised when the outbound request could not be constructed.

    Typical causes are an HTTP method that is not a valid token or a host
    that does not form a valid URL.
    """


class TransportError(HostClientError):
    """Raised when the network exchange did not complete."""


class DecodeError(HostClientError):
    """Raised when the response body is not JSON matching the response target."""


class StatusError(HostClientError):
    """Raised when the server answered with a non-2xx status code.

    Attributes:
        status_code: The HTTP status code of the response.
        body: The raw response body, decoded as text.
    """

    def __init__(
        self, message: str, status_code: int, body: Optional[str] = None
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"
