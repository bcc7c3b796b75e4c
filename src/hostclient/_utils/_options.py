from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from ..models.response import Decodable


@dataclass
class FileAttachment:
    name: str
    data: bytes


@dataclass
class RequestConfig:
    """Request-shaping state collected from the options of one call."""

    body: Optional[bytes] = None
    params: dict[str, str] = field(default_factory=dict)
    header: dict[str, str] = field(default_factory=dict)
    file: Optional[FileAttachment] = None


@dataclass
class CallOptions:
    request: RequestConfig = field(default_factory=RequestConfig)
    response: Optional[Decodable] = None


Option = Callable[[CallOptions], None]


def with_body(body: bytes) -> Option:
    """Send ``body`` verbatim as the request payload.

    Ignored when a file is attached with :func:`with_file`.
    """

    def apply(options: CallOptions) -> None:
        options.request.body = body

    return apply


def with_header(key: str, value: str) -> Option:
    def apply(options: CallOptions) -> None:
        options.request.header[key] = value

    return apply


def with_param(key: str, value: str) -> Option:
    def apply(options: CallOptions) -> None:
        options.request.params[key] = value

    return apply


def with_file(filename: str, data: bytes) -> Option:
    """Upload ``data`` as the ``media`` field of a multipart form."""

    def apply(options: CallOptions) -> None:
        options.request.file = FileAttachment(name=filename, data=data)

    return apply


def with_response(target: Decodable) -> Option:
    """Decode the JSON response body into ``target``."""

    def apply(options: CallOptions) -> None:
        options.response = target

    return apply


def fold_options(options: Iterable[Option]) -> CallOptions:
    call = CallOptions()
    for option in options:
        option(call)
    return call
