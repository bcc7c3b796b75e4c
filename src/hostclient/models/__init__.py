from .errors import (
    DecodeError,
    EncodingError,
    HostClientError,
    RequestBuildError,
    StatusError,
    TransportError,
)
from .response import Decodable, ResponseTarget

__all__ = [
    "Decodable",
    "DecodeError",
    "EncodingError",
    "HostClientError",
    "RequestBuildError",
    "ResponseTarget",
    "StatusError",
    "TransportError",
]
