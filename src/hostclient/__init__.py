from ._client import Client, new
from ._config import Config
from ._utils import (
    Option,
    with_body,
    with_file,
    with_header,
    with_param,
    with_response,
)
from .models import (
    Decodable,
    DecodeError,
    EncodingError,
    HostClientError,
    RequestBuildError,
    ResponseTarget,
    StatusError,
    TransportError,
)

__all__ = [
    "Client",
    "Config",
    "Decodable",
    "DecodeError",
    "EncodingError",
    "HostClientError",
    "Option",
    "RequestBuildError",
    "ResponseTarget",
    "StatusError",
    "TransportError",
    "new",
    "with_body",
    "with_file",
    "with_header",
    "with_param",
    "with_response",
]
