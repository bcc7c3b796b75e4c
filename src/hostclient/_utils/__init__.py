from ._errors import handle_errors
from ._options import (
    CallOptions,
    FileAttachment,
    Option,
    RequestConfig,
    fold_options,
    with_body,
    with_file,
    with_header,
    with_param,
    with_response,
)
from ._request_spec import RequestSpec, build_request_spec
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "CallOptions",
    "FileAttachment",
    "Option",
    "RequestConfig",
    "RequestSpec",
    "build_request_spec",
    "fold_options",
    "get_httpx_client_kwargs",
    "handle_errors",
    "with_body",
    "with_file",
    "with_header",
    "with_param",
    "with_response",
]
