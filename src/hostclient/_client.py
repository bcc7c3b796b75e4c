from logging import getLogger
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter

from ._config import Config
from ._utils import (
    Option,
    RequestSpec,
    build_request_spec,
    fold_options,
    get_httpx_client_kwargs,
    handle_errors,
)
from ._utils.constants import HEADER_ACCEPT
from .models.errors import EncodingError, RequestBuildError
from .models.response import Decodable

_ANY_JSON: TypeAdapter[Any] = TypeAdapter(Any)


class Client:
    """Sends requests to a single host and decodes the JSON answers.

    Each call is shaped by a list of options applied in order, see
    :func:`~hostclient.with_body`, :func:`~hostclient.with_header`,
    :func:`~hostclient.with_param`, :func:`~hostclient.with_file` and
    :func:`~hostclient.with_response`.

    The URL of a call is computed from the path and options of that call only,
    so one client can be shared between threads.

    Examples:
        ```python
        from hostclient import Client, ResponseTarget, with_file, with_response

        out = ResponseTarget(dict)
        with Client("https://api.example.com") as client:
            client.post("/upload", with_file("x.png", data), with_response(out))
        ```
    """

    def __init__(
        self, host: str, *, http_client: Optional[httpx.Client] = None
    ) -> None:
        self._logger = getLogger("hostclient")
        self._config = Config.from_host(host)

        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(**get_httpx_client_kwargs())

    @property
    def config(self) -> Config:
        return self._config

    @property
    def default_headers(self) -> dict[str, str]:
        return {HEADER_ACCEPT: "application/json"}

    def do(self, method: str, path: str, *options: Option) -> Any:
        """Send one request and decode its JSON response.

        Args:
            method (str): The HTTP method.
            path (str): The path on the client's host.
            *options (Option): Options shaping the request, applied in order.

        Returns:
            Any: The decoded body. It is also stored in the target given with
                ``with_response``, when there is one.

        Raises:
            EncodingError: The multipart form could not be built.
            RequestBuildError: The method or URL is invalid.
            TransportError: The network exchange failed.
            StatusError: The response status is not 2xx.
            DecodeError: The body is not JSON matching the response target.
        """
        call = fold_options(options)
        spec = build_request_spec(self._config, method, path, call)
        request = self._build_request(spec)

        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {list(request.headers.keys())}")

        with handle_errors():
            response = self._client.send(request)
            self._logger.debug(f"Response: {response.status_code} {request.url}")
            response.raise_for_status()
            return self._decode(response.content, call.response)

    def get(self, path: str, *options: Option) -> Any:
        return self.do("GET", path, *options)

    def post(self, path: str, *options: Option) -> Any:
        return self.do("POST", path, *options)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _build_request(self, spec: RequestSpec) -> httpx.Request:
        try:
            request = self._client.build_request(
                spec.method,
                spec.url,
                params=spec.params,
                headers=self.default_headers,
                content=spec.content,
                files=spec.files,
            )
        except httpx.InvalidURL as e:
            raise RequestBuildError(f"Invalid URL {spec.url!r}: {e}") from e
        except (TypeError, ValueError) as e:
            if spec.is_multipart:
                raise EncodingError(f"Cannot encode multipart form: {e}") from e
            raise RequestBuildError(f"Cannot build request: {e}") from e

        # caller headers win, including over the multipart Content-Type
        request.headers.update(spec.headers)
        return request

    def _decode(self, raw: bytes, target: Optional[Decodable]) -> Any:
        if target is None:
            return _ANY_JSON.validate_json(raw)
        return target.populate(raw)


def new(host: str) -> Client:
    """Create a :class:`Client` for ``[scheme://]host``, https by default."""
    return Client(host)
