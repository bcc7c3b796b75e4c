from pydantic import BaseModel, ConfigDict

from ._utils.constants import DEFAULT_SCHEME, SCHEME_SEPARATOR


class Config(BaseModel):
    """Scheme and host every request of a client is sent to."""

    model_config = ConfigDict(frozen=True)

    scheme: str = DEFAULT_SCHEME
    host: str

    @classmethod
    def from_host(cls, host: str) -> "Config":
        """Parse a ``[scheme://]host`` string.

        The host is always the last ``://``-separated component and the scheme
        the first one when there is more than one. Nothing is validated here:
        a malformed host only surfaces once a request is built from it.
        """
        parts = host.split(SCHEME_SEPARATOR)
        scheme = parts[0] if len(parts) > 1 else DEFAULT_SCHEME
        return cls(scheme=scheme, host=parts[-1])

    @property
    def base_url(self) -> str:
        return f"{self.scheme}{SCHEME_SEPARATOR}{self.host}"
