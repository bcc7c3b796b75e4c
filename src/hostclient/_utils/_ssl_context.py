import os
import ssl
from typing import Any

import certifi

from .constants import ENV_REQUESTS_CA_BUNDLE, ENV_SSL_CERT_DIR, ENV_SSL_CERT_FILE


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    # Expand environment variables like $HOME
    path = os.path.expandvars(path)
    # Expand user home directory ~
    path = os.path.expanduser(path)
    return path


def create_ssl_context() -> ssl.SSLContext:
    ssl_cert_file = expand_path(os.environ.get(ENV_SSL_CERT_FILE))
    requests_ca_bundle = expand_path(os.environ.get(ENV_REQUESTS_CA_BUNDLE))
    ssl_cert_dir = expand_path(os.environ.get(ENV_SSL_CERT_DIR))

    return ssl.create_default_context(
        cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
        capath=ssl_cert_dir,
    )


def get_httpx_client_kwargs() -> dict[str, Any]:
    """Transport defaults shared by every client.

    No timeout is set here, so httpx's own default applies.
    """
    return {
        "verify": create_ssl_context(),
        "follow_redirects": True,
    }
