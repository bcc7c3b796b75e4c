# Endpoint
DEFAULT_SCHEME = "https"
SCHEME_SEPARATOR = "://"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"

# Multipart
MULTIPART_FIELD_NAME = "media"
MULTIPART_FILE_CONTENT_TYPE = "application/octet-stream"

# Environment variables honoured when building the SSL context
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"
