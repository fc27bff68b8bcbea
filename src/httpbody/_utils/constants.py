# Environment variables
ENV_PREFIX = "HTTPBODY_"
ENV_CHARSET = "HTTPBODY_CHARSET"
ENV_SNIFF_BYTES = "HTTPBODY_SNIFF_BYTES"
ENV_TIMEOUT = "HTTPBODY_TIMEOUT"
ENV_MAX_RETRIES = "HTTPBODY_MAX_RETRIES"
ENV_RETRY_BACKOFF = "HTTPBODY_RETRY_BACKOFF"
ENV_FOLLOW_REDIRECTS = "HTTPBODY_FOLLOW_REDIRECTS"
ENV_USER_AGENT = "HTTPBODY_USER_AGENT"
ENV_DEBUG = "HTTPBODY_DEBUG"

# Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_ALLOW = "Allow"

# Charsets and mime types
DEFAULT_CHARSET = "UTF-8"
DEFAULT_BINARY_MIME_TYPE = "application/octet-stream"
DEFAULT_TEXT_MIME_TYPE = "text/plain"
FORM_URLENCODED_MIME_TYPE = "application/x-www-form-urlencoded"
MULTIPART_FORM_MIME_TYPE = "multipart/form-data"

# Number of leading bytes inspected when sniffing a file's mime type
SNIFF_PREFIX_BYTES = 32

# Streaming
CHUNK_SIZE = 64 * 1024

# Files
DOTENV_FILE = ".env"
DEFAULT_UPLOAD_NAME = "upload"
