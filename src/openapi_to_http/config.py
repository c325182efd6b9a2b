"""Fixed template values and output layout constants."""

HOST_LINE = "Host: {{HTTP_HOST}}"
BEARER_AUTH_LINE = "Authorization: Bearer {{TOKEN}}"

DOCUMENT_SUFFIX = ".http"
BLOCK_SEPARATOR = "\n\n"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
