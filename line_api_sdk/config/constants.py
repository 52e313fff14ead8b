"""
LINE Platform Constants

Central location for hosts, header names and retry tuning values shared by
the execution engine and the endpoint wrappers.
"""

# Default API host; endpoint paths are appended to it
DEFAULT_PREFIX_URL = "https://api.line.me"

# Environment variable that replaces the default host (e.g. a local mock server)
PREFIX_URL_ENV_VAR = "LINE_API_PREFIX_URL"

# Channel access token used by LineClient when none is passed
CHANNEL_ACCESS_TOKEN_ENV_VAR = "LINE_CHANNEL_ACCESS_TOKEN"

# Environment variables read by ExecutionOptions.from_env()
MAX_ATTEMPTS_ENV_VAR = "LINE_MAX_ATTEMPTS"
RETRY_BASE_DELAY_ENV_VAR = "LINE_RETRY_BASE_DELAY"
REQUEST_TIMEOUT_ENV_VAR = "LINE_REQUEST_TIMEOUT"

# LINE Login authorization endpoint (served from a different host)
AUTHORIZE_URL = "https://access.line.me/oauth2/v2.1/authorize"

# Request header carrying the idempotency key
# https://developers.line.biz/en/docs/messaging-api/retrying-api-request/
HEADER_RETRY_KEY = "X-Line-Retry-Key"

# Response headers carrying platform metadata
HEADER_REQUEST_ID = "X-Line-Request-Id"
HEADER_ACCEPTED_REQUEST_ID = "X-Line-Accepted-Request-Id"

# Upper bound (exclusive) of the random jitter added to each backoff, in seconds
JITTER_MAX_SECONDS = 0.1

# Status used for retry decisions when a failure carries no status (no response)
FALLBACK_STATUS_CODE = 500

# Status the platform returns when a retried request was already accepted
CONFLICT_STATUS_CODE = 409
