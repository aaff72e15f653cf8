"""
Application-level constants.

These values define internal behavior and are not meant to be changed via
environment variables. For configurable values (connection pools, log
levels, CORS origins, etc.), see simplybooks/settings.py.
"""

# ============================================================================
# Logging
# ============================================================================

# Upper bound (bytes) of a single JSON log line before the message is cut
MAX_LOG_SIZE_BYTES = 250_000

# Length of generated correlation IDs
CORRELATION_ID_LENGTH = 8


# ============================================================================
# Database Monitoring
# ============================================================================

# Queries slower than this (seconds) are counted and logged as slow
SLOW_QUERY_THRESHOLD_SECONDS = 0.1

# Number of SQL characters kept when logging a slow query
SLOW_QUERY_PREVIEW_LENGTH = 500
