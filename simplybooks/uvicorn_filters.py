"""Logging filter that keeps probe traffic out of the uvicorn access log."""

import logging

# Used when settings cannot load (missing DB credentials at import time)
DEFAULT_EXCLUDED_PATHS = ("/metrics", "/health")


def _excluded_paths() -> tuple[str, ...]:
    try:
        from simplybooks.settings import app_settings
    except Exception:
        return DEFAULT_EXCLUDED_PATHS
    return tuple(app_settings.LOG_EXCLUDED_PATHS)


class ExcludeMetricsFilter(logging.Filter):
    """
    Drop access log lines for monitoring endpoints.

    uvicorn passes ``(client, method, path, http_version, status)`` as the
    record arguments; the path is compared without its query string. Other
    records are matched on the rendered message.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        excluded = _excluded_paths()

        if isinstance(record.args, tuple) and len(record.args) >= 3:
            path = str(record.args[2]).split("?", 1)[0]
            return path not in excluded

        message = record.getMessage()
        return not any(path in message for path in excluded)
