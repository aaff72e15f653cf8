"""
SQL timing through SQLAlchemy cursor events.

Every statement executed by any engine of the process is timed. Durations
feed ``db_query_duration_seconds``; statements slower than
SLOW_QUERY_THRESHOLD_SECONDS also bump ``db_slow_queries_total`` and are
logged with a shortened copy of the SQL.
"""

import time

from sqlalchemy import event
from sqlalchemy.engine import Engine

from simplybooks.constants import (
    SLOW_QUERY_PREVIEW_LENGTH,
    SLOW_QUERY_THRESHOLD_SECONDS,
)
from simplybooks.logging import logger
from simplybooks.utils.metrics import (
    db_query_duration_seconds,
    db_slow_queries_total,
)

_TRACKED_OPERATIONS = frozenset(["select", "insert", "update", "delete"])
_START_ATTR = "_simplybooks_started_at"


def _get_query_operation(statement: str) -> str:
    """Metric label for a statement: its leading keyword, or "other"."""
    words = statement.split(None, 1)
    keyword = words[0].lower() if words else ""
    return keyword if keyword in _TRACKED_OPERATIONS else "other"


def _preview(statement: str) -> str:
    if len(statement) <= SLOW_QUERY_PREVIEW_LENGTH:
        return statement
    return statement[:SLOW_QUERY_PREVIEW_LENGTH] + "..."


def before_cursor_execute(  # type: ignore[no-untyped-def]
    conn, cursor, statement, parameters, context, executemany
):
    setattr(context, _START_ATTR, time.perf_counter())


def after_cursor_execute(  # type: ignore[no-untyped-def]
    conn, cursor, statement, parameters, context, executemany
):
    started_at = getattr(context, _START_ATTR, None)
    if started_at is None:
        return

    elapsed = time.perf_counter() - started_at
    operation = _get_query_operation(statement)
    db_query_duration_seconds.labels(operation=operation).observe(elapsed)

    if elapsed <= SLOW_QUERY_THRESHOLD_SECONDS:
        return

    db_slow_queries_total.labels(operation=operation).inc()
    logger.warning(
        f"Slow {operation.upper()} took {elapsed:.3f}s: {_preview(statement)}",
        extra={"query_duration_seconds": round(elapsed, 3)},
    )


def enable_query_monitoring() -> None:
    """Attach the timing listeners to the Engine class; repeated calls are no-ops."""
    if event.contains(Engine, "before_cursor_execute", before_cursor_execute):
        return

    event.listen(Engine, "before_cursor_execute", before_cursor_execute)
    event.listen(Engine, "after_cursor_execute", after_cursor_execute)
    logger.debug(
        f"Query monitoring on, slow threshold "
        f"{SLOW_QUERY_THRESHOLD_SECONDS * 1000:.0f}ms"
    )
