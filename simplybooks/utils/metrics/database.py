"""Query timing metrics fed by simplybooks.utils.query_monitor."""

from simplybooks.utils.metrics._helpers import counter, histogram

# Label values: select, insert, update, delete, other
db_query_duration_seconds = histogram(
    "db_query_duration_seconds",
    "Time spent executing SQL statements, by statement kind",
    ["operation"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

db_slow_queries_total = counter(
    "db_slow_queries_total",
    "SQL statements slower than the slow query threshold",
    ["operation"],
)
