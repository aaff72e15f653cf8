"""
Registration helpers shared by the metric definition modules.

Module reloads (``uvicorn --reload``, test collection) import the metric
modules again; registering the same name twice makes prometheus_client
raise, so an existing collector is reused instead.
"""

from typing import Any, TypeVar

from prometheus_client import REGISTRY, Counter, Gauge, Histogram

M = TypeVar("M", Counter, Gauge, Histogram)


def _register(metric_cls: type[M], name: str, doc: str, **kwargs: Any) -> M:
    try:
        return metric_cls(name, doc, **kwargs)
    except ValueError:
        # Duplicated timeseries: the collector is already in the registry
        return REGISTRY._names_to_collectors[name]  # type: ignore[return-value]


def counter(name: str, doc: str, labels: list[str]) -> Counter:
    """Labelled counter, created once per process."""
    return _register(Counter, name, doc, labelnames=labels)


def gauge(name: str, doc: str, labels: list[str]) -> Gauge:
    """Labelled gauge, created once per process."""
    return _register(Gauge, name, doc, labelnames=labels)


def histogram(
    name: str, doc: str, labels: list[str], buckets: tuple[float, ...]
) -> Histogram:
    """
    Labelled histogram with explicit buckets, created once per process.

    Args:
        name: Metric name.
        doc: Help text shown in the exposition format.
        labels: Label names.
        buckets: Upper bounds in seconds.

    Returns:
        Histogram instance.
    """
    return _register(Histogram, name, doc, labelnames=labels, buckets=buckets)
