"""
Prometheus metric helpers

Inspection modules register their counters and histograms at import time.
Importing the same module twice (test reloads, CLI re-entry) would raise
``ValueError: Duplicated timeseries``; ``get_or_create_metric`` returns the
already registered collector instead.

Usage:
    from prometheus_client import Counter
    from utils.metrics import get_or_create_metric

    ANALYSES_TOTAL = get_or_create_metric(
        lambda: Counter("inspection_analyses_total", "Total analyses"),
        "inspection_analyses_total",
    )
"""

import logging
from typing import Callable, TypeVar

from prometheus_client import REGISTRY, CollectorRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_or_create_metric(
    metric_factory: Callable[[], T],
    metric_name: str,
    registry: CollectorRegistry = REGISTRY,
) -> T:
    """
    Create a metric or return the one already registered under ``metric_name``

    Args:
        metric_factory: Callable that creates the metric (e.g., lambda: Counter(...))
        metric_name: Name of the metric for lookup if already registered
        registry: Prometheus registry to use (default: global REGISTRY)

    Returns:
        The metric instance (either newly created or existing)

    Raises:
        ValueError: If creation failed and no collector is registered under the name
    """
    try:
        return metric_factory()
    except ValueError:
        existing = registry._names_to_collectors.get(metric_name)
        if existing is not None:
            logger.debug(f"Reusing registered metric {metric_name}")
            return existing
        raise


__all__ = ["get_or_create_metric"]
