"""Order metrics reporters.

The service reports through ``IOrderMetrics``; any implementation may be
injected, including none at all.  ``PrometheusOrderMetrics`` exposes:

- ``orders_created_total{service="order"}``: orders created successfully.
- ``order_value_usd``: distribution of order fees.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional, Protocol

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Summary

from modules.orders.constants import METRICS_SERVICE_LABEL


class IOrderMetrics(Protocol):
    """Reporter interface for order observability aggregates."""

    def order_created(self, fee: float) -> None: ...


class PrometheusOrderMetrics:
    """``IOrderMetrics`` backed by prometheus_client collectors."""

    def __init__(self, registry: Optional[CollectorRegistry] = None) -> None:
        registry = registry if registry is not None else REGISTRY
        self._orders_created = Counter(
            "orders_created_total",
            "Orders created successfully",
            labelnames=["service"],
            registry=registry,
        ).labels(service=METRICS_SERVICE_LABEL)
        self._order_value = Summary(
            "order_value_usd",
            "Distribution of order values",
            registry=registry,
        )

    def order_created(self, fee: float) -> None:
        self._orders_created.inc()
        self._order_value.observe(fee)


@lru_cache(maxsize=None)
def get_default_metrics() -> PrometheusOrderMetrics:
    """Process-wide reporter on the default registry (registered once)."""
    return PrometheusOrderMetrics()
