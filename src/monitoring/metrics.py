"""Prometheus metrics for the credits pipeline.

HTTP metrics live in ``src.monitoring.middleware``.
"""

from prometheus_client import Counter, Histogram

UPSTREAM_FETCHES_TOTAL = Counter(
    "castgraph_upstream_fetches_total",
    "Coordinated upstream credit fetches",
    ["source", "outcome"],
)

UPSTREAM_FETCH_DURATION = Histogram(
    "castgraph_upstream_fetch_duration_seconds",
    "Duration of one coordinated upstream fetch, view building included",
    ["source"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0],
)
