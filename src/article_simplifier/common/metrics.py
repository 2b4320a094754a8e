"""Prometheus metrics for simplification runs and readability analyses.

Metrics are registered once per process on the default registry; exposing
them over HTTP is left to whatever process embeds the simplifier.
"""
from prometheus_client import Counter, Histogram

# ---------------------------------------------------------------------------
# Metric definitions (add new ones here)
# ---------------------------------------------------------------------------

SENTENCES_TOTAL = Counter(
    "simplifier_sentences_total",
    "Source sentences rewritten",
    ["level"],
)

CHUNKS_TOTAL = Counter(
    "simplifier_chunks_total",
    "Output chunks emitted by the sentence rewriter",
    ["level"],
)

RUNS_TOTAL = Counter(
    "simplifier_runs_total",
    "Completed simplification runs",
    ["level"],
)

RUN_DURATION_SECONDS = Histogram(
    "simplifier_run_duration_seconds",
    "Duration of simplification runs in seconds",
    ["level"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1, 5),
)

ANALYSES_TOTAL = Counter(
    "readability_analyses_total",
    "Readability analyses performed",
)

__all__ = [
    "SENTENCES_TOTAL",
    "CHUNKS_TOTAL",
    "RUNS_TOTAL",
    "RUN_DURATION_SECONDS",
    "ANALYSES_TOTAL",
]
