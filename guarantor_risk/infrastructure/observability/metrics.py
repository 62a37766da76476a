"""Prometheus metrics for monitoring score distribution and scenario runs"""

from prometheus_client import Counter, Histogram

# Assessment metrics
assessment_counter = Counter(
    "guarantor_assessment_total",
    "Total risk assessments computed",
    ["strategy", "level"],
)

score_histogram = Histogram(
    "guarantor_risk_score",
    "Distribution of composite risk scores",
    ["strategy"],
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

# Worst-case simulation metrics
simulation_counter = Counter(
    "guarantor_simulation_total",
    "Total worst-case simulations run",
    ["strategy"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_assessment(strategy: str, score: int, level: str) -> None:
    """Record one scored assessment"""
    assessment_counter.labels(strategy=strategy, level=level).inc()
    score_histogram.labels(strategy=strategy).observe(score)


def record_simulation(strategy: str) -> None:
    simulation_counter.labels(strategy=strategy).inc()
