"""Prometheus metrics for usury verdicts, APR distribution and input failures"""

from prometheus_client import Counter, Histogram

from console_kit.domain.models import UsuryVerdict

# Usury metrics
assessment_counter = Counter(
    "usury_assessments_total",
    "Total usury assessments made",
    ["verdict"],  # usurious | compliant | uncapped
)

apr_histogram = Histogram(
    "usury_apr_percent",
    "Computed APR in percent",
    buckets=[5.0, 10.0, 20.0, 36.0, 60.0, 100.0],
)

# Word sorter metrics
word_sort_counter = Counter(
    "word_sorts_total",
    "Word triples sorted",
)

# Input failures
input_error_counter = Counter(
    "console_input_errors_total",
    "Runs aborted by unreadable or invalid input",
    ["program"],  # word-sorter | usury-check
)


def record_assessment(verdict: UsuryVerdict) -> None:
    """Record verdict and APR for monitoring usury rates"""
    outcome = verdict.outcome
    assessment_counter.labels(verdict=outcome).inc()
    apr_histogram.observe(verdict.apr)
