"""Unit tests for metrics and JSON logging"""

import json
import logging

from prometheus_client import REGISTRY

from console_kit.domain.models import UsuryVerdict
from console_kit.infrastructure.observability.logging import CustomJsonFormatter
from console_kit.infrastructure.observability.metrics import record_assessment


def _sample(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def test_record_assessment_counts_verdicts():
    usurious_before = _sample("usury_assessments_total", {"verdict": "usurious"})
    compliant_before = _sample("usury_assessments_total", {"verdict": "compliant"})
    observed_before = _sample("usury_apr_percent_count")

    record_assessment(UsuryVerdict(apr=40.0, threshold=20.0, usurious=True))
    record_assessment(UsuryVerdict(apr=5.0, threshold=20.0, usurious=False))

    assert _sample("usury_assessments_total", {"verdict": "usurious"}) == usurious_before + 1
    assert _sample("usury_assessments_total", {"verdict": "compliant"}) == compliant_before + 1
    assert _sample("usury_apr_percent_count") == observed_before + 2


def test_json_formatter_adds_service_fields():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s", service="console-kit")
    record = logging.LogRecord("console_kit", logging.INFO, __file__, 1, "Words sorted", None, None)

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "Words sorted"
    assert payload["level"] == "INFO"
    assert payload["service"] == "console-kit"
    assert payload["name"] == "console_kit"
    assert "timestamp" in payload


def test_record_assessment_counts_uncapped_verdicts():
    before = _sample("usury_assessments_total", {"verdict": "uncapped"})

    record_assessment(UsuryVerdict(apr=90.0, threshold=0.0, usurious=False, jurisdiction="None", capped=False))

    assert _sample("usury_assessments_total", {"verdict": "uncapped"}) == before + 1
