"""Structured JSON logging kept off stdout so program output stays exact"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List

from pythonjsonlogger import jsonlogger

from console_kit.domain.models import UsuryVerdict


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service: str = "console-kit", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service


def setup_logging(level: str = "WARNING", service: str = "console-kit") -> None:
    """Configure structured JSON logging on stderr"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service=service,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_assessment(phase: str, verdict: UsuryVerdict) -> None:
    """Log structured usury outcome for analysis"""
    logging.info(
        "Usury assessment completed",
        extra={
            "step": phase,
            "apr_percent": round(verdict.apr, 4),
            "threshold_percent": verdict.threshold,
            "jurisdiction": verdict.jurisdiction,
            "verdict": verdict.outcome,
        },
    )


def log_sort(words: List[str]) -> None:
    logging.info(
        "Words sorted",
        extra={"step": "sort_complete", "word_count": len(words)},
    )
