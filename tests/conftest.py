"""Pytest fixtures for testing"""

import io

import pytest

from console_kit.config import Settings
from console_kit.domain.models import LoanTerms


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Default settings, isolated from any local .env or environment overrides"""
    for name in (
        "USURY_THRESHOLD_PERCENT",
        "EXAMPLE_LOAN",
        "EXAMPLE_LOAN__PRINCIPAL",
        "EXAMPLE_LOAN__INTEREST",
        "EXAMPLE_LOAN__TERM_YEARS",
        "SERVICE_NAME",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def example_loan() -> LoanTerms:
    """Loan shown by usury-check before the interactive override"""
    return LoanTerms(principal=1000.0, interest=400.0, term_years=1)


@pytest.fixture
def stdout() -> io.StringIO:
    return io.StringIO()
