"""Unit tests for settings"""

from console_kit.config import Settings


def test_default_settings(settings):
    assert settings.usury_threshold_percent == 20.0
    assert settings.example_loan.principal == 1000.0
    assert settings.example_loan.interest == 400.0
    assert settings.example_loan.term_years == 1
    assert settings.log_level == "WARNING"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("USURY_THRESHOLD_PERCENT", "36")
    monkeypatch.setenv("EXAMPLE_LOAN__PRINCIPAL", "500")
    monkeypatch.setenv("EXAMPLE_LOAN__TERM_YEARS", "2")

    settings = Settings(_env_file=None)

    assert settings.usury_threshold_percent == 36.0
    assert settings.example_loan.principal == 500.0
    assert settings.example_loan.term_years == 2
    assert settings.example_loan.interest == 400.0


def test_settings_fixture_ignores_environment_overrides(monkeypatch, request):
    """Byte-exact output tests rely on defaults even when the shell sets overrides"""
    monkeypatch.setenv("EXAMPLE_LOAN__TERM_YEARS", "5")
    monkeypatch.setenv("SERVICE_NAME", "elsewhere")

    settings = request.getfixturevalue("settings")

    assert settings.example_loan.term_years == 1
    assert settings.service_name == "console-kit"
