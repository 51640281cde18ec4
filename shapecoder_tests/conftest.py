import pytest
import structlog

from shapecoder.conf import get_settings

# keep log output out of test output (and doctests), tests that look at logs use structlog.testing.capture_logs
structlog.configure(logger_factory=structlog.ReturnLoggerFactory())


@pytest.fixture(autouse=True)
def reset_global_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    # every test starts with the default settings and can load its own
    monkeypatch.delenv(get_settings.SETTINGS_ENV_VAR, raising=False)
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
