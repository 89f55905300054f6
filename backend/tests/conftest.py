import pytest


@pytest.fixture(autouse=True)
def no_provider_env(monkeypatch):
    """Every test starts without an API key and without the simulated delay."""
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.setenv("FALLBACK_DELAY_SECONDS", "0")
