import pytest


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    # Tests choose their own argument check policy.
    monkeypatch.delenv("GREL_ARGCHECK", raising=False)
