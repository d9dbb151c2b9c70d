import pytest


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    # the CLI reads TTTSTATE_STRICT_UNDO through load_config()
    monkeypatch.delenv("TTTSTATE_STRICT_UNDO", raising=False)
