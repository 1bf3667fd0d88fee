import pytest

from distances.config import CONFIG_ENV_VAR


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run in an empty directory with no config file in the environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return tmp_path
