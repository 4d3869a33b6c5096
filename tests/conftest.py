import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the settings file at a per-test location."""
    path = tmp_path / "config.json"
    monkeypatch.setenv("PASSFORGE_CONFIG", str(path))
    return path
