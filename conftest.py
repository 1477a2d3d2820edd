import pytest


@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path, monkeypatch):
    """Run every test from an empty directory so relative settings paths
    (apisettings.json, apikey.txt) never pick up a developer's real files."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RPG_QUEST_SETTINGS", raising=False)
    yield
