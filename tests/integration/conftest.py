import pytest

from ghctl.settings import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Run every CLI test without a developer's token or .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("GHCTL_TOKEN", "GITHUB_TOKEN", "GHCTL_CONCURRENCY", "GHCTL_PER_PAGE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
