"""Unit tests for the GitHub client wrapper and the page adapter."""

from unittest.mock import MagicMock, PropertyMock, patch

import pytest

from .github import GitHubClient, resolve_token
from .models import PageRequest
from .settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # keep a developer .env out of the tests
    for name in ("GHCTL_TOKEN", "GITHUB_TOKEN", "GHCTL_CONCURRENCY", "GHCTL_PER_PAGE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def describe_settings():
    def it_prefers_ghctl_token(monkeypatch):
        monkeypatch.setenv("GHCTL_TOKEN", "ghctl")
        monkeypatch.setenv("GITHUB_TOKEN", "github")

        assert Settings().token == "ghctl"

    def it_falls_back_to_github_token(monkeypatch):
        monkeypatch.setenv("GHCTL_TOKEN", "")
        monkeypatch.setenv("GITHUB_TOKEN", "github")

        assert Settings().token == "github"

    def it_has_no_token_by_default():
        assert Settings().token is None

    def it_reads_concurrency(monkeypatch):
        monkeypatch.setenv("GHCTL_CONCURRENCY", "4")

        assert Settings().ghctl_concurrency == 4

    def it_defaults_concurrency_to_twenty():
        assert Settings().ghctl_concurrency == 20

    def it_reads_a_dotenv_file(tmp_path):
        (tmp_path / ".env").write_text("GITHUB_TOKEN=from-dotenv\n")

        assert Settings().token == "from-dotenv"


def describe_resolve_token():
    def it_uses_an_explicit_token_first(monkeypatch):
        monkeypatch.setenv("GHCTL_TOKEN", "env")

        assert resolve_token("flag") == "flag"

    def it_reads_settings_otherwise(monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "env")

        assert resolve_token(None) == "env"


def describe_GitHubClient():
    def describe_github():
        def it_authenticates_with_the_token():
            with patch("ghctl.github.Github") as github_cls, patch("ghctl.github.Auth") as auth:
                client = GitHubClient(token="secret", per_page=50)
                assert client.github is github_cls.return_value

            auth.Token.assert_called_once_with("secret")
            github_cls.assert_called_once_with(auth=auth.Token.return_value, per_page=50)

        def it_is_unauthenticated_without_token():
            with patch("ghctl.github.Github") as github_cls:
                GitHubClient().github

            github_cls.assert_called_once_with(per_page=100)

        def it_is_created_once():
            with patch("ghctl.github.Github") as github_cls:
                client = GitHubClient(token="t")
                client.github
                client.github

            assert github_cls.call_count == 1

    def describe_login():
        def it_caches_the_login():
            client = GitHubClient()
            client._github = MagicMock()
            client._github.get_user.return_value.login = "octocat"

            assert client.login() == "octocat"
            assert client.login() == "octocat"
            client._github.get_user.assert_called_once_with()

    def describe_page_fetcher():
        @pytest.fixture
        def client():
            return GitHubClient(per_page=10)

        def _list_call(items, total):
            paginated = MagicMock()
            paginated.get_page.return_value = items
            paginated.totalCount = total
            return MagicMock(return_value=paginated), paginated

        def it_reads_page_one_and_the_page_count(client):
            list_call, paginated = _list_call(["a", "b"], total=35)
            fetch_page = client.page_fetcher(list_call)

            page = fetch_page(client.page_request(type="owner"))

            list_call.assert_called_once_with(type="owner")
            paginated.get_page.assert_called_once_with(0)
            assert page.items == ["a", "b"]
            assert page.last_page == 4
            assert page.next_page == 2

        def it_does_not_count_on_later_pages(client):
            list_call, paginated = _list_call(["z"], total=35)
            total_count = PropertyMock(return_value=35)
            type(paginated).totalCount = total_count
            fetch_page = client.page_fetcher(list_call)

            page = fetch_page(PageRequest(page=3, per_page=10))

            paginated.get_page.assert_called_once_with(2)
            assert page.page == 3
            total_count.assert_not_called()

        def it_reports_one_page_for_empty_listings(client):
            list_call, _ = _list_call([], total=0)

            page = client.page_fetcher(list_call)(client.page_request())

            assert page.items == []
            assert page.last_page == 1
            assert page.next_page == 0

        def it_caps_the_page_count(client):
            list_call, _ = _list_call(["a"], total=5000)

            page = client.page_fetcher(list_call, max_items=100)(client.page_request())

            assert page.last_page == 10

    def describe_page_request():
        def it_drops_unset_options():
            request = GitHubClient(per_page=30).page_request(type="all", affiliation=None)

            assert dict(request.options) == {"type": "all"}
            assert request.page == 1
            assert request.per_page == 30

        def it_freezes_options():
            request = GitHubClient().page_request(type="all")

            with pytest.raises(TypeError):
                request.options["type"] = "owner"
