"""Unit tests for repo delete and repo open."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from ..errors import CancelledError, GhctlError
from ..github import GitHubClient
from ..spin import Spin
from .manage import RepoDeleteOptions, RepoOpenOptions, repo_url, run_repo_delete, run_repo_open


@pytest.fixture
def client():
    c = GitHubClient()
    c._github = MagicMock()
    c._login = "octocat"
    return c


@pytest.fixture
def spin():
    return Spin(quiet=True)


def describe_run_repo_delete():
    def it_deletes_after_confirmation(client, spin, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt: "y")

        run_repo_delete(client, RepoDeleteOptions("hello"), spin)

        client.github.get_repo.assert_called_once_with("octocat/hello")
        client.github.get_repo.return_value.delete.assert_called_once_with()
        assert "deleted octocat/hello repository" in capsys.readouterr().out

    def it_cancels_when_declined(client, spin, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt: "n")

        with pytest.raises(CancelledError):
            run_repo_delete(client, RepoDeleteOptions("hello"), spin)

        client.github.get_repo.assert_not_called()

    def it_skips_confirmation_when_forced(client, spin, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt: pytest.fail("asked"))

        run_repo_delete(client, RepoDeleteOptions("hello", force=True), spin)

        client.github.get_repo.return_value.delete.assert_called_once_with()


def describe_repo_url():
    def it_keeps_owner_qualified_names(client):
        assert repo_url(client, "torvalds/linux") == "https://github.com/torvalds/linux"

    def it_prefixes_the_authenticated_login(client):
        assert repo_url(client, "hello") == "https://github.com/octocat/hello"


def describe_run_repo_open():
    def it_opens_existing_repositories(client, spin):
        with patch("ghctl.repo.manage.httpx.get", return_value=MagicMock(status_code=200)) as get, patch(
            "ghctl.repo.manage.webbrowser.open", return_value=True
        ) as browser:
            run_repo_open(client, RepoOpenOptions("torvalds/linux"), spin)

        assert get.call_args.args == ("https://github.com/torvalds/linux",)
        browser.assert_called_once_with("https://github.com/torvalds/linux")

    def it_fails_for_missing_repositories(client, spin):
        with patch("ghctl.repo.manage.httpx.get", return_value=MagicMock(status_code=404)), patch(
            "ghctl.repo.manage.webbrowser.open"
        ) as browser:
            with pytest.raises(GhctlError, match="failed http request"):
                run_repo_open(client, RepoOpenOptions("nobody/nothing"), spin)

        browser.assert_not_called()

    def it_fails_on_connection_errors(client, spin):
        with patch("ghctl.repo.manage.httpx.get", side_effect=httpx.ConnectError("offline")):
            with pytest.raises(GhctlError, match="failed http request"):
                run_repo_open(client, RepoOpenOptions("torvalds/linux"), spin)

    def it_fails_when_no_browser_opens(client, spin):
        with patch("ghctl.repo.manage.httpx.get", return_value=MagicMock(status_code=200)), patch(
            "ghctl.repo.manage.webbrowser.open", return_value=False
        ):
            with pytest.raises(GhctlError, match="could not open"):
                run_repo_open(client, RepoOpenOptions("torvalds/linux"), spin)
