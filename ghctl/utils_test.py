"""Unit tests for utils module."""

import pytest

from ghctl.errors import CancelledError, GhctlError
from ghctl.utils import confirm, owner_and_repo_from_api_url, parse_list, split_full_name


def describe_split_full_name():
    def it_splits_owner_and_repo():
        assert split_full_name("octocat/hello-world") == ("octocat", "hello-world")

    @pytest.mark.parametrize("name", ["octocat", "octocat/", "/repo", "a/b/c", ""])
    def it_rejects_malformed_names(name):
        with pytest.raises(GhctlError):
            split_full_name(name)


def describe_owner_and_repo_from_api_url():
    def it_parses_issue_urls():
        url = "https://api.github.com/repos/octocat/hello-world/issues/42"
        assert owner_and_repo_from_api_url(url) == ("octocat", "hello-world")

    def it_parses_repository_urls():
        assert owner_and_repo_from_api_url("https://api.github.com/repos/o/r") == ("o", "r")


def describe_parse_list():
    def it_flattens_repeated_and_comma_separated_values():
        assert parse_list(["a,b", "c", " d , "]) == ["a", "b", "c", "d"]

    def it_handles_none():
        assert parse_list(None) == []


def describe_confirm():
    def it_returns_on_yes(monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt: "y\n")

        confirm("delete?")

    @pytest.mark.parametrize("answer", ["n", "", "yes", "Y"])
    def it_cancels_on_anything_else(monkeypatch, answer):
        monkeypatch.setattr("builtins.input", lambda prompt: answer)

        with pytest.raises(CancelledError):
            confirm("delete?")

    def it_cancels_on_eof(monkeypatch):
        def eof(prompt):
            raise EOFError

        monkeypatch.setattr("builtins.input", eof)

        with pytest.raises(CancelledError):
            confirm("delete?")

    def it_shows_the_prompt(monkeypatch):
        prompts = []
        monkeypatch.setattr("builtins.input", lambda prompt: prompts.append(prompt) or "y")

        confirm('remove repository "x"?')

        assert prompts == ['remove repository "x"? (y,n) ']
