"""Delete a repository or open it in the browser."""

import webbrowser
from dataclasses import dataclass

import httpx

from ..errors import GhctlError, upstream
from ..github import GitHubClient
from ..spin import Spin
from ..utils import GITHUB_URL, confirm

HTTP_TIMEOUT = 10.0


@dataclass
class RepoDeleteOptions:
    name: str
    force: bool = False


@dataclass
class RepoOpenOptions:
    name: str


def run_repo_delete(client: GitHubClient, options: RepoDeleteOptions, spin: Spin) -> None:
    """Delete ``<login>/<name>`` after confirmation."""
    with upstream("could not get user information"):
        login = client.login()
    full_name = f"{login}/{options.name}"

    if not options.force:
        confirm(f'remove repository "{options.name}"?')

    with upstream(f"could not delete {options.name} repository"):
        with spin.spinning("deleting"):
            client.github.get_repo(full_name).delete()

    print(f"deleted {full_name} repository")


def repo_url(client: GitHubClient, name: str) -> str:
    """Web URL for ``owner/repo``, or for ``repo`` of the authenticated user."""
    if "/" not in name:
        with upstream("could not get user information"):
            name = f"{client.login()}/{name}"
    return f"{GITHUB_URL}/{name}"


def run_repo_open(client: GitHubClient, options: RepoOpenOptions, spin: Spin) -> None:
    url = repo_url(client, options.name)

    try:
        resp = httpx.get(url, follow_redirects=True, timeout=HTTP_TIMEOUT)
    except httpx.HTTPError as e:
        raise GhctlError(f"failed http request: {url}") from e
    if resp.status_code == httpx.codes.NOT_FOUND:
        raise GhctlError(f"failed http request: {url}")

    if not webbrowser.open(url):
        raise GhctlError(f"could not open {url} url")
