"""List the repositories of a user, an organization or the authenticated user."""

import json
from dataclasses import asdict, dataclass

from ..errors import NotFoundError, upstream
from ..github import GitHubClient
from ..models import DEFAULT_CONCURRENCY, RepoEntry
from ..pagination import collect_pages
from ..spin import Spin

REPO_TYPES = ("all", "owner", "public", "private", "member")
VISIBILITY_TYPES = ("public", "private")


@dataclass
class RepoListOptions:
    owner: str | None = None
    type: str = "all"
    affiliation: str | None = None
    include_forked: bool = False
    json: bool = False
    concurrency: int = DEFAULT_CONCURRENCY


def _list_options(options: RepoListOptions) -> dict:
    # GitHub rejects `type` together with `visibility` or `affiliation`
    if options.owner:
        return {"type": options.type}
    if options.type in VISIBILITY_TYPES or options.affiliation:
        result = {"affiliation": options.affiliation}
        if options.type in VISIBILITY_TYPES:
            result["visibility"] = options.type
        return result
    return {"type": options.type}


def list_repos(client: GitHubClient, options: RepoListOptions, spin: Spin) -> list[RepoEntry]:
    """Fetch every repository page and return entries sorted by URL."""
    with upstream("repo: could not get user", options.owner):
        if options.owner:
            user = client.github.get_user(options.owner)
        else:
            user = client.github.get_user()

    fetch_page = client.page_fetcher(user.get_repos)
    try:
        repos = collect_pages(
            fetch_page,
            client.page_request(**_list_options(options)),
            operation="repo: could not get list all repositories",
            resource=options.owner,
            concurrency=options.concurrency,
            progress=spin.page,
        )
    finally:
        spin.flush()

    entries = [
        RepoEntry(ownername=repo.full_name, url=repo.html_url)
        for repo in repos
        if options.include_forked or not repo.fork
    ]
    if not entries:
        with upstream("repo: could not get user information"):
            owner = options.owner or client.login()
        raise NotFoundError(f'repo: {owner} user have not "{options.type}" repository')
    entries.sort(key=lambda e: e.url)
    return entries


def run_repo_list(client: GitHubClient, options: RepoListOptions, spin: Spin) -> None:
    entries = list_repos(client, options, spin)
    if options.json:
        print(json.dumps([asdict(e) for e in entries], indent=2))
    else:
        print("\n".join(e.url for e in entries))
