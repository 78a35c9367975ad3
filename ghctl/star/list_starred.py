"""List the repositories starred by a user."""

import json
from dataclasses import asdict, dataclass

from ..errors import NotFoundError, upstream
from ..github import GitHubClient
from ..models import DEFAULT_CONCURRENCY, RepoEntry
from ..pagination import collect_pages
from ..spin import Spin


@dataclass
class StarListOptions:
    username: str | None = None
    git_url: bool = False
    json: bool = False
    concurrency: int = DEFAULT_CONCURRENCY


def list_starred(client: GitHubClient, options: StarListOptions, spin: Spin) -> list[RepoEntry]:
    """Starred repositories of ``options.username`` (or the authenticated user), by owner name."""
    with upstream("could not get user", options.username):
        if options.username:
            user = client.github.get_user(options.username)
        else:
            user = client.github.get_user()

    try:
        repos = collect_pages(
            client.page_fetcher(user.get_starred),
            client.page_request(),
            operation="could not get list starred",
            resource=options.username,
            concurrency=options.concurrency,
            progress=spin.page,
            sort_key=lambda repo: repo.full_name,
        )
    finally:
        spin.flush()

    if not repos:
        raise NotFoundError(f"{options.username or 'authenticated'} user have not starred repository")

    return [
        RepoEntry(ownername=repo.full_name, url=repo.git_url if options.git_url else repo.html_url)
        for repo in repos
    ]


def format_starred(entries: list[RepoEntry]) -> str:
    """Tab separated ``owner: ...  url: ...`` lines with the owner column padded."""
    width = max(len(e.ownername) for e in entries)
    return "\n".join(f"owner: {e.ownername:<{width}}\turl: {e.url}" for e in entries)


def run_star_list(client: GitHubClient, options: StarListOptions, spin: Spin) -> None:
    entries = list_starred(client, options, spin)
    if options.json:
        print(json.dumps([asdict(e) for e in entries], indent="\t"))
    else:
        print(format_starred(entries))
