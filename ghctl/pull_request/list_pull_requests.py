"""List pull requests sent by the authenticated user, or the closed ones of a repository."""

import json
from dataclasses import asdict, dataclass, field

from ..errors import NotFoundError, upstream
from ..github import GitHubClient
from ..models import DEFAULT_CONCURRENCY, SEARCH_RESULT_LIMIT, PullRequestEntry
from ..pagination import collect_pages
from ..spin import Spin
from ..utils import owner_and_repo_from_api_url

STATE_CLOSED = "closed"
STATE_OPEN = "open"


@dataclass
class PullRequestListOptions:
    repos: list[str] = field(default_factory=list)
    ignore_owners: list[str] = field(default_factory=list)
    ignore_repos: list[str] = field(default_factory=list)
    reverse: bool = False
    markdown: bool = False
    all: bool = False
    json: bool = False
    concurrency: int = DEFAULT_CONCURRENCY


@dataclass
class PullRequestGetOptions:
    owner: str
    repo: str
    markdown: bool = False
    merged: bool = False
    json: bool = False
    concurrency: int = DEFAULT_CONCURRENCY


def search_query(username: str, state: str, repos: list[str]) -> str:
    """Issue search query for pull requests of ``username`` in ``state``.

    Entries of ``repos`` with a slash select a repository, others an owner.
    """
    terms = [f"author:{username}", f"state:{state}", "type:pr"]
    for repo in repos:
        terms.append(f"repo:{repo}" if "/" in repo else f"user:{repo}")
    return " ".join(terms)


def _format_time(value) -> str:
    return value.isoformat() if value is not None else ""


def _is_ignored(entry: PullRequestEntry, options: PullRequestListOptions) -> bool:
    full_name = f"{entry.owner}/{entry.repo}"
    if entry.owner in options.ignore_owners:
        return True
    return entry.repo in options.ignore_repos or full_name in options.ignore_repos


def search_pull_requests(
    client: GitHubClient, username: str, state: str, options: PullRequestListOptions, spin: Spin
) -> list[PullRequestEntry]:
    """All pull requests matching the search, in the order the server sorted them."""
    query = search_query(username, state, options.repos)
    request = client.page_request(
        query=query, sort="updated", order="desc" if options.reverse else "asc"
    )
    issues = collect_pages(
        client.page_fetcher(client.github.search_issues, max_items=SEARCH_RESULT_LIMIT),
        request,
        operation="could not get search pull request result",
        resource=query,
        concurrency=options.concurrency,
        progress=spin.page,
    )

    entries = []
    for issue in issues:
        owner, repo = owner_and_repo_from_api_url(issue.url)
        entry = PullRequestEntry(
            title=issue.title,
            url=issue.html_url,
            created=_format_time(issue.created_at),
            owner=owner,
            repo=repo,
        )
        if not _is_ignored(entry, options):
            entries.append(entry)
    return entries


def list_pull_requests(client: GitHubClient, options: PullRequestListOptions, spin: Spin) -> list[PullRequestEntry]:
    """Closed pull requests of the authenticated user, then open ones with ``all``."""
    with upstream("could not get user information"):
        username = client.login()

    states = [STATE_CLOSED, STATE_OPEN] if options.all else [STATE_CLOSED]
    entries = []
    try:
        for state in states:
            entries.extend(search_pull_requests(client, username, state, options, spin))
    finally:
        spin.flush()
    return entries


def get_pull_requests(client: GitHubClient, options: PullRequestGetOptions, spin: Spin) -> list[PullRequestEntry]:
    """Closed pull requests of ``owner/repo`` ordered by creation."""
    full_name = f"{options.owner}/{options.repo}"
    with upstream("could not get repository", full_name):
        repo = client.github.get_repo(full_name)

    request = client.page_request(state=STATE_CLOSED, sort="created", direction="asc")
    try:
        pulls = collect_pages(
            client.page_fetcher(repo.get_pulls),
            request,
            operation="failed to get list of pull request from",
            resource=full_name,
            concurrency=options.concurrency,
            progress=spin.page,
        )
    finally:
        spin.flush()

    if options.merged:
        pulls = [pr for pr in pulls if pr.merged_at is not None]
    if not pulls:
        raise NotFoundError(f"not found pull requests from {full_name} repository")

    return [
        PullRequestEntry(
            title=pr.title,
            url=pr.html_url,
            created=_format_time(pr.created_at),
            owner=options.owner,
            repo=options.repo,
        )
        for pr in pulls
    ]


def format_pull_requests(entries: list[PullRequestEntry], markdown: bool = False, as_json: bool = False) -> str:
    if as_json:
        return json.dumps([asdict(e) for e in entries], indent=2)
    if markdown:
        return "\n".join(f"- [{e.title}]({e.url})" for e in entries)
    return "\n".join(f"url: {e.url}, created: {e.created}, title: {e.title}" for e in entries)


def run_pr_list(client: GitHubClient, options: PullRequestListOptions, spin: Spin) -> None:
    entries = list_pull_requests(client, options, spin)
    if entries or options.json:
        print(format_pull_requests(entries, markdown=options.markdown, as_json=options.json))


def run_pr_get(client: GitHubClient, options: PullRequestGetOptions, spin: Spin) -> None:
    entries = get_pull_requests(client, options, spin)
    print(format_pull_requests(entries, markdown=options.markdown, as_json=options.json))
