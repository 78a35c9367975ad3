"""GitHub API client using PyGithub, plus the page adapter for listings."""

import logging
import math
from typing import Any, Callable

from github import Auth, Github
from github.PaginatedList import PaginatedList

from .models import DEFAULT_PER_PAGE, Page, PageRequest
from .settings import get_settings

logging.getLogger("github").setLevel(logging.ERROR)
logging.getLogger("github.Requester").setLevel(logging.ERROR)
logging.getLogger("urllib3").setLevel(logging.ERROR)

logger = logging.getLogger(__name__)

ListCall = Callable[..., PaginatedList]


def resolve_token(token: str | None = None) -> str | None:
    """Explicit token first, then GHCTL_TOKEN, then GITHUB_TOKEN."""
    if token:
        return token
    return get_settings().token


class GitHubClient:
    """Thin wrapper around a lazily created PyGithub client.

    Without a token the client is unauthenticated and subject to the
    anonymous rate limit.
    """

    def __init__(self, token: str | None = None, per_page: int = DEFAULT_PER_PAGE):
        self.token = token
        self.per_page = per_page
        self._github: Github | None = None
        self._login: str | None = None

    @property
    def github(self) -> Github:
        """Lazy-initialize the GitHub client."""
        if self._github is None:
            token = resolve_token(self.token)
            if token:
                self._github = Github(auth=Auth.Token(token), per_page=self.per_page)
            else:
                logger.debug("no token found, using unauthenticated client")
                self._github = Github(per_page=self.per_page)
        return self._github

    def login(self) -> str:
        """Login of the authenticated user."""
        if self._login is None:
            self._login = self.github.get_user().login
        return self._login

    def page_fetcher(
        self, list_call: ListCall, max_items: int | None = None
    ) -> Callable[[PageRequest], Page]:
        """Adapt a PyGithub list call to the paginated fetcher.

        ``list_call(**request.options)`` must return a PaginatedList. Only
        page 1 asks the server for the total count; other pages report their
        own number as last page. ``max_items`` caps the page count for
        endpoints that stop serving results, like search.
        """

        def fetch_page(request: PageRequest) -> Page:
            paginated = list_call(**request.options)
            items = paginated.get_page(request.page - 1)
            last_page = request.page
            if request.page == 1:
                total = paginated.totalCount
                if max_items is not None:
                    total = min(total, max_items)
                last_page = max(1, math.ceil(total / self.per_page))
            next_page = request.page + 1 if request.page < last_page else 0
            return Page(items=items, page=request.page, last_page=last_page, next_page=next_page)

        return fetch_page

    def page_request(self, **options: Any) -> PageRequest:
        """Page-1 request for a list call; ``None`` options are dropped."""
        options = {k: v for k, v in options.items() if v is not None}
        return PageRequest(options=options, page=1, per_page=self.per_page)

    def close(self) -> None:
        if self._github is not None:
            self._github.close()
