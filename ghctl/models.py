"""Data models and constants shared by the commands."""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Generic, Mapping, TypeVar

DEFAULT_CONCURRENCY = 20  # in-flight page requests per listing
DEFAULT_PER_PAGE = 100  # GitHub's maximum page size
SEARCH_RESULT_LIMIT = 1000  # GitHub Search API hard limit per query

T = TypeVar("T")


def _freeze(options: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(options or {}))


@dataclass(frozen=True)
class PageRequest:
    """One page of an upstream list call.

    Options are frozen on construction; use ``for_page`` to derive the request
    for another page instead of mutating a shared one.
    """

    options: Mapping[str, Any] = field(default_factory=dict)
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE

    def __post_init__(self):
        if self.page < 1:
            raise ValueError(f"page numbers start at 1, got {self.page}")
        object.__setattr__(self, "options", _freeze(self.options))

    def for_page(self, page: int) -> "PageRequest":
        return replace(self, page=page)


@dataclass
class Page(Generic[T]):
    """Items of a single page plus the paging state reported by the server."""

    items: list[T]
    page: int = 1
    last_page: int = 1
    next_page: int = 0


@dataclass
class RepoEntry:
    """Row printed by ``repo list`` and ``star list``."""

    ownername: str
    url: str


@dataclass
class PullRequestEntry:
    """Row printed by ``pr list`` and ``pr get``."""

    title: str
    url: str
    created: str
    owner: str = ""
    repo: str = ""
