"""`ghctl pr` subcommands."""

from .list_pull_requests import (
    PullRequestGetOptions,
    PullRequestListOptions,
    get_pull_requests,
    list_pull_requests,
    run_pr_get,
    run_pr_list,
)

__all__ = [
    "PullRequestGetOptions",
    "PullRequestListOptions",
    "get_pull_requests",
    "list_pull_requests",
    "run_pr_get",
    "run_pr_list",
]
