"""`ghctl repo` subcommands."""

from .collaborators import (
    AcceptInvitationOptions,
    CollaboratorOptions,
    run_repo_accept,
    run_repo_collaborator,
)
from .list_repos import RepoListOptions, list_repos, run_repo_list
from .manage import RepoDeleteOptions, RepoOpenOptions, run_repo_delete, run_repo_open

__all__ = [
    "AcceptInvitationOptions",
    "CollaboratorOptions",
    "RepoDeleteOptions",
    "RepoListOptions",
    "RepoOpenOptions",
    "list_repos",
    "run_repo_accept",
    "run_repo_collaborator",
    "run_repo_delete",
    "run_repo_list",
    "run_repo_open",
]
