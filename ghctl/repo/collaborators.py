"""Invite collaborators and accept repository invitations."""

from dataclasses import dataclass

from ..errors import GhctlError, NotFoundError, upstream
from ..github import GitHubClient
from ..models import DEFAULT_CONCURRENCY
from ..pagination import collect_pages
from ..spin import Spin
from ..utils import split_full_name

PERMISSIONS = ("pull", "triage", "push", "maintain", "admin")


@dataclass
class CollaboratorOptions:
    full_name: str
    collaborator: str
    permission: str = "admin"


@dataclass
class AcceptInvitationOptions:
    full_name: str
    token: str | None = None
    concurrency: int = DEFAULT_CONCURRENCY


def run_repo_collaborator(client: GitHubClient, options: CollaboratorOptions, spin: Spin) -> None:
    """Invite ``options.collaborator`` to the repository."""
    if not options.collaborator:
        raise GhctlError("--collaborator flag must be not empty")
    owner, repo = split_full_name(options.full_name)
    full_name = f"{owner}/{repo}"

    with upstream("repo: could not add collaborator to", full_name):
        invitation = client.github.get_repo(full_name).add_to_collaborators(
            options.collaborator, permission=options.permission
        )
    # No invitation is created for existing collaborators
    if invitation is None:
        raise GhctlError(f"{options.collaborator} user already collaborator on {full_name}")

    print(f"added {options.collaborator} user to {full_name} collaborator\n\tid: {invitation.id}")


def find_invitation(invitations: list, full_name: str):
    """First invitation whose repository matches ``full_name``, ignoring case."""
    for invitation in invitations:
        if invitation.repository.full_name.lower() == full_name.lower():
            return invitation
    return None


def run_repo_accept(client: GitHubClient, options: AcceptInvitationOptions, spin: Spin) -> None:
    """Accept the pending invitation from ``options.full_name``.

    ``client`` must be authenticated as the invited user.
    """
    split_full_name(options.full_name)

    with upstream("repo: could not get user information"):
        user = client.github.get_user()

    try:
        invitations = collect_pages(
            client.page_fetcher(user.get_invitations),
            client.page_request(),
            operation="repo: could not get list invitations",
            concurrency=options.concurrency,
            progress=spin.page,
        )
    finally:
        spin.flush()

    invitation = find_invitation(invitations, options.full_name)
    if invitation is None:
        raise NotFoundError(f"repo: not found invitation from {options.full_name} repository")

    with upstream("repo: failed to accept invitation", str(invitation.id)):
        user.accept_invitation(invitation)

    print(f"accepted {invitation.id} invitation ID from {options.full_name} repository")
