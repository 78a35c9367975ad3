"""Create and delete repository releases."""

from dataclasses import dataclass

from ..errors import upstream
from ..github import GitHubClient
from ..spin import Spin
from ..utils import confirm


@dataclass
class ReleaseCreateOptions:
    owner: str
    repo: str
    tag: str
    name: str | None = None
    body: str | None = None


@dataclass
class ReleaseDeleteOptions:
    owner: str
    repo: str
    tag: str
    with_tag: bool = False
    force: bool = False


def run_release_create(client: GitHubClient, options: ReleaseCreateOptions, spin: Spin) -> None:
    full_name = f"{options.owner}/{options.repo}"
    name = options.name or options.tag
    body = options.body if options.body is not None else f"Release {options.tag}."

    with upstream(f"could not create {options.tag} release to", full_name):
        client.github.get_repo(full_name).create_git_release(options.tag, name=name, message=body)

    print(f"Created {options.tag} release")


def run_release_delete(client: GitHubClient, options: ReleaseDeleteOptions, spin: Spin) -> None:
    """Delete the release tagged ``options.tag``, and the tag with ``with_tag``."""
    full_name = f"{options.owner}/{options.repo}"

    with upstream(f"could not get {options.tag} release of", full_name):
        repo = client.github.get_repo(full_name)
        release = repo.get_release(options.tag)

    if not options.force:
        confirm(f'delete "{full_name}/{options.tag}" release?')

    with upstream(f"could not delete {options.tag} release of", full_name):
        release.delete_release()
    print(f"Deleted {options.tag} release")

    if options.with_tag:
        with upstream(f"could not delete {options.tag} tag of", full_name):
            repo.get_git_ref(f"tags/{options.tag}").delete()
        print(f"Deleted {options.tag} tag")
