"""Small helpers shared by the commands."""

from .errors import CancelledError, GhctlError

API_REPOS_PREFIX = "https://api.github.com/repos/"
GITHUB_URL = "https://github.com"


def split_full_name(full_name: str) -> tuple[str, str]:
    """Split ``owner/repo`` into its parts."""
    owner, sep, repo = full_name.partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise GhctlError(f"{full_name!r} is not an <owner/repository> name")
    return owner, repo


def owner_and_repo_from_api_url(url: str) -> tuple[str, str]:
    """Owner and repository name from an API url like ``.../repos/o/r/issues/1``."""
    path = url.removeprefix(API_REPOS_PREFIX)
    parts = path.split("/")
    if len(parts) < 2:
        return parts[0], ""
    return parts[0], parts[1]


def parse_list(values: list[str] | None) -> list[str]:
    """Flatten repeated and comma separated flag values."""
    result = []
    for value in values or []:
        result.extend(v.strip() for v in value.split(",") if v.strip())
    return result


def confirm(prompt: str) -> None:
    """Ask a y/n question; anything but ``y`` cancels the command."""
    try:
        answer = input(f"{prompt} (y,n) ")
    except EOFError:
        answer = ""
    if answer.strip() != "y":
        raise CancelledError()
