"""Show the core API rate limit of the current token."""

from datetime import datetime, timezone

from .errors import upstream
from .github import GitHubClient
from .spin import Spin


def run_ratelimit(client: GitHubClient, options: None, spin: Spin) -> None:
    with upstream("could not get rate limit"):
        remaining, limit = client.github.rate_limiting
        reset = datetime.fromtimestamp(client.github.rate_limiting_resettime, tz=timezone.utc)

    print(f"Your rate limit: {limit}, Remaining: {remaining}")
    print(f"Reset time: {reset.isoformat()}")
