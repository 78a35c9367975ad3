"""Error kinds surfaced to the command boundary."""

from contextlib import contextmanager

import httpx
from github import GithubException, RateLimitExceededException

RATE_LIMIT_MESSAGE = "hit GitHub API rate limit"

EXACT_ARGS = "exact"
MIN_ARGS = "min"
MAX_ARGS = "max"


class GhctlError(Exception):
    """Base class for errors printed by the CLI."""


class ArgumentCountError(GhctlError):
    def __init__(self, command: str, usage: str, expected: int, kind: str = EXACT_ARGS):
        self.command = command
        self.usage = usage
        self.expected = expected
        self.kind = kind
        quantity = {
            EXACT_ARGS: "exactly",
            MIN_ARGS: "a minimum of",
            MAX_ARGS: "a maximum of",
        }[kind]
        super().__init__(f'"{command}" command requires {quantity} {usage} {expected} argument(s)')


class RateLimitError(GhctlError):
    """The upstream API quota is exhausted."""

    def __init__(self, operation: str | None = None):
        self.operation = operation
        message = f"{operation}: {RATE_LIMIT_MESSAGE}" if operation else RATE_LIMIT_MESSAGE
        super().__init__(message)


class UpstreamAPIError(GhctlError):
    """An HTTP or API failure, with the operation and resource that caused it."""

    def __init__(self, operation: str, resource: str | None = None, status: int | None = None, detail: str = ""):
        self.operation = operation
        self.resource = resource
        self.status = status
        self.detail = detail
        message = operation
        if resource:
            message = f"{message} {resource}"
        if status:
            message = f"{message}: status {status}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NotFoundError(GhctlError):
    """A lookup or listing came back empty."""


class CancelledError(GhctlError):
    """The user interrupted the command or declined a confirmation."""

    def __init__(self, message: str = "cancelled"):
        super().__init__(message)


def check_args(command: str, args: list[str], expected: int, kind: str = EXACT_ARGS, usage: str = "") -> None:
    """Raise ArgumentCountError when ``args`` does not satisfy the count."""
    count = len(args)
    if kind == EXACT_ARGS and count != expected:
        raise ArgumentCountError(command, usage, expected, kind)
    if kind == MIN_ARGS and count < expected:
        raise ArgumentCountError(command, usage, expected, kind)
    if kind == MAX_ARGS and count > expected:
        raise ArgumentCountError(command, usage, expected, kind)


def is_rate_limit_error(exc: BaseException) -> bool:
    """Whether ``exc`` has the shape of a GitHub rate limit response."""
    if isinstance(exc, (RateLimitError, RateLimitExceededException)):
        return True
    if isinstance(exc, GithubException):
        return exc.status in (403, 429) and "rate limit" in str(exc).lower()
    return False


def _github_detail(exc: GithubException) -> str:
    data = exc.data
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return str(data) if data else ""


def classify_error(exc: BaseException, operation: str, resource: str | None = None) -> BaseException:
    """Translate an upstream exception into one of the ghctl error kinds.

    Errors that are already ghctl errors pass through unchanged, as does
    anything that is not an upstream failure.
    """
    if isinstance(exc, GhctlError):
        return exc
    if is_rate_limit_error(exc):
        return RateLimitError(operation)
    if isinstance(exc, GithubException):
        return UpstreamAPIError(operation, resource, status=exc.status, detail=_github_detail(exc))
    if isinstance(exc, httpx.HTTPStatusError):
        return UpstreamAPIError(operation, resource, status=exc.response.status_code)
    if isinstance(exc, httpx.HTTPError):
        return UpstreamAPIError(operation, resource, detail=str(exc))
    return exc


@contextmanager
def upstream(operation: str, resource: str | None = None):
    """Re-raise upstream failures inside the block as ghctl errors."""
    try:
        yield
    except (GithubException, httpx.HTTPError) as e:
        raise classify_error(e, operation, resource) from e
