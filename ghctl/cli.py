"""CLI commands for ghctl."""

import argparse
import logging
import sys

import httpx
from github import GithubException
from pydantic import ValidationError

from .errors import (
    EXACT_ARGS,
    MAX_ARGS,
    CancelledError,
    GhctlError,
    check_args,
    classify_error,
)
from .github import GitHubClient
from .pull_request import PullRequestGetOptions, PullRequestListOptions, run_pr_get, run_pr_list
from .ratelimit import run_ratelimit
from .release import ReleaseCreateOptions, ReleaseDeleteOptions, run_release_create, run_release_delete
from .repo import (
    AcceptInvitationOptions,
    CollaboratorOptions,
    RepoDeleteOptions,
    RepoListOptions,
    RepoOpenOptions,
    run_repo_accept,
    run_repo_collaborator,
    run_repo_delete,
    run_repo_list,
    run_repo_open,
)
from .repo.collaborators import PERMISSIONS
from .repo.list_repos import REPO_TYPES
from .settings import get_settings
from .spin import Spin
from .star import StarListOptions, run_star_list
from .utils import parse_list

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def _repo_list(args, concurrency):
    check_args(args.command_name, args.args, 1, MAX_ARGS, "<username|orgs>")
    return RepoListOptions(
        owner=args.args[0] if args.args else None,
        type=args.type,
        affiliation=args.affiliation or None,
        include_forked=args.forked,
        json=args.json,
        concurrency=concurrency,
    )


def _repo_delete(args, concurrency):
    check_args(args.command_name, args.args, 1, EXACT_ARGS, "<repository>")
    return RepoDeleteOptions(name=args.args[0], force=args.force)


def _repo_open(args, concurrency):
    check_args(args.command_name, args.args, 1, EXACT_ARGS, "<username/repository>")
    return RepoOpenOptions(name=args.args[0])


def _repo_collaborator(args, concurrency):
    check_args(args.command_name, args.args, 1, EXACT_ARGS, "<owner/repository>")
    return CollaboratorOptions(
        full_name=args.args[0],
        collaborator=args.collaborator,
        permission=args.permission,
    )


def _repo_accept(args, concurrency):
    check_args(args.command_name, args.args, 1, EXACT_ARGS, "<owner/repository>")
    return AcceptInvitationOptions(full_name=args.args[0], token=args.token, concurrency=concurrency)


def _release_create(args, concurrency):
    check_args(args.command_name, args.args, 3, EXACT_ARGS, "<owner> <repo> <tag>")
    owner, repo, tag = args.args
    return ReleaseCreateOptions(owner=owner, repo=repo, tag=tag, name=args.name, body=args.body)


def _release_delete(args, concurrency):
    check_args(args.command_name, args.args, 3, EXACT_ARGS, "<owner> <repo> <tag>")
    owner, repo, tag = args.args
    return ReleaseDeleteOptions(owner=owner, repo=repo, tag=tag, with_tag=args.with_tag, force=args.force)


def _pr_list(args, concurrency):
    return PullRequestListOptions(
        repos=list(args.args),
        ignore_owners=parse_list(args.ignore_owner),
        ignore_repos=parse_list(args.ignore_repo),
        reverse=args.reverse,
        markdown=args.markdown,
        all=args.all,
        json=args.json,
        concurrency=concurrency,
    )


def _pr_get(args, concurrency):
    check_args(args.command_name, args.args, 2, EXACT_ARGS, "<owner> <repo>")
    owner, repo = args.args
    return PullRequestGetOptions(
        owner=owner,
        repo=repo,
        markdown=args.markdown,
        merged=args.merged,
        json=args.json,
        concurrency=concurrency,
    )


def _star_list(args, concurrency):
    check_args(args.command_name, args.args, 1, MAX_ARGS, "[username]")
    return StarListOptions(
        username=args.args[0] if args.args else None,
        git_url=args.git,
        json=args.json,
        concurrency=concurrency,
    )


def _ratelimit(args, concurrency):
    return None


def _add_command(subparsers, name, command_name, handler, build, help, metavar=None):
    parser = subparsers.add_parser(name, help=help, description=help)
    if metavar:
        parser.add_argument("args", nargs="*", metavar=metavar)
    parser.set_defaults(handler=handler, build=build, command_name=command_name, args=[])
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghctl",
        description="A CLI tool for GitHub repositories.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be verbose (debug logging)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress the progress spinner")
    parser.add_argument(
        "--concurrency",
        type=int,
        default=None,
        help="Maximum in-flight page requests (default: GHCTL_CONCURRENCY or 20)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # repo
    repo_parser = subparsers.add_parser("repo", help="Manage the repository")
    repo_sub = repo_parser.add_subparsers(dest="subcommand", help="Repository commands")

    repo_list = _add_command(
        repo_sub, "list", "repo list", run_repo_list, _repo_list,
        "List the users repositories", metavar="<username|orgs>",
    )
    repo_list.add_argument(
        "-t",
        "--type",
        choices=REPO_TYPES,
        default="all",
        help="Type of repositories to list (default: all)",
    )
    repo_list.add_argument(
        "-a",
        "--affiliation",
        default="",
        help="Comma separated list of affiliations [owner,collaborator,organization_member]",
    )
    repo_list.add_argument("--forked", action="store_true", help="Include forked repositories")
    repo_list.add_argument("--json", action="store_true", help="Print JSON instead of URLs")

    repo_delete = _add_command(
        repo_sub, "delete", "repo delete", run_repo_delete, _repo_delete,
        "Delete repository", metavar="<repository>",
    )
    repo_delete.add_argument("-f", "--force", action="store_true", help="Do not ask for confirmation")

    _add_command(
        repo_sub, "open", "repo open", run_repo_open, _repo_open,
        "Open repository in the browser", metavar="<username/repository>",
    )

    repo_collaborator = _add_command(
        repo_sub, "collaborator", "repo collaborator", run_repo_collaborator, _repo_collaborator,
        "Manage repository's collaborators", metavar="<owner/repository>",
    )
    repo_collaborator.add_argument("--collaborator", default="", help="Username of collaborator")
    repo_collaborator.add_argument(
        "--permission",
        choices=PERMISSIONS,
        default="admin",
        help="Permission granted to the collaborator (default: admin)",
    )

    repo_accept = _add_command(
        repo_sub, "accept", "repo accept", run_repo_accept, _repo_accept,
        "Accept collaborator invitation", metavar="<owner/repository>",
    )
    repo_accept.add_argument("--token", default=None, help="GitHub token of the invited user")

    # release
    release_parser = subparsers.add_parser("release", help="Manage the repository releases")
    release_sub = release_parser.add_subparsers(dest="subcommand", help="Release commands")

    release_create = _add_command(
        release_sub, "create", "release create", run_release_create, _release_create,
        "Create repository release", metavar="<owner> <repo> <tag>",
    )
    release_create.add_argument("--name", default=None, help="Release name (default: the tag)")
    release_create.add_argument("--body", default=None, help='Release body (default: "Release <tag>.")')

    release_delete = _add_command(
        release_sub, "delete", "release delete", run_release_delete, _release_delete,
        "Delete repository release", metavar="<owner> <repo> <tag>",
    )
    release_delete.add_argument("--with-tag", action="store_true", help="Delete also tag")
    release_delete.add_argument("-f", "--force", action="store_true", help="Force deleting")

    # pr
    pr_parser = subparsers.add_parser("pr", help="Manage the pull request")
    pr_sub = pr_parser.add_subparsers(dest="subcommand", help="Pull request commands")

    pr_list = _add_command(
        pr_sub, "list", "pr list", run_pr_list, _pr_list,
        "List your sent pull requests", metavar="<owner|owner/repo>",
    )
    pr_list.add_argument(
        "--ignore-owner",
        action="append",
        default=[],
        help="Ignore repositories of this owner (repeatable, comma separated)",
    )
    pr_list.add_argument(
        "--ignore-repo",
        action="append",
        default=[],
        help="Ignore this repository (repeatable, comma separated)",
    )
    pr_list.add_argument("--reverse", action="store_true", help="Reverse of sort order")
    pr_list.add_argument("-m", "--markdown", action="store_true", help="Output markdown syntax")
    pr_list.add_argument(
        "-a", "--all", action="store_true", help="Output all pull requests (default: closed)"
    )
    pr_list.add_argument("--json", action="store_true", help="Print JSON")

    pr_get = _add_command(
        pr_sub, "get", "pr get", run_pr_get, _pr_get,
        "Get closed pull requests of a repository", metavar="<owner> <repo>",
    )
    pr_get.add_argument("-m", "--markdown", action="store_true", help="Output markdown syntax")
    pr_get.add_argument("--merged", action="store_true", help="Only merged pull requests")
    pr_get.add_argument("--json", action="store_true", help="Print JSON")

    # star
    star_parser = subparsers.add_parser("star", help="Manage the star")
    star_sub = star_parser.add_subparsers(dest="subcommand", help="Star commands")

    star_list = _add_command(
        star_sub, "list", "star list", run_star_list, _star_list,
        "List the [username] starred repositories (default: authenticated user)",
        metavar="username",
    )
    star_list.add_argument("-g", "--git", action="store_true", help="Print git url instead of HTML url")
    star_list.add_argument("--json", action="store_true", help="Print JSON instead of simple print")

    # ratelimit
    ratelimit = _add_command(
        subparsers, "ratelimit", "ratelimit", run_ratelimit, _ratelimit,
        "Check your API rate limit",
    )
    ratelimit.add_argument(
        "--token", default=None, help="GitHub token to check (default: GHCTL_TOKEN or GITHUB_TOKEN)"
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _settings_errors(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']).upper()}: {err['msg']}" for err in error.errors()
    )


def _fail(message) -> None:
    sys.stderr.write(f"ghctl: {message}\n")
    sys.stderr.flush()


def run(argv: list[str] | None = None) -> int:
    """Parse ``argv``, run the selected command and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "handler", None):
        parser.print_help()
        return 2

    _configure_logging(args.verbose)

    try:
        settings = get_settings()
    except ValidationError as e:
        parser.error(f"invalid environment: {_settings_errors(e)}")
    concurrency = args.concurrency if args.concurrency is not None else settings.ghctl_concurrency
    if concurrency < 1:
        parser.error("--concurrency must be at least 1")

    spin = Spin(quiet=args.quiet)
    client = GitHubClient(token=getattr(args, "token", None), per_page=settings.ghctl_per_page)
    try:
        options = args.build(args, concurrency)
        logger.debug("running %s with %s", args.command_name, options)
        args.handler(client, options, spin)
    except CancelledError as e:
        spin.flush()
        _fail(e)
        return 0
    except KeyboardInterrupt:
        spin.flush()
        _fail("interrupted")
        return 0
    except GhctlError as e:
        _fail(e)
        return 1
    except (GithubException, httpx.HTTPError) as e:
        _fail(classify_error(e, args.command_name))
        return 1
    finally:
        client.close()

    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
