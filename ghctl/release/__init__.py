"""`ghctl release` subcommands."""

from .release import ReleaseCreateOptions, ReleaseDeleteOptions, run_release_create, run_release_delete

__all__ = ["ReleaseCreateOptions", "ReleaseDeleteOptions", "run_release_create", "run_release_delete"]
