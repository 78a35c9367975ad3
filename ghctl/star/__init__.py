"""`ghctl star` subcommands."""

from .list_starred import StarListOptions, list_starred, run_star_list

__all__ = ["StarListOptions", "list_starred", "run_star_list"]
