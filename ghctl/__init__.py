"""A CLI tool for GitHub repositories.

Lists repositories, starred repositories and pull requests, manages
collaborators and releases. Listings fetch their pages concurrently.
"""

from .cli import VERSION, main
from .models import Page, PageRequest
from .pagination import collect_pages, fetch_all_pages

__version__ = VERSION

__all__ = ["main", "Page", "PageRequest", "collect_pages", "fetch_all_pages"]

if __name__ == "__main__":
    main()
