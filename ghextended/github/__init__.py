"""GitHub repository handles with search, merge, recursive remove and fork."""

from ghextended.github.client import GitHubClient
from ghextended.github.errors import ExtendedGitHubError, ForkTimeoutError
from ghextended.github.models import (
    ForkInfo,
    ForkOptions,
    MergeOptions,
    RemoveOptions,
    SearchOptions,
    TreeEntry,
)
from ghextended.github.repository import ExtendedRepository

__all__ = [
    "ExtendedGitHubError",
    "ExtendedRepository",
    "ForkInfo",
    "ForkOptions",
    "ForkTimeoutError",
    "GitHubClient",
    "MergeOptions",
    "RemoveOptions",
    "SearchOptions",
    "TreeEntry",
]
