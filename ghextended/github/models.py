"""Value types passed to and returned from the extended repository operations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from github.GitTreeElement import GitTreeElement
from github.Repository import Repository

from ghextended.config import (
    DEFAULT_BRANCH,
    DEFAULT_FORK_POLL_INTERVAL,
    DEFAULT_FORK_POLL_MAX_ATTEMPTS,
)

FILE = "blob"
FOLDER = "tree"


@dataclass(frozen=True)
class TreeEntry:
    """One item of a recursive git tree listing."""

    path: str
    type: str  # "blob" (file) | "tree" (folder) | "commit" (submodule)
    sha: str
    size: int | None = None
    mode: str | None = None

    @property
    def name(self) -> str:
        return self.path[self.path.rfind("/") + 1 :]

    @property
    def is_file(self) -> bool:
        return self.type == FILE

    @property
    def is_folder(self) -> bool:
        return self.type == FOLDER

    @classmethod
    def from_element(cls, element: GitTreeElement) -> TreeEntry:
        return cls(
            path=element.path,
            type=element.type,
            sha=element.sha,
            size=element.size,
            mode=element.mode,
        )


@dataclass(frozen=True)
class SearchOptions:
    branch: str = DEFAULT_BRANCH
    case_sensitive: bool = False
    exclude_files: bool = False
    exclude_folders: bool = False


@dataclass(frozen=True)
class MergeOptions:
    commit_message: str | None = None  # None -> "Merged pull request gh-<number>"

    def message_for(self, number: int) -> str:
        if self.commit_message is None:
            return f"Merged pull request gh-{number}"
        return self.commit_message


@dataclass(frozen=True)
class RemoveOptions:
    message: str = "Deleted {path}"  # per-file commit message template

    def message_for(self, path: str) -> str:
        return self.message.format(path=path)


@dataclass(frozen=True)
class ForkOptions:
    poll_interval: float = DEFAULT_FORK_POLL_INTERVAL
    max_attempts: int = DEFAULT_FORK_POLL_MAX_ATTEMPTS


@dataclass
class ForkInfo:
    """Metadata of a fork once its contents are readable."""

    full_name: str  # "owner/repo"
    name: str
    owner: str
    fork: bool
    default_branch: str
    html_url: str
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_repository(cls, repo: Repository) -> ForkInfo:
        return cls(
            full_name=repo.full_name,
            name=repo.name,
            owner=repo.owner.login,
            fork=bool(repo.fork),
            default_branch=repo.default_branch,
            html_url=repo.html_url,
            raw=dict(repo.raw_data),
        )


def pull_request_fields(pull_request: Any) -> tuple[int, str]:
    """Return (number, head sha) from a PyGithub PullRequest or a plain mapping."""
    if isinstance(pull_request, Mapping):
        return int(pull_request["number"]), pull_request["head"]["sha"]
    return int(pull_request.number), pull_request.head.sha
