"""Repository handle extended with search, merge, recursive remove and fork.

Every operation is a short, strictly sequential chain of PyGithub calls. The
wrapped ``Repository`` is never modified; attributes this class does not
define are forwarded to it unchanged.
"""

from __future__ import annotations

import logging
import re
import time
import urllib.parse
from collections.abc import Callable
from typing import Any

from github.GithubException import GithubException
from github.Repository import Repository
from github.Requester import Requester

from ghextended.config import DEFAULT_BRANCH
from ghextended.github.errors import ForkTimeoutError, is_not_found, is_unprocessable
from ghextended.github.models import (
    ForkInfo,
    ForkOptions,
    MergeOptions,
    RemoveOptions,
    SearchOptions,
    TreeEntry,
    pull_request_fields,
)

logger = logging.getLogger(__name__)


class ExtendedRepository:
    """A PyGithub repository plus the extended operations.

    Note that ``fork`` here is the fork operation; the wrapped repository's
    boolean ``fork`` attribute is still reachable as ``.repo.fork``.

    Usage:
        repo = client.get_repo("octocat", "hello-world")
        repo.search("readme")
        repo.remove("main", "docs/")
    """

    def __init__(
        self,
        repo: Repository,
        requester: Requester,
        fork_options: ForkOptions | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._repo = repo
        self._requester = requester
        self._fork_options = fork_options or ForkOptions()
        self._sleep = sleep

    @property
    def repo(self) -> Repository:
        return self._repo

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._repo, name)

    def __repr__(self) -> str:
        return f"ExtendedRepository({self._repo!r})"

    # -- search --------------------------------------------------------------

    def search(
        self, pattern: str, options: SearchOptions | None = None
    ) -> list[TreeEntry]:
        """Find files and folders whose name matches a regular expression.

        Only the last path segment is matched, unanchored. A tree that no
        longer exists yields no matches rather than an error.
        """
        options = options or SearchOptions()
        sha = self._head_sha(options.branch)

        try:
            entries = self._tree(sha)
        except GithubException as e:
            if not is_not_found(e):
                raise
            logger.warning(f"Tree {sha} of branch {options.branch} not found, no matches")
            return []

        regex = re.compile(pattern, 0 if options.case_sensitive else re.IGNORECASE)
        return [
            entry
            for entry in entries
            if not (options.exclude_files and entry.is_file)
            and not (options.exclude_folders and entry.is_folder)
            and regex.search(entry.name)
        ]

    # -- merge ---------------------------------------------------------------

    def merge_pull_request(
        self, pull_request: Any, options: MergeOptions | None = None
    ) -> dict[str, Any]:
        """Merge a pull request at its current head SHA.

        Args:
            pull_request: A PyGithub PullRequest or a mapping with ``number``
                and ``head.sha``.
            options: Commit message override.

        Returns:
            GitHub's merge payload (``merged``, ``sha``, ``message``).
        """
        options = options or MergeOptions()
        number, head_sha = pull_request_fields(pull_request)
        full_name = self._repository_info()["full_name"]

        _, merge_info = self._requester.requestJsonAndCheck(
            "PUT",
            f"/repos/{full_name}/pulls/{number}/merge",
            input={"commit_message": options.message_for(number), "sha": head_sha},
        )
        logger.info(f"Merged pull request #{number} into {full_name}")
        return merge_info

    # -- remove --------------------------------------------------------------

    def remove(
        self,
        branch: str = DEFAULT_BRANCH,
        path: str = "",
        options: RemoveOptions | None = None,
    ) -> None:
        """Delete a file, or a folder and everything below it, from a branch.

        GitHub's contents API only deletes single files, so a folder is
        detected by the 422 it answers with and its files are then deleted
        one commit at a time, in tree order.
        """
        options = options or RemoveOptions()
        # GitHub rejects a trailing slash even for folders
        path = path.removesuffix("/")

        try:
            self._delete_file(branch, path, options)
        except GithubException as e:
            if not is_unprocessable(e):
                raise
            logger.info(f"'{path}' on {branch} is a folder, removing its files")
            self._remove_folder(branch, path, options)

    def _remove_folder(self, branch: str, path: str, options: RemoveOptions) -> None:
        sha = self._head_sha(branch)
        paths = [
            entry.path
            for entry in self._tree(sha)
            if entry.is_file and entry.path.startswith(path)
        ]
        # Sequential: every delete is a commit on top of the previous one
        for file_path in paths:
            self._delete_file(branch, file_path, options)
            logger.info(f"Removed {file_path} from {branch}")

    def _delete_file(self, branch: str, path: str, options: RemoveOptions) -> None:
        payload: dict[str, Any] = {"message": options.message_for(path), "branch": branch}
        sha = self._content_sha(branch, path)
        if sha is not None:
            payload["sha"] = sha

        self._requester.requestJsonAndCheck(
            "DELETE",
            f"{self._repo.url}/contents/{urllib.parse.quote(path)}",
            input=payload,
        )

    def _content_sha(self, branch: str, path: str) -> str | None:
        """Blob SHA of a file, or None when the path is a folder."""
        contents = self._repo.get_contents(path, ref=branch)
        if isinstance(contents, list):
            return None
        return contents.sha

    # -- fork ----------------------------------------------------------------

    def fork(self, options: ForkOptions | None = None) -> ForkInfo:
        """Fork the repository and wait until the fork can be read.

        GitHub creates forks asynchronously, so the fork's root contents are
        polled on its default branch.

        Raises:
            GithubException: The fork could not be requested.
            ForkTimeoutError: The fork was not readable within ``max_attempts``.
        """
        options = options or self._fork_options
        fork = self._repo.create_fork()

        for attempt in range(1, options.max_attempts + 1):
            if self._is_readable(fork):
                logger.info(f"Fork {fork.full_name} ready after {attempt} attempt(s)")
                return ForkInfo.from_repository(fork)
            if attempt < options.max_attempts:
                logger.debug(f"Fork {fork.full_name} not ready, retrying in {options.poll_interval}s")
                self._sleep(options.poll_interval)

        raise ForkTimeoutError(fork.full_name, options.max_attempts)

    @staticmethod
    def _is_readable(fork: Repository) -> bool:
        try:
            fork.get_contents("", ref=fork.default_branch)
        except GithubException:
            return False
        return True

    # -- shared primitives ---------------------------------------------------

    def _repository_info(self) -> dict[str, Any]:
        """Repository metadata as the server knows it (completes lazy handles)."""
        return self._repo.raw_data

    def _head_sha(self, branch: str) -> str:
        return self._repo.get_git_ref(f"heads/{branch}").object.sha

    def _tree(self, sha: str) -> list[TreeEntry]:
        tree = self._repo.get_git_tree(sha, recursive=True)
        return [TreeEntry.from_element(element) for element in tree.tree]
