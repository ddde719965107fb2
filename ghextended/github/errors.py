"""Error helpers for the extension layer.

Provider errors stay PyGithub ``GithubException`` instances and are never
wrapped. The helpers below only classify them.
"""

from __future__ import annotations

from github.GithubException import GithubException

NOT_FOUND = 404
UNPROCESSABLE = 422


class ExtendedGitHubError(Exception):
    """Base class for errors raised by this layer itself."""


class ForkTimeoutError(ExtendedGitHubError):
    """The fork was created but its contents never became readable."""

    def __init__(self, full_name: str, attempts: int) -> None:
        super().__init__(
            f"Fork {full_name} was not ready after {attempts} attempts"
        )
        self.full_name = full_name
        self.attempts = attempts


def _status(exc: BaseException) -> int | None:
    if isinstance(exc, GithubException):
        return exc.status
    return None


def is_not_found(exc: BaseException) -> bool:
    return _status(exc) == NOT_FOUND


def is_unprocessable(exc: BaseException) -> bool:
    """True when GitHub rejected the request as semantically invalid (422)."""
    return _status(exc) == UNPROCESSABLE
