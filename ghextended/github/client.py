"""Thin wrapper around PyGithub for authenticated GitHub API access."""

from __future__ import annotations

from github import Auth, Github
from github.AuthenticatedUser import AuthenticatedUser
from github.NamedUser import NamedUser

from ghextended.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, Config
from ghextended.github.models import ForkOptions
from ghextended.github.repository import ExtendedRepository


class GitHubClient:
    """Authenticated GitHub client handing out extended repositories.

    Usage:
        client = GitHubClient(token="ghp_...")
        repo = client.get_repo("owner", "repo")  # ExtendedRepository
        repo.search("readme")
    """

    def __init__(
        self,
        token: str = "",
        *,
        username: str = "",
        password: str = "",
        base_url: str = DEFAULT_API_URL,
        timeout: int = DEFAULT_TIMEOUT,
        fork_options: ForkOptions | None = None,
    ) -> None:
        auth: Auth.Auth | None = None
        if token:
            auth = Auth.Token(token)
        elif username:
            auth = Auth.Login(username, password)

        self._gh = Github(auth=auth, base_url=base_url, timeout=timeout)
        self._fork_options = fork_options or ForkOptions()

    @classmethod
    def from_config(cls, config: Config) -> GitHubClient:
        fork_options = ForkOptions(
            poll_interval=config.fork_poll_interval,
            max_attempts=config.fork_poll_max_attempts,
        )
        if config.auth == "basic":
            return cls(
                username=config.username,
                password=config.password,
                base_url=config.base_url,
                timeout=config.timeout,
                fork_options=fork_options,
            )
        return cls(
            token=config.github_token,
            base_url=config.base_url,
            timeout=config.timeout,
            fork_options=fork_options,
        )

    @property
    def github(self) -> Github:
        return self._gh

    def get_repo(self, owner: str, name: str) -> ExtendedRepository:
        # Lazy: no request until an operation needs repository data
        repo = self._gh.get_repo(f"{owner}/{name}", lazy=True)
        return ExtendedRepository(repo, self._gh.requester, fork_options=self._fork_options)

    def get_user(self, login: str | None = None) -> AuthenticatedUser | NamedUser:
        if login is None:
            return self._gh.get_user()
        return self._gh.get_user(login)

    def close(self) -> None:
        self._gh.close()

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
