"""Configuration loading for github-extended.

Config sources (in priority order):
1. Explicit arguments passed to functions
2. Environment variables (GHEXTENDED_GITHUB_TOKEN, etc.)
3. .env file in current directory
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_BRANCH = "master"
DEFAULT_TIMEOUT = 15
DEFAULT_FORK_POLL_INTERVAL = 0.25  # seconds
DEFAULT_FORK_POLL_MAX_ATTEMPTS = 240

AUTH_TYPES = ("oauth", "basic")


@dataclass
class Config:
    github_token: str = ""
    username: str = ""
    password: str = ""
    auth: str = "oauth"  # "oauth" (token) | "basic" (username/password)
    base_url: str = DEFAULT_API_URL
    default_branch: str = DEFAULT_BRANCH
    timeout: int = DEFAULT_TIMEOUT
    fork_poll_interval: float = DEFAULT_FORK_POLL_INTERVAL
    fork_poll_max_attempts: int = DEFAULT_FORK_POLL_MAX_ATTEMPTS

    @classmethod
    def load(cls) -> Config:
        return cls(
            github_token=os.getenv("GHEXTENDED_GITHUB_TOKEN", ""),
            username=os.getenv("GHEXTENDED_USERNAME", ""),
            password=os.getenv("GHEXTENDED_PASSWORD", ""),
            auth=os.getenv("GHEXTENDED_AUTH", "oauth").lower(),
            base_url=os.getenv("GHEXTENDED_API_URL", DEFAULT_API_URL),
            default_branch=os.getenv("GHEXTENDED_DEFAULT_BRANCH", DEFAULT_BRANCH),
            timeout=int(os.getenv("GHEXTENDED_TIMEOUT", str(DEFAULT_TIMEOUT))),
            fork_poll_interval=float(
                os.getenv("GHEXTENDED_FORK_POLL_INTERVAL", str(DEFAULT_FORK_POLL_INTERVAL))
            ),
            fork_poll_max_attempts=int(
                os.getenv(
                    "GHEXTENDED_FORK_POLL_MAX_ATTEMPTS", str(DEFAULT_FORK_POLL_MAX_ATTEMPTS)
                )
            ),
        )

    def validate(self) -> list[str]:
        """Return a list of config issues."""
        issues = []
        if self.auth not in AUTH_TYPES:
            issues.append(f"Unknown auth type '{self.auth}' (GHEXTENDED_AUTH: oauth or basic)")
        elif self.auth == "oauth" and not self.github_token:
            issues.append("GitHub token not set (GHEXTENDED_GITHUB_TOKEN)")
        elif self.auth == "basic":
            if not self.username:
                issues.append("GitHub username not set (GHEXTENDED_USERNAME)")
            if not self.password:
                issues.append("GitHub password not set (GHEXTENDED_PASSWORD)")
        if self.fork_poll_interval <= 0:
            issues.append("Fork poll interval must be positive (GHEXTENDED_FORK_POLL_INTERVAL)")
        if self.fork_poll_max_attempts <= 0:
            issues.append(
                "Fork poll attempts must be positive (GHEXTENDED_FORK_POLL_MAX_ATTEMPTS)"
            )
        return issues
