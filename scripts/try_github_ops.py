"""Manual verification: exercise the extended operations against a real repo.

Usage:
    GHEXTENDED_GITHUB_TOKEN=ghp_... uv run python scripts/try_github_ops.py owner/repo [pattern]

Read-only by default (search only). Pass --write to also fork the repository.
"""

from __future__ import annotations

import sys

from ghextended.config import Config
from ghextended.github.client import GitHubClient
from ghextended.github.models import SearchOptions


def main() -> None:
    config = Config.load()
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    write = "--write" in sys.argv

    issues = config.validate()
    if issues:
        for issue in issues:
            print(f"ERROR: {issue}")
        sys.exit(1)

    if not args or "/" not in args[0]:
        print("ERROR: Provide repo as owner/repo")
        sys.exit(1)

    owner, name = args[0].split("/", 1)
    pattern = args[1] if len(args) > 1 else "readme"

    print(f"Connecting to {owner}/{name}...")
    client = GitHubClient.from_config(config)

    try:
        repo = client.get_repo(owner, name)
        branch = repo.default_branch

        print(f"\n--- search({pattern!r}) on {branch} ---")
        for entry in repo.search(pattern, SearchOptions(branch=branch)):
            print(f"  {entry.type:4}  {entry.path}")

        print("\n--- folders only ---")
        for entry in repo.search(pattern, SearchOptions(branch=branch, exclude_files=True)):
            print(f"  {entry.path}")

        if write:
            print("\n--- fork() ---")
            info = repo.fork()
            print(f"  {info.full_name} (fork={info.fork})")
            print(f"  {info.html_url}")

    finally:
        client.close()


if __name__ == "__main__":
    main()
