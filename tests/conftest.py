"""Shared test fixtures for github-extended."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from ghextended.github.repository import ExtendedRepository

TREE = [
    ("README.md", "blob"),
    ("package.json", "blob"),
    ("Hello world.md", "blob"),
    ("app", "tree"),
    ("app/index.html", "blob"),
    ("app/scripts", "tree"),
    ("app/scripts/main.js", "blob"),
    ("package", "tree"),
    ("package/index.js", "blob"),
]


def make_element(path: str, type_: str) -> MagicMock:
    element = MagicMock()
    element.path = path
    element.type = type_
    element.sha = f"sha-{path}"
    element.size = 10 if type_ == "blob" else None
    element.mode = "100644" if type_ == "blob" else "040000"
    return element


def make_content_file(path: str) -> MagicMock:
    content = MagicMock()
    content.path = path
    content.sha = f"blob-{path}"
    return content


@pytest.fixture
def tree_paths() -> list[tuple[str, str]]:
    return list(TREE)


@pytest.fixture
def github_repo(tree_paths: list[tuple[str, str]]) -> MagicMock:
    """A PyGithub Repository double for octocat/hello-world."""
    repo = MagicMock()
    repo.url = "https://api.github.com/repos/octocat/hello-world"
    repo.full_name = "octocat/hello-world"
    repo.raw_data = {"full_name": "octocat/hello-world", "name": "hello-world"}

    ref = MagicMock()
    ref.object.sha = "head-sha"
    repo.get_git_ref.return_value = ref

    tree = MagicMock()
    tree.tree = [make_element(path, type_) for path, type_ in tree_paths]
    repo.get_git_tree.return_value = tree

    folders = {p for p, t in tree_paths if t == "tree"} | {""}

    def get_contents(path, ref=None):
        if path in folders:
            return [make_content_file(p) for p, t in tree_paths if t == "blob"]
        return make_content_file(path)

    repo.get_contents.side_effect = get_contents
    return repo


@pytest.fixture
def requester() -> MagicMock:
    requester = MagicMock()
    requester.requestJsonAndCheck.return_value = ({}, {})
    return requester


@pytest.fixture
def sleep() -> MagicMock:
    return MagicMock()


@pytest.fixture
def repository(
    github_repo: MagicMock, requester: MagicMock, sleep: MagicMock
) -> ExtendedRepository:
    return ExtendedRepository(github_repo, requester, sleep=sleep)
