"""Tests for the ghextended CLI (client is patched out)."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from github.GithubException import GithubException, UnknownObjectException
from typer.testing import CliRunner

from ghextended.cli import app
from ghextended.github.errors import ForkTimeoutError
from ghextended.github.models import ForkInfo, SearchOptions, TreeEntry

runner = CliRunner()

ENV = {"GHEXTENDED_GITHUB_TOKEN": "ghp_test", "GHEXTENDED_AUTH": "oauth", "GHEXTENDED_DEFAULT_BRANCH": "master"}


@pytest.fixture
def client_cls():
    with patch.dict(os.environ, ENV, clear=False), patch("ghextended.cli.GitHubClient") as client_cls:
        yield client_cls


@pytest.fixture
def repo(client_cls):
    return client_cls.from_config.return_value.get_repo.return_value


class TestSearchCommand:
    def test_prints_matches(self, repo, client_cls):
        repo.search.return_value = [
            TreeEntry(path="package.json", type="blob", sha="a"),
            TreeEntry(path="package", type="tree", sha="b"),
        ]
        result = runner.invoke(app, ["search", "octocat/hello-world", "pac"])
        assert result.exit_code == 0
        assert "package.json" in result.output
        assert "2" in result.output
        client_cls.from_config.return_value.get_repo.assert_called_once_with("octocat", "hello-world")
        repo.search.assert_called_once_with("pac", SearchOptions(branch="master"))
        client_cls.from_config.return_value.close.assert_called_once()

    def test_options(self, repo):
        repo.search.return_value = []
        result = runner.invoke(
            app,
            ["search", "octocat/hello-world", "x", "--branch", "dev", "--case-sensitive", "--exclude-folders"],
        )
        assert result.exit_code == 0
        assert "No matches" in result.output
        repo.search.assert_called_once_with(
            "x", SearchOptions(branch="dev", case_sensitive=True, exclude_folders=True)
        )

    def test_bad_repo_name(self, client_cls):
        result = runner.invoke(app, ["search", "hello-world", "x"])
        assert result.exit_code == 1
        assert "owner/repo" in result.output

    def test_config_error(self, client_cls):
        with patch.dict(os.environ, {"GHEXTENDED_GITHUB_TOKEN": ""}):
            result = runner.invoke(app, ["search", "octocat/hello-world", "x"])
        assert result.exit_code == 1
        assert "Config error" in result.output
        client_cls.from_config.assert_not_called()

    def test_github_error(self, repo):
        repo.search.side_effect = GithubException(409, {"message": "Git Repository is empty."}, None)
        result = runner.invoke(app, ["search", "octocat/hello-world", "x"])
        assert result.exit_code == 1
        assert "409" in result.output


class TestMergeCommand:
    def test_merges(self, repo):
        repo.merge_pull_request.return_value = {"merged": True, "sha": "abc"}
        result = runner.invoke(app, ["merge", "octocat/hello-world", "7", "-m", "Ship"])
        assert result.exit_code == 0
        assert "Merged #7" in result.output
        repo.get_pull.assert_called_once_with(7)
        args = repo.merge_pull_request.call_args.args
        assert args[0] is repo.get_pull.return_value
        assert args[1].commit_message == "Ship"

    def test_not_merged(self, repo):
        repo.merge_pull_request.return_value = {"merged": False, "message": "nope"}
        result = runner.invoke(app, ["merge", "octocat/hello-world", "7"])
        assert result.exit_code == 1

    def test_merge_conflict(self, repo):
        repo.merge_pull_request.side_effect = GithubException(
            405, {"message": "Pull Request is not mergeable"}, None
        )
        result = runner.invoke(app, ["merge", "octocat/hello-world", "7"])
        assert result.exit_code == 1
        assert "not mergeable" in result.output


class TestRemoveCommand:
    def test_remove_with_yes(self, repo):
        result = runner.invoke(app, ["remove", "octocat/hello-world", "app/", "--yes"])
        assert result.exit_code == 0
        repo.remove.assert_called_once_with("master", "app/")

    def test_remove_asks_for_confirmation(self, repo):
        result = runner.invoke(app, ["remove", "octocat/hello-world", "app", "--branch", "dev"], input="n\n")
        assert result.exit_code == 1
        repo.remove.assert_not_called()

    def test_remove_confirmed(self, repo):
        result = runner.invoke(app, ["remove", "octocat/hello-world", "app", "--branch", "dev"], input="y\n")
        assert result.exit_code == 0
        repo.remove.assert_called_once_with("dev", "app")

    def test_remove_not_found(self, repo):
        repo.remove.side_effect = UnknownObjectException(404, {"message": "Not Found"}, None)
        result = runner.invoke(app, ["remove", "octocat/hello-world", "gone.txt", "-y"])
        assert result.exit_code == 1
        assert "Not Found" in result.output


class TestForkCommand:
    def test_fork(self, repo):
        repo.fork.return_value = ForkInfo(
            full_name="me/hello-world",
            name="hello-world",
            owner="me",
            fork=True,
            default_branch="master",
            html_url="https://github.com/me/hello-world",
        )
        result = runner.invoke(app, ["fork", "octocat/hello-world"])
        assert result.exit_code == 0
        assert "me/hello-world" in result.output

    def test_fork_timeout(self, repo):
        repo.fork.side_effect = ForkTimeoutError("me/hello-world", 240)
        result = runner.invoke(app, ["fork", "octocat/hello-world"])
        assert result.exit_code == 1
        assert "not ready" in result.output
