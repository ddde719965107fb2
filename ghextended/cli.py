"""CLI entry point for github-extended."""

from __future__ import annotations

import logging

import typer
from github.GithubException import GithubException
from rich import print as rprint
from rich.progress import Progress, SpinnerColumn, TextColumn

from ghextended.config import Config
from ghextended.github.client import GitHubClient
from ghextended.github.errors import ForkTimeoutError
from ghextended.github.models import MergeOptions, SearchOptions

app = typer.Typer(help="Search, merge, remove and fork on GitHub repositories.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_config() -> Config:
    """Load config from the environment, exiting on config errors."""
    config = Config.load()
    issues = config.validate()
    if issues:
        for issue in issues:
            rprint(f"[red]Config error: {issue}[/red]")
        raise typer.Exit(1)
    return config


def _split_repo(repo: str) -> tuple[str, str]:
    owner, _, name = repo.partition("/")
    if not owner or not name:
        rprint(f"[red]Repository must be given as owner/repo, got '{repo}'[/red]")
        raise typer.Exit(1)
    return owner, name


def _fail(e: GithubException) -> typer.Exit:
    message = e.data.get("message") if isinstance(e.data, dict) else e.data
    rprint(f"[red]GitHub error ({e.status}): {message}[/red]")
    return typer.Exit(1)


@app.command()
def search(
    repo: str = typer.Argument(help="GitHub repository (owner/repo)"),
    pattern: str = typer.Argument(help="Regular expression matched against file and folder names"),
    branch: str = typer.Option(None, help="Branch to search (default: GHEXTENDED_DEFAULT_BRANCH)"),
    case_sensitive: bool = typer.Option(False, help="Match case exactly"),
    exclude_files: bool = typer.Option(False, help="Only report folders"),
    exclude_folders: bool = typer.Option(False, help="Only report files"),
) -> None:
    """Find files and folders by name."""
    owner, name = _split_repo(repo)
    config = _load_config()
    options = SearchOptions(
        branch=branch or config.default_branch,
        case_sensitive=case_sensitive,
        exclude_files=exclude_files,
        exclude_folders=exclude_folders,
    )

    client = GitHubClient.from_config(config)
    try:
        results = client.get_repo(owner, name).search(pattern, options)
    except GithubException as e:
        raise _fail(e)
    finally:
        client.close()

    if not results:
        rprint("[yellow]No matches.[/yellow]")
        return
    for entry in results:
        kind = "dir " if entry.is_folder else "file"
        rprint(f"  {kind}  {entry.path}")
    rprint(f"Found [bold]{len(results)}[/bold] match(es)")


@app.command()
def merge(
    repo: str = typer.Argument(help="GitHub repository (owner/repo)"),
    number: int = typer.Argument(help="Pull request number"),
    message: str = typer.Option(None, "--message", "-m", help="Merge commit message"),
) -> None:
    """Merge a pull request at its current head."""
    owner, name = _split_repo(repo)
    client = GitHubClient.from_config(_load_config())
    try:
        repository = client.get_repo(owner, name)
        pull_request = repository.get_pull(number)
        result = repository.merge_pull_request(pull_request, MergeOptions(commit_message=message))
    except GithubException as e:
        raise _fail(e)
    finally:
        client.close()

    if result.get("merged"):
        rprint(f"[green]Merged #{number} as {result.get('sha')}[/green]")
    else:
        rprint(f"[yellow]Not merged: {result.get('message')}[/yellow]")
        raise typer.Exit(1)


@app.command()
def remove(
    repo: str = typer.Argument(help="GitHub repository (owner/repo)"),
    path: str = typer.Argument("", help="File or folder to delete (empty: everything)"),
    branch: str = typer.Option(None, help="Branch to delete from (default: GHEXTENDED_DEFAULT_BRANCH)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete a file, or a folder and all of its content."""
    owner, name = _split_repo(repo)
    config = _load_config()
    branch = branch or config.default_branch
    target = path or "every file"
    if not yes:
        typer.confirm(f"Delete {target} from {repo}@{branch}?", abort=True)

    client = GitHubClient.from_config(config)
    try:
        client.get_repo(owner, name).remove(branch, path)
    except GithubException as e:
        raise _fail(e)
    finally:
        client.close()

    rprint(f"[green]Deleted {target} from {branch}[/green]")


@app.command()
def fork(
    repo: str = typer.Argument(help="GitHub repository (owner/repo)"),
) -> None:
    """Fork a repository and wait until the fork is ready."""
    owner, name = _split_repo(repo)
    client = GitHubClient.from_config(_load_config())
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
        ) as progress:
            progress.add_task(f"Forking {repo}...", total=None)
            info = client.get_repo(owner, name).fork()
    except GithubException as e:
        raise _fail(e)
    except ForkTimeoutError as e:
        rprint(f"[red]{e}[/red]")
        raise typer.Exit(1)
    finally:
        client.close()

    rprint(f"[green]Fork ready: {info.full_name}[/green]")
    rprint(f"  {info.html_url}")


if __name__ == "__main__":
    app()
