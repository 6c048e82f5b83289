"""CLI interface for the pull requests client."""

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape

from github_pulls.client import GitHub
from github_pulls.config import save_config
from github_pulls.errors import GitHubPullsError
from github_pulls.models import ClientConfig
from github_pulls.pull_requests import PullRequestsAPI

app = typer.Typer(
    name="github-pulls",
    help="Work with GitHub pull requests",
    add_completion=False,
)

console = Console()

OwnerOption = Annotated[str | None, typer.Option("--owner", help="Repository owner")]
RepoOption = Annotated[str | None, typer.Option("--repo", "-r", help="Repository name")]
ConfigOption = Annotated[
    Path | None, typer.Option("--config", "-c", help="Configuration YAML file")
]
NumberArgument = Annotated[int, typer.Argument(help="Pull request number")]


def _pull_requests(config: Path | None) -> PullRequestsAPI:
    return GitHub.from_config_file(config).pull_requests


def _print_pull(pull: dict[str, Any]) -> None:
    console.print(f"#{pull['number']} [bold]{escape(pull['title'])}[/bold] ({pull['state']})")


def _print_result(result: Any) -> None:
    if isinstance(result, str):
        console.print(result, markup=False, highlight=False)
    else:
        console.print_json(data=result)


def _fail(e: Exception) -> typer.Exit:
    console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
    return typer.Exit(1)


def _params(**values: Any) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


@app.command("list")
def list_pulls(
    owner: OwnerOption = None,
    repo: RepoOption = None,
    state: Annotated[str | None, typer.Option("--state", "-s", help="open or closed")] = None,
    head: Annotated[str | None, typer.Option("--head", help="Filter by head user:branch")] = None,
    base: Annotated[str | None, typer.Option("--base", help="Filter by base branch")] = None,
    config: ConfigOption = None,
) -> None:
    """List pull requests of a repository."""
    try:
        _pull_requests(config).list(
            owner, repo, _params(state=state, head=head, base=base), callback=_print_pull
        )
    except GitHubPullsError as e:
        raise _fail(e) from e


@app.command()
def get(
    number: NumberArgument,
    owner: OwnerOption = None,
    repo: RepoOption = None,
    mime_type: Annotated[
        str | None, typer.Option("--mime-type", help="Media type, e.g. diff or patch")
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Show a single pull request."""
    try:
        _print_result(_pull_requests(config).get(owner, repo, number, _params(mime_type=mime_type)))
    except GitHubPullsError as e:
        raise _fail(e) from e


@app.command()
def create(
    head: Annotated[str, typer.Option("--head", help="Branch with the changes (user:branch)")],
    base: Annotated[str, typer.Option("--base", help="Branch to merge into")],
    title: Annotated[str | None, typer.Option("--title", "-t", help="Title")] = None,
    body: Annotated[str | None, typer.Option("--body", "-b", help="Description")] = None,
    issue: Annotated[
        int | None, typer.Option("--issue", help="Turn this issue into a pull request")
    ] = None,
    owner: OwnerOption = None,
    repo: RepoOption = None,
    config: ConfigOption = None,
) -> None:
    """Open a pull request."""
    try:
        pull = _pull_requests(config).create(
            owner, repo, _params(title=title, body=body, head=head, base=base, issue=issue)
        )
        console.print(f"[green]✓ Created pull request #{pull['number']}[/green]")
        console.print(pull.get("html_url", ""))
    except GitHubPullsError as e:
        raise _fail(e) from e


@app.command()
def update(
    number: NumberArgument,
    title: Annotated[str | None, typer.Option("--title", "-t", help="New title")] = None,
    body: Annotated[str | None, typer.Option("--body", "-b", help="New description")] = None,
    state: Annotated[str | None, typer.Option("--state", "-s", help="open or closed")] = None,
    owner: OwnerOption = None,
    repo: RepoOption = None,
    config: ConfigOption = None,
) -> None:
    """Update a pull request."""
    try:
        pull = _pull_requests(config).update(
            owner, repo, number, _params(title=title, body=body, state=state)
        )
        console.print(f"[green]✓ Updated pull request #{pull['number']}[/green]")
    except GitHubPullsError as e:
        raise _fail(e) from e


@app.command()
def commits(
    number: NumberArgument,
    owner: OwnerOption = None,
    repo: RepoOption = None,
    config: ConfigOption = None,
) -> None:
    """List commits of a pull request."""

    def print_commit(commit: dict[str, Any]) -> None:
        message = commit["commit"]["message"].splitlines()[0]
        console.print(f"{commit['sha'][:7]} {escape(message)}")

    try:
        _pull_requests(config).commits(owner, repo, number, callback=print_commit)
    except GitHubPullsError as e:
        raise _fail(e) from e


@app.command()
def files(
    number: NumberArgument,
    owner: OwnerOption = None,
    repo: RepoOption = None,
    config: ConfigOption = None,
) -> None:
    """List files changed by a pull request."""

    def print_file(change: dict[str, Any]) -> None:
        console.print(
            f"{change['status']:<10} {escape(change['filename'])} "
            f"[green]+{change['additions']}[/green] [red]-{change['deletions']}[/red]"
        )

    try:
        _pull_requests(config).files(owner, repo, number, callback=print_file)
    except GitHubPullsError as e:
        raise _fail(e) from e


@app.command()
def merged(
    number: NumberArgument,
    owner: OwnerOption = None,
    repo: RepoOption = None,
    config: ConfigOption = None,
) -> None:
    """Check whether a pull request is merged (exit code 1 when it is not)."""
    try:
        is_merged = _pull_requests(config).is_merged(owner, repo, number)
    except GitHubPullsError as e:
        raise _fail(e) from e

    if not is_merged:
        console.print(f"Pull request #{number} is not merged")
        raise typer.Exit(1)
    console.print(f"[green]✓ Pull request #{number} is merged[/green]")


@app.command()
def merge(
    number: NumberArgument,
    message: Annotated[
        str | None, typer.Option("--message", "-m", help="Merge commit message")
    ] = None,
    owner: OwnerOption = None,
    repo: RepoOption = None,
    config: ConfigOption = None,
) -> None:
    """Merge a pull request."""
    try:
        result = _pull_requests(config).merge(
            owner, repo, number, _params(commit_message=message)
        )
    except GitHubPullsError as e:
        raise _fail(e) from e

    if result and result.get("merged"):
        console.print(
            f"[green]✓ {escape(result.get('message', 'Merged'))}[/green] ({result.get('sha')})"
        )
    else:
        reason = (result or {}).get("message", "Not merged")
        console.print(f"[yellow]⚠ {escape(reason)}[/yellow]")
        raise typer.Exit(1)


@app.command()
def comments(
    number: Annotated[
        int | None, typer.Argument(help="Pull request number (all comments when omitted)")
    ] = None,
    owner: OwnerOption = None,
    repo: RepoOption = None,
    config: ConfigOption = None,
) -> None:
    """List review comments."""

    def print_comment(comment: dict[str, Any]) -> None:
        console.print(
            f"[bold]{escape(comment['user']['login'])}[/bold] on {escape(comment.get('path') or '')}:"
        )
        console.print(comment["body"], markup=False)

    try:
        _pull_requests(config).comments.list(owner, repo, number, callback=print_comment)
    except GitHubPullsError as e:
        raise _fail(e) from e


@app.command()
def init(
    output: Annotated[Path, typer.Option("--output", "-o", help="Output config file")] = Path(
        "github-pulls.yaml"
    ),
    owner: OwnerOption = None,
    repo: RepoOption = None,
    endpoint: Annotated[
        str | None, typer.Option("--endpoint", help="API endpoint (GitHub Enterprise)")
    ] = None,
) -> None:
    """Initialize a configuration file."""
    config = ClientConfig(user=owner, repo=repo)
    if endpoint:
        config.endpoint = endpoint

    save_config(config, output)

    console.print(f"[green]✓ Configuration saved to {output}[/green]")
    console.print("\nSet GITHUB_TOKEN to authenticate.")


@app.command()
def version() -> None:
    """Show version information."""
    from github_pulls import __version__

    console.print(f"github-pulls version {__version__}")


if __name__ == "__main__":
    app()
