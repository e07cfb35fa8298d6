"""CLI entry point for repomaker."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

import typer
from rich import print as rprint
from rich.markup import escape

from repomaker.config import Config
from repomaker.github.client import GitHubClient
from repomaker.github.errors import GitHubError

app = typer.Typer(help="Create private GitHub repositories.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def create(
    name: Optional[str] = typer.Argument(None, help="Repository name (default: REPOMAKER_REPO_NAME or myRepo)"),
    token: Optional[str] = typer.Option(None, help="GitHub token (default: REPOMAKER_GITHUB_TOKEN)"),
    api_url: Optional[str] = typer.Option(None, "--api-url", help="GitHub API base URL"),
    timeout: Optional[int] = typer.Option(None, help="Request timeout in seconds"),
) -> None:
    """Create a private repository and print its URL."""
    try:
        config = Config.load()
    except ValueError as e:
        rprint(f"[red]Config error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    overrides = {
        "github_token": token,
        "api_url": api_url,
        "timeout": timeout,
        "repo_name": name,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    issues = config.validate()
    if issues:
        for issue in issues:
            rprint(f"[red]Config error: {escape(issue)}[/red]")
        raise typer.Exit(1)

    with GitHubClient(
        token=config.github_token, base_url=config.api_url, timeout=config.timeout
    ) as client:
        try:
            url = client.create_repository(config.repo_name)
        except GitHubError as e:
            rprint(f"[red]Cannot create repo: {escape(str(e))}[/red]")
            raise typer.Exit(1)

    typer.echo(f"Repo URL: {url}")


if __name__ == "__main__":
    app()
