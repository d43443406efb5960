"""Command line interface for mergesweep."""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import print
from rich.console import Console
from rich.markup import escape

from mergesweep import __version__
from mergesweep.git import GitError, GitRepo, VcsUnavailable
from mergesweep.log import setup_logging
from mergesweep.selector import select_branches

app = typer.Typer(help="Clean up git branches already merged into a target branch")
console = Console()
logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Error: Target branch not found or not a git repository."


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        print(f"mergesweep {__version__}")
        raise typer.Exit()


def delete_branches(repo: GitRepo, branches: Sequence[str], dry_run: bool) -> tuple[list[str], list[str]]:
    """Delete branches one by one, reporting each outcome.

    A failed deletion does not stop the remaining ones.

    Returns:
        A tuple of (deleted, failed) branch names. Both are empty in dry-run mode.
    """
    deleted: list[str] = []
    failed: list[str] = []
    for branch_name in branches:
        if dry_run:
            console.print(f"[yellow]\\[Dry-Run] Would delete:[/yellow] {escape(branch_name)}")
            continue
        if repo.delete_branch(branch_name):
            deleted.append(branch_name)
            console.print(f"[green]🗑️  Deleted:[/green] {escape(branch_name)}")
        else:
            failed.append(branch_name)
            console.print(f"[red]❌ Error deleting:[/red] {escape(branch_name)}")
    return deleted, failed


@app.command()
def clean(
    target: Annotated[
        Optional[str],
        typer.Option(
            "--target",
            "-t",
            envvar="MERGESWEEP_TARGET",
            help="Target branch (e.g. main or master). Auto-detected if not provided.",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", envvar="MERGESWEEP_DRY_RUN", help="Only show what would be deleted"),
    ] = False,
    path: Annotated[Path, typer.Option(help="Path to git repository")] = Path("."),
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log git activity to stderr")] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show the version and exit"),
    ] = None,
) -> None:
    """Interactively delete branches that are merged into the target branch."""
    setup_logging(verbose)

    try:
        repo = GitRepo(path)
    except VcsUnavailable as err:
        logger.debug("%s", err)
        console.print(f"[red]{NOT_FOUND_MESSAGE}[/red]")
        return

    resolved = repo.resolve_target(target)
    console.print(f"[blue]🔍 Searching for branches merged into[/blue] [bold]{escape(resolved)}[/bold] ...")

    try:
        branches = repo.merged_branches(resolved)
    except VcsUnavailable as err:
        logger.debug("%s", err)
        console.print(f"[red]{NOT_FOUND_MESSAGE}[/red]")
        return
    except GitError as err:
        print(f"[red]Error:[/red] {err}")
        raise typer.Exit(code=1) from err

    if not branches:
        console.print("[green]✨ Clean! No merged branches to delete.[/green]")
        return

    console.print(f"Found {len(branches)} branches to delete:")
    selections = select_branches(branches, console)
    if not selections:
        console.print("Cancelled. No branches were deleted.")
        return

    deleted, failed = delete_branches(repo, [branches[index] for index in selections], dry_run)

    if not dry_run:
        console.print("[bold green]Done! 🧹[/bold green]")
        console.print(f"Deleted {len(deleted)} branch(es), {len(failed)} failed")


if __name__ == "__main__":
    app()
