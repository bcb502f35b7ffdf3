"""CLI interface for flash-setup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from flashsetup import __version__
from flashsetup.config import Config, SetupStep
from flashsetup.core.errors import SetupError
from flashsetup.core.models import InvocationParameters, ProjectIdentity
from flashsetup.core.orchestrator import run_setup
from flashsetup.runners.installer import InstallRunner

app = typer.Typer(
    name="flash-setup",
    help="Rename a React Native Flash boilerplate project and install its dependencies.",
)
console = Console()

BANNER = "⚡ React Native Flash Boilerplate Setup ⚡"


def _configure_logging(verbose: int) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False, markup=False)],
    )


def _display_banner() -> None:
    console.print(Text(BANNER, style="bold cyan"))
    console.print("[dim]" + "=" * len(BANNER) + "[/dim]")
    console.print(f"[dim]flash-setup {__version__}[/dim]")
    console.print()


def _display_step(step: SetupStep) -> None:
    console.print(f"\n[bold]{step.name}...[/bold]")


def _display_summary(params: InvocationParameters, identity: ProjectIdentity | None) -> None:
    console.print("\n[bold green]Setup completed successfully![/bold green]")
    console.print("\nRun your app with:")
    console.print("  iOS:     yarn ios")
    console.print("  Android: yarn android")

    if params.project_name and params.bundle_name:
        console.print(f'\nYour app "{params.project_name}" is ready to go!')
        if identity is not None:
            console.print("\niOS project completely updated:")
            console.print(f'  • Folders renamed to "{identity.new_name}"')
            console.print("  • AppDelegate.swift updated")
            console.print("  • Xcode scheme updated")


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def setup(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file (default: .flashsetup/config.yaml)"),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Show debug output"),
    ] = 0,
) -> None:
    """Rename the project (when both names are given), then install dependencies.

    Naming flags: --project-name NAME --bundle-name com.yourcompany.yourapp.
    Both are needed to rename; a flag without a value counts as absent and
    any other token is ignored.
    """
    _configure_logging(verbose)
    _display_banner()

    params = InvocationParameters.from_tokens(ctx.args)
    project_root = Path.cwd()
    config = Config.load(config_path)
    runner = InstallRunner(project_root, on_step=_display_step)

    try:
        identity = run_setup(params, project_root, config, runner)
    except SetupError as e:
        console.print(f"\n[bold red]Setup failed with error: {e}[/bold red]")
        raise typer.Exit(1) from e

    _display_summary(params, identity)


def main() -> None:
    """Entry point for the flash-setup console script."""
    app()


if __name__ == "__main__":
    main()
