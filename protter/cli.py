"""Typer based command line entry points for protter."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from protter.core.logger import get_logger, set_level
from protter.services.prott.client import ProttClient
from protter.services.prott.config import EMAIL_ENV, PASSWORD_ENV, resolve_config
from protter.services.prott.models import Project, ProttError, ScreenUpload

LOGGER = get_logger()

app = typer.Typer(help="Upload exported Sketch artboards to Prott.")


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        help="Set global logging level (e.g. DEBUG/INFO/WARNING).",
    ),
) -> None:
    """Configure global CLI behaviour before executing commands."""

    try:
        set_level(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _handle_error(exc: Exception) -> None:
    LOGGER.error("protter operation failed: %s", exc, exc_info=True)
    typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _resolve_client(profile: Optional[str], email: Optional[str], password: Optional[str]) -> ProttClient:
    try:
        config = resolve_config(profile, email=email, password=password)
    except ProttError as exc:
        _handle_error(exc)
    return ProttClient(config)


def _print_projects(projects: list[Project]) -> None:
    for project in projects:
        typer.echo(project.name)


def _print_upload(result: ScreenUpload) -> None:
    typer.echo(result.status_line)
    typer.echo(f"{result.project.name} {result.screen_name}")


def _print_unknown(project_name: str) -> None:
    typer.echo(f'a project "{project_name}" is not exist')


@app.command("upload")
def cmd_upload(
    current_directory: Path = typer.Option(
        Path("."),
        "--current-directory",
        "-C",
        exists=True,
        file_okay=False,
        dir_okay=True,
        metavar="<path>",
        help="Run as if protter was started in <path> instead of the current working directory.",
    ),
    email: Optional[str] = typer.Option(
        None, "--prott-email", envvar=EMAIL_ENV, help="Email of the Prott account."
    ),
    password: Optional[str] = typer.Option(
        None, "--prott-password", envvar=PASSWORD_ENV, help="Password of the Prott account."
    ),
    profile: Optional[str] = typer.Option(None, "--profile", help="Prott profile name in profiles.yaml"),
) -> None:
    """Upload every exportedArtboards/<project>/<screen>.png below a directory."""

    client = _resolve_client(profile, email, password)
    try:
        client.sync(
            current_directory,
            on_projects=_print_projects,
            on_upload=_print_upload,
            on_unknown=_print_unknown,
        )
    except Exception as exc:
        if isinstance(exc, typer.Exit):
            raise
        _handle_error(exc)
    finally:
        client.close()


@app.command("projects")
def cmd_projects(
    email: Optional[str] = typer.Option(
        None, "--prott-email", envvar=EMAIL_ENV, help="Email of the Prott account."
    ),
    password: Optional[str] = typer.Option(
        None, "--prott-password", envvar=PASSWORD_ENV, help="Password of the Prott account."
    ),
    profile: Optional[str] = typer.Option(None, "--profile", help="Prott profile name in profiles.yaml"),
) -> None:
    """List the projects available to the account."""

    client = _resolve_client(profile, email, password)
    try:
        client.login()
        projects = client.list_projects()
    except Exception as exc:
        if isinstance(exc, typer.Exit):
            raise
        _handle_error(exc)
    else:
        if not projects:
            typer.echo("<empty>")
        for project in projects:
            typer.echo(f"{project.id}\t{project.name}")
    finally:
        client.close()


def main() -> None:
    app()


__all__ = ["app", "main"]
