"""
p — personal project switcher, CLI entrypoint.

Usage:
    p ls
    p new NAME
    p open NAME
    p NAME              (same as ``p open NAME``)
    p path NAME
    p root
    p shell-init
    p config check
"""

from __future__ import annotations

import json
import os
import shlex
import sys
from pathlib import Path

import click

from pswitch import __version__
from pswitch.core.observability.logging_config import setup_logging

SHELL_FUNCTION = """\
p() {
    if [ "$1" = "cd" ]; then
        if [ -z "$2" ]; then
            cd "$(command p root)" || return
        else
            __p_dir="$(command p path "$2")" || return
            [ -n "$__p_dir" ] && cd "$__p_dir"
        fi
    else
        command p "$@"
    fi
}
"""


class ProjectGroup(click.Group):
    """Command group that treats an unknown first word as a project name."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        cmd_name = args[0] if args else ""
        if cmd_name and not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            return "_open", self.get_command(ctx, "_open"), args
        return super().resolve_command(ctx, args)


@click.group(cls=ProjectGroup)
@click.version_option(version=__version__, prog_name="p")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to p.conf or p.yml (default: ~/.config/p/).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """p — list, create and open the projects under one directory."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("P_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("P_LOG_FILE"),
        log_file_level=os.environ.get("P_LOG_FILE_LEVEL"),
    )


def _load_settings(ctx: click.Context):
    """Load settings or abort the run."""
    from pswitch.core.config.loader import load_settings
    from pswitch.core.errors import ConfigError

    try:
        return load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


# ── Listing ─────────────────────────────────────────────────────


@cli.command("ls")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--sort", is_flag=True, help="Sort by name instead of listing order.")
@click.option("--paths", "show_paths", is_flag=True, help="Show full paths.")
@click.pass_context
def ls(ctx: click.Context, as_json: bool, sort: bool, show_paths: bool) -> None:
    """List projects."""
    from pswitch.core.use_cases.ls import list_projects

    settings = _load_settings(ctx)
    result = list_projects(settings, sort=sort)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    for project in result.projects:
        if show_paths:
            click.echo(f"{project.name}\t{project.path}")
        else:
            click.echo(project.name)


# ── Creating ────────────────────────────────────────────────────


@cli.command()
@click.argument("name")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def new(ctx: click.Context, name: str, as_json: bool) -> None:
    """Create a new project NAME."""
    from pswitch.core.use_cases.new import create_project

    settings = _load_settings(ctx)
    result = create_project(settings, name, registry=ctx.obj.get("registry"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    if not ctx.obj.get("quiet"):
        click.secho(f"✅ Created {result.path}", fg="green")
        if result.git_initialized:
            click.echo("   git repository initialized")
        if result.readme_created:
            click.echo("   readme.md created")

    for warning in result.warnings:
        click.secho(f"⚠️  {warning}", fg="yellow", err=True)


# ── Opening ─────────────────────────────────────────────────────


def _open(ctx: click.Context, name: str, implicit: bool, dry_run: bool) -> None:
    from pswitch.core.use_cases.open import open_project

    settings = _load_settings(ctx)
    result = open_project(
        settings,
        name,
        registry=ctx.obj.get("registry"),
        implicit=implicit,
        dry_run=dry_run,
    )

    if result.not_found:
        click.echo(result.message)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    if dry_run:
        click.echo(shlex.join(result.argv))
        click.echo(f"   cwd: {result.working_dir}")


@cli.command("open")
@click.argument("name")
@click.option("--dry-run", is_flag=True, help="Print the command instead of running it.")
@click.pass_context
def open_cmd(ctx: click.Context, name: str, dry_run: bool) -> None:
    """Open project NAME with the configured command.

    Examples:

        p open api

        p api
    """
    _open(ctx, name, implicit=False, dry_run=dry_run)


@cli.command("_open", hidden=True)
@click.argument("name")
@click.option("--dry-run", is_flag=True)
@click.pass_context
def implicit_open(ctx: click.Context, name: str, dry_run: bool) -> None:
    """Open a project named as the first word (``p NAME``)."""
    _open(ctx, name, implicit=True, dry_run=dry_run)


# ── Shell integration ───────────────────────────────────────────


@cli.command()
@click.argument("name")
@click.pass_context
def path(ctx: click.Context, name: str) -> None:
    """Print the directory of project NAME."""
    from pswitch.core.use_cases.path import project_path

    settings = _load_settings(ctx)
    result = project_path(settings, name)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    if result.project is None:
        click.echo(f"Unknown project '{name}'", err=True)
        return

    # No newline: consumed by $(p path NAME)
    click.echo(str(result.project.path), nl=False)


@cli.command()
@click.pass_context
def root(ctx: click.Context) -> None:
    """Print the projects directory."""
    settings = _load_settings(ctx)
    click.echo(str(settings.projects_dir), nl=False)


@cli.command("shell-init")
def shell_init() -> None:
    """Print a shell function that makes ``p cd NAME`` work.

    Add to your shell rc file:

        eval "$(p shell-init)"
    """
    click.echo(SHELL_FUNCTION, nl=False)


@cli.command("cd")
@click.argument("name", required=False)
def cd(name: str | None) -> None:
    """Change to project NAME (needs the shell integration)."""
    click.echo(
        "A program cannot change its parent shell's directory. "
        'Add  eval "$(p shell-init)"  to your shell rc file to enable \'p cd\'.',
        err=True,
    )
    sys.exit(1)


# ── Configuration ───────────────────────────────────────────────


@cli.group()
def config() -> None:
    """Settings file commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate the settings file."""
    from pswitch.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        settings = result.settings
        assert settings is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   File:     {result.config_path}")
        click.echo(f"   Projects: {settings.projects_dir}")
        click.echo(f"   Mode:     {'git (structured)' if settings.git else 'flat'}")
        click.echo(f"   Open:     {settings.open_command or '(default editor)'}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        sys.exit(1)


if __name__ == "__main__":
    cli()
