"""
env-example-gen — CLI entrypoint.

Usage:
    env-example-gen generate                 # ./.env → ./.env.example
    env-example-gen generate -i .env.local -o config/.env.local.example
    env-example-gen generate --multi         # every .env* file in cwd
    python -m envexample.main --help
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from envexample import __version__
from envexample.core.observability.logging_config import setup_logging_from_cli


@click.group()
@click.version_option(version=__version__, prog_name="env-example-gen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to .envexample.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """env-example-gen — generate safe .env.example templates from .env files."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging_from_cli(debug=debug, verbose=verbose, quiet=quiet)


def _make_generator(ctx: click.Context, as_json: bool = False):
    """Build a generator from .envexample.yml, exiting on a bad config."""
    from envexample.core.config.loader import ConfigError, load_settings
    from envexample.core.services.generator import EnvTemplateGenerator

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"✖ {e}", fg="red", err=True)
        sys.exit(1)
    return EnvTemplateGenerator(settings.to_generator_config())


def _display_path(path: Path) -> str:
    """Path relative to cwd when possible."""
    try:
        relative = path.relative_to(Path.cwd().resolve())
    except ValueError:
        return str(path)
    return str(relative) if str(relative) != "." else path.name


def _echo_success(result, quiet: bool = False) -> None:
    count = result.variable_count
    click.secho(f"✔ {_display_path(result.input_path)}", fg="green")
    if not quiet:
        click.secho(
            f"→ wrote {_display_path(result.output_path)} "
            f"({count} variable{'' if count == 1 else 's'})",
            fg="bright_black",
        )


def _echo_failure(path: Path, message: str) -> None:
    click.secho(f"✖ {_display_path(path)}: {message}", fg="red", err=True)


@cli.command()
@click.option("--input", "-i", "input_path", default=None,
              help="Source .env file (default: ./.env).")
@click.option("--output", "-o", "output_path", default=None,
              help="Path of the generated template (default: <input>.example).")
@click.option("--multi", "-m", is_flag=True,
              help="Generate a template for every .env* file in the directory.")
@click.option("--dir", "directory", type=click.Path(file_okay=False), default=None,
              help="Directory scanned by --multi (default: cwd).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    input_path: str | None,
    output_path: str | None,
    multi: bool,
    directory: str | None,
    as_json: bool,
) -> None:
    """Generate a .env.example template.

    Examples:

        env-example-gen generate

        env-example-gen generate -i .env.production

        env-example-gen generate --multi
    """
    from envexample.core.errors import EnvTemplateError, ErrorKind
    from envexample.core.services.generator import absolute_path
    from envexample.core.use_cases.generate import generate_directory, generate_one

    try:
        if multi and (input_path or output_path):
            raise EnvTemplateError(
                ErrorKind.INVALID_OPTION,
                "The --multi flag cannot be combined with --input or --output.",
            )
        if directory and not multi:
            raise EnvTemplateError(
                ErrorKind.INVALID_OPTION, "The --dir option requires --multi."
            )

        generator = _make_generator(ctx, as_json)
        quiet = ctx.obj.get("quiet", False)

        if multi:
            report = generate_directory(generator, Path(directory) if directory else None)

            if as_json:
                click.echo(json.dumps(report.to_dict(), indent=2))
                sys.exit(0 if report.ok else 1)

            for outcome in report.outcomes:
                if outcome.result:
                    _echo_success(outcome.result, quiet)
                else:
                    _echo_failure(outcome.input_path, outcome.error or "Unknown error")

            if report.succeeded:
                click.secho(f"✔ Processed {report.succeeded} file(s).", fg="green")
            if report.failed:
                click.secho(f"✖ Failed to process {report.failed} file(s).", fg="red", err=True)
                sys.exit(1)
            return

        source = absolute_path(input_path or ".env")
        target = absolute_path(output_path) if output_path else None
        outcome = generate_one(generator, source, target)

        if as_json:
            click.echo(json.dumps(outcome.to_dict(), indent=2))
            sys.exit(0 if outcome.ok else 1)

        if outcome.result is None:
            _echo_failure(outcome.input_path, outcome.error or "Unknown error")
            sys.exit(1)
        _echo_success(outcome.result, quiet)

    except EnvTemplateError as e:
        if as_json:
            click.echo(json.dumps(e.to_dict(), indent=2))
        else:
            click.secho(f"✖ {e.message}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.option("--dir", "directory", type=click.Path(file_okay=False), default=None,
              help="Directory to scan (default: cwd).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def discover(directory: str | None, as_json: bool) -> None:
    """List the .env files that --multi would process."""
    from envexample.core.services.discovery import discover_env_files
    from envexample.core.services.generator import suggested_output_path

    files = discover_env_files(Path(directory) if directory else None)

    if as_json:
        click.echo(json.dumps(
            [{"input": str(f), "output": str(suggested_output_path(f))} for f in files],
            indent=2,
        ))
        return

    if not files:
        click.secho("No .env files found.", fg="yellow")
        return

    for f in files:
        click.echo(f"  • {_display_path(f)} → {suggested_output_path(f).name}")


@cli.command()
@click.argument("keys", nargs=-1, required=True)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def placeholder(ctx: click.Context, keys: tuple[str, ...], as_json: bool) -> None:
    """Show the placeholder inferred for each KEY."""
    generator = _make_generator(ctx, as_json)
    factory = generator.config.placeholder_factory
    result = {key: factory(key) for key in keys}

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    width = max(len(k) for k in keys)
    for key, value in result.items():
        click.echo(f"  {key.ljust(width)}  {value}")


@cli.command()
@click.option("--input", "-i", "input_path", default=".env", show_default=True,
              help="Source .env file.")
@click.pass_context
def preview(ctx: click.Context, input_path: str) -> None:
    """Print the template for a file without writing it."""
    from envexample.core.errors import EnvTemplateError
    from envexample.core.services.generator import absolute_path, read_env_text

    generator = _make_generator(ctx)
    try:
        text = read_env_text(absolute_path(input_path))
    except EnvTemplateError as e:
        click.secho(f"✖ {e.message}", fg="red", err=True)
        sys.exit(1)

    click.echo(generator.render(text), nl=False)


if __name__ == "__main__":
    cli()
