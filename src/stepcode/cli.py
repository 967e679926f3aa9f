# cli.py
from __future__ import annotations

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from stepcode.config import GeneratorConfig
from stepcode.dsl import generate_vscode_config, load_build
from stepcode.errors import StepcodeError
from stepcode.extract import context_from_project
from stepcode.generator import generate_for_project, require_build_description
from stepcode.ui.console import Console, get_console, set_console


def _load_config(build_tool: str | None, build_file: str | None, default_task: bool | None = None) -> GeneratorConfig:
    console = get_console()
    try:
        return GeneratorConfig.from_env(
            build_tool=build_tool,
            build_file=build_file,
            default_task=default_task,
        )
    except ValidationError as e:
        console.print_error(
            "Invalid configuration",
            "Could not build the generator configuration.",
            details=[str(err["loc"][0]) + ": " + err["msg"] for err in e.errors()],
            suggestion="Check the STEPCODE_* environment variables.",
        )
        sys.exit(1)


def _fail(exc: StepcodeError) -> None:
    console = get_console()
    console.print_error(
        exc.title,
        str(exc),
        details=exc.details() or None,
        suggestion=exc.suggestion(),
    )
    if console.debug:
        console.print_exception(exc)
    sys.exit(1)


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.option("--quiet", "-q", is_flag=True, default=False, help="Only print errors")
def cli(debug, quiet):
    """stepcode: generate VSCode configuration from a project's build steps."""
    console = Console(debug=debug, quiet=quiet)
    set_console(console)


@cli.command()
@click.argument("input_dir", type=click.Path(file_okay=False, path_type=Path))
@click.argument("output_dir", type=click.Path(path_type=Path))
@click.option("--build-tool", default=None, help="Build tool executable (default: zig)")
@click.option("--build-file", default=None, help="Build description file name (default: build.zig)")
@click.option(
    "--default-task/--no-default-task",
    default=None,
    help="Emit a plain default build task before the per-step tasks",
)
def generate(input_dir, output_dir, build_tool, build_file, default_task):
    """Generate VSCode config for INPUT_DIR into OUTPUT_DIR."""
    console = get_console()
    config = _load_config(build_tool, build_file, default_task)

    try:
        written = generate_for_project(input_dir, output_dir, config)
        console.print_generated(output_dir, len(written))
    except StepcodeError as e:
        _fail(e)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


@cli.command()
@click.argument("input_dir", type=click.Path(file_okay=False, path_type=Path))
@click.option("--build-tool", default=None, help="Build tool executable (default: zig)")
@click.option("--build-file", default=None, help="Build description file name (default: build.zig)")
def steps(input_dir, build_tool, build_file):
    """List the steps found in INPUT_DIR without writing anything."""
    console = get_console()
    config = _load_config(build_tool, build_file)

    try:
        require_build_description(input_dir, config)
        context = context_from_project(input_dir, config)
    except StepcodeError as e:
        _fail(e)
        return
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)

    console.print_header(f"Steps in {context.project_name}")
    console.print_steps(context.steps)


@cli.command("from-build")
@click.argument("build_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--output-dir",
    default=None,
    type=click.Path(path_type=Path),
    help="Output directory, relative to the build file's directory (default: .vscode)",
)
def from_build(build_file, output_dir):
    """Generate VSCode config from a Python build description's step graph."""
    console = get_console()
    config = _load_config(None, None)

    try:
        build = load_build(build_file)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        # the build file is user code: syntax errors and anything build(b) raises land here
        console.print_error(
            "Failed to load build description",
            f"Could not load build description from {build_file}",
            details=[f"{type(e).__name__}: {e}"],
        )
        if console.debug:
            console.print_exception(e)
        sys.exit(1)

    try:
        written = generate_vscode_config(build, output_dir, config)
        console.print_generated(written[0].parent, len(written))
    except StepcodeError as e:
        _fail(e)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
