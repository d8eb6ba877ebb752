"""Defines the command-line interface for the semver-isvalid application.

This module uses the `click` library for argument handling and `rich` for
terminal output. It is a thin layer around `semver_isvalid.validate`: it
prints the diagnostics, reports the outcome, and maps it to an exit status.
"""
import io
import json
import logging
import sys
from typing import Optional, Tuple

import click
from rich.console import Console

from .core.config import Config
from .core.outcome import Outcome, ValidationResult
from .core.validator import validate

# Exit status for a wrong number of positional arguments.
EXIT_BAD_ARGUMENTS = 1

logger = logging.getLogger(__name__)

LONG_DESCRIPTION = """semver-isvalid allows you to validate a single semantic version

In addition to validating a semantic version, semver-isvalid will tell you
information about the version it has discovered. This can include specific
details about validation issues, what it found about the version, and notices
that may help in understanding the version.

\b
For example:

\b
    $ semver-isvalid 1.2.3
    found major version of 1
    found minor version of 2
    found patch version of 3
    Semantic Version is valid

The "v" at the start of a version is NOT part of Semantic Versioning. Use the
--with-v flag to allow it.

\b
Each type of error has a unique exit code:

\b
- 1: Invalid number of arguments passed to application
- 2: A general invalid semantic version
- 3: The version passed in evaluates to an empty string
- 4: There are an invalid number of version parts. 3 are required
- 5: Invalid characters were found in a part of a Semantic Version
- 6: A numeric segment starts with 0

For more information on Semantic Versions please visit https://semver.org.
"""


def _make_console(stderr: bool, colors: bool) -> Console:
    """Creates a console that prints text verbatim, one message per line."""
    return Console(stderr=stderr, highlight=False, markup=False, emoji=False, soft_wrap=True, no_color=not colors)


def _strip_v(version: str, with_v: bool) -> str:
    """Removes a single leading "v" when `with_v` is enabled."""
    if with_v and version.startswith("v"):
        return version[1:]
    return version


def _error_line(outcome: Outcome, spec_url: str) -> str:
    """Builds the stderr line reporting a failed outcome."""
    if outcome is Outcome.GENERIC_INVALID:
        return f"Invalid Semantic Version. For more information see {spec_url}"
    return f"Invalid Semantic Version: {outcome.description}. For more information see {spec_url}"


def _report(result: ValidationResult, console: Console, err_console: Console, spec_url: str, json_output: bool) -> None:
    """Prints the diagnostics and the final verdict for a result.

    Args:
        result: The result of checking one version.
        console: The console for standard output.
        err_console: The console for standard error.
        spec_url: The reference URL shown in error lines.
        json_output: Print the result as a JSON document instead of lines.
    """
    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    for message in result.diagnostics:
        console.print(message)

    if result.is_valid:
        console.print(Outcome.VALID.description, style="green")
    else:
        err_console.print(_error_line(result.outcome, spec_url), style="red")


def check_version(version: str, with_v: bool, config: Config, json_output: bool = False) -> int:
    """Validates one version string and reports it on the terminal.

    Args:
        version: The version string supplied by the user.
        with_v: Strip a single leading "v" before validating.
        config: The application's configuration object.
        json_output: Print the result as a JSON document.

    Returns:
        The exit status for the outcome.
    """
    colors = bool(config.get("colors", True))
    console = _make_console(stderr=False, colors=colors)
    err_console = _make_console(stderr=True, colors=colors)

    result = validate(_strip_v(version, with_v))
    logger.info(f"Version {version!r} classified as {result.outcome.value}")
    _report(result, console, err_console, config.get("spec_url", "https://semver.org"), json_output)
    return result.outcome.exit_code


@click.command(help=LONG_DESCRIPTION, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="semver-isvalid")
@click.argument("versions", nargs=-1, required=False)
@click.option("--with-v", "with_v", is_flag=True, help="Allow a \"v\" at the start of the version.")
@click.option("--json", "json_output", is_flag=True, help="Output the result in JSON format.")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a custom config file.")
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(
    ctx: click.Context,
    versions: Tuple[str, ...],
    with_v: bool,
    json_output: bool,
    no_color: bool,
    config_path: Optional[str],
    verbose: bool,
    debug: bool,
) -> None:
    """Validate a single semantic version."""
    if sys.platform == "win32" and isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding='utf-8')

    config_obj = Config(config_path=config_path)
    verbose = verbose or bool(config_obj.get("verbose"))
    log_level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.debug("Debug mode enabled.")

    if no_color:
        config_obj.set("colors", False)

    if not versions:
        click.echo(ctx.get_help())
        return

    if len(versions) != 1:
        err_console = _make_console(stderr=True, colors=bool(config_obj.get("colors", True)))
        err_console.print(
            f"Wrong number of arguments supplied. 1 argument required but found {len(versions)}",
            style="red",
        )
        sys.exit(EXIT_BAD_ARGUMENTS)

    with_v = with_v or bool(config_obj.get("with_v", False))

    exit_code = check_version(versions[0], with_v=with_v, config=config_obj, json_output=json_output)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
