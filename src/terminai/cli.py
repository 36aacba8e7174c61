"""Command-line interface for terminai.

Meant to be called from the shell's command-not-found hook::

    terminai -- gti status
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console

from terminai import __version__
from terminai.config import load_config
from terminai.core import EXIT_FAILURE, TerminAI
from terminai.errors import ConfigurationError
from terminai.providers import ProviderKind

err_console = Console(stderr=True, highlight=False, emoji=False)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": ["-h", "--help"],
    }
)
@click.option("--config", "-c", "config_path", type=click.Path(dir_okay=False), help="Configuration file path")
@click.option(
    "--provider",
    type=click.Choice([kind.value for kind in ProviderKind], case_sensitive=False),
    help="LLM provider (overrides API_PROVIDER)",
)
@click.option("--model", help="Model identifier")
@click.option("--timeout", type=float, help="Request timeout in seconds")
@click.option("--timing", is_flag=True, help="Report processing time on stderr")
@click.option("--no-hints", is_flag=True, help="Do not send similar installed commands as context")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="terminai")
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
def cli(
    config_path: str | None,
    provider: str | None,
    model: str | None,
    timeout: float | None,
    timing: bool,
    no_hints: bool,
    verbose: bool,
    command: tuple[str, ...],
) -> None:
    """Suggest a fix for a COMMAND the shell could not find."""
    _setup_logging(verbose)

    try:
        config = load_config(
            config_path,
            overrides={
                "provider": provider,
                "model": model,
                "timeout": timeout,
                "hints": False if no_hints else None,
            },
        )
    except ConfigurationError as e:
        err_console.print(f"Error: {e}", markup=False, soft_wrap=True)
        sys.exit(EXIT_FAILURE)

    outcome = TerminAI(config).run(command)

    if outcome.stdout:
        click.echo(outcome.stdout)
    if outcome.stderr:
        err_console.print(outcome.stderr, markup=False, soft_wrap=True)
    if timing:
        err_console.print(f"Processing time: {outcome.elapsed_seconds * 1000:.1f}ms", markup=False)

    sys.exit(outcome.exit_code)


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
