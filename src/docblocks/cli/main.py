# topmark:header:start
#
#   project      : DocBlocks
#   file         : main.py
#   file_relpath : src/docblocks/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocBlocks command line interface.

Group-level options (verbosity, color, configuration file) are resolved once
and placed into ``ctx.obj``; subcommands read the console and the frozen
configuration from there.
"""

from __future__ import annotations

from pathlib import Path

import click

from docblocks.cli.commands.apply import apply_command
from docblocks.cli.commands.blocks import blocks_command
from docblocks.cli.commands.check import check_command
from docblocks.cli.commands.export import export_command
from docblocks.cli.commands.languages import languages_command
from docblocks.cli.console import ClickConsole
from docblocks.cli.errors import DocblocksConfigError
from docblocks.cli.options import common_verbose_options, resolve_verbosity
from docblocks.config import Config, ConfigError
from docblocks.config.io import load_config
from docblocks.config.logging import DocblocksLogger, get_logger, resolve_env_log_level, setup_logging
from docblocks.constants import DOCBLOCKS_VERSION

logger: DocblocksLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (logging, console, configuration) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
        config_path (Path | None): Explicit configuration file, if any.

    Raises:
        DocblocksConfigError: If the configuration cannot be loaded.
    """
    ctx.obj = ctx.obj or {}

    # The environment wins over -v/-q so test runs can force TRACE.
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env if level_env is not None else level_cli
    setup_logging(level=ctx.obj["log_level"])

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)

    try:
        config: Config = load_config(config_path).freeze()
    except ConfigError as exc:
        raise DocblocksConfigError(str(exc)) from exc
    logger.debug("Configuration files: %s", [str(p) for p in config.config_files])
    ctx.obj["config"] = config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="DocBlocks CLI: inspect and edit the doc blocks of source files.",
)
@click.version_option(DOCBLOCKS_VERSION, "--version", prog_name="docblocks")
@common_verbose_options
@click.option("--no-color", "no_color", is_flag=True, help="Disable ANSI color in output.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Configuration file (default: docblocks.toml or [tool.docblocks] in pyproject.toml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the DocBlocks CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_path=config_path,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'docblocks blocks PATH' to see the doc blocks of a file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(languages_command)

cli.add_command(blocks_command)

cli.add_command(check_command)

cli.add_command(export_command)

cli.add_command(apply_command)

if __name__ == "__main__":
    cli()
