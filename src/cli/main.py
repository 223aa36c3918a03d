"""Main CLI entry point for material-export command.

This module provides the Typer application that serves as the entry point
for the material-export command-line tool. It uses options on the main
command rather than subcommands for a simpler user experience.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.export_command import ExportCommand
from src.cli.output import OutputHandler

VERSION = "0.1.0"

app = typer.Typer(
    name="material-export",
    help="""Export material definitions (XML) to a single JSON document.

QUICK START:
  material-export ./materials -o materials.json    # Export every *.xml in a folder
  material-export --config export.yaml             # Export using a config file
  material-export                                  # Use ./.material-export.yaml
  material-export ./materials --dry-run            # Convert without writing""",
    add_completion=False,
    rich_markup_mode=None,  # Disable Rich markup to avoid compatibility issues
    no_args_is_help=False,
)

# Module logger
logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"material-export_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


@app.command()
def main_command(
    source_dir: Optional[str] = typer.Argument(
        None,
        help="Directory of material XML files (overrides the config source)",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output JSON file (default: materials.json)",
        metavar="PATH",
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: .material-export.yaml if present)",
        metavar="PATH",
    ),
    pattern: Optional[str] = typer.Option(
        None,
        "--pattern",
        help="Glob for material files inside the source directory (default: *.xml)",
        metavar="GLOB",
    ),
    indent: Optional[int] = typer.Option(
        None,
        "--indent",
        help="Indentation width of the output JSON (default: 2)",
    ),
    ensure_ascii: Optional[bool] = typer.Option(
        None,
        "--ensure-ascii/--no-ensure-ascii",
        help="Escape non-ASCII characters in the output",
        show_default=False,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "--dryrun",
        help="Convert everything but do not write the output file",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Export material definitions (XML) to a single JSON document.

    \b
    Each material becomes {"name", "value", "plugin-content"?}. When a
    material's parameters/plugin-content carries an embedded base64 JSON
    payload, it is decoded and inlined under "plugin-content".
    """
    if version:
        typer.echo(f"material-export version {VERSION}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)

    output_handler = OutputHandler(verbosity=verbosity, no_color=no_color)
    export_cmd = ExportCommand(config_path=config, output_handler=output_handler)

    exit_code = export_cmd.run(
        source_dir=source_dir,
        output=output,
        pattern=pattern,
        indent=indent,
        ensure_ascii=ensure_ascii,
        dry_run=dry_run,
    )

    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
