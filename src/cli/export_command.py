"""Export command orchestration for CLI.

This module provides the ExportCommand class that wires a material source,
the MaterialExportAssembler and a FileSink together and translates failures
into exit codes.
"""

import logging
import os
from typing import Optional

from src.markup_converter.errors import ParseError
from src.material_export.assembler import MaterialExportAssembler
from src.material_export.config_loader import ConfigLoader
from src.material_export.errors import (
    ConfigError,
    FilesystemError,
    SerializationError,
    SinkError,
    SourceError,
)
from src.material_export.models import ExportConfig
from src.material_export.sink import FileSink
from src.material_export.sources import DirectoryMaterialSource, ManifestMaterialSource
from .errors import CLIError, NoSourceError
from .models import ExitCode, ExportSummary
from .output import OutputHandler

logger = logging.getLogger(__name__)


class ExportCommand:
    """Orchestrates one material export for the CLI.

    The export workflow:
        1. Resolve configuration (explicit --config, a source directory
           argument, or the default .material-export.yaml)
        2. Apply command-line overrides
        3. Build the material source
        4. Assemble and serialize all materials
        5. Write the finished text through the sink (skipped on dry run)
        6. Report a summary and return an exit code

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> cmd = ExportCommand(output_handler=output)
        >>> exit_code = cmd.run(source_dir="./materials", output="materials.json")
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        output_handler: Optional[OutputHandler] = None,
        assembler: Optional[MaterialExportAssembler] = None,
    ):
        """Initialize export command with dependencies.

        Args:
            config_path: Path to configuration YAML file (optional)
            output_handler: OutputHandler for terminal output (optional)
            assembler: MaterialExportAssembler for testing (optional)
        """
        self.explicit_config = config_path is not None
        self.config_path = config_path or ConfigLoader.DEFAULT_CONFIG_PATH
        self.output_handler = output_handler or OutputHandler()
        self.assembler = assembler

    def run(
        self,
        source_dir: Optional[str] = None,
        output: Optional[str] = None,
        pattern: Optional[str] = None,
        indent: Optional[int] = None,
        ensure_ascii: Optional[bool] = None,
        dry_run: bool = False,
    ) -> ExitCode:
        """Execute the export.

        Command-line values override configuration values; None means
        "not given".

        Returns:
            ExitCode indicating success or specific failure type
        """
        try:
            config, base_dir = self._resolve_config(source_dir)

            if output is not None:
                config.output = output
            if pattern is not None:
                config.pattern = pattern
            if indent is not None:
                if indent < 0:
                    raise ConfigError(f"indent must be at least 0, got {indent}", 'indent')
                config.indent = indent
            if ensure_ascii is not None:
                config.ensure_ascii = ensure_ascii

            return self._export(config, base_dir, dry_run)

        except (ConfigError, FilesystemError) as e:
            logger.error(f"Configuration error: {e}")
            self.output_handler.error(f"Configuration error: {e}")
            return ExitCode.GENERAL_ERROR

        except SourceError as e:
            logger.error(f"Source error: {e}")
            self.output_handler.error(str(e))
            return ExitCode.GENERAL_ERROR

        except ParseError as e:
            logger.error(f"Parse error: {e}")
            self.output_handler.error(str(e))
            return ExitCode.PARSE_ERROR

        except (SerializationError, SinkError) as e:
            logger.error(f"Output error: {e}")
            self.output_handler.error(str(e))
            return ExitCode.OUTPUT_ERROR

        except CLIError as e:
            logger.error(f"CLI error: {e}")
            self.output_handler.error(f"Error: {e}")
            return ExitCode.GENERAL_ERROR

        except Exception as e:
            logger.exception("Unexpected error during export")
            self.output_handler.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR

    def _resolve_config(self, source_dir: Optional[str]):
        """Return (config, base_dir) for this run.

        Raises:
            NoSourceError: If no source directory is given and no config exists
            ConfigError: If the configuration file is invalid
            FilesystemError: If an explicit configuration file cannot be read
        """
        if source_dir is not None and not self.explicit_config:
            logger.info(f"Exporting materials from directory {source_dir}")
            return ExportConfig(source_dir=source_dir), None

        if not self.explicit_config and not os.path.exists(self.config_path):
            raise NoSourceError(self.config_path)

        logger.info(f"Loading configuration from {self.config_path}")
        self.output_handler.info(f"Loading configuration from {self.config_path}")
        config = ConfigLoader.load(self.config_path)

        base_dir = os.path.dirname(os.path.abspath(self.config_path))
        if source_dir is not None:
            config.source_dir = source_dir
            config.materials = []
        elif config.source_dir is not None and not os.path.isabs(config.source_dir):
            config.source_dir = os.path.join(base_dir, config.source_dir)

        return config, base_dir

    def _export(self, config: ExportConfig, base_dir: Optional[str], dry_run: bool) -> ExitCode:
        if config.source_dir is not None:
            source = DirectoryMaterialSource(config.source_dir, config.pattern)
        else:
            source = ManifestMaterialSource(config.materials, base_dir)

        assembler = self.assembler or MaterialExportAssembler(
            indent=config.indent,
            ensure_ascii=config.ensure_ascii,
        )

        with self.output_handler.spinner("Converting material definitions..."):
            records = assembler.build_records(source)
            text = assembler.serialize(records)

        summary = ExportSummary(
            output_path=config.output,
            material_count=len(records),
            plugin_content_count=sum(1 for r in records if r.has_plugin_content),
            diagnostics=[
                f"Error processing material {d.material_name}: {d.message}"
                for d in assembler.diagnostics
            ],
            dry_run=dry_run,
        )

        for line in summary.diagnostics:
            self.output_handler.warning(line)

        if dry_run:
            logger.info(f"Dry run: skipping write of {len(text)} characters to {config.output}")
        else:
            FileSink(config.output).write(text)
            self.output_handler.success(f"File successfully saved to: {config.output}")

        self.output_handler.print_export_summary(summary)
        return ExitCode.SUCCESS
