"""Typed exception hierarchy for CLI-related errors.

This module defines all custom exceptions used by the CLI.
All exceptions inherit from CLIError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from src.markup_converter.errors import ExportError


class CLIError(ExportError):
    """Base exception for all CLI-related errors."""
    pass


class NoSourceError(CLIError):
    """Raised when neither a source directory nor a configuration file is available."""

    def __init__(self, config_path: str):
        super().__init__(
            f"No source directory given and no configuration file found at {config_path}"
        )
        self.config_path = config_path
