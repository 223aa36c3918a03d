"""Command-line interface for material definition export.

This package provides the `material-export` CLI tool that reads material
markup from a directory or manifest, converts it to JSON and writes a single
export file, with progress indication and error handling.
"""

from .export_command import ExportCommand
from .models import ExitCode, ExportSummary
from .errors import CLIError, NoSourceError

__all__ = [
    'ExportCommand',
    'ExitCode',
    'ExportSummary',
    'CLIError',
    'NoSourceError',
]
