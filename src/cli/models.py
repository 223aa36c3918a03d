"""Data models for CLI operations.

This module defines all data models used by the CLI module.
All models use dataclasses for clean, type-safe data structures,
following the patterns established in src/material_export/models.py.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Export completed (payload diagnostics do not change this)
    - GENERAL_ERROR (1): Configuration or source errors
    - PARSE_ERROR (2): A material's markup is not well-formed
    - OUTPUT_ERROR (3): Serialization failed or the output file could not be written

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    PARSE_ERROR = 2
    OUTPUT_ERROR = 3


@dataclass
class ExportSummary:
    """Summary of an export for display to the user.

    Attributes:
        output_path: File the export was written to (or would be, on dry run)
        material_count: Number of materials exported
        plugin_content_count: Number of records with inlined plugin-content
        diagnostics: Per-material payload failure lines
        dry_run: True if nothing was written

    Example:
        >>> summary = ExportSummary(output_path="materials.json", material_count=3)
    """
    output_path: str
    material_count: int = 0
    plugin_content_count: int = 0
    diagnostics: List[str] = field(default_factory=list)
    dry_run: bool = False
