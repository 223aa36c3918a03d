"""Typed exception hierarchy for markup conversion errors.

This module defines the base exception for the material export tool and the
errors raised while parsing structured markup. All exceptions include
descriptive messages with context to help with debugging.
"""

from typing import Optional


class ExportError(Exception):
    """Base exception for all material-export errors.

    Use this to catch any application-level error from the export tool.
    """
    pass


class ParseError(ExportError):
    """Raised when markup is not well-formed and cannot be converted."""

    def __init__(self, message: str, material_name: Optional[str] = None):
        if material_name is not None:
            full_message = f"Failed to parse markup for material '{material_name}': {message}"
        else:
            full_message = f"Failed to parse markup: {message}"
        super().__init__(full_message)
        self.material_name = material_name
        self.original_message = message
