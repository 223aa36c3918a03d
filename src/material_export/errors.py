"""Typed exception hierarchy for material export errors.

This module defines all custom exceptions raised while assembling, reading
and writing material exports. All exceptions inherit from ExportError so the
CLI can catch any application-level failure in one place.
"""

from typing import Optional

from src.markup_converter.errors import ExportError


class PayloadDecodeError(ExportError):
    """Raised when an embedded plugin-content payload cannot be decoded.

    Recovered locally by the assembler; never aborts an export.
    """

    def __init__(self, message: str, material_name: Optional[str] = None):
        if material_name is not None:
            full_message = f"Error processing material {material_name}: {message}"
        else:
            full_message = f"Invalid plugin-content payload: {message}"
        super().__init__(full_message)
        self.material_name = material_name
        self.original_message = message


class SerializationError(ExportError):
    """Raised when the assembled records cannot be serialized to JSON."""

    def __init__(self, message: str):
        super().__init__(f"Failed to serialize material definitions: {message}")


class SinkError(ExportError):
    """Raised when the finished export cannot be persisted."""

    def __init__(self, file_path: str, reason: Optional[str] = None):
        message = f"Error saving file {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason


class SourceError(ExportError):
    """Raised when material markup cannot be read from its source."""

    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"Failed to read material source {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class FilesystemError(ExportError):
    """Raised when filesystem operations fail (read, write, permissions, etc)."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason


class ConfigError(ExportError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message
