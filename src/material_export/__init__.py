"""Material definition export.

This module provides the MaterialExportAssembler, which converts a sequence
of (name, markup) materials into a single JSON document, inlining embedded
plugin-content payloads, together with the sources, sink and configuration
loader the CLI wires around it.
"""

from .assembler import MaterialExportAssembler
from .config_loader import ConfigLoader
from .errors import (
    ConfigError,
    FilesystemError,
    PayloadDecodeError,
    SerializationError,
    SinkError,
    SourceError,
)
from .models import (
    ExportConfig,
    ManifestEntry,
    MaterialRecord,
    PayloadDecodeResult,
    PayloadDiagnostic,
)
from .payload_decoder import decode_plugin_content, find_plugin_content
from .sink import FileSink
from .sources import DirectoryMaterialSource, ManifestMaterialSource

__all__ = [
    'MaterialExportAssembler',
    'ConfigLoader',
    'FileSink',
    'DirectoryMaterialSource',
    'ManifestMaterialSource',
    'decode_plugin_content',
    'find_plugin_content',
    'ExportConfig',
    'ManifestEntry',
    'MaterialRecord',
    'PayloadDecodeResult',
    'PayloadDiagnostic',
    'ConfigError',
    'FilesystemError',
    'PayloadDecodeError',
    'SerializationError',
    'SinkError',
    'SourceError',
]
