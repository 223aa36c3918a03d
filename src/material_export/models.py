"""Data models for material export.

This module defines all data models used by the material export library.
All models use dataclasses for clean, type-safe data structures.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.markup_converter.models import JsonValue

from .errors import PayloadDecodeError


@dataclass
class MaterialRecord:
    """One exported material.

    Created once per material and updated at most once, when its embedded
    plugin-content payload decodes successfully.

    Attributes:
        name: Material name (not guaranteed unique or non-empty)
        value: Converted markup tree
        plugin_content: Decoded payload (only meaningful if has_plugin_content)
        has_plugin_content: True once a payload has been attached; a payload
            that decodes to JSON null is still attached
    """
    name: str
    value: JsonValue
    plugin_content: Any = None
    has_plugin_content: bool = False

    def attach_plugin_content(self, content: Any) -> None:
        self.plugin_content = content
        self.has_plugin_content = True

    def as_dict(self) -> Dict[str, Any]:
        """Return the record in output key order: name, value, plugin-content."""
        record: Dict[str, Any] = {
            "name": self.name,
            "value": self.value,
        }
        if self.has_plugin_content:
            record["plugin-content"] = self.plugin_content
        return record


@dataclass
class PayloadDecodeResult:
    """Outcome of decoding one plugin-content string.

    Exactly one of three states:
    - skipped: the raw string was too short to carry a payload
    - success: ``value`` holds the parsed JSON
    - failure: ``error`` holds the PayloadDecodeError

    Attributes:
        value: Parsed payload on success
        error: Decode failure, if any
        skipped: True when no decoding was attempted
    """
    value: Any = None
    error: Optional[PayloadDecodeError] = None
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return not self.skipped and self.error is None


@dataclass
class PayloadDiagnostic:
    """A recovered payload failure for one material.

    Attributes:
        material_name: Name of the material whose payload failed to decode
        message: Human-readable reason
    """
    material_name: str
    message: str


@dataclass
class ManifestEntry:
    """A named material file listed in the export configuration.

    Attributes:
        name: Material name written to the export
        path: Markup file path (relative paths resolve against the config file)
    """
    name: str
    path: str


@dataclass
class ExportConfig:
    """Export configuration loaded from .material-export.yaml.

    Exactly one of source_dir or materials selects where markup comes from.

    Attributes:
        source_dir: Directory scanned for markup files
        pattern: Glob applied inside source_dir
        materials: Explicit list of named material files
        output: Output JSON file path
        indent: Indentation width for the output JSON
        ensure_ascii: Escape non-ASCII characters in the output
    """
    source_dir: Optional[str] = None
    pattern: str = "*.xml"
    materials: List[ManifestEntry] = field(default_factory=list)
    output: str = "materials.json"
    indent: int = 2
    ensure_ascii: bool = False
