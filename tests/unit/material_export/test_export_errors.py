"""Unit tests for the export exception hierarchy."""

import pytest

from src.cli.errors import CLIError, NoSourceError
from src.markup_converter.errors import ExportError, ParseError
from src.material_export.errors import (
    ConfigError,
    FilesystemError,
    PayloadDecodeError,
    SerializationError,
    SinkError,
    SourceError,
)


class TestHierarchy:
    """Test cases for exception inheritance."""

    @pytest.mark.parametrize("error_class", [
        ParseError,
        PayloadDecodeError,
        SerializationError,
        SinkError,
        SourceError,
        FilesystemError,
        ConfigError,
        CLIError,
        NoSourceError,
    ])
    def test_inherits_from_export_error(self, error_class):
        """All application errors can be caught as ExportError."""
        assert issubclass(error_class, ExportError)

    def test_export_error_is_exception(self):
        """ExportError should inherit from Exception."""
        assert issubclass(ExportError, Exception)


class TestMessages:
    """Test cases for message formatting and context attributes."""

    def test_parse_error_with_material(self):
        """ParseError names the material when known."""
        error = ParseError("unexpected end", material_name="Steel")
        assert str(error) == "Failed to parse markup for material 'Steel': unexpected end"
        assert error.material_name == "Steel"
        assert error.original_message == "unexpected end"

    def test_payload_decode_error_with_material(self):
        """PayloadDecodeError names the material when known."""
        error = PayloadDecodeError("invalid base64", material_name="Glass")
        assert str(error) == "Error processing material Glass: invalid base64"

    def test_payload_decode_error_without_material(self):
        """PayloadDecodeError without a material describes the payload."""
        error = PayloadDecodeError("invalid JSON")
        assert str(error) == "Invalid plugin-content payload: invalid JSON"
        assert error.material_name is None

    def test_sink_error(self):
        """SinkError stores path and reason."""
        error = SinkError("/out/materials.json", "Permission denied")
        assert str(error) == "Error saving file /out/materials.json: Permission denied"
        assert error.file_path == "/out/materials.json"
        assert error.reason == "Permission denied"

    def test_sink_error_without_reason(self):
        """SinkError message without reason."""
        assert str(SinkError("out.json")) == "Error saving file out.json"

    def test_source_error(self):
        """SourceError stores path and reason."""
        error = SourceError("steel.xml", "File not found")
        assert "steel.xml" in str(error)
        assert error.reason == "File not found"

    def test_config_error_with_field(self):
        """ConfigError includes the field name when given."""
        error = ConfigError("must be at least 0", "indent")
        assert str(error) == "Configuration error in field 'indent': must be at least 0"
        assert error.config_field == "indent"

    def test_serialization_error(self):
        """SerializationError wraps the underlying message."""
        assert "Out of range float values" in str(SerializationError("Out of range float values"))

    def test_no_source_error(self):
        """NoSourceError names the config path that was looked for."""
        error = NoSourceError(".material-export.yaml")
        assert ".material-export.yaml" in str(error)
        assert error.config_path == ".material-export.yaml"
