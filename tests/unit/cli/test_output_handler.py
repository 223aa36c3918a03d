"""Unit tests for cli.output module."""

import pytest

from src.cli.models import ExportSummary
from src.cli.output import OutputHandler


@pytest.fixture
def handler():
    """Create an OutputHandler that records console output."""
    output = OutputHandler(verbosity=0, no_color=True)
    output.console.begin_capture()
    return output


class TestOutputHandlerInit:
    """Test cases for OutputHandler initialization."""

    def test_init_default_verbosity_and_color(self):
        """Initialize with default verbosity (0) and color enabled."""
        handler = OutputHandler()

        assert handler.verbosity == 0
        assert handler.console is not None
        assert handler.console.no_color is False

    def test_init_no_color_true(self):
        """Initialize with no_color=True disables colors."""
        assert OutputHandler(no_color=True).console.no_color is True


class TestMessages:
    """Test cases for message display."""

    def test_success(self, handler):
        """success() prints the message with a check mark."""
        handler.success("Export completed")
        assert "✓ Export completed" in handler.console.end_capture()

    def test_error(self, handler):
        """error() prints the message with a cross."""
        handler.error("Failed")
        assert "✗ Failed" in handler.console.end_capture()

    def test_messages_are_not_markup(self, handler):
        """Square brackets in messages are printed literally."""
        handler.warning("value [red] kept")
        assert "value [red] kept" in handler.console.end_capture()

    def test_info_hidden_at_verbosity_0(self, handler):
        """info() prints nothing at verbosity 0."""
        handler.info("details")
        assert handler.console.end_capture() == ""

    def test_info_shown_at_verbosity_1(self):
        """info() prints at verbosity 1."""
        handler = OutputHandler(verbosity=1, no_color=True)
        handler.console.begin_capture()
        handler.info("details")
        assert "details" in handler.console.end_capture()

    def test_spinner_context(self, handler):
        """spinner() can wrap work without raising."""
        with handler.spinner("Working..."):
            pass


class TestExportSummary:
    """Test cases for print_export_summary()."""

    def test_summary_success(self, handler):
        """A normal export shows counts and a success line."""
        handler.print_export_summary(
            ExportSummary(output_path="m.json", material_count=3, plugin_content_count=2)
        )
        text = handler.console.end_capture()
        assert "Materials: 3" in text
        assert "Plugin content inlined: 2" in text
        assert "Export completed successfully" in text

    def test_summary_with_diagnostics(self, handler):
        """Diagnostics are counted, not repeated, in the summary."""
        handler.print_export_summary(ExportSummary(
            output_path="m.json",
            material_count=1,
            diagnostics=["Error processing material Steel: invalid base64"],
        ))
        text = handler.console.end_capture()
        assert "Payload errors: 1" in text
        assert "Error processing material Steel" not in text

    def test_summary_dry_run(self, handler):
        """A dry run names the file that was not written."""
        handler.print_export_summary(
            ExportSummary(output_path="m.json", material_count=1, dry_run=True)
        )
        assert "nothing written to m.json" in handler.console.end_capture()

    def test_summary_empty(self, handler):
        """An empty export says there was nothing to export."""
        handler.print_export_summary(ExportSummary(output_path="m.json"))
        assert "No materials to export" in handler.console.end_capture()
