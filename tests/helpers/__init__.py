"""Helper utilities shared by the test suite."""

from .payload_helpers import encode_plugin_content, material_markup

__all__ = ['encode_plugin_content', 'material_markup']
