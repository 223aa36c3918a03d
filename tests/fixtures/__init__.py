"""Test fixtures for material export tests.

This module provides sample material markup documents and export
configurations used across unit and integration tests.
"""

from .sample_materials import (
    SAMPLE_MATERIAL_SIMPLE,
    SAMPLE_MATERIAL_NESTED,
    SAMPLE_MATERIAL_REPEATED,
    SAMPLE_MATERIAL_MALFORMED,
    SAMPLE_CONFIG_DIRECTORY,
    SAMPLE_CONFIG_MANIFEST,
)

__all__ = [
    'SAMPLE_MATERIAL_SIMPLE',
    'SAMPLE_MATERIAL_NESTED',
    'SAMPLE_MATERIAL_REPEATED',
    'SAMPLE_MATERIAL_MALFORMED',
    'SAMPLE_CONFIG_DIRECTORY',
    'SAMPLE_CONFIG_MANIFEST',
]
