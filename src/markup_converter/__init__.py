"""Structured markup to JSON conversion.

This module provides the StructuredMarkupToJsonConverter, which turns one
markup document into a JSON value without any knowledge of materials.
"""

from .errors import ExportError, ParseError
from .json_converter import StructuredMarkupToJsonConverter
from .markup_parser import MarkupParser
from .models import JsonValue, MarkupElement, MarkupNode, MarkupOther, MarkupText

__all__ = [
    'StructuredMarkupToJsonConverter',
    'MarkupParser',
    'MarkupElement',
    'MarkupText',
    'MarkupOther',
    'MarkupNode',
    'JsonValue',
    'ExportError',
    'ParseError',
]
