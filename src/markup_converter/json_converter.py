"""Structured markup to JSON conversion.

Converts one markup document into a JSON value with no knowledge of the
material domain:

- attributes become ``"@name": "value"`` entries, in document order
- element children are grouped by tag name in first-occurrence order; a
  single member maps to its converted value, repeated members to an array
- an element with no element children whose first child is text collapses
  to that text, discarding its attributes
- every leaf stays a string; nothing is coerced to numbers or booleans

Two groups or attributes that share a key after prefixing are resolved
last-write-wins.
"""

import json
import logging
from typing import Dict, List, Optional, Union

from .markup_parser import MarkupParser
from .models import JsonValue, MarkupElement, MarkupNode, MarkupText

logger = logging.getLogger(__name__)


class StructuredMarkupToJsonConverter:
    """Converts structured markup documents to JSON values.

    Example:
        >>> converter = StructuredMarkupToJsonConverter()
        >>> converter.convert('<x a="1"><item>p</item><item>q</item></x>')
        {'@a': '1', 'item': ['p', 'q']}
    """

    ATTRIBUTE_PREFIX = "@"

    def __init__(self, parser: Optional[MarkupParser] = None):
        """Initialize the converter.

        Args:
            parser: Optional MarkupParser instance for testing
        """
        self.parser = parser or MarkupParser()

    def convert(self, markup: Union[str, bytes]) -> JsonValue:
        """Convert a markup document to a JSON value.

        Args:
            markup: Well-formed markup with a single root element

        Returns:
            Object or string produced for the document's root element

        Raises:
            ParseError: If the markup is not well-formed
        """
        root = self.parser.parse(markup)
        return self.convert_node(root)

    def convert_to_string(self, markup: Union[str, bytes], indent: int = 2) -> str:
        """Convert a markup document and return pretty-printed JSON text.

        Raises:
            ParseError: If the markup is not well-formed
        """
        return json.dumps(self.convert(markup), indent=indent, ensure_ascii=False)

    def convert_node(self, node: MarkupNode) -> JsonValue:
        """Convert a single markup node.

        Text nodes become strings and elements become objects (or strings,
        for text-only leaves). Other node kinds have no JSON rendering and
        convert to None.
        """
        if isinstance(node, MarkupText):
            return node.content
        if isinstance(node, MarkupElement):
            return self._convert_element(node)
        return None

    def _convert_element(self, element: MarkupElement) -> JsonValue:
        obj: Dict[str, JsonValue] = {}

        for name, value in element.attributes:
            obj[self.ATTRIBUTE_PREFIX + name] = value

        element_children = element.element_children()
        if not element_children:
            if element.children and isinstance(element.children[0], MarkupText):
                # Text-only leaf collapses to a scalar; attributes are dropped
                return element.children[0].content
            return obj

        for tag, members in self._group_by_tag(element_children).items():
            if len(members) > 1:
                obj[tag] = [self._convert_element(member) for member in members]
            else:
                obj[tag] = self._convert_element(members[0])

        return obj

    @staticmethod
    def _group_by_tag(elements: List[MarkupElement]) -> Dict[str, List[MarkupElement]]:
        groups: Dict[str, List[MarkupElement]] = {}
        for element in elements:
            groups.setdefault(element.tag, []).append(element)
        return groups
