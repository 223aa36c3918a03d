"""Data models for the markup tree and its JSON rendering.

Markup nodes are modelled as a small set of dataclass variants so the
converter can dispatch on node kind explicitly instead of probing a DOM.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

# Converted markup only ever produces objects, arrays and strings. Decoded
# payloads may carry any value json.loads returns, hence Any.
JsonValue = Union[Dict[str, Any], List[Any], str, None]


@dataclass
class MarkupText:
    """A text node.

    Attributes:
        content: Character content, verbatim (whitespace is not trimmed)
    """
    content: str


@dataclass
class MarkupOther:
    """A non-element, non-text node such as a comment or processing instruction.

    Kept in the tree only so that "the first child is text" can be answered
    exactly; the converter never renders these.

    Attributes:
        kind: Node kind, e.g. "comment" or "processing-instruction"
    """
    kind: str


@dataclass
class MarkupElement:
    """An element node.

    Attributes:
        tag: Qualified tag name (``prefix:local`` when prefixed)
        attributes: Attribute (name, value) pairs in document order
        children: Child nodes in document order
    """
    tag: str
    attributes: List[Tuple[str, str]] = field(default_factory=list)
    children: List['MarkupNode'] = field(default_factory=list)

    def element_children(self) -> List['MarkupElement']:
        """Return only the element-kind children, in document order."""
        return [child for child in self.children if isinstance(child, MarkupElement)]


MarkupNode = Union[MarkupElement, MarkupText, MarkupOther]
