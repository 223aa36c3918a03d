"""Structured markup parsing using lxml.

This module parses a markup string into the MarkupNode variant tree used by
the JSON converter. The lxml parser is configured so that documents cannot
pull in external resources; only entities declared in the document are
expanded.
"""

import logging
from typing import Dict, Optional, Union

from lxml import etree

from .errors import ParseError
from .models import MarkupElement, MarkupNode, MarkupOther, MarkupText

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


class MarkupParser:
    """Parses well-formed markup into a MarkupElement tree.

    Uses lxml with external entities, DTD loading and network access
    disabled to prevent XML External Entity (XXE) attacks. Internal entities
    are expanded in place. CDATA sections are merged into the surrounding
    text.

    Example:
        >>> parser = MarkupParser()
        >>> root = parser.parse('<material name="steel"/>')
        >>> root.attributes
        [('name', 'steel')]
    """

    def _make_parser(self, encoding: Optional[str] = None) -> etree.XMLParser:
        # strip_cdata merges CDATA into text, so a CDATA-only element collapses
        # to its string instead of keeping just its attributes.
        return etree.XMLParser(
            encoding=encoding,
            resolve_entities="internal",
            no_network=True,
            load_dtd=False,
            huge_tree=False,
            remove_blank_text=False,
            strip_cdata=True,
        )

    def parse(self, markup: Union[str, bytes]) -> MarkupElement:
        """Parse markup and return its root element.

        Text input is re-encoded as UTF-8 and parsed with the encoding forced,
        so a declaration such as ``encoding="utf-16"`` on an already-decoded
        string does not trip the parser. Bytes are parsed as-is and may carry
        any declared encoding.

        Args:
            markup: Markup document as text or bytes

        Returns:
            Root MarkupElement of the document

        Raises:
            ParseError: If the document is empty or not well-formed
        """
        if isinstance(markup, str):
            data = markup.encode("utf-8")
            parser = self._make_parser(encoding="utf-8")
        else:
            data = markup
            parser = self._make_parser()

        if not data.strip():
            raise ParseError("document is empty")

        try:
            root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as e:
            raise ParseError(str(e)) from e
        except (ValueError, LookupError) as e:
            # Unknown or inconsistent encoding declarations end up here
            raise ParseError(str(e)) from e

        logger.debug(f"Parsed markup with root element <{root.tag}>")
        return self._build_element(root)

    def _build_element(self, element: etree._Element) -> MarkupElement:
        node = MarkupElement(tag=self._qualified_tag(element))

        prefixes = self._prefixes_by_uri(element)
        for name, value in element.attrib.items():
            node.attributes.append((self._qualified_attribute(name, prefixes), value))

        if element.text is not None:
            node.children.append(MarkupText(element.text))

        for child in element:
            node.children.append(self._build_child(child))
            if child.tail is not None:
                node.children.append(MarkupText(child.tail))

        return node

    def _build_child(self, child: etree._Element) -> MarkupNode:
        if child.tag is etree.Comment:
            return MarkupOther("comment")
        if child.tag is etree.ProcessingInstruction:
            return MarkupOther("processing-instruction")
        if child.tag is etree.Entity:
            return MarkupOther("entity")
        return self._build_element(child)

    @staticmethod
    def _prefixes_by_uri(element: etree._Element) -> Dict[str, str]:
        prefixes = {uri: prefix for prefix, uri in element.nsmap.items() if prefix}
        prefixes[XML_NAMESPACE] = "xml"
        return prefixes

    @staticmethod
    def _qualified_tag(element: etree._Element) -> str:
        local_name = etree.QName(element).localname
        if element.prefix:
            return f"{element.prefix}:{local_name}"
        return local_name

    @staticmethod
    def _qualified_attribute(name: str, prefixes: Dict[str, str]) -> str:
        # lxml reports namespaced attributes in Clark notation: {uri}local
        if not name.startswith("{"):
            return name
        qname = etree.QName(name)
        prefix = prefixes.get(qname.namespace)
        if prefix:
            return f"{prefix}:{qname.localname}"
        return qname.localname
