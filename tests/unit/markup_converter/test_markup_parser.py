"""Unit tests for markup_converter.markup_parser module.

Covers the node tree produced from lxml and the hardened parser settings.
"""

import pytest

from src.markup_converter.errors import ExportError, ParseError
from src.markup_converter.markup_parser import MarkupParser
from src.markup_converter.models import MarkupElement, MarkupOther, MarkupText


@pytest.fixture
def parser():
    """Create a MarkupParser instance."""
    return MarkupParser()


class TestNodeTree:
    """Test cases for the MarkupNode tree built from markup."""

    def test_root_element(self, parser):
        """The root element carries its tag and attributes."""
        root = parser.parse('<material name="steel" kind="metal"/>')
        assert isinstance(root, MarkupElement)
        assert root.tag == "material"
        assert root.attributes == [("name", "steel"), ("kind", "metal")]
        assert root.children == []

    def test_text_child(self, parser):
        """Text content becomes a MarkupText child."""
        root = parser.parse('<x>hi</x>')
        assert root.children == [MarkupText("hi")]

    def test_children_in_document_order(self, parser):
        """Text, elements and tails appear in document order."""
        root = parser.parse('<x>a<y/>b<z/></x>')
        assert root.children == [
            MarkupText("a"),
            MarkupElement(tag="y"),
            MarkupText("b"),
            MarkupElement(tag="z"),
        ]

    def test_element_children_filter(self, parser):
        """element_children() skips text and other nodes."""
        root = parser.parse('<x>a<y/><!--c--><z/></x>')
        assert [child.tag for child in root.element_children()] == ["y", "z"]

    def test_comment_and_pi_become_other_nodes(self, parser):
        """Comments and processing instructions are kept as MarkupOther."""
        root = parser.parse('<x><!--c--><?pi data?></x>')
        assert root.children == [
            MarkupOther("comment"),
            MarkupOther("processing-instruction"),
        ]

    def test_default_namespace_uses_local_name(self, parser):
        """Elements in a default namespace are reported by local name."""
        root = parser.parse('<x xmlns="urn:default"><y/></x>')
        assert root.tag == "x"
        assert root.element_children()[0].tag == "y"

    def test_xml_namespace_attribute(self, parser):
        """xml:-prefixed attributes keep their prefix."""
        root = parser.parse('<x xml:lang="en"/>')
        assert root.attributes == [("xml:lang", "en")]

    def test_namespace_declarations_are_not_attributes(self, parser):
        """xmlns declarations do not appear as attributes."""
        root = parser.parse('<x xmlns:m="urn:m" a="1"/>')
        assert root.attributes == [("a", "1")]


class TestInputEncodings:
    """Test cases for text and byte input."""

    def test_string_with_encoding_declaration(self, parser):
        """Decoded text that declares an encoding still parses."""
        root = parser.parse('<?xml version="1.0" encoding="utf-16"?><x>ok</x>')
        assert root.children == [MarkupText("ok")]

    def test_utf8_bytes(self, parser):
        """UTF-8 bytes parse."""
        root = parser.parse('<x>é</x>'.encode("utf-8"))
        assert root.children == [MarkupText("é")]

    def test_utf16_bytes_with_declaration(self, parser):
        """UTF-16 bytes with BOM and declaration parse."""
        data = '<?xml version="1.0" encoding="utf-16"?><x>ω</x>'.encode("utf-16")
        root = parser.parse(data)
        assert root.children == [MarkupText("ω")]


class TestParseErrors:
    """Test cases for malformed input."""

    @pytest.mark.parametrize("markup", [
        "",
        "   \n",
        "<x>",
        "<x></y>",
        "not markup",
        "<x/><y/>",
        '<x a="1" a="2"/>',
    ])
    def test_malformed_raises_parse_error(self, parser, markup):
        """Malformed documents raise ParseError."""
        with pytest.raises(ParseError):
            parser.parse(markup)

    def test_parse_error_is_export_error(self, parser):
        """ParseError can be caught as ExportError."""
        with pytest.raises(ExportError):
            parser.parse("<x>")

    def test_parse_error_message(self, parser):
        """ParseError message describes the failure."""
        with pytest.raises(ParseError) as exc_info:
            parser.parse("")
        assert "document is empty" in str(exc_info.value)
        assert exc_info.value.material_name is None


class TestParserSecurity:
    """Test cases for parser hardening against entity attacks."""

    def test_external_entity_not_resolved(self, parser):
        """External entities are never loaded from the filesystem."""
        xxe_payload = """<?xml version="1.0"?>
<!DOCTYPE foo [
<!ENTITY xxe SYSTEM "file:///etc/passwd">
]>
<x>&xxe;</x>
"""
        root = parser.parse(xxe_payload)
        texts = [c.content for c in root.children if isinstance(c, MarkupText)]
        assert not any("root:" in text for text in texts)

    def test_internal_entity_expanded(self, parser):
        """Entities declared in the internal subset are expanded in place."""
        markup = """<?xml version="1.0"?>
<!DOCTYPE lolz [
<!ENTITY lol "lol">
<!ENTITY lol2 "&lol;&lol;&lol;">
]>
<x>&lol2;</x>
"""
        root = parser.parse(markup)
        assert root.children == [MarkupText("lollollol")]

    def test_exponential_entity_expansion_bounded(self, parser):
        """Billion-laughs style documents never expand without limit."""
        levels = ['<!ENTITY lol0 "lololololololololol">']
        for i in range(1, 10):
            refs = f"&lol{i - 1};" * 10
            levels.append(f'<!ENTITY lol{i} "{refs}">')
        billion_laughs = (
            '<?xml version="1.0"?>\n<!DOCTYPE lolz [\n'
            + "\n".join(levels)
            + "\n]>\n<x>&lol9;</x>\n"
        )
        try:
            root = parser.parse(billion_laughs)
        except ParseError:
            return
        texts = [c.content for c in root.children if isinstance(c, MarkupText)]
        assert len("".join(texts)) < 10_000_000
