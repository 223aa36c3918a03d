"""Material export assembly.

This module drives markup conversion over a collection of materials, inlines
embedded plugin-content payloads and serializes the result to a single
pretty-printed JSON array.
"""

import json
import logging
from typing import Iterable, List, Optional, Tuple, Union

from src.markup_converter.errors import ParseError
from src.markup_converter.json_converter import StructuredMarkupToJsonConverter

from .errors import SerializationError
from .models import MaterialRecord, PayloadDiagnostic
from .payload_decoder import decode_plugin_content, find_plugin_content

logger = logging.getLogger(__name__)

Material = Tuple[str, Union[str, bytes]]


class MaterialExportAssembler:
    """Assembles material records and serializes them to JSON.

    Materials are processed strictly in input order. A malformed markup
    document aborts the whole export; a malformed embedded payload only
    drops ``plugin-content`` from that one record and is recorded in
    ``diagnostics``.

    Create a fresh assembler per export; ``diagnostics`` is reset at the
    start of every call.

    Attributes:
        converter: Converter used for each material's markup
        indent: Indentation width of the serialized output
        ensure_ascii: Escape non-ASCII characters in the output
        diagnostics: Payload failures recovered during the last call

    Example:
        >>> assembler = MaterialExportAssembler()
        >>> text = assembler.assemble([("Steel", "<material type='metal'/>")])
    """

    def __init__(
        self,
        converter: Optional[StructuredMarkupToJsonConverter] = None,
        indent: int = 2,
        ensure_ascii: bool = False,
    ):
        self.converter = converter or StructuredMarkupToJsonConverter()
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.diagnostics: List[PayloadDiagnostic] = []

    def assemble(self, materials: Iterable[Material]) -> str:
        """Convert all materials and return the pretty-printed JSON array.

        Args:
            materials: (name, markup) pairs, in output order

        Returns:
            JSON text of the full record sequence

        Raises:
            ParseError: If any material's markup is not well-formed
            SerializationError: If the records cannot be serialized
        """
        records = self.build_records(materials)
        return self.serialize(records)

    def build_records(self, materials: Iterable[Material]) -> List[MaterialRecord]:
        """Convert all materials into MaterialRecords without serializing.

        Raises:
            ParseError: If any material's markup is not well-formed
        """
        self.diagnostics = []
        records: List[MaterialRecord] = []

        for name, markup in materials:
            records.append(self._build_record(name, markup))

        logger.info(
            f"Assembled {len(records)} material(s), "
            f"{len(self.diagnostics)} payload diagnostic(s)"
        )
        return records

    def serialize(self, records: List[MaterialRecord]) -> str:
        """Serialize records to an indented JSON array.

        Raises:
            SerializationError: If a value cannot be represented as JSON
        """
        try:
            return json.dumps(
                [record.as_dict() for record in records],
                indent=self.indent,
                ensure_ascii=self.ensure_ascii,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(str(e)) from e

    def _build_record(self, name: str, markup: Union[str, bytes]) -> MaterialRecord:
        try:
            value = self.converter.convert(markup)
        except ParseError as e:
            raise ParseError(e.original_message, material_name=name) from e

        record = MaterialRecord(name=name, value=value)

        raw = find_plugin_content(value)
        if raw is None:
            return record

        result = decode_plugin_content(raw)
        if result.skipped:
            logger.debug(f"plugin-content of material {name} too short to decode, skipping")
        elif result.ok:
            record.attach_plugin_content(result.value)
            logger.debug(f"Inlined plugin-content for material {name}")
        else:
            message = result.error.original_message
            self.diagnostics.append(PayloadDiagnostic(material_name=name, message=message))
            logger.warning(f"Error processing material {name}: {message}")

        return record
