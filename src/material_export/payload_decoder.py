"""Decoding of embedded plugin-content payloads.

A material's ``parameters/plugin-content`` field may carry a secondary JSON
document shaped as::

    <6-character marker><1 separator character><base64(utf-8(json))>

The marker's content is not interpreted; exactly seven leading characters are
dropped before decoding.
"""

import base64
import binascii
import json
from typing import Any, Optional

from src.markup_converter.models import JsonValue

from .errors import PayloadDecodeError
from .models import PayloadDecodeResult

MARKER_LENGTH = 6
PREFIX_LENGTH = MARKER_LENGTH + 1


def find_plugin_content(value: JsonValue) -> Optional[str]:
    """Return ``value.parameters.plugin-content`` if it is a string.

    Any other shape along the path (missing keys, arrays, text-collapsed
    elements, nested objects at the leaf) means there is no payload.
    """
    if not isinstance(value, dict):
        return None
    parameters = value.get("parameters")
    if not isinstance(parameters, dict):
        return None
    raw = parameters.get("plugin-content")
    if not isinstance(raw, str):
        return None
    return raw


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


def decode_plugin_content(raw: str) -> PayloadDecodeResult:
    """Decode one plugin-content string.

    Strings of MARKER_LENGTH characters or fewer are skipped without any
    decoding attempt. Otherwise the first PREFIX_LENGTH characters are
    dropped and the remainder is decoded as base64, then strict UTF-8, then
    JSON. Whitespace inside the base64 text is ignored; the alphabet and
    padding are checked strictly.

    Args:
        raw: Raw plugin-content string

    Returns:
        PayloadDecodeResult describing success, failure or skip
    """
    if len(raw) <= MARKER_LENGTH:
        return PayloadDecodeResult(skipped=True)

    encoded = "".join(raw[PREFIX_LENGTH:].split())

    try:
        decoded_bytes = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        return PayloadDecodeResult(error=PayloadDecodeError(f"invalid base64: {e}"))

    try:
        decoded_text = decoded_bytes.decode("utf-8")
    except UnicodeDecodeError as e:
        return PayloadDecodeResult(error=PayloadDecodeError(f"invalid UTF-8: {e}"))

    try:
        content = json.loads(decoded_text, parse_constant=_reject_constant)
    except ValueError as e:
        return PayloadDecodeResult(error=PayloadDecodeError(f"invalid JSON: {e}"))

    return PayloadDecodeResult(value=content)
