"""Type inference for Kijiji ad attributes.

The API sends every attribute value as text. The type is inferred from the
markup around it, trying each decoder in turn:

  boolean – a localized "Yes"/"No" label on the attribute or its value
  date    – type="DATE" on the attribute
  number  – the whole value is a decimal number (int unless it has a
            fractional part or exponent)
  string  – anything else

An attribute with no <attr:value> child is ABSENT.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum
from typing import NamedTuple

from bs4 import Tag

from ..helpers import parse_iso_datetime
from ..schemas import AttributeValue
from .tags import find_tag

VALUE_TAG = "attr:value"

_BOOLEAN_LABELS = {"yes": True, "no": False}
_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")


class AttributeKind(str, Enum):
    ABSENT = "absent"
    BOOLEAN = "boolean"
    DATE = "date"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"


class DecodedValue(NamedTuple):
    kind: AttributeKind
    value: AttributeValue


Decoder = Callable[[Tag, Tag], DecodedValue | None]


def _value_text(value: Tag) -> str:
    return value.get_text().strip()


def decode_boolean(node: Tag, value: Tag) -> DecodedValue | None:
    # The attribute's own label is usually its display name ("Pet Friendly"),
    # so the value's label is checked too.
    for el in (node, value):
        label = el.get("localized-label")
        if not isinstance(label, str):
            continue
        flag = _BOOLEAN_LABELS.get(label.strip().lower())
        if flag is not None:
            return DecodedValue(AttributeKind.BOOLEAN, flag)
    return None


def decode_date(node: Tag, value: Tag) -> DecodedValue | None:
    attr_type = node.get("type")
    if not isinstance(attr_type, str) or attr_type.upper() != "DATE":
        return None
    dt = parse_iso_datetime(_value_text(value))
    if dt is None:
        return None
    return DecodedValue(AttributeKind.DATE, dt)


def decode_number(node: Tag, value: Tag) -> DecodedValue | None:
    text = _value_text(value)
    if _INT_RE.fullmatch(text):
        return DecodedValue(AttributeKind.INTEGER, int(text))
    if _FLOAT_RE.fullmatch(text):
        return DecodedValue(AttributeKind.FLOAT, float(text))
    return None


def decode_string(node: Tag, value: Tag) -> DecodedValue:
    return DecodedValue(AttributeKind.STRING, _value_text(value))


# Order matters: label/type markers win over whatever the value text looks like.
DECODERS: tuple[Decoder, ...] = (decode_boolean, decode_date, decode_number)


def decode_attribute(node: Tag) -> DecodedValue:
    """Decode one <attr:attribute> element into a typed value."""
    value = find_tag(node, VALUE_TAG)
    if value is None:
        return DecodedValue(AttributeKind.ABSENT, None)

    for decoder in DECODERS:
        decoded = decoder(node, value)
        if decoded is not None:
            return decoded
    return decode_string(node, value)
