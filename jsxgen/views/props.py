"""Formatting of prop values as attributes and inline text."""

from __future__ import annotations

import math
from decimal import Decimal

from ..models import Asset, Bool, Content, ContentField, Num, PropValue, Str, Var
from .resolver import RecordContext, Resolver


def format_number(value: float) -> str:
    """Render a number in plain decimal notation: ``5``, ``0.5``, ``0.0000001``.

    Integral values drop the fraction. Other values keep the shortest digits
    that round-trip, never in exponent form. Non-finite values render as
    ``NaN``, ``inf`` and ``-inf``.
    """
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)), "f")


def _quoted(key: str, text: str) -> str:
    return f'{key}="{text}"'


def _braced(key: str, expression: str) -> str:
    return f"{key}={{{expression}}}"


def format_attribute(key: str, value: PropValue, resolver: Resolver, record: RecordContext) -> str:
    """Return ``key=...`` for a single prop."""
    if isinstance(value, Str):
        return _quoted(key, value.text)
    if isinstance(value, Num):
        return _braced(key, format_number(value.value))
    if isinstance(value, Bool):
        return key if value.value else _braced(key, "false")
    if isinstance(value, Var):
        return _braced(key, value.name)
    if isinstance(value, Asset):
        reference = resolver.asset_reference(value.name)
        if reference.is_literal:
            return _quoted(key, reference.value)
        return _braced(key, reference.value)
    if isinstance(value, Content):
        return _quoted(key, resolver.content_text(value.name) or "")
    if isinstance(value, ContentField):
        return _quoted(key, resolver.record_field(record, value.name) or "")
    raise TypeError(f"Unsupported prop value: {value!r}")


def format_text(value: PropValue, resolver: Resolver, record: RecordContext) -> str:
    """Return the inline text a ``text`` prop contributes to its element."""
    if isinstance(value, Str):
        return value.text
    if isinstance(value, Num):
        return format_number(value.value)
    if isinstance(value, Bool):
        return "true" if value.value else "false"
    if isinstance(value, Var):
        return f"{{{value.name}}}"
    if isinstance(value, Asset):
        reference = resolver.asset_reference(value.name)
        if reference.is_literal:
            return reference.value
        return f"{{{reference.value}}}"
    if isinstance(value, Content):
        return resolver.content_text(value.name) or ""
    if isinstance(value, ContentField):
        return resolver.record_field(record, value.name) or ""
    raise TypeError(f"Unsupported prop value: {value!r}")


__all__ = ["format_attribute", "format_number", "format_text"]
