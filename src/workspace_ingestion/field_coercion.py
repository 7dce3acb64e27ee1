# -*- coding: utf-8 -*-
"""Type rules applied to every ingested datum, keyed by canonical field name."""

import math

import pandas as pd

from .core import constants


def to_number(text: str):
    """Converts export text to a number, the way the dashboard expects it.

    Surrounding whitespace is ignored and an empty value counts as 0.
    Integral values come back as ``int``, other numerics as ``float``;
    anything that is not numeric becomes ``NaN``.
    """
    text = text.strip()
    if not text:
        return 0
    # Only ASCII digits count as numeric.
    if not text.isascii():
        return math.nan

    value = pd.to_numeric(text, errors='coerce')
    if pd.isna(value):
        return math.nan
    if hasattr(value, "item"):
        value = value.item()
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def format_consortium(datum: str) -> str:
    """Returns the display value for a consortium code, e.g. ``gtex`` -> ``GTEx (v8)``."""
    consortium = datum.upper()
    return constants.WORKSPACE_CONSORTIUM_DISPLAY_VALUE.get(consortium, consortium)


def format_ingested_datum(datum: str, key):
    if key == constants.KEY_CONSORTIUM:
        return format_consortium(datum)
    return datum


def build_ingested_datum(datum: str, key):
    """
    Returns the ingested datum, corrected for type.

    Args:
        datum (str): Raw text of one TSV field.
        key (str | None): Canonical field name the datum is stored under.

    Returns:
        list[str] for array fields, a number for numeric fields, otherwise
        the (possibly reformatted) text.
    """
    value = format_ingested_datum(datum, key)

    if key in constants.ALLOW_LIST_WORKSPACE_FIELD_ARRAY:
        return value.split(constants.ARRAY_DELIMITER)

    if key in constants.ALLOW_LIST_WORKSPACE_FIELD_NUMBER:
        return to_number(value.replace(",", ""))

    return value


def get_ingested_datum_key_value_pair(datum: str, header: str):
    """Returns the canonical key for ``header`` (None if unmapped) and the coerced datum."""
    key = constants.HEADERS_TO_WORKSPACE_KEY.get(header)
    value = build_ingested_datum(datum, key)
    return key, value
