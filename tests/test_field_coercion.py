# tests/test_field_coercion.py
import math

import pytest

from workspace_ingestion.field_coercion import (
    build_ingested_datum,
    format_consortium,
    get_ingested_datum_key_value_pair,
    to_number,
)


# --- Numbers ---

@pytest.mark.parametrize("key", ["size", "samples", "subjects"])
def test_number_fields_strip_thousands_separators(key):
    assert build_ingested_datum("1,234", key) == 1234
    assert isinstance(build_ingested_datum("1,234", key), int)


def test_number_field_keeps_fraction():
    assert build_ingested_datum("1,234.5", "size") == 1234.5


def test_number_field_empty_is_zero():
    assert build_ingested_datum("", "samples") == 0


def test_number_field_non_numeric_is_nan():
    # Not validated: bad numeric content surfaces as NaN.
    assert math.isnan(build_ingested_datum("n/a", "subjects"))


def test_to_number_edge_forms():
    assert to_number("  42 ") == 42
    assert to_number("1e3") == 1000
    assert isinstance(to_number("1e3"), int)
    assert to_number("-0.25") == -0.25
    assert math.isnan(to_number("12 GB"))


def test_number_field_non_ascii_digits_are_nan():
    assert math.isnan(build_ingested_datum("١٢٣", "samples"))
    assert math.isnan(to_number("１２３"))


# --- Arrays ---

def test_array_field_splits_on_comma():
    assert build_ingested_datum("a,b,c", "dataTypes") == ["a", "b", "c"]


def test_array_field_singular_value_is_still_a_list():
    assert build_ingested_datum("GRU", "consentShortNames") == ["GRU"]
    assert build_ingested_datum("", "diseases") == [""]


# --- Consortium ---

def test_consortium_display_value():
    assert build_ingested_datum("gtex", "consortium") == "GTEx (v8)"
    assert build_ingested_datum("emerge", "consortium") == "eMERGE"
    assert format_consortium("thousandgenomes") == "1000 Genomes"


def test_unknown_consortium_passes_through_upper_cased():
    assert build_ingested_datum("newnet", "consortium") == "NEWNET"


# --- Plain text ---

def test_other_fields_pass_through_unchanged():
    assert build_ingested_datum("AnVIL_CCDG_Broad_CVD", "projectId") == "AnVIL_CCDG_Broad_CVD"
    assert build_ingested_datum("1,234", None) == "1,234"


def test_key_value_pair_maps_header_to_canonical_key():
    assert get_ingested_datum_key_value_pair("1,000", "Sample Count") == ("samples", 1000)
    assert get_ingested_datum_key_value_pair("x", "Workspace") == ("projectId", "x")
    assert get_ingested_datum_key_value_pair("x", "name") == ("projectId", "x")


def test_unmapped_header_has_no_key():
    key, value = get_ingested_datum_key_value_pair("CCDG Broad", "library:projectName")
    assert key is None
    assert value == "CCDG Broad"
