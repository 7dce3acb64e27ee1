# -*- coding: utf-8 -*-

"""
Core constants module

Central home for the fixed tables used across the ingestion pipeline:
input file names, the field dictionary, allow-lists and display values.
Every table here is read-only and built once at import time.
"""

from types import MappingProxyType

# --- Input files ---
# Default names of the TSV exports read from the data directory.

FILE_ANVIL_DATA_INGESTION = "anvil-data-ingestion-attributes.tsv"
"""Main workspace export, one row per workspace."""

FILE_ANVIL_DATA_INGESTION_ACCESSION = "anvil-data-ingestion-attributes-accession.tsv"
"""Project id to dbGaP study id cross-reference."""

FILE_TERRA_DATA_INGESTION_COUNTS = "terra-data-ingestion-attributes-counts.tsv"
"""Sample count by workspace."""

FILE_TERRA_DATA_INGESTION_FILE_SIZE = "terra-data-ingestion-attributes-file-size.tsv"
"""Aggregate file size by workspace."""

CONFIG_FILE = "config.yaml"
DATA_DIR = "data"
LOG_DIR = "logs"
LOG_NAME = "workspace_ingestion.log"
DEFAULT_TIMEZONE = "UTC"

# --- TSV format ---
LINE_TERMINATOR = "\r\n"
FIELD_DELIMITER = "\t"
ARRAY_DELIMITER = ","
PROJECT_ID_DELIMITER = "_"

# --- Field dictionary ---

ALLOW_LIST_WORKSPACE_FIELD_ARRAY = frozenset(["consentShortNames", "dataTypes", "diseases"])
ALLOW_LIST_WORKSPACE_FIELD_NUMBER = frozenset(["size", "samples", "subjects"])
ALLOW_LIST_WORKSPACE_ACCESS_PUBLIC = frozenset(["1000G-high-coverage-2019"])

ACCESS_PUBLIC = "Public"
ACCESS_PRIVATE = "Private"

WORKSPACE_CONSORTIUM_DISPLAY_VALUE = MappingProxyType({
    "CCDG": "CCDG",
    "CMG": "CMG",
    "EMERGE": "eMERGE",
    "GTEX": "GTEx (v8)",
    "NHGRI": "NHGRI",
    "PAGE": "PAGE",
    "THOUSANDGENOMES": "1000 Genomes",
})

# Logical column name -> header label used in the exports.
INGESTION_HEADERS_TO_WORKSPACE_KEY = MappingProxyType({
    "CONSENT_SHORT_NAMES": "library:dataUseRestriction",
    "DATA_TYPES": "library:datatype.items",
    "DB_GAP_ID": "study_accession",
    "DISEASES": "library:indication",
    "PROJECT_ID": "name",
    "LIBRARY_PROJECT_NAME": "library:projectName",
    "SAMPLES": "Sample Count",
    "SIZE": "File Size",
    "SUBJECTS": "library:numSubjects",
    "WORKSPACE": "Workspace",
})

# Header label -> canonical workspace field. Headers missing here are dropped.
HEADERS_TO_WORKSPACE_KEY = MappingProxyType({
    "ACCESS": "access",
    INGESTION_HEADERS_TO_WORKSPACE_KEY["CONSENT_SHORT_NAMES"]: "consentShortNames",
    "CONSORTIUM": "consortium",
    INGESTION_HEADERS_TO_WORKSPACE_KEY["DATA_TYPES"]: "dataTypes",
    INGESTION_HEADERS_TO_WORKSPACE_KEY["DB_GAP_ID"]: "dbGapId",
    "DB_GAP_ID_ACCESSION": "dbGapIdAccession",
    INGESTION_HEADERS_TO_WORKSPACE_KEY["DISEASES"]: "diseases",
    INGESTION_HEADERS_TO_WORKSPACE_KEY["PROJECT_ID"]: "projectId",
    INGESTION_HEADERS_TO_WORKSPACE_KEY["SAMPLES"]: "samples",
    INGESTION_HEADERS_TO_WORKSPACE_KEY["SIZE"]: "size",
    INGESTION_HEADERS_TO_WORKSPACE_KEY["SUBJECTS"]: "subjects",
    INGESTION_HEADERS_TO_WORKSPACE_KEY["WORKSPACE"]: "projectId",
})

# Canonical keys of the fields derived by the row transformer
KEY_ACCESS = HEADERS_TO_WORKSPACE_KEY["ACCESS"]
KEY_CONSORTIUM = HEADERS_TO_WORKSPACE_KEY["CONSORTIUM"]
KEY_PROJECT_ID = HEADERS_TO_WORKSPACE_KEY[INGESTION_HEADERS_TO_WORKSPACE_KEY["PROJECT_ID"]]
KEY_SAMPLES = HEADERS_TO_WORKSPACE_KEY[INGESTION_HEADERS_TO_WORKSPACE_KEY["SAMPLES"]]
KEY_SIZE = HEADERS_TO_WORKSPACE_KEY[INGESTION_HEADERS_TO_WORKSPACE_KEY["SIZE"]]
KEY_STUDY_ACCESSION = HEADERS_TO_WORKSPACE_KEY["DB_GAP_ID_ACCESSION"]
KEY_STUDY_ID = HEADERS_TO_WORKSPACE_KEY[INGESTION_HEADERS_TO_WORKSPACE_KEY["DB_GAP_ID"]]

# Keys for the execution summary report
KEY_STATUS = "status"
KEY_FILE = "file"
KEY_COUNT = "count"
KEY_MISSING_FILES = "missing_files"

# Status values
STATUS_SUCCESS = "SUCCESS"
STATUS_FAILURE = "FAILURE"
STATUS_PARTIAL_SUCCESS = "PARTIAL_SUCCESS"
