# -*- coding: utf-8 -*-

import pandas as pd

from .core import constants
from .field_coercion import get_ingested_datum_key_value_pair


def is_header_key_or_value(header: str, key_pair: str, value_pair: str) -> bool:
    """Returns True if the header is the export label of either logical column."""
    key_exists = header == constants.INGESTION_HEADERS_TO_WORKSPACE_KEY[key_pair]
    value_exists = header == constants.INGESTION_HEADERS_TO_WORKSPACE_KEY[value_pair]
    return key_exists or value_exists


def to_workspace_key(logical_name: str) -> str:
    """Maps a logical column name (e.g. ``SAMPLES``) to its canonical field (``samples``)."""
    return constants.HEADERS_TO_WORKSPACE_KEY[constants.INGESTION_HEADERS_TO_WORKSPACE_KEY[logical_name]]


def build_key_value_pair(headers: list, frame: pd.DataFrame, key_pair: str, value_pair: str) -> dict:
    """
    Returns a lookup from ingested data, specified by key and value column.

    Args:
        headers (list[str]): Header labels of the export.
        frame (pd.DataFrame): Content rows, positional columns aligned to ``headers``.
        key_pair (str): Logical name of the key column, e.g. ``WORKSPACE``.
        value_pair (str): Logical name of the value column, e.g. ``SAMPLES``.

    Returns:
        dict: One entry per content row; a later row wins on a repeated key.
        A row missing either column stores ``None`` in its place.
    """
    key_key_pair = to_workspace_key(key_pair)
    key_value_pair = to_workspace_key(value_pair)

    lookup = {}
    for content_row in frame.itertuples(index=False, name=None):
        row = {}
        for header, datum in zip(headers, content_row):
            if datum is None or not is_header_key_or_value(header, key_pair, value_pair):
                continue
            key, value = get_ingested_datum_key_value_pair(datum, header)
            row[key] = value
        lookup[row.get(key_key_pair)] = row.get(key_value_pair)
    return lookup


class LookupBuilder:
    """Builds the three project id lookups from the auxiliary exports."""

    def __init__(self, file_reader, logger, files_config: dict = None):
        self.file_reader = file_reader
        self.logger = logger
        files_config = files_config or {}
        self.accession_file = files_config.get("accession", constants.FILE_ANVIL_DATA_INGESTION_ACCESSION)
        self.counts_file = files_config.get("counts", constants.FILE_TERRA_DATA_INGESTION_COUNTS)
        self.file_size_file = files_config.get("file_size", constants.FILE_TERRA_DATA_INGESTION_FILE_SIZE)

    def _build(self, file_name: str, key_pair: str, value_pair: str) -> dict:
        headers, frame = self.file_reader.read_table(file_name)
        lookup = build_key_value_pair(headers, frame, key_pair, value_pair)
        self.logger.info(f"Built {value_pair} by {key_pair} lookup from '{file_name}': {len(lookup)} entries.")
        return lookup

    def get_study_id_by_project_id(self) -> dict:
        return self._build(self.accession_file, "PROJECT_ID", "DB_GAP_ID")

    def get_sample_count_by_project_id(self) -> dict:
        return self._build(self.counts_file, "WORKSPACE", "SAMPLES")

    def get_file_size_by_project_id(self) -> dict:
        return self._build(self.file_size_file, "WORKSPACE", "SIZE")
