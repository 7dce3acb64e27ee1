import logging
from unittest.mock import MagicMock

import pytest

from workspace_ingestion.core import constants

WORKSPACE_ROWS = [
    ["Workspace", "library:datatype.items", "library:indication", "library:dataUseRestriction", "library:numSubjects", "library:projectName"],
    ["AnVIL_GTEx_V8_hg38", "RNA-Seq,WGS", "All", "GRU", "979", "GTEx"],
    ["AnVIL_CCDG_Broad_CVD", "WGS", "Cardiovascular", "DS-CVD,GRU", "1,200", "CCDG Broad"],
    ["1000G-high-coverage-2019", "WGS", "None", "NRES", "2,504", "1000 Genomes"],
    ["AnVIL_CMG_UWash_GRU", "Exome", "Mendelian", "GRU", "40", "CMG"],
]

ACCESSION_ROWS = [
    ["name", "study_accession"],
    ["AnVIL_CCDG_Broad_CVD", "phs001592"],
    ["AnVIL_GTEx_V8_hg38", "phs000424"],
]

COUNTS_ROWS = [
    ["Workspace", "Sample Count"],
    ["AnVIL_GTEx_V8_hg38", "17,382"],
    ["AnVIL_CCDG_Broad_CVD", "1,000"],
    ["AnVIL_GTEx_V8_hg38", "17,383"],
]

FILE_SIZE_ROWS = [
    ["Workspace", "File Size"],
    ["AnVIL_CCDG_Broad_CVD", "123,456,789"],
    ["1000G-high-coverage-2019", "0"],
]


def to_tsv(rows):
    """Joins rows into TSV text with CRLF line endings, as the exporter writes them."""
    return "\r\n".join("\t".join(row) for row in rows)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def write_tsv(tmp_path):
    """
    Returns a function that writes rows as a CRLF TSV file under tmp_path.

    Usage: write_tsv("file.tsv", [["h1", "h2"], ["a", "b"]]) -> Path
    """
    def _write(file_name, rows, trailing_newline=False):
        content = to_tsv(rows)
        if trailing_newline:
            content += "\r\n"
        path = tmp_path / file_name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def data_dir(tmp_path, write_tsv):
    """A data directory holding all four exports."""
    write_tsv(constants.FILE_ANVIL_DATA_INGESTION, WORKSPACE_ROWS, trailing_newline=True)
    write_tsv(constants.FILE_ANVIL_DATA_INGESTION_ACCESSION, ACCESSION_ROWS)
    write_tsv(constants.FILE_TERRA_DATA_INGESTION_COUNTS, COUNTS_ROWS)
    write_tsv(constants.FILE_TERRA_DATA_INGESTION_FILE_SIZE, FILE_SIZE_ROWS)
    return tmp_path
