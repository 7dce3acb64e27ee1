# -*- coding: utf-8 -*-

import asyncio
import math

import pandas as pd

from .core import constants
from .field_coercion import build_ingested_datum, get_ingested_datum_key_value_pair


def _value_or_zero(value):
    """A missing, zero or NaN lookup value is reported as 0."""
    if not value or (isinstance(value, float) and math.isnan(value)):
        return 0
    return value


def build_ingested_row(content_row, headers: list) -> dict:
    """Returns the mapped, type-corrected fields of one content row.

    Columns whose header has no workspace key are dropped, as are positions
    missing from a short row. When two headers share a key the later column wins.
    """
    row = {}
    for header, datum in zip(headers, content_row):
        if datum is None:
            continue
        key, value = get_ingested_datum_key_value_pair(datum, header)
        if key:
            row[key] = value
    return row


def get_consortium(project_id: str) -> str:
    """Returns the consortium display value encoded in a project id, e.g. ``AnVIL_CCDG_WashU`` -> ``CCDG``."""
    segments = project_id.split(constants.PROJECT_ID_DELIMITER)
    consortium = segments[1] if len(segments) > 1 else ""
    return build_ingested_datum(consortium, constants.KEY_CONSORTIUM)


def get_access(project_id: str) -> str:
    if project_id in constants.ALLOW_LIST_WORKSPACE_ACCESS_PUBLIC:
        return constants.ACCESS_PUBLIC
    return constants.ACCESS_PRIVATE


class WorkspaceTransformer:
    """
    Turns content rows of the main workspace export into workspace records.

    :ivar accession_resolver: Resolves a study id to its dbGaP accession.
    :vartype accession_resolver: workspace_ingestion.accession_resolver.AccessionResolver
    :ivar logger: Logger for per-row diagnostics.
    :vartype logger: logging.Logger
    """

    def __init__(self, accession_resolver, logger):
        self.accession_resolver = accession_resolver
        self.logger = logger

    async def build_workspace_row(self, content_row, headers, sample_count_by_project_id, study_id_by_project_id, file_size_by_project_id):
        """
        Returns the ingested workspace for one content row.

        Args:
            content_row (Sequence): Raw field values, aligned to ``headers``.
            headers (list[str]): Header labels of the main export.
            sample_count_by_project_id (dict): Sample count lookup.
            study_id_by_project_id (dict): dbGaP study id lookup.
            file_size_by_project_id (dict): File size lookup.

        Returns:
            dict | None: A new workspace record, or None when the row carries
            no project id.
        """
        row = build_ingested_row(content_row, headers)

        project_id = row.get(constants.KEY_PROJECT_ID)
        if not project_id:
            self.logger.warning(f"Skipping workspace row without a project id: {row}")
            return None

        study_id = study_id_by_project_id.get(project_id)
        derived = {
            constants.KEY_ACCESS: get_access(project_id),
            constants.KEY_CONSORTIUM: get_consortium(project_id),
            constants.KEY_SAMPLES: _value_or_zero(sample_count_by_project_id.get(project_id)),
            constants.KEY_SIZE: _value_or_zero(file_size_by_project_id.get(project_id)),
            constants.KEY_STUDY_ACCESSION: await self.accession_resolver.resolve(study_id),
            constants.KEY_STUDY_ID: study_id,
        }
        return {**row, **derived}

    async def build_workspaces(self, headers, frame: pd.DataFrame, sample_count_by_project_id, study_id_by_project_id, file_size_by_project_id) -> list:
        """Transforms every content row concurrently, keeping the export order."""
        workspaces = await asyncio.gather(*(
            self.build_workspace_row(content_row, headers, sample_count_by_project_id, study_id_by_project_id, file_size_by_project_id)
            for content_row in frame.itertuples(index=False, name=None)
        ))
        return [workspace for workspace in workspaces if workspace is not None]
