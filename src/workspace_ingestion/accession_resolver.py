# -*- coding: utf-8 -*-
"""
Study accession resolvers.

The dashboard shows a dbGaP accession (e.g. ``phs000693.v1.p1``) next to each
study id. Fetching it is the job of an external service; the pipeline only
depends on the ``AccessionResolver`` contract below. Two in-process
resolvers are provided: one that knows nothing and one backed by a YAML map.
"""

import abc
import os

import yaml


class AccessionResolver(abc.ABC):
    """Resolves a study id to its accession, asynchronously."""

    @abc.abstractmethod
    async def resolve(self, study_id):
        """Returns the accession for ``study_id``, or None if it is unknown."""


class NullAccessionResolver(AccessionResolver):
    async def resolve(self, study_id):
        return None


class StaticAccessionResolver(AccessionResolver):
    """
    Resolver backed by a fixed study id -> accession mapping.

    A ``None`` study id (project id absent from the accession export)
    resolves to None without consulting the mapping.
    """

    def __init__(self, accessions: dict, logger=None):
        self._accessions = {str(k): str(v) for k, v in (accessions or {}).items()}
        self.logger = logger

    def __len__(self):
        return len(self._accessions)

    async def resolve(self, study_id):
        if study_id is None:
            return None
        accession = self._accessions.get(str(study_id))
        if accession is None and self.logger:
            self.logger.debug(f"No accession found for study id '{study_id}'.")
        return accession

    @classmethod
    def from_yaml(cls, file_path: str, logger):
        """
        Loads the mapping from a YAML file of ``study_id: accession`` pairs.

        A missing file logs a warning and an unparsable one logs an error;
        both give an empty resolver.
        """
        if not os.path.exists(file_path):
            logger.warning(f"Accessions file '{file_path}' not found. Study accessions will be empty.")
            return cls({}, logger)
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                accessions = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse accessions file '{file_path}': {e}")
            return cls({}, logger)
        if not isinstance(accessions, dict):
            logger.error(f"Accessions file '{file_path}' must contain a mapping, got {type(accessions).__name__}.")
            return cls({}, logger)
        resolver = cls(accessions, logger)
        logger.info(f"Loaded {len(resolver)} study accession(s) from '{file_path}'.")
        return resolver
