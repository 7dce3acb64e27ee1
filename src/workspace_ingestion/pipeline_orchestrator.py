import asyncio
import concurrent.futures
import logging
import time
from datetime import datetime

import pytz
import yaml

from .accession_resolver import NullAccessionResolver, StaticAccessionResolver
from .core import constants
from .file_reader import FileReader
from .lookup_builder import LookupBuilder
from .sort_service import sort_data_by_group
from .utils.logger import setup_logger
from .utils.monitor import get_hardware_usage
from .workspace_transformer import WorkspaceTransformer

module_logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """
    Coordinates one run of the workspace ingestion pipeline: build the
    lookups, transform the main export, sort, return.
    """

    def __init__(
        self,
        config_file_path: str = constants.CONFIG_FILE,
        data_dir_override: str = None,
        log_dir_override: str = None,
        log_name_override: str = None,
        debug_mode: bool = False,
        accession_resolver=None,
        sort_data=None,
    ):
        """
        Initializes the orchestrator.

        Args:
            config_file_path (str): Path of the YAML config file. A missing file means defaults.
            data_dir_override (str, optional): Directory holding the TSV exports; overrides config.
            log_dir_override (str, optional): Log directory; overrides config.
            log_name_override (str, optional): Log file name; overrides config.
            debug_mode (bool, optional): Console logging at DEBUG, plus hardware usage reports.
            accession_resolver (AccessionResolver, optional): Study accession collaborator.
                Defaults to a resolver built from the config's ``accessions_file``,
                or one that resolves nothing.
            sort_data (callable, optional): ``sort_data(records, group_key, sort_key)``.
                Defaults to ``sort_data_by_group``.
        """
        self.config = self._load_config(config_file_path)

        self.data_dir = data_dir_override or self.config.get("data_dir", constants.DATA_DIR)
        self.log_dir = log_dir_override or self.config.get("log_dir", constants.LOG_DIR)
        self.log_name = log_name_override or self.config.get("log_name", constants.LOG_NAME)
        self.timezone = self.config.get("timezone", constants.DEFAULT_TIMEZONE)
        self.files_config = self.config.get("files") or {}
        self.workspaces_file = self.files_config.get("workspaces", constants.FILE_ANVIL_DATA_INGESTION)
        self.debug_mode = debug_mode

        self.logger = setup_logger(self.log_dir, self.log_name, debug_mode, self.timezone)

        config_max_workers = self.config.get("max_workers")
        if config_max_workers is None:
            # One worker per input file is all a run can use.
            self.max_workers = 4
        else:
            try:
                self.max_workers = int(config_max_workers)
                if self.max_workers <= 0:
                    self.logger.warning(f"max_workers ({config_max_workers}) in config is not a positive integer, defaulting to 4.")
                    self.max_workers = 4
            except (TypeError, ValueError):
                self.logger.warning(f"max_workers ('{config_max_workers}') in config cannot be converted to an integer, defaulting to 4.")
                self.max_workers = 4

        self.file_reader = FileReader(self.data_dir, self.logger)
        self.lookup_builder = LookupBuilder(self.file_reader, self.logger, self.files_config)
        self.accession_resolver = accession_resolver if accession_resolver is not None else self._build_accession_resolver()
        self.workspace_transformer = WorkspaceTransformer(self.accession_resolver, self.logger)
        self.sort_data = sort_data if sort_data is not None else sort_data_by_group

        self.report_stats = {}

    def _load_config(self, config_file_path: str) -> dict:
        """Loads the YAML config file; any problem falls back to an empty config."""
        try:
            with open(config_file_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except FileNotFoundError:
            module_logger.warning(f"Config file {config_file_path} not found. Using defaults.")
            return {}
        except yaml.YAMLError as e:
            module_logger.error(f"Failed to parse config file {config_file_path}: {e}")
            return {}
        if not isinstance(config, dict):
            return {}
        return config

    def _build_accession_resolver(self):
        accessions_file = self.config.get("accessions_file")
        if accessions_file:
            return StaticAccessionResolver.from_yaml(accessions_file, self.logger)
        self.logger.info("No accessions_file configured; study accessions will be empty.")
        return NullAccessionResolver()

    def _input_files(self) -> list:
        return [
            self.workspaces_file,
            self.lookup_builder.accession_file,
            self.lookup_builder.counts_file,
            self.lookup_builder.file_size_file,
        ]

    async def get_ingested_workspaces(self) -> list:
        """
        Returns the workspaces ingested data, sorted by consortium then project id.

        The three lookups and the main export are read concurrently on a
        thread pool; every row is then transformed concurrently and the
        records are sorted once all of them are built.
        """
        self.file_reader.missing_files.clear()
        loop = asyncio.get_running_loop()
        executor = concurrent.futures.ThreadPoolExecutor(max_workers=self.max_workers)
        try:
            study_id_by_project_id, sample_count_by_project_id, file_size_by_project_id, (headers, frame) = await asyncio.gather(
                loop.run_in_executor(executor, self.lookup_builder.get_study_id_by_project_id),
                loop.run_in_executor(executor, self.lookup_builder.get_sample_count_by_project_id),
                loop.run_in_executor(executor, self.lookup_builder.get_file_size_by_project_id),
                loop.run_in_executor(executor, self.file_reader.read_table, self.workspaces_file),
            )
        except BaseException:
            # Do not block the event loop on reads still in flight.
            executor.shutdown(wait=False, cancel_futures=True)
            raise
        executor.shutdown(wait=True)

        workspaces = await self.workspace_transformer.build_workspaces(
            headers, frame, sample_count_by_project_id, study_id_by_project_id, file_size_by_project_id
        )
        self.logger.info(f"Built {len(workspaces)} workspace(s) from {len(frame)} content row(s) of '{self.workspaces_file}'.")

        return self.sort_data(workspaces, constants.KEY_CONSORTIUM, constants.KEY_PROJECT_ID)

    def run(self) -> list:
        """Runs the pipeline once, logs an execution summary report and returns the workspaces."""
        start_time_perf = time.time()
        self.report_stats = {
            "start_time": datetime.now(pytz.timezone(self.timezone)).isoformat(),
            "data_dir": str(self.data_dir),
        }
        if self.debug_mode:
            self.logger.debug(get_hardware_usage("Before workspace ingestion"))

        self.logger.info(f"====== Workspace ingestion started (data dir: {self.data_dir}) ======")
        try:
            workspaces = asyncio.run(self.get_ingested_workspaces())

            missing_files = [f for f in self._input_files() if f in self.file_reader.missing_files]
            if self.workspaces_file in missing_files:
                status = constants.STATUS_FAILURE
            elif missing_files:
                status = constants.STATUS_PARTIAL_SUCCESS
            else:
                status = constants.STATUS_SUCCESS

            self.report_stats.update({
                constants.KEY_STATUS: status,
                constants.KEY_FILE: self.workspaces_file,
                constants.KEY_COUNT: len(workspaces),
                constants.KEY_MISSING_FILES: missing_files,
                "end_time": datetime.now(pytz.timezone(self.timezone)).isoformat(),
                "total_duration_seconds": round(time.time() - start_time_perf, 2),
            })
            self.logger.info(self.report_stats, extra={'event_type': 'execution_summary_report'})
            if status == constants.STATUS_SUCCESS:
                self.logger.info(f"✅ Ingested {len(workspaces)} workspace(s).")
            return workspaces
        except Exception as e:
            self.logger.critical(f"Unrecoverable error during workspace ingestion: {e}", exc_info=True)
            raise
        finally:
            self.logger.info(f"Total time: {time.time() - start_time_perf:.2f} seconds")
            if self.debug_mode:
                self.logger.debug(get_hardware_usage("After workspace ingestion"))


async def get_ingested_workspaces() -> list:
    """Returns the workspaces ingested data, using the default config file."""
    return await PipelineOrchestrator().get_ingested_workspaces()
