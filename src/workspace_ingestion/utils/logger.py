# -*- coding: utf-8 -*-
import logging
import os
import sys
from datetime import datetime

import pytz
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that stamps each record with a timezone-aware timestamp."""

    def __init__(self, *args, timezone="UTC", **kwargs):
        super(CustomJsonFormatter, self).__init__(*args, **kwargs)
        self.timezone = pytz.timezone(timezone)

    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = datetime.now(self.timezone).isoformat()

        log_record['level'] = record.levelname.upper()

        # Structured reports (e.g. the execution summary) are logged as dicts;
        # lift their fields to the top level.
        if isinstance(record.msg, dict):
            log_record.update(record.msg)
            log_record['message'] = record.getMessage()

        log_record.pop('levelname', None)
        log_record.pop('asctime', None)

        log_record['logger_name'] = record.name
        log_record['module'] = record.module
        log_record['funcName'] = record.funcName
        log_record['lineno'] = record.lineno


class Logger:
    """
    Sets up a logger that writes JSON lines to a file (always at DEBUG level)
    and to the console (at a configurable level).
    """
    _log_level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }

    def __init__(self, name='workspace_ingestion', log_file_path='workspace_ingestion.log', level='INFO', timezone='UTC'):
        """
        Initializes the Logger.

        Args:
            name (str): The name of the logger.
            log_file_path (str): The path to the log file.
            level (str): The console level (e.g. 'INFO', 'DEBUG').
            timezone (str): pytz timezone name used for the 'timestamp' field.
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # Re-running setup for the same name must not stack handlers.
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        log_format = '%(message)s %(name)s %(levelname)s %(module)s %(funcName)s %(lineno)d'
        formatter = CustomJsonFormatter(log_format, timezone=timezone)

        try:
            file_handler = logging.FileHandler(log_file_path, mode='a', encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
        except OSError as e:
            sys.stderr.write(f"Failed to initialize file handler for logger: {e}\n")

        # stdout is reserved for the ingested records.
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(self._log_level_map.get(level.lower(), logging.INFO))
        stream_handler.setFormatter(formatter)
        self.logger.addHandler(stream_handler)


def setup_logger(log_path_dir: str, log_filename: str, debug_mode: bool, timezone: str = "UTC") -> logging.Logger:
    """
    Sets up and returns a logger instance configured by the Logger class.

    Args:
        log_path_dir (str): Directory for the log file. Created if missing.
        log_filename (str): Name of the log file; its stem becomes the logger name.
        debug_mode (bool): If True, console logging is at DEBUG, otherwise INFO.
        timezone (str): pytz timezone name for log timestamps.

    Returns:
        logging.Logger: The configured logger instance.
    """
    os.makedirs(log_path_dir, exist_ok=True)
    level_str = "DEBUG" if debug_mode else "INFO"
    full_log_path = os.path.join(log_path_dir, log_filename)
    logger_name = os.path.splitext(log_filename)[0]

    custom_logger_instance = Logger(name=logger_name, log_file_path=full_log_path, level=level_str, timezone=timezone)
    return custom_logger_instance.logger
