# -*- coding: utf-8 -*-

import os

import pandas as pd

from .core import constants


class FileReader:
    """Reads the TSV exports from a single data directory.

    A missing file is not an error: it is logged and read as empty, so every
    downstream lookup and join just sees no data for it.
    """

    def __init__(self, data_dir: str, logger):
        self.data_dir = data_dir
        self.logger = logger
        self.missing_files = []

    def get_file_path(self, file_name: str) -> str:
        return os.path.join(self.data_dir, file_name)

    def read_lines(self, file_name: str) -> list:
        """Returns the contents of the file as a list of CRLF-delimited lines.

        Lines are split on ``\\r\\n`` only; exports with any other line
        terminator come back as a single line.
        """
        file_path = self.get_file_path(file_name)
        try:
            with open(file_path, "r", encoding="utf-8", newline="") as f:
                file_content = f.read()
        except FileNotFoundError:
            self.logger.error(f"Error: file {file_name} cannot be found.")
            self.missing_files.append(file_name)
            return []

        lines = file_content.split(constants.LINE_TERMINATOR)
        self.logger.debug(f"Read {len(lines)} line(s) from '{file_path}'.")
        return lines

    def read_table(self, file_name: str):
        """Returns the header row and the content rows of the specified file.

        Returns:
            tuple[list[str], pd.DataFrame]: The tab-split header labels, and
            one row per content line with positional integer columns aligned
            to the headers. Cells hold the raw text; positions missing from
            a short line are ``None`` and fields past the last header are
            dropped. Blank lines (e.g. the trailing CRLF) are skipped.
        """
        lines = [line for line in self.read_lines(file_name) if line]
        if not lines:
            return [], pd.DataFrame(dtype=object)

        headers = lines[0].split(constants.FIELD_DELIMITER)
        width = len(headers)

        rows = []
        for line in lines[1:]:
            fields = line.split(constants.FIELD_DELIMITER)[:width]
            if len(fields) < width:
                self.logger.debug(f"File '{file_name}': row has {len(fields)} of {width} fields, padding with None.")
                fields = fields + [None] * (width - len(fields))
            rows.append(fields)

        frame = pd.DataFrame(rows, columns=range(width), dtype=object)
        self.logger.info(f"File '{file_name}': {len(headers)} column(s), {len(frame)} content row(s).")
        return headers, frame
