"""CSV history operations for server domain analysis."""

import os
import shutil
import logging
from collections import OrderedDict
from typing import List, Optional, Tuple

from .analysis_result import AnalysisResult, CSV_HEADER

logger = logging.getLogger('server_domains.csv_tracker')


class CSVTracker:
    """Append-only CSV log of analysis snapshots."""

    def save_results(self, file_path: str, results: List[AnalysisResult]) -> None:
        """
        Append analysis results to the CSV file.

        Parent directories are created as needed. The header is written only
        when the file is new or empty; existing rows are never rewritten.
        """
        parent_dir = os.path.dirname(file_path)
        if parent_dir:
            os.makedirs(parent_dir, exist_ok=True)

        needs_header = not os.path.exists(file_path) or os.path.getsize(file_path) == 0

        with open(file_path, 'a', encoding='utf-8', newline='') as f:
            if needs_header:
                f.write(CSV_HEADER + '\n')
            for result in results:
                f.write(result.to_csv_row() + '\n')

        logger.debug(f"Appended {len(results)} rows to {file_path}")

    def read_results(self, file_path: str) -> List[AnalysisResult]:
        """Read all results from the CSV file. Returns an empty list if the file doesn't exist."""
        if not os.path.exists(file_path):
            return []

        results = []
        for line in self._data_lines(file_path):
            try:
                results.append(AnalysisResult.from_csv_row(line))
            except ValueError as e:
                logger.warning(f"Could not parse CSV line: {line} ({e})")

        return results

    def read_snapshots(self, file_path: str,
                       limit: Optional[int] = None) -> List[Tuple[str, List[AnalysisResult]]]:
        """
        Group stored results by run timestamp.

        Args:
            file_path: Path to the CSV file
            limit: If set, only the most recent N snapshots are returned

        Returns:
            List of (timestamp, results) tuples in file order
        """
        snapshots = OrderedDict()
        for result in self.read_results(file_path):
            snapshots.setdefault(result.timestamp, []).append(result)

        items = list(snapshots.items())
        if limit is not None:
            items = items[-limit:] if limit > 0 else []
        return items

    def file_exists(self, file_path: str) -> bool:
        """Check if the file exists and is readable."""
        return os.path.isfile(file_path) and os.access(file_path, os.R_OK)

    def get_record_count(self, file_path: str) -> int:
        """Number of data records in the file, excluding the header."""
        if not self.file_exists(file_path):
            return 0
        return sum(1 for _ in self._data_lines(file_path))

    def create_backup(self, file_path: str, backup_path: str) -> None:
        """Copy the CSV file to backup_path, overwriting any existing backup. No-op if the source is missing."""
        if not os.path.exists(file_path):
            logger.debug(f"No history file at {file_path}, skipping backup")
            return

        backup_dir = os.path.dirname(backup_path)
        if backup_dir:
            os.makedirs(backup_dir, exist_ok=True)

        shutil.copyfile(file_path, backup_path)
        logger.info(f"Backed up {file_path} to {backup_path}")

    def _data_lines(self, file_path: str):
        """Yield non-blank lines after the header."""
        with open(file_path, 'r', encoding='utf-8') as f:
            next(f, None)
            for line in f:
                line = line.rstrip('\r\n')
                if line.strip():
                    yield line
