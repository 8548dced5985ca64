"""Configuration management for server domain analyzer."""

import os
import logging
import yaml
from typing import Optional

# Configure logging
logger = logging.getLogger('server_domains.config')

# Constants
DEFAULT_CONFIG_PATH = 'config.yaml'
DEFAULT_INPUT_FILE = 'input/servers.txt'
DEFAULT_OUTPUT_CSV = 'output/domain_history.csv'
BACKUP_SUFFIX = '.bak'


class Config:
    """Configuration manager for server domain analyzer."""

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        self.config_path = config_path
        self.data = {
            'general': {
                'input_file': DEFAULT_INPUT_FILE,
                'output_csv': DEFAULT_OUTPUT_CSV,
                'log_file': None,
            },
            'backup': {
                'enabled': False,
                'path': None,
            },
        }
        self.load()

    def load(self) -> None:
        """Load configuration from file."""
        if not os.path.exists(self.config_path):
            logger.debug(f"Config file {self.config_path} not found, using defaults")
            return

        try:
            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load config: {e}")
            return

        if not isinstance(config_data, dict):
            logger.error(f"Failed to load config: {self.config_path} is not a mapping")
            return

        # Update config with loaded data
        for section in self.data:
            if isinstance(config_data.get(section), dict):
                self.data[section].update(config_data[section])

        # Set up logging file if specified
        log_file = self.data['general'].get('log_file')
        if log_file:
            try:
                self._add_log_file(log_file)
            except OSError as e:
                logger.error(f"Failed to open log file {log_file}: {e}")

        logger.info(f"Loaded configuration from {self.config_path}")

    def _add_log_file(self, log_file: str) -> None:
        """Attach a file handler to the package logger, once per path."""
        package_logger = logging.getLogger('server_domains')
        log_path = os.path.abspath(log_file)
        for handler in package_logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path:
                return

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        package_logger.addHandler(file_handler)

    def get_input_file(self) -> str:
        """Get the server list path."""
        return self.data['general']['input_file']

    def get_output_csv(self) -> str:
        """Get the history CSV path."""
        return self.data['general']['output_csv']

    def is_backup_enabled(self) -> bool:
        """Check if the history file is backed up before each save."""
        return bool(self.data['backup']['enabled'])

    def get_backup_path(self, output_csv: Optional[str] = None) -> str:
        """Get backup path, defaulting to the history file plus .bak"""
        return self.data['backup']['path'] or (output_csv or self.get_output_csv()) + BACKUP_SUFFIX
