#!/usr/bin/env python3
"""
Server Domain Analyzer - CLI tool to track how servers are spread across domains.

This script reads a list of server names (one per line), takes everything after
the first dot as the server's domain, and reports the share of servers in each
domain. Every run appends a timestamped snapshot to a CSV history file so the
distribution can be followed over time.
"""

import sys
import logging
import click

from server_domains.config import Config, DEFAULT_CONFIG_PATH
from server_domains.analyzer import analyze_file
from server_domains.csv_tracker import CSVTracker
from server_domains.domain_extractor import InputFileNotFoundError
from server_domains.report import generate_history_report

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger('server_domains')


@click.group()
@click.version_option(version='1.0.0')
def cli():
    """Server Domain Analyzer - Track server distribution across domains."""
    pass


@cli.command('analyze')
@click.argument('input_file', required=False)
@click.option('--output', '-o', help='History CSV file (overrides output_csv in config)')
@click.option('--config', '-c', default=DEFAULT_CONFIG_PATH, help='Path to config file')
@click.option('--backup/--no-backup', default=None, help='Back up the history file before saving')
@click.option('--verbose', '-v', is_flag=True, help='Show debug output, including servers without a domain')
def analyze(input_file, output, config, backup, verbose):
    """Analyze domain distribution of the servers listed in INPUT_FILE."""
    if verbose:
        logger.setLevel(logging.DEBUG)

    cfg = Config(config)

    input_file = input_file or cfg.get_input_file()
    output_csv = output or cfg.get_output_csv()

    # Override backup setting if specified
    if backup is None:
        backup = cfg.is_backup_enabled()
    backup_path = cfg.get_backup_path(output_csv) if backup else None

    try:
        analyze_file(input_file, output_csv, CSVTracker(), backup_path=backup_path)
    except InputFileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except OSError as e:
        logger.error(f"Error processing file: {e}")
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(1)


@cli.command('history')
@click.option('--output', '-o', help='History CSV file (overrides output_csv in config)')
@click.option('--config', '-c', default=DEFAULT_CONFIG_PATH, help='Path to config file')
@click.option('--limit', '-l', type=int, default=5, help='Maximum number of snapshots to show')
def history(output, config, limit):
    """View recent domain distribution snapshots."""
    cfg = Config(config)
    output_csv = output or cfg.get_output_csv()
    tracker = CSVTracker()

    if not tracker.file_exists(output_csv):
        logger.warning(f"No history file found at {output_csv}")
        sys.exit(1)

    try:
        snapshots = tracker.read_snapshots(output_csv, limit)
        record_count = tracker.get_record_count(output_csv)
    except OSError as e:
        logger.error(f"Error reading history: {e}")
        sys.exit(1)

    print(generate_history_report(snapshots))
    print(f"\n{record_count} records in {output_csv}")


@cli.command('backup')
@click.option('--output', '-o', help='History CSV file (overrides output_csv in config)')
@click.option('--config', '-c', default=DEFAULT_CONFIG_PATH, help='Path to config file')
@click.option('--dest', '-d', help='Backup destination (default: <history file>.bak)')
def backup_history(output, config, dest):
    """Copy the history CSV to a backup file."""
    cfg = Config(config)
    output_csv = output or cfg.get_output_csv()
    dest = dest or cfg.get_backup_path(output_csv)
    tracker = CSVTracker()

    if not tracker.file_exists(output_csv):
        logger.warning(f"No history file found at {output_csv}, nothing to back up")
        sys.exit(1)

    try:
        tracker.create_backup(output_csv, dest)
    except OSError as e:
        logger.error(f"Backup failed: {e}")
        sys.exit(1)

    print(f"Backed up {output_csv} to {dest}")


if __name__ == '__main__':
    cli()
