"""Server domain distribution analysis."""

import datetime
import logging
from typing import Dict, List, Optional

from .analysis_result import AnalysisResult
from .csv_tracker import CSVTracker
from .domain_extractor import extract_domain, extract_hostname, read_server_names
from .report import print_report

logger = logging.getLogger('server_domains.analyzer')


class DomainAnalysis:
    """Outcome of one analysis run."""

    def __init__(self, timestamp: str):
        self.timestamp = timestamp
        self.total_servers = 0
        self.servers_with_domains = 0
        self.domain_counts: Dict[str, int] = {}
        self.results: List[AnalysisResult] = []
        self.hosts_without_domain: List[str] = []

    @property
    def servers_without_domains(self) -> int:
        return self.total_servers - self.servers_with_domains


def current_timestamp() -> str:
    """Local date-time in ISO-8601, second precision."""
    return datetime.datetime.now().replace(microsecond=0).isoformat()


def analyze_servers(server_names: List[str], timestamp: Optional[str] = None) -> DomainAnalysis:
    """
    Tally servers per domain and build sorted results.

    Every name counts toward the total, whether or not a domain could be
    extracted from it. Results are sorted by percentage descending, then by
    domain name ascending.
    """
    analysis = DomainAnalysis(timestamp or current_timestamp())

    for server_name in server_names:
        analysis.total_servers += 1
        domain = extract_domain(server_name)
        if domain:
            analysis.domain_counts[domain] = analysis.domain_counts.get(domain, 0) + 1
            analysis.servers_with_domains += 1
        else:
            hostname = extract_hostname(server_name)
            analysis.hosts_without_domain.append(hostname)
            logger.debug(f"No domain for server '{server_name}' (hostname {hostname})")

    if analysis.total_servers == 0:
        return analysis

    for domain, count in analysis.domain_counts.items():
        percentage = (count * 100.0) / analysis.total_servers
        analysis.results.append(
            AnalysisResult(analysis.timestamp, domain, percentage, analysis.total_servers, count)
        )

    analysis.results.sort(key=lambda r: (-r.percentage, r.domain))
    return analysis


def analyze_file(input_path: str, output_csv: str, tracker: Optional[CSVTracker] = None,
                 backup_path: Optional[str] = None) -> Optional[DomainAnalysis]:
    """
    Run a full analysis: read servers, report, and append to the history CSV.

    Returns None when the input has no server names; nothing is written then.

    Raises:
        InputFileNotFoundError: if input_path does not exist
        OSError: on read or write failures
    """
    tracker = tracker or CSVTracker()

    server_names = read_server_names(input_path)
    if not server_names:
        print(f"No server names found in file: {input_path}")
        return None

    analysis = analyze_servers(server_names)
    print_report(analysis)

    if backup_path:
        tracker.create_backup(output_csv, backup_path)

    tracker.save_results(output_csv, analysis.results)
    print(f"\nResults saved to {output_csv}")
    logger.debug(f"History now holds {tracker.get_record_count(output_csv)} records")

    return analysis
