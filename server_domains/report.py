"""Console reports for domain analysis."""

from typing import List, Tuple

from .analysis_result import AnalysisResult, format_half_up


def generate_report(analysis) -> str:
    """Generate the domain distribution report for one analysis run."""
    lines = [
        f"Server Domain Analysis - {analysis.timestamp}",
        "=" * 42,
        f"Total Servers: {analysis.total_servers}",
        f"Servers with Domains: {analysis.servers_with_domains}",
    ]

    if analysis.total_servers != analysis.servers_with_domains:
        lines.append(f"Servers without Domains: {analysis.servers_without_domains}")

    lines.append("")
    lines.append("Domain Distribution:")
    for result in analysis.results:
        lines.append(f"- {result.domain:<20}: {result.server_count} servers ({format_half_up(result.percentage, 1)}%)")

    return "\n".join(lines)


def print_report(analysis) -> None:
    """Print domain distribution report to stdout."""
    print()
    print(generate_report(analysis))


def generate_history_report(snapshots: List[Tuple[str, List[AnalysisResult]]]) -> str:
    """Generate a report of stored snapshots, oldest first."""
    if not snapshots:
        return "No history recorded yet."

    body = ""
    for timestamp, results in snapshots:
        total = results[0].total_servers if results else 0
        body += f"{timestamp} ({total} servers)\n"
        for result in results:
            body += f"  - {result.domain:<20}: ~{result.server_count} servers ({format_half_up(result.percentage, 2)}%)\n"
        body += "\n"

    return body.rstrip("\n")
