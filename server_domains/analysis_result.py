"""Analysis result data structures."""

import math
from decimal import Decimal, ROUND_HALF_UP

CSV_HEADER = 'timestamp,domain,percentage,total_servers'


def format_half_up(value: float, places: int) -> str:
    """Format value with a fixed number of decimals, rounding ties up (0.125 -> 0.13)."""
    # shortest repr, so 1.005 rounds like the literal it was written as
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


class AnalysisResult:
    """One domain's share of the servers in a single analysis run."""

    def __init__(self, timestamp: str, domain: str, percentage: float,
                 total_servers: int, server_count: int):
        self.timestamp = timestamp
        self.domain = domain
        self.percentage = percentage
        self.total_servers = total_servers
        self.server_count = server_count

    @classmethod
    def from_csv_row(cls, line: str) -> 'AnalysisResult':
        """
        Rebuild a result from a CSV history row.

        The server count is not stored, so it is recomputed from the
        percentage and total and may be off by one.

        Raises:
            ValueError: if the row has fewer than 4 fields or bad or non-finite numbers
        """
        parts = line.split(',')
        if len(parts) < 4:
            raise ValueError(f"expected 4 fields, got {len(parts)}")

        timestamp = parts[0].strip()
        domain = parts[1].strip()
        percentage = float(parts[2].strip())
        if not math.isfinite(percentage):
            raise ValueError(f"non-finite percentage: {parts[2].strip()}")
        total_servers = int(parts[3].strip())
        # half-up, not banker's rounding
        server_count = int(math.floor(percentage * total_servers / 100.0 + 0.5))

        return cls(timestamp, domain, percentage, total_servers, server_count)

    def to_csv_row(self) -> str:
        """Format as timestamp,domain,percentage,total_servers"""
        return f"{self.timestamp},{self.domain},{format_half_up(self.percentage, 2)},{self.total_servers}"

    def __str__(self) -> str:
        return (f"AnalysisResult{{timestamp='{self.timestamp}', domain='{self.domain}', "
                f"percentage={format_half_up(self.percentage, 2)}%, totalServers={self.total_servers}, "
                f"serverCount={self.server_count}}}")

    def __repr__(self) -> str:
        return (f"AnalysisResult({self.timestamp!r}, {self.domain!r}, {self.percentage!r}, "
                f"{self.total_servers!r}, {self.server_count!r})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, AnalysisResult):
            return NotImplemented
        return self.timestamp == other.timestamp and self.domain == other.domain

    def __hash__(self) -> int:
        return hash((self.timestamp, self.domain))
