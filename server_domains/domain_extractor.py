"""Domain and hostname extraction for server names."""

import os
import logging
import string
from typing import List, Optional

logger = logging.getLogger('server_domains.domain_extractor')

# ASCII only, no IDN support
DOMAIN_CHARS = frozenset(string.ascii_letters + string.digits + '.-')


class InputFileNotFoundError(FileNotFoundError):
    """Raised when the server list file does not exist."""


def extract_domain(server_name: Optional[str]) -> Optional[str]:
    """
    Extract the domain from a server name.
    Everything after the first dot is the domain:
    SERVER01.contoso.com -> contoso.com
    Returns None when the name has no usable domain part.
    """
    if not server_name or not server_name.strip():
        return None

    server_name = server_name.strip()

    first_dot = server_name.find('.')
    if first_dot == -1 or first_dot == len(server_name) - 1:
        return None

    domain = server_name[first_dot + 1:]
    if not domain or not is_valid_domain(domain):
        return None

    return domain.lower()


def is_valid_domain(domain: Optional[str]) -> bool:
    """Basic validation for domain format."""
    if not domain:
        return False

    if domain[0] in '.-' or domain[-1] in '.-':
        return False

    if any(c not in DOMAIN_CHARS for c in domain):
        return False

    # "com" on its own is not a domain
    return '.' in domain


def extract_hostname(server_name: Optional[str]) -> Optional[str]:
    """Extract the hostname (part before the first dot) from a server name."""
    if not server_name or not server_name.strip():
        return None

    server_name = server_name.strip()
    return server_name.split('.', 1)[0]


def read_server_names(file_path: str) -> List[str]:
    """Read server names from a text file, one per line. Blank lines and # comments are skipped."""
    if not os.path.exists(file_path):
        raise InputFileNotFoundError(f"Input file not found: {file_path}")

    server_names = []
    with open(file_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#'):
                server_names.append(line)

    logger.debug(f"Read {len(server_names)} server names from {file_path}")
    return server_names
