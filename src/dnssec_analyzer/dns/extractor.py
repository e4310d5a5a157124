"""Hostname extraction from URLs."""

from urllib.parse import urlsplit

import dns.exception
import dns.name

from dnssec_analyzer.errors import ExtractionError


def extract_domain(url: str) -> str:
    """Extract the bare hostname to scan from a URL or hostname.

    A scheme of https is assumed when none is given and a leading "www."
    is dropped.

    Args:
        url: URL or bare hostname (e.g. "https://www.example.com/path")

    Returns:
        The hostname (e.g. "example.com")

    Raises:
        ExtractionError: If no valid hostname can be derived
    """
    candidate = url.strip()
    if "://" not in candidate:
        candidate = "https://" + candidate

    try:
        hostname = urlsplit(candidate).hostname or ""
    except ValueError as e:
        raise ExtractionError(f"invalid URL '{url}': {e}", url=url) from e

    hostname = hostname.rstrip(".")
    if "." not in hostname:
        raise ExtractionError(f"invalid hostname or domain missing in '{url}'", url=url)

    if hostname.startswith("www."):
        hostname = hostname[len("www."):]

    try:
        dns.name.from_text(hostname)
    except dns.exception.DNSException as e:
        raise ExtractionError(f"invalid domain name '{hostname}': {e}", url=url) from e

    return hostname
