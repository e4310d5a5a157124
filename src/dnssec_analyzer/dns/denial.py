"""Denial-of-existence aggregation (NSEC + NSEC3PARAM)."""

import logging

from dnssec_analyzer.dns.records import get_parser
from dnssec_analyzer.errors import ScanError
from dnssec_analyzer.models.records import DenialOfExistence, RecordResult, RecordType

logger = logging.getLogger(__name__)


def _parse_half(record_type: RecordType, response: str) -> RecordResult | None:
    try:
        return get_parser(record_type).parse(response)
    except ScanError as e:
        logger.warning("Ignoring unparsable %s response: %s", record_type.value, e)
        return None


def parse_denial_of_existence(nsec_response: str, nsec3param_response: str) -> DenialOfExistence:
    """Parse NSEC and NSEC3PARAM responses for the same domain.

    A half that fails to parse is recorded as None instead of failing the
    whole aggregate. Both raw responses are always kept.

    Args:
        nsec_response: Raw resolver output for the NSEC query
        nsec3param_response: Raw resolver output for the NSEC3PARAM query

    Returns:
        DenialOfExistence with whichever halves parsed
    """
    return DenialOfExistence(
        nsec=_parse_half(RecordType.NSEC, nsec_response),
        nsec3param=_parse_half(RecordType.NSEC3PARAM, nsec3param_response),
        raw_nsec=nsec_response,
        raw_nsec3param=nsec3param_response,
    )
