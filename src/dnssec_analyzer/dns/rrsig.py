"""RRSIG line parsing."""

from dnssec_analyzer.dns.tokens import parse_timestamp, parse_uint, strip_root
from dnssec_analyzer.errors import FormatError
from dnssec_analyzer.models.records import RRSIGInfo

MIN_RRSIG_TOKENS = 13


def parse_rrsig(line: str) -> RRSIGInfo:
    """Parse one RRSIG line into RRSIGInfo.

    The caller is responsible for deciding the line is an RRSIG record.
    Token layout is ``owner ttl class RRSIG covered alg labels origttl
    expiration inception keytag signer signature...``; the signature is
    wrapped across whitespace by delv and is joined back without separators.

    Args:
        line: A single RRSIG line from resolver output

    Returns:
        RRSIGInfo for the line

    Raises:
        FormatError: If the line is too short or a field does not parse
    """
    parts = line.split()
    if len(parts) < MIN_RRSIG_TOKENS:
        raise FormatError(
            f"invalid RRSIG record format: {line}",
            record_kind="RRSIG", line=line,
        )

    return RRSIGInfo(
        type_covered=parts[4],
        algorithm=parse_uint(parts[5], 8, "algorithm", "RRSIG", line),
        labels=parse_uint(parts[6], 8, "labels", "RRSIG", line),
        original_ttl=parse_uint(parts[7], 32, "original TTL", "RRSIG", line),
        expiration=parse_timestamp(parts[8], "expiration", "RRSIG", line),
        inception=parse_timestamp(parts[9], "inception", "RRSIG", line),
        key_tag=parse_uint(parts[10], 16, "key tag", "RRSIG", line),
        signer_name=strip_root(parts[11]),
        signature="".join(parts[12:]),
    )
