"""Field conversion helpers for whitespace-tokenized resolver output."""

from datetime import datetime, timezone

from dnssec_analyzer.errors import FormatError

# RRSIG timestamps are always YYYYMMDDHHMMSS in UTC
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
TIMESTAMP_LENGTH = 14


def parse_uint(token: str, bits: int, field: str, kind: str, line: str = "") -> int:
    """Parse an unsigned decimal integer that must fit in ``bits`` bits.

    Args:
        token: Text to convert
        bits: Width of the field (8, 16 or 32)
        field: Field name, used in the error
        kind: Record kind, used in the error
        line: Line the token came from

    Returns:
        The parsed integer

    Raises:
        FormatError: If the token is not a decimal number in range
    """
    if not (token.isascii() and token.isdigit()):
        raise FormatError(
            f"invalid {field} '{token}' in {kind} record",
            record_kind=kind, field=field, value=token, line=line,
        )
    value = int(token)
    if value >= 1 << bits:
        raise FormatError(
            f"{field} '{token}' out of range in {kind} record",
            record_kind=kind, field=field, value=token, line=line,
        )
    return value


def parse_timestamp(token: str, field: str, kind: str, line: str = "") -> datetime:
    """Parse a 14-digit UTC timestamp into an aware datetime."""
    if len(token) != TIMESTAMP_LENGTH or not (token.isascii() and token.isdigit()):
        raise FormatError(
            f"invalid {field} time value '{token}' in {kind} record",
            record_kind=kind, field=field, value=token, line=line,
        )
    try:
        parsed = datetime.strptime(token, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise FormatError(
            f"invalid {field} time value '{token}' in {kind} record: {e}",
            record_kind=kind, field=field, value=token, line=line,
        ) from e
    return parsed.replace(tzinfo=timezone.utc)


def strip_root(name: str) -> str:
    """Strip one trailing root-zone dot from a domain name."""
    return name[:-1] if name.endswith(".") else name
