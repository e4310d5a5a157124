"""Parsers turning delv output into typed record results.

Each parser handles one record type. delv prints one record per line in
zone-file column order (``owner ttl class type rdata...``), preceded by
comment lines carrying the validation verdict. Fields are taken from fixed
token offsets of that layout.
"""

import logging
import re
from abc import ABC, abstractmethod

import dns.exception
import dns.ipv4
import dns.ipv6

from dnssec_analyzer.dns.rrsig import parse_rrsig
from dnssec_analyzer.dns.tokens import parse_uint, strip_root
from dnssec_analyzer.errors import FormatError, ResolutionFailedError
from dnssec_analyzer.models.records import (
    AAAAInfo,
    AInfo,
    DNSKeyInfo,
    DSInfo,
    NSEC3ParamInfo,
    NSECInfo,
    RecordInfo,
    RecordResult,
    RecordType,
    SOAInfo,
)

logger = logging.getLogger(__name__)

RESOLUTION_FAILED = "resolution failed"
FULLY_VALIDATED = "; fully validated"
UNSIGNED_ANSWER = "; unsigned answer"


class RecordParser(ABC):
    """Shared line-scanning algorithm for all record types.

    Subclasses set ``record_type`` and ``min_tokens`` and implement
    ``parse_record`` for a single data line.
    """

    record_type: RecordType
    min_tokens: int

    def __init__(self):
        label = self.record_type.value
        self._record_pattern = re.compile(rf"\bIN\s+{label}\b")
        self._rrsig_pattern = re.compile(rf"\bRRSIG\s+{label}\b")

    @property
    def kind(self) -> str:
        return self.record_type.value

    def parse(self, response: str) -> RecordResult:
        """Parse a complete resolver response.

        Args:
            response: Raw text printed by the resolver for one query

        Returns:
            RecordResult with records, validation flag and signature

        Raises:
            ResolutionFailedError: If the resolver could not resolve the query
            FormatError: If a record or signature line is malformed
        """
        lines = response.split("\n")
        if RESOLUTION_FAILED in response:
            raise ResolutionFailedError(lines[0].strip())

        result = RecordResult(record_type=self.record_type, raw_response=response)

        for line in lines:
            line = line.rstrip("\r")
            if line.startswith(FULLY_VALIDATED):
                result.validated = True
            elif line.startswith(UNSIGNED_ANSWER):
                result.validated = False
            elif self._record_pattern.search(line):
                parts = line.split()
                if len(parts) < self.min_tokens:
                    raise FormatError(
                        f"invalid {self.kind} record: {line}",
                        record_kind=self.kind, line=line,
                    )
                result.records.append(self.parse_record(parts, line))
            elif self._rrsig_pattern.search(line):
                result.rrsig = parse_rrsig(line)

        logger.debug(
            "Parsed %d %s record(s), validated=%s, signed=%s",
            len(result.records), self.kind, result.validated, result.is_signed,
        )
        return result

    @abstractmethod
    def parse_record(self, parts: list[str], line: str) -> RecordInfo:
        """Build the typed record for one tokenized data line."""

    def _uint(self, token: str, bits: int, field: str, line: str) -> int:
        return parse_uint(token, bits, field, self.kind, line)


class AParser(RecordParser):
    record_type = RecordType.A
    min_tokens = 5

    def parse_record(self, parts: list[str], line: str) -> AInfo:
        address = parts[4]
        try:
            dns.ipv4.inet_aton(address)
        except dns.exception.SyntaxError as e:
            raise FormatError(
                f"invalid IPv4 address '{address}' in A record",
                record_kind=self.kind, field="address", value=address, line=line,
            ) from e
        return AInfo(address=address, ttl=self._uint(parts[1], 32, "TTL", line))


class AAAAParser(RecordParser):
    record_type = RecordType.AAAA
    min_tokens = 5

    def parse_record(self, parts: list[str], line: str) -> AAAAInfo:
        address = parts[4]
        try:
            dns.ipv6.inet_aton(address)
        except dns.exception.SyntaxError as e:
            raise FormatError(
                f"invalid IPv6 address '{address}' in AAAA record",
                record_kind=self.kind, field="address", value=address, line=line,
            ) from e
        return AAAAInfo(address=address, ttl=self._uint(parts[1], 32, "TTL", line))


class SOAParser(RecordParser):
    record_type = RecordType.SOA
    min_tokens = 11

    def parse_record(self, parts: list[str], line: str) -> SOAInfo:
        # Zone files encode the mailbox's "@" as the first dot
        contact = strip_root(parts[5]).replace(".", "@", 1)
        return SOAInfo(
            primary_ns=strip_root(parts[4]),
            contact=contact,
            serial=self._uint(parts[6], 32, "serial number", line),
            refresh=self._uint(parts[7], 32, "refresh time", line),
            retry=self._uint(parts[8], 32, "retry time", line),
            expire=self._uint(parts[9], 32, "expire time", line),
            minimum=self._uint(parts[10], 32, "minimum time", line),
        )


class DSParser(RecordParser):
    record_type = RecordType.DS
    min_tokens = 8

    def parse_record(self, parts: list[str], line: str) -> DSInfo:
        return DSInfo(
            key_tag=self._uint(parts[4], 16, "key tag", line),
            algorithm=self._uint(parts[5], 8, "algorithm", line),
            digest_type=self._uint(parts[6], 8, "digest type", line),
            digest="".join(parts[7:]),
        )


class DNSKEYParser(RecordParser):
    record_type = RecordType.DNSKEY
    min_tokens = 8

    def parse_record(self, parts: list[str], line: str) -> DNSKeyInfo:
        flags = self._uint(parts[4], 16, "flags", line)
        protocol = self._uint(parts[5], 8, "protocol", line)
        algorithm = self._uint(parts[6], 8, "algorithm", line)

        # delv appends "; ZSK; alg = RSASHA256 ; key id = 12345"
        comments = " ".join(parts[7:]).split(";")
        if len(comments) < 2:
            raise FormatError(
                f"missing ';' in DNSKEY record: {line}",
                record_kind=self.kind, field="comment", line=line,
            )
        if not "".join(comments[1:]).strip():
            raise FormatError(
                f"empty key comment in DNSKEY record: {line}",
                record_kind=self.kind, field="comment", line=line,
            )

        key_type = ""
        algorithm_name = ""
        key_id = 0
        for comment in comments[1:]:
            if "alg =" in comment:
                algorithm_name = comment.partition("=")[2].strip()
            elif "key id =" in comment:
                key_id = self._uint(comment.partition("=")[2].strip(), 16, "key id", line)
            elif "ZSK" in comment or "KSK" in comment:
                key_type = comment.split()[0]

        key_parts = parts[7:]
        for i, part in enumerate(parts[7:], start=7):
            if ";" in part:
                key_parts = parts[7:i]
                break

        return DNSKeyInfo(
            flags=flags,
            protocol=protocol,
            algorithm=algorithm,
            public_key="".join(key_parts),
            key_type=key_type,
            algorithm_name=algorithm_name,
            key_id=key_id,
        )


class NSECParser(RecordParser):
    record_type = RecordType.NSEC
    min_tokens = 6

    def parse_record(self, parts: list[str], line: str) -> NSECInfo:
        return NSECInfo(
            ttl=self._uint(parts[1], 32, "TTL", line),
            next_domain=parts[4],
            types=";".join(parts[5:]),
        )


class NSEC3PARAMParser(RecordParser):
    record_type = RecordType.NSEC3PARAM
    min_tokens = 8

    def parse_record(self, parts: list[str], line: str) -> NSEC3ParamInfo:
        # "-" stands for an empty salt
        salt = "" if parts[7] == "-" else parts[7]
        salt_length = self._uint(salt, 8, "salt length", line) if salt else 0

        return NSEC3ParamInfo(
            ttl=self._uint(parts[1], 32, "TTL", line),
            hash_algorithm=self._uint(parts[4], 8, "hash algorithm", line),
            flags=self._uint(parts[5], 8, "flags", line),
            iterations=self._uint(parts[6], 16, "iterations", line),
            salt_length=salt_length,
            salt=salt,
        )


PARSERS: dict[RecordType, RecordParser] = {
    parser.record_type: parser
    for parser in (
        AParser(),
        AAAAParser(),
        SOAParser(),
        DSParser(),
        DNSKEYParser(),
        NSECParser(),
        NSEC3PARAMParser(),
    )
}


def get_parser(record_type: RecordType | str) -> RecordParser:
    """Return the parser for a record type or label.

    Raises:
        ValueError: If the label is not one of the supported types
    """
    if not isinstance(record_type, RecordType):
        record_type = RecordType.from_label(record_type)
    return PARSERS[record_type]


def parse_response(record_type: RecordType | str, response: str) -> RecordResult:
    """Parse a resolver response with the parser for ``record_type``."""
    return get_parser(record_type).parse(response)
