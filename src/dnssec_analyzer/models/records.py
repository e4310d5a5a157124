"""Data models for parsed DNSSEC diagnostic records."""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Optional

import dns.dnssec
import dns.rdatatype


class RecordType(Enum):
    """Record types collected for every assessment."""
    A = "A"
    AAAA = "AAAA"
    SOA = "SOA"
    DS = "DS"
    DNSKEY = "DNSKEY"
    NSEC = "NSEC"
    NSEC3PARAM = "NSEC3PARAM"

    @property
    def rdtype(self) -> dns.rdatatype.RdataType:
        """Return the dnspython rdata type for this label."""
        return dns.rdatatype.from_text(self.value)

    @classmethod
    def from_label(cls, label: str) -> "RecordType":
        """Look up a record type by its label, case-insensitively."""
        try:
            return cls(label.strip().upper())
        except ValueError:
            raise ValueError(f"Unsupported record type: {label!r}") from None


# Digest type mapping
DIGEST_TYPE_NAMES = {
    1: "SHA-1",
    2: "SHA-256",
    3: "GOST R 34.11-94",
    4: "SHA-384",
}


@dataclass(frozen=True)
class RRSIGInfo:
    """Information about an RRSIG (signature) record."""
    type_covered: str           # Record type this signs (e.g., "DNSKEY", "A")
    algorithm: int              # Algorithm number
    labels: int                 # Number of labels in original name
    original_ttl: int           # Original TTL
    expiration: datetime        # Signature expiration (UTC)
    inception: datetime         # Signature inception (UTC)
    key_tag: int                # Key tag of signing key
    signer_name: str            # Name of the signer, without the root dot
    signature: str              # Base64-encoded signature

    @property
    def algorithm_name(self) -> str:
        """Return the algorithm mnemonic (e.g. "RSASHA256")."""
        return dns.dnssec.algorithm_to_text(self.algorithm)

    @property
    def is_expired(self) -> bool:
        """Check if signature has expired."""
        return datetime.now(timezone.utc) > self.expiration

    @property
    def is_not_yet_valid(self) -> bool:
        """Check if signature is not yet valid."""
        return datetime.now(timezone.utc) < self.inception

    @property
    def days_until_expiry(self) -> int:
        """Return days until expiration (negative if expired)."""
        delta = self.expiration - datetime.now(timezone.utc)
        return delta.days

    @property
    def validity_status(self) -> str:
        """Return human-readable validity status."""
        if self.is_expired:
            return f"EXPIRED ({abs(self.days_until_expiry)} days ago)"
        if self.is_not_yet_valid:
            return "NOT YET VALID"
        if self.days_until_expiry < 7:
            return f"EXPIRING SOON ({self.days_until_expiry} days)"
        return f"Valid ({self.days_until_expiry} days)"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RecordInfo:
    """Base class for the typed record variants."""
    record_type: ClassVar[RecordType]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AInfo(RecordInfo):
    """An IPv4 address record."""
    record_type: ClassVar[RecordType] = RecordType.A

    address: str
    ttl: int


@dataclass(frozen=True)
class AAAAInfo(RecordInfo):
    """An IPv6 address record."""
    record_type: ClassVar[RecordType] = RecordType.AAAA

    address: str
    ttl: int


@dataclass(frozen=True)
class SOAInfo(RecordInfo):
    """Start-of-authority timing metadata for a zone."""
    record_type: ClassVar[RecordType] = RecordType.SOA

    primary_ns: str             # Primary nameserver, no trailing dot
    contact: str                # Mailbox as local@domain
    serial: int
    refresh: int                # All intervals in seconds
    retry: int
    expire: int
    minimum: int


@dataclass(frozen=True)
class DSInfo(RecordInfo):
    """Information about a DS (Delegation Signer) record."""
    record_type: ClassVar[RecordType] = RecordType.DS

    key_tag: int                # References a DNSKEY
    algorithm: int              # Algorithm number
    digest_type: int            # Hash algorithm (1=SHA-1, 2=SHA-256, 4=SHA-384)
    digest: str                 # The digest value (hex)

    @property
    def digest_type_name(self) -> str:
        """Return the digest algorithm name."""
        return DIGEST_TYPE_NAMES.get(self.digest_type, f"Unknown ({self.digest_type})")

    @property
    def display_digest(self) -> str:
        """Return truncated digest for display."""
        if len(self.digest) > 32:
            return f"{self.digest[:16]}...{self.digest[-16:]}"
        return self.digest


@dataclass(frozen=True)
class DNSKeyInfo(RecordInfo):
    """Information about a DNSKEY record."""
    record_type: ClassVar[RecordType] = RecordType.DNSKEY

    flags: int                  # 256 = ZSK, 257 = KSK
    protocol: int               # Should be 3
    algorithm: int              # Algorithm number
    public_key: str             # Base64-encoded public key
    key_type: str = ""          # "ZSK" / "KSK" as annotated by the resolver
    algorithm_name: str = ""    # Algorithm mnemonic as annotated by the resolver
    key_id: int = 0             # Key tag as annotated by the resolver

    @property
    def is_ksk(self) -> bool:
        """KSK has the SEP bit set."""
        return (self.flags & 0x0001) == 1

    @property
    def is_zsk(self) -> bool:
        return not self.is_ksk

    @property
    def display_key(self) -> str:
        """Return truncated key for display."""
        if len(self.public_key) > 32:
            return f"{self.public_key[:16]}...{self.public_key[-16:]}"
        return self.public_key


@dataclass(frozen=True)
class NSECInfo(RecordInfo):
    """Information about an NSEC record."""
    record_type: ClassVar[RecordType] = RecordType.NSEC

    ttl: int
    next_domain: str            # Next owner name in canonical order
    types: str                  # Types present at the owner, joined with ";"

    @property
    def type_list(self) -> list[str]:
        """Return the record types as a list."""
        return [t for t in self.types.split(";") if t]


@dataclass(frozen=True)
class NSEC3ParamInfo(RecordInfo):
    """Hashed denial-of-existence parameters for a zone."""
    record_type: ClassVar[RecordType] = RecordType.NSEC3PARAM

    ttl: int
    hash_algorithm: int
    flags: int
    iterations: int
    salt_length: int            # Decimal token at offset 7, 0 when it is "-"
    salt: str = ""              # Raw offset-7 token, empty for "-"


@dataclass
class RecordResult:
    """Parsed response for one record-type query."""
    record_type: RecordType
    records: list[RecordInfo] = field(default_factory=list)
    validated: bool = False     # Resolver reported "fully validated"
    rrsig: Optional[RRSIGInfo] = None
    raw_response: str = ""      # Unmodified resolver output

    @property
    def is_signed(self) -> bool:
        """Check whether a signature covers the record set."""
        return self.rrsig is not None

    @property
    def record_count(self) -> int:
        return len(self.records)

    def to_dict(self) -> dict[str, Any]:
        return {
            "record_type": self.record_type.value,
            "records": [r.to_dict() for r in self.records],
            "validated": self.validated,
            "rrsig": self.rrsig.to_dict() if self.rrsig else None,
            "raw_response": self.raw_response,
        }


@dataclass
class DenialOfExistence:
    """NSEC and NSEC3PARAM results for one domain, either may be missing."""
    nsec: Optional[RecordResult] = None
    nsec3param: Optional[RecordResult] = None
    raw_nsec: str = ""
    raw_nsec3param: str = ""

    @property
    def uses_nsec3(self) -> bool:
        """Check if the zone publishes NSEC3 parameters."""
        return self.nsec3param is not None and bool(self.nsec3param.records)

    @property
    def uses_nsec(self) -> bool:
        return self.nsec is not None and bool(self.nsec.records)
