"""Per-domain assessment collecting one result per record type."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from dnssec_analyzer.models.records import DenialOfExistence, RecordResult, RecordType


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Assessment:
    """DNSSEC assessment of a single URL/domain pair."""
    url: str                    # URL as submitted
    domain: str                 # Hostname extracted from the URL
    start: datetime = field(default_factory=utcnow)
    end: Optional[datetime] = None  # Set once the scan completes
    records: dict[str, RecordResult] = field(default_factory=dict)

    def begin(self, now: Optional[datetime] = None) -> None:
        """Mark the start of the scan."""
        self.start = now or utcnow()

    def finish(self, now: Optional[datetime] = None) -> None:
        """Mark the end of the scan."""
        self.end = now or utcnow()

    @property
    def is_complete(self) -> bool:
        return self.end is not None

    @property
    def duration_ms(self) -> float:
        """Scan duration in milliseconds, 0 while running."""
        if self.end is None:
            return 0.0
        return (self.end - self.start).total_seconds() * 1000

    @property
    def is_validated(self) -> bool:
        """Check if every collected record set was fully validated."""
        return bool(self.records) and all(r.validated for r in self.records.values())

    def get(self, record_type: RecordType | str) -> Optional[RecordResult]:
        """Get the result for a record type."""
        if isinstance(record_type, RecordType):
            record_type = record_type.value
        return self.records.get(record_type)

    @property
    def denial_of_existence(self) -> Optional[DenialOfExistence]:
        """Compose the NSEC and NSEC3PARAM results, if either was collected."""
        nsec = self.get(RecordType.NSEC)
        nsec3param = self.get(RecordType.NSEC3PARAM)
        if nsec is None and nsec3param is None:
            return None
        return DenialOfExistence(
            nsec=nsec,
            nsec3param=nsec3param,
            raw_nsec=nsec.raw_response if nsec else "",
            raw_nsec3param=nsec3param.raw_response if nsec3param else "",
        )
