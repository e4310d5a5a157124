"""Data models for parsed DNSSEC records and assessments."""

from dnssec_analyzer.models.records import (
    RecordType,
    RRSIGInfo,
    RecordInfo,
    AInfo,
    AAAAInfo,
    SOAInfo,
    DSInfo,
    DNSKeyInfo,
    NSECInfo,
    NSEC3ParamInfo,
    RecordResult,
    DenialOfExistence,
)
from dnssec_analyzer.models.assessment import Assessment

__all__ = [
    "RecordType",
    "RRSIGInfo",
    "RecordInfo",
    "AInfo",
    "AAAAInfo",
    "SOAInfo",
    "DSInfo",
    "DNSKeyInfo",
    "NSECInfo",
    "NSEC3ParamInfo",
    "RecordResult",
    "DenialOfExistence",
    "Assessment",
]
