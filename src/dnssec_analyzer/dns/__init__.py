"""Resolver invocation and response parsing."""

from dnssec_analyzer.dns.resolver import DelvResolver
from dnssec_analyzer.dns.records import RecordParser, get_parser, parse_response
from dnssec_analyzer.dns.rrsig import parse_rrsig
from dnssec_analyzer.dns.denial import parse_denial_of_existence
from dnssec_analyzer.dns.extractor import extract_domain

__all__ = [
    "DelvResolver",
    "RecordParser",
    "get_parser",
    "parse_response",
    "parse_rrsig",
    "parse_denial_of_existence",
    "extract_domain",
]
