from datetime import datetime, timezone

import pytest

from conftest import FakeResolver
from dnssec_analyzer.config import Settings
from dnssec_analyzer.dns.resolver import DelvResolver
from dnssec_analyzer.errors import ExtractionError, FormatError, ProcessError, ResolutionFailedError
from dnssec_analyzer.models.records import RecordType
from dnssec_analyzer.scanner import Scanner
from delv_samples import BAD_DS, BAD_NSEC, GOOD_RESPONSES, UNSIGNED_A

ALL_LABELS = ["A", "AAAA", "SOA", "DS", "DNSKEY", "NSEC", "NSEC3PARAM"]


def test_scan_collects_every_record_type(fake_resolver, clock):
    scanner = Scanner(resolver=fake_resolver, clock=clock)
    assessment = scanner.scan("https://www.ipb.pt/path")

    assert assessment.url == "https://www.ipb.pt/path"
    assert assessment.domain == "ipb.pt"
    assert list(assessment.records) == ALL_LABELS
    assert [label for _, label in fake_resolver.calls] == ALL_LABELS
    assert all(domain == "ipb.pt" for domain, _ in fake_resolver.calls)

    assert assessment.start == datetime(2023, 12, 28, 12, 0, 0, tzinfo=timezone.utc)
    assert assessment.end == datetime(2023, 12, 28, 12, 0, 1, tzinfo=timezone.utc)
    assert assessment.is_complete
    assert assessment.duration_ms == 1000
    assert assessment.is_validated


def test_scan_reports_unsigned_record(clock):
    resolver = FakeResolver(dict(GOOD_RESPONSES, A=UNSIGNED_A))
    assessment = Scanner(resolver=resolver, clock=clock).scan("ipb.pt")

    assert assessment.get(RecordType.A).validated is False
    assert assessment.get("DNSKEY").validated is True
    assert not assessment.is_validated


def test_scan_stops_at_first_failure(clock):
    resolver = FakeResolver(dict(GOOD_RESPONSES, DS=BAD_DS))
    scanner = Scanner(resolver=resolver, clock=clock)

    with pytest.raises(ResolutionFailedError):
        scanner.scan("ipp.pt")

    # DNSKEY, NSEC and NSEC3PARAM are never queried
    assert [label for _, label in resolver.calls] == ["A", "AAAA", "SOA", "DS"]


def test_scan_propagates_resolver_errors(clock):
    resolver = FakeResolver(dict(GOOD_RESPONSES, A=ProcessError("delv not found")))
    with pytest.raises(ProcessError):
        Scanner(resolver=resolver, clock=clock).scan("ipb.pt")
    assert len(resolver.calls) == 1


def test_scan_propagates_format_errors(clock):
    resolver = FakeResolver(dict(GOOD_RESPONSES, SOA="x. 300 IN SOA ns.x. admin.x. 1 2"))
    with pytest.raises(FormatError):
        Scanner(resolver=resolver, clock=clock).scan("ipb.pt")


def test_scan_bad_url_never_queries(fake_resolver):
    with pytest.raises(ExtractionError):
        Scanner(resolver=fake_resolver).scan("invalid-url")
    assert fake_resolver.calls == []


def test_scan_subset_of_types(fake_resolver, clock):
    scanner = Scanner(resolver=fake_resolver, record_types=["dnskey", RecordType.DS], clock=clock)
    assessment = scanner.scan("ipb.pt")

    assert list(assessment.records) == ["DNSKEY", "DS"]
    assert assessment.denial_of_existence is None


def test_scan_exposes_denial_of_existence(fake_resolver, clock):
    assessment = Scanner(resolver=fake_resolver, clock=clock).scan("ipb.pt")
    denial = assessment.denial_of_existence

    assert denial.uses_nsec
    assert denial.uses_nsec3
    assert denial.raw_nsec == GOOD_RESPONSES["NSEC"]


def test_parallel_scan_keeps_configured_order(fake_resolver, clock):
    scanner = Scanner(resolver=fake_resolver, workers=4, clock=clock)
    assessment = scanner.scan("ipb.pt")

    assert list(assessment.records) == ALL_LABELS
    assert sorted(label for _, label in fake_resolver.calls) == sorted(ALL_LABELS)
    assert assessment.is_validated


def test_parallel_scan_fails_fast(clock):
    resolver = FakeResolver(dict(GOOD_RESPONSES, NSEC=BAD_NSEC))
    scanner = Scanner(resolver=resolver, workers=3, clock=clock)

    with pytest.raises(ResolutionFailedError):
        scanner.scan("ipb.pt")


def test_scan_denial_tolerates_failed_half(clock):
    resolver = FakeResolver(dict(GOOD_RESPONSES, NSEC=BAD_NSEC))
    denial = Scanner(resolver=resolver, clock=clock).scan_denial("https://www.ipb.pt")

    assert denial.nsec is None
    assert denial.nsec3param.records[0].iterations == 0
    assert resolver.calls == [("ipb.pt", "NSEC"), ("ipb.pt", "NSEC3PARAM")]


def test_from_settings():
    settings = Settings(dns_server="@8.8.8.8", timeout=5, record_types=["a", "ds"], workers=2)
    scanner = Scanner.from_settings(settings)

    assert isinstance(scanner.resolver, DelvResolver)
    assert scanner.resolver.server == "8.8.8.8"
    assert scanner.resolver.timeout == 5.0
    assert scanner.record_types == [RecordType.A, RecordType.DS]
    assert scanner.workers == 2
