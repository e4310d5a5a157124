from datetime import datetime, timezone

import pytest

from dnssec_analyzer.models.assessment import Assessment
from dnssec_analyzer.models.records import DNSKeyInfo, RecordResult, RecordType


def test_assessment_in_progress():
    assessment = Assessment(url="https://ipb.pt", domain="ipb.pt")
    assert not assessment.is_complete
    assert assessment.duration_ms == 0.0
    assert not assessment.is_validated
    assert assessment.denial_of_existence is None


def test_assessment_validation_needs_every_record():
    assessment = Assessment(url="ipb.pt", domain="ipb.pt")
    assessment.records["A"] = RecordResult(RecordType.A, validated=True)
    assessment.records["DS"] = RecordResult(RecordType.DS, validated=False)
    assert not assessment.is_validated

    assessment.records["DS"].validated = True
    assert assessment.is_validated


def test_assessment_begin_finish():
    assessment = Assessment(url="ipb.pt", domain="ipb.pt")
    assessment.begin(datetime(2024, 1, 1, tzinfo=timezone.utc))
    assessment.finish(datetime(2024, 1, 1, 0, 0, 2, 500000, tzinfo=timezone.utc))
    assert assessment.duration_ms == 2500


def test_denial_with_only_nsec3param():
    assessment = Assessment(url="nl", domain="nl")
    assessment.records["NSEC3PARAM"] = RecordResult(RecordType.NSEC3PARAM, raw_response="raw")
    denial = assessment.denial_of_existence
    assert denial.nsec is None
    assert denial.raw_nsec3param == "raw"
    assert not denial.uses_nsec3


@pytest.mark.parametrize("flags, ksk", [(256, False), (257, True)])
def test_dnskey_sep_bit(flags, ksk):
    key = DNSKeyInfo(flags=flags, protocol=3, algorithm=8, public_key="AwEA")
    assert key.is_ksk is ksk
    assert key.is_zsk is not ksk


def test_record_type_rdtype():
    assert RecordType.NSEC3PARAM.rdtype.name == "NSEC3PARAM"
    assert RecordType.from_label(" aaaa ") is RecordType.AAAA
