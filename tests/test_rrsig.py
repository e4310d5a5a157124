from datetime import datetime, timezone

import pytest

from dnssec_analyzer.dns.rrsig import parse_rrsig
from dnssec_analyzer.errors import FormatError
from delv_samples import GOOD_A, SOA_RRSIG_LINE, SOA_SIGNATURE, GOOD_A_SIGNATURE


def test_parse_soa_signature_fields():
    rrsig = parse_rrsig(SOA_RRSIG_LINE)

    assert rrsig.type_covered == "SOA"
    assert rrsig.algorithm == 5
    assert rrsig.labels == 2
    assert rrsig.original_ttl == 14400
    assert rrsig.expiration == datetime(2024, 1, 14, 0, 0, 2, tzinfo=timezone.utc)
    assert rrsig.inception == datetime(2023, 12, 15, 0, 0, 2, tzinfo=timezone.utc)
    assert rrsig.key_tag == 51330
    assert rrsig.signer_name == "uminho.pt"
    assert rrsig.signature == SOA_SIGNATURE


def test_signature_chunks_joined_without_separator():
    rrsig = parse_rrsig(GOOD_A.splitlines()[2])
    assert rrsig.signature == GOOD_A_SIGNATURE
    assert " " not in rrsig.signature


def test_single_chunk_signature():
    line = "nl. 0 IN RRSIG NSEC3PARAM 13 1 0 20240106013810 20231222140726 52707 nl. abc="
    rrsig = parse_rrsig(line)
    assert rrsig.signature == "abc="
    assert rrsig.signer_name == "nl"
    assert rrsig.original_ttl == 0


def test_algorithm_name_from_number():
    rrsig = parse_rrsig(SOA_RRSIG_LINE)
    assert rrsig.algorithm_name == "RSASHA1"


def test_expired_signature_status():
    rrsig = parse_rrsig(SOA_RRSIG_LINE)
    # captured in 2023, long expired now
    assert rrsig.is_expired
    assert rrsig.validity_status.startswith("EXPIRED")


def test_too_few_tokens():
    line = "uminho.pt. 14400 IN RRSIG SOA 5 2 14400 20240114000002 20231215000002 51330 uminho.pt."
    with pytest.raises(FormatError) as exc:
        parse_rrsig(line)
    assert "invalid RRSIG record format" in exc.value.detail
    assert exc.value.record_kind == "RRSIG"


@pytest.mark.parametrize(
    "field, index, value",
    [
        ("algorithm", 5, "x5"),
        ("labels", 6, "-2"),
        ("original TTL", 7, "14400s"),
        ("key tag", 10, "70000"),
        ("algorithm", 5, "256"),
    ],
)
def test_bad_numeric_field(field, index, value):
    parts = SOA_RRSIG_LINE.split()
    parts[index] = value
    with pytest.raises(FormatError) as exc:
        parse_rrsig(" ".join(parts))
    assert exc.value.field == field
    assert exc.value.value == value


@pytest.mark.parametrize("value", ["2024011400000", "202401140000020", "20241314000002", "2024-1-14T0000"])
def test_bad_expiration(value):
    parts = SOA_RRSIG_LINE.split()
    parts[8] = value
    with pytest.raises(FormatError) as exc:
        parse_rrsig(" ".join(parts))
    assert exc.value.field == "expiration"
    assert "time value" in exc.value.detail


def test_bad_inception():
    parts = SOA_RRSIG_LINE.split()
    parts[9] = "yesterday00000"
    with pytest.raises(FormatError) as exc:
        parse_rrsig(" ".join(parts))
    assert exc.value.field == "inception"
