import io

from rich.console import Console

from dnssec_analyzer.dns.denial import parse_denial_of_existence
from dnssec_analyzer.dns.records import parse_response
from dnssec_analyzer.scanner import Scanner
from dnssec_analyzer.views.tables import describe_record, render_assessment, render_denial
from dnssec_analyzer.widgets.domain_input import UrlValidator
from delv_samples import BAD_NSEC, GOOD_DS, GOOD_NSEC3PARAM, GOOD_SOA


def render(renderable) -> str:
    console = Console(file=io.StringIO(), width=200, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def test_describe_soa():
    soa = parse_response("SOA", GOOD_SOA).records[0]
    assert describe_record(soa).startswith("dns.uminho.pt servicos@scom.uminho.pt serial=2023121501")


def test_describe_ds_truncates_digest():
    sha256 = parse_response("DS", GOOD_DS).records[1]
    assert sha256.display_digest == "F1FB0C99D1FA5342...1F68C87EC96D9AA6"
    assert describe_record(sha256) == f"tag=36028 alg=5 SHA-256 {sha256.display_digest}"


def test_describe_nsec3param_empty_salt():
    param = parse_response("NSEC3PARAM", GOOD_NSEC3PARAM).records[0]
    assert describe_record(param) == "hash=1 flags=0 iterations=0 salt length=0"


def test_render_assessment(fake_resolver, clock):
    assessment = Scanner(resolver=fake_resolver, clock=clock).scan("https://www.ipb.pt")
    out = render(render_assessment(assessment))

    assert "Domain: ipb.pt" in out
    assert "NSEC3PARAM" in out
    assert "193.136.195.224" in out


def test_render_denial_marks_missing_half():
    out = render(render_denial(parse_denial_of_existence(BAD_NSEC, GOOD_NSEC3PARAM)))
    assert "NSEC: no usable response" in out


def test_url_validator():
    validator = UrlValidator()
    assert validator.validate("https://www.ipb.pt").is_valid
    assert not validator.validate("").is_valid
    assert not validator.validate("invalid-url").is_valid
