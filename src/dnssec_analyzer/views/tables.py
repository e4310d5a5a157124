"""Rich renderables for assessments and record results."""

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dnssec_analyzer.models.assessment import Assessment
from dnssec_analyzer.models.records import (
    AAAAInfo,
    AInfo,
    DenialOfExistence,
    DNSKeyInfo,
    DSInfo,
    NSEC3ParamInfo,
    NSECInfo,
    RecordInfo,
    RecordResult,
    RRSIGInfo,
    SOAInfo,
)


def describe_record(record: RecordInfo) -> str:
    """Return a one-line summary of a typed record."""
    if isinstance(record, (AInfo, AAAAInfo)):
        return record.address
    if isinstance(record, SOAInfo):
        return (
            f"{record.primary_ns} {record.contact} serial={record.serial} "
            f"refresh={record.refresh} retry={record.retry} "
            f"expire={record.expire} minimum={record.minimum}"
        )
    if isinstance(record, DSInfo):
        return (
            f"tag={record.key_tag} alg={record.algorithm} "
            f"{record.digest_type_name} {record.display_digest}"
        )
    if isinstance(record, DNSKeyInfo):
        key_type = record.key_type or ("KSK" if record.is_ksk else "ZSK")
        return f"{key_type} id={record.key_id} {record.algorithm_name or record.algorithm} {record.display_key}"
    if isinstance(record, NSECInfo):
        return f"{record.next_domain} [{' '.join(record.type_list)}]"
    if isinstance(record, NSEC3ParamInfo):
        return (
            f"hash={record.hash_algorithm} flags={record.flags} "
            f"iterations={record.iterations} salt length={record.salt_length}"
        )
    return str(record)


def _record_ttl(record: RecordInfo) -> str:
    ttl = getattr(record, "ttl", None)
    return str(ttl) if ttl is not None else "-"


def _validated_text(validated: bool) -> Text:
    if validated:
        return Text("✓ validated", style="green")
    return Text("✗ not validated", style="yellow")


def _rrsig_status(rrsig: RRSIGInfo | None) -> Text:
    if rrsig is None:
        return Text("-", style="dim")
    if rrsig.is_expired:
        return Text("EXPIRED", style="bold red")
    if rrsig.is_not_yet_valid:
        return Text("NOT VALID", style="bold yellow")
    if rrsig.days_until_expiry < 7:
        return Text(f"{rrsig.days_until_expiry}d left", style="yellow")
    return Text("✓ Valid", style="green")


def build_summary_table(assessment: Assessment) -> Table:
    """Build table with one row per collected record type."""
    table = Table(
        title="[bold]Record Types[/bold]",
        show_header=True,
        header_style="bold white",
        border_style="white",
        padding=(0, 1),
        expand=True,
    )

    table.add_column("Type", style="bold cyan")
    table.add_column("Records", justify="right")
    table.add_column("Validation", justify="center")
    table.add_column("Signer")
    table.add_column("Key Tag", justify="right")
    table.add_column("Signature", justify="center")

    for label, result in assessment.records.items():
        rrsig = result.rrsig
        table.add_row(
            label,
            str(result.record_count),
            _validated_text(result.validated),
            rrsig.signer_name if rrsig else "-",
            str(rrsig.key_tag) if rrsig else "-",
            _rrsig_status(rrsig),
        )

    return table


def build_records_table(result: RecordResult) -> Table:
    """Build table listing the records of one result."""
    table = Table(
        title=f"[bold]{result.record_type.value} Records[/bold]",
        show_header=True,
        header_style="bold cyan",
        border_style="cyan",
        padding=(0, 1),
        expand=True,
    )

    table.add_column("#", justify="right", style="dim")
    table.add_column("TTL", justify="right", style="dim")
    table.add_column("Value")

    for i, record in enumerate(result.records, start=1):
        table.add_row(str(i), _record_ttl(record), describe_record(record))

    if not result.records:
        table.add_row("-", "-", Text("no records", style="dim"))

    return table


def build_rrsig_table(results: list[RecordResult]) -> Table:
    """Build table of the signatures attached to results."""
    table = Table(
        title="[bold]RRSIG Records (Signatures)[/bold]",
        show_header=True,
        header_style="bold orange1",
        border_style="orange1",
        padding=(0, 1),
        expand=True,
    )

    table.add_column("Covers", style="cyan")
    table.add_column("Key Tag", justify="right")
    table.add_column("Algorithm", style="yellow")
    table.add_column("Signer")
    table.add_column("Inception")
    table.add_column("Expiration")
    table.add_column("Status", justify="center")

    for result in results:
        rrsig = result.rrsig
        if rrsig is None:
            continue
        table.add_row(
            rrsig.type_covered,
            str(rrsig.key_tag),
            rrsig.algorithm_name,
            rrsig.signer_name,
            rrsig.inception.strftime("%Y-%m-%d"),
            rrsig.expiration.strftime("%Y-%m-%d"),
            _rrsig_status(rrsig),
        )

    return table


def render_result(result: RecordResult) -> RenderableType:
    """Render a single parsed response."""
    parts = [build_records_table(result)]
    if result.rrsig:
        parts.extend([Text(""), build_rrsig_table([result])])

    return Panel(
        Group(*parts),
        title=f"[bold]{result.record_type.value}[/bold]",
        subtitle=_validated_text(result.validated),
        border_style="green" if result.validated else "yellow",
        padding=(1, 2),
    )


def render_denial(denial: DenialOfExistence) -> RenderableType:
    """Render NSEC/NSEC3PARAM results, marking missing halves."""
    parts: list[RenderableType] = []
    for label, result in (("NSEC", denial.nsec), ("NSEC3PARAM", denial.nsec3param)):
        if result is None:
            parts.append(Text(f"{label}: no usable response", style="dim"))
        else:
            parts.append(render_result(result))

    return Panel(
        Group(*parts),
        title="[bold]Denial of Existence[/bold]",
        border_style="magenta",
        padding=(1, 2),
    )


def render_assessment(assessment: Assessment) -> RenderableType:
    """Render a full assessment."""
    header = Table.grid(padding=(0, 2))
    header.add_column()
    header.add_column()
    header.add_column()

    header.add_row(
        Text(f"Domain: {assessment.domain}", style="bold"),
        _validated_text(assessment.is_validated),
        Text(f"Scan: {assessment.duration_ms:.0f}ms", style="dim"),
    )

    parts: list[RenderableType] = [header, Text(""), build_summary_table(assessment)]
    for result in assessment.records.values():
        parts.extend([Text(""), build_records_table(result)])

    signed = [r for r in assessment.records.values() if r.rrsig]
    if signed:
        parts.extend([Text(""), build_rrsig_table(signed)])

    return Panel(
        Group(*parts),
        title=f"[bold]DNSSEC Assessment - {assessment.url}[/bold]",
        subtitle=f"[dim]{assessment.start:%Y-%m-%d %H:%M:%S} UTC[/dim]",
        border_style="green" if assessment.is_validated else "yellow",
        padding=(1, 2),
    )
