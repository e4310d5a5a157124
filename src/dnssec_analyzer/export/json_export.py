"""JSON export functionality."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from dnssec_analyzer.errors import ScanError
from dnssec_analyzer.models.assessment import Assessment
from dnssec_analyzer.models.records import DenialOfExistence, RecordResult, RRSIGInfo


def _serialize_datetime(dt: Optional[datetime]) -> Optional[str]:
    """Serialize datetime to ISO format."""
    if dt is None:
        return None
    return dt.isoformat()


def _serialize_rrsig(rrsig: Optional[RRSIGInfo]) -> Optional[dict[str, Any]]:
    if rrsig is None:
        return None
    data = rrsig.to_dict()
    data["expiration"] = _serialize_datetime(rrsig.expiration)
    data["inception"] = _serialize_datetime(rrsig.inception)
    data["algorithm_name"] = rrsig.algorithm_name
    return data


def result_to_dict(result: RecordResult) -> dict[str, Any]:
    """Convert a RecordResult to a JSON-ready dictionary."""
    data = result.to_dict()
    data["rrsig"] = _serialize_rrsig(result.rrsig)
    return data


def denial_to_dict(denial: DenialOfExistence) -> dict[str, Any]:
    """Convert a DenialOfExistence to a dictionary."""
    return {
        "nsec": result_to_dict(denial.nsec) if denial.nsec else None,
        "nsec3param": result_to_dict(denial.nsec3param) if denial.nsec3param else None,
        "raw_response": {
            "nsec": denial.raw_nsec,
            "nsec3param": denial.raw_nsec3param,
        },
    }


def assessment_to_dict(assessment: Assessment) -> dict[str, Any]:
    """Convert an Assessment to a dictionary."""
    return {
        "start": _serialize_datetime(assessment.start),
        "end": _serialize_datetime(assessment.end),
        "url": assessment.url,
        "domain": assessment.domain,
        "validated": assessment.is_validated,
        "records": {
            label: result_to_dict(result)
            for label, result in assessment.records.items()
        },
    }


def error_to_dict(url: str, error: Exception, origin: str) -> dict[str, Any]:
    """Build the event describing a failed scan."""
    return {
        "origin": origin,
        "url": url,
        "error": str(error),
        "kind": error.kind if isinstance(error, ScanError) else type(error).__name__,
    }


def export_json(assessment: Assessment, path: Path | str | None = None) -> str:
    """Export an assessment to JSON.

    Args:
        assessment: The completed assessment to export
        path: Optional file path to write to

    Returns:
        JSON string
    """
    data = assessment_to_dict(assessment)
    json_str = json.dumps(data, indent=2)

    if path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json_str)

    return json_str
