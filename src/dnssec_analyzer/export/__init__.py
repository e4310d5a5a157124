"""Export functionality for DNSSEC assessments."""

from dnssec_analyzer.export.json_export import (
    assessment_to_dict,
    denial_to_dict,
    error_to_dict,
    export_json,
    result_to_dict,
)

__all__ = ["assessment_to_dict", "denial_to_dict", "error_to_dict", "export_json", "result_to_dict"]
