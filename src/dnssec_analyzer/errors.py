"""Error types raised while collecting and parsing DNSSEC diagnostics."""

from typing import Optional, Sequence


class ScanError(Exception):
    """Base class for every failure that aborts a scan."""

    kind = "scan_error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.kind}: {self.detail}"


class ResolutionFailedError(ScanError):
    """The resolver reported that it could not resolve the query."""

    kind = "resolution_failed"


class FormatError(ScanError):
    """A response line does not match the expected record layout."""

    kind = "format_error"

    def __init__(
        self,
        detail: str,
        record_kind: str = "",
        field: str = "",
        value: str = "",
        line: str = "",
    ):
        super().__init__(detail)
        self.record_kind = record_kind
        self.field = field
        self.value = value
        self.line = line


class ExtractionError(ScanError):
    """No valid hostname could be derived from the input URL."""

    kind = "extraction_error"

    def __init__(self, detail: str, url: str = ""):
        super().__init__(detail)
        self.url = url


class ProcessError(ScanError):
    """The external resolver could not be launched or exited abnormally."""

    kind = "process_error"

    def __init__(
        self,
        detail: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
    ):
        super().__init__(detail)
        self.command = list(command or [])
        self.returncode = returncode
