"""URL input widget."""

from textual.validation import ValidationResult, Validator
from textual.widgets import Input

from dnssec_analyzer.dns.extractor import extract_domain
from dnssec_analyzer.errors import ExtractionError


class UrlValidator(Validator):
    """Accepts URLs and hostnames a domain can be extracted from."""

    def validate(self, value: str) -> ValidationResult:
        """Validate a URL."""
        if not value or not value.strip():
            return self.failure("Enter a URL or domain name")

        try:
            extract_domain(value)
        except ExtractionError as e:
            return self.failure(e.detail)

        return self.success()


class DomainInput(Input):
    """Input widget for entering URLs to scan."""

    DEFAULT_CSS = """
    DomainInput:focus {
        border: tall $accent;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(
            placeholder="Enter URL (e.g., https://www.example.com)",
            validators=[UrlValidator()],
            **kwargs
        )

    @property
    def url(self) -> str:
        """Get the entered URL."""
        return self.value.strip()
