"""Table view of a DNSSEC assessment."""

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text
from textual.widgets import Static

from dnssec_analyzer.models.assessment import Assessment
from dnssec_analyzer.views.tables import render_assessment


class TableView(Static):
    """Table visualization of an assessment."""

    DEFAULT_CSS = """
    TableView {
        height: auto;
        padding: 1;
    }
    """

    def __init__(self, assessment: Assessment | None = None, **kwargs):
        super().__init__(**kwargs)
        self._assessment = assessment

    @property
    def assessment(self) -> Assessment | None:
        return self._assessment

    def set_assessment(self, assessment: Assessment) -> None:
        """Set the assessment to display."""
        self._assessment = assessment
        self.refresh(layout=True)

    def render(self) -> RenderableType:
        """Render the table view."""
        if not self._assessment:
            return Panel(
                Text("Enter a URL to analyze", style="dim"),
                title="DNSSEC Assessment",
                border_style="dim",
            )
        return render_assessment(self._assessment)
