"""Sidebar listing the assessments made in this session."""

from rich.text import Text
from textual.message import Message
from textual.widgets import Label, ListItem, ListView, Static

from dnssec_analyzer.models.assessment import Assessment

MAX_LABEL = 20


class HistoryItem(ListItem):
    """One past assessment."""

    DEFAULT_CSS = """
    HistoryItem {
        height: 2;
        padding: 0 1;
    }
    """

    def __init__(self, assessment: Assessment):
        super().__init__()
        self.assessment = assessment

    def compose(self):
        domain = self.assessment.domain
        if len(domain) > MAX_LABEL:
            domain = domain[:MAX_LABEL - 1] + "…"

        label = Text.assemble(
            ("● " if self.assessment.is_validated else "○ ",
             "green" if self.assessment.is_validated else "yellow"),
            domain,
        )
        yield Label(label)
        yield Label(Text(f"{self.assessment.start:%H:%M:%S}", style="dim"))


class HistoryPanel(Static):
    """Assessments newest first, one per domain."""

    DEFAULT_CSS = """
    HistoryPanel {
        height: 100%;
    }

    HistoryPanel > #title {
        padding: 1;
        text-style: bold;
        color: $text-muted;
    }

    HistoryPanel > ListView {
        height: 1fr;
    }
    """

    class HistorySelected(Message):
        """Posted when the user picks a past assessment."""

        def __init__(self, assessment: Assessment):
            super().__init__()
            self.assessment = assessment

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._entries: list[Assessment] = []

    def compose(self):
        yield Static("Scans", id="title")
        yield ListView()

    @property
    def entries(self) -> list[Assessment]:
        return list(self._entries)

    def add_entry(self, assessment: Assessment) -> None:
        """Add an assessment, dropping any older one for the same domain."""
        self._entries = [a for a in self._entries if a.domain != assessment.domain]
        self._entries.insert(0, assessment)

        list_view = self.query_one(ListView)
        list_view.clear()
        for entry in self._entries:
            list_view.append(HistoryItem(entry))

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, HistoryItem):
            self.post_message(self.HistorySelected(event.item.assessment))
