"""Textual application for interactive DNSSEC assessments."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, ScrollableContainer, Vertical
from textual.screen import ModalScreen
from textual.widgets import Footer, Header, Input, Label, Static

from dnssec_analyzer.config import Settings
from dnssec_analyzer.dns.resolver import DelvResolver
from dnssec_analyzer.errors import ScanError
from dnssec_analyzer.export.json_export import export_json
from dnssec_analyzer.models.assessment import Assessment
from dnssec_analyzer.scanner import Scanner
from dnssec_analyzer.views.table_view import TableView
from dnssec_analyzer.widgets.domain_input import DomainInput
from dnssec_analyzer.widgets.history_panel import HistoryPanel

logger = logging.getLogger(__name__)

EXPORT_DIR = Path("exports")


class ResolverModal(ModalScreen[str | None]):
    """Asks for the nameserver delv should query."""

    BINDINGS = [Binding("escape", "dismiss", "Cancel")]

    DEFAULT_CSS = """
    ResolverModal {
        align: center middle;
    }

    #resolver-dialog {
        width: 56;
        height: auto;
        padding: 1 2;
        border: thick $primary;
        background: $surface;
    }

    #resolver-dialog Label.heading {
        width: 100%;
        content-align: center middle;
        text-style: bold;
    }

    #resolver-dialog Label.note {
        color: $text-muted;
    }
    """

    def __init__(self, server: str):
        super().__init__()
        self.server = server

    def compose(self) -> ComposeResult:
        with Vertical(id="resolver-dialog"):
            yield Label("Nameserver", classes="heading")
            yield Input(value=self.server, placeholder="1.1.1.1", id="server-input")
            yield Label("delv is run as: delv @SERVER DOMAIN TYPE", classes="note")
            yield Label("Enter applies, Escape cancels", classes="note")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(event.value.strip() or None)


class AnalyzerApp(App):
    """Main dnssec-analyzer application."""

    TITLE = "dnssec-analyzer"
    SUB_TITLE = "DNSSEC Assessment"

    CSS = """
    #sidebar {
        width: 26;
        border-right: vkey $panel;
    }

    #content {
        width: 1fr;
    }

    #url-input {
        margin: 1 1 0 1;
    }

    #view-area {
        height: 1fr;
        padding: 0 1;
    }

    #message {
        padding: 2;
        color: $text-muted;
    }

    .hidden {
        display: none;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("escape", "unfocus", "Back", priority=True),
        Binding("slash", "focus_input", "Scan"),
        Binding("e", "export", "Export"),
        Binding("r", "resolver", "Resolver"),
    ]

    def __init__(self, settings: Settings | None = None):
        super().__init__()
        self._settings = settings or Settings()
        self._scanner = Scanner.from_settings(self._settings)
        self._current: Assessment | None = None
        self._scanning = False

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield HistoryPanel(id="sidebar")
            with Vertical(id="content"):
                yield DomainInput(id="url-input")
                with ScrollableContainer(id="view-area"):
                    yield Static("Press / to scan a URL, e.g. https://www.ipb.pt", id="message")
                    yield TableView(id="assessment", classes="hidden")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = f"delv @{self._settings.dns_server}"
        self.set_focus(None)

    def _show_message(self, text: str) -> None:
        message = self.query_one("#message", Static)
        message.update(text)
        message.remove_class("hidden")
        self.query_one("#assessment").add_class("hidden")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "url-input" or self._scanning:
            return
        url = event.value.strip()
        if not url:
            return
        if event.validation_result and not event.validation_result.is_valid:
            self.notify("; ".join(event.validation_result.failure_descriptions), severity="warning")
            return
        self._scanning = True
        self._show_message(f"Scanning {url}...")
        self._scan_url(url)

    @work(thread=True, exclusive=True)
    def _scan_url(self, url: str) -> None:
        try:
            assessment = self._scanner.scan(url)
        except ScanError as e:
            self.call_from_thread(self._handle_error, url, e)
        except Exception as e:
            logger.exception("Unexpected error scanning %s", url)
            self.call_from_thread(self._handle_error, url, e)
        else:
            self.call_from_thread(self._set_assessment, assessment)

    def _handle_error(self, url: str, error: Exception) -> None:
        self._scanning = False
        kind = error.kind if isinstance(error, ScanError) else type(error).__name__
        self.notify(f"Scan failed: {kind}", severity="error", timeout=5)
        self._show_message(f"Scan for {url} failed\n\n{error}")

    def _set_assessment(self, assessment: Assessment) -> None:
        self._scanning = False
        self._current = assessment
        self.query_one("#message").add_class("hidden")

        view = self.query_one("#assessment", TableView)
        view.set_assessment(assessment)
        view.remove_class("hidden")
        self.query_one("#sidebar", HistoryPanel).add_entry(assessment)

        if assessment.is_validated:
            self.notify(f"{assessment.domain}: fully validated", timeout=4)
        else:
            self.notify(f"{assessment.domain}: not validated", severity="warning", timeout=4)
        self.set_focus(None)

    def action_unfocus(self) -> None:
        self.set_focus(None)

    def action_focus_input(self) -> None:
        self.query_one("#url-input").focus()

    def action_export(self) -> None:
        if self._current is None:
            self.notify("Nothing to export yet", severity="warning")
            return
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        path = EXPORT_DIR / f"{self._current.domain.replace('.', '_')}_{stamp}.json"
        export_json(self._current, path)
        self.notify(f"Saved {path}")

    def action_resolver(self) -> None:
        resolver = self._scanner.resolver

        def apply(server: str | None) -> None:
            if not server or not isinstance(resolver, DelvResolver):
                return
            resolver.server = server
            self.sub_title = f"delv @{resolver.server}"
            self.notify(f"Nameserver set to {resolver.server}")

        current = getattr(resolver, "server", self._settings.dns_server)
        self.push_screen(ResolverModal(current), apply)

    def on_history_panel_history_selected(self, event: HistoryPanel.HistorySelected) -> None:
        self._set_assessment(event.assessment)
