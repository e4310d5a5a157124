"""TUI widgets for dnssec-analyzer."""

from dnssec_analyzer.widgets.domain_input import DomainInput, UrlValidator
from dnssec_analyzer.widgets.history_panel import HistoryPanel

__all__ = ["DomainInput", "UrlValidator", "HistoryPanel"]
