"""Rendering of assessments."""

from dnssec_analyzer.views.tables import render_assessment, render_denial, render_result
from dnssec_analyzer.views.table_view import TableView

__all__ = ["render_assessment", "render_denial", "render_result", "TableView"]
