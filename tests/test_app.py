import asyncio

from conftest import FakeResolver
from dnssec_analyzer.app import AnalyzerApp
from dnssec_analyzer.errors import ExtractionError
from dnssec_analyzer.scanner import Scanner


def run_scan(app, url):
    """Run one scan worker inside a headless app, return the messages shown."""
    shown = []

    async def scenario():
        async with app.run_test() as pilot:
            original = app._show_message

            def record(text):
                shown.append(text)
                original(text)

            app._show_message = record
            app._scanning = True
            app._scan_url(url)
            await app.workers.wait_for_complete()
            await pilot.pause()

    asyncio.run(scenario())
    return shown


def test_scan_sets_assessment(clock):
    app = AnalyzerApp()
    app._scanner = Scanner(resolver=FakeResolver(), clock=clock)

    run_scan(app, "https://www.ipb.pt")

    assert app._scanning is False
    assert app._current.domain == "ipb.pt"


def test_scan_error_clears_scanning_flag(monkeypatch):
    app = AnalyzerApp()

    def fail(url):
        raise ExtractionError("no host", url=url)

    monkeypatch.setattr(app._scanner, "scan", fail)
    shown = run_scan(app, "nowhere")

    assert app._scanning is False
    assert app._current is None
    assert shown[-1].startswith("Scan for nowhere failed")


def test_unexpected_error_clears_scanning_flag(monkeypatch):
    app = AnalyzerApp()

    def crash(url):
        raise RuntimeError("delv crashed")

    monkeypatch.setattr(app._scanner, "scan", crash)
    shown = run_scan(app, "ipb.pt")

    assert app._scanning is False
    assert shown[-1] == "Scan for ipb.pt failed\n\ndelv crashed"
