from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Tuple

import pytest

from delv_samples import GOOD_RESPONSES


# ----------------------------
# Fake resolver
# ----------------------------
class FakeResolver:
    """
    Fake resolver that answers query() calls from canned delv output.

    Responses are keyed by record type label; a value that is an exception
    instance is raised instead of returned. Every call is recorded in
    ``calls`` as (domain, label).
    """
    def __init__(self, responses: Dict[str, object] | None = None):
        self.responses = dict(GOOD_RESPONSES if responses is None else responses)
        self.calls: List[Tuple[str, str]] = []

    def query(self, domain, record_type) -> str:
        label = getattr(record_type, "value", record_type)
        self.calls.append((domain, label))
        if label not in self.responses:
            raise AssertionError(f"Unexpected query: {domain} {label}")
        answer = self.responses[label]
        if isinstance(answer, Exception):
            raise answer
        return answer


class StepClock:
    """Returns instants one second apart, starting at ``start``."""
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current


@pytest.fixture(autouse=True)
def package_logger():
    """Undo setup_logging() so caplog keeps seeing package records."""
    logger = logging.getLogger("dnssec_analyzer")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fake_resolver():
    return FakeResolver()


@pytest.fixture
def clock():
    return StepClock(datetime(2023, 12, 28, 12, 0, 0, tzinfo=timezone.utc))
