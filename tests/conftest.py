"""
Shared pytest fixtures for the eventcenter library tests.

This module provides:
- A fresh EventCenter per test (center) with tracing disabled
- A center wired to a MockTracer (tracer, traced_center)
- Recording handlers (recorder, call_log)
- Cleanup of the process-wide default center
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from eventcenter import EventCenter, EventCenterConfig, global_center
from eventcenter.observability import MockTracer
from eventcenter.testing import RecordingHandler


@pytest.fixture
def center() -> EventCenter:
    """Create a fresh event center for testing."""
    return EventCenter(EventCenterConfig(name="test", enable_tracing=False))


@pytest.fixture
def tracer() -> MockTracer:
    """Create a tracer that records spans."""
    return MockTracer()


@pytest.fixture
def traced_center(tracer: MockTracer) -> EventCenter:
    """Create an event center that reports spans to the mock tracer."""
    return EventCenter(EventCenterConfig(name="traced"), tracer=tracer)


@pytest.fixture
def recorder() -> RecordingHandler:
    """Create a handler that records every message it receives."""
    return RecordingHandler()


@pytest.fixture
def call_log() -> list[str]:
    """Shared list several recording handlers append their labels to."""
    return []


@pytest.fixture
def clean_global_center() -> Generator[EventCenter, None, None]:
    """Yield the default center and drop its subscriptions afterwards."""
    global_center.clear_subscribers()
    yield global_center
    global_center.clear_subscribers()
