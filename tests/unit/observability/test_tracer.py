"""
Unit tests for tracer protocol and implementations.

Tests for:
- Tracer Protocol (runtime_checkable)
- NullTracer class
- OpenTelemetryTracer class
- MockTracer class
- create_tracer() factory function
"""

from __future__ import annotations

import contextlib
from typing import Any

import pytest

from eventcenter.observability import (
    OTEL_AVAILABLE,
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
    Tracer,
    create_tracer,
    get_tracer,
    should_trace,
)


class TestTracerProtocol:
    """Tests for Tracer protocol."""

    def test_null_tracer_implements_protocol(self):
        assert isinstance(NullTracer(), Tracer)

    def test_mock_tracer_implements_protocol(self):
        assert isinstance(MockTracer(), Tracer)

    @pytest.mark.skipif(not OTEL_AVAILABLE, reason="OTEL not installed")
    def test_otel_tracer_implements_protocol(self):
        assert isinstance(OpenTelemetryTracer(__name__), Tracer)

    def test_custom_implementation_matches_protocol(self):
        """Custom implementations can match the protocol."""

        class CustomTracer:
            def span(self, name: str, attributes: dict[str, Any] | None = None):
                return contextlib.nullcontext()

            @property
            def enabled(self) -> bool:
                return False

        assert isinstance(CustomTracer(), Tracer)


class TestNullTracer:
    """Tests for NullTracer."""

    def test_span_yields_none(self):
        with NullTracer().span("operation", {"key": "value"}) as span:
            assert span is None

    def test_disabled(self):
        assert NullTracer().enabled is False


class TestMockTracer:
    """Tests for MockTracer."""

    def test_records_spans(self):
        tracer = MockTracer()
        with tracer.span("first", {"a": 1}):
            pass
        with tracer.span("second"):
            pass

        assert tracer.spans == [("first", {"a": 1}), ("second", None)]
        assert tracer.span_names == ["first", "second"]

    def test_clear(self):
        tracer = MockTracer()
        with tracer.span("first"):
            pass
        tracer.clear()
        assert tracer.spans == []

    def test_enabled(self):
        assert MockTracer().enabled is True


@pytest.mark.skipif(not OTEL_AVAILABLE, reason="OTEL not installed")
class TestOpenTelemetryTracer:
    """Tests for OpenTelemetryTracer."""

    def test_enabled(self):
        assert OpenTelemetryTracer(__name__).enabled is True

    def test_span_context(self):
        tracer = OpenTelemetryTracer(__name__)
        with tracer.span("operation", {"key": "value"}) as span:
            assert span is not None


class TestCreateTracer:
    """Tests for create_tracer() factory."""

    def test_disabled_returns_null_tracer(self):
        assert isinstance(create_tracer(__name__, enable_tracing=False), NullTracer)

    @pytest.mark.skipif(not OTEL_AVAILABLE, reason="OTEL not installed")
    def test_enabled_returns_otel_tracer(self):
        assert isinstance(create_tracer(__name__, enable_tracing=True), OpenTelemetryTracer)

    @pytest.mark.skipif(OTEL_AVAILABLE, reason="OTEL installed")
    def test_enabled_without_otel_returns_null_tracer(self):
        assert isinstance(create_tracer(__name__, enable_tracing=True), NullTracer)


class TestTracingHelpers:
    """Tests for availability helpers."""

    def test_should_trace_respects_flag(self):
        assert should_trace(False) is False
        assert should_trace(True) is OTEL_AVAILABLE

    def test_get_tracer_matches_availability(self):
        assert (get_tracer(__name__) is not None) is OTEL_AVAILABLE
