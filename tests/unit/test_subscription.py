"""
Unit tests for subscription records and unsubscribe targets.

Tests for:
- Subscription identity matching and naming
- get_handler_name for different handler shapes
- resolve_target conversion of raw unsubscribe arguments
"""

import pytest

from eventcenter.subscription import (
    ALL,
    ById,
    ByHandler,
    Subscription,
    get_handler_name,
    resolve_target,
)
from eventcenter.testing import RecordingHandler


def on_created(message):
    return None


class Handlers:
    def on_shipped(self, message):
        return None


class TestSubscription:
    def test_matches_handler_by_identity(self):
        subscription = Subscription(handler_id=2, name="e", handler=on_created)
        assert subscription.matches_handler(on_created) is True
        assert subscription.matches_handler(lambda message: None) is False

    def test_matches_rebound_method(self):
        handlers = Handlers()
        subscription = Subscription(handler_id=2, name="e", handler=handlers.on_shipped)
        assert subscription.matches_handler(handlers.on_shipped) is True
        assert subscription.matches_handler(Handlers().on_shipped) is False
        assert subscription.matches_handler(Handlers.on_shipped) is False

    def test_frozen(self):
        subscription = Subscription(handler_id=2, name="e", handler=on_created)
        with pytest.raises(AttributeError):
            subscription.handler_id = 3  # type: ignore[misc]

    def test_repr(self):
        subscription = Subscription(handler_id=2, name="e", handler=on_created)
        assert repr(subscription) == "Subscription('e', id=2, handler=on_created)"


class TestGetHandlerName:
    def test_function(self):
        assert get_handler_name(on_created) == "on_created"

    def test_lambda(self):
        assert "<lambda>" in get_handler_name(lambda message: None)

    def test_bound_method(self):
        assert get_handler_name(Handlers().on_shipped) == "Handlers.on_shipped"

    def test_callable_instance(self):
        assert get_handler_name(RecordingHandler()) == "RecordingHandler"


class TestResolveTarget:
    """Tests for converting raw unsubscribe arguments."""

    @pytest.mark.parametrize("value", [None, 0, "", False, 0.0])
    def test_falsy_selects_all(self, value):
        assert resolve_target(value) is ALL

    def test_callable_selects_by_handler(self):
        target = resolve_target(on_created)
        assert isinstance(target, ByHandler)
        assert target.handler is on_created

    def test_falsy_callable_selects_by_handler(self):
        class EmptyBatchHandler:
            def __call__(self, message):
                return None

            def __len__(self):
                return 0

        handler = EmptyBatchHandler()
        target = resolve_target(handler)
        assert isinstance(target, ByHandler)
        assert target.handler is handler

    @pytest.mark.parametrize("value", [2, 7.0])
    def test_number_selects_by_id(self, value):
        assert resolve_target(value) == ById(value)

    @pytest.mark.parametrize("target", [ById(3), ByHandler(on_created), ALL])
    def test_explicit_targets_pass_through(self, target):
        assert resolve_target(target) is target

    @pytest.mark.parametrize("value", ["2", True, [1], float("nan")])
    def test_unsupported_values(self, value):
        assert resolve_target(value) is None

    def test_by_handler_equality_follows_handler(self):
        assert ByHandler(on_created) == ByHandler(on_created)
        assert ByHandler(on_created) != ByHandler(lambda message: None)

    def test_all_repr(self):
        assert repr(ALL) == "ALL"
