"""Tests for the subscriber registry."""

import logging

import pytest
from unittest.mock import MagicMock

from neo_adi.core.exceptions import EmptyScopeError, InvalidSubscriberError, SubscriptionError
from neo_adi.features.cache.services.subscriber_registry import ScopedListener, SubscriberRegistry


class TestSubscribe:
    """Test global subscriptions."""

    @pytest.fixture
    def registry(self):
        return SubscriberRegistry()

    def test_listener_receives_notification(self, registry, recorder):
        registry.subscribe(recorder)

        registry.notify_all("u1", "v1", "users")

        assert recorder.calls == [("u1", "v1", "users")]

    def test_non_callable_listener_rejected(self, registry):
        with pytest.raises(InvalidSubscriberError) as exc_info:
            registry.subscribe("not a function")

        assert isinstance(exc_info.value, SubscriptionError)
        assert exc_info.value.message == "Invalid ADI subscriber"

    def test_duplicate_subscription_is_idempotent(self, registry, recorder):
        unsubscribe = registry.subscribe(recorder)
        second = registry.subscribe(recorder)

        assert len(registry) == 1
        registry.notify_all("k", 1)
        assert recorder.count == 1

        # The second unsubscribe is a no-op and must not remove the listener
        second()
        assert recorder in registry

        unsubscribe()
        assert recorder not in registry

    def test_unsubscribe_is_idempotent(self, registry, recorder, make_recorder):
        other = make_recorder()
        unsubscribe = registry.subscribe(recorder)
        registry.subscribe(other)

        unsubscribe()
        unsubscribe()

        assert len(registry) == 1
        registry.notify_all("k", 1)
        assert recorder.count == 0
        assert other.count == 1

    def test_notification_order_follows_registration(self, registry):
        order = []
        registry.subscribe(lambda k, v, s: order.append("first"))
        registry.subscribe(lambda k, v, s: order.append("second"))
        registry.subscribe(lambda k, v, s: order.append("third"))

        registry.notify_all("k", "v")

        assert order == ["first", "second", "third"]

    def test_identity_not_equality(self, registry):
        class AlwaysEqual:
            def __init__(self):
                self.calls = 0

            def __eq__(self, other):
                return True

            __hash__ = object.__hash__

            def __call__(self, key, value, store_name=None):
                self.calls += 1

        first, second = AlwaysEqual(), AlwaysEqual()
        registry.subscribe(first)
        registry.subscribe(second)

        registry.notify_all("k", "v")

        assert len(registry) == 2
        assert first.calls == 1
        assert second.calls == 1

    def test_clear_removes_everything(self, registry, recorder):
        registry.subscribe(recorder)
        registry.clear()

        registry.notify_all("k", "v")

        assert len(registry) == 0
        assert recorder.count == 0


class TestSubscribeToCaches:
    """Test store-scoped subscriptions."""

    @pytest.fixture
    def registry(self):
        return SubscriberRegistry()

    def test_only_scoped_stores_fire(self, registry, recorder):
        registry.subscribe_to_caches(recorder, ["users"])

        registry.notify_all("i1", "x", "items")
        registry.notify_all("k", "x", None)
        registry.notify_all("u1", "v1", "users")

        assert recorder.calls == [("u1", "v1", "users")]

    def test_predicate_filters(self, registry, recorder):
        registry.subscribe_to_caches(
            recorder,
            ["users", "items"],
            lambda key, value, store: isinstance(value, int) and value > 10,
        )

        registry.notify_all("a", 5, "users")
        registry.notify_all("b", 50, "items")
        registry.notify_all("c", "text", "users")

        assert recorder.calls == [("b", 50, "items")]

    def test_predicate_receives_event(self, registry, recorder):
        predicate = MagicMock(return_value=True)
        registry.subscribe_to_caches(recorder, ["users"], predicate)

        registry.notify_all("u1", "v1", "users")

        predicate.assert_called_once_with("u1", "v1", "users")

    def test_predicate_not_consulted_out_of_scope(self, registry, recorder):
        predicate = MagicMock(return_value=True)
        registry.subscribe_to_caches(recorder, ["users"], predicate)

        registry.notify_all("i1", "v1", "items")

        predicate.assert_not_called()

    def test_empty_scope_rejected(self, registry, recorder):
        with pytest.raises(EmptyScopeError, match="at least one cache name"):
            registry.subscribe_to_caches(recorder, [])

    def test_non_callable_rejected_before_scope_check(self, registry):
        with pytest.raises(InvalidSubscriberError):
            registry.subscribe_to_caches(None, [])

    def test_scoped_listener_shares_global_ordering(self, registry):
        order = []
        registry.subscribe(lambda k, v, s: order.append("global-1"))
        registry.subscribe_to_caches(lambda k, v, s: order.append("scoped"), ["users"])
        registry.subscribe(lambda k, v, s: order.append("global-2"))

        registry.notify_all("u1", "v1", "users")

        assert order == ["global-1", "scoped", "global-2"]

    def test_unsubscribe_scoped(self, registry, recorder):
        unsubscribe = registry.subscribe_to_caches(recorder, ["users"])
        unsubscribe()
        unsubscribe()

        registry.notify_all("u1", "v1", "users")

        assert len(registry) == 0
        assert recorder.count == 0

    def test_scoped_listener_wraps_listener(self, recorder):
        scoped = ScopedListener(recorder, ["users"])

        scoped("u1", "v1", "users")
        scoped("u1", "v1", "items")

        assert scoped.store_names == frozenset({"users"})
        assert recorder.calls == [("u1", "v1", "users")]


class TestFanOut:
    """Test notification semantics."""

    def test_listener_error_propagates_and_stops_fan_out(self, recorder):
        registry = SubscriberRegistry()

        def failing(key, value, store_name=None):
            raise RuntimeError("listener failed")

        registry.subscribe(failing)
        registry.subscribe(recorder)

        with pytest.raises(RuntimeError, match="listener failed"):
            registry.notify_all("k", "v", "users")

        assert recorder.count == 0

    def test_isolated_errors_are_logged(self, recorder, caplog):
        registry = SubscriberRegistry(isolate_errors=True)

        def failing(key, value, store_name=None):
            raise RuntimeError("listener failed")

        registry.subscribe(failing)
        registry.subscribe(recorder)

        with caplog.at_level(logging.ERROR, logger="neo_adi.features.cache.services.subscriber_registry"):
            registry.notify_all("k", "v", "users")

        assert recorder.calls == [("k", "v", "users")]
        assert any("failed for key k" in record.getMessage() for record in caplog.records)

    def test_subscribing_during_fan_out_waits_for_next_pass(self, recorder):
        registry = SubscriberRegistry()

        def adds_listener(key, value, store_name=None):
            registry.subscribe(recorder)

        registry.subscribe(adds_listener)

        registry.notify_all("first", 1)
        assert recorder.count == 0

        registry.notify_all("second", 2)
        assert recorder.calls == [("second", 2, None)]

    def test_unsubscribing_during_fan_out_keeps_current_pass(self, recorder):
        registry = SubscriberRegistry()
        handles = {}

        def removes_recorder(key, value, store_name=None):
            handles["recorder"]()

        registry.subscribe(removes_recorder)
        handles["recorder"] = registry.subscribe(recorder)

        registry.notify_all("first", 1)
        registry.notify_all("second", 2)

        assert recorder.calls == [("first", 1, None)]
