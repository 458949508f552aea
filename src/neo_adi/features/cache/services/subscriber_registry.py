"""Subscriber registry - listener bookkeeping and notification fan-out."""

import logging
from typing import Any, Iterable, List, Optional

from ..entities.protocols import Listener, Predicate, Unsubscriber
from ....core.exceptions import EmptyScopeError, InvalidSubscriberError

logger = logging.getLogger(__name__)


def _always(key: str, value: Any, store_name: Optional[str] = None) -> bool:
    return True


def _no_op() -> None:
    return None


class ScopedListener:
    """Listener that only fires for selected stores.

    Registered like any other listener; on each notification it calls the
    wrapped listener when the store name is in scope and the predicate holds.
    """

    def __init__(
        self,
        listener: Listener,
        store_names: Iterable[str],
        predicate: Optional[Predicate] = None
    ):
        self.listener = listener
        self.store_names = frozenset(store_names)
        self.predicate = predicate or _always

    def __call__(self, key: str, value: Any, store_name: Optional[str] = None) -> None:
        if store_name in self.store_names and self.predicate(key, value, store_name):
            self.listener(key, value, store_name)

    def __repr__(self) -> str:
        return f"ScopedListener({self.listener!r}, stores={sorted(self.store_names)})"


class SubscriberRegistry:
    """Ordered set of listeners notified on every ADI write or publish.

    Listeners are compared by identity. Notification order is registration
    order, and each fan-out iterates over a snapshot so (un)subscribing from
    inside a listener only affects later notifications.
    """

    def __init__(self, isolate_errors: bool = False):
        self.isolate_errors = isolate_errors
        self._subscribers: List[Listener] = []

    def __len__(self) -> int:
        return len(self._subscribers)

    def __contains__(self, listener: object) -> bool:
        return any(s is listener for s in self._subscribers)

    def subscribe(self, listener: Listener) -> Unsubscriber:
        """Register a listener for every notification.

        Args:
            listener: Callable receiving ``(key, value, store_name)``

        Returns:
            Idempotent unsubscribe function. Re-registering a listener that is
            already present returns a no-op.

        Raises:
            InvalidSubscriberError: If the listener is not callable
        """
        if not callable(listener):
            raise InvalidSubscriberError(details={"listener": repr(listener)})
        if listener in self:
            return _no_op

        self._subscribers.append(listener)
        return self._unsubscriber(listener)

    def subscribe_to_caches(
        self,
        listener: Listener,
        store_names: Iterable[str],
        predicate: Optional[Predicate] = None
    ) -> Unsubscriber:
        """Register a listener for notifications from specific stores only.

        Args:
            listener: Callable receiving ``(key, value, store_name)``
            store_names: Stores the listener cares about
            predicate: Extra filter over ``(key, value, store_name)``

        Returns:
            Idempotent unsubscribe function

        Raises:
            InvalidSubscriberError: If the listener is not callable
            EmptyScopeError: If no store names are given
        """
        if not callable(listener):
            raise InvalidSubscriberError(details={"listener": repr(listener)})

        if isinstance(store_names, str):
            store_names = [store_names]
        store_names = list(store_names or [])
        if not store_names:
            raise EmptyScopeError()

        scoped = ScopedListener(listener, store_names, predicate)
        self._subscribers.append(scoped)
        return self._unsubscriber(scoped)

    def notify_all(self, key: str, value: Any, store_name: Optional[str] = None) -> None:
        """Call every listener with ``(key, value, store_name)``.

        A listener exception propagates and stops the fan-out unless the
        registry isolates errors, in which case it is logged and skipped.
        """
        for listener in tuple(self._subscribers):
            if not self.isolate_errors:
                listener(key, value, store_name)
                continue

            try:
                listener(key, value, store_name)
            except Exception:
                logger.exception(f"ADI listener {listener!r} failed for key {key} in store {store_name}")

    def clear(self) -> None:
        """Remove every listener."""
        self._subscribers = []

    def _unsubscriber(self, listener: Listener) -> Unsubscriber:
        def unsubscribe() -> None:
            self._subscribers = [s for s in self._subscribers if s is not listener]

        return unsubscribe
