# platapay/widget/channel.py
"""
Cross-document message channel.

Models a window's incoming postMessage traffic as an injected capability so
the host loader and the inner frame reporter can be wired to a real browser
bridge or to the in-process channel used by server-side hosts and tests.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Callable, List

logger = logging.getLogger(__name__)

ANY_ORIGIN = "*"


@dataclass(frozen=True)
class MessageEvent:
    """A delivered message: the payload plus the sender's origin."""
    data: Any
    origin: str


class MessageChannel:
    """
    Capability interface for a window's message bus.

    subscribe() returns a zero-argument callable that removes the listener.
    publish() posts a payload to the window that owns this channel.
    """

    def subscribe(self, listener: Callable[[MessageEvent], None]) -> Callable[[], None]:
        raise NotImplementedError

    def publish(self, data: Any, origin: str, target_origin: str = ANY_ORIGIN) -> None:
        raise NotImplementedError


class InProcessChannel(MessageChannel):
    """
    Synchronous channel for one receiving window.

    Mirrors window.postMessage: a message addressed to a specific
    target_origin is only delivered if it matches the receiving window's
    origin, and listeners get a deep copy of the payload.
    """

    def __init__(self, window_origin=''):
        self.window_origin = window_origin
        self._listeners: List[Callable[[MessageEvent], None]] = []

    @property
    def listener_count(self):
        return len(self._listeners)

    def subscribe(self, listener):
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, data, origin, target_origin=ANY_ORIGIN):
        if target_origin != ANY_ORIGIN and target_origin != self.window_origin:
            return

        # Snapshot so listeners can unsubscribe while we deliver
        for listener in list(self._listeners):
            event = MessageEvent(data=copy.deepcopy(data), origin=origin)
            try:
                listener(event)
            except Exception:
                # A failing listener must not break the others
                logger.exception("Message listener raised while handling event from %s", origin)
