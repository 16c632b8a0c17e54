# platapay/widget/watcher.py
"""
Content size sources for the inner frame.

A ContentSizeWatcher reports the scroll height of the embedded page's root
container. It is push-based: subscribers are called once per mutation batch
with a fresh height reading.
"""

from typing import Callable, List


class ContentSizeWatcher:
    """Capability interface: current height plus change notifications."""

    def measure(self) -> float:
        raise NotImplementedError

    def subscribe(self, callback: Callable[[float], None]) -> Callable[[], None]:
        raise NotImplementedError


class SyntheticContentWatcher(ContentSizeWatcher):
    """
    Watcher fed by explicit mutate() calls instead of a rendering engine.

    Used by server-side hosts and tests. Subscriptions can be dropped and
    re-established at any time; readings resume from the current height.
    """

    def __init__(self, height=0):
        self.height = height
        self._subscribers: List[Callable[[float], None]] = []

    @property
    def active(self):
        return bool(self._subscribers)

    def measure(self):
        return self.height

    def subscribe(self, callback):
        self._subscribers.append(callback)

        def disconnect():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return disconnect

    def mutate(self, height=None):
        """Records one mutation batch, optionally changing the height."""
        if height is not None:
            self.height = height

        reading = self.measure()
        for callback in list(self._subscribers):
            callback(reading)
