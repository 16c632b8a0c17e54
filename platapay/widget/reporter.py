# platapay/widget/reporter.py
"""
Inner frame side of the resize protocol.

InnerFrameReporter sends the current content height to the parent window
once on start and again for every mutation batch the watcher reports,
until it is stopped.

Usage:
    with InnerFrameReporter(watcher, parent_channel, frame_origin) as reporter:
        ...  # content changes are reported while inside the block
"""

import logging

from .channel import ANY_ORIGIN
from .messages import ResizeMessage

logger = logging.getLogger(__name__)


class InnerFrameReporter:

    def __init__(self, watcher, parent_channel, frame_origin, target_origin=ANY_ORIGIN):
        self.watcher = watcher
        self.parent_channel = parent_channel
        self.frame_origin = frame_origin
        # The payload is just a height, so any parent may read it
        self.target_origin = target_origin
        self.messages_sent = 0
        self._disconnect = None

    @property
    def running(self):
        return self._disconnect is not None

    def start(self):
        if self.running:
            return self

        self._send(self.watcher.measure())
        self._disconnect = self.watcher.subscribe(self._on_mutation)
        logger.debug("Resize reporter started for %s", self.frame_origin)
        return self

    def stop(self):
        """Disconnects from the watcher. Safe to call more than once."""
        if self._disconnect is None:
            return

        disconnect, self._disconnect = self._disconnect, None
        disconnect()
        logger.debug("Resize reporter stopped after %d messages", self.messages_sent)

    def _on_mutation(self, height):
        # Late notifications after stop() are ignored
        if self.running:
            self._send(height)

    def _send(self, height):
        message = ResizeMessage(height=height)
        self.parent_channel.publish(
            message.to_dict(),
            origin=self.frame_origin,
            target_origin=self.target_origin,
        )
        self.messages_sent += 1

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
