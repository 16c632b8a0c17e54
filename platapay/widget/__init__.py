# platapay/widget/__init__.py
"""
Embeddable widget resize protocol.

Framework-free: nothing here imports Flask, so the same objects back the
embed blueprint, server-side hosts and the test suite.
"""

from .channel import ANY_ORIGIN, InProcessChannel, MessageChannel, MessageEvent
from .loader import EmbedTarget, HostLoader, form_target, map_target
from .messages import RESIZE_TYPE, ResizeMessage, origin_of, parse_resize_message
from .reporter import InnerFrameReporter
from .watcher import ContentSizeWatcher, SyntheticContentWatcher

__all__ = [
    'ANY_ORIGIN',
    'InProcessChannel',
    'MessageChannel',
    'MessageEvent',
    'EmbedTarget',
    'HostLoader',
    'form_target',
    'map_target',
    'RESIZE_TYPE',
    'ResizeMessage',
    'origin_of',
    'parse_resize_message',
    'InnerFrameReporter',
    'ContentSizeWatcher',
    'SyntheticContentWatcher',
]
