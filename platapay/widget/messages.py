# platapay/widget/messages.py
"""
Resize message schema and origin helpers.

The inner frame tells its parent how tall its content is with a single
message shape:

    {"type": "resize", "height": <pixels>}

Receivers never raise on bad input. Anything that is not a well-formed
resize message is dropped by returning None from parse_resize_message().
"""

import math
from dataclasses import dataclass
from urllib.parse import urlsplit

RESIZE_TYPE = "resize"

_DEFAULT_PORTS = {'http': 80, 'https': 443}


@dataclass(frozen=True)
class ResizeMessage:
    """A one-shot notification carrying an absolute content height in pixels."""
    height: float
    type: str = RESIZE_TYPE

    def to_dict(self):
        return {"type": self.type, "height": self.height}

    @property
    def css_height(self):
        """Height formatted as a CSS pixel length, e.g. '850px'."""
        height = self.height
        if isinstance(height, float) and height.is_integer():
            height = int(height)
        return f"{height}px"


def _is_pixel_value(value):
    # bool is an int subclass, but True is not a height
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def parse_resize_message(data):
    """
    Validates a raw payload and returns a ResizeMessage, or None.

    Args:
        data: Whatever arrived on the channel (normally a dict).

    Returns:
        ResizeMessage | None: None for any payload that is not a mapping with
        type == "resize" and a non-negative numeric height.
    """
    if not isinstance(data, dict):
        return None

    if data.get("type") != RESIZE_TYPE:
        return None

    height = data.get("height")
    if not _is_pixel_value(height):
        return None

    return ResizeMessage(height=height)


def origin_of(url):
    """
    Returns the 'scheme://host[:port]' origin of a URL.

    Default ports are dropped so 'https://a.com:443/x' and 'https://a.com/y'
    share the origin 'https://a.com'. Returns an empty string for URLs
    without a scheme or host.
    """
    parts = urlsplit(url or '')
    scheme = parts.scheme.lower()
    host = (parts.hostname or '').lower()

    if not scheme or not host:
        return ''

    if ':' in host:
        host = f"[{host}]"

    port = parts.port
    if port is None or _DEFAULT_PORTS.get(scheme) == port:
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"
