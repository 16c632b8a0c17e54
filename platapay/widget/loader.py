# platapay/widget/loader.py
"""
Host side of the resize protocol.

HostLoader does for a parsed host page (BeautifulSoup document) what
/embed.js and /embed-map.js do in a browser:

1. Find the integrator's container element by id.
2. Append an iframe with a fallback height.
3. Listen on the window's message channel and apply resize messages that
   come from the trusted origin.

Every failure path leaves the page usable: a missing container is logged
and skipped, foreign or malformed messages are dropped without a trace.
"""

import logging
from dataclasses import dataclass

from .messages import origin_of, parse_resize_message

logger = logging.getLogger(__name__)

FORM_CONTAINER_ID = "platapay-agent-form-container"
FORM_IFRAME_ID = "platapay-agent-form"
FORM_FALLBACK_HEIGHT = 600

MAP_CONTAINER_ID = "platapay-agent-map-container"
MAP_IFRAME_ID = "platapay-agent-map"
MAP_FALLBACK_HEIGHT = 500


@dataclass(frozen=True)
class EmbedTarget:
    """Everything a loader needs to know about one embeddable widget."""
    name: str
    container_id: str
    iframe_id: str
    embed_url: str
    trusted_origin: str
    fallback_height: int

    @property
    def missing_container_message(self):
        return (
            f'Container element not found. Add a div with id="{self.container_id}" '
            f'to your page.'
        )


def form_target(embed_url, trusted_origin=None):
    """The registration form widget, hosted on its own configured domain."""
    return EmbedTarget(
        name='form',
        container_id=FORM_CONTAINER_ID,
        iframe_id=FORM_IFRAME_ID,
        embed_url=embed_url,
        trusted_origin=trusted_origin or origin_of(embed_url),
        fallback_height=FORM_FALLBACK_HEIGHT,
    )


def map_target(script_origin):
    """The agent map widget, served from the same origin as its loader script."""
    origin = origin_of(script_origin)
    return EmbedTarget(
        name='map',
        container_id=MAP_CONTAINER_ID,
        iframe_id=MAP_IFRAME_ID,
        embed_url=f"{origin}/embed/map",
        trusted_origin=origin,
        fallback_height=MAP_FALLBACK_HEIGHT,
    )


def parse_style(style):
    """'a: 1; b: 2' -> {'a': '1', 'b': '2'}, keeping declaration order."""
    declarations = {}
    for chunk in (style or '').split(';'):
        name, sep, value = chunk.partition(':')
        if sep and name.strip():
            declarations[name.strip().lower()] = value.strip()
    return declarations


def format_style(declarations):
    return '; '.join(f"{name}: {value}" for name, value in declarations.items())


class HostLoader:

    def __init__(self, target, channel):
        self.target = target
        self.channel = channel
        self.iframe = None
        self._unsubscribe = None

    def install(self, document):
        """
        Inserts the iframe into the host document.

        Args:
            document (bs4.BeautifulSoup): The parsed host page.

        Returns:
            bs4.element.Tag | None: The new iframe, or None when the
            container is missing (a diagnostic is logged). A loader that is
            already installed returns its existing iframe.
        """
        if self._unsubscribe is not None:
            return self.iframe

        container = document.find(id=self.target.container_id)
        if container is None:
            logger.error(self.target.missing_container_message)
            return None

        iframe = document.new_tag('iframe', attrs={
            'id': self.target.iframe_id,
            'src': self.target.embed_url,
            'scrolling': 'no',
            'style': format_style({
                'width': '100%',
                'height': f"{self.target.fallback_height}px",
                'border': 'none',
                'overflow': 'hidden',
            }),
        })
        container.append(iframe)
        self.iframe = iframe

        self._unsubscribe = self.channel.subscribe(self.handle_message)
        logger.info(
            "Embedded %s widget from %s into #%s",
            self.target.name, self.target.embed_url, self.target.container_id,
        )
        return iframe

    def remove(self):
        """Stops listening for messages. The iframe stays where it is."""
        if self._unsubscribe is not None:
            unsubscribe, self._unsubscribe = self._unsubscribe, None
            unsubscribe()

    @property
    def height(self):
        if self.iframe is None:
            return None
        return parse_style(self.iframe.get('style')).get('height')

    def handle_message(self, event):
        if event.origin != self.target.trusted_origin:
            return

        message = parse_resize_message(event.data)
        if message is None or self.iframe is None:
            return

        declarations = parse_style(self.iframe.get('style'))
        declarations['height'] = message.css_height
        self.iframe['style'] = format_style(declarations)
