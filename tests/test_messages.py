"""Tests for the resize message schema and origin derivation."""

import pytest

from platapay.widget import ResizeMessage, origin_of, parse_resize_message


class TestParseResizeMessage:
    def test_valid_integer_height(self):
        assert parse_resize_message({"type": "resize", "height": 850}) == ResizeMessage(height=850)

    def test_valid_float_height(self):
        assert parse_resize_message({"type": "resize", "height": 412.5}).height == 412.5

    def test_zero_height_is_valid(self):
        assert parse_resize_message({"type": "resize", "height": 0}) == ResizeMessage(height=0)

    def test_extra_fields_are_ignored(self):
        message = parse_resize_message({"type": "resize", "height": 10, "source": "x"})
        assert message == ResizeMessage(height=10)

    @pytest.mark.parametrize("payload", [
        None,
        "resize",
        ["resize", 100],
        {},
        {"type": "resize"},
        {"height": 100},
        {"type": "scroll", "height": 100},
        {"type": "RESIZE", "height": 100},
        {"type": "resize", "height": "100"},
        {"type": "resize", "height": None},
        {"type": "resize", "height": True},
        {"type": "resize", "height": -1},
        {"type": "resize", "height": float("nan")},
        {"type": "resize", "height": float("inf")},
    ])
    def test_malformed_payloads_are_dropped(self, payload):
        """Bad payloads return None instead of raising."""
        assert parse_resize_message(payload) is None


class TestResizeMessage:
    def test_wire_shape(self):
        assert ResizeMessage(height=300).to_dict() == {"type": "resize", "height": 300}

    def test_css_height_integer(self):
        assert ResizeMessage(height=850).css_height == "850px"

    def test_css_height_integral_float_has_no_fraction(self):
        assert ResizeMessage(height=850.0).css_height == "850px"

    def test_css_height_fractional(self):
        assert ResizeMessage(height=850.25).css_height == "850.25px"


class TestOriginOf:
    def test_strips_path_query_and_fragment(self):
        assert origin_of("https://forms.platapay.test/embed?x=1#top") == "https://forms.platapay.test"

    def test_keeps_non_default_port(self):
        assert origin_of("http://localhost:5000/embed/map") == "http://localhost:5000"

    def test_drops_default_port(self):
        assert origin_of("https://platapay.test:443/embed") == "https://platapay.test"
        assert origin_of("http://platapay.test:80/") == "http://platapay.test"

    def test_lowercases_scheme_and_host(self):
        assert origin_of("HTTPS://PlataPay.Test/Embed") == "https://platapay.test"

    def test_host_url_with_trailing_slash(self):
        assert origin_of("http://localhost/") == "http://localhost"

    @pytest.mark.parametrize("url", ["", None, "/embed", "platapay.test/embed"])
    def test_relative_or_empty_urls_have_no_origin(self, url):
        assert origin_of(url) == ""
