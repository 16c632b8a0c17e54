"""Tests for verification tokens and application IDs."""

import hashlib
import re
from unittest.mock import patch

from platapay.utils import generate_application_id, generate_verification_token


class TestVerificationToken:
    def test_is_sha256_of_email_and_timestamp(self):
        with patch("platapay.utils.tokens._timestamp_ms", return_value=1700000000000):
            token = generate_verification_token("maria@example.com")

        expected = hashlib.sha256(b"maria@example.com:1700000000000").hexdigest()
        assert token == expected

    def test_changes_over_time(self):
        with patch("platapay.utils.tokens._timestamp_ms", side_effect=[1, 2]):
            assert generate_verification_token("a@b.c") != generate_verification_token("a@b.c")


class TestApplicationId:
    def test_format(self):
        assert re.fullmatch(r"[0-9A-F]{8}", generate_application_id("maria@example.com"))

    def test_random_component_makes_ids_differ(self):
        with patch("platapay.utils.tokens._timestamp_ms", return_value=1700000000000):
            ids = {generate_application_id("maria@example.com") for _ in range(20)}
        assert len(ids) > 1
