# platapay/utils/tokens.py

import hashlib
import secrets
import string
import time

_BASE36 = string.digits + string.ascii_lowercase


def _timestamp_ms():
    return int(time.time() * 1000)


def generate_verification_token(email):
    """
    Generates a token for email verification.

    SHA-256 hex digest of "<email>:<millisecond timestamp>".
    """
    data = f"{email}:{_timestamp_ms()}"
    return hashlib.sha256(data.encode('utf-8')).hexdigest()


def generate_application_id(email):
    """
    Generates the short application reference shown to applicants.

    First 8 characters of the MD5 hex digest of
    "<email>:<millisecond timestamp>:<6 random base36 chars>", upper-cased.
    """
    random_str = ''.join(secrets.choice(_BASE36) for _ in range(6))
    data = f"{email}:{_timestamp_ms()}:{random_str}"
    return hashlib.md5(data.encode('utf-8')).hexdigest()[:8].upper()
