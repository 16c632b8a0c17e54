# platapay/utils/__init__.py
"""
Utility functions package.

- general.py: service result handling and request validation helpers
- tokens.py: verification tokens and application IDs
"""

from .general import _handle_service_result, missing_fields
from .tokens import generate_verification_token, generate_application_id

__all__ = [
    '_handle_service_result',
    'missing_fields',
    'generate_verification_token',
    'generate_application_id',
]
