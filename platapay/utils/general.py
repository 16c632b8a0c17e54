# platapay/utils/general.py
"""
General-purpose utility functions.

Service functions return either a result dict with a 'success' key or a
(dict, status_code) tuple; routes hand those to _handle_service_result.
"""

from flask import jsonify


def _handle_service_result(result, default_error_status=500):
    """
    Parses the result from a service function.
    If it's a tuple (dict, status_code), it uses the custom status code.
    Otherwise, it assumes success (status 200) or uses the default error status.

    Adds 'error_code' field to error responses for structured frontend handling.
    """
    if isinstance(result, tuple) and len(result) == 2:
        payload, status_code = result
        if not payload.get("success", True):
            payload["error_code"] = payload.get("error_code", status_code)
        return jsonify(payload), status_code

    if result.get("success"):
        return jsonify(result), 200
    else:
        result["error_code"] = result.get("error_code", default_error_status)
        return jsonify(result), default_error_status


def missing_fields(data, required):
    """Returns the names in `required` that are absent or blank in `data`."""
    missing = []
    for name in required:
        value = data.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing
