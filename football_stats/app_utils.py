from typing import Any, Optional

from flask import jsonify

from .errors import APIError


def make_ok(data: Optional[Any] = None, status_code: int = 200, cache_control: Optional[str] = None):
    """Return the raw payload as JSON, optionally with a CDN cache header."""
    response = jsonify(data if data is not None else {})
    if cache_control:
        response.headers["Cache-Control"] = cache_control
    return response, status_code


def make_error(error: Any, status_code: int = 400):
    """Return ``{"error": message}``; APIErrors contribute only their message."""
    if isinstance(error, APIError):
        error = error.message
    response = jsonify({"error": error})
    return response, status_code
