"""
Mock Authentication
Reads the x-api-key header and reports whether one was sent (NOT enforced).
"""

from flask import g, request
from functools import wraps
from typing import Dict, Union


def api_key_status() -> Dict[str, Union[bool, str]]:
    """
    Describe the authentication state of the current request.

    Any non-empty x-api-key value counts as authenticated. Requests without
    one are still served.

    Returns:
        {"authenticated": bool, "message": str}
    """
    api_key = request.headers.get("x-api-key", "")

    if api_key:
        return {
            "authenticated": True,
            "message": "Authenticated successfully",
        }
    return {
        "authenticated": False,
        "message": "Missing x-api-key header. Provide any string value to authenticate.",
    }


def with_auth_status(f):
    """
    Decorator that stores api_key_status() on flask.g.auth_status.
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        g.auth_status = api_key_status()
        return f(*args, **kwargs)

    return decorated_function
