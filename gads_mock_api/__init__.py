"""
HTTP surface for the mock Google Ads data engine.

Flask app factory, request validation, mock auth and the command line entry point.
"""

from .app import create_app

__all__ = [
    'create_app',
]
