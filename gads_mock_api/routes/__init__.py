"""
Routes package - Blueprint-based API routes.

health:   /api/v1/health
accounts: /api/v1/gads/accounts...
reports:  /api/v1/gads/reports, /api/v1/gads/accounts/<id>/reports
"""

from flask import Flask

API_PREFIX = '/api/v1'
GADS_PREFIX = '/api/v1/gads'


def register_blueprints(app: Flask):
    """
    Register route blueprints.

    This is called from create_app() in app.py.
    """
    from gads_mock_api.routes import health
    app.register_blueprint(health.bp, url_prefix=API_PREFIX)

    from gads_mock_api.routes import accounts, reports
    app.register_blueprint(accounts.bp, url_prefix=GADS_PREFIX)
    app.register_blueprint(reports.bp, url_prefix=GADS_PREFIX)

    app.logger.debug("Registered blueprints: health, accounts, reports")
