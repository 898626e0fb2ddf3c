"""
Mock Google Ads Data API - Flask Application
Serves deterministic synthetic accounts, hierarchies and performance reports.
"""

from flask import Flask, jsonify, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from pathlib import Path
from typing import Optional
import logging
from logging.handlers import RotatingFileHandler

from werkzeug.exceptions import HTTPException

from gads_mock.cache import StructureCache
from gads_mock.config_loader import build_account_directory
from gads_mock.errors import MockApiError
from gads_mock.report import ReportService
from gads_mock.settings import Settings, get_settings
from gads_mock_api.routes import register_blueprints

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}


def error_response(code: str, message: str, status: int, details=None):
    """JSON error envelope: {"error": {"code", "message", "details"?}}."""
    payload = {"code": code, "message": message}
    if details is not None:
        payload["details"] = details
    return jsonify({"error": payload}), status


def create_app(settings: Optional[Settings] = None, cache: Optional[StructureCache] = None):
    """
    Create and configure the Flask application.

    Args:
        settings: Settings instance (default: get_settings() from env/.env)
        cache: StructureCache to serve from (default: new cache over the
            configured seed accounts)

    Returns:
        Flask app instance
    """
    settings = settings or get_settings()

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["TESTING"] = settings.env == "test"
    # Metric keys keep the order the caller asked for
    app.json.sort_keys = False

    # Configure logging
    app.logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    if settings.log_dir and not app.debug and not app.testing:
        logs_dir = Path(settings.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)

        # File handler with rotation
        file_handler = RotatingFileHandler(
            logs_dir / 'api.log',
            maxBytes=10240000,  # 10MB
            backupCount=10
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        app.logger.info('Mock Google Ads API startup')

    # Structure cache and report service are created once per app
    if cache is None:
        cache = StructureCache(build_account_directory(settings.accounts_config))
    app.config['STRUCTURE_CACHE'] = cache
    app.config['REPORT_SERVICE'] = ReportService(cache)

    limiter = Limiter(
        app=app,
        key_func=get_remote_address,
        default_limits=settings.rate_limits,
        storage_uri="memory://",
        enabled=not app.testing,
    )
    app.config['LIMITER'] = limiter

    register_blueprints(app)

    @app.after_request
    def add_headers(response):
        """CORS (allow all) and basic security headers."""
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type, x-api-key"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    # Centralized error handlers
    @app.errorhandler(MockApiError)
    def mock_api_error(error: MockApiError):
        """Typed core/validation errors carry their own status."""
        if error.status >= 500:
            app.logger.error(f'{error.code}: {error.message}')
        else:
            app.logger.info(f'{error.code}: {error.message} [{request.method} {request.path}]')
        return jsonify({"error": error.to_dict()}), error.status

    @app.errorhandler(404)
    def not_found_error(error):
        return error_response('NOT_FOUND', f'Endpoint {request.path} does not exist', 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return error_response(
            'METHOD_NOT_ALLOWED', f'Method {request.method} not allowed on {request.path}', 405
        )

    @app.errorhandler(429)
    def ratelimit_error(error):
        return error_response('RATE_LIMIT_EXCEEDED', 'Too many requests. Please slow down.', 429)

    @app.errorhandler(Exception)
    def internal_error(error):
        """Anything unexpected becomes a generic 500."""
        if isinstance(error, HTTPException):
            return error_response(
                error.name.upper().replace(' ', '_'), error.description, error.code
            )
        app.logger.exception(f'Server Error: {error}')
        return error_response('INTERNAL_ERROR', 'An unexpected error occurred', 500)

    return app


def main(host: Optional[str] = None, port: Optional[int] = None, debug: Optional[bool] = None):
    """
    Run the API server.

    Args:
        host, port: Override HOST / PORT settings
        debug: Flask debug mode (default: on when APP_ENV=development)
    """
    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    if debug is None:
        debug = settings.env == "development"
    app = create_app(settings)

    accounts = app.config['STRUCTURE_CACHE'].list_accounts()

    print("=" * 80)
    print("MOCK GOOGLE ADS DATA API - Starting")
    print("=" * 80)
    print(f"Seed accounts: {len(accounts)}")
    for account in accounts:
        print(f"  • {account.id} {account.name}")
    print()
    print(f"API running at: http://localhost:{port}/api/v1")
    print(f"Health check:   http://localhost:{port}/api/v1/health")
    print()
    print("Press CTRL+C to stop")
    print("=" * 80)
    print()

    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
