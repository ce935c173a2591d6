"""
API routes initialization for Meeting Summarizer application.
"""
import logging
from flask import Flask, jsonify
from werkzeug.exceptions import RequestEntityTooLarge

from src.api.email_routes import create_email_blueprint
from src.api.summary_routes import create_summary_blueprint
from src.utils.helpers import describe_size

logger = logging.getLogger(__name__)


def register_all_routes(app: Flask, base_path: str, services: dict):
    """
    Register all API route blueprints.

    Args:
        app: Flask application instance
        base_path: Base path for all routes (e.g., '' or '/summarizer')
        services: Dictionary of service instances
    """
    try:
        summary_bp = create_summary_blueprint(
            base_path,
            services['summary_service'],
            services['upload_service']
        )
        app.register_blueprint(summary_bp)
        logger.info("Summary routes registered")

        email_bp = create_email_blueprint(base_path, services['email_service'])
        app.register_blueprint(email_bp)
        logger.info("Email routes registered")

        register_error_handlers(app)

        logger.info(f"All API routes registered with base path: {base_path or '/'}")

    except Exception as e:
        logger.error(f"Error registering routes: {e}")
        raise


def register_error_handlers(app: Flask):
    """Report oversized request bodies as a client error in the API's JSON shape."""

    @app.errorhandler(RequestEntityTooLarge)
    def request_too_large(e):
        limit = describe_size(app.config.get('MAX_CONTENT_LENGTH') or 0)
        logger.warning("Rejected oversized request body")
        return jsonify({'success': False, 'error': f"Request is too large. Maximum size: {limit}"}), 400
