"""
Email API routes for Meeting Summarizer application.
"""
import logging
from flask import Blueprint, request, jsonify
from werkzeug.exceptions import RequestEntityTooLarge

from src.services.email_service import EmailService
from src.utils.exceptions import SummarizerError

logger = logging.getLogger(__name__)


def create_email_blueprint(base_path: str, email_service: EmailService) -> Blueprint:
    """
    Create email blueprint with routes.

    Args:
        base_path: Base path for routes
        email_service: Email service instance

    Returns:
        Flask Blueprint
    """
    email_bp = Blueprint('email', __name__)

    @email_bp.route(f'{base_path}/api/send-email', methods=['POST'])
    def send_email():
        """Email a stored summary."""
        try:
            data = request.get_json(silent=True)
            result = email_service.send_summary_email(data)
            logger.info(f"Summary shared with {result['recipientCount']} recipients")
            return jsonify({'success': True, **result})
        except SummarizerError as e:
            logger.error(f"Email sending error: {e.message}")
            return jsonify({'success': False, 'error': e.message}), e.status_code
        except RequestEntityTooLarge:
            raise
        except Exception as e:
            logger.error(f"Email sending error: {e}")
            return jsonify({'success': False, 'error': str(e)}), 500

    return email_bp
