"""
Summary API routes for Meeting Summarizer application.
"""
import logging
from flask import Blueprint, request, jsonify
from werkzeug.exceptions import RequestEntityTooLarge

from src.services.summary_service import SummaryService
from src.services.upload_service import UploadService
from src.utils.exceptions import SummarizerError

logger = logging.getLogger(__name__)


def create_summary_blueprint(base_path: str, summary_service: SummaryService, upload_service: UploadService) -> Blueprint:
    """
    Create summary blueprint with routes.

    Args:
        base_path: Base path for routes (e.g., '' or '/summarizer')
        summary_service: Summary service instance
        upload_service: Upload service instance

    Returns:
        Flask Blueprint
    """
    summary_bp = Blueprint('summaries', __name__)

    @summary_bp.route(f'{base_path}/api/upload', methods=['POST'])
    def upload_transcript():
        """Decode an uploaded transcript file."""
        try:
            result = upload_service.handle_file_upload(request.files.get('file'))
            return jsonify({'success': True, **result})
        except SummarizerError as e:
            return jsonify({'success': False, 'error': e.message}), e.status_code
        except RequestEntityTooLarge:
            raise
        except Exception as e:
            logger.error(f"File upload error: {e}")
            return jsonify({'success': False, 'error': str(e)}), 500

    @summary_bp.route(f'{base_path}/api/generate-summary', methods=['POST'])
    def generate_summary():
        """Generate a summary with the first available AI provider."""
        try:
            data = request.get_json(silent=True)
            result = summary_service.generate_summary(data)
            return jsonify({'success': True, **result})
        except SummarizerError as e:
            logger.error(f"Summary generation error: {e.message}")
            return jsonify({'success': False, 'error': e.message}), e.status_code
        except RequestEntityTooLarge:
            raise
        except Exception as e:
            logger.error(f"Summary generation error: {e}")
            return jsonify({'success': False, 'error': str(e)}), 500

    @summary_bp.route(f'{base_path}/api/summaries/<summary_id>', methods=['GET'])
    def get_summary(summary_id):
        """Get a stored summary."""
        try:
            summary = summary_service.get_summary(summary_id)
            return jsonify({'success': True, **summary.to_dict()})
        except SummarizerError as e:
            return jsonify({'success': False, 'error': e.message}), e.status_code
        except Exception as e:
            logger.error(f"Get summary error: {e}")
            return jsonify({'success': False, 'error': str(e)}), 500

    @summary_bp.route(f'{base_path}/api/summaries/<summary_id>', methods=['PATCH'])
    def update_summary(summary_id):
        """Preview an edited summary. The stored record is left unchanged."""
        try:
            data = request.get_json(silent=True)
            result = summary_service.preview_summary_update(summary_id, data)
            return jsonify({'success': True, **result})
        except SummarizerError as e:
            return jsonify({'success': False, 'error': e.message}), e.status_code
        except RequestEntityTooLarge:
            raise
        except Exception as e:
            logger.error(f"Summary update error: {e}")
            return jsonify({'success': False, 'error': str(e)}), 500

    @summary_bp.route(f'{base_path}/api/summaries/<summary_id>/email-logs', methods=['GET'])
    def get_email_logs(summary_id):
        """Get the email send history of a summary."""
        try:
            logs = summary_service.get_email_logs(summary_id)
            return jsonify({'success': True, 'emailLogs': logs, 'count': len(logs)})
        except SummarizerError as e:
            return jsonify({'success': False, 'error': e.message}), e.status_code
        except Exception as e:
            logger.error(f"Email logs error: {e}")
            return jsonify({'success': False, 'error': str(e)}), 500

    @summary_bp.route(f'{base_path}/api/ai-status', methods=['GET'])
    def ai_status():
        """Report which AI providers are configured."""
        try:
            return jsonify({'success': True, **summary_service.get_ai_status()})
        except Exception as e:
            logger.error(f"AI status error: {e}")
            return jsonify({'success': False, 'error': str(e)}), 500

    return summary_bp
