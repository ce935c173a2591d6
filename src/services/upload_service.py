"""
Upload service for Meeting Summarizer application.
Turns an uploaded transcript file into text for the wizard.
"""
import logging
from typing import Any, Dict

from src.utils.exceptions import ValidationError
from src.utils.helpers import decode_transcript_bytes, describe_size
from src.utils.validators import validate_upload

logger = logging.getLogger(__name__)


class UploadService:
    """Service for decoding uploaded transcript files."""

    def __init__(self, max_upload_size: int = 10 * 1024 * 1024):
        """
        Initialize upload service.

        Args:
            max_upload_size: Maximum accepted file size in bytes
        """
        self.max_upload_size = max_upload_size

    def handle_file_upload(self, file: Any) -> Dict[str, Any]:
        """
        Read and decode an uploaded transcript.

        Word documents are not parsed; their bytes are decoded like plain text.

        Args:
            file: werkzeug FileStorage (or None when the field was missing)

        Returns:
            Dict with 'text', 'filename' and 'size'

        Raises:
            ValidationError: If the file is missing, of the wrong type or too large
        """
        if file is None or not file.filename:
            raise ValidationError("No file uploaded")

        # Read one byte past the limit so oversized uploads are detected without loading them whole
        raw = file.stream.read(self.max_upload_size + 1)
        is_valid, error_msg = validate_upload(file.filename, file.mimetype, len(raw), self.max_upload_size)
        if not is_valid:
            logger.warning(f"Rejected upload '{file.filename}': {error_msg}")
            raise ValidationError(error_msg)

        text = decode_transcript_bytes(raw)
        logger.info(f"Uploaded transcript '{file.filename}' ({describe_size(len(raw))})")

        return {
            'text': text,
            'filename': file.filename,
            'size': len(raw),
        }
