"""
Input validation utilities for Meeting Summarizer application.
"""
import re
import logging
from typing import Any, Dict, List, Optional, Tuple

from src.utils.helpers import describe_size

logger = logging.getLogger(__name__)

ALLOWED_UPLOAD_MIMETYPES = (
    'text/plain',
    'application/msword',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
)

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')


def validate_email(email: Any) -> Tuple[bool, str]:
    """
    Validate email address format.

    Args:
        email: Email address to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(email, str) or not email.strip():
        return False, "Email is required"

    email = email.strip()

    if len(email) > 255:
        return False, "Email is too long"

    if not EMAIL_PATTERN.match(email):
        return False, f"Invalid email address: {email}"

    return True, "Valid email"


def validate_required_text(value: Any, label: str) -> Tuple[bool, str]:
    """Check that a field is a string with non-whitespace content."""
    if not isinstance(value, str) or not value.strip():
        return False, f"{label} is required"
    return True, f"Valid {label.lower()}"


def validate_generate_request(data: Any) -> Tuple[bool, str]:
    """
    Validate a summary generation payload.

    Args:
        data: Parsed JSON body

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(data, dict):
        return False, "Request body must be a JSON object"

    is_valid, error_msg = validate_required_text(data.get('transcript'), "Transcript")
    if not is_valid:
        return False, error_msg

    is_valid, error_msg = validate_required_text(data.get('prompt'), "Custom prompt")
    if not is_valid:
        return False, error_msg

    return True, "Valid request"


def validate_recipients(recipients: Any) -> Tuple[bool, str]:
    """
    Validate a recipient list: non-empty, every entry a well-formed address.

    Args:
        recipients: Candidate recipient list

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(recipients, list):
        return False, "Recipients must be a list of email addresses"

    if not recipients:
        return False, "At least one recipient is required"

    for recipient in recipients:
        is_valid, error_msg = validate_email(recipient)
        if not is_valid:
            return False, error_msg

    return True, "Valid recipients"


def validate_send_email_request(data: Any) -> Tuple[bool, str]:
    """
    Validate a send-email payload.

    Args:
        data: Parsed JSON body

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(data, dict):
        return False, "Request body must be a JSON object"

    is_valid, error_msg = validate_required_text(data.get('summaryId'), "Summary ID")
    if not is_valid:
        return False, error_msg

    is_valid, error_msg = validate_recipients(data.get('recipients'))
    if not is_valid:
        return False, error_msg

    is_valid, error_msg = validate_required_text(data.get('subject'), "Subject")
    if not is_valid:
        return False, error_msg

    message = data.get('message')
    if message is not None and not isinstance(message, str):
        return False, "Message must be a string"

    for flag in ('includeOriginal', 'sendCopy'):
        if flag in data and not isinstance(data[flag], bool):
            return False, f"{flag} must be a boolean"

    return True, "Valid request"


def validate_upload(filename: Optional[str], mimetype: Optional[str], size: int, max_size: int) -> Tuple[bool, str]:
    """
    Validate an uploaded transcript file.

    Args:
        filename: Client-supplied filename
        mimetype: Declared content type
        size: Payload size in bytes
        max_size: Maximum accepted size in bytes

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not filename:
        return False, "No file uploaded"

    if mimetype not in ALLOWED_UPLOAD_MIMETYPES:
        return False, "Only text files (.txt, .doc, .docx) are allowed"

    if size > max_size:
        return False, f"File '{filename}' is too large. Maximum size: {describe_size(max_size)}"

    return True, "Valid upload"


def normalize_send_options(data: Dict[str, Any]) -> Dict[str, Any]:
    """Fill defaults for the optional send-email fields."""
    message = data.get('message')
    return {
        'message': message if message and message.strip() else None,
        'include_original': bool(data.get('includeOriginal', False)),
        'send_copy': bool(data.get('sendCopy', False)),
    }


def sanitize_input(input_string: str, max_length: Optional[int] = None) -> str:
    """
    Sanitize user input string.

    Args:
        input_string: String to sanitize
        max_length: Optional maximum length

    Returns:
        Sanitized string
    """
    if not input_string:
        return ""

    # Strip whitespace
    sanitized = input_string.strip()

    # Remove control characters
    sanitized = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', sanitized)

    # Limit length if specified
    if max_length and len(sanitized) > max_length:
        sanitized = sanitized[:max_length].strip()

    return sanitized


def clean_recipients(recipients: List[str]) -> List[str]:
    return [recipient.strip() for recipient in recipients]
