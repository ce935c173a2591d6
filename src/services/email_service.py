"""
Email service for Meeting Summarizer application.
Validates share requests, dispatches the email and records the send.
"""
import logging
from typing import Any, Dict

from src.database.memory_store import SummaryStore
from src.models.summary import EmailSendRequest
from src.services.email_dispatcher import EmailDispatcher
from src.utils.exceptions import NotFoundError, UpstreamProviderError, ValidationError
from src.utils.validators import (
    clean_recipients,
    normalize_send_options,
    sanitize_input,
    validate_send_email_request,
)

logger = logging.getLogger(__name__)

MAX_SUBJECT_LENGTH = 998


class EmailService:
    """Service for sharing summaries by email."""

    def __init__(self, store: SummaryStore, dispatcher: EmailDispatcher):
        """
        Initialize email service.

        Args:
            store: Artifact store instance
            dispatcher: Email dispatcher used for delivery
        """
        self.store = store
        self.dispatcher = dispatcher

    def send_summary_email(self, data: Any) -> Dict[str, Any]:
        """
        Email a stored summary to a list of recipients.

        Args:
            data: Request payload (summaryId, recipients, subject, message,
                includeOriginal, sendCopy)

        Returns:
            Dict with confirmation 'message' and 'recipientCount'

        Raises:
            ValidationError: If the payload is malformed
            NotFoundError: If the summary does not exist
            UpstreamProviderError: If delivery fails
        """
        is_valid, error_msg = validate_send_email_request(data)
        if not is_valid:
            raise ValidationError(error_msg)

        summary = self.store.get_summary(data['summaryId'])
        if summary is None:
            raise NotFoundError("Summary not found")

        recipients = clean_recipients(data['recipients'])
        subject = sanitize_input(data['subject'], max_length=MAX_SUBJECT_LENGTH)
        if not subject:
            raise ValidationError("Subject is required")
        options = normalize_send_options(data)

        request = EmailSendRequest(
            recipients=tuple(recipients),
            subject=subject,
            summary_content=summary.generated_summary,
            additional_message=options['message'],
            original_transcript=summary.original_transcript if options['include_original'] else None,
            send_copy=options['send_copy'],
        )

        try:
            self.dispatcher.send(request)
        except Exception as e:
            logger.error(f"Email sending error for summary {summary.id}: {e}")
            raise UpstreamProviderError(str(e)) from e

        self.store.create_email_log(
            summary_id=summary.id,
            recipients=recipients,
            subject=subject,
            message=options['message'],
        )

        return {
            'message': "Email sent successfully",
            'recipientCount': len(recipients),
        }
