"""
In-memory artifact store for Meeting Summarizer application.
Holds generated summaries and email send logs for the lifetime of the process.
"""
import logging
import uuid
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from src.models.summary import EmailLog, Summary

logger = logging.getLogger(__name__)


class SummaryStore:
    """
    Process-local store keyed by generated identifiers.

    Records are immutable and never deleted. Writes insert whole records, so
    the store needs no locking for single-process use.
    """

    def __init__(self):
        self._summaries: Dict[str, Summary] = {}
        self._email_logs: Dict[str, EmailLog] = {}

    def create_summary(self, original_transcript: str, custom_prompt: str, generated_summary: str) -> Summary:
        """
        Store a new summary under a fresh identifier.

        Args:
            original_transcript: Transcript text as submitted
            custom_prompt: Instructions used for generation
            generated_summary: Text returned by the summarization gateway

        Returns:
            The stored Summary record
        """
        summary_id = self._new_id(self._summaries)
        summary = Summary(
            id=summary_id,
            original_transcript=original_transcript,
            custom_prompt=custom_prompt,
            generated_summary=generated_summary,
            created_at=datetime.now(),
        )
        self._summaries[summary_id] = summary
        logger.info(f"Stored summary {summary_id} ({len(generated_summary)} chars)")
        return summary

    def get_summary(self, summary_id: str) -> Optional[Summary]:
        return self._summaries.get(summary_id)

    def create_email_log(
        self,
        summary_id: str,
        recipients: Iterable[str],
        subject: str,
        message: Optional[str] = None
    ) -> EmailLog:
        """
        Append an email log entry. The summary reference is not checked.

        Args:
            summary_id: Summary the email was sent for
            recipients: Recipient addresses in send order
            subject: Email subject
            message: Optional additional message included in the email

        Returns:
            The stored EmailLog record
        """
        log_id = self._new_id(self._email_logs)
        email_log = EmailLog(
            id=log_id,
            summary_id=summary_id,
            recipients=tuple(recipients),
            subject=subject,
            message=message or None,
            sent_at=datetime.now(),
        )
        self._email_logs[log_id] = email_log
        logger.info(f"Logged email {log_id} for summary {summary_id} to {len(email_log.recipients)} recipients")
        return email_log

    def get_email_logs_by_summary_id(self, summary_id: str) -> List[EmailLog]:
        """Get email logs for a summary in the order they were created."""
        return [log for log in self._email_logs.values() if log.summary_id == summary_id]

    def summary_count(self) -> int:
        return len(self._summaries)

    def email_log_count(self) -> int:
        return len(self._email_logs)

    @staticmethod
    def _new_id(existing: Dict[str, object]) -> str:
        # uuid4 collisions are practically impossible, but ids must never be reused
        while True:
            candidate = str(uuid.uuid4())
            if candidate not in existing:
                return candidate
