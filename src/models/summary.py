"""
Summary-related data models for Meeting Summarizer application.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Summary:
    """Generated summary together with the transcript and instructions it came from."""
    id: str
    original_transcript: str
    custom_prompt: str
    generated_summary: str
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'originalTranscript': self.original_transcript,
            'customPrompt': self.custom_prompt,
            'generatedSummary': self.generated_summary,
            'createdAt': self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class EmailLog:
    """Record of a successful summary email send."""
    id: str
    summary_id: str
    recipients: Tuple[str, ...]
    subject: str
    message: Optional[str] = None
    sent_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'summaryId': self.summary_id,
            'recipients': list(self.recipients),
            'subject': self.subject,
            'message': self.message,
            'sentAt': self.sent_at.isoformat(),
        }


@dataclass
class EmailSendRequest:
    """Structured input for the email dispatcher."""
    recipients: Tuple[str, ...]
    subject: str
    summary_content: str
    additional_message: Optional[str] = None
    original_transcript: Optional[str] = None
    send_copy: bool = False

    @property
    def include_original(self) -> bool:
        return self.original_transcript is not None
