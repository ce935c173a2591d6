"""
Utility helper functions for Meeting Summarizer application.
"""
import logging
from datetime import datetime
from typing import Optional

from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

SIZE_UNITS = ("B", "KB", "MB", "GB")


def outbox_filename(subject: str, sent_at: Optional[datetime] = None) -> str:
    """
    Build a filesystem-safe .eml name for an outbox message.

    Args:
        subject: Email subject, used as the readable part of the name
        sent_at: Timestamp prefix (defaults to now) keeping names ordered and unique

    Returns:
        Filename such as '20240101_120000_000000_Weekly_sync.eml'
    """
    stamp = (sent_at or datetime.now()).strftime('%Y%m%d_%H%M%S_%f')
    readable = secure_filename(subject or "")[:80] or "summary"
    return f"{stamp}_{readable}.eml"


def describe_size(num_bytes: int) -> str:
    """Human readable byte count for log messages."""
    size = float(num_bytes)
    for unit in SIZE_UNITS[:-1]:
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} {SIZE_UNITS[-1]}"


def decode_transcript_bytes(raw: bytes) -> str:
    """Decode uploaded bytes as UTF-8, replacing undecodable sequences."""
    return raw.decode('utf-8', errors='replace')
