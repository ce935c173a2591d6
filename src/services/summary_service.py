"""
Summary service for Meeting Summarizer application.
Coordinates validation, the summarization gateway and the artifact store.
"""
import logging
from typing import Any, Dict, List

from src.ai.gateway import SummarizationGateway
from src.database.memory_store import SummaryStore
from src.models.summary import Summary
from src.utils.exceptions import NotFoundError, ValidationError
from src.utils.validators import validate_generate_request, validate_required_text

logger = logging.getLogger(__name__)


class SummaryService:
    """Service for generating, previewing and looking up summaries."""

    def __init__(self, store: SummaryStore, gateway: SummarizationGateway):
        """
        Initialize summary service.

        Args:
            store: Artifact store instance
            gateway: Summarization gateway instance
        """
        self.store = store
        self.gateway = gateway

    def generate_summary(self, data: Any) -> Dict[str, Any]:
        """
        Generate and store a summary for a transcript.

        Args:
            data: Request payload with 'transcript' and 'prompt'

        Returns:
            Stored summary record plus the 'aiProvider' label

        Raises:
            ValidationError: If the payload is malformed
            UpstreamProviderError: If no provider produced a summary
        """
        is_valid, error_msg = validate_generate_request(data)
        if not is_valid:
            raise ValidationError(error_msg)

        transcript = data['transcript']
        prompt = data['prompt']
        logger.info(f"Generating summary for transcript of {len(transcript)} chars")

        generated_summary, provider = self.gateway.summarize(transcript, prompt)

        # Stored only after the provider succeeds
        summary = self.store.create_summary(
            original_transcript=transcript,
            custom_prompt=prompt,
            generated_summary=generated_summary,
        )
        return {**summary.to_dict(), 'aiProvider': provider}

    def get_summary(self, summary_id: str) -> Summary:
        """
        Look up a summary.

        Raises:
            NotFoundError: If the id is unknown
        """
        summary = self.store.get_summary(summary_id)
        if summary is None:
            raise NotFoundError("Summary not found")
        return summary

    def preview_summary_update(self, summary_id: str, data: Any) -> Dict[str, Any]:
        """
        Merge edited summary text into the stored record without saving it.

        Stored summaries are immutable, so the response is flagged with
        'persisted': False and later lookups keep returning the original text.

        Args:
            summary_id: Summary to preview against
            data: Request payload with 'generatedSummary'

        Returns:
            Merged record

        Raises:
            ValidationError: If 'generatedSummary' is missing or empty
            NotFoundError: If the id is unknown
        """
        generated_summary = data.get('generatedSummary') if isinstance(data, dict) else None
        is_valid, _ = validate_required_text(generated_summary, "Generated summary")
        if not is_valid:
            raise ValidationError("Generated summary is required")

        summary = self.get_summary(summary_id)
        return {**summary.to_dict(), 'generatedSummary': generated_summary, 'persisted': False}

    def get_email_logs(self, summary_id: str) -> List[Dict[str, Any]]:
        """Get the send history of a summary."""
        self.get_summary(summary_id)
        return [log.to_dict() for log in self.store.get_email_logs_by_summary_id(summary_id)]

    def get_ai_status(self) -> Dict[str, Any]:
        """Report configured providers and the resulting generation mode."""
        mode = self.gateway.mode()
        return {
            'mode': mode,
            'services': self.gateway.service_statuses(),
            'recommendation': "Add GEMINI_API_KEY for free AI summaries" if mode == 'demo' else None,
        }
