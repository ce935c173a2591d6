"""
HTTP client and wizard driver for the summarizer workflow.

SummarizerApiClient wraps the JSON API with httpx. SummaryWizard drives the
WorkflowStateMachine through that client, so every step transition that
depends on the server only happens after the gating call succeeds.
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import httpx

from src.ai.prompts import PROMPT_TEMPLATES
from src.services.email_dispatcher import DEFAULT_SUBJECT
from src.workflow.state_machine import WorkflowState, WorkflowStateMachine, WorkflowStep

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    '.txt': 'text/plain',
    '.doc': 'application/msword',
    '.docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
}


class ApiError(Exception):
    """Non-success response from the summarizer API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


def parse_recipients(raw: str) -> List[str]:
    """Split a comma-separated recipient field into trimmed, non-empty addresses."""
    return [email.strip() for email in (raw or "").split(",") if email.strip()]


class SummarizerApiClient:
    """Thin httpx wrapper over the summarizer JSON API."""

    def __init__(self, base_url: str = "http://localhost:5000", client: Optional[httpx.Client] = None, timeout: Optional[float] = None):
        """
        Args:
            base_url: Server root including any base path
            client: Preconfigured httpx client (e.g. with a WSGI transport)
            timeout: Request timeout in seconds; None waits indefinitely
        """
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        response = self._client.request(method, path, **kwargs)
        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if response.is_error:
            message = payload.get('error') or payload.get('message') or response.reason_phrase
            raise ApiError(response.status_code, message)
        return payload

    def upload_transcript(self, content: bytes, filename: str, content_type: Optional[str] = None) -> Dict[str, Any]:
        if content_type is None:
            content_type = CONTENT_TYPES.get(Path(filename).suffix.lower(), 'text/plain')
        return self._request('POST', '/api/upload', files={'file': (filename, content, content_type)})

    def generate_summary(self, transcript: str, prompt: str) -> Dict[str, Any]:
        return self._request('POST', '/api/generate-summary', json={'transcript': transcript, 'prompt': prompt})

    def get_summary(self, summary_id: str) -> Dict[str, Any]:
        return self._request('GET', f'/api/summaries/{summary_id}')

    def update_summary(self, summary_id: str, generated_summary: str) -> Dict[str, Any]:
        return self._request('PATCH', f'/api/summaries/{summary_id}', json={'generatedSummary': generated_summary})

    def send_email(
        self,
        summary_id: str,
        recipients: List[str],
        subject: str,
        message: Optional[str] = None,
        include_original: bool = False,
        send_copy: bool = False
    ) -> Dict[str, Any]:
        body = {
            'summaryId': summary_id,
            'recipients': recipients,
            'subject': subject,
            'includeOriginal': include_original,
            'sendCopy': send_copy,
        }
        if message:
            body['message'] = message
        return self._request('POST', '/api/send-email', json=body)

    def get_email_logs(self, summary_id: str) -> Dict[str, Any]:
        return self._request('GET', f'/api/summaries/{summary_id}/email-logs')

    def get_ai_status(self) -> Dict[str, Any]:
        return self._request('GET', '/api/ai-status')


class SummaryWizard:
    """Scriptable version of the five-step browser wizard."""

    def __init__(self, api: SummarizerApiClient, machine: Optional[WorkflowStateMachine] = None):
        self.api = api
        self.machine = machine or WorkflowStateMachine()

    @property
    def state(self) -> WorkflowState:
        return self.machine.state

    # Step 1

    def upload_file(self, path: Union[str, Path]) -> WorkflowState:
        """Upload a transcript file and use the decoded text as the transcript."""
        path = Path(path)
        result = self.api.upload_transcript(path.read_bytes(), path.name)
        logger.info(f"Loaded transcript '{result['filename']}' ({result['size']} bytes)")
        return self.machine.set_transcript(result['text'])

    def enter_transcript(self, transcript: str) -> WorkflowState:
        return self.machine.set_transcript(transcript)

    def continue_to_prompt(self) -> WorkflowState:
        return self.machine.proceed_to_prompt()

    # Step 2

    def enter_prompt(self, prompt: str) -> WorkflowState:
        return self.machine.set_prompt(prompt)

    def use_template(self, key: str) -> WorkflowState:
        return self.machine.set_prompt(PROMPT_TEMPLATES[key])

    # Step 3

    def generate(self) -> WorkflowState:
        """
        Request a summary. On failure the wizard returns to the prompt step
        with the error recorded in state.last_error.
        """
        self.machine.begin_generation()
        try:
            result = self.api.generate_summary(self.state.transcript, self.state.prompt.strip())
        except (ApiError, httpx.HTTPError) as e:
            logger.error(f"Generation failed: {e}")
            return self.machine.fail_generation(getattr(e, 'message', str(e)))
        return self.machine.complete_generation(result['generatedSummary'], result['id'], result.get('aiProvider', ''))

    # Step 4

    def edit(self, summary: str) -> WorkflowState:
        """Update the summary text locally and send a best-effort save."""
        state = self.machine.edit_summary(summary)
        try:
            self.api.update_summary(state.summary_id, summary)
        except (ApiError, httpx.HTTPError) as e:
            logger.warning(f"Saving edited summary failed: {e}")
        return state

    def continue_to_share(self) -> WorkflowState:
        return self.machine.proceed_to_share()

    # Step 5

    def share(
        self,
        recipients: Union[str, List[str]],
        subject: str = DEFAULT_SUBJECT,
        message: Optional[str] = None,
        include_original: bool = False,
        send_copy: bool = False
    ) -> WorkflowState:
        """Email the summary. Success ends the workflow; failure stays on the share step."""
        if isinstance(recipients, str):
            recipients = parse_recipients(recipients)
        self.machine.begin_send()
        try:
            result = self.api.send_email(
                self.state.summary_id,
                recipients,
                subject.strip(),
                (message or "").strip() or None,
                include_original,
                send_copy
            )
        except (ApiError, httpx.HTTPError) as e:
            logger.error(f"Sending email failed: {e}")
            return self.machine.fail_send(getattr(e, 'message', str(e)))
        logger.info(f"Summary shared with {result['recipientCount']} recipients")
        return self.machine.complete_send()

    def back(self) -> WorkflowState:
        """Go back one step from Prompt, Edit or Share."""
        step = self.machine.step
        if step == WorkflowStep.PROMPT:
            return self.machine.back_to_upload()
        if step == WorkflowStep.EDIT:
            return self.machine.back_to_prompt()
        if step == WorkflowStep.SHARE:
            return self.machine.back_to_edit()
        return self.machine.state

    def start_over(self) -> WorkflowState:
        return self.machine.start_over()
