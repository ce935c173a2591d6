"""
Five-step summarizer workflow as an explicit state machine.
Upload → Prompt → Generate → Edit → Share, independent of any rendering layer.
"""
import logging
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional

logger = logging.getLogger(__name__)


class WorkflowStep(IntEnum):
    UPLOAD = 1
    PROMPT = 2
    GENERATE = 3
    EDIT = 4
    SHARE = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()


class InvalidTransitionError(Exception):
    """Raised when an action is not allowed from the current state."""


@dataclass(frozen=True)
class WorkflowState:
    """Snapshot of the client-side wizard state."""
    current_step: WorkflowStep = WorkflowStep.UPLOAD
    transcript: str = ""
    prompt: str = ""
    summary: str = ""
    summary_id: str = ""
    ai_provider: str = ""
    is_loading: bool = False
    is_success: bool = False
    last_error: Optional[str] = None


class WorkflowStateMachine:
    """
    Guarded transitions over WorkflowState.

    Every transition replaces the state snapshot as a whole. Moving back keeps
    entered data; only start_over clears it.
    """

    def __init__(self, state: Optional[WorkflowState] = None):
        self.state = state or WorkflowState()

    @property
    def step(self) -> WorkflowStep:
        return self.state.current_step

    def _require(self, condition: bool, message: str):
        if not condition:
            raise InvalidTransitionError(message)

    def _require_step(self, *steps: WorkflowStep):
        self._require(
            self.step in steps and not self.state.is_success,
            f"Action not allowed at step {self.step.label}"
        )

    def _move(self, **changes) -> WorkflowState:
        before = self.step
        self.state = replace(self.state, **changes)
        if self.step != before:
            logger.debug(f"Workflow step {before.label} -> {self.step.label}")
        return self.state

    # Step 1: Upload

    def set_transcript(self, transcript: str) -> WorkflowState:
        self._require_step(WorkflowStep.UPLOAD)
        return self._move(transcript=transcript)

    def proceed_to_prompt(self) -> WorkflowState:
        self._require_step(WorkflowStep.UPLOAD)
        self._require(bool(self.state.transcript.strip()), "A transcript is required before continuing")
        return self._move(current_step=WorkflowStep.PROMPT, last_error=None)

    # Step 2: Prompt

    def set_prompt(self, prompt: str) -> WorkflowState:
        self._require_step(WorkflowStep.PROMPT)
        return self._move(prompt=prompt)

    def back_to_upload(self) -> WorkflowState:
        self._require_step(WorkflowStep.PROMPT)
        return self._move(current_step=WorkflowStep.UPLOAD)

    # Step 3: Generate

    def begin_generation(self) -> WorkflowState:
        self._require_step(WorkflowStep.PROMPT)
        self._require(bool(self.state.prompt.strip()), "Please enter a custom prompt for the AI")
        return self._move(current_step=WorkflowStep.GENERATE, is_loading=True, last_error=None)

    def complete_generation(self, summary: str, summary_id: str, ai_provider: str = "") -> WorkflowState:
        self._require(self.step == WorkflowStep.GENERATE and self.state.is_loading, "No generation in progress")
        return self._move(
            current_step=WorkflowStep.EDIT,
            summary=summary,
            summary_id=summary_id,
            ai_provider=ai_provider,
            is_loading=False,
        )

    def fail_generation(self, error: str) -> WorkflowState:
        self._require(self.step == WorkflowStep.GENERATE and self.state.is_loading, "No generation in progress")
        return self._move(current_step=WorkflowStep.PROMPT, is_loading=False, last_error=error)

    # Step 4: Edit

    def edit_summary(self, summary: str) -> WorkflowState:
        self._require_step(WorkflowStep.EDIT)
        return self._move(summary=summary)

    def back_to_prompt(self) -> WorkflowState:
        self._require_step(WorkflowStep.EDIT)
        return self._move(current_step=WorkflowStep.PROMPT)

    def proceed_to_share(self) -> WorkflowState:
        self._require_step(WorkflowStep.EDIT)
        self._require(bool(self.state.summary_id), "Generate a summary before sharing")
        return self._move(current_step=WorkflowStep.SHARE, last_error=None)

    # Step 5: Share

    def back_to_edit(self) -> WorkflowState:
        self._require_step(WorkflowStep.SHARE)
        self._require(not self.state.is_loading, "An email is being sent")
        return self._move(current_step=WorkflowStep.EDIT)

    def begin_send(self) -> WorkflowState:
        self._require_step(WorkflowStep.SHARE)
        self._require(not self.state.is_loading, "An email is already being sent")
        return self._move(is_loading=True, last_error=None)

    def complete_send(self) -> WorkflowState:
        self._require(self.step == WorkflowStep.SHARE and self.state.is_loading, "No send in progress")
        return self._move(is_loading=False, is_success=True)

    def fail_send(self, error: str) -> WorkflowState:
        self._require(self.step == WorkflowStep.SHARE and self.state.is_loading, "No send in progress")
        return self._move(is_loading=False, last_error=error)

    def start_over(self) -> WorkflowState:
        """Reset every field and return to the upload step."""
        self.state = WorkflowState()
        return self.state
