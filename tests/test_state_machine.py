import pytest

from src.workflow.state_machine import (
    InvalidTransitionError,
    WorkflowState,
    WorkflowStateMachine,
    WorkflowStep,
)


def machine_at_edit():
    machine = WorkflowStateMachine()
    machine.set_transcript("Alice: Let's ship Friday.")
    machine.proceed_to_prompt()
    machine.set_prompt("List action items")
    machine.begin_generation()
    machine.complete_generation("- Ship Friday", "summary-1", "Demo Mode")
    return machine


def test_initial_state():
    state = WorkflowStateMachine().state
    assert state.current_step == WorkflowStep.UPLOAD
    assert state.current_step.label == "Upload"
    assert not state.is_loading


def test_transcript_required_to_leave_upload():
    machine = WorkflowStateMachine()
    machine.set_transcript("   ")
    with pytest.raises(InvalidTransitionError):
        machine.proceed_to_prompt()
    assert machine.step == WorkflowStep.UPLOAD


def test_prompt_required_to_generate():
    machine = WorkflowStateMachine()
    machine.set_transcript("t")
    machine.proceed_to_prompt()
    with pytest.raises(InvalidTransitionError, match="custom prompt"):
        machine.begin_generation()


def test_happy_path_reaches_share_then_success():
    machine = machine_at_edit()
    assert machine.state.current_step == WorkflowStep.EDIT
    assert machine.state.summary_id == "summary-1"
    assert machine.state.ai_provider == "Demo Mode"
    assert not machine.state.is_loading

    machine.proceed_to_share()
    assert machine.state.current_step == WorkflowStep.SHARE

    machine.begin_send()
    state = machine.complete_send()
    assert state.is_success
    assert not state.is_loading


def test_generation_is_loading_then_failure_returns_to_prompt():
    machine = WorkflowStateMachine()
    machine.set_transcript("t")
    machine.proceed_to_prompt()
    machine.set_prompt("p")

    state = machine.begin_generation()
    assert state.current_step == WorkflowStep.GENERATE
    assert state.is_loading

    state = machine.fail_generation("Failed to generate summary")
    assert state.current_step == WorkflowStep.PROMPT
    assert state.last_error == "Failed to generate summary"
    assert state.prompt == "p"


def test_complete_generation_requires_pending_generation():
    with pytest.raises(InvalidTransitionError):
        WorkflowStateMachine().complete_generation("s", "id")


def test_back_navigation_keeps_data():
    machine = machine_at_edit()
    machine.edit_summary("- Ship Friday (edited)")

    machine.back_to_prompt()
    machine.back_to_upload()

    assert machine.state.transcript == "Alice: Let's ship Friday."
    assert machine.state.prompt == "List action items"
    assert machine.state.summary == "- Ship Friday (edited)"


def test_failed_send_stays_on_share():
    machine = machine_at_edit()
    machine.proceed_to_share()
    machine.begin_send()

    state = machine.fail_send("Invalid email address: x")

    assert state.current_step == WorkflowStep.SHARE
    assert state.last_error == "Invalid email address: x"
    assert not state.is_success
    machine.back_to_edit()


def test_cannot_send_twice_concurrently():
    machine = machine_at_edit()
    machine.proceed_to_share()
    machine.begin_send()
    with pytest.raises(InvalidTransitionError):
        machine.begin_send()


def test_actions_blocked_after_success_until_start_over():
    machine = machine_at_edit()
    machine.proceed_to_share()
    machine.begin_send()
    machine.complete_send()

    with pytest.raises(InvalidTransitionError):
        machine.back_to_edit()

    assert machine.start_over() == WorkflowState()


def test_step_labels():
    assert [step.label for step in WorkflowStep] == ["Upload", "Prompt", "Generate", "Edit", "Share"]
