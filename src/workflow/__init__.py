"""
Client-side workflow for the summarizer wizard.
"""

from .state_machine import InvalidTransitionError, WorkflowState, WorkflowStateMachine, WorkflowStep
from .client import ApiError, SummarizerApiClient, SummaryWizard, parse_recipients

__all__ = [
    'InvalidTransitionError',
    'WorkflowState',
    'WorkflowStateMachine',
    'WorkflowStep',
    'ApiError',
    'SummarizerApiClient',
    'SummaryWizard',
    'parse_recipients',
]
