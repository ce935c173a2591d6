"""
Exception hierarchy for Meeting Summarizer application.
Each error carries the HTTP status code the API layer reports it with.
"""


class SummarizerError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SummarizerError):
    """Malformed or missing request field."""

    status_code = 400


class NotFoundError(SummarizerError):
    """Unknown summary identifier."""

    status_code = 404


class UpstreamProviderError(SummarizerError):
    """AI provider or email delivery failure. The message is passed through verbatim."""

    status_code = 500
