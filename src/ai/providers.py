"""
AI provider strategies for transcript summarization.

Each provider knows whether it is configured and turns a (transcript, prompt)
pair into a tagged ProviderResult instead of raising, so the gateway can decide
whether to fall through to the next provider.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from google.genai import types
from langchain_core.messages import HumanMessage, SystemMessage

from src.ai.llm_client import get_gemini_client, get_llm
from src.ai.prompts import SUMMARY_SYSTEM_PROMPT, build_demo_summary, build_user_prompt

logger = logging.getLogger(__name__)

NO_SUMMARY_MESSAGE = "No summary generated"


class ResultKind(str, Enum):
    SUCCESS = "success"
    RECOVERABLE = "recoverable"
    FATAL = "fatal"


@dataclass(frozen=True)
class ProviderResult:
    """Outcome of a single provider attempt."""
    kind: ResultKind
    provider_label: str
    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind == ResultKind.SUCCESS

    @classmethod
    def success(cls, provider_label: str, text: str) -> 'ProviderResult':
        return cls(kind=ResultKind.SUCCESS, provider_label=provider_label, text=text)

    @classmethod
    def failure(cls, kind: ResultKind, provider_label: str, error: str) -> 'ProviderResult':
        return cls(kind=kind, provider_label=provider_label, error=error)


class SummaryProvider:
    """
    Base class for summarization providers.

    Subclasses implement _generate; failures raised there are reported with
    the provider's failure_kind.
    """

    name: str = ""
    label: str = ""
    tier: str = ""
    description: str = ""
    setup_hint: str = ""
    failure_kind: ResultKind = ResultKind.FATAL

    def is_configured(self) -> bool:
        raise NotImplementedError

    def _generate(self, transcript: str, custom_prompt: str) -> Optional[str]:
        raise NotImplementedError

    def summarize(self, transcript: str, custom_prompt: str) -> ProviderResult:
        """
        Run the provider and tag the outcome.

        Args:
            transcript: Meeting transcript text
            custom_prompt: User instructions for the summary

        Returns:
            ProviderResult tagged success, recoverable or fatal
        """
        try:
            text = self._generate(transcript, custom_prompt)
            if not text:
                raise ValueError(NO_SUMMARY_MESSAGE)
            return ProviderResult.success(self.label, text)
        except Exception as e:
            logger.error(f"{self.name} API error: {e}")
            return ProviderResult.failure(
                self.failure_kind,
                self.label,
                f"Failed to generate summary: {e}"
            )

    def status(self) -> dict:
        """Describe this provider for the AI status endpoint."""
        configured = self.is_configured()
        return {
            'name': self.name,
            'status': 'available' if configured else 'setup',
            'type': self.tier,
            'description': self.description if configured else self.setup_hint,
        }


class GeminiProvider(SummaryProvider):
    """Free-tier provider. Failures fall through to the next provider."""

    name = "Google Gemini"
    label = "Google Gemini (Free)"
    tier = "free"
    description = "Free AI service with generous limits"
    setup_hint = "Get free API key at https://makersuite.google.com/app/apikey"
    failure_kind = ResultKind.RECOVERABLE

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = 'gemini-1.5-flash',
        request_timeout: Optional[int] = 120,
        client: Any = None
    ):
        self.api_key = api_key
        self.model_name = model_name
        self.request_timeout = request_timeout
        self._client = client

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self):
        if self._client is None:
            self._client = get_gemini_client(self.api_key, self.request_timeout)
        return self._client

    def _generate(self, transcript: str, custom_prompt: str) -> Optional[str]:
        response = self._get_client().models.generate_content(
            model=self.model_name,
            contents=build_user_prompt(transcript, custom_prompt),
            config=types.GenerateContentConfig(system_instruction=SUMMARY_SYSTEM_PROMPT)
        )
        return response.text


class OpenAIProvider(SummaryProvider):
    """Paid-tier provider. Failures are terminal."""

    name = "OpenAI GPT-4o"
    label = "OpenAI GPT-4o"
    tier = "paid"
    description = "Premium AI service (requires billing)"
    setup_hint = "Get API key at https://platform.openai.com/api-keys"
    failure_kind = ResultKind.FATAL

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = 'gpt-4o',
        request_timeout: Optional[int] = 120,
        llm: Any = None
    ):
        self.api_key = api_key
        self.model_name = model_name
        self.request_timeout = request_timeout
        self._llm = llm

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_llm(self):
        if self._llm is None:
            self._llm = get_llm(self.api_key, self.model_name, self.request_timeout)
        return self._llm

    def _generate(self, transcript: str, custom_prompt: str) -> Optional[str]:
        messages = [
            SystemMessage(content=SUMMARY_SYSTEM_PROMPT),
            HumanMessage(content=build_user_prompt(transcript, custom_prompt))
        ]
        response = self._get_llm().invoke(messages)
        return response.content


class DemoProvider(SummaryProvider):
    """
    Deterministic fallback used only when no real provider has a credential.
    """

    name = "Demo Mode"
    label = "Demo Mode"
    tier = "demo"

    def __init__(self, *providers: SummaryProvider):
        self._providers = providers

    def is_configured(self) -> bool:
        return not any(provider.is_configured() for provider in self._providers)

    def _generate(self, transcript: str, custom_prompt: str) -> Optional[str]:
        return build_demo_summary(transcript, custom_prompt)
