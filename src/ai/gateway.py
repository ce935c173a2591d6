"""
Summarization gateway: tries configured providers in order until one answers.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from src.ai.providers import (
    DemoProvider,
    GeminiProvider,
    OpenAIProvider,
    ProviderResult,
    ResultKind,
    SummaryProvider,
)
from src.utils.exceptions import UpstreamProviderError

logger = logging.getLogger(__name__)


class SummarizationGateway:
    """Folds over an ordered provider chain."""

    def __init__(self, providers: Sequence[SummaryProvider]):
        self.providers: List[SummaryProvider] = list(providers)

    def configured_providers(self) -> List[SummaryProvider]:
        return [provider for provider in self.providers if provider.is_configured()]

    def summarize(self, transcript: str, custom_prompt: str) -> Tuple[str, str]:
        """
        Generate a summary with the first provider that succeeds.

        Recoverable failures move on to the next configured provider. A fatal
        failure, or running out of providers after a recoverable one, raises.

        Args:
            transcript: Meeting transcript text
            custom_prompt: User instructions for the summary

        Returns:
            Tuple of (summary_text, provider_label)

        Raises:
            UpstreamProviderError: If no provider produced a summary
        """
        attempted = [provider.name for provider in self.configured_providers()]
        logger.info(f"AI service check: configured providers {attempted}")

        last_failure: Optional[ProviderResult] = None
        for provider in self.configured_providers():
            result = provider.summarize(transcript, custom_prompt)
            if result.ok:
                logger.info(f"Summary generated by {result.provider_label}")
                return result.text, result.provider_label

            last_failure = result
            if result.kind == ResultKind.FATAL:
                logger.error(f"{provider.name} failed: {result.error}")
                break
            logger.warning(f"{provider.name} failed, trying next provider: {result.error}")

        if last_failure is None:
            raise UpstreamProviderError("No AI provider is available")
        raise UpstreamProviderError(last_failure.error)

    def mode(self) -> str:
        """Report 'free', 'paid' or 'demo' depending on which credentials exist."""
        tiers = {provider.tier for provider in self.configured_providers()}
        if 'free' in tiers:
            return 'free'
        if 'paid' in tiers:
            return 'paid'
        return 'demo'

    def service_statuses(self) -> List[dict]:
        return [provider.status() for provider in self.providers if provider.tier != 'demo']


def build_provider_chain(
    gemini_api_key: Optional[str],
    openai_api_key: Optional[str],
    gemini_model: str = 'gemini-1.5-flash',
    openai_model: str = 'gpt-4o',
    request_timeout: Optional[int] = 120
) -> List[SummaryProvider]:
    """
    Build the default free → paid → demo provider chain.

    Args:
        gemini_api_key: Free-tier credential, or None
        openai_api_key: Paid-tier credential, or None
        gemini_model: Gemini model identifier
        openai_model: OpenAI model identifier
        request_timeout: Per-request timeout in seconds for both providers

    Returns:
        Ordered list of providers
    """
    gemini = GeminiProvider(gemini_api_key, gemini_model, request_timeout)
    openai = OpenAIProvider(openai_api_key, openai_model, request_timeout)
    return [gemini, openai, DemoProvider(gemini, openai)]
