"""
AI module for Meeting Summarizer application.
Provides the provider chain used to summarize meeting transcripts.
"""

from .gateway import SummarizationGateway, build_provider_chain
from .providers import DemoProvider, GeminiProvider, OpenAIProvider, ProviderResult, ResultKind

__all__ = [
    'SummarizationGateway',
    'build_provider_chain',
    'DemoProvider',
    'GeminiProvider',
    'OpenAIProvider',
    'ProviderResult',
    'ResultKind',
]
