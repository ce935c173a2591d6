"""
LLM client construction for Meeting Summarizer application.
Builds the paid-tier OpenAI chat model and the free-tier Gemini client.
"""
import logging
from typing import Optional

from google import genai
from google.genai import types
from langchain_openai import ChatOpenAI

logger = logging.getLogger(__name__)

# Output bound and randomness for summaries generated by the paid provider
OPENAI_MAX_TOKENS = 2000
OPENAI_TEMPERATURE = 0.3


def get_llm(api_key: str, model_name: str = 'gpt-4o', request_timeout: Optional[int] = 120) -> ChatOpenAI:
    """
    Get OpenAI chat model client.

    Retries inside the SDK are disabled; provider fallback is the only retry.

    Args:
        api_key: OpenAI API key
        model_name: OpenAI model identifier
        request_timeout: Request timeout in seconds

    Returns:
        Configured ChatOpenAI instance
    """
    logger.info(f"Creating OpenAI client for model {model_name}")
    return ChatOpenAI(
        model=model_name,
        openai_api_key=api_key,
        temperature=OPENAI_TEMPERATURE,
        max_tokens=OPENAI_MAX_TOKENS,
        request_timeout=request_timeout,
        max_retries=0,
    )


def get_gemini_client(api_key: str, request_timeout: Optional[int] = 120) -> genai.Client:
    """
    Get Google Gemini API client.

    Args:
        api_key: Gemini API key
        request_timeout: Request timeout in seconds

    Returns:
        Configured genai.Client instance
    """
    logger.info("Creating Gemini client")
    http_options = None
    if request_timeout:
        # google-genai takes the timeout in milliseconds
        http_options = types.HttpOptions(timeout=int(request_timeout * 1000))
    return genai.Client(api_key=api_key, http_options=http_options)
