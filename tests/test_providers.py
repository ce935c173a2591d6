import pytest
from langchain_core.messages import HumanMessage, SystemMessage

from conftest import FakeChatModel, FakeGeminiClient, make_providers
from src.ai import llm_client
from src.ai.gateway import SummarizationGateway, build_provider_chain
from src.ai.prompts import SUMMARY_SYSTEM_PROMPT, build_demo_summary, build_user_prompt
from src.ai.providers import GeminiProvider, OpenAIProvider, ResultKind
from src.utils.exceptions import UpstreamProviderError

TRANSCRIPT = "Alice: Let's ship Friday. " * 10
PROMPT = "List action items"


def test_demo_mode_when_no_credentials():
    gateway = SummarizationGateway(build_provider_chain(None, None))

    text, provider = gateway.summarize(TRANSCRIPT, PROMPT)

    assert provider == "Demo Mode"
    assert PROMPT in text
    assert TRANSCRIPT[:100] in text
    assert TRANSCRIPT not in text
    assert gateway.mode() == 'demo'


def test_demo_summary_is_deterministic():
    assert build_demo_summary(TRANSCRIPT, PROMPT) == build_demo_summary(TRANSCRIPT, PROMPT)


def test_free_provider_is_tried_first():
    gemini = FakeGeminiClient(text="free summary")
    openai = FakeChatModel(content="paid summary")
    gateway = SummarizationGateway(make_providers(gemini, openai))

    assert gateway.summarize(TRANSCRIPT, PROMPT) == ("free summary", "Google Gemini (Free)")
    assert len(gemini.calls) == 1
    assert openai.calls == []


def test_free_failure_falls_back_to_paid():
    gemini = FakeGeminiClient(error=RuntimeError("quota exceeded"))
    openai = FakeChatModel(content="paid summary")
    gateway = SummarizationGateway(make_providers(gemini, openai))

    assert gateway.summarize(TRANSCRIPT, PROMPT) == ("paid summary", "OpenAI GPT-4o")
    assert len(openai.calls) == 1


def test_free_provider_attempted_again_after_earlier_failure():
    gemini = FakeGeminiClient(error=RuntimeError("temporary"))
    openai = FakeChatModel(content="paid summary")
    gateway = SummarizationGateway(make_providers(gemini, openai))

    gateway.summarize(TRANSCRIPT, PROMPT)
    gemini.error = None
    gemini.text = "free summary"

    assert gateway.summarize(TRANSCRIPT, PROMPT)[1] == "Google Gemini (Free)"
    assert len(gemini.calls) == 2


def test_paid_failure_is_terminal_without_demo_fallback():
    openai = FakeChatModel(error=RuntimeError("invalid api key"))
    gateway = SummarizationGateway(make_providers(openai_model=openai))

    with pytest.raises(UpstreamProviderError) as exc_info:
        gateway.summarize(TRANSCRIPT, PROMPT)

    assert str(exc_info.value) == "Failed to generate summary: invalid api key"


def test_free_only_failure_is_surfaced():
    gateway = SummarizationGateway(make_providers(gemini_client=FakeGeminiClient(error=RuntimeError("blocked"))))

    with pytest.raises(UpstreamProviderError) as exc_info:
        gateway.summarize(TRANSCRIPT, PROMPT)

    assert "blocked" in exc_info.value.message


def test_both_providers_failing_surfaces_paid_error():
    gateway = SummarizationGateway(make_providers(
        FakeGeminiClient(error=RuntimeError("gemini down")),
        FakeChatModel(error=RuntimeError("openai down")),
    ))

    with pytest.raises(UpstreamProviderError, match="openai down"):
        gateway.summarize(TRANSCRIPT, PROMPT)


def test_empty_text_counts_as_failure():
    provider = OpenAIProvider("key", llm=FakeChatModel(content=""))

    result = provider.summarize(TRANSCRIPT, PROMPT)

    assert result.kind == ResultKind.FATAL
    assert result.error == "Failed to generate summary: No summary generated"


def test_gemini_failure_is_recoverable():
    provider = GeminiProvider("key", client=FakeGeminiClient(text=None))
    assert provider.summarize(TRANSCRIPT, PROMPT).kind == ResultKind.RECOVERABLE


def test_openai_receives_system_and_user_messages():
    llm = FakeChatModel(content="summary")
    OpenAIProvider("key", llm=llm).summarize(TRANSCRIPT, PROMPT)

    system, human = llm.calls[0]
    assert isinstance(system, SystemMessage)
    assert isinstance(human, HumanMessage)
    assert system.content == SUMMARY_SYSTEM_PROMPT
    assert human.content == build_user_prompt(TRANSCRIPT, PROMPT)
    assert "INSTRUCTIONS: List action items" in human.content
    assert TRANSCRIPT in human.content


def test_gemini_receives_system_instruction_and_user_prompt():
    client = FakeGeminiClient(text="summary")
    GeminiProvider("key", model_name="gemini-test", client=client).summarize(TRANSCRIPT, PROMPT)

    call = client.calls[0]
    assert call['model'] == "gemini-test"
    assert call['contents'] == build_user_prompt(TRANSCRIPT, PROMPT)
    assert call['config'].system_instruction == SUMMARY_SYSTEM_PROMPT


@pytest.mark.parametrize("gemini_key, openai_key, mode", [
    ("g", "o", "free"),
    ("g", None, "free"),
    (None, "o", "paid"),
    (None, None, "demo"),
])
def test_mode_follows_configured_credentials(gemini_key, openai_key, mode):
    gateway = SummarizationGateway(build_provider_chain(gemini_key, openai_key))
    assert gateway.mode() == mode


def test_service_statuses_describe_real_providers_only():
    statuses = SummarizationGateway(build_provider_chain("g", None)).service_statuses()

    assert [s['name'] for s in statuses] == ["Google Gemini", "OpenAI GPT-4o"]
    assert statuses[0]['status'] == 'available'
    assert statuses[0]['type'] == 'free'
    assert statuses[1]['status'] == 'setup'
    assert "platform.openai.com" in statuses[1]['description']


def test_gemini_client_timeout_is_sent_in_milliseconds(monkeypatch):
    captured = {}
    monkeypatch.setattr(llm_client.genai, "Client", lambda **kwargs: captured.update(kwargs) or "client")

    assert llm_client.get_gemini_client("key", request_timeout=30) == "client"
    assert captured['api_key'] == "key"
    assert captured['http_options'].timeout == 30000
