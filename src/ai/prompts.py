"""
Prompt templates for meeting transcript summarization.
"""

SUMMARY_SYSTEM_PROMPT = """You are an expert meeting summarizer. Your task is to analyze meeting transcripts and create structured summaries based on specific user instructions.

Guidelines:
- Follow the user's custom instructions precisely
- Create well-structured, easy-to-read summaries
- Use proper formatting with headings, bullet points, and sections as appropriate
- Ensure all key information from the transcript is captured according to the user's requirements
- Make the summary actionable and useful for the intended audience"""

SUMMARY_USER_TEMPLATE = """Please summarize the following meeting transcript according to these specific instructions:

INSTRUCTIONS: {custom_prompt}

TRANSCRIPT:
{transcript}

Please provide a well-formatted summary that follows the instructions above."""

DEMO_PREVIEW_CHARS = 100

DEMO_SUMMARY_TEMPLATE = """# Meeting Summary (Demo Mode)

## Key Points
- This is a demonstration of the AI summarization feature
- To enable real AI summaries, add your GEMINI_API_KEY (free) or OPENAI_API_KEY
- The application successfully processed your transcript: "{transcript_preview}..."
- Your custom prompt was: "{custom_prompt}"

## Next Steps
- Add API keys to get real AI-powered summaries
- Gemini API is completely free: https://makersuite.google.com/app/apikey
- OpenAI has a free tier: https://platform.openai.com/api-keys

## Features Working
- File upload
- Text processing
- Custom prompts
- Summary editing
- Email sharing

*This demo summary shows that all application features are working correctly.*"""

# Starting points offered by the prompt step of the wizard
PROMPT_TEMPLATES = {
    'executive': "Summarize this meeting in bullet points for executives, focusing on key decisions, budget impacts, and strategic outcomes.",
    'action': "Extract only action items from this meeting, including who is responsible and any mentioned deadlines.",
    'detailed': "Create a comprehensive summary of this meeting, organized by topics discussed with all important details preserved.",
    'topics': "Break down this meeting summary by discussion topics, organizing related points under clear headings.",
}


def build_user_prompt(transcript: str, custom_prompt: str) -> str:
    """Embed the custom instructions and the full transcript in the user message."""
    return SUMMARY_USER_TEMPLATE.format(custom_prompt=custom_prompt, transcript=transcript)


def build_demo_summary(transcript: str, custom_prompt: str) -> str:
    """Deterministic placeholder summary used when no AI provider is configured."""
    return DEMO_SUMMARY_TEMPLATE.format(
        transcript_preview=transcript[:DEMO_PREVIEW_CHARS],
        custom_prompt=custom_prompt,
    )
