# Meeting Summarizer
"""
Meeting transcript summarization wizard: upload, prompt, generate, edit, share.
"""

__version__ = "1.0.0"
