"""qwen-translate - A Qwen (DashScope) translation adapter.

This package maps translation requests onto the DashScope OpenAI-compatible
chat-completions endpoint and unpacks the translated text from the response.
"""

__version__ = "0.1.0"
__license__ = "MIT"
