"""List the Gemini models that support generateContent.

Usage:
    GEMINI_API_KEY=... python scripts/list_models.py
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config  # noqa: E402
from errors import UpstreamError  # noqa: E402
from services.chat import GeminiClient  # noqa: E402


def main():
    if not Config.GEMINI_API_KEY:
        print("GEMINI_API_KEY is not set.")
        return 1
    client = GeminiClient(Config.GEMINI_API_KEY, base_url=Config.GEMINI_API_URL,
                          timeout=Config.CHAT_TIMEOUT)
    try:
        names = client.list_models()
    except UpstreamError as e:
        print(f"Error listing models: {e.message}")
        return 1

    print("Available Gemini models that support 'generateContent':")
    for name in names:
        print(f"- {name}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
