"""Integration tests for components working together.

Coverage:
    - API endpoints with real HTTP requests over ASGITransport
    - Upload cleanup on success and failure
    - Chat page client against the live app
    - Live LLM call (when OPENAI_API_KEY is configured)
"""
