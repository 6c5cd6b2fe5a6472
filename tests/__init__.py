"""Test package for Chat Relay.

Unit tests for isolated logic and integration tests that drive the
FastAPI app through ASGITransport.

Structure:
    - unit/: Config, prompt building, relay service, upload scope, client log
    - integration/: /chat and /upload endpoints, client round trips

The chat-completion API is mocked unless OPENAI_API_KEY is set for the
live tests.
"""
