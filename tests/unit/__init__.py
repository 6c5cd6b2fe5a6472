"""Unit tests for individual components in isolation.

Coverage:
    - agent/: Configuration, prompt construction, relay service
    - storage/: Request-scoped upload files
    - ui/: Client-side conversation log

Uses mocks for the external chat-completion API.
"""
