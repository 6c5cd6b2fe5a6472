"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Append-only conversation log rendered as chat bubbles
    - Text input and single-file picker
    - HTTP calls to the relay's /chat and /upload endpoints

Contains minimal business logic. Delegates all operations to the API.
"""
