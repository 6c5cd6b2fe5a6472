"""Prompt construction for the chat-completion API.

Pure functions only: every request rebuilds its prompt from scratch, so
nothing here touches the network or any shared state.
"""

import base64
from typing import Any

SYSTEM_PROMPT = """You are an AI assistant that behaves like ChatGPT and Gemini.
Rules:
1. If a question has multiple possible answers, respond with ONLY the correct answer, no explanation.
2. If a question requires explanation, respond in detailed paragraphs with relevant examples.
3. If the user provides an image or file, analyze it and describe its contents.
4. If the image or file contains a question, answer it accordingly.
5. Be accurate, concise when required, and detailed when necessary."""

IMAGE_INSTRUCTION = "Analyze this image."
FILE_INSTRUCTION = "Analyze this file:\n\n"

# A user turn is either plain text or a list of typed content parts
UserContent = str | list[dict[str, Any]]
PromptMessages = list[dict[str, Any]]


def build_prompt(system_instruction: str, user_content: UserContent) -> PromptMessages:
    """Build the two-message prompt sent to the model.

    Args:
        system_instruction: Fixed instruction for the system role.
        user_content: Text or multimodal parts for the single user turn.

    Returns:
        Role-tagged messages in chat-completion order.
    """
    return [
        {"role": "system", "content": system_instruction},
        {"role": "user", "content": user_content},
    ]


def is_image(mime_type: str) -> bool:
    return mime_type.startswith("image/")


def image_data_uri(data: bytes, mime_type: str) -> str:
    """Encode image bytes as an inline base64 data URI."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def image_content(data: bytes, mime_type: str) -> list[dict[str, Any]]:
    """User content asking the model to analyze an inline image."""
    return [
        {"type": "text", "text": IMAGE_INSTRUCTION},
        {"type": "image_url", "image_url": {"url": image_data_uri(data, mime_type)}},
    ]


def file_content(text: str) -> str:
    """User content embedding a file's text verbatim."""
    return f"{FILE_INSTRUCTION}{text}"


def text_prompt(message: str) -> PromptMessages:
    return build_prompt(SYSTEM_PROMPT, message)


def upload_prompt(data: bytes, mime_type: str) -> PromptMessages:
    """Build the prompt for an uploaded file, branching on MIME class.

    Images are sent inline as a data URI; everything else is decoded as
    UTF-8 (invalid sequences replaced) and embedded as text.

    Args:
        data: Raw file bytes.
        mime_type: MIME type reported for the upload.

    Returns:
        Role-tagged messages ready for the chat-completion API.
    """
    if is_image(mime_type):
        return build_prompt(SYSTEM_PROMPT, image_content(data, mime_type))
    return build_prompt(SYSTEM_PROMPT, file_content(data.decode("utf-8", errors="replace")))
