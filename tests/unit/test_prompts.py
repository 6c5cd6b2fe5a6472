"""Unit tests for prompt construction.

All functions are pure, so no mocks are needed.
"""

import base64

from src.agent.prompts import (
    SYSTEM_PROMPT,
    build_prompt,
    file_content,
    image_content,
    image_data_uri,
    is_image,
    text_prompt,
    upload_prompt,
)


class TestSystemPrompt:
    """Tests for the fixed system instruction."""

    def test_system_prompt_rules(self) -> None:
        """System prompt carries the opening line and all five rules."""
        lines = SYSTEM_PROMPT.splitlines()

        assert lines[0] == "You are an AI assistant that behaves like ChatGPT and Gemini."
        assert lines[1] == "Rules:"
        assert [line.split(".")[0] for line in lines[2:]] == ["1", "2", "3", "4", "5"]
        assert lines[-1] == "5. Be accurate, concise when required, and detailed when necessary."


class TestBuildPrompt:
    """Tests for build_prompt."""

    def test_two_messages_system_then_user(self) -> None:
        """Prompt is exactly a system turn followed by a user turn."""
        messages = build_prompt("be brief", "hello")

        assert messages == [
            {"role": "system", "content": "be brief"},
            {"role": "user", "content": "hello"},
        ]

    def test_user_content_parts_pass_through(self) -> None:
        """Multimodal parts are placed in the user turn unchanged."""
        parts = [{"type": "text", "text": "hi"}]

        messages = build_prompt("sys", parts)

        assert messages[1]["content"] is parts

    def test_text_prompt_uses_system_prompt(self) -> None:
        """text_prompt wraps the message with the fixed instruction."""
        messages = text_prompt("What is 2+2?")

        assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
        assert messages[1] == {"role": "user", "content": "What is 2+2?"}

    def test_empty_message_is_forwarded(self) -> None:
        """An empty message is not altered or dropped."""
        assert text_prompt("")[1]["content"] == ""

    def test_each_call_returns_fresh_list(self) -> None:
        """Prompts are rebuilt per call, never shared."""
        first = text_prompt("a")
        second = text_prompt("a")

        assert first == second
        assert first is not second


class TestImageContent:
    """Tests for image user content."""

    def test_is_image(self) -> None:
        assert is_image("image/png")
        assert is_image("image/jpeg")
        assert not is_image("text/plain")
        assert not is_image("application/pdf")

    def test_data_uri_format(self) -> None:
        """Data URI carries the MIME type and base64 payload."""
        data = b"\x89PNG\r\n\x1a\n"

        uri = image_data_uri(data, "image/png")

        assert uri.startswith("data:image/png;base64,")
        assert base64.b64decode(uri.split(",", 1)[1]) == data

    def test_image_content_parts(self) -> None:
        """Image content is an instruction part followed by an image_url part."""
        parts = image_content(b"abc", "image/gif")

        assert parts[0] == {"type": "text", "text": "Analyze this image."}
        assert parts[1]["type"] == "image_url"
        assert parts[1]["image_url"]["url"] == "data:image/gif;base64,YWJj"


class TestUploadPrompt:
    """Tests for MIME-based prompt selection."""

    def test_image_upload_is_inline_data_uri(self) -> None:
        """image/* uploads are sent as a data URI, not decoded text."""
        messages = upload_prompt(b"\x89PNG-bytes", "image/png")

        content = messages[1]["content"]
        assert isinstance(content, list)
        assert content[1]["image_url"]["url"].startswith("data:image/png;base64,")

    def test_text_upload_embedded_verbatim(self) -> None:
        """Text uploads are embedded after the analysis instruction."""
        messages = upload_prompt(b"2+2=?", "text/plain")

        assert messages[0]["content"] == SYSTEM_PROMPT
        assert messages[1]["content"] == "Analyze this file:\n\n2+2=?"

    def test_non_utf8_bytes_are_replaced(self) -> None:
        """Undecodable bytes become replacement characters instead of failing."""
        messages = upload_prompt(b"ok\xff", "application/octet-stream")

        assert messages[1]["content"] == file_content("ok�")
