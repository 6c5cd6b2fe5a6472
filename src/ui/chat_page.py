"""NiceGUI chat interface for the relay."""

import asyncio
import logging

from nicegui import events, ui

from src.models.schemas import ChatTurn, Sender
from src.ui.client import ChatSession, FileSelection, PendingFile, RelayClientError

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: #1f2937; }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 18px 18px 4px 18px;
        white-space: pre-wrap;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .input-box {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
    }
    .input-box:focus-within { border-color: #2563eb; }

    .message-assistant pre { margin: 0.5rem 0; overflow-x: auto; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


def render_turn(turn: ChatTurn) -> None:
    """Render one turn; assistant replies are markdown, user text is literal."""
    is_user = turn.sender is Sender.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = "message-user" if is_user else "message-assistant"

    with ui.row().classes(f"w-full {align}"):
        with ui.element("div").classes(f"max-w-[75%] px-4 py-3 text-sm {bubble}"):
            if is_user:
                ui.label(turn.text)
            else:
                ui.markdown(turn.text)


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)

    selection = FileSelection()

    @ui.refreshable
    def render_log() -> None:
        if not session.turns:
            with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                ui.icon("forum").classes("text-5xl text-gray-300")
                ui.label("Start a conversation").classes("text-lg text-gray-400")
            return
        for turn in session.turns:
            render_turn(turn)

    def on_log_change() -> None:
        render_log.refresh()
        scroll_area.scroll_to(percent=1.0)

    session = ChatSession(on_change=on_log_change)

    async def pick_file(e: events.UploadEventArguments) -> None:
        picked = selection.select(e.file.name, await e.file.read(), e.file.content_type)
        file_label.set_text(picked.name)

    async def send_text(text: str) -> None:
        with root:
            try:
                await session.send_text_message(text)
            except RelayClientError as e:
                logger.warning(f"Chat request failed: {e}")
                ui.notify(str(e), type="negative")

    async def send_file(file: PendingFile) -> None:
        with root:
            try:
                await session.send_file(file.name, file.content, file.mime_type)
            except RelayClientError as e:
                logger.warning(f"Upload of {file.name!r} failed: {e}")
                ui.notify(str(e), type="negative")

    async def send() -> None:
        text = input_field.value.strip()
        if not text and selection.selected is None:
            return

        requests = []
        if text:
            input_field.value = ""
            requests.append(send_text(text))
        if (file := selection.take()) is not None:
            uploader.reset()
            file_label.set_text("")
            requests.append(send_file(file))

        # Text and file go out together; replies land in completion order
        await asyncio.gather(*requests)

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ) as root,
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center gap-3"):
            ui.icon("smart_toy").classes("text-white text-3xl")
            ui.label("AI Chat").classes("text-lg font-semibold text-white")

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area,
            ui.column().classes("w-full p-5 gap-4"),
        ):
            render_log()

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end bg-white border-t"):
            uploader = (
                ui.upload(on_upload=pick_file, auto_upload=True, max_files=1)
                .props("flat dense accept=*")
                .classes("w-48")
            )
            with ui.column().classes("flex-grow gap-1"):
                file_label = ui.label("").classes("text-xs text-gray-500")
                with ui.element("div").classes("w-full input-box px-3 py-2"):
                    input_field = (
                        ui.textarea(placeholder="Type a message...")
                        .props("autogrow borderless dense rows=1")
                        .classes("w-full")
                        .on("keydown.enter.prevent", send)
                    )
            ui.button(icon="send", on_click=send).props("round unelevated color=primary")


def main() -> None:
    ui.run(title="AI Chat", port=8080, reload=False)


if __name__ == "__main__":
    main()
