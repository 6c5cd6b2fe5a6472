"""Main application entry point.

Runs the FastAPI relay with the NiceGUI chat page mounted on the same server.
Environment variables are loaded from .env file.
"""

import asyncio
import logging
import os
import subprocess
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send all application logs to stdout at LOG_LEVEL."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def _port() -> int:
    return int(os.getenv("PORT", "8000"))


async def wait_for_first_exit(
    procs: Sequence[subprocess.Popen], interval: float = 1.0
) -> subprocess.Popen:
    """Poll the processes until one of them exits.

    Returns:
        The first process found to have exited.
    """
    while True:
        for proc in procs:
            if proc.poll() is not None:
                return proc
        await asyncio.sleep(interval)


def run_integrated() -> None:
    """Serve the relay API and the chat page from one process.

    The page calls back into the API over HTTP, so API_BASE_URL defaults
    to this server's own address.
    """
    import uvicorn

    os.environ.setdefault("API_BASE_URL", f"http://localhost:{_port()}")

    from nicegui import ui

    from src.api.app import create_app
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(
        app,
        title="AI Chat",
        favicon="🤖",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "chat-relay-secret"),
    )

    logger.info(f"AI chat relay running at http://localhost:{_port()}")
    logger.info(f"API docs available at http://localhost:{_port()}/docs")

    uvicorn.run(
        app,
        host=_host(),
        port=_port(),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run the relay API and the NiceGUI page as two processes.

    API on PORT (default 8000), chat page on port 8080.
    """
    env = {**os.environ, "API_BASE_URL": f"http://localhost:{_port()}"}

    logger.info(f"Starting relay API on http://localhost:{_port()}")
    logger.info("Starting chat page on http://localhost:8080")

    api_proc = subprocess.Popen(
        [
            sys.executable,
            "-m",
            "uvicorn",
            "src.api.app:app",
            "--host",
            _host(),
            "--port",
            str(_port()),
        ],
        env=env,
    )
    ui_proc = subprocess.Popen(
        [sys.executable, "-c", "from src.ui.chat_page import main; main()"],
        env=env,
    )

    try:
        exited = asyncio.run(wait_for_first_exit([api_proc, ui_proc]))
        logger.warning(f"Process {exited.args!r} exited with code {exited.returncode}")
    except KeyboardInterrupt:
        logger.info("Shutting down servers...")
    finally:
        for proc in (api_proc, ui_proc):
            proc.terminate()
            proc.wait()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=separate to run the API and the chat page on different ports.
    Default is integrated mode (both on one port).
    """
    configure_logging()
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Chat Relay in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
