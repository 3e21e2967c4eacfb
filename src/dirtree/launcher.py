"""Launches the Streamlit app and opens the browser."""

from __future__ import annotations

import logging
import threading
import time
import webbrowser
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

PORT = 8501
URL = f"http://localhost:{PORT}"


def _wait_and_open_browser(attempts: int = 30) -> bool:
    """Wait for the Streamlit server to become ready, then open the browser."""
    for _ in range(attempts):
        try:
            resp = requests.get(URL, timeout=2)
            if resp.status_code == 200:
                webbrowser.open(URL)
                return True
        except requests.RequestException:
            pass
        time.sleep(1)
    logger.warning("Streamlit server did not answer on %s", URL)
    return False


def main() -> None:
    from streamlit.web import bootstrap

    app_path = str(Path(__file__).resolve().parent / "app.py")

    # Open browser in a background thread once the server is up
    threading.Thread(target=_wait_and_open_browser, daemon=True).start()

    bootstrap.run(
        app_path,
        is_hello=False,
        args=[],
        flag_options={
            "server.headless": True,
            "server.port": PORT,
            "browser.gatherUsageStats": False,
        },
    )


if __name__ == "__main__":
    main()
