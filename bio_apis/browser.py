"""Open provider web pages in the user's default browser."""

import logging
import webbrowser

logger = logging.getLogger(__name__)


def open_url(url: str) -> bool:
    """
    Open url in the default browser.

    Returns False (and logs) when no browser could be launched; never raises
    for launcher failures.
    """
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.warning(f"Failed to open the web browser for {url}: {e}")
        return False

    if not opened:
        logger.warning(f"No web browser available to open {url}")
    return opened
