"""Tests for browser launching."""

import logging
import webbrowser
from unittest.mock import patch

from bio_apis.browser import open_url


def test_opens_url(no_browser):
    assert open_url("https://www.rcsb.org/structure/1BA3") is True
    no_browser.assert_called_once_with("https://www.rcsb.org/structure/1BA3")


def test_no_browser_available_logs_and_returns_false(caplog):
    with patch("bio_apis.browser.webbrowser.open", return_value=False):
        with caplog.at_level(logging.WARNING, logger="bio_apis.browser"):
            assert open_url("https://www.rcsb.org") is False

    assert "No web browser available" in caplog.text


def test_launcher_error_is_not_raised(caplog):
    with patch("bio_apis.browser.webbrowser.open", side_effect=webbrowser.Error("could not locate runnable browser")):
        with caplog.at_level(logging.WARNING, logger="bio_apis.browser"):
            assert open_url("https://www.rcsb.org") is False

    assert "could not locate runnable browser" in caplog.text
