import logging
from unittest.mock import patch

import pytest

import main


@pytest.mark.parametrize(
    "configured, expected",
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("verbose", logging.INFO), ("", logging.INFO)],
)
def test_configure_logging_level(monkeypatch, configured, expected):
    """Test that unknown LOG_LEVEL names fall back to INFO instead of failing."""
    monkeypatch.setenv("LOG_LEVEL", configured)
    with patch.object(logging, "basicConfig") as basic_config:
        main.configure_logging()
    basic_config.assert_called_once_with(level=expected)
