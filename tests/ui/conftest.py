"""Shared fixtures isolating CLI tests from logging and config side effects."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def quiet_cli_bootstrap(mocker: MockerFixture) -> MagicMock:
    """Stub logger setup and config loading performed by ``process_args``."""

    mock_config = mocker.patch("dirkit.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = None
    _ = mocker.patch("dirkit.ui.cli.args.parser.console_level", return_value=logging.INFO)
    return mocker.patch("dirkit.ui.cli.args.parser.setup_logger")
