# SPDX-FileCopyrightText: 2025 greeter
#
# SPDX-License-Identifier: MIT
from unittest.mock import MagicMock, patch

import pytest

from common.config import ServerConfig, config
from common.port_utils import BindError
from greeter.cli import main, parse_arguments


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("greeter.cli.configure_logging") as mock_configure:
        yield mock_configure


def test_parse_arguments_leaves_unset_flags_empty():
    args = parse_arguments([])
    assert args.host is None
    assert args.port is None


def test_parse_arguments_overrides():
    args = parse_arguments(["--host", "127.0.0.1", "--port", "8080"])
    assert args.host == "127.0.0.1"
    assert args.port == 8080


def test_main_starts_server_and_waits():
    handle = MagicMock()
    handle.wait.return_value = True
    with patch("greeter.cli.start", return_value=handle) as mock_start:
        main(["--host", "127.0.0.1", "--port", "8080"])

    server_config = mock_start.call_args.args[0]
    assert server_config == ServerConfig(host="127.0.0.1", port=8080)
    handle.wait.assert_called_once()


def test_main_exits_with_status_1_on_bind_error():
    with patch(
        "greeter.cli.start", side_effect=BindError("localhost", 3000, "in use")
    ):
        with pytest.raises(SystemExit) as excinfo:
            main([])
    assert excinfo.value.code == 1


def test_main_rejects_out_of_range_port():
    with patch("greeter.cli.start") as mock_start:
        with pytest.raises(SystemExit) as excinfo:
            main(["--port", "70000"])
    assert excinfo.value.code == 2
    mock_start.assert_not_called()


def test_main_without_flags_uses_configured_address():
    handle = MagicMock()
    handle.wait.return_value = True
    with patch("greeter.cli.start", return_value=handle) as mock_start:
        main([])

    server_config = mock_start.call_args.args[0]
    assert server_config == ServerConfig(host=config.HOST, port=config.PORT)


def test_main_keeps_startup_logger_at_info(no_logging_setup):
    handle = MagicMock()
    handle.wait.return_value = True
    with patch("greeter.cli.start", return_value=handle):
        main([])

    assert no_logging_setup.call_args.kwargs["notify_loggers"] == ("greeter",)


def test_main_exits_with_status_1_when_server_dies():
    handle = MagicMock()
    handle.wait.return_value = False
    with patch("greeter.cli.start", return_value=handle):
        with pytest.raises(SystemExit) as excinfo:
            main([])
    assert excinfo.value.code == 1
