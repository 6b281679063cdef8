"""Tests for CLI functionality."""

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from querysync.features.cache import QueryResult
from querysync.features.errors import AppError
from querysync.ui.cli.args.options import ClassifyArgs, FetchArgs, ModalArgs
from querysync.ui.cli.cli import CommandProcessor, main


@pytest.fixture
def mock_process_args(mocker: MockerFixture) -> MagicMock:
    """Patch argument processing so commands receive prepared arguments."""

    return mocker.patch("querysync.ui.cli.cli.ArgumentParser.process_args")


def _fetch_args() -> FetchArgs:
    return FetchArgs(
        command="fetch",
        endpoint="/kids",
        base_url="http://api.test",
        token=None,
        timeout=1.0,
        verbose=False,
        quiet=False,
    )


def test_dispatches_classify(mocker: MockerFixture, mock_process_args: MagicMock) -> None:
    args = ClassifyArgs(command="classify", payload={}, verbose=False, quiet=False)
    mock_process_args.return_value = args
    command = mocker.patch("querysync.ui.cli.cli.ClassifyCommand")

    CommandProcessor.process_command(["classify", "{}"])

    mock_process_args.assert_called_once_with(["classify", "{}"])
    command.assert_called_once_with(args)
    command.return_value.execute.assert_called_once_with()


def test_dispatches_modal(mocker: MockerFixture, mock_process_args: MagicMock) -> None:
    args = ModalArgs(
        command="modal",
        url="/kids",
        id_param="kidId",
        modal_param=None,
        action="read",
        entity_id=None,
        mode=None,
        verbose=False,
        quiet=False,
    )
    mock_process_args.return_value = args
    command = mocker.patch("querysync.ui.cli.cli.ModalCommand")

    CommandProcessor.process_command([])

    command.assert_called_once_with(args)


def test_fetch_success_returns_normally(mocker: MockerFixture, mock_process_args: MagicMock) -> None:
    mock_process_args.return_value = _fetch_args()
    command = mocker.patch("querysync.ui.cli.cli.FetchCommand")
    command.return_value.execute.return_value = QueryResult(data=[], has_data=True)

    CommandProcessor.process_command([])

    command.return_value.execute.assert_called_once_with()


def test_fetch_error_exits_with_failure(mocker: MockerFixture, mock_process_args: MagicMock) -> None:
    mock_process_args.return_value = _fetch_args()
    command = mocker.patch("querysync.ui.cli.cli.FetchCommand")
    command.return_value.execute.return_value = QueryResult(error=AppError(message="down"))

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([])

    assert excinfo.value.code == 1


def test_keyboard_interrupt_exits_130(mock_process_args: MagicMock) -> None:
    mock_process_args.side_effect = KeyboardInterrupt

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([])

    assert excinfo.value.code == 130


def test_unexpected_error_is_logged(mocker: MockerFixture, mock_process_args: MagicMock) -> None:
    mock_process_args.side_effect = RuntimeError("kaboom")
    mock_logger = mocker.patch("querysync.ui.cli.cli.logger")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once_with("An unexpected error occurred: %s", "kaboom")


def test_main_returns_zero(mocker: MockerFixture) -> None:
    process = mocker.patch("querysync.ui.cli.cli.CommandProcessor.process_command")

    assert main() == 0
    process.assert_called_once_with()
