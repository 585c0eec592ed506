"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from stagecopy.platform.logging import DEFAULT_LOG_FILE
from stagecopy.ui.cli.args import ArgumentParser, CopyArgs, ShellArgs

LoggingMocks = tuple[MagicMock, MagicMock]


@pytest.fixture
def mock_logging(mocker: MockerFixture) -> LoggingMocks:
    """Keep argument processing away from the real configuration and log files."""

    mock_config = mocker.patch("stagecopy.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = None
    mock_setup_logger = mocker.patch("stagecopy.ui.cli.args.parser.setup_logger")
    return mock_config, mock_setup_logger


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    copy_args: Namespace = parser.parse_args(["copy", "a", "b", "--target", "dst"])
    assert copy_args.command == "copy"
    assert copy_args.sources == ["a", "b"]
    assert copy_args.target == "dst"

    shell_args: Namespace = parser.parse_args(["shell"])
    assert shell_args.command == "shell"
    assert shell_args.start_path == "."
    assert not shell_args.no_feedback


def test_copy_requires_target() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["copy", "a"])


def test_process_args_copy(tmp_path: Path, mock_logging: LoggingMocks) -> None:
    mock_config, mock_setup_logger = mock_logging
    source = tmp_path / "a.txt"
    _ = source.write_text("a", encoding="utf-8")
    target = tmp_path / "dst"
    target.mkdir()

    args = ArgumentParser.process_args(["copy", str(source), "--target", str(target)])

    assert isinstance(args, CopyArgs)
    assert args.sources == [source]
    assert args.target_path == target
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE
    mock_config.load.assert_called_once()


def test_process_args_relative_sources_become_absolute(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    mock_logging: LoggingMocks,
) -> None:
    _ = mock_logging
    _ = (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "dst").mkdir()
    monkeypatch.chdir(tmp_path)

    args = ArgumentParser.process_args(["copy", "a.txt", "--target", "dst"])

    assert isinstance(args, CopyArgs)
    assert args.sources[0].is_absolute()
    assert args.sources[0].name == "a.txt"
    assert args.target_path.is_absolute()


def test_process_args_verbosity_levels(tmp_path: Path, mock_logging: LoggingMocks) -> None:
    _, mock_setup_logger = mock_logging

    _ = ArgumentParser.process_args(["shell", str(tmp_path), "--verbose"])
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG

    _ = ArgumentParser.process_args(["shell", str(tmp_path), "--quiet"])
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_process_args_uses_configured_log_file(tmp_path: Path, mock_logging: LoggingMocks) -> None:
    mock_config, mock_setup_logger = mock_logging
    mock_config.load.return_value.log_file = tmp_path / "custom.log"

    _ = ArgumentParser.process_args(["shell", str(tmp_path)])

    assert mock_setup_logger.call_args.kwargs["log_file"] == tmp_path / "custom.log"


def test_process_args_missing_source_exits(tmp_path: Path, mock_logging: LoggingMocks) -> None:
    _ = mock_logging

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(
            ["copy", str(tmp_path / "missing"), "--target", str(tmp_path)]
        )

    assert excinfo.value.code == 1


def test_process_args_missing_target_exits(tmp_path: Path, mock_logging: LoggingMocks) -> None:
    _ = mock_logging
    source = tmp_path / "a.txt"
    _ = source.write_text("a", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(
            ["copy", str(source), "--target", str(tmp_path / "missing")]
        )

    assert excinfo.value.code == 1


def test_process_args_shell(tmp_path: Path, mock_logging: LoggingMocks) -> None:
    _ = mock_logging

    args = ArgumentParser.process_args(["shell", str(tmp_path), "--no-feedback"])

    assert isinstance(args, ShellArgs)
    assert args.start_path == tmp_path
    assert args.no_feedback
