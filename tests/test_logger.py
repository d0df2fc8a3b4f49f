"""Basic tests for logger system"""

import itertools
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock

import pytest

from leveled_logger import (
    CallerFrame,
    CallerResolver,
    LEVEL_TAGS,
    Logger,
    LoggerBuilder,
    LoggerConfig,
    LogLevel,
    create_logger,
)


@pytest.fixture
def logger(tmp_path):
    logger = Logger.create_instance()
    logger.path = tmp_path / "logs"
    return logger


def read_log(logger):
    return (Path(logger.path) / "latest.log").read_text(encoding="utf-8")


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.SUCCESS
        assert LogLevel.SUCCESS < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.NOTICE

    def test_from_string(self):
        assert LogLevel.from_string("SUCCESS") == LogLevel.SUCCESS
        assert LogLevel.from_string("notice") == LogLevel.NOTICE

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")

    def test_tags_are_fixed_width(self):
        assert len({len(tag) for tag in LEVEL_TAGS.values()}) == 1
        assert LogLevel.INFO.tag == " info  "
        assert LogLevel.SUCCESS.tag == "success"

    def test_colored_tag(self):
        colored = LogLevel.ERROR.colored_tag
        assert colored.startswith("\033[")
        assert LogLevel.ERROR.tag in colored
        assert colored.endswith("\033[0m")


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.path == Path.cwd() / "logs"
        assert config.write_file is True
        assert config.level == LogLevel.INFO
        assert config.log_format == "{time} [{level}] {content}"
        assert config.caller_depth == 2

    def test_debug_config(self):
        config = LoggerConfig.debug_config()
        assert config.level == LogLevel.DEBUG
        assert "{lineNumber}" in config.log_format

    def test_console_config(self):
        assert LoggerConfig.console_config().write_file is False

    def test_string_values_are_converted(self):
        config = LoggerConfig(path="some/dir", level="warning")
        assert config.path == Path("some/dir")
        assert config.level == LogLevel.WARNING

    def test_negative_caller_depth(self):
        with pytest.raises(ValueError):
            LoggerConfig(caller_depth=-1)


class TestLoggerCreation:
    """Test factory construction and configuration accessors."""

    def test_direct_construction_is_rejected(self):
        with pytest.raises(TypeError):
            Logger()

    def test_defaults(self):
        logger = create_logger()
        assert logger.path == Path.cwd() / "logs"
        assert logger.write_file is True
        assert logger.level == LogLevel.INFO
        assert logger.log_format == "{time} [{level}] {content}"

    def test_properties_round_trip(self, tmp_path):
        logger = Logger.create_instance()
        logger.path = str(tmp_path)
        logger.write_file = False
        logger.level = LogLevel.NOTICE
        logger.time_format = "%H:%M"
        logger.log_format = "{level} {content} {unknown}"

        assert logger.path == str(tmp_path)
        assert logger.write_file is False
        assert logger.level == LogLevel.NOTICE
        assert logger.time_format == "%H:%M"
        assert logger.log_format == "{level} {content} {unknown}"

    def test_level_accepts_names(self, logger, capsys):
        logger.level = "debug"
        logger.write_file = False
        logger.log_format = "{content}"

        logger.debug("shown")

        assert logger.level == LogLevel.DEBUG
        assert capsys.readouterr().out == "shown\n"

    def test_level_rejects_unknown_names(self, logger):
        with pytest.raises(ValueError):
            logger.level = "verbose"

    def test_instances_are_independent(self):
        first = Logger.create_instance()
        second = Logger.create_instance()
        first.level = LogLevel.ERROR
        first.write_file = False

        assert first is not second
        assert second.level == LogLevel.INFO
        assert second.write_file is True

    def test_builder_pattern(self, tmp_path):
        resolver = Mock(spec=CallerResolver)
        logger = (LoggerBuilder()
            .with_path(tmp_path)
            .with_write_file(False)
            .with_level(LogLevel.DEBUG)
            .with_time_format("%H")
            .with_log_format("[{level}] {content}")
            .with_caller_depth(3)
            .with_caller_resolver(resolver)
            .build())

        assert logger.path == tmp_path
        assert logger.write_file is False
        assert logger.level == LogLevel.DEBUG
        assert logger.time_format == "%H"
        assert logger.log_format == "[{level}] {content}"
        assert logger.caller_depth == 3
        assert logger.caller_resolver is resolver

    def test_builder_validates(self):
        with pytest.raises(ValueError):
            LoggerBuilder().with_caller_depth(-2).build()


class TestLogging:
    """Test the shared logging path."""

    @pytest.mark.parametrize(
        "low,high", list(itertools.combinations(list(LogLevel), 2))
    )
    def test_below_threshold_is_silent(self, logger, capsys, low, high):
        logger.level = high
        logger.log_format = "{fileName} {content}"
        logger.caller_resolver = Mock(spec=CallerResolver)

        getattr(logger, low.name.lower())("hidden")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
        assert not Path(logger.path).exists()
        logger.caller_resolver.resolve.assert_not_called()

    @pytest.mark.parametrize("level", list(LogLevel))
    def test_at_threshold_writes_one_line(self, logger, capsys, level):
        logger.level = level
        getattr(logger, level.name.lower())("visible")

        captured = capsys.readouterr()
        console = captured.out + captured.err
        assert console.count("\n") == 1
        assert "visible" in console
        assert read_log(logger).count("\n") == 1

    def test_content_is_space_joined(self, logger, capsys):
        logger.log_format = "{content}"
        logger.info("hello", 3, "args")

        assert capsys.readouterr().out == "hello 3 args\n"
        assert read_log(logger) == "hello 3 args\n"

    def test_structured_argument(self, logger, capsys):
        logger.log_format = "{content}"
        logger.info("payload", {"a": 1})

        out = capsys.readouterr().out
        assert "'a'" in out
        assert "1" in out
        assert "dict" not in out

    def test_console_colored_file_plain(self, logger, capsys):
        logger.success("done")

        out = capsys.readouterr().out
        assert LogLevel.SUCCESS.colored_tag in out
        line = read_log(logger)
        assert "[success] done" in line
        assert "\033[" not in line

    @pytest.mark.parametrize("level", [LogLevel.WARNING, LogLevel.ERROR])
    def test_warnings_and_errors_go_to_stderr(self, logger, capsys, level):
        getattr(logger, level.name.lower())("problem")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "problem" in captured.err

    @pytest.mark.parametrize("level", [LogLevel.INFO, LogLevel.SUCCESS, LogLevel.NOTICE])
    def test_other_levels_go_to_stdout(self, logger, capsys, level):
        getattr(logger, level.name.lower())("fine")

        captured = capsys.readouterr()
        assert captured.err == ""
        assert "fine" in captured.out

    def test_write_file_disabled(self, logger, capsys):
        logger.write_file = False
        logger.info("console only")

        assert "console only" in capsys.readouterr().out
        assert not Path(logger.path).exists()

    def test_configuration_applies_to_next_call(self, logger, capsys):
        logger.log_format = "A {content}"
        logger.info("one")
        logger.log_format = "B {content}"
        logger.info("two")

        assert capsys.readouterr().out == "A one\nB two\n"

    def test_time_format(self, logger, capsys):
        logger.time_format = "%Y"
        logger.log_format = "{time}"
        before = datetime.now().year
        logger.info("ignored")

        assert capsys.readouterr().out.strip() in (str(before), str(before + 1))

    def test_missing_parent_directory_raises(self, tmp_path):
        logger = Logger.create_instance()
        logger.path = tmp_path / "missing" / "logs"

        with pytest.raises(FileNotFoundError):
            logger.info("lost")


class TestCallerLocation:
    """Test caller location tokens."""

    def test_tokens_are_replaced(self, logger, capsys):
        logger.write_file = False
        logger.log_format = "{fileName}|{lineNumber}|{functionName}|{columnNumber}"

        line = sys._getframe().f_lineno + 1
        logger.info("where")

        file_name, line_number, function_name, column = (
            capsys.readouterr().out.strip().split("|")
        )
        assert Path(file_name).name == Path(__file__).name
        assert line_number == str(line)
        assert function_name == "test_tokens_are_replaced"
        assert column != "{columnNumber}"

    def test_file_and_console_share_location(self, logger, capsys):
        logger.log_format = "{functionName}:{lineNumber} {content}"
        logger.notice("same")

        assert capsys.readouterr().out == read_log(logger)

    def test_short_stack_leaves_tokens(self, logger, capsys):
        resolver = Mock(spec=CallerResolver)
        resolver.resolve.return_value = [
            CallerFrame("a.py", 1, "_log"),
            CallerFrame("a.py", 2, "info"),
        ]
        logger.caller_resolver = resolver
        logger.write_file = False
        logger.log_format = "{fileName}:{lineNumber} {functionName} {columnNumber} {content}"

        logger.info("x")

        assert capsys.readouterr().out == (
            "{fileName}:{lineNumber} {functionName} {columnNumber} x\n"
        )

    def test_caller_depth_for_wrappers(self, logger, capsys):
        logger.write_file = False
        logger.log_format = "{functionName}"
        logger.caller_depth = 3

        def log_through_wrapper():
            logger.info("wrapped")

        log_through_wrapper()

        assert capsys.readouterr().out == "test_caller_depth_for_wrappers\n"

    def test_resolver_skipped_without_location_tokens(self, logger, capsys):
        logger.caller_resolver = Mock(spec=CallerResolver)
        logger.info("plain")

        logger.caller_resolver.resolve.assert_not_called()
