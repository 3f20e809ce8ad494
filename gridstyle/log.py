"""Initiate logging for gridstyle."""

from __future__ import annotations

import logging
import logging.config
import sys
import textwrap
from pathlib import Path
from typing import TYPE_CHECKING

from prompt_toolkit.formatted_text.base import FormattedText
from prompt_toolkit.output.defaults import create_output
from prompt_toolkit.shortcuts.utils import print_formatted_text
from prompt_toolkit.styles.style import Style

if TYPE_CHECKING:
    from typing import Any, TextIO

    from prompt_toolkit.formatted_text.base import StyleAndTextTuples
    from prompt_toolkit.styles.base import BaseStyle

log = logging.getLogger(__name__)

LOG_STYLE = [
    ("log.level.notset", "fg:ansigray"),
    ("log.level.debug", "fg:ansigreen"),
    ("log.level.info", "fg:ansiblue"),
    ("log.level.warning", "fg:ansiyellow"),
    ("log.level.error", "fg:ansired"),
    ("log.level.critical", "fg:ansiwhite bg:ansired bold"),
    ("log.ref", "fg:ansigray"),
    ("log.date", "fg:#00875f"),
]


class FtFormatter(logging.Formatter):
    """Base class for formatted text logging formatter."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Create a new formatter instance."""
        super().__init__(*args, **kwargs)
        self.datefmt = self.datefmt or "%H:%M:%S"

    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        """Format certain attributes on the log record."""
        record.asctime = self.formatTime(record, self.datefmt)
        record.message = record.getMessage()
        record.exc_text = ""
        if record.exc_info:
            record.exc_text = self.formatException(record.exc_info)
        return record

    def ft_format(
        self, record: logging.LogRecord, width: int | None = None
    ) -> FormattedText:
        """Format a log record as :py:class:`FormattedText`."""
        return FormattedText([])


class StdoutFormatter(FtFormatter):
    """A log formatter for formatting log entries for display on the standard output."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Create a new formatter instance."""
        super().__init__(*args, **kwargs)
        self.last_date: str | None = None

    def ft_format(
        self, record: logging.LogRecord, width: int | None = None
    ) -> FormattedText:
        """Format log records for display on the standard output."""
        width = width or 80
        record = self.prepare(record)

        date = record.asctime
        if date == self.last_date:
            date = " " * len(date)
        else:
            self.last_date = date
        ref = f"{record.name}.{record.funcName}:{record.lineno}"

        msg_pad = len(date) + 10
        msg_lines = textwrap.wrap(
            record.message,
            width=max(width - msg_pad, 20),
            replace_whitespace=False,
        ) or [""]

        output: StyleAndTextTuples = [
            ("class:log.date", date),
            ("", " " * (9 - len(record.levelname))),
            (f"class:log.level.{record.levelname.lower()}", record.levelname),
            ("", " "),
            ("", msg_lines[0]),
            ("", " "),
            ("class:log.ref", ref),
        ]
        for line in msg_lines[1:]:
            output += [("", "\n"), ("", " " * msg_pad + line)]
        if record.exc_text:
            output += [
                ("", "\n"),
                ("", textwrap.indent(record.exc_text, " " * msg_pad)),
            ]
        output += [("", "\n")]
        return FormattedText(output)


class FormattedTextHandler(logging.StreamHandler):
    """Format log records for display on the standard output."""

    formatter: FtFormatter

    def __init__(
        self, stream: TextIO | None = None, style: BaseStyle | None = None
    ) -> None:
        """Create a new log handler instance."""
        super().__init__(stream)
        self.style = style or Style(LOG_STYLE)
        self.output = create_output(stdout=self.stream)

    def ft_format(self, record: logging.LogRecord) -> FormattedText:
        """Format the specified record."""
        if isinstance(self.formatter, FtFormatter):
            return self.formatter.ft_format(record, width=self.output.get_size()[1])
        return FormattedText([("", f"{self.format(record)}\n")])

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a formatted record."""
        try:
            print_formatted_text(
                self.ft_format(record),
                end="",
                style=self.style,
                output=self.output,
                include_default_pygments_style=False,
            )
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def setup_logs(
    level: str = "warning",
    log_file: str | Path | None = None,
    stream: TextIO | None = None,
    log_config: dict[str, Any] | None = None,
) -> None:
    """Configure the logger for gridstyle.

    Args:
        level: The minimum level of messages to log
        log_file: An optional file to which log messages are also written
        stream: The stream to display log messages on; defaults to standard error
        log_config: Additional :py:func:`logging.config.dictConfig` configuration
            which is merged into the default configuration

    """
    log_level = level.upper()
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "file_format": {
                "format": "{asctime}.{msecs:03.0f} {levelname:<7} "
                "[{name}.{funcName}:{lineno}] {message}",
                "style": "{",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "stdout_format": {"()": StdoutFormatter},
        },
        "handlers": {
            "stdout": {
                "level": log_level,
                "()": FormattedTextHandler,
                "formatter": "stdout_format",
                "stream": stream or sys.stderr,
            },
        },
        "loggers": {
            "gridstyle": {
                "level": log_level,
                "handlers": ["stdout"],
                "propagate": False,
            },
        },
    }

    # Configure file handler
    if log_file:
        config["handlers"]["file"] = {
            "level": log_level,
            "class": "logging.FileHandler",
            "filename": str(Path(log_file).expanduser()),
            "formatter": "file_format",
        }
        config["loggers"]["gridstyle"]["handlers"].append("file")

    if log_config:
        _dict_merge(config, log_config)

    logging.config.dictConfig(config)
    log.debug("Logging configured at level %s", log_level)


def _dict_merge(target_dict: dict, input_dict: dict) -> None:
    """Merge the second dictionary onto the first."""
    for k in input_dict:
        if k in target_dict:
            if isinstance(target_dict[k], dict) and isinstance(input_dict[k], dict):
                _dict_merge(target_dict[k], input_dict[k])
            elif isinstance(target_dict[k], list) and isinstance(input_dict[k], list):
                target_dict[k] = [*target_dict[k], *input_dict[k]]
            else:
                target_dict[k] = input_dict[k]
        else:
            target_dict[k] = input_dict[k]
