"""Leveled message reporting to standard streams, a log file and a custom sink."""

from __future__ import annotations

import datetime
import sys
import threading
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from pathlib import Path
from typing import Callable, Optional, TextIO

RESULT_MAX_LENGTH = 16384


class LogType(IntEnum):
    SUCCESS = 0
    INFO = 1
    NEUTRAL = 2
    WARNING = 3
    ERROR = 4
    FILE = 5
    ASSERT = 6
    PARAM = 7
    TRIVIA = 8


class Severity(IntEnum):
    OK = 0
    BAD = 1
    TERMINAL = 2


class Verbosity(IntEnum):
    WHISPER = 0  # message is discarded
    LOUD_UNSITUATED = 1  # message is displayed
    LOUD = 2  # message is displayed with file, function and line prepended


class OutputTarget(IntFlag):
    NONE = 0
    STD = 1 << 0
    FILE = 1 << 1
    CUSTOM = 1 << 15


class ReportFlag(IntFlag):
    NONE = 0
    MESSAGE_ONCE = 1
    LOCATION_ONCE = 2


@dataclass
class _TypeSettings:
    prefix: str
    verbosity: Verbosity
    severity: Severity


def _default_settings() -> dict[LogType, _TypeSettings]:
    unsituated = Verbosity.LOUD_UNSITUATED
    loud = Verbosity.LOUD
    return {
        LogType.SUCCESS: _TypeSettings("Success: ", unsituated, Severity.OK),
        LogType.INFO: _TypeSettings("", unsituated, Severity.OK),
        LogType.NEUTRAL: _TypeSettings("", unsituated, Severity.OK),
        LogType.WARNING: _TypeSettings("Warning: ", loud, Severity.OK),
        LogType.ERROR: _TypeSettings("Error: ", loud, Severity.BAD),
        LogType.FILE: _TypeSettings("", unsituated, Severity.OK),
        LogType.ASSERT: _TypeSettings("Assert: ", loud, Severity.BAD),
        LogType.PARAM: _TypeSettings("Parameter error: ", loud, Severity.BAD),
        LogType.TRIVIA: _TypeSettings("", unsituated, Severity.OK),
    }


CustomOutput = Callable[[LogType, str], None]


class Logger:
    """Routes formatted reports to stdout/stderr, a log file and a callback."""

    def __init__(self, log_path: str | Path = "log.txt") -> None:
        self.log_path = Path(log_path)
        self.output_targets = OutputTarget.STD | OutputTarget.CUSTOM | OutputTarget.FILE
        self.include_thread_id = False
        self._custom_output: Optional[CustomOutput] = None
        self._settings = _default_settings()
        self._once: dict[str, int] = {}
        self._file: Optional[TextIO] = None
        self._file_lock = threading.Lock()

    def __enter__(self) -> "Logger":
        self.init()
        return self

    def __exit__(self, *exc_info) -> None:
        self.destroy()

    def init(self) -> None:
        """Apply the current output targets, opening the log file if needed."""
        self.set_output_targets(self.output_targets)

    def destroy(self) -> None:
        """Write the closing marker and close the log file, if one is open."""
        with self._file_lock:
            if self._file is None:
                return
            self._file.write("\n === End of log === \n\n")
            self._file.flush()
            self._file.close()
            self._file = None

    def set_custom_output(self, func: Optional[CustomOutput]) -> None:
        self._custom_output = func

    def set_output_targets(self, targets: int) -> None:
        """Select the outputs; the log file is opened lazily on first need."""
        self.output_targets = OutputTarget(targets)
        if not self.output_targets & OutputTarget.FILE:
            return
        with self._file_lock:
            if self._file is not None:
                return
            try:
                self._file = open(self.log_path, "w", encoding="utf-8")
            except OSError as err:
                print(f'Failed to open "{self.log_path}" for writing: {err}', file=sys.stderr)
                print("Disabling logging of messages to file.", file=sys.stderr)
                self.output_targets &= ~OutputTarget.FILE
                return
            now = datetime.datetime.now()
            self._file.write(
                f"\n === Log ({now.strftime('%b %d %Y')}, {now.strftime('%H:%M:%S')}) === \n\n"
            )
            self._file.flush()

    def set_verbosity(self, log_type: LogType, verbosity: Verbosity) -> None:
        self._settings[LogType(log_type)].verbosity = Verbosity(verbosity)

    def set_include_thread_id(self, include: bool) -> None:
        self.include_thread_id = bool(include)

    def report(self, flags, file, function, line, log_type, message, *args) -> None:
        """Format a message and send it to every enabled output."""
        if not self.output_targets:
            return
        log_type = LogType(log_type)
        settings = self._settings[log_type]
        if settings.verbosity == Verbosity.WHISPER:
            return

        text = message % args if args else message
        limit = RESULT_MAX_LENGTH - 2
        if len(text) > limit:
            text = text[: limit - 3] + "..."

        flags = ReportFlag(flags)
        if flags:
            key = ""
            if flags & ReportFlag.MESSAGE_ONCE:
                key += f"{file}{function}{line}{text}"
            if flags & ReportFlag.LOCATION_ONCE:
                key += f"_Loc{file}{function}{line}"
            if key in self._once:
                self._once[key] += 1
                return
            self._once[key] = 1

        parts = []
        if self.include_thread_id:
            parts.append(f"{{{threading.get_ident()}}} ")
        if settings.verbosity == Verbosity.LOUD:
            if line == -1:
                parts.append("[Unknown location]\n")
            else:
                parts.append(f"[{file}, {function} ({line})]\n")
        parts.append(f"{settings.prefix}{text}\n")
        output = "".join(parts)

        if self.output_targets & OutputTarget.STD:
            stream = sys.stderr if settings.severity != Severity.OK else sys.stdout
            stream.write(output)
        if self.output_targets & OutputTarget.FILE:
            with self._file_lock:
                if self._file is not None:
                    self._file.write(output)
                    self._file.flush()
        if self.output_targets & OutputTarget.CUSTOM and self._custom_output is not None:
            self._custom_output(log_type, output)
        if settings.severity == Severity.TERMINAL:
            self.destroy()
            raise SystemExit(1)

    def report_param(self, test, file, function, line) -> bool:
        """Report a bad parameter when ``test`` is falsy; return its truth value."""
        passed = bool(test)
        if not passed:
            self.report(ReportFlag.NONE, file, function, line, LogType.PARAM, "Bad parameter!")
        return passed