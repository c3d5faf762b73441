"""Names for graphics debug-message enums and routing of debug messages to a logger."""

from __future__ import annotations

import inspect
import os
from enum import IntEnum

from bonobo.log import Logger, LogType


class DebugType(IntEnum):
    ERROR = 0x824C
    DEPRECATED_BEHAVIOR = 0x824D
    UNDEFINED_BEHAVIOR = 0x824E
    PORTABILITY = 0x824F
    PERFORMANCE = 0x8250
    OTHER = 0x8251
    MARKER = 0x8268
    PUSH_GROUP = 0x8269
    POP_GROUP = 0x826A


class DebugSource(IntEnum):
    API = 0x8246
    WINDOW_SYSTEM = 0x8247
    SHADER_COMPILER = 0x8248
    THIRD_PARTY = 0x8249
    APPLICATION = 0x824A
    OTHER = 0x824B


class DebugSeverity(IntEnum):
    HIGH = 0x9146
    MEDIUM = 0x9147
    LOW = 0x9148
    NOTIFICATION = 0x826B


_TYPE_NAMES = {
    DebugType.ERROR: "Error",
    DebugType.DEPRECATED_BEHAVIOR: "Deprecated Behavior",
    DebugType.UNDEFINED_BEHAVIOR: "Undefined Behavior",
    DebugType.PORTABILITY: "Portability Issue",
    DebugType.PERFORMANCE: "Performance Issue",
    DebugType.MARKER: "Stream Annotation",
    DebugType.PUSH_GROUP: "Push group",
    DebugType.POP_GROUP: "Pop group",
    DebugType.OTHER: "Other",
}

_SOURCE_NAMES = {
    DebugSource.API: "API",
    DebugSource.WINDOW_SYSTEM: "Window System",
    DebugSource.SHADER_COMPILER: "Shader Compiler",
    DebugSource.THIRD_PARTY: "Third Party",
    DebugSource.APPLICATION: "Application",
    DebugSource.OTHER: "Other",
}

_SEVERITY_NAMES = {
    DebugSeverity.HIGH: "High",
    DebugSeverity.MEDIUM: "Medium",
    DebugSeverity.LOW: "Low",
    DebugSeverity.NOTIFICATION: "Notification",
}

_SEVERITY_LOG_TYPES = {
    DebugSeverity.NOTIFICATION: LogType.INFO,
    DebugSeverity.LOW: LogType.INFO,
    DebugSeverity.MEDIUM: LogType.WARNING,
    DebugSeverity.HIGH: LogType.ERROR,
}


def _lookup(enum_cls, names: dict, value: int, what: str) -> str:
    try:
        return names[enum_cls(value)]
    except ValueError:
        raise ValueError(f"unknown debug {what}: {value:#x}") from None


def debug_type_name(value: int) -> str:
    return _lookup(DebugType, _TYPE_NAMES, value, "type")


def debug_source_name(value: int) -> str:
    return _lookup(DebugSource, _SOURCE_NAMES, value, "source")


def debug_severity_name(value: int) -> str:
    return _lookup(DebugSeverity, _SEVERITY_NAMES, value, "severity")


def _caller_line() -> int:
    frame = inspect.currentframe()
    if frame is None or frame.f_back is None:
        return -1
    return frame.f_back.f_lineno


def report_debug_message(
    logger: Logger,
    source: int,
    msg_type: int,
    message_id: int,
    severity: int,
    message: str,
) -> None:
    """Forward a driver debug message to ``logger`` at a level set by its severity."""
    file = os.path.basename(__file__)
    function = "report_debug_message"

    if msg_type == DebugType.PUSH_GROUP:
        logger.report(0, file, function, _caller_line(), LogType.INFO, "%s\n{", message)
        return
    if msg_type == DebugType.POP_GROUP:
        logger.report(0, file, function, _caller_line(), LogType.INFO, "}")
        return

    text = (
        f"[id: {message_id}] of type {debug_type_name(msg_type)}"
        f", from {debug_source_name(source)}:\n"
        f"\t{message}\n"
    )
    try:
        log_type = _SEVERITY_LOG_TYPES.get(DebugSeverity(severity))
    except ValueError:
        log_type = None
    if log_type is not None:
        logger.report(0, file, function, _caller_line(), log_type, text)