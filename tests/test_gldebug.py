import pytest

from bonobo.gldebug import (
    DebugSeverity,
    DebugSource,
    DebugType,
    debug_severity_name,
    debug_source_name,
    debug_type_name,
    report_debug_message,
)
from bonobo.log import Logger, LogType, OutputTarget


@pytest.fixture
def captured(tmp_path):
    logger = Logger(tmp_path / "log.txt")
    logger.set_output_targets(OutputTarget.CUSTOM)
    messages = []
    logger.set_custom_output(lambda log_type, text: messages.append((log_type, text)))
    return logger, messages


def test_type_names():
    assert debug_type_name(DebugType.ERROR) == "Error"
    assert debug_type_name(DebugType.MARKER) == "Stream Annotation"
    assert debug_type_name(0x8250) == "Performance Issue"


def test_source_names():
    assert debug_source_name(DebugSource.API) == "API"
    assert debug_source_name(DebugSource.SHADER_COMPILER) == "Shader Compiler"


def test_severity_names():
    assert debug_severity_name(DebugSeverity.HIGH) == "High"
    assert debug_severity_name(DebugSeverity.NOTIFICATION) == "Notification"


@pytest.mark.parametrize("func", [debug_type_name, debug_source_name, debug_severity_name])
def test_unknown_values_raise(func):
    with pytest.raises(ValueError):
        func(0x1234)


def test_every_enum_member_has_a_name():
    assert all(debug_type_name(t) for t in DebugType)
    assert all(debug_source_name(s) for s in DebugSource)
    assert all(debug_severity_name(s) for s in DebugSeverity)


def test_push_group(captured):
    logger, messages = captured
    report_debug_message(logger, DebugSource.APPLICATION, DebugType.PUSH_GROUP, 0,
                         DebugSeverity.NOTIFICATION, "Render cube")
    assert messages == [(LogType.INFO, "Render cube\n{\n")]


def test_pop_group(captured):
    logger, messages = captured
    report_debug_message(logger, DebugSource.APPLICATION, DebugType.POP_GROUP, 0,
                         DebugSeverity.NOTIFICATION, "Render cube")
    assert messages == [(LogType.INFO, "}\n")]


def test_low_severity_is_info(captured):
    logger, messages = captured
    report_debug_message(logger, DebugSource.API, DebugType.OTHER, 131185,
                         DebugSeverity.LOW, "buffer info")
    assert messages == [
        (LogType.INFO, "[id: 131185] of type Other, from API:\n\tbuffer info\n\n")
    ]


def test_medium_severity_is_warning(captured):
    logger, messages = captured
    report_debug_message(logger, DebugSource.API, DebugType.PERFORMANCE, 7,
                         DebugSeverity.MEDIUM, "slow path")
    assert len(messages) == 1
    log_type, text = messages[0]
    assert log_type == LogType.WARNING
    assert "Warning: [id: 7] of type Performance Issue, from API:\n\tslow path\n" in text


def test_high_severity_is_error(captured):
    logger, messages = captured
    report_debug_message(logger, DebugSource.SHADER_COMPILER, DebugType.ERROR, 3,
                         DebugSeverity.HIGH, "bad shader")
    assert len(messages) == 1
    assert messages[0][0] == LogType.ERROR
    assert "Error: [id: 3] of type Error, from Shader Compiler:" in messages[0][1]


def test_unknown_severity_is_dropped(captured):
    logger, messages = captured
    report_debug_message(logger, DebugSource.API, DebugType.OTHER, 1, 0x1, "ignored")
    assert messages == []


def test_unknown_type_raises(captured):
    logger, _ = captured
    with pytest.raises(ValueError):
        report_debug_message(logger, DebugSource.API, 0x1, 1, DebugSeverity.HIGH, "x")