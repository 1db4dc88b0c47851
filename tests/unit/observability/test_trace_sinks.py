"""Unit tests for trace sinks, redaction and structlog helpers."""

from __future__ import annotations

import io
import logging
from typing import Any

import pytest
import structlog

from nettrace.config.validation import InvalidSettingValueError
from nettrace.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    EventLogger,
    MemorySink,
    SensitiveFieldsFilter,
    StreamSink,
    StructlogSink,
    Verbosity,
    configure_logging,
    get_logger,
)


class TestStreamSink:
    def test_writes_and_flushes_to_given_stream(self) -> None:
        stream = io.StringIO()
        StreamSink(stream).write("hello\n")
        assert stream.getvalue() == "hello\n"

    def test_default_stream_is_resolved_at_write_time(self, capsys: pytest.CaptureFixture[str]) -> None:
        sink = StreamSink()
        sink.write("late\n")
        assert capsys.readouterr().out == "late\n"


class TestMemorySink:
    def test_records_blocks_in_order(self) -> None:
        sink = MemorySink()
        sink.write("a")
        sink.write("b")
        assert sink.blocks == ["a", "b"]
        assert sink.text == "ab"

    def test_clear(self) -> None:
        sink = MemorySink()
        sink.write("a")
        sink.clear()
        assert sink.blocks == []


class TestStructlogSink:
    def test_forwards_block_as_trace_event(self) -> None:
        with structlog.testing.capture_logs() as logs:
            logger = EventLogger("T", Verbosity.INFO, StructlogSink())
            logger.log("did_complete_with_error", context_id=9)
        assert logs == [
            {"event": "trace_event", "text": "[9] T.did_complete_with_error", "log_level": "info"}
        ]

    def test_custom_logger_and_level(self) -> None:
        calls: list[tuple[str, dict[str, Any]]] = []

        class Recorder:
            def debug(self, event: str, **kw: Any) -> None:
                calls.append((event, kw))

        StructlogSink(Recorder(), level="DEBUG").write("\n[1] T.e\n")
        assert calls == [("trace_event", {"text": "[1] T.e"})]

    def test_unknown_level_rejected_at_construction(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            StructlogSink(level="trace")
        assert exc_info.value.setting_name == "level"


class TestSensitiveFieldsFilter:
    def test_redacts_header_names_case_insensitively(self) -> None:
        f = SensitiveFieldsFilter()
        assert f.redact({"Authorization": "Bearer x", "accept": "*/*"}) == {
            "Authorization": SensitiveFieldsFilter.REDACTED,
            "accept": "*/*",
        }

    def test_redact_pairs_keeps_duplicates_and_order(self) -> None:
        f = SensitiveFieldsFilter()
        pairs = [("set-cookie", "a=1"), ("vary", "accept"), ("Set-Cookie", "b=2")]
        assert f.redact_pairs(pairs) == [
            ("set-cookie", "[REDACTED]"),
            ("vary", "accept"),
            ("Set-Cookie", "[REDACTED]"),
        ]

    def test_redact_deep_nested(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact_deep({"outer": {"token": "t", "ok": 1}})
        assert result == {"outer": {"token": "[REDACTED]", "ok": 1}}

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"x-secret"}))
        assert f.redact({"x-secret": "s", "authorization": "kept"})["authorization"] == "kept"

    def test_defaults_cover_credentials(self) -> None:
        assert {"authorization", "cookie", "proxy-authorization"} <= DEFAULT_SENSITIVE_FIELDS


class TestConfigureLogging:
    def teardown_method(self) -> None:
        structlog.reset_defaults()
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(logging.WARNING)

    def test_console_configuration_installs_single_handler(self) -> None:
        configure_logging(level=logging.DEBUG)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_json_output_redacts_sensitive_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level=logging.INFO, json=True, sensitive_fields=frozenset({"token"}))
        get_logger("nettrace.test").info("login", token="abc", user="bob")
        err = capsys.readouterr().err
        assert '"token": "[REDACTED]"' in err
        assert '"user": "bob"' in err


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("x", component="tap").info("ready")
        assert logs[0]["component"] == "tap"
