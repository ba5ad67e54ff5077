"""Tests for console and file sinks"""

import io
from datetime import datetime

from log_engine import LogRecord, SeverityLevel
from log_engine.formatters import ConsoleFormat, CsvFormatter
from log_engine.sinks import BaseSink, ConsoleSink, FileSink


def make_record(message="tx underrun", severity=SeverityLevel.ERROR):
    return LogRecord(
        severity=severity,
        component="RADIO",
        message=message,
        timestamp=datetime(2024, 3, 5, 14, 2, 11, 123456),
        source_file="radio.py",
        source_line=42,
        thread_id=0xABC,
    )


class TestBaseSink:
    """Test the sink base class."""

    def test_call_delegates_to_emit(self):
        class ListSink(BaseSink):
            def __init__(self):
                self.records = []

            def emit(self, record):
                self.records.append(record)

        sink = ListSink()
        record = make_record()
        sink(record)
        sink.flush()
        sink.close()

        assert sink.records == [record]


class TestConsoleSink:
    """Test console output."""

    def test_writes_one_line_per_record(self):
        stream = io.StringIO()
        sink = ConsoleSink(ConsoleFormat(show_color=False), stream=stream)

        sink(make_record("first"))
        sink(make_record("second", SeverityLevel.INFO))

        assert stream.getvalue() == (
            "[ERROR] [RADIO] first\n"
            "[INFO] [RADIO] second\n"
        )

    def test_defaults_to_stderr(self, capsys):
        sink = ConsoleSink(ConsoleFormat(show_color=False, show_source=True))
        sink(make_record())

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "[radio.py:42] [ERROR] [RADIO] tx underrun\n"

    def test_color_wraps_prefix(self):
        stream = io.StringIO()
        ConsoleSink(stream=stream).emit(make_record())

        line = stream.getvalue()
        assert line.startswith(SeverityLevel.ERROR.color_code)
        assert line.endswith(SeverityLevel.ERROR.reset_code + "tx underrun\n")


class TestFileSink:
    """Test file output."""

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "logs" / "nested" / "app.log"
        with FileSink(path) as sink:
            assert sink.is_open
            sink(make_record())

        assert path.read_text(encoding="utf-8") == (
            "2024-Mar-05 14:02:11.123456,0xabc,radio.py:42,ERROR,RADIO,tx underrun\n"
        )

    def test_appends_to_existing_file(self, tmp_path):
        path = tmp_path / "app.log"
        path.write_text("old line\n", encoding="utf-8")

        sink = FileSink(str(path))
        sink(make_record())
        sink.close()

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "old line"
        assert len(lines) == 2

    def test_lines_are_visible_before_close(self, tmp_path):
        path = tmp_path / "app.log"
        sink = FileSink(path)
        sink(make_record())

        assert path.read_text(encoding="utf-8").endswith("tx underrun\n")
        sink.close()

    def test_round_trip(self, tmp_path):
        path = tmp_path / "app.log"
        record = make_record("gain=30, rate=2.4e9")
        with FileSink(path) as sink:
            sink(record)

        parsed = CsvFormatter.parse(path.read_text(encoding="utf-8"))
        assert parsed.timestamp == record.timestamp
        assert parsed.thread_id == record.thread_id
        assert (parsed.file_name, parsed.line) == ("radio.py", 42)
        assert parsed.severity is record.severity
        assert parsed.component == record.component
        assert parsed.message == record.message

    def test_open_failure_leaves_sink_inert(self, tmp_path, capsys):
        # A directory cannot be opened for appending
        sink = FileSink(tmp_path)

        assert not sink.is_open
        assert "Error opening log file" in capsys.readouterr().err

        sink(make_record())
        sink.flush()
        sink.close()
        assert capsys.readouterr().err == ""

    def test_empty_path_is_inert_without_diagnostic(self, capsys):
        sink = FileSink("")
        sink(make_record())

        assert not sink.is_open
        assert capsys.readouterr().err == ""

    def test_close_is_idempotent(self, tmp_path):
        sink = FileSink(tmp_path / "app.log")
        sink.close()
        sink.close()
        assert not sink.is_open
        assert "open=False" in repr(sink)
