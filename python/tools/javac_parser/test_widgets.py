import csv
import io
import json
import xml.etree.ElementTree as ET

import pytest

from . import parse_javac_file, parse_javac_output
from .core.config import ParserConfig
from .core.data_structures import CompilerMessage, ParsedOutput
from .core.enums import MessageSeverity
from .widgets.formatter import ConsoleFormatterWidget
from .widgets.main_widget import JavacParserWidget, resolve_severities
from .widgets.processor import JavacProcessorWidget
from .writers.factory import WriterFactory

BUILD_LOG = """\
__patterns_start
PARSING_STARTED=[parsing started {0}]
WROTE=[wrote {0}]
__patterns_end
[parsing started RegularFileObject[src/A.java]]
src/A.java:3: warning: [deprecation] old() in A has been deprecated
        old();
        ^
src/A.java:5: cannot find symbol
  Foo f;
  ^
[wrote RegularFileObject[out/A.class]]
1 error
1 warning
"""


@pytest.fixture
def project(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "A.java").write_text("class A {}\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def processor(project):
    return JavacProcessorWidget(ParserConfig(base_dir=project))


@pytest.fixture
def widget(project):
    return JavacParserWidget(ParserConfig(base_dir=project))


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "build.log"
    path.write_text(BUILD_LOG, encoding="utf-8")
    return path


# --- Processor ---


def test_process_string(processor):
    output = processor.process_string(BUILD_LOG)
    assert output.processed_files == ["src/A.java"]
    assert output.generated_files == ["out/A.class"]
    assert [m.severity for m in output.messages] == [
        MessageSeverity.WARNING,
        MessageSeverity.ERROR,
        MessageSeverity.INFO,
        MessageSeverity.INFO,
    ]
    warning = output.warnings[0]
    assert (warning.file, warning.line, warning.column) == ("src/A.java", 3, 9)
    assert warning.message == "[deprecation] old() in A has been deprecated"


def test_process_stream(processor):
    output = processor.process_stream(io.StringIO(BUILD_LOG), source="pipe")
    assert output.source == "pipe"
    assert len(output.errors) == 1


def test_string_and_stream_agree_on_form_feed_excerpt(processor):
    log = "src/A.java:3: ';' expected\n\x0cint x = 1\n   ^\n"
    from_string = processor.process_string(log)
    from_stream = processor.process_stream(io.StringIO(log))

    assert from_string.to_dict()["messages"] == from_stream.to_dict()["messages"]
    error = from_string.errors[0]
    assert error.message == "';' expected"
    assert (error.file, error.line, error.column) == ("src/A.java", 3, 4)


def test_process_file_missing(processor, tmp_path):
    with pytest.raises(FileNotFoundError):
        processor.process_file(tmp_path / "absent.log")


def test_process_files_keeps_input_order_and_skips_failures(processor, tmp_path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    first.write_text("error: first\n", encoding="utf-8")
    second.write_text("error: second\n", encoding="utf-8")

    outputs = processor.process_files(
        [second, tmp_path / "absent.log", first], concurrency=3
    )
    assert [o.source for o in outputs] == [str(second), str(first)]


def test_filter_messages(processor):
    output = processor.process_string(BUILD_LOG)

    errors = processor.filter_messages(output, severities=[MessageSeverity.ERROR])
    assert [m.message for m in errors.messages] == ["cannot find symbol"]
    assert errors.processed_files == output.processed_files

    located = processor.filter_messages(output, file_pattern=r"^src/")
    assert len(located.messages) == 2

    assert processor.filter_messages(output) is output


def test_combine_and_statistics(processor):
    first = processor.process_string(BUILD_LOG, source="a")
    second = processor.process_string("error: boom", source="b")

    combined = processor.combine_outputs([first, second])
    assert combined.source == "a, b"
    assert len(combined.errors) == 2
    assert processor.combine_outputs([]) is None

    stats = processor.generate_statistics([first, second])
    assert stats["total_files"] == 2
    assert stats["total_messages"] == 5
    assert stats["by_severity"] == {"error": 2, "warning": 1, "info": 2}
    assert stats["files_with_errors"] == 2
    assert stats["files_processed"] == 1
    assert stats["files_generated"] == 1


# --- Main widget ---


def test_resolve_severities():
    assert resolve_severities(None) is None
    assert resolve_severities(["error", MessageSeverity.INFO]) == [
        MessageSeverity.ERROR,
        MessageSeverity.INFO,
    ]
    with pytest.raises(ValueError, match="errors"):
        resolve_severities(["errors"])


def test_parse_from_string_with_filter(widget):
    output = widget.parse_from_string(BUILD_LOG, filter_severities=["warning"])
    assert len(output.messages) == 1


def test_parse_from_files_combined(widget, log_file):
    output = widget.parse_from_files([log_file, log_file], concurrency=2)
    assert isinstance(output, ParsedOutput)
    assert len(output.errors) == 2


def test_process_and_export(widget, log_file, tmp_path, capsys):
    report = tmp_path / "report.json"
    result = widget.process_and_export(
        [log_file], "json", report, display_stats=True
    )
    data = json.loads(report.read_text(encoding="utf-8"))
    assert len(data["messages"]) == len(result.messages) == 4
    assert data["generated_files"] == ["out/A.class"]
    assert "Statistics:" in capsys.readouterr().out


def test_process_and_export_without_usable_input(widget, tmp_path):
    with pytest.raises(ValueError):
        widget.process_and_export([tmp_path / "absent.log"], "json", tmp_path / "r.json")


def test_module_level_helpers(project, log_file, monkeypatch):
    monkeypatch.chdir(project)
    data = parse_javac_output(BUILD_LOG, filter_severities=["error"])
    assert [m["message"] for m in data["messages"]] == ["cannot find symbol"]

    data = parse_javac_file(str(log_file), tab_width=2)
    assert data["messages"][0]["column"] == 9

    with pytest.raises(ValueError):
        parse_javac_output(BUILD_LOG, filter_severities=["errors"])


# --- Writers ---


@pytest.fixture
def parsed_output():
    output = ParsedOutput(source="build.log", generated_files=["out/A.class"])
    output.add_message(
        CompilerMessage("broken", MessageSeverity.ERROR, "src/A.java", 3, 5)
    )
    output.add_message(CompilerMessage("1 error", MessageSeverity.INFO))
    return output


def test_supported_formats():
    assert WriterFactory.supported_formats() == ["json", "csv", "xml"]
    with pytest.raises(ValueError):
        WriterFactory.create_writer("yaml")


def test_csv_writer(parsed_output, tmp_path):
    path = tmp_path / "report.csv"
    WriterFactory.create_writer("csv").write(parsed_output, path)
    with path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["file"] == "src/A.java"
    assert rows[0]["column"] == "5"
    assert rows[1]["file"] == ""
    assert rows[1]["source"] == "build.log"


def test_xml_writer(parsed_output, tmp_path):
    path = tmp_path / "report.xml"
    WriterFactory.create_writer("xml").write(parsed_output, path)
    root = ET.parse(path).getroot()
    assert root.findtext("Metadata/MessageCount") == "2"
    assert root.findtext("Messages/Message/line") == "3"
    assert root.findtext("Files/Generated") == "out/A.class"


def test_xml_writer_drops_color_and_control_characters(processor, tmp_path):
    output = processor.process_string(
        "\x1b[31mBUILD FAILED\x1b[0m\nstep\x0c done\x00\n", source="ci.log"
    )
    path = tmp_path / "report.xml"
    WriterFactory.create_writer("xml").write(output, path)

    root = ET.parse(path).getroot()
    assert [m.findtext("message") for m in root.iter("Message")] == [
        "BUILD FAILED",
        "step done",
    ]


# --- Formatter ---


def test_formatter_plain_output(parsed_output):
    formatter = ConsoleFormatterWidget()
    text = formatter.get_formatted_output(parsed_output)
    assert "Errors: 1" in text
    assert "ERROR: src/A.java:3:5 - broken" in text
    assert "INFO: 1 error" in text


def test_formatter_colorized_output(parsed_output, capsys):
    ConsoleFormatterWidget().colorize_output(parsed_output)
    out = capsys.readouterr().out
    assert "broken" in out
    assert "Messages:" in out
