import io
import json
import sys

import pytest

from .utils.cli import build_config, main_cli, parse_args


@pytest.fixture
def build_log(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "A.java").write_text("class A {}\n", encoding="utf-8")
    log = tmp_path / "build.log"
    log.write_text(
        "src/A.java:2: missing return statement\n"
        "\t}\n"
        "\t^\n"
        "1 error\n",
        encoding="utf-8",
    )
    return log


def test_parse_args_defaults():
    args = parse_args(["build.log"])
    assert args.file_paths == ["build.log"]
    assert args.output_format == "json"
    assert args.tab_width is None
    assert args.config is None


def test_build_config_overrides_file(tmp_path):
    config_file = tmp_path / "parser.json"
    config_file.write_text(json.dumps({"tab_width": 2, "source_extension": "jav"}))
    args = parse_args(["x.log", "--config", str(config_file), "--tab-width", "8"])
    config = build_config(args)
    assert config.tab_width == 8
    assert config.source_extension == "jav"


def test_main_cli_writes_report(build_log, tmp_path, capsys):
    out_dir = tmp_path / "reports"
    exit_code = main_cli(
        [
            str(build_log),
            "--output-dir",
            str(out_dir),
            "--base-dir",
            str(tmp_path),
            "--tab-width",
            "8",
            "--no-color",
        ]
    )
    assert exit_code == 0

    data = json.loads((out_dir / "javac_output.json").read_text(encoding="utf-8"))
    error = data["messages"][0]
    assert error["severity"] == "error"
    assert error["file"] == "src/A.java"
    assert error["line"] == 2
    # caret sits after one tab: column 8 with --tab-width 8, reported 1-based
    assert error["column"] == 9
    assert "Output saved to" in capsys.readouterr().out


def test_main_cli_rejects_bad_config(tmp_path):
    assert main_cli(["x.log", "--config", str(tmp_path / "absent.json")]) == 1


def test_main_cli_follows_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("error: boom\nall done\n"))
    assert main_cli(["-"]) == 1

    monkeypatch.setattr(sys, "stdin", io.StringIO("all done\n"))
    assert main_cli(["-"]) == 0
