"""Smoke tests for the CLI entry point."""

from __future__ import annotations

import json
from pathlib import Path

from columnate import __version__
from columnate.cli.main import _extract_logging_options


def test_stdin_is_columnated(run_columnate) -> None:
    result = run_columnate(["--width", "100"], stdin="a\nbb\nccc\n")

    assert result.returncode == 0, result.stderr
    assert result.stdout == "a   bb  ccc\n"


def test_files_are_concatenated_in_order(run_columnate, tmp_path: Path) -> None:
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    first.write_text("".join(f"r{i:03d}\n" for i in range(5)), encoding="utf-8")
    second.write_text("".join(f"r{i:03d}\n" for i in range(5, 10)), encoding="utf-8")

    result = run_columnate(["-w", "12", str(first), str(second)])

    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == [
        "r000 r005",
        "r001 r006",
        "r002 r007",
        "r003 r008",
        "r004 r009",
    ]


def test_width_comes_from_config_file(run_columnate, tmp_path: Path) -> None:
    (tmp_path / "columnate.toml").write_text("[layout]\nwidth = 12\n", encoding="utf-8")

    result = run_columnate([], stdin="".join(f"r{i:03d}\n" for i in range(10)))

    assert result.returncode == 0, result.stderr
    assert len(result.stdout.splitlines()) == 5


def test_width_comes_from_environment(run_columnate) -> None:
    result = run_columnate([], stdin="a\nbb\nccc\n", env={"COLUMNATE_WIDTH": "3"})

    assert result.returncode == 0, result.stderr
    assert result.stdout == "a\nbb\nccc\n"


def test_empty_stdin_prints_nothing(run_columnate) -> None:
    result = run_columnate([], stdin="")

    assert result.returncode == 0, result.stderr
    assert result.stdout == ""


def test_missing_file_is_an_error(run_columnate) -> None:
    result = run_columnate(["does-not-exist.txt"])

    assert result.returncode == 1
    assert "error: " in result.stderr
    assert "No such file or directory" in result.stderr
    assert "does-not-exist.txt" in result.stderr


def test_directory_argument_is_reported_as_directory(run_columnate, tmp_path: Path) -> None:
    (tmp_path / "inputs").mkdir()

    result = run_columnate(["inputs"])

    assert result.returncode == 1
    assert "error: " in result.stderr
    assert "Is a directory" in result.stderr


def test_invalid_env_width_is_an_error(run_columnate) -> None:
    result = run_columnate([], stdin="a\n", env={"COLUMNATE_WIDTH": "wide"})

    assert result.returncode == 1
    assert "error: Invalid environment override 'COLUMNATE_WIDTH'" in result.stderr


def test_help_mentions_width(run_columnate) -> None:
    result = run_columnate(["--help"])

    assert result.returncode == 0
    assert "--width" in result.stdout


def test_version(run_columnate) -> None:
    result = run_columnate(["--version"])

    assert result.returncode == 0
    assert __version__ in result.stdout


def test_verbose_logs_go_to_stderr(run_columnate) -> None:
    result = run_columnate(["-vv", "--width", "100"], stdin="a\nbb\n")

    assert result.returncode == 0, result.stderr
    assert result.stdout == "a  bb\n"
    assert "layout selected" in result.stderr


def test_log_json_renders_events_as_json(run_columnate) -> None:
    result = run_columnate(["-vv", "--log-json", "--width", "100"], stdin="a\nbb\n")

    assert result.returncode == 0, result.stderr
    assert result.stdout == "a  bb\n"
    events = [
        json.loads(line) for line in result.stderr.splitlines() if line.startswith("{")
    ]
    selected = [event for event in events if event["event"] == "layout selected"]
    assert selected
    assert selected[0]["columns"] == 2
    assert selected[0]["level"] == "debug"


def test_file_named_like_a_flag_after_double_dash(run_columnate, tmp_path: Path) -> None:
    (tmp_path / "-v").write_text("a\nbb\nccc\n", encoding="utf-8")

    result = run_columnate(["--width", "100", "--", "-v"])

    assert result.returncode == 0, result.stderr
    assert result.stdout == "a   bb  ccc\n"


def test_logging_options_are_not_extracted_after_double_dash() -> None:
    cleaned, verbosity, json_mode = _extract_logging_options(
        ["-v", "--log-json", "-w", "9", "--", "-v", "-vv", "--log-json"]
    )

    assert verbosity == 1
    assert json_mode is True
    assert cleaned == ["-w", "9", "--", "-v", "-vv", "--log-json"]
