from pathlib import Path

import pytest

from tiered_scheduler.cli import DEFAULT_LOG_LEVELS, build_parser, main
from tiered_scheduler.gantt import build_rich_gantt
from tiered_scheduler.models import ScheduledSlice

EXAMPLES = Path(__file__).resolve().parents[1] / "examples"


def test_run_prints_results(capsys):
    assert main(["run", "-w", str(EXAMPLES / "workload_small.csv")]) == 0
    out = capsys.readouterr().out
    assert "Per-process metrics" in out
    assert "Unfinished processes" in out
    assert "2.25" in out


def test_run_cyclic_has_no_unfinished(capsys):
    assert main(["run", "-w", str(EXAMPLES / "workload_small.json"), "--policy", "cyclic"]) == 0
    out = capsys.readouterr().out
    assert "Unfinished processes" not in out


def test_run_with_nothing_completed(tmp_path: Path, capsys):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":3,"priority":10,"arrival_time":0,"burst_time":5}]')
    assert main(["run", "-w", str(p)]) == 0
    assert "No results available" in capsys.readouterr().out


def test_parser_rejects_unknown_policy():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["run", "-w", "x.json", "--policy", "lottery"])


def test_menu_add_run_show_exit(monkeypatch, capsys):
    answers = iter(["1", "1", "1", "100", "0", "2", "3", "4", "6"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["menu"]) == 0
    out = capsys.readouterr().out
    assert "Per-process metrics" in out
    # medium and low tiers were empty, which the menu reports at INFO
    assert "is empty" in out


def test_menu_reports_errors_and_keeps_going(monkeypatch, capsys):
    answers = iter(["2", "missing.txt", "9", "4", "6"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["menu"]) == 0
    out = capsys.readouterr().out
    assert "Unsupported workload format" in out
    assert "Invalid choice" in out
    assert "No results available" in out


def test_log_level_defaults_per_command():
    parser = build_parser()
    assert parser.parse_args(["menu"]).log_level is None
    assert parser.parse_args(["run", "-w", "x.json", "--log-level", "DEBUG"]).log_level == "DEBUG"
    assert DEFAULT_LOG_LEVELS == {"run": "WARNING", "menu": "INFO"}


def test_rich_gantt_time_marks():
    panel, marks = build_rich_gantt(
        [
            ScheduledSlice(pid=1, tier="high", start_time=0, end_time=2, completed=True),
            ScheduledSlice(pid=2, tier="low", start_time=3, end_time=4),
            ScheduledSlice(pid=3, tier="low", start_time=4, end_time=4, completed=True),
        ]
    )
    assert panel.title == "Gantt Chart"
    assert marks == "0 2 3 4"


def test_rich_gantt_without_slices():
    _, marks = build_rich_gantt([])
    assert marks == ""
