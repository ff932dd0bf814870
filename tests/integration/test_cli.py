"""End-to-end runs through the command-line entry point."""

from __future__ import annotations

import io

import pandas as pd
import pytest

from airportsim.cli import main

SAME_QUEUE_OVERFLOW = "3\n0 1 departing 1\n0 2 departing 2\n0 3 departing 3\n"

MIXED = """8
0 1 departing 3
0 2 arriving 1
0 3 arriving 1
1 4 departing 0
3 5 arriving 2
3 6 departing 2
7 7 arriving 0
7 8 departing 0
"""


@pytest.fixture
def input_file(tmp_path):
    def _write(text: str):
        path = tmp_path / "input.txt"
        path.write_text(text)
        return str(path)

    return _write


class TestCliOutput:
    def test_one_departure_one_arrival(self, input_file, capsys):
        code = main([input_file("2\n0 1 departing 5\n0 2 arriving 5\n")])

        assert code == 0
        assert capsys.readouterr().out == (
            "Time step 0\n"
            "\tEntering simulation\n"
            "\t\t0 1 departing 5\n"
            "\t\t0 2 arriving 5\n"
            "\tRunway A\n"
            "\t\t0 1 departing 5\n"
            "\tRunway B\n"
            "\t\t0 2 arriving 5\n"
        )

    def test_reads_stdin_by_default(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(SAME_QUEUE_OVERFLOW))

        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.count("Time step") == 2
        assert out.endswith("Time step 1\n\tEntering simulation\n\tRunway A\n\t\t0 3 departing 3\n\tRunway B\n")

    def test_mixed_schedule(self, input_file, capsys):
        assert main([input_file(MIXED)]) == 0

        out = capsys.readouterr().out
        # Both queues are empty after tick 1, so ticks 2 and 4-6 are idle.
        headers = [line for line in out.splitlines() if line.startswith("Time step")]
        assert headers == ["Time step 0", "Time step 1", "Time step 3", "Time step 7"]

        blocks = out.split("Time step ")[1:]
        # Tick 0: both queues -> A=1, B=2 (3 waits)
        assert "\tRunway A\n\t\t0 1 departing 3\n\tRunway B\n\t\t0 2 arriving 1\n" in blocks[0]
        # Tick 1: departure 4 and the waiting arrival 3
        assert "\tRunway A\n\t\t1 4 departing 0\n\tRunway B\n\t\t0 3 arriving 1\n" in blocks[1]
        assert "\tRunway A\n\t\t3 6 departing 2\n\tRunway B\n\t\t3 5 arriving 2\n" in blocks[2]
        # Tick 7: equal priority, one per runway
        assert "\tRunway A\n\t\t7 8 departing 0\n\tRunway B\n\t\t7 7 arriving 0\n" in blocks[3]

    def test_output_file(self, input_file, tmp_path, capsys):
        out_path = tmp_path / "out.txt"

        assert main([input_file(SAME_QUEUE_OVERFLOW), "--output", str(out_path)]) == 0
        assert capsys.readouterr().out == ""
        assert out_path.read_text().startswith("Time step 0\n")


class TestCliExtras:
    def test_summary_goes_to_stderr(self, input_file, capsys):
        assert main([input_file(SAME_QUEUE_OVERFLOW), "--summary"]) == 0

        err = capsys.readouterr().err
        assert "Simulation Summary" in err
        assert "3 admitted, 3 allocated" in err

    def test_csv_export(self, input_file, tmp_path):
        csv_path = tmp_path / "ticks.csv"

        assert main([input_file(SAME_QUEUE_OVERFLOW), "--csv", str(csv_path)]) == 0

        text = csv_path.read_text()
        assert "0,3,1,2,1,0" in text
        assert "2.0" not in text

        df = pd.read_csv(csv_path, dtype={"runway_a": "Int64", "runway_b": "Int64"})
        assert list(df["tick"]) == [0, 1]
        assert list(df["runway_a"]) == [1, 3]
        assert df["runway_b"].iloc[0] == 2
        assert pd.isna(df["runway_b"].iloc[1])

    def test_plot(self, input_file, test_output_dir):
        png = test_output_dir / "queue_depths.png"

        assert main([input_file(MIXED), "--plot", str(png)]) == 0
        assert png.exists()
        assert png.stat().st_size > 0

    def test_log_level_flag(self, input_file, capsys):
        assert main([input_file(SAME_QUEUE_OVERFLOW), "--log-level", "DEBUG"]) == 0

        assert "Tick 0: admitted 3" in capsys.readouterr().err

    def test_quiet_overrides_environment(self, input_file, monkeypatch, capsys):
        monkeypatch.setenv("AIRPORTSIM_LOGGING", "DEBUG")

        assert main([input_file(SAME_QUEUE_OVERFLOW), "--quiet"]) == 0

        captured = capsys.readouterr()
        assert captured.err == ""
        assert captured.out.startswith("Time step 0\n")

    def test_quiet_and_log_level_are_exclusive(self, input_file):
        with pytest.raises(SystemExit) as exc_info:
            main([input_file(SAME_QUEUE_OVERFLOW), "--quiet", "--log-level", "INFO"])

        assert exc_info.value.code == 2


class TestCliErrors:
    def test_malformed_input_exits_1(self, input_file, capsys):
        code = main([input_file("2\n0 1 departing 5\n0 2 landing 5\n")])

        assert code == 1
        captured = capsys.readouterr()
        assert captured.err.startswith("error: record 1: heading")
        assert captured.out == ""

    def test_missing_file_is_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "nope.txt")])

        assert exc_info.value.code == 2

    def test_malformed_input_leaves_existing_output_untouched(self, input_file, tmp_path):
        out_path = tmp_path / "results.txt"
        out_path.write_text("previous run\n")

        code = main([input_file("1\n0 1 departing\n"), "--output", str(out_path)])

        assert code == 1
        assert out_path.read_text() == "previous run\n"

    def test_unwritable_output_exits_1(self, input_file, tmp_path, capsys):
        code = main([input_file(SAME_QUEUE_OVERFLOW), "--output", str(tmp_path)])

        assert code == 1
        assert capsys.readouterr().err.startswith("error: cannot write output")
