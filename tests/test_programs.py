"""
End-to-end tests for the control-flow example programs.

Each program is run in a fresh interpreter and its stdout is compared with
the catalog transcript.
"""

import re
import subprocess
import sys

import pytest

from flow_check import PROGRAMS, find_programs, match_transcript


def run_script(path):
    completed = subprocess.run(
        [sys.executable, path], capture_output=True, text=True, timeout=30
    )
    assert completed.returncode == 0, completed.stderr
    return completed.stdout


@pytest.mark.parametrize("program", PROGRAMS, ids=lambda p: p["name"])
def test_program_matches_transcript(program):
    stdout = run_script(program["path"])
    assert match_transcript(program["expected"], stdout) == []


class TestForLoops:
    """Spot checks on the for-loop transcript."""

    def setup_method(self):
        self.lines = run_script(find_programs(["for_loops"])[0]["path"]).splitlines()

    def test_counts_up_then_down(self):
        assert self.lines[:5] == [f"Count: {i}" for i in range(1, 6)]
        assert self.lines[8:13] == [f"Reverse count: {i}" for i in range(5, 0, -1)]

    def test_separator_is_padded_with_blank_lines(self):
        assert self.lines[5:8] == ["", "--- Next Example ---", ""]

    def test_triangle_keeps_trailing_spaces(self):
        start = self.lines.index("* ")
        assert self.lines[start:start + 5] == ["* ", "* * ", "* * * ", "* * * * ", "* * * * * "]

    def test_unbounded_loop_reports_positive_count(self):
        reached = [line for line in self.lines if line.startswith("Count reached: ")]
        assert len(reached) == 1
        assert int(reached[0].split(": ")[1]) > 0

    def test_counters_move_in_opposite_directions(self):
        assert self.lines[-5:] == [
            "i = 1, j = 10",
            "i = 2, j = 9",
            "i = 3, j = 8",
            "i = 4, j = 7",
            "i = 5, j = 6",
        ]


class TestIfStatements:
    """Spot checks on the conditional transcript."""

    def setup_method(self):
        stdout = run_script(find_programs(["if_statements"])[0]["path"])
        self.lines = [line for line in stdout.splitlines() if line and not line.startswith("---")]

    def test_branch_outcomes_in_order(self):
        assert self.lines == [
            "Number is positive",
            "You are an adult",
            "Grade: C",
            "You can drive",
            "No work today!",
            "The maximum value is: 10",
            "Wednesday",
        ]

    def test_six_separators(self):
        stdout = run_script(find_programs(["if_statements"])[0]["path"])
        assert len(re.findall(r"^--- Next Example ---$", stdout, re.MULTILINE)) == 6
