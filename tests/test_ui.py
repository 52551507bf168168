"""
Tests for terminal rendering and the progress display.
"""

import pytest

from weakrsa.cli import _display_progress_loop
from weakrsa.ui import box, trim


def test_box_frames_rows():
    out = box("SUMMARY", ["fermat | OK", "cycling | NO"]).splitlines()
    assert len(out) == 6
    assert len({len(l) for l in out}) == 1
    assert "SUMMARY" in out[1]
    assert out[3].startswith("║ fermat | OK")


def test_box_trims_wide_rows():
    wide = "параллельными мостами " * 10
    out = box("ATTACK SUMMARY", [wide, "short"], max_width=60).splitlines()
    assert all(len(l) <= 60 for l in out)
    assert out[3].rstrip(" ║").endswith("...")
    assert "short" in out[4]


def test_trim_collapses_whitespace():
    assert trim("a\n  b") == "a b"
    assert trim("x" * 50, limit=10) == "x" * 10 + "..."


class _InterruptedThread:
    """Stands in for a running attack thread when the user presses Ctrl+C."""

    def is_alive(self):
        return True

    def join(self, timeout=None):
        raise KeyboardInterrupt


def test_progress_line_cleared_on_ctrl_c(capsys):
    with pytest.raises(KeyboardInterrupt):
        _display_progress_loop("cycling", 5.0, _InterruptedThread())
    out = capsys.readouterr().out
    assert out.endswith("\r" + " " * 72 + "\r")
