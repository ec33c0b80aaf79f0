"""
Tests for TeeOutput and debug logging.
"""

import io
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

from tryout.core.logging import TeeOutput, debug_log, get_log_path


class TestTeeOutput:
    """Tests for TeeOutput filtering."""

    def _tee(self, tmp_path):
        stream = io.StringIO()
        log_path = tmp_path / "session.log"
        return TeeOutput(log_path, stream=stream, version="1.2.3"), stream, log_path

    def test_writes_to_stream_and_log(self, tmp_path):
        tee, stream, log_path = self._tee(tmp_path)
        tee.write("Cloning repo\n")
        tee.close()

        assert stream.getvalue() == "Cloning repo\n"
        log = log_path.read_text()
        assert "Session started" in log
        assert "v1.2.3" in log
        assert "Cloning repo" in log

    def test_ansi_stripped_in_log(self, tmp_path):
        tee, stream, log_path = self._tee(tmp_path)
        tee.write("\x1b[1merror: boom\x1b[0m\n")
        tee.close()

        assert "\x1b[" in stream.getvalue()
        assert "\x1b[" not in log_path.read_text()
        assert "error: boom" in log_path.read_text()

    def test_ui_noise_skipped(self, tmp_path):
        tee, _, log_path = self._tee(tmp_path)
        tee.write(" → 📁 2025-01-01-x\n")
        tee.write("enter select · ctrl+d delete · esc quit\n")
        tee.close()

        log = log_path.read_text()
        assert "2025-01-01-x" not in log
        assert "ctrl+d" not in log

    def test_partial_line_flushed_on_close(self, tmp_path):
        tee, _, log_path = self._tee(tmp_path)
        tee.write("no newline")
        tee.close()
        assert "no newline" in log_path.read_text()

    def test_log_only(self, tmp_path):
        tee, stream, log_path = self._tee(tmp_path)
        tee.log_only("SESSION | hidden")
        tee.close()
        assert stream.getvalue() == ""
        assert "SESSION | hidden" in log_path.read_text()


class TestDebugLog:
    def test_routes_through_tee(self, tmp_path):
        tee = TeeOutput(tmp_path / "x.log", stream=io.StringIO())
        with patch.object(sys, "stderr", tee):
            debug_log("CATALOG | loaded=3")
        tee.close()
        assert "CATALOG | loaded=3" in (tmp_path / "x.log").read_text()

    def test_noop_without_tee(self):
        debug_log("nothing happens")

    def test_daily_log_path(self):
        assert get_log_path(Path("/logs"), datetime(2025, 3, 14)) == Path("/logs/2025-03-14.log")
