from __future__ import annotations

import datetime as dt
import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from terminder import cli

BASE = 1893456000  # 2030-01-01T00:00:00Z


class TestCliContract(unittest.TestCase):
    def _main(self, argv, inputs):
        it = iter(inputs)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        out, err = io.StringIO(), io.StringIO()
        with patch("builtins.input", side_effect=fake_input), redirect_stdout(out), redirect_stderr(err):
            rc = cli.main(argv)
        return rc, out.getvalue(), err.getvalue()

    def test_session_saves_on_quit(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "a.txt"
            p.write_text(f"kept|{BASE};\n", encoding="utf-8")
            rc, out, _ = self._main(
                ["--file", str(p), "--tz", "UTC"],
                ["4", "new", "02.01.2030", "8"],
            )
            self.assertEqual(rc, 0)
            self.assertEqual(p.read_text(encoding="utf-8"), f"kept|{BASE};\nnew|{BASE + 86400};\n")
        self.assertIn("See you soon!", out)

    def test_no_save_leaves_file_alone(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "a.txt"
            rc, _, _ = self._main(["--file", str(p), "--tz", "UTC", "--no-save"], ["4", "x", "01.01.2030", "8"])
            self.assertEqual(rc, 0)
            self.assertFalse(p.exists())

    def test_file_defaults_from_env(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "env.txt"
            with patch.dict(os.environ, {"TERMINDER_FILE": str(p), "TERMINDER_TZ": "UTC"}):
                rc, _, _ = self._main([], ["8"])
            self.assertEqual(rc, 0)
            self.assertTrue(p.exists())
            self.assertEqual(p.read_text(encoding="utf-8"), "")

    def test_unwritable_destination_exits_1(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "no-such-dir" / "a.txt"
            rc, _, err = self._main(["--file", str(p), "--tz", "UTC"], ["8"])
        self.assertEqual(rc, 1)
        self.assertIn("[terminder] ERROR:", err)

    def test_malformed_file_exits_2(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "bad.txt"
            p.write_text("garbage\n", encoding="utf-8")
            rc, out, err = self._main(["--file", str(p)], ["8"])
            self.assertEqual(p.read_text(encoding="utf-8"), "garbage\n")
        self.assertEqual(rc, 2)
        self.assertIn(":1:", err)
        self.assertNotIn("Terminder - Version", out)

    def test_invalid_tz_reports_user_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--tz", "No/Such_Zone", "--no-save"])
        self.assertIn("Invalid --tz value", str(ctx.exception))


    def test_unreadable_file_exits_2(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            rc, out, err = self._main(["--file", td, "--tz", "UTC"], ["8"])
        self.assertEqual(rc, 2)
        self.assertIn("[terminder] ERROR:", err)
        self.assertNotIn("Terminder - Version", out)

    def test_non_utf8_file_exits_2_and_is_untouched(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "bin.txt"
            p.write_bytes(b"\xff\xfe|1893456000;\n")
            rc, _, err = self._main(["--file", str(p), "--tz", "UTC"], ["8"])
            self.assertEqual(p.read_bytes(), b"\xff\xfe|1893456000;\n")
        self.assertEqual(rc, 2)
        self.assertIn("not valid UTF-8", err)

    def test_today_entry_kept_across_sessions_east_of_utc(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "a.txt"
            with patch("terminder.shell.today_date", return_value=dt.date(2026, 10, 19)):
                today = "19.10.2026"
                now = dt.datetime(2026, 10, 19, 12, 0, tzinfo=dt.timezone.utc).timestamp()
                with patch("time.time", return_value=now):
                    rc1, _, _ = self._main(["--file", str(p), "--tz", "+02:00"], ["4", "standup", today, "8"])
                    rc2, out, _ = self._main(["--file", str(p), "--tz", "+02:00"], ["1", "8"])
        self.assertEqual((rc1, rc2), (0, 0))
        self.assertIn("Appointment: standup\nDue on: 19.10.2026", out)


if __name__ == "__main__":
    unittest.main(verbosity=2)
