from __future__ import annotations

import io
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from terminder.tools import ci


class TestCiToolContract(unittest.TestCase):
    def test_steps_cover_compileall_and_unittest(self) -> None:
        repo = Path("/repo")
        labels = [label for label, _ in ci.build_steps(repo, skip_compileall=False, skip_tests=False)]
        self.assertEqual(labels, ["compileall", "unittest"])
        self.assertEqual(ci.build_steps(repo, skip_compileall=True, skip_tests=True), [])

    def test_no_steps_is_ok(self) -> None:
        buf = io.StringIO()
        with redirect_stdout(buf):
            rc = ci.main(["--skip-compileall", "--skip-tests"])
        self.assertEqual(rc, 0)
        self.assertIn("[terminder-ci] RESULT: OK", buf.getvalue())

    def test_fmt_ms(self) -> None:
        self.assertEqual(ci._fmt_ms(250), "250ms")
        self.assertEqual(ci._fmt_ms(1500), "1.50s")
        self.assertEqual(ci._fmt_ms(61000), "1m01.0s")


if __name__ == "__main__":
    unittest.main(verbosity=2)
