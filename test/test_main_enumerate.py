import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from combo.main_enumerate import main


class TestMainEnumerate(unittest.TestCase):

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_numbered_listing(self):
        code, out, _ = self._run(["5", "3"])
        self.assertEqual(code, 0)
        lines = out.strip().splitlines()
        self.assertEqual(len(lines), 10)
        self.assertEqual(lines[0], "0: [0, 1, 2]")
        self.assertEqual(lines[5], "5: [0, 3, 4]")
        self.assertEqual(lines[9], "9: [2, 3, 4]")

    def test_limit(self):
        code, out, _ = self._run(["4", "2", "--limit", "2"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip().splitlines(), ["0: [0, 1]", "1: [0, 2]"])

    def test_verbose_prints_config(self):
        code, out, _ = self._run(["4", "2", "--verbose"])
        self.assertEqual(code, 0)
        self.assertIn("[CFG] n=4 k=2 total=6 limit=None", out)

    def test_invalid_length(self):
        code, out, err = self._run(["3", "4"])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("[Error] Combination length longer than sequence (4 > 3)", err)

    def test_progress(self):
        code, out, err = self._run(["4", "2", "--progress"])
        self.assertEqual(code, 0)
        self.assertEqual(len(out.strip().splitlines()), 6)
        self.assertIn("Combinations: 100%", err)
        self.assertIn("6/6", err)

    def test_negative_n(self):
        code, out, err = self._run(["-3", "0"])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("[Error] n must be >= 0", err)

    def test_negative_limit(self):
        code, _, err = self._run(["3", "1", "--limit", "-1"])
        self.assertEqual(code, 2)
        self.assertIn("[Error] limit must be >= 0", err)


if __name__ == "__main__":
    unittest.main()
