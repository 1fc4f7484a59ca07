import os
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def run_shuf(args, stdin: bytes = b"") -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONIOENCODING"] = "utf-8"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
    env.pop("SHUF_METRICS_LOG", None)
    return subprocess.run(
        [sys.executable, "-m", "shuf", *args],
        input=stdin,
        capture_output=True,
        env=env,
        cwd=PROJECT_ROOT,
        timeout=60,
    )


class UndecodableBytesTests(unittest.TestCase):
    def test_stdin_bytes_reach_stdout_unchanged(self):
        result = run_shuf([], stdin=b"a\xff\nb\n")

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(sorted(result.stdout.split(b"\n")), [b"", b"a\xff", b"b"])

    def test_file_bytes_reach_stdout_unchanged(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "input.bin"
            path.write_bytes(b"x\xfe\ny\n")

            result = run_shuf([str(path)])

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(sorted(result.stdout.split(b"\n")), [b"", b"x\xfe", b"y"])

    def test_stdin_carriage_return_stays_in_line(self):
        result = run_shuf(["-z"], stdin=b"a\r\n")

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, b"a\r\0")
